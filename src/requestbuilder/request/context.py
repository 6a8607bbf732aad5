"""
=============================================================================
SERVLET CONTEXT STUB
=============================================================================

Fail-fast stand-in for the web container's context object.

A built request needs *some* context to hand out (sessions hold one, and
get_servlet_context() must return something). Only MIME type lookup has a
meaningful in-memory answer; everything else raises
UnsupportedOperationError so a test never silently depends on container
behaviour that is not there.

To give a request a real context, supply one with
RequestBuilder.use_servlet_context_from().

=============================================================================
"""

from ..errors import UnsupportedOperationError


class ServletContext:
    """Context stub: get_mime_type() works, everything else raises."""

    MIME_TYPE = "application/octet-stream"

    def get_mime_type(self, file: str) -> str:
        """Every file is reported as opaque binary content."""
        return self.MIME_TYPE

    # =========================================================================
    # ATTRIBUTES AND PARAMETERS
    # =========================================================================

    def get_attribute(self, name):
        raise UnsupportedOperationError("get_attribute")

    def get_attribute_names(self):
        raise UnsupportedOperationError("get_attribute_names")

    def set_attribute(self, name, value):
        raise UnsupportedOperationError("set_attribute")

    def remove_attribute(self, name):
        raise UnsupportedOperationError("remove_attribute")

    def get_init_parameter(self, name):
        raise UnsupportedOperationError("get_init_parameter")

    def get_init_parameter_names(self):
        raise UnsupportedOperationError("get_init_parameter_names")

    def set_init_parameter(self, name, value):
        raise UnsupportedOperationError("set_init_parameter")

    # =========================================================================
    # CONTAINER IDENTITY
    # =========================================================================

    def get_context(self, uri_path):
        raise UnsupportedOperationError("get_context")

    def get_context_path(self):
        raise UnsupportedOperationError("get_context_path")

    def get_major_version(self):
        raise UnsupportedOperationError("get_major_version")

    def get_minor_version(self):
        raise UnsupportedOperationError("get_minor_version")

    def get_effective_major_version(self):
        raise UnsupportedOperationError("get_effective_major_version")

    def get_effective_minor_version(self):
        raise UnsupportedOperationError("get_effective_minor_version")

    def get_server_info(self):
        raise UnsupportedOperationError("get_server_info")

    def get_servlet_context_name(self):
        raise UnsupportedOperationError("get_servlet_context_name")

    def get_virtual_server_name(self):
        raise UnsupportedOperationError("get_virtual_server_name")

    def get_class_loader(self):
        raise UnsupportedOperationError("get_class_loader")

    # =========================================================================
    # DISPATCH AND RESOURCES
    # =========================================================================

    def get_named_dispatcher(self, name):
        raise UnsupportedOperationError("get_named_dispatcher")

    def get_request_dispatcher(self, path):
        raise UnsupportedOperationError("get_request_dispatcher")

    def get_real_path(self, path):
        raise UnsupportedOperationError("get_real_path")

    def get_resource(self, path):
        raise UnsupportedOperationError("get_resource")

    def get_resource_as_stream(self, path):
        raise UnsupportedOperationError("get_resource_as_stream")

    def get_resource_paths(self, path):
        raise UnsupportedOperationError("get_resource_paths")

    def log(self, message, error=None):
        raise UnsupportedOperationError("log")

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def add_servlet(self, servlet_name, servlet):
        raise UnsupportedOperationError("add_servlet")

    def add_jsp_file(self, servlet_name, jsp_file):
        raise UnsupportedOperationError("add_jsp_file")

    def create_servlet(self, cls):
        raise UnsupportedOperationError("create_servlet")

    def get_servlet_registration(self, servlet_name):
        raise UnsupportedOperationError("get_servlet_registration")

    def get_servlet_registrations(self):
        raise UnsupportedOperationError("get_servlet_registrations")

    def add_filter(self, filter_name, filter):
        raise UnsupportedOperationError("add_filter")

    def create_filter(self, cls):
        raise UnsupportedOperationError("create_filter")

    def get_filter_registration(self, filter_name):
        raise UnsupportedOperationError("get_filter_registration")

    def get_filter_registrations(self):
        raise UnsupportedOperationError("get_filter_registrations")

    def add_listener(self, listener):
        raise UnsupportedOperationError("add_listener")

    def create_listener(self, cls):
        raise UnsupportedOperationError("create_listener")

    def declare_roles(self, *role_names):
        raise UnsupportedOperationError("declare_roles")

    def get_jsp_config_descriptor(self):
        raise UnsupportedOperationError("get_jsp_config_descriptor")

    # =========================================================================
    # SESSIONS AND ENCODINGS
    # =========================================================================

    def get_session_cookie_config(self):
        raise UnsupportedOperationError("get_session_cookie_config")

    def set_session_tracking_modes(self, modes):
        raise UnsupportedOperationError("set_session_tracking_modes")

    def get_default_session_tracking_modes(self):
        raise UnsupportedOperationError("get_default_session_tracking_modes")

    def get_effective_session_tracking_modes(self):
        raise UnsupportedOperationError("get_effective_session_tracking_modes")

    def get_session_timeout(self):
        raise UnsupportedOperationError("get_session_timeout")

    def set_session_timeout(self, timeout):
        raise UnsupportedOperationError("set_session_timeout")

    def get_request_character_encoding(self):
        raise UnsupportedOperationError("get_request_character_encoding")

    def set_request_character_encoding(self, encoding):
        raise UnsupportedOperationError("set_request_character_encoding")

    def get_response_character_encoding(self):
        raise UnsupportedOperationError("get_response_character_encoding")

    def set_response_character_encoding(self, encoding):
        raise UnsupportedOperationError("set_response_character_encoding")
