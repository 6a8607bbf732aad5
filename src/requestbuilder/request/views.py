"""
=============================================================================
REQUEST VIEWS
=============================================================================

Read projections over a built RequestConfiguration, one per interface
generation.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │                     ┌──────────────────────┐                        │
    │                     │ RequestConfiguration │  (locked, shared)      │
    │                     └──────────┬───────────┘                        │
    │                                │                                     │
    │                      ┌─────────┴─────────┐                          │
    │                      │   _RequestView    │  all shared behaviour    │
    │                      └─────────┬─────────┘                          │
    │                   ┌────────────┴────────────┐                       │
    │            ┌──────┴───────┐          ┌──────┴──────┐                │
    │            │ LegacyRequest│          │   Request   │                │
    │            │ get_real_path│          │ get_request_│                │
    │            └──────────────┘          │ id, ...     │                │
    │                                      └─────────────┘                │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
DELEGATION
=============================================================================

Four concerns can be handed to an external object by the builder:

    attributes         use_attributes_from()          get/set/remove_attribute
    session            use_session_from()             get_session()
    servlet context    use_servlet_context_from()     servlet_context
    dispatcher         use_request_dispatcher_from()  get_request_dispatcher()

Every accessor for those concerns checks for a delegate first and falls
back to local state only when none is installed.

=============================================================================
BODY ACCESS
=============================================================================

The body can be read as bytes (get_input_stream) or as text (get_reader),
never both. The first accessor used latches BodyAccess; calling the other
one afterwards raises IllegalStateError. Calling the same accessor again
is allowed and returns a fresh stream positioned at the start.

=============================================================================
"""

import io
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from ..errors import IllegalStateError, UnsupportedOperationError
from ..http.cookies import Cookie
from .builder import BodyAccess, RequestConfiguration, join_content_type, resolve_progress_tracker
from .parameters import RequestParameter, RequestParameterMap
from .path_info import RequestPathInfo
from .session import HttpSession
from .tracker import RequestProgressTracker


_EMPTY_RESOURCE_BUNDLE: Mapping[str, Any] = MappingProxyType({})

_DEFAULT_PORTS = {"http": 80, "https": 443}


class _RequestView:
    """Behaviour shared by both request generations."""

    def __init__(self, configuration: RequestConfiguration):
        self._conf = configuration

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._conf.method} {self.get_request_uri()}>"

    # =========================================================================
    # RESOURCE AND PATH
    # =========================================================================

    @property
    def resource(self):
        return self._conf.resource

    @property
    def resource_resolver(self):
        return getattr(self._conf.resource, "resource_resolver", None)

    @property
    def request_path_info(self) -> RequestPathInfo:
        return self._conf.request_path_info

    @property
    def method(self) -> str:
        return self._conf.method

    @property
    def path_info(self) -> str:
        return self._conf.path_info

    @property
    def query_string(self) -> Optional[str]:
        return self._conf.query_string

    @property
    def context_path(self) -> str:
        return self._conf.config.context_path

    @property
    def servlet_path(self) -> str:
        return self._conf.config.servlet_path

    @property
    def scheme(self) -> str:
        return self._conf.config.scheme

    @property
    def server_name(self) -> str:
        return self._conf.config.server_name

    @property
    def server_port(self) -> int:
        return self._conf.config.server_port

    @property
    def is_secure(self) -> bool:
        return self.scheme == "https"

    def get_request_uri(self) -> str:
        """Context path + servlet path + path info."""
        return self.context_path + self.servlet_path + self.path_info

    def get_request_url(self) -> str:
        """
        Full request URL.

        The port is left out when it is the scheme's implicit default:

            http://localhost/content/page          (http, 80)
            https://localhost:8443/content/page    (https, 8443)
        """
        url = f"{self.scheme}://{self.server_name}"
        if self.server_port != _DEFAULT_PORTS.get(self.scheme):
            url += f":{self.server_port}"
        return url + self.get_request_uri()

    # =========================================================================
    # CONNECTION FACTS
    # =========================================================================

    @property
    def locale(self) -> str:
        return self._conf.config.locale

    @property
    def locales(self) -> List[str]:
        return [self.locale]

    @property
    def auth_type(self) -> Optional[str]:
        return self._conf.auth_type

    @property
    def remote_user(self) -> Optional[str]:
        return self._conf.remote_user

    @property
    def remote_addr(self) -> Optional[str]:
        return self._conf.remote_addr

    @property
    def remote_host(self) -> Optional[str]:
        return self._conf.remote_host

    @property
    def remote_port(self) -> int:
        return self._conf.remote_port

    @property
    def response_content_type(self) -> Optional[str]:
        return self._conf.response_content_type

    @property
    def response_content_types(self) -> List[Optional[str]]:
        return [self._conf.response_content_type]

    # =========================================================================
    # SESSION AND CONTEXT
    # =========================================================================

    @property
    def servlet_context(self):
        return self._conf.servlet_context

    def get_session(self, create: bool = True) -> Optional[HttpSession]:
        """
        Return the request's session.

        With a session delegate installed, the call is forwarded every time
        and nothing is cached locally. Otherwise a session stub is created
        on the first call with ``create=True`` and reused afterwards.
        """
        conf = self._conf
        if conf.session_provider is not None:
            return conf.session_provider.get_session(create)
        if conf.session is None and create:
            conf.session = HttpSession(
                conf.servlet_context,
                conf.config.session_max_inactive_interval,
            )
        return conf.session

    # =========================================================================
    # ATTRIBUTES
    # =========================================================================

    def get_attribute(self, name: str) -> Optional[Any]:
        provider = self._conf.attributes_provider
        if provider is not None:
            return provider.get_attribute(name)
        return self._conf.attributes.get(name)

    def get_attribute_names(self) -> List[str]:
        provider = self._conf.attributes_provider
        if provider is not None:
            return list(provider.get_attribute_names())
        return list(self._conf.attributes)

    def set_attribute(self, name: str, value: Any) -> None:
        provider = self._conf.attributes_provider
        if provider is not None:
            provider.set_attribute(name, value)
        else:
            self._conf.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        provider = self._conf.attributes_provider
        if provider is not None:
            provider.remove_attribute(name)
        else:
            self._conf.attributes.pop(name, None)

    @property
    def request_progress_tracker(self) -> RequestProgressTracker:
        return resolve_progress_tracker(self._conf, self.get_attribute)

    # =========================================================================
    # PARAMETERS
    # =========================================================================

    def get_parameter(self, name: str) -> Optional[str]:
        """First value of ``name``, or None."""
        values = self._conf.parameters.get(name)
        return values[0] if values else None

    @property
    def parameter_map(self) -> Mapping[str, Optional[Tuple[Optional[str], ...]]]:
        """Read-only live view of the parameter table."""
        return MappingProxyType(self._conf.parameters)

    def get_parameter_names(self) -> List[str]:
        return list(self._conf.parameters)

    def get_parameter_values(self, name: str) -> Optional[Tuple[Optional[str], ...]]:
        return self._conf.parameters.get(name)

    @property
    def request_parameter_map(self) -> RequestParameterMap:
        """Typed parameters, created on first access."""
        conf = self._conf
        if conf.request_parameter_map is None:
            conf.request_parameter_map = RequestParameterMap({
                name: [RequestParameter(name, value) for value in values if value is not None]
                for name, values in conf.parameters.items()
                if values is not None
            })
        return conf.request_parameter_map

    def get_request_parameter(self, name: str) -> Optional[RequestParameter]:
        return self.request_parameter_map.get_value(name)

    def get_request_parameters(self, name: str) -> Optional[Tuple[RequestParameter, ...]]:
        return self.request_parameter_map.get_values(name)

    def get_request_parameter_list(self) -> List[RequestParameter]:
        return [param for params in self.request_parameter_map.values() for param in params]

    def get_parts(self) -> list:
        return []

    def get_part(self, name: str):
        return None

    # =========================================================================
    # HEADERS AND COOKIES
    # =========================================================================

    def get_header(self, name: str) -> Optional[str]:
        return self._conf.headers.get(name)

    def get_headers(self, name: str) -> List[str]:
        return self._conf.headers.get_all(name)

    def get_header_names(self) -> List[str]:
        return self._conf.headers.names()

    def get_int_header(self, name: str) -> int:
        return self._conf.headers.get_int(name)

    def get_date_header(self, name: str) -> int:
        return self._conf.headers.get_date(name)

    def get_cookie(self, name: str) -> Optional[Cookie]:
        return self._conf.cookies.get(name)

    def get_cookies(self) -> Optional[List[Cookie]]:
        """All cookies, or None when there are none."""
        if not self._conf.cookies:
            return None
        return list(self._conf.cookies.values())

    def get_resource_bundle(self, locale: str, base_name: Optional[str] = None) -> Mapping[str, Any]:
        """Always an empty, read-only bundle."""
        return _EMPTY_RESOURCE_BUNDLE

    # =========================================================================
    # BODY
    # =========================================================================

    @property
    def character_encoding(self) -> Optional[str]:
        return self._conf.character_encoding

    @character_encoding.setter
    def character_encoding(self, encoding: Optional[str]) -> None:
        self._conf.character_encoding = encoding

    @property
    def content_type(self) -> Optional[str]:
        """Content type with ";charset=" appended when an encoding is set."""
        return join_content_type(self._conf.content_type, self._conf.character_encoding)

    @property
    def content_length(self) -> int:
        """Length of the body in characters."""
        return len(self._conf.body)

    def get_input_stream(self) -> io.BytesIO:
        """
        The body as UTF-8 bytes.

        Raises:
            IllegalStateError: If get_reader() was called first.
        """
        self._take_body(BodyAccess.STREAM)
        return io.BytesIO(self._conf.body.encode("utf-8"))

    def get_reader(self) -> io.StringIO:
        """
        The body as text.

        Raises:
            IllegalStateError: If get_input_stream() was called first.
        """
        self._take_body(BodyAccess.READER)
        return io.StringIO(self._conf.body)

    def _take_body(self, access: BodyAccess) -> None:
        current = self._conf.body_access
        if current is not BodyAccess.NONE and current is not access:
            raise IllegalStateError(
                f"Body already consumed via {current.value}, cannot read it via {access.value}"
            )
        self._conf.body_access = access

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def get_request_dispatcher(self, target, options=None):
        """
        Dispatcher for a path or resource, from the dispatcher delegate.

        Raises:
            UnsupportedOperationError: If no dispatcher delegate is installed.
        """
        provider = self._conf.request_dispatcher_provider
        if provider is None:
            raise UnsupportedOperationError("get_request_dispatcher")
        if options is None:
            return provider.get_request_dispatcher(target)
        return provider.get_request_dispatcher(target, options)

    # =========================================================================
    # UNSUPPORTED
    # =========================================================================

    def get_path_translated(self):
        raise UnsupportedOperationError("get_path_translated")

    def get_requested_session_id(self):
        raise UnsupportedOperationError("get_requested_session_id")

    def get_user_principal(self):
        raise UnsupportedOperationError("get_user_principal")

    def is_requested_session_id_from_cookie(self):
        raise UnsupportedOperationError("is_requested_session_id_from_cookie")

    def is_requested_session_id_from_url(self):
        raise UnsupportedOperationError("is_requested_session_id_from_url")

    def is_requested_session_id_valid(self):
        raise UnsupportedOperationError("is_requested_session_id_valid")

    def is_user_in_role(self, role):
        raise UnsupportedOperationError("is_user_in_role")

    def get_local_addr(self):
        raise UnsupportedOperationError("get_local_addr")

    def get_local_name(self):
        raise UnsupportedOperationError("get_local_name")

    def get_local_port(self):
        raise UnsupportedOperationError("get_local_port")

    def get_protocol(self):
        raise UnsupportedOperationError("get_protocol")

    def authenticate(self, response):
        raise UnsupportedOperationError("authenticate")

    def login(self, username, password):
        raise UnsupportedOperationError("login")

    def logout(self):
        raise UnsupportedOperationError("logout")

    def start_async(self, request=None, response=None):
        raise UnsupportedOperationError("start_async")

    def is_async_started(self):
        raise UnsupportedOperationError("is_async_started")

    def is_async_supported(self):
        raise UnsupportedOperationError("is_async_supported")

    def get_async_context(self):
        raise UnsupportedOperationError("get_async_context")

    def get_dispatcher_type(self):
        raise UnsupportedOperationError("get_dispatcher_type")

    def change_session_id(self):
        raise UnsupportedOperationError("change_session_id")

    def upgrade(self, handler_class):
        raise UnsupportedOperationError("upgrade")


class LegacyRequest(_RequestView):
    """Request in the legacy interface generation."""

    def get_real_path(self, path):
        raise UnsupportedOperationError("get_real_path")


class Request(_RequestView):
    """Request in the current interface generation."""

    def get_request_id(self):
        raise UnsupportedOperationError("get_request_id")

    def get_protocol_request_id(self):
        raise UnsupportedOperationError("get_protocol_request_id")

    def get_servlet_connection(self):
        raise UnsupportedOperationError("get_servlet_connection")
