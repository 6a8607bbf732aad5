"""
Entry points for creating builders, trackers and parameters.

Example:
    from requestbuilder import new_request_builder, new_response_builder

    request = new_request_builder(resource).with_extension("html").build()
    response = new_response_builder().build()
"""

from typing import Optional

from .config import BuilderConfig
from .errors import require
from .request.builder import RequestBuilder
from .request.parameters import RequestParameter
from .request.tracker import RequestProgressTracker
from .response.builder import ResponseBuilder


def new_request_builder(resource, config: Optional[BuilderConfig] = None) -> RequestBuilder:
    """
    Create a request builder for ``resource``.

    Raises:
        ValueError: If resource is None.
    """
    return RequestBuilder(require(resource, "resource"), config)


def new_response_builder(config: Optional[BuilderConfig] = None) -> ResponseBuilder:
    return ResponseBuilder(config)


def new_request_progress_tracker() -> RequestProgressTracker:
    return RequestProgressTracker()


def new_request_parameter(name: str, value: str, encoding: str = "utf-8") -> RequestParameter:
    """Create a form-field parameter whose bytes use ``encoding``."""
    return RequestParameter(name, value, encoding)


def new_binary_request_parameter(name: str, data: bytes, file_name: Optional[str] = None,
                                 content_type: Optional[str] = None) -> RequestParameter:
    """Create an upload parameter; file name and content type may be None."""
    return RequestParameter.binary(name, data, file_name, content_type)
