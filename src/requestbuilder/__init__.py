"""
=============================================================================
REQUESTBUILDER - In-Memory HTTP Requests and Responses for Unit Tests
=============================================================================

Builds fully-formed fake request and response objects without a network
stack or a container. Headers, cookies, body streams, derived path fields,
session and attribute semantics, and commit state all behave like a live
request, in two interface generations (legacy and current) built from one
shared configuration.

=============================================================================
PROJECT OVERVIEW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      REQUESTBUILDER ARCHITECTURE                     │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   new_request_builder(resource)                                     │
    │        │  .with_selectors() .with_parameter() .use_session_from()   │
    │        ▼                                                             │
    │   RequestBuilder ──► RequestConfiguration (one source of truth)     │
    │        │                     ▲             ▲                         │
    │        │ build()             │             │                         │
    │        ├──────────────► Request            │                         │
    │        │ build_legacy()                    │                         │
    │        └──────────────► LegacyRequest ─────┘                         │
    │                                                                      │
    │   new_response_builder()                                            │
    │        │ build() / build_legacy()                                   │
    │        ▼                                                             │
    │   ResponseResult: headers, cookies, status, buffer, commit flag     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    requestbuilder/
    ├── __init__.py          # This file - package exports
    ├── builders.py          # Factory functions
    ├── config.py            # BuilderConfig dataclass, logging setup
    ├── errors.py            # Exception hierarchy
    ├── resource.py          # SyntheticResource, InMemoryResourceResolver
    ├── http/                # Pieces shared by requests and responses
    │   ├── headers.py       # HeaderStore, RFC 1123 dates
    │   ├── cookies.py       # Cookie
    │   └── status_codes.py  # HTTPStatus enum
    ├── request/             # Request side
    │   ├── builder.py       # RequestBuilder, RequestConfiguration
    │   ├── views.py         # Request, LegacyRequest
    │   ├── session.py       # HttpSession stub
    │   ├── context.py       # ServletContext stub
    │   ├── parameters.py    # RequestParameter, RequestParameterMap
    │   ├── path_info.py     # RequestPathInfo, UriBuilder
    │   └── tracker.py       # RequestProgressTracker
    └── response/            # Response side
        ├── builder.py       # ResponseBuilder
        └── result.py        # ResponseResult, LegacyResponseResult

=============================================================================
QUICK START
=============================================================================

    from requestbuilder import SyntheticResource, new_request_builder, new_response_builder

    request = (new_request_builder(SyntheticResource("/content/page"))
        .with_selectors("tidy", "json")
        .with_extension("html")
        .with_parameter("q", "shoes")
        .build())

    request.path_info          # "/content/page.tidy.json.html"
    request.get_request_url()  # "http://localhost/content/page.tidy.json.html"

    response = new_response_builder().build()
    response.get_writer().write("hello")
    response.get_output_as_string()   # "hello"
    response.is_committed             # True

=============================================================================
"""

__version__ = "1.0.0"

from .builders import (
    new_binary_request_parameter,
    new_request_builder,
    new_request_parameter,
    new_request_progress_tracker,
    new_response_builder,
)
from .config import BuilderConfig, setup_logging
from .errors import (
    BuilderLockedError,
    HeaderFormatError,
    IllegalStateError,
    RequestBuilderError,
    ResponseCommittedError,
    SessionInvalidatedError,
    UnsupportedOperationError,
)
from .http import Cookie, HeaderStore, HTTPStatus
from .request import (
    HttpSession,
    LegacyRequest,
    Request,
    RequestBuilder,
    RequestParameter,
    RequestParameterMap,
    RequestPathInfo,
    RequestProgressTracker,
    ServletContext,
    UriBuilder,
)
from .resource import InMemoryResourceResolver, SyntheticResource
from .response import LegacyResponseResult, ResponseBuilder, ResponseResult

__all__ = [
    # Entry points
    "new_request_builder",          # RequestBuilder for a resource
    "new_response_builder",         # ResponseBuilder
    "new_request_progress_tracker",
    "new_request_parameter",        # textual parameter
    "new_binary_request_parameter", # upload parameter

    # Configuration
    "BuilderConfig",
    "setup_logging",

    # Errors
    "RequestBuilderError",
    "IllegalStateError",
    "BuilderLockedError",
    "ResponseCommittedError",
    "SessionInvalidatedError",
    "HeaderFormatError",
    "UnsupportedOperationError",

    # Request side
    "RequestBuilder",
    "Request",
    "LegacyRequest",
    "HttpSession",
    "ServletContext",
    "RequestParameter",
    "RequestParameterMap",
    "RequestPathInfo",
    "UriBuilder",
    "RequestProgressTracker",

    # Response side
    "ResponseBuilder",
    "ResponseResult",
    "LegacyResponseResult",

    # Shared
    "Cookie",
    "HeaderStore",
    "HTTPStatus",
    "SyntheticResource",
    "InMemoryResourceResolver",

    "__version__",
]
