"""
=============================================================================
REQUEST BUILDER
=============================================================================

Accumulates every fact about one request, then freezes it into a view.

=============================================================================
LIFECYCLE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   RequestBuilder(resource)                                          │
    │        │                                                             │
    │        │  with_selectors(...) / with_parameter(...) / ...           │
    │        ▼                      (each returns self)                    │
    │   ┌─────────┐   build() / build_legacy()   ┌──────────┐             │
    │   │  OPEN   │ ───────────────────────────► │  LOCKED  │             │
    │   └─────────┘   derive path info,          └──────────┘             │
    │                 query string, path info         │                    │
    │                                                  │ any setter        │
    │                                                  │ or build()        │
    │                                                  ▼                   │
    │                                          BuilderLockedError          │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

There is exactly one mutable aggregate, RequestConfiguration. Both request
generations (Request and LegacyRequest) are thin views holding a reference
to it; neither copies state and neither recomputes derived fields.

=============================================================================
QUERY STRING FORMAT
=============================================================================

Parameters {a: "b", c: ["d", "e"], f: ["g"]} added in that order give:

    a=b&c=d&c=e&f=g

Keys and values are form-encoded (space → '+'). A None value yields
"key=", and no parameters at all yields None rather than "".

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

from ..config import BuilderConfig
from ..errors import BuilderLockedError, require
from ..http.cookies import Cookie
from ..http.headers import HeaderStore
from .context import ServletContext
from .parameters import RequestParameterMap
from .path_info import RequestPathInfo, UriBuilder
from .session import HttpSession
from .tracker import PROGRESS_TRACKER_ATTRIBUTE, RequestProgressTracker


logger = logging.getLogger(__name__)


DEFAULT_METHOD = "GET"
CHARSET_SEPARATOR = ";charset="

ParameterValues = Optional[Tuple[Optional[str], ...]]


class BuilderState(Enum):
    OPEN = "open"
    LOCKED = "locked"


class BodyAccess(Enum):
    """Which accessor consumed the request body first."""
    NONE = "none"
    STREAM = "stream"
    READER = "reader"


def split_content_type(value: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Split "type;charset=X" at the first separator.

    Returns:
        (content_type, charset). charset is None when there is no separator.
    """
    if value is None:
        return None, None
    pos = value.find(CHARSET_SEPARATOR)
    if pos == -1:
        return value, None
    return value[:pos], value[pos + len(CHARSET_SEPARATOR):]


def join_content_type(content_type: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Inverse of split_content_type()."""
    if content_type is None:
        return None
    if charset is None:
        return content_type
    return content_type + CHARSET_SEPARATOR + charset


def _encode(value: str) -> str:
    # Form encoding that leaves exactly [A-Za-z0-9.-*_] untouched.
    return quote_plus(value, safe="*").replace("~", "%7E")


def format_query_string(parameters: Mapping[str, ParameterValues]) -> Optional[str]:
    """Form-encode a parameter table, or None if it yields no pairs."""
    pairs = []
    for key, values in parameters.items():
        if values is None:
            continue
        for value in values:
            pairs.append(_encode(key) + "=" + ("" if value is None else _encode(value)))
    return "&".join(pairs) if pairs else None


@dataclass
class RequestConfiguration:
    """
    Everything known about one request.

    Written by RequestBuilder while open, read by the request views after
    build. The derived block is filled exactly once, at build time.
    """

    resource: Any
    config: BuilderConfig = field(default_factory=BuilderConfig)

    # ─────────────────────────────────────────────────────────────────────
    # ADDRESSING
    # ─────────────────────────────────────────────────────────────────────
    selectors: Tuple[str, ...] = ()
    extension: Optional[str] = None
    suffix: Optional[str] = None
    method: str = DEFAULT_METHOD

    # ─────────────────────────────────────────────────────────────────────
    # CONTENT
    # ─────────────────────────────────────────────────────────────────────
    content_type: Optional[str] = None
    character_encoding: Optional[str] = None
    body: Optional[str] = None
    parameters: Dict[str, ParameterValues] = field(default_factory=dict)
    attributes: Dict[str, Any] = field(default_factory=dict)
    headers: HeaderStore = field(default_factory=HeaderStore)
    cookies: Dict[str, Cookie] = field(default_factory=dict)

    # ─────────────────────────────────────────────────────────────────────
    # DELEGATES (None = use local state)
    # ─────────────────────────────────────────────────────────────────────
    attributes_provider: Any = None
    session_provider: Any = None
    servlet_context: Any = None
    request_dispatcher_provider: Any = None
    progress_tracker: Optional[RequestProgressTracker] = None

    # ─────────────────────────────────────────────────────────────────────
    # DERIVED AT BUILD TIME
    # ─────────────────────────────────────────────────────────────────────
    request_path_info: Optional[RequestPathInfo] = None
    query_string: Optional[str] = None
    path_info: Optional[str] = None

    # ─────────────────────────────────────────────────────────────────────
    # RUNTIME STATE OF THE BUILT REQUEST
    # ─────────────────────────────────────────────────────────────────────
    session: Optional[HttpSession] = None
    request_parameter_map: Optional[RequestParameterMap] = None
    body_access: BodyAccess = BodyAccess.NONE

    # Facts a real container would learn from the connection.
    auth_type: Optional[str] = None
    remote_user: Optional[str] = None
    remote_addr: Optional[str] = None
    remote_host: Optional[str] = None
    remote_port: int = 0
    response_content_type: Optional[str] = None


class RequestBuilder:
    """
    Fluent, single-use builder for in-memory requests.

    Example:
        request = (RequestBuilder(resource)
            .with_selectors("tidy", "json")
            .with_extension("html")
            .with_parameter("q", "shoes")
            .build())

        request.path_info        # "/content/page.tidy.json.html"
        request.query_string     # "q=shoes"
    """

    def __init__(self, resource, config: Optional[BuilderConfig] = None,
                 uri_builder: Optional[Callable[[Any], UriBuilder]] = None):
        """
        Args:
            resource: Backing resource; needs ``path`` and ``resource_resolver``.
            config: Fixed request facts. Defaults to BuilderConfig().
            uri_builder: Factory returning a UriBuilder-like object for a
                resource. Defaults to UriBuilder.create_from.
        """
        require(resource, "resource")
        config = config or BuilderConfig()
        config.validate()
        self._state = BuilderState.OPEN
        self._uri_builder = uri_builder or UriBuilder.create_from
        self.configuration = RequestConfiguration(resource, config)

    @property
    def state(self) -> BuilderState:
        return self._state

    def _check_open(self) -> RequestConfiguration:
        if self._state is BuilderState.LOCKED:
            raise BuilderLockedError()
        return self.configuration

    # =========================================================================
    # ADDRESSING
    # =========================================================================

    def with_request_method(self, method: str) -> "RequestBuilder":
        """
        Set the HTTP method, upper-cased.

        Returns:
            Self for method chaining
        """
        conf = self._check_open()
        conf.method = require(method, "method").upper()
        return self

    def with_selectors(self, *selectors: str) -> "RequestBuilder":
        """
        Set the selectors, replacing any set before. No arguments clears them.

        Accepts either separate strings or a single list:
            builder.with_selectors("tidy", "json")
            builder.with_selectors(["tidy", "json"])
        """
        conf = self._check_open()
        if len(selectors) == 1 and not isinstance(selectors[0], str):
            selectors = tuple(selectors[0] or ())
        conf.selectors = tuple(selectors)
        return self

    def with_extension(self, extension: Optional[str]) -> "RequestBuilder":
        self._check_open().extension = extension
        return self

    def with_suffix(self, suffix: Optional[str]) -> "RequestBuilder":
        self._check_open().suffix = suffix
        return self

    # =========================================================================
    # CONTENT
    # =========================================================================

    def with_content_type(self, content_type: Optional[str]) -> "RequestBuilder":
        """
        Set the content type, optionally with a charset.

        "text/html;charset=UTF-8" sets both the content type and the
        character encoding. Without the ";charset=" separator the character
        encoding is left as it was.

        Returns:
            Self for method chaining
        """
        conf = self._check_open()
        conf.content_type, charset = split_content_type(content_type)
        if charset is not None:
            conf.character_encoding = charset
        return self

    def with_body(self, body: Optional[str]) -> "RequestBuilder":
        """Set the body text. None means empty."""
        self._check_open().body = body
        return self

    def with_parameter(self, key: str, value: Union[str, Sequence[str]]) -> "RequestBuilder":
        """
        Set a parameter to one value or a sequence of values.

        Replaces any values previously set for ``key`` but keeps its
        original position in the query string.

        Returns:
            Self for method chaining
        """
        conf = self._check_open()
        require(key, "key")
        require(value, "value")
        conf.parameters[key] = (value,) if isinstance(value, str) else tuple(value)
        return self

    def with_parameters(self, parameters: Optional[Mapping[str, Optional[Sequence[str]]]]) -> "RequestBuilder":
        """
        Merge a name → values mapping into the parameters.

        Later keys overwrite earlier ones. None is accepted and ignored.
        """
        conf = self._check_open()
        if parameters is not None:
            for key, values in parameters.items():
                if values is None or isinstance(values, str):
                    conf.parameters[key] = values if values is None else (values,)
                else:
                    conf.parameters[key] = tuple(values)
        return self

    def with_header(self, name: str, value: str) -> "RequestBuilder":
        """Add a request header value."""
        self._check_open().headers.add(name, value)
        return self

    def with_int_header(self, name: str, value: int) -> "RequestBuilder":
        self._check_open().headers.add_int(name, value)
        return self

    def with_date_header(self, name: str, millis: int) -> "RequestBuilder":
        self._check_open().headers.add_date(name, millis)
        return self

    def with_cookie(self, cookie: Cookie) -> "RequestBuilder":
        """Add a cookie, replacing any cookie with the same name."""
        conf = self._check_open()
        require(cookie, "cookie")
        conf.cookies[cookie.name] = cookie
        return self

    # =========================================================================
    # DELEGATES
    # =========================================================================

    def use_attributes_from(self, request) -> "RequestBuilder":
        """Forward all attribute operations to ``request``."""
        self._check_open().attributes_provider = require(request, "request")
        return self

    def use_session_from(self, request) -> "RequestBuilder":
        """Forward get_session() to ``request``."""
        self._check_open().session_provider = require(request, "request")
        return self

    def use_servlet_context_from(self, request) -> "RequestBuilder":
        """Use the servlet context of ``request`` (read once, now)."""
        self._check_open().servlet_context = require(request, "request").servlet_context
        return self

    def use_request_dispatcher_from(self, request) -> "RequestBuilder":
        """Forward get_request_dispatcher() to ``request``."""
        self._check_open().request_dispatcher_provider = require(request, "request")
        return self

    def with_request_progress_tracker(self, tracker: RequestProgressTracker) -> "RequestBuilder":
        self._check_open().progress_tracker = require(tracker, "tracker")
        return self

    # =========================================================================
    # BUILD
    # =========================================================================

    def build(self):
        """
        Lock the builder and return a current-generation Request.

        Raises:
            BuilderLockedError: If the builder was already built.
        """
        from .views import Request
        return Request(self._lock_and_derive())

    def build_legacy(self):
        """
        Lock the builder and return a LegacyRequest.

        Raises:
            BuilderLockedError: If the builder was already built.
        """
        from .views import LegacyRequest
        return LegacyRequest(self._lock_and_derive())

    def _lock_and_derive(self) -> RequestConfiguration:
        conf = self._check_open()
        self._state = BuilderState.LOCKED

        conf.request_path_info = (self._uri_builder(conf.resource)
            .set_extension(conf.extension)
            .set_suffix(conf.suffix)
            .set_selectors(conf.selectors)
            .to_request_path_info())
        conf.query_string = format_query_string(conf.parameters)
        conf.path_info = _build_path_info(conf.request_path_info)

        if conf.servlet_context is None:
            conf.servlet_context = ServletContext()
        if conf.body is None:
            conf.body = ""

        logger.debug(f"Built {conf.method} {conf.path_info} query={conf.query_string!r}")
        return conf


def _build_path_info(path_info: RequestPathInfo) -> str:
    parts = [path_info.resource_path]
    if path_info.selector_string is not None:
        parts.append("." + path_info.selector_string)
    if path_info.extension is not None:
        parts.append("." + path_info.extension)
    if path_info.suffix is not None:
        parts.append(path_info.suffix)
    return "".join(parts)


def resolve_progress_tracker(conf: RequestConfiguration, get_attribute) -> RequestProgressTracker:
    """
    Tracker for a built request, resolved on first access.

    An explicit tracker wins; otherwise one shared through the attributes
    under PROGRESS_TRACKER_ATTRIBUTE; otherwise a fresh tracker.
    """
    if conf.progress_tracker is None:
        shared = get_attribute(PROGRESS_TRACKER_ATTRIBUTE)
        if isinstance(shared, RequestProgressTracker):
            conf.progress_tracker = shared
        else:
            conf.progress_tracker = RequestProgressTracker()
    return conf.progress_tracker
