"""
In-memory requests.

Exports:
    - RequestBuilder: fluent single-use builder
    - Request / LegacyRequest: built request views (current / legacy generation)
    - HttpSession, ServletContext: session and container stubs
    - RequestParameter, RequestParameterMap: typed parameters
    - RequestPathInfo, UriBuilder: path decomposition
    - RequestProgressTracker: per-request timing log
"""

from .builder import BodyAccess, BuilderState, RequestBuilder, RequestConfiguration
from .context import ServletContext
from .parameters import RequestParameter, RequestParameterMap
from .path_info import RequestPathInfo, UriBuilder
from .session import HttpSession
from .tracker import PROGRESS_TRACKER_ATTRIBUTE, RequestProgressTracker
from .views import LegacyRequest, Request

__all__ = [
    "BodyAccess",
    "BuilderState",
    "HttpSession",
    "LegacyRequest",
    "PROGRESS_TRACKER_ATTRIBUTE",
    "Request",
    "RequestBuilder",
    "RequestConfiguration",
    "RequestParameter",
    "RequestParameterMap",
    "RequestPathInfo",
    "RequestProgressTracker",
    "ServletContext",
    "UriBuilder",
]
