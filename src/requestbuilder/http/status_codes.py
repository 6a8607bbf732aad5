"""
=============================================================================
HTTP STATUS CODES (RFC 7231)
=============================================================================

Status codes a response object is commonly driven to in tests.

    ┌────────┬───────────────────────────────────────────────────────────┐
    │  2xx   │ SUCCESS        200 OK (default after build/reset)        │
    │  3xx   │ REDIRECTION    302 Found (send_redirect)                  │
    │  4xx   │ CLIENT ERROR   typical send_error() arguments             │
    │  5xx   │ SERVER ERROR   typical send_error() arguments             │
    └────────┴───────────────────────────────────────────────────────────┘

Responses accept any integer status; this enum only names the usual ones.

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes and reason phrases.

        >>> HTTPStatus.FOUND == 302
        True
        >>> HTTPStatus.FOUND.phrase
        'Found'
    """

    # =========================================================================
    # 2xx SUCCESS
    # =========================================================================
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204

    # =========================================================================
    # 3xx REDIRECTION
    # =========================================================================
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    TEMPORARY_REDIRECT = 307

    # =========================================================================
    # 4xx CLIENT ERROR
    # =========================================================================
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    CONFLICT = 409
    PRECONDITION_FAILED = 412

    # =========================================================================
    # 5xx SERVER ERROR
    # =========================================================================
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    SERVICE_UNAVAILABLE = 503

    @property
    def phrase(self) -> str:
        """Reason phrase, e.g. 'Not Found'."""
        return _STATUS_PHRASES.get(self, "Unknown")


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.CREATED: "Created",
    HTTPStatus.ACCEPTED: "Accepted",
    HTTPStatus.NO_CONTENT: "No Content",
    HTTPStatus.MOVED_PERMANENTLY: "Moved Permanently",
    HTTPStatus.FOUND: "Found",
    HTTPStatus.SEE_OTHER: "See Other",
    HTTPStatus.NOT_MODIFIED: "Not Modified",
    HTTPStatus.TEMPORARY_REDIRECT: "Temporary Redirect",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.CONFLICT: "Conflict",
    HTTPStatus.PRECONDITION_FAILED: "Precondition Failed",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
    HTTPStatus.NOT_IMPLEMENTED: "Not Implemented",
    HTTPStatus.SERVICE_UNAVAILABLE: "Service Unavailable",
}


def status_phrase(code: int) -> str:
    """Reason phrase for any integer status, 'Unknown' if unnamed."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Unknown"
