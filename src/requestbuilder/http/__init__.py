"""
HTTP building blocks shared by requests and responses.

Exports:
    - HeaderStore: ordered multi-valued headers with int/date accessors
    - Cookie: cookie value object
    - HTTPStatus: status code enum with phrases
    - format_http_date / parse_http_date: RFC 1123 date helpers
"""

from .cookies import Cookie
from .headers import HeaderStore, format_http_date, parse_http_date
from .status_codes import HTTPStatus, status_phrase

__all__ = [
    "Cookie",
    "HeaderStore",
    "HTTPStatus",
    "format_http_date",
    "parse_http_date",
    "status_phrase",
]
