"""
=============================================================================
ERRORS RAISED BY THE REQUEST/RESPONSE BUILDERS
=============================================================================

Every failure in this package is a synchronous exception raised at the call
site. Nothing is retried and nothing is recovered internally.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        EXCEPTION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   RequestBuilderError                                               │
    │   ├── IllegalStateError            (also a RuntimeError)            │
    │   │   ├── BuilderLockedError       mutate / build after build()    │
    │   │   ├── ResponseCommittedError   reset after commit              │
    │   │   └── SessionInvalidatedError  touch an invalidated session    │
    │   ├── HeaderFormatError            (also a ValueError)              │
    │   └── UnsupportedOperationError    (also a NotImplementedError)     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Missing required arguments raise a plain ValueError("<name> is None").

=============================================================================
"""

from typing import Optional


class RequestBuilderError(Exception):
    """Base class for every error raised by this package."""


class IllegalStateError(RequestBuilderError, RuntimeError):
    """
    Raised when an object is used in a state that forbids the operation.

    Covers reading the body as a stream after taking the reader (and the
    reverse), as well as the more specific subclasses below.
    """


class BuilderLockedError(IllegalStateError):
    """Raised by every mutator and by a second build() once a builder is locked."""

    MESSAGE = "The builder can't be reused. Create a new builder instead."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class ResponseCommittedError(IllegalStateError):
    """Raised by reset() and reset_buffer() on a committed response."""

    MESSAGE = "Response already committed."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class SessionInvalidatedError(IllegalStateError):
    """Raised when an invalidated session is read, written or invalidated again."""

    MESSAGE = "Session is already invalidated."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class HeaderFormatError(RequestBuilderError, ValueError):
    """
    Raised when a header exists but cannot be read as the requested type.

    An absent header is reported with the -1 sentinel instead, so callers
    can tell "missing" apart from "malformed".
    """

    def __init__(self, name: str, value: str, expected: str):
        super().__init__(f"Invalid {expected} value for header {name!r}: {value!r}")
        self.name = name
        self.value = value
        self.expected = expected


class UnsupportedOperationError(RequestBuilderError, NotImplementedError):
    """Raised by stubbed container features that have no in-memory meaning."""

    def __init__(self, operation: Optional[str] = None):
        message = f"{operation} is not supported" if operation else "Operation not supported"
        super().__init__(message)
        self.operation = operation


def require(value, name: str):
    """Return ``value`` unchanged, or raise ValueError if it is None."""
    if value is None:
        raise ValueError(f"{name} is None")
    return value
