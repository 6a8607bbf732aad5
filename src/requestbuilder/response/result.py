"""
=============================================================================
RESPONSE RESULT
=============================================================================

Mutable in-memory response that a handler writes into and a test reads back.

=============================================================================
STATE MACHINE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   build()  ──►  status 200, no headers, content length -1           │
    │                                                                      │
    │                ┌──────────────┐   send_error()    ┌─────────────┐   │
    │                │              │   send_redirect() │             │   │
    │                │ UNCOMMITTED  │ ────────────────► │  COMMITTED  │   │
    │                │              │   flush_buffer()  │             │   │
    │                └──────────────┘   get_output()    └─────────────┘   │
    │                  │        ▲                            │             │
    │                  │ reset()│                            │ reset()     │
    │                  └────────┘                            ▼             │
    │                                           ResponseCommittedError     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
OUTPUT BUFFER
=============================================================================

    get_writer() ──► ResponseWriter ──(charset)──┐
                                                  ▼
    get_output_stream() ──► ResponseOutputStream ──► bytes buffer ──► get_output()

Each accessor caches what it returns until the next reset()/reset_buffer().
Mixing the two is allowed; both end up in the same buffer. Text written to
the writer is encoded when the writer is flushed, which get_output() does.

=============================================================================
"""

import codecs
import io
import logging
from typing import Any, Dict, List, Optional

from ..config import BuilderConfig
from ..errors import ResponseCommittedError, UnsupportedOperationError, require
from ..http.cookies import Cookie
from ..http.headers import HeaderStore
from ..http.status_codes import HTTPStatus, status_phrase
from ..request.builder import join_content_type, split_content_type


logger = logging.getLogger(__name__)

_UNSET: Any = object()


class ResponseOutputStream(io.RawIOBase):
    """Binary stream appending to a response buffer."""

    def __init__(self, buffer: io.BytesIO):
        super().__init__()
        self._buffer = buffer

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        return self._buffer.write(data)

    def is_ready(self) -> bool:
        return True


class ResponseWriter:
    """
    Text writer over a ResponseOutputStream.

    Text is held until flush() and then encoded with the response charset.
    The encoder is incremental, so a byte order mark is written only once.
    """

    def __init__(self, stream: ResponseOutputStream, encoding: str):
        self._stream = stream
        self._encoder = codecs.getincrementalencoder(encoding)()
        self._pending: List[str] = []
        self.encoding = encoding

    def write(self, text: str) -> int:
        self._pending.append(text)
        return len(text)

    def writelines(self, lines) -> None:
        for line in lines:
            self.write(line)

    def print(self, *values, sep: str = " ", end: str = "\n") -> None:
        self.write(sep.join(str(value) for value in values) + end)

    def flush(self) -> None:
        if self._pending:
            text = "".join(self._pending)
            self._pending.clear()
            self._stream.write(self._encoder.encode(text))
        self._stream.flush()


class ResponseResult:
    """Response in the current interface generation."""

    def __init__(self, config: Optional[BuilderConfig] = None):
        self._config = config or BuilderConfig()
        self._headers = HeaderStore()
        self._cookies: Dict[str, Cookie] = {}
        self._content_type: Optional[str] = None
        self._character_encoding: Optional[str] = None
        self._locale = self._config.locale
        self._content_length = -1
        self._status = int(HTTPStatus.OK)
        self._status_message: Optional[str] = None
        self._committed = False
        self._buffer_size = self._config.buffer_size
        self._buffer = io.BytesIO()
        self._output_stream: Optional[ResponseOutputStream] = None
        self._writer: Optional[ResponseWriter] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._status} committed={self._committed}>"

    def _check_committed(self) -> None:
        if self._committed:
            raise ResponseCommittedError()

    def _commit(self, reason: str) -> None:
        if not self._committed:
            logger.debug(f"Response committed by {reason} with status {self._status}")
        self._committed = True

    # =========================================================================
    # STATUS METHODS
    # =========================================================================

    @property
    def status(self) -> int:
        return self._status

    @property
    def status_message(self) -> Optional[str]:
        return self._status_message

    def set_status(self, status: int) -> None:
        self._status = int(status)

    def send_error(self, status: int, message: Optional[str] = None) -> None:
        """Set an error status and message, then commit."""
        self.set_status(status)
        self._status_message = message
        logger.debug(f"send_error {status} {status_phrase(status)}")
        self._commit("send_error")

    def send_redirect(self, location: str) -> None:
        """Answer 302 Found with a Location header, then commit."""
        self.set_status(HTTPStatus.FOUND)
        self._status_message = None
        self.set_header("Location", location)
        self._commit("send_redirect")

    # =========================================================================
    # HEADER METHODS
    # =========================================================================

    def add_header(self, name: str, value: str) -> None:
        self._headers.add(name, value)

    def set_header(self, name: str, value: str) -> None:
        self._headers.set(name, value)

    def add_int_header(self, name: str, value: int) -> None:
        self._headers.add_int(name, value)

    def set_int_header(self, name: str, value: int) -> None:
        self._headers.set_int(name, value)

    def add_date_header(self, name: str, millis: int) -> None:
        self._headers.add_date(name, millis)

    def set_date_header(self, name: str, millis: int) -> None:
        self._headers.set_date(name, millis)

    def contains_header(self, name: str) -> bool:
        return self._headers.contains(name)

    def get_header(self, name: str) -> Optional[str]:
        return self._headers.get(name)

    def get_headers(self, name: str) -> List[str]:
        return self._headers.get_all(name)

    def get_header_names(self) -> List[str]:
        return self._headers.names()

    # =========================================================================
    # COOKIES
    # =========================================================================

    def add_cookie(self, cookie: Cookie) -> None:
        """Add a cookie, replacing one with the same name."""
        require(cookie, "cookie")
        self._cookies[cookie.name] = cookie

    def get_cookie(self, name: str) -> Optional[Cookie]:
        return self._cookies.get(name)

    def get_cookies(self) -> Optional[List[Cookie]]:
        """All cookies, or None when there are none."""
        if not self._cookies:
            return None
        return list(self._cookies.values())

    # =========================================================================
    # CONTENT METADATA
    # =========================================================================

    @property
    def character_encoding(self) -> Optional[str]:
        return self._character_encoding

    @character_encoding.setter
    def character_encoding(self, encoding: Optional[str]) -> None:
        self._character_encoding = encoding

    @property
    def content_type(self) -> Optional[str]:
        return join_content_type(self._content_type, self._character_encoding)

    @content_type.setter
    def content_type(self, value: Optional[str]) -> None:
        # Frozen once a writer exists.
        if self._writer is not None:
            return
        self._content_type, charset = split_content_type(value)
        if charset is not None:
            self._character_encoding = charset

    @property
    def content_length(self) -> int:
        return self._content_length

    def set_content_length(self, length: int) -> None:
        self._content_length = length

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, locale: str) -> None:
        self._locale = locale

    @property
    def charset(self) -> str:
        """Character encoding, or the configured default when unset."""
        return self._character_encoding or self._config.default_charset

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def get_output_stream(self) -> ResponseOutputStream:
        if self._output_stream is None:
            self._output_stream = ResponseOutputStream(self._buffer)
        return self._output_stream

    def get_writer(self) -> ResponseWriter:
        if self._writer is None:
            self._writer = ResponseWriter(self.get_output_stream(), self.charset)
        return self._writer

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    @buffer_size.setter
    def buffer_size(self, size: int) -> None:
        self._buffer_size = size

    def flush_buffer(self) -> None:
        self._commit("flush_buffer")

    @property
    def is_committed(self) -> bool:
        return self._committed

    def reset(self) -> None:
        """
        Clear cookies, headers, status and buffer.

        Raises:
            ResponseCommittedError: If the response is committed.
        """
        self._check_committed()
        self._cookies.clear()
        self._headers.reset()
        self._status = int(HTTPStatus.OK)
        self._content_length = -1
        self._status_message = None
        self.reset_buffer()

    def reset_buffer(self) -> None:
        """
        Discard written output, keeping status and headers.

        Raises:
            ResponseCommittedError: If the response is committed.
        """
        self._check_committed()
        self._buffer = io.BytesIO()
        self._output_stream = None
        self._writer = None

    def get_output(self) -> bytes:
        """Flush the writer and stream, commit, and return the written bytes."""
        self._commit("get_output")
        if self._writer is not None:
            self._writer.flush()
        if self._output_stream is not None:
            self._output_stream.flush()
        return self._buffer.getvalue()

    def get_output_as_string(self) -> str:
        return self.get_output().decode(self.charset)

    # =========================================================================
    # UNSUPPORTED
    # =========================================================================

    def encode_url(self, url: str) -> str:
        raise UnsupportedOperationError("encode_url")

    def encode_redirect_url(self, url: str) -> str:
        raise UnsupportedOperationError("encode_redirect_url")


class LegacyResponseResult(ResponseResult):
    """Response in the legacy interface generation."""

    def set_status(self, status: int, message: Optional[str] = _UNSET) -> None:
        """
        Set the status and, in this generation only, a status message.

        Omitting ``message`` keeps the current one; passing None clears it.
        """
        super().set_status(status)
        if message is not _UNSET:
            self._status_message = message
