"""
=============================================================================
REQUEST PARAMETERS
=============================================================================

Typed view of request parameters, alongside the plain name → strings map.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      TWO KINDS OF PARAMETER                          │
    ├──────────────┬──────────────────────────────────────────────────────┤
    │  TEXTUAL     │ RequestParameter("q", "shoes")                       │
    │              │ form field, bytes = value encoded with its charset   │
    │              │ no file name, no content type                        │
    ├──────────────┼──────────────────────────────────────────────────────┤
    │  BINARY      │ RequestParameter.binary("f", b"...", "a.png",        │
    │              │                         "image/png")                 │
    │              │ not a form field (an upload)                         │
    └──────────────┴──────────────────────────────────────────────────────┘

=============================================================================
"""

import io
from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Sequence, Tuple

from ..errors import require


class RequestParameter:
    """A single named request parameter value."""

    def __init__(self, name: str, value: str, encoding: str = "utf-8"):
        self._name = require(name, "name")
        self._value: Optional[str] = require(value, "value")
        self._encoding = encoding
        self._data = value.encode(encoding)
        self._file_name: Optional[str] = None
        self._content_type: Optional[str] = None
        self._form_field = True

    @classmethod
    def binary(cls, name: str, data: bytes, file_name: Optional[str] = None,
               content_type: Optional[str] = None) -> "RequestParameter":
        """Create an upload-style parameter carrying raw bytes."""
        require(data, "data")
        param = cls.__new__(cls)
        param._name = require(name, "name")
        param._value = None
        param._encoding = "utf-8"
        param._data = bytes(data)
        param._file_name = file_name
        param._content_type = content_type
        param._form_field = False
        return param

    @property
    def name(self) -> str:
        return self._name

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    @property
    def content_type(self) -> Optional[str]:
        return self._content_type

    @property
    def size(self) -> int:
        """Length in bytes."""
        return len(self._data)

    @property
    def is_form_field(self) -> bool:
        return self._form_field

    def get(self) -> bytes:
        return self._data

    def get_input_stream(self) -> io.BytesIO:
        """Fresh stream over the parameter bytes."""
        return io.BytesIO(self._data)

    def get_string(self, encoding: Optional[str] = None) -> str:
        """
        The value as text.

        Args:
            encoding: Charset used to decode the bytes. Without one, a textual
                parameter returns its original value.
        """
        if encoding is None:
            if self._value is not None:
                return self._value
            encoding = self._encoding
        return self._data.decode(encoding, errors="replace")

    def __str__(self) -> str:
        return self.get_string()

    def __repr__(self) -> str:
        return f"RequestParameter({self._name!r}, size={self.size})"


class RequestParameterMap(Mapping):
    """Read-only mapping of parameter name to a tuple of RequestParameter."""

    def __init__(self, parameters: Dict[str, Sequence[RequestParameter]]):
        self._parameters: Dict[str, Tuple[RequestParameter, ...]] = {
            name: tuple(values) for name, values in parameters.items()
        }

    def get_value(self, name: str) -> Optional[RequestParameter]:
        """First parameter for ``name``, or None."""
        values = self._parameters.get(name)
        return values[0] if values else None

    def get_values(self, name: str) -> Optional[Tuple[RequestParameter, ...]]:
        """All parameters for ``name``, or None."""
        return self._parameters.get(name)

    def __getitem__(self, name: str) -> Tuple[RequestParameter, ...]:
        return self._parameters[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)
