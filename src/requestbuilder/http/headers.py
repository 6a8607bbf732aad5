"""
=============================================================================
HEADER STORE
=============================================================================

Ordered, multi-valued header collection shared by requests and responses.

=============================================================================
STORAGE MODEL
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         HeaderStore._headers                        │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   "Accept"        ──►  ["text/html", "application/json"]            │
    │   "Content-Length"──►  ["42"]                                       │
    │   "Date"          ──►  ["Thu, 1 Jan 1970 00:00:50 GMT"]             │
    │                                                                      │
    │   Keys keep first-insertion order and are case-sensitive.           │
    │   add()  appends to the list                                        │
    │   set()  replaces the list with a single value                      │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Typed headers are stored as text:

    int   ──► base-10 digits, no padding         set_int("X", 42)  → "42"
    date  ──► RFC 1123 at UTC, whole seconds     set_date("D", 50000)
                                                  → "Thu, 1 Jan 1970 00:00:50 GMT"

Reading a typed header back returns -1 when the header is absent and raises
HeaderFormatError when it is present but unparsable. Dates lose their
sub-second part on the way in, so a round trip of T milliseconds yields
T - T % 1000.

=============================================================================
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from ..errors import HeaderFormatError, require


_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_INT_PATTERN = re.compile(r"^[+-]?\d+$")

# Weekday is optional, day may be one or two digits, seconds are optional.
_DATE_PATTERN = re.compile(
    r"^(?:(?P<weekday>[A-Z][a-z]{2}), )?"
    r"(?P<day>\d{1,2}) (?P<month>[A-Z][a-z]{2}) (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))? GMT$"
)


def format_http_date(millis: int) -> str:
    """
    Format an epoch timestamp in milliseconds as an RFC 1123 date.

    The day of month is not zero-padded:

        format_http_date(50000)  →  "Thu, 1 Jan 1970 00:00:50 GMT"

    Args:
        millis: Milliseconds since the epoch. Sub-second precision is dropped.

    Returns:
        Formatted date string at UTC.

    Raises:
        ValueError: The date falls outside years 1 to 9999.
    """
    try:
        dt = _EPOCH + timedelta(seconds=millis // 1000)
    except OverflowError:
        raise ValueError(f"Date out of range (years 1-9999): {millis}") from None
    return (
        f"{_DAYS[dt.weekday()]}, "
        f"{dt.day} {_MONTHS[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


def parse_http_date(value: str) -> int:
    """
    Parse an RFC 1123 date into epoch milliseconds.

    Raises:
        ValueError: If the text is not an RFC 1123 date.
    """
    match = _DATE_PATTERN.match(value.strip())
    if match is None or match.group("month") not in _MONTHS:
        raise ValueError(f"Invalid date value: {value}")

    dt = datetime(
        int(match.group("year")),
        _MONTHS.index(match.group("month")) + 1,
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second") or 0),
        tzinfo=timezone.utc,
    )

    weekday = match.group("weekday")
    if weekday is not None and weekday != _DAYS[dt.weekday()]:
        raise ValueError(f"Invalid date value: {value}")

    return (dt - _EPOCH) // timedelta(seconds=1) * 1000


class HeaderStore:
    """
    Multi-valued headers with typed int/date accessors.

    Example:
        headers = HeaderStore()
        headers.add("k", "a")
        headers.add("k", "b")
        headers.set("k", "c")
        headers.get_all("k")   # ["c"]
    """

    def __init__(self):
        self._headers: Dict[str, List[str]] = {}

    # =========================================================================
    # WRITERS
    # =========================================================================

    def add(self, name: str, value: str) -> None:
        """Append a value, keeping any values already present."""
        require(name, "name")
        self._headers.setdefault(name, []).append(value)

    def set(self, name: str, value: str) -> None:
        """Replace all values for ``name`` with ``value``."""
        require(name, "name")
        self._headers[name] = [value]

    def add_int(self, name: str, value: int) -> None:
        self.add(name, str(int(value)))

    def set_int(self, name: str, value: int) -> None:
        self.set(name, str(int(value)))

    def add_date(self, name: str, millis: int) -> None:
        self.add(name, format_http_date(millis))

    def set_date(self, name: str, millis: int) -> None:
        self.set(name, format_http_date(millis))

    def reset(self) -> None:
        """Drop every header."""
        self._headers.clear()

    # =========================================================================
    # READERS
    # =========================================================================

    def contains(self, name: str) -> bool:
        return name in self._headers

    def get(self, name: str) -> Optional[str]:
        """First value of ``name``, or None if absent."""
        values = self._headers.get(name)
        return values[0] if values else None

    def get_int(self, name: str) -> int:
        """
        First value of ``name`` as an int.

        Returns:
            The parsed value, or -1 if the header is absent.

        Raises:
            HeaderFormatError: If the header is present but not an integer.
        """
        value = self.get(name)
        if value is None:
            return -1
        if not _INT_PATTERN.match(value):
            raise HeaderFormatError(name, value, "integer")
        return int(value)

    def get_date(self, name: str) -> int:
        """
        First value of ``name`` as epoch milliseconds (whole seconds).

        Returns:
            The parsed timestamp, or -1 if the header is absent.

        Raises:
            HeaderFormatError: If the header is present but not an RFC 1123 date.
        """
        value = self.get(name)
        if value is None:
            return -1
        try:
            return parse_http_date(value)
        except ValueError:
            raise HeaderFormatError(name, value, "date") from None

    def get_all(self, name: str) -> List[str]:
        """Copy of every value of ``name``; empty if absent."""
        return list(self._headers.get(name, ()))

    def names(self) -> List[str]:
        """Distinct header names in first-insertion order."""
        return list(self._headers)

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"HeaderStore({self._headers!r})"
