"""
=============================================================================
SESSION STUB
=============================================================================

In-memory session created lazily by a built request.

    ┌──────────┐   invalidate()   ┌─────────────┐
    │  VALID   │ ───────────────► │ INVALIDATED │ ── any read/write ──► error
    └──────────┘                  └─────────────┘
                                   invalidate() again ──► error

Once invalidated, every attribute operation, every timestamp read and a
second invalidate() raise SessionInvalidatedError. The id, the servlet
context and the max inactive interval stay readable.

=============================================================================
"""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from ..errors import SessionInvalidatedError, require


logger = logging.getLogger(__name__)


class HttpSession:
    """Attribute bag with a one-way invalidated flag."""

    def __init__(self, servlet_context, max_inactive_interval: int = 1800):
        self._servlet_context = servlet_context
        self._attributes: Dict[str, Any] = {}
        self._id = str(uuid.uuid4())
        self._creation_time = int(time.time() * 1000)
        self._max_inactive_interval = max_inactive_interval
        self._invalidated = False
        logger.debug(f"Created session {self._id}")

    def _check_invalidated(self) -> None:
        if self._invalidated:
            raise SessionInvalidatedError()

    # =========================================================================
    # UNCHECKED PROPERTIES
    # =========================================================================

    @property
    def id(self) -> str:
        return self._id

    @property
    def servlet_context(self):
        return self._servlet_context

    @property
    def max_inactive_interval(self) -> int:
        """Seconds of inactivity before a real container would expire the session."""
        return self._max_inactive_interval

    @max_inactive_interval.setter
    def max_inactive_interval(self, interval: int) -> None:
        self._max_inactive_interval = interval

    @property
    def is_invalidated(self) -> bool:
        return self._invalidated

    # =========================================================================
    # CHECKED PROPERTIES
    # =========================================================================

    @property
    def creation_time(self) -> int:
        """Creation time in epoch milliseconds."""
        self._check_invalidated()
        return self._creation_time

    @property
    def last_accessed_time(self) -> int:
        """Always the creation time; access is not tracked."""
        self._check_invalidated()
        return self._creation_time

    @property
    def is_new(self) -> bool:
        self._check_invalidated()
        return True

    # =========================================================================
    # ATTRIBUTES
    # =========================================================================

    def get_attribute(self, name: str) -> Optional[Any]:
        self._check_invalidated()
        return self._attributes.get(name)

    def get_attribute_names(self) -> List[str]:
        self._check_invalidated()
        return list(self._attributes)

    def set_attribute(self, name: str, value: Any) -> None:
        self._check_invalidated()
        require(name, "name")
        self._attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        self._check_invalidated()
        self._attributes.pop(name, None)

    # Legacy aliases for the attribute operations.
    get_value = get_attribute
    get_value_names = get_attribute_names
    put_value = set_attribute
    remove_value = remove_attribute

    def invalidate(self) -> None:
        """Invalidate the session. Not idempotent: a second call raises."""
        self._check_invalidated()
        self._invalidated = True
        logger.debug(f"Invalidated session {self._id}")
