"""
Single-use builder for in-memory responses.

A response needs no configuration before it is used, so the builder only
guards the one-shot transition and picks the interface generation:

    ResponseBuilder().build()          → ResponseResult
    ResponseBuilder().build_legacy()   → LegacyResponseResult
"""

import logging
from typing import Optional

from ..config import BuilderConfig
from ..errors import BuilderLockedError
from .result import LegacyResponseResult, ResponseResult


logger = logging.getLogger(__name__)


class ResponseBuilder:
    """Builds exactly one response."""

    def __init__(self, config: Optional[BuilderConfig] = None):
        self._config = config or BuilderConfig()
        self._config.validate()
        self._locked = False

    def _lock(self) -> None:
        if self._locked:
            raise BuilderLockedError()
        self._locked = True

    def build(self) -> ResponseResult:
        """
        Create a current-generation response with status 200.

        Raises:
            BuilderLockedError: If this builder already built a response.
        """
        return self._seed(ResponseResult)

    def build_legacy(self) -> LegacyResponseResult:
        """
        Create a legacy-generation response with status 200.

        Raises:
            BuilderLockedError: If this builder already built a response.
        """
        return self._seed(LegacyResponseResult)

    def _seed(self, result_class):
        self._lock()
        result = result_class(self._config)
        result.reset()
        logger.debug(f"Built {result_class.__name__}")
        return result
