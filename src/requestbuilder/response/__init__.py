"""
In-memory responses.

Exports:
    - ResponseBuilder: single-use builder
    - ResponseResult / LegacyResponseResult: built responses (current / legacy generation)
    - ResponseOutputStream, ResponseWriter: output accessors over the buffer
"""

from .builder import ResponseBuilder
from .result import LegacyResponseResult, ResponseOutputStream, ResponseResult, ResponseWriter

__all__ = [
    "LegacyResponseResult",
    "ResponseBuilder",
    "ResponseOutputStream",
    "ResponseResult",
    "ResponseWriter",
]
