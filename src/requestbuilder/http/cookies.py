"""
Cookie value object used by requests and responses.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Cookie:
    """
    A single HTTP cookie.

    Only the name and value matter to the in-memory objects; the remaining
    attributes are carried so that tests can assert on what a handler set.
    """

    name: str
    value: Optional[str] = None
    path: Optional[str] = None
    domain: Optional[str] = None
    max_age: int = -1              # -1 = session cookie
    secure: bool = False
    http_only: bool = False
    comment: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Cookie name must not be empty")
