"""
=============================================================================
REQUEST PATH INFO
=============================================================================

A content-addressed request path is split into positional segments:

    /content/page.tidy.json.html/extra/suffix
    ─────┬─────── ────┬──── ─┬── ──────┬─────
         │            │      │         │
    resource path  selectors ext     suffix

The split itself belongs to the URI builder. The request builder never
parses a path: it hands the resource plus explicit selectors, extension and
suffix to a UriBuilder and keeps the RequestPathInfo it gets back.

=============================================================================
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..errors import require


@dataclass(frozen=True)
class RequestPathInfo:
    """Decomposed request path. Immutable once built."""

    resource_path: str
    selectors: Tuple[str, ...] = ()
    extension: Optional[str] = None
    suffix: Optional[str] = None
    resource_resolver: Optional[object] = None

    @property
    def selector_string(self) -> Optional[str]:
        """Selectors joined with '.', or None when there are none."""
        return ".".join(self.selectors) if self.selectors else None

    def get_suffix_resource(self):
        """Resource addressed by the suffix, or None."""
        if self.suffix is None or self.resource_resolver is None:
            return None
        return self.resource_resolver.get_resource(self.suffix)

    def __str__(self) -> str:
        path = self.resource_path
        if self.selector_string is not None:
            path += "." + self.selector_string
        if self.extension is not None:
            path += "." + self.extension
        if self.suffix is not None:
            path += self.suffix
        return path


class UriBuilder:
    """
    Fluent builder producing a RequestPathInfo for a resource.

    Example:
        info = (UriBuilder.create_from(resource)
            .set_selectors(["tidy", "json"])
            .set_extension("html")
            .to_request_path_info())
    """

    def __init__(self, resource_path: str, resource_resolver=None):
        self._resource_path = resource_path
        self._resource_resolver = resource_resolver
        self._selectors: Tuple[str, ...] = ()
        self._extension: Optional[str] = None
        self._suffix: Optional[str] = None

    @classmethod
    def create_from(cls, resource) -> "UriBuilder":
        """Seed a builder with the path and resolver of ``resource``."""
        require(resource, "resource")
        return cls(resource.path, getattr(resource, "resource_resolver", None))

    def set_selectors(self, selectors: Optional[Sequence[str]]) -> "UriBuilder":
        self._selectors = tuple(selectors) if selectors else ()
        return self

    def set_extension(self, extension: Optional[str]) -> "UriBuilder":
        self._extension = extension
        return self

    def set_suffix(self, suffix: Optional[str]) -> "UriBuilder":
        self._suffix = suffix
        return self

    def to_request_path_info(self) -> RequestPathInfo:
        return RequestPathInfo(
            resource_path=self._resource_path,
            selectors=self._selectors,
            extension=self._extension,
            suffix=self._suffix,
            resource_resolver=self._resource_resolver,
        )
