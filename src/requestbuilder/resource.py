"""
Minimal content resources for addressing built requests.

A request is always built against a backing resource. Only two things are
read from it: its ``path`` and its ``resource_resolver`` (used to look up
the suffix resource). Any object with those attributes works; the classes
here are convenient stand-ins for tests.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


@dataclass
class SyntheticResource:
    """A resource that exists only as a path."""

    path: str
    resource_type: str = "sling/synthetic"
    resource_resolver: Optional["InMemoryResourceResolver"] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Last path segment."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]


class InMemoryResourceResolver:
    """
    Dictionary-backed resolver.

    Example:
        resolver = InMemoryResourceResolver()
        page = resolver.create("/content/page")
        resolver.get_resource("/content/page") is page   # True
    """

    def __init__(self):
        self._resources: Dict[str, SyntheticResource] = {}

    def create(self, path: str, resource_type: str = "sling/synthetic", **properties) -> SyntheticResource:
        """Register and return a resource bound to this resolver."""
        resource = SyntheticResource(path, resource_type, self, dict(properties))
        self._resources[path] = resource
        logger.debug(f"Registered resource {path}")
        return resource

    def get_resource(self, path: Optional[str]) -> Optional[SyntheticResource]:
        if path is None:
            return None
        return self._resources.get(path)
