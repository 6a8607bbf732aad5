"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from requestbuilder import (
    InMemoryResourceResolver,
    RequestBuilder,
    ResponseBuilder,
    SyntheticResource,
)


@pytest.fixture
def resolver() -> InMemoryResourceResolver:
    """Resolver holding /content/page and a suffix resource."""
    resolver = InMemoryResourceResolver()
    resolver.create("/content/page", "app/page")
    resolver.create("/content/suffix")
    return resolver


@pytest.fixture
def resource(resolver) -> SyntheticResource:
    """The /content/page resource."""
    return resolver.get_resource("/content/page")


@pytest.fixture
def builder(resource) -> RequestBuilder:
    """Fresh request builder for /content/page."""
    return RequestBuilder(resource)


@pytest.fixture
def response():
    """Freshly built current-generation response."""
    return ResponseBuilder().build()


@pytest.fixture
def legacy_response():
    """Freshly built legacy-generation response."""
    return ResponseBuilder().build_legacy()
