"""API test fixtures - async httpx client against the ASGI app.

Invariants:
    - Every test gets a client with the full default catalog
    - dependency_overrides cleared after each test

Design Decisions:
    - ASGITransport without lifespan: the catalog comes from the dependency,
      so no startup hook is needed for route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inputguard.core.feature_catalog import FeatureCatalog
from inputguard.infrastructure.feature_registry import get_feature_catalog
from inputguard.main import app


@pytest.fixture
def catalog():
    return FeatureCatalog.default()


@pytest.fixture
async def client(catalog):
    """FastAPI test client with the feature catalog dependency overridden."""
    app.dependency_overrides[get_feature_catalog] = lambda: catalog

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
