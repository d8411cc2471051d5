"""Service test fixtures — FastAPI test client over a fresh entity store.

Invariants:
    - Every test gets a fresh InMemoryStore (root conftest `store` fixture)
    - get_store dependency overridden to return that store
    - get_clock overridden to FIXED_NOW so statistics and trends are deterministic

Design Decisions:
    - ASGITransport without lifespan: the store is injected, not initialized on startup
    - Overrides cleared after each test so the app object stays reusable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from cooploan.api.dependencies import get_clock
from cooploan.infrastructure.memory_store import get_store
from cooploan.main import app
from cooploan.services.membership import register_member
from tests.factories import FIXED_NOW, PASSWORD


@pytest.fixture
async def client(store):
    """FastAPI test client with store and clock dependencies overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: FIXED_NOW

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def registered_member(store):
    """Active member with a known password, for login tests."""
    return register_member(
        store, name="Lena Ledger", email="lena@example.com", password=PASSWORD,
    )
