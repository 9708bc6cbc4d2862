"""Integration-test fixtures.

Every test gets its own seeded DomainStore, injected into the app through a
dependency override, so tests never see each other's writes.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.lng_store.store import DomainStore, get_domain_store
from src.main import app


@pytest_asyncio.fixture
async def client(store: DomainStore) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_domain_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
