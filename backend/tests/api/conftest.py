"""API test fixtures — FastAPI test client over a fresh in-memory store.

Invariants:
    - Every test gets a fresh, empty TransferOrderStore
    - get_transfer_service dependency overridden to use the test store
    - Store singleton patched for code that reads it directly (readiness probe)

Design Decisions:
    - httpx AsyncClient + ASGITransport: no server, no lifespan, no sockets
"""

import pytest
from httpx import ASGITransport, AsyncClient

from transfer_orders.api.dependencies import get_transfer_service
from transfer_orders.services.transfer_service import TransferService
import transfer_orders.infrastructure.transfer_store as store_module
from transfer_orders.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_transfer_service] = (
        lambda: TransferService(store)
    )

    original_store = store_module.transfer_store
    store_module.transfer_store = store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    store_module.transfer_store = original_store
