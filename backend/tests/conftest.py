"""Root conftest — shared test configuration and store/service fixtures."""

import os

import pytest

# Human-readable logs in test output
os.environ.setdefault("LOG_FORMAT", "text")

from transfer_orders.infrastructure.transfer_store import TransferOrderStore  # noqa: E402
from transfer_orders.services.transfer_service import TransferService  # noqa: E402


@pytest.fixture
def store():
    """Fresh, empty store per test."""
    return TransferOrderStore()


@pytest.fixture
def service(store):
    return TransferService(store)
