"""Dependency injection for the transfer order routes."""

from transfer_orders.infrastructure.transfer_store import get_store
from transfer_orders.services.transfer_service import TransferService


def get_transfer_service() -> TransferService:
    """FastAPI dependency — service bound to the process-wide store."""
    return TransferService(get_store())
