"""Transfer Service — reconciliation rules between submitted orders and stored state.

Invariants:
    - new_transfer honors a caller id only when present AND unused; otherwise mints one
    - update_transfer is full replace-or-create: absent fields become absent
    - update_transfer_partially merges non-None fields over the stored order,
      or creates from the payload when nothing is stored at the target id
    - Target ids always win over payload ids for update operations
    - Status is carried through opaquely — transitions are never validated here
    - Not-found is expressed as False / None, never raised
    - new_transfer mints before it persists, so an exhausted sequence stores nothing

Design Decisions:
    - Check-then-act pairs (exists → update) are not atomic across callers on the
      same id: last persist wins (ADR: single-writer-per-id is the caller's contract)
    - delete_transfer uses the store's atomic remove, so concurrent deletes of one id
      report True exactly once
"""

import logging

from transfer_orders.core.errors import require
from transfer_orders.core.transfer_order import TransferOrder
from transfer_orders.infrastructure.transfer_store import TransferOrderStore

logger = logging.getLogger(__name__)


class TransferService:
    """CRUD-style operations over a TransferOrderStore."""

    def __init__(self, store: TransferOrderStore):
        self._store = store

    def does_transfer_exist(self, transfer_id: int) -> bool:
        return self._store.contains(transfer_id)

    def get_transfer(self, transfer_id: int) -> TransferOrder | None:
        return self._store.get(transfer_id)

    def get_transfers(self) -> frozenset[TransferOrder]:
        return self._store.get_all()

    def delete_transfer(self, transfer_id: int) -> bool:
        """Delete the order. True if it existed, False (no side effect) otherwise."""
        deleted = self._store.remove(transfer_id)
        if deleted:
            logger.info(
                f"Transfer {transfer_id} deleted",
                extra={"transfer_id": transfer_id},
            )
        return deleted

    def new_transfer(self, order: TransferOrder) -> TransferOrder:
        """Create an order, minting a fresh id when none was given or it collides."""
        require(order, "order", "new_transfer")
        if order.id is None or self._store.contains(order.id):
            requested_id = order.id
            order = order.with_id(self._store.generate_id())
            if requested_id is not None:
                logger.info(
                    f"Transfer id {requested_id} already used, assigned {order.id}",
                    extra={"transfer_id": order.id},
                )
        self._store.persist(order)
        logger.info(
            f"Transfer {order.id} created", extra={"transfer_id": order.id},
        )
        return order

    def update_transfer(
        self, transfer_id: int, order: TransferOrder,
    ) -> TransferOrder:
        """Replace (or create) the order at transfer_id with the payload as-is."""
        require(transfer_id, "transfer_id", "update_transfer")
        require(order, "order", "update_transfer", transfer_id)
        replaced = order.with_id(transfer_id)
        self._store.persist(replaced)
        logger.info(
            f"Transfer {transfer_id} replaced", extra={"transfer_id": transfer_id},
        )
        return replaced

    def update_transfer_partially(
        self, transfer_id: int, order: TransferOrder,
    ) -> TransferOrder:
        """Merge the payload's non-None fields into the order at transfer_id."""
        require(transfer_id, "transfer_id", "update_transfer_partially")
        require(order, "order", "update_transfer_partially", transfer_id)
        existing = self._store.get(transfer_id)
        if existing is not None:
            merged = existing.merge_non_null(order)
        else:
            # Nothing to merge with, the payload becomes the order
            merged = order.with_id(transfer_id)
        self._store.persist(merged)
        logger.info(
            f"Transfer {transfer_id} patched", extra={"transfer_id": transfer_id},
        )
        return merged
