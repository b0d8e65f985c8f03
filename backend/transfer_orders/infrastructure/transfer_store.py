"""Transfer Order Store — thread-safe in-memory keyed storage with monotonic ID minting.

Invariants:
    - A stored order always has a non-None id (persist rejects id=None)
    - The sequence is strictly greater than every id ever persisted or generated,
      so generate_id never returns a used id, whatever the interleaving
    - persist's write and sequence advance happen in one critical section
    - get_all returns a frozen snapshot: later writes are invisible to it
    - delete is idempotent; remove reports prior presence atomically
    - generate_id never mints past MAX_TRANSFER_ID; on exhaustion it raises and
      leaves the sequence as it was

Design Decisions:
    - One threading.Lock around dict + counter over lock-free tricks: every critical
      section is O(1) except the get_all copy, which is O(n) with no IO
      (ADR: simplicity over throughput, state is process-local anyway)
    - Orders are frozen dataclasses, so handing out stored values is safe (no copies)
    - Singleton store initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
"""

import logging
import threading

from transfer_orders.core.domain_types import (
    INITIAL_SEQUENCE, MAX_TRANSFER_ID, TransferId,
)
from transfer_orders.core.errors import (
    ErrorContext, SequenceExhaustedError, require,
)
from transfer_orders.core.transfer_order import TransferOrder

logger = logging.getLogger(__name__)


class TransferOrderStore:
    """Process-local transfer order repository. No business rules."""

    def __init__(self, initial_sequence: int = INITIAL_SEQUENCE):
        self._orders: dict[int, TransferOrder] = {}
        self._sequence = initial_sequence
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def contains(self, transfer_id: int) -> bool:
        require(transfer_id, "transfer_id", "contains")
        with self._lock:
            return transfer_id in self._orders

    def get(self, transfer_id: int) -> TransferOrder | None:
        """Stored order or None if absent."""
        require(transfer_id, "transfer_id", "get")
        with self._lock:
            return self._orders.get(transfer_id)

    def get_all(self) -> frozenset[TransferOrder]:
        """Snapshot of every stored order. Empty frozenset when nothing is stored."""
        with self._lock:
            return frozenset(self._orders.values())

    def persist(self, order: TransferOrder) -> None:
        """Insert or replace the order at order.id and push the sequence past it."""
        require(order, "order", "persist")
        transfer_id = require(order.id, "order.id", "persist")
        with self._lock:
            self._orders[transfer_id] = order
            if transfer_id >= self._sequence:
                self._sequence = transfer_id + 1

    def delete(self, transfer_id: int) -> None:
        """Remove the order if present. No-op otherwise."""
        require(transfer_id, "transfer_id", "delete")
        with self._lock:
            self._orders.pop(transfer_id, None)

    def remove(self, transfer_id: int) -> bool:
        """Remove the order and report whether it was present, in one step."""
        require(transfer_id, "transfer_id", "remove")
        with self._lock:
            return self._orders.pop(transfer_id, None) is not None

    def generate_id(self) -> TransferId:
        """Mint a never-used id. The first call on a fresh store returns the initial sequence.

        Raises SequenceExhaustedError once the next id would pass MAX_TRANSFER_ID.
        """
        with self._lock:
            transfer_id = self._sequence
            if transfer_id > MAX_TRANSFER_ID:
                raise SequenceExhaustedError(
                    MAX_TRANSFER_ID, ErrorContext(operation="generate_id"),
                )
            self._sequence += 1
        return TransferId(transfer_id)


# Singleton (initialized on startup)
transfer_store: TransferOrderStore | None = None


def init_store(initial_sequence: int = INITIAL_SEQUENCE) -> TransferOrderStore:
    global transfer_store
    transfer_store = TransferOrderStore(initial_sequence)
    logger.info(
        f"Transfer order store initialized (sequence starts at {initial_sequence})",
    )
    return transfer_store


def get_store() -> TransferOrderStore:
    if transfer_store is None:
        raise RuntimeError("Transfer order store not initialized")
    return transfer_store
