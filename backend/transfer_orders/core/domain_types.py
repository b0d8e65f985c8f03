"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TransferId wraps int — a stored order always carries one, 0..MAX_TRANSFER_ID
    - TransferStatus is a closed set of 5 lifecycle tags, carried through untouched
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Status transitions are NOT validated here: the caller owns the lifecycle
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TransferId = NewType("TransferId", int)

# IDs are 64-bit signed on the wire, never negative once assigned
MAX_TRANSFER_ID = 2**63 - 1
INITIAL_SEQUENCE = 0


# ─── Enums ───────────────────────────────────────────────────────

class TransferStatus(str, Enum):
    """Transfer order lifecycle tags — opaque to the service layer."""
    PLANNED = "PLANNED"                      # created, waiting for processing
    PROCESSING = "PROCESSING"                # picked up by a processor
    PENDING_RECEPTION = "PENDING_RECEPTION"  # done on our side, awaiting recipient
    FINISHED = "FINISHED"                    # delivered, terminal
    REJECTED = "REJECTED"                    # rejected by user or system, terminal
