"""Transfer Order — immutable value describing a money transfer between two accounts.

Invariants:
    - Frozen: fields never change after construction, every change is a new value
    - Equality and hash are over all 5 fields (value equality, set-friendly)
    - id is None only before first persistence; a stored order always has one
    - merge_non_null never touches id (the target id is decided by the caller)

Design Decisions:
    - frozen dataclass over pydantic model: core stays framework-free, schemas/ owns the wire
    - dataclasses.replace for derivation: one pure "copy with overrides" primitive
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from transfer_orders.core.domain_types import TransferStatus
from transfer_orders.core.errors import require

# Fields a partial update may override; id is deliberately absent
MERGEABLE_FIELDS = ("source_account", "target_account", "amount", "status")


@dataclass(frozen=True)
class TransferOrder:
    """A transfer order. Every field is optional until reconciled by the service."""

    id: int | None = None
    source_account: str | None = None
    target_account: str | None = None
    amount: Decimal | None = None
    status: TransferStatus | None = None

    def copy(self) -> "TransferOrder":
        """Shallow copy — equal to, but not the same object as, self."""
        return replace(self)

    def with_id(self, transfer_id: int) -> "TransferOrder":
        return replace(self, id=transfer_id)

    def merge_non_null(self, patch: "TransferOrder") -> "TransferOrder":
        """Copy of self with every non-None mergeable field of patch applied."""
        require(patch, "patch", "merge_non_null", self.id)
        overrides = {
            name: getattr(patch, name)
            for name in MERGEABLE_FIELDS
            if getattr(patch, name) is not None
        }
        return replace(self, **overrides)
