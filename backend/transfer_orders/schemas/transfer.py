"""Transfer Schemas — Pydantic wire models for the transfer order resource.

Invariants:
    - Every field is optional: an all-absent payload is a valid patch
    - Wire names are camelCase (sourceAccount, targetAccount); snake_case also accepted
    - id bounded to 0..2**63-1, status is one of the 5 tag names (case-sensitive)
    - amount round-trips without precision loss (Decimal in, decimal string out)

Design Decisions:
    - Separate wire model from the frozen domain dataclass: routes convert at the edge
    - NaN/Infinity amounts rejected at the boundary (not representable as money)
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from transfer_orders.core.domain_types import MAX_TRANSFER_ID, TransferStatus
from transfer_orders.core.transfer_order import TransferOrder


class TransferOrderSchema(BaseModel):
    """Transfer order as sent and received over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(None, ge=0, le=MAX_TRANSFER_ID)
    source_account: str | None = Field(None, alias="sourceAccount")
    target_account: str | None = Field(None, alias="targetAccount")
    amount: Decimal | None = Field(None, allow_inf_nan=False)
    status: TransferStatus | None = None

    def to_domain(self) -> TransferOrder:
        return TransferOrder(
            id=self.id,
            source_account=self.source_account,
            target_account=self.target_account,
            amount=self.amount,
            status=self.status,
        )

    @classmethod
    def from_domain(cls, order: TransferOrder) -> "TransferOrderSchema":
        return cls(
            id=order.id,
            source_account=order.source_account,
            target_account=order.target_account,
            amount=order.amount,
            status=order.status,
        )
