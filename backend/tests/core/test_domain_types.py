"""Domain Types — verifies identity types and the transfer status enum.

Tests:
    - TransferId wraps int
    - TransferStatus has exactly the 5 lifecycle tags, serialized by name
    - Status values are case-sensitive
"""

import pytest

from transfer_orders.core.domain_types import (
    MAX_TRANSFER_ID, TransferId, TransferStatus,
)


def test_transfer_id_wraps_int():
    assert TransferId(42) == 42


def test_max_transfer_id_is_signed_64_bit():
    assert MAX_TRANSFER_ID == 9_223_372_036_854_775_807


def test_transfer_status_has_five_tags():
    assert [s.value for s in TransferStatus] == [
        "PLANNED", "PROCESSING", "PENDING_RECEPTION", "FINISHED", "REJECTED",
    ]


def test_status_lookup_is_case_sensitive():
    assert TransferStatus("FINISHED") is TransferStatus.FINISHED
    with pytest.raises(ValueError):
        TransferStatus("finished")
