"""Error Hierarchy — verifies the invalid-argument and exhausted-sequence errors and their REST envelope."""

import pytest

from transfer_orders.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidArgumentError, SequenceExhaustedError, TransferOrdersError, require,
)


def test_invalid_argument_is_a_domain_error_and_value_error():
    err = InvalidArgumentError("transfer_id")
    assert isinstance(err, TransferOrdersError)
    assert isinstance(err, ValueError)
    assert err.http_status == 400
    assert err.code == "INVALID_ARGUMENT"
    assert err.category is ErrorCategory.VALIDATION
    assert err.severity is ErrorSeverity.ERROR
    assert err.argument == "transfer_id"


def test_to_response_envelope():
    err = InvalidArgumentError(
        "order.id", ErrorContext(transfer_id=5, operation="persist"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "INVALID_ARGUMENT"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert "order.id" in body["message"]
    assert body["context"] == {"transfer_id": 5, "operation": "persist"}
    assert body["timestamp"]


def test_require_returns_value_when_present():
    assert require(0, "transfer_id") == 0
    assert require("", "name") == ""


def test_require_raises_on_none_with_operation_context():
    with pytest.raises(InvalidArgumentError) as exc_info:
        require(None, "transfer_id", "get")
    assert exc_info.value.context.operation == "get"


def test_require_carries_transfer_id_into_context():
    with pytest.raises(InvalidArgumentError) as exc_info:
        require(None, "order", "update_transfer", 7)
    assert exc_info.value.context.transfer_id == 7
    assert exc_info.value.to_response()["error"]["context"] == {
        "transfer_id": 7, "operation": "update_transfer",
    }


def test_sequence_exhausted_is_critical_capacity_error():
    err = SequenceExhaustedError(2**63 - 1, ErrorContext(operation="generate_id"))
    assert isinstance(err, TransferOrdersError)
    assert not isinstance(err, ValueError)
    assert err.http_status == 507
    assert err.code == "SEQUENCE_EXHAUSTED"
    assert err.category is ErrorCategory.CAPACITY
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.limit == 2**63 - 1
    assert err.to_response()["error"]["context"]["operation"] == "generate_id"
