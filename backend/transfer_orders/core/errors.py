"""Error Hierarchy — typed, categorized exceptions for transfer order failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Raised only for invalid arguments and an exhausted id sequence;
      not-found is a return value, never an exception
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TransferOrdersError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - InvalidArgumentError also subclasses ValueError: plain callers can catch the builtin
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CAPACITY = "capacity"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    transfer_id: int | None = None
    operation: str | None = None


class TransferOrdersError(Exception):
    """Base exception for all transfer order errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "transfer_id": self.context.transfer_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Programmer Errors (400-level) ──────────────────────────────

class InvalidArgumentError(TransferOrdersError, ValueError):
    """A required argument was None. Fatal to the call, never retried."""
    def __init__(self, argument: str, context: ErrorContext | None = None):
        super().__init__(
            f"Argument '{argument}' is required and cannot be None",
            "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


def require(
    value: Any,
    argument: str,
    operation: str | None = None,
    transfer_id: int | None = None,
) -> Any:
    """Fail fast with InvalidArgumentError when value is None; return it otherwise."""
    if value is None:
        raise InvalidArgumentError(
            argument,
            ErrorContext(transfer_id=transfer_id, operation=operation),
        )
    return value


# ─── Capacity Errors (500-level) ────────────────────────────────

class SequenceExhaustedError(TransferOrdersError):
    """No id is left below the wire limit. The sequence is left untouched."""
    def __init__(self, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Transfer id sequence exhausted (limit {limit})",
            "SEQUENCE_EXHAUSTED", ErrorCategory.CAPACITY,
            ErrorSeverity.CRITICAL, context, 507,
        )
        self.limit = limit
