"""Error Hierarchy — typed exceptions for conditions that are NOT expected violations.

Invariants:
    - Expected rule violations are returned as Err values (core/result.py), never raised
    - Every exception here has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the same REST envelope shape as Err.to_response()
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GiftExchangeError base: FastAPI global handler catches all
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
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    room_id: int | None = None
    user_id: int | None = None
    debug_info: dict[str, Any] | None = None


class GiftExchangeError(Exception):
    """Base exception for all unexpected gift exchange errors."""

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
                    "room_id": self.context.room_id,
                    "user_id": self.context.user_id,
                },
            }
        }


class InvalidDrawInputError(GiftExchangeError):
    """Assignment generator called with input the caller should have rejected."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_DRAW_INPUT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class ConcurrencyError(GiftExchangeError):
    """Concurrent modification of the same room detected."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONCURRENCY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
