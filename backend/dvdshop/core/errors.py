"""Error Hierarchy — typed, categorized exceptions for DVD shop failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Configuration errors (invalid discount, item or prices) are programming errors: 500-level
    - Input errors surfaced by the shell are recoverable: 400-level
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ShopError base: FastAPI global handler catches all
    - Structural input problems are returned as message lists by the parser,
      InputValidationError only wraps them at the HTTP boundary
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
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ShopError(Exception):
    """Base exception for all DVD shop errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Configuration Errors (500-level) ───────────────────────────

class InvalidDiscountError(ShopError):
    """Discount percentage outside [0, 100]."""
    def __init__(self, percentage: float, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid discount percentage: {percentage}. Must be between 0 and 100.",
            "INVALID_DISCOUNT", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.percentage = percentage


class InvalidItemError(ShopError):
    """PricedItem built with an inconsistent special flag / index pair."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ITEM", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class InvalidConfigurationError(ShopError):
    """Pricing configuration rejected (negative prices, empty currency)."""
    def __init__(self, message: str, setting: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_CONFIGURATION", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.setting = setting


# ─── Input Errors (400-level) ───────────────────────────────────

class InputValidationError(ShopError):
    """Structural problems reported by CartParser validation."""
    def __init__(self, problems: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Invalid cart input: {'; '.join(problems)}",
            "INPUT_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.problems = problems

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"message": problem} for problem in self.problems
        ]
        return response
