"""Error Hierarchy — typed, categorized exceptions for fiscal code failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Encode and decode raise these; validation never raises (returns False instead)
    - to_response() produces the REST envelope used by the API error handlers
    - Messages never echo personal data (names, birth dates)

Design Decisions:
    - Single hierarchy with FiscalCodeError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class FiscalCodeError(Exception):
    """Base exception for all fiscal code errors."""

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
                    "field": self.context.field,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Input Validation Errors (400-level) ────────────────────────

class MissingFieldError(FiscalCodeError):
    """A required identity field is empty or missing."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f"Field '{field}' is required.",
            "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class InvalidGenderError(FiscalCodeError):
    """Gender is neither 'M' nor 'F'."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "gender"
        super().__init__(
            f"Gender must be either 'M' or 'F', got {value!r}.",
            "INVALID_GENDER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value = value


class InvalidPlaceCodeError(FiscalCodeError):
    """Place code is not exactly 4 characters."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "place_code"
        super().__init__(
            f"Place code must be exactly 4 characters, got {len(value)}.",
            "INVALID_PLACE_CODE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value = value


class InvalidCharacterError(FiscalCodeError):
    """Checksum input contains characters outside A-Z / 0-9 or has the wrong length."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        super().__init__(
            "Checksum input must be exactly 15 characters from A-Z and 0-9.",
            "INVALID_CHARACTER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class InvalidFiscalCodeError(FiscalCodeError):
    """Fiscal code is formally invalid and cannot be decoded."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid fiscal code: {reason}",
            "INVALID_FISCAL_CODE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.reason = reason
