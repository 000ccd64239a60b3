"""Error Hierarchy: typed, categorized exceptions for every sort-service failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400) are carried inside a Rejected result, never raised to the client
    - to_response() produces the REST envelope; to_log_extra() produces logging extras
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SortServiceError base: one global handler catches all
    - ErrorContext as dataclass: observability data without coupling to the logging setup
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    TRANSPORT = "transport"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class SortServiceError(Exception):
    """Base exception for all sort-service errors."""

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
            }
        }

    def to_log_extra(self) -> dict:
        """Structured fields for logger.*(..., extra=...)."""
        return {"error_code": self.code, "path": self.context.path}


# ─── Validation Errors (400-level) ──────────────────────────────

class NumberArrayError(SortServiceError):
    """Request body is not an array of finite numbers."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingBodyError(NumberArrayError):
    """No body, a non-JSON content type, or unparseable JSON."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(f"Missing request body: {reason}", "MISSING_BODY", context)
        self.reason = reason


class ShapeError(NumberArrayError):
    """Top-level value is not an array."""
    def __init__(self, found: str, context: ErrorContext | None = None):
        super().__init__(f"Expected array, received {found}", "SHAPE_ERROR", context)
        self.found = found


class ElementTypeError(NumberArrayError):
    """An array element is not a finite number."""
    def __init__(self, index: int, found: str, context: ErrorContext | None = None):
        super().__init__(
            f"Expected number at index {index}, received {found}",
            "ELEMENT_TYPE_ERROR", context,
        )
        self.index = index
        self.found = found

    def to_log_extra(self) -> dict:
        return {**super().to_log_extra(), "error_index": self.index}


# ─── Transport Errors ───────────────────────────────────────────

class PayloadTooLargeError(SortServiceError):
    """Request body exceeds the configured size limit."""
    def __init__(self, size: int, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Request body of {size} bytes exceeds limit of {limit} bytes",
            "PAYLOAD_TOO_LARGE", ErrorCategory.TRANSPORT,
            ErrorSeverity.WARNING, context, 413,
        )
        self.size = size
        self.limit = limit
