"""Error Hierarchy — typed, categorized exceptions for sales ledger failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - NotFound, empty results, dangling customer references and out-of-range
      limits are NOT errors: they are reported as normal results
    - Only tool input validation and infrastructure failures are raised
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SalesLedgerError base: callers catch one type for
      everything the package raises on purpose
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None


class SalesLedgerError(Exception):
    """Base exception for all sales ledger errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the error envelope returned to tool callers."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "tool_name": self.context.tool_name,
        }


# ─── Caller Errors ──────────────────────────────────────────────

class ToolValidationError(SalesLedgerError):
    """Tool input validation failed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["field"] = self.field
        return response


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(SalesLedgerError):
    """Data store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
