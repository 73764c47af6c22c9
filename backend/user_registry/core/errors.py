"""Error Hierarchy — typed, categorized exceptions for all user registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to exactly one HTTP status (400/403/404/405/409/500)
    - to_response() always carries `success: False` and a human-readable `message`
    - GracePeriodNotElapsedError (403) is never folded into validation (400)

Design Decisions:
    - Single hierarchy with UserRegistryError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - StoreError keeps the underlying driver detail so 500 responses are diagnosable
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    METHOD = "method"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    name: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class UserRegistryError(Exception):
    """Base exception for all user registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.detail = detail

    def to_response(self) -> dict:
        """Convert to the standard `{success, message, error}` envelope."""
        error = {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "user_id": self.context.user_id,
                "name": self.context.name,
                "operation": self.context.operation,
            },
        }
        if self.detail is not None:
            error["detail"] = self.detail
        return {"success": False, "message": self.message, "error": error}


# ─── Request Errors (400-level) ─────────────────────────────────

class FieldValidationError(UserRegistryError):
    """Required field missing or field value rejected by a validator."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class InvalidRecordStateError(UserRegistryError):
    """Stored record is missing data a rule depends on."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_RECORD_STATE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


class GracePeriodNotElapsedError(UserRegistryError):
    """Deletion attempted before the record reached the minimum age."""
    def __init__(self, grace_minutes: float, context: ErrorContext | None = None):
        super().__init__(
            f"Users cannot be deleted until {grace_minutes:g} minute(s) after creation.",
            "GRACE_PERIOD_NOT_ELAPSED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 403,
        )
        self.grace_minutes = grace_minutes


class ResourceNotFoundError(UserRegistryError):
    """Requested record does not exist."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class MethodNotAllowedError(UserRegistryError):
    """Endpoint called with the wrong HTTP verb."""
    def __init__(self, allowed: str, context: ErrorContext | None = None):
        super().__init__(
            f"Method not allowed. Only {allowed} requests are accepted.",
            "METHOD_NOT_ALLOWED", ErrorCategory.METHOD,
            ErrorSeverity.WARNING, context, 405,
        )
        self.allowed = allowed


class AmbiguousMatchError(UserRegistryError):
    """Name resolved to several records where exactly one is required."""
    def __init__(
        self, name: str, count: int, action: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.name = name
        super().__init__(
            f"{count} users share the name '{name}'. Use userId to {action}.",
            "AMBIGUOUS_NAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.count = count


# ─── Infrastructure Errors (500-level) ──────────────────────────

INTERNAL_ERROR_MESSAGE = "Internal server error."


class StoreError(UserRegistryError):
    """Store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            INTERNAL_ERROR_MESSAGE, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
            detail=f"Store {operation} failed: {message}",
        )
        self.operation = operation


class UnexpectedError(UserRegistryError):
    """Any other failure caught at the handler boundary."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500, detail=detail,
        )
