"""Error Hierarchy — typed, categorized exceptions for all storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Missing translations and bundle fallbacks are NOT errors (handled in place)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    LOCALIZATION = "localization"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: str | None = None
    locale: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

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
                "context": {
                    "product_id": self.context.product_id,
                    "locale": self.context.locale,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(StorefrontError):
    """Caller supplied a value outside the operation's domain."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class ProductNotFoundError(StorefrontError):
    """Product id is not part of the catalog."""
    def __init__(self, product_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__(
            f"Product '{product_id}' not found",
            "PRODUCT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class BundleNotLoadedError(StorefrontError):
    """A key was resolved before any locale bundle was installed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Locale bundle is still loading",
            "BUNDLE_NOT_LOADED", ErrorCategory.LOCALIZATION,
            ErrorSeverity.WARNING, context, 503,
        )


class BundleLoadError(StorefrontError):
    """The default locale bundle could not be loaded (nothing left to fall back to)."""
    def __init__(self, locale: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.locale = locale
        super().__init__(
            f"Default locale bundle '{locale}' unavailable: {reason}",
            "BUNDLE_LOAD_FAILED", ErrorCategory.LOCALIZATION,
            ErrorSeverity.CRITICAL, ctx, 503,
        )


class DatabaseError(StorefrontError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
