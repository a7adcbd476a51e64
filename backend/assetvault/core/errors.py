"""Error Hierarchy — typed, categorized exceptions for every asset repository failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are never retried; store errors (500-level) surface as-is
    - PersistenceError always names the operation that failed
    - to_response() produces a transport-neutral envelope for whatever layer sits above

Design Decisions:
    - Single hierarchy with AssetVaultError base: one except clause catches everything
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    asset_type: str | None = None
    asset_id: int | None = None
    user_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class AssetVaultError(Exception):
    """Base exception for all asset repository errors."""

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
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "asset_type": self.context.asset_type,
                    "asset_id": self.context.asset_id,
                    "user_id": self.context.user_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class UnknownAssetTypeError(AssetVaultError):
    """Asset type or payload outside the closed {insight, chart, audience} set."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown asset type: {value!r}",
            "UNKNOWN_ASSET_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class AssetValidationError(AssetVaultError):
    """Request arguments failed validation (non-positive id, oversized limit)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class AssetNotFoundError(AssetVaultError):
    """No row with the requested id exists for the given asset type."""
    def __init__(
        self, asset_type: str, asset_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.asset_type = asset_type
        ctx.asset_id = asset_id
        super().__init__(
            f"{asset_type} '{asset_id}' not found",
            "ASSET_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.asset_type = asset_type
        self.asset_id = asset_id


class AlreadyFavouritedError(AssetVaultError):
    """User already holds a favourite mark for this asset."""
    def __init__(
        self,
        user_id: int,
        asset_id: int,
        asset_type: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        ctx.asset_id = asset_id
        ctx.asset_type = asset_type
        super().__init__(
            f"User {user_id} already favourited {asset_type} '{asset_id}'",
            "ALREADY_FAVOURITED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.user_id = user_id
        self.asset_id = asset_id
        self.asset_type = asset_type


# ─── Store Errors (500-level) ───────────────────────────────────

class PersistenceError(AssetVaultError):
    """The relational store failed while running an operation."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"{operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
