"""Error Hierarchy — typed, categorized exceptions for all SiteList failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error surfaces to clients as HTTP 500 with its message as plain text
    - to_response() is the message itself: clients parse free text, no error envelope

Design Decisions:
    - Single hierarchy with SiteListError base: FastAPI global handler catches all (ADR: uniform error shape)
    - 500 for unsupported methods (not 405): existing clients depend on it
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    DATABASE = "database"
    ROUTING = "routing"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for server-side logs only."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    site_id: int | None = None
    method: str | None = None
    debug_info: dict[str, Any] | None = None


class SiteListError(Exception):
    """Base exception for all SiteList errors."""

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

    def to_response(self) -> str:
        """Plain-text body sent to the client."""
        return self.message

    def log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "site_id": self.context.site_id,
        }


# ─── Request Errors ─────────────────────────────────────────────

class DecodeError(SiteListError):
    """Request body is not a decodable Site document."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 500,
        )


class MethodNotImplementedError(SiteListError):
    """HTTP verb has no handler on the sites path."""
    def __init__(self, method: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.method = method
        super().__init__(
            "method not implemented", "METHOD_NOT_IMPLEMENTED",
            ErrorCategory.ROUTING, ErrorSeverity.WARNING, ctx, 500,
        )


# ─── Storage Errors ─────────────────────────────────────────────

class StorageError(SiteListError):
    """Store failure that escaped a session outside the record store."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"datastore {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class StorageWriteError(SiteListError):
    """Put of a Site failed. Message is the underlying store error, unchanged."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORAGE_WRITE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )


class StorageQueryError(SiteListError):
    """Ancestor query for Sites failed. Message is the underlying store error."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORAGE_QUERY_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
