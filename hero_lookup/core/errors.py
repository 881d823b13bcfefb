"""Error Hierarchy - typed, categorized exceptions for hero lookup failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - "Hero not found" is NOT an error: it is the empty-name sentinel, answered with 404
    - to_response() produces the REST envelope; no internal details leak into it

Design Decisions:
    - Single hierarchy with HeroLookupError base: FastAPI global handler catches all
      (ADR: uniform error shape)
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
    EXTERNAL_PROVIDER = "external_provider"
    SERIALIZATION = "serialization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never for the response body."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    hero_id: str | None = None
    debug_info: dict[str, Any] | None = None


class HeroLookupError(Exception):
    """Base exception for all hero lookup errors."""

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


# ─── Infrastructure Errors (500-level) ──────────────────────────

class HeroStoreError(HeroLookupError):
    """The hero data provider failed or could not be loaded."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Hero store {operation} failed",
            "HERO_STORE_ERROR", ErrorCategory.EXTERNAL_PROVIDER,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class PowerStatSerializationError(HeroLookupError):
    """Power stat records returned by the provider could not be encoded."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Power stats could not be serialized",
            "SERIALIZATION_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
