"""Error Hierarchy - typed, categorized exceptions for InputGuard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ArgumentError (400) marks a malformed call; authorization denial is NOT an error
    - ConfigurationError (500) only happens while loading the feature catalog
    - to_response() produces the REST envelope consumed by api/error_handlers

Design Decisions:
    - Single hierarchy with InputGuardError base: FastAPI global handler catches all
      (ADR: uniform error shape)
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
    """Context attached to an error for debugging. Never holds raw input values."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    feature: str | None = None
    argument: str | None = None
    debug_info: dict[str, Any] | None = None


class InputGuardError(Exception):
    """Base exception for all InputGuard errors."""

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
                    "feature": self.context.feature,
                    "argument": self.context.argument,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ArgumentError(InputGuardError):
    """Structurally invalid filter call (missing user/feature/input, unknown feature)."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.argument = argument
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.argument = argument


# ─── Startup Errors (500-level) ─────────────────────────────────

class ConfigurationError(InputGuardError):
    """Feature registry supplied identifiers this core does not know."""
    def __init__(self, message: str, unknown: list[str] | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL,
            ErrorContext(debug_info={"unknown": unknown or []}), 500,
        )
        self.unknown = unknown or []
