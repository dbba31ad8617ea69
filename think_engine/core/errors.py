"""Error Hierarchy - typed, categorized exceptions for every engine failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope; to_result() produces the tool result dict
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ThinkEngineError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Invariant violations are NOT raised: core check_* functions return error dicts
      (see error_result), keeping the error path identical to the success path
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    tool_name: str | None = None
    debug_info: dict[str, Any] | None = None


def error_result(code: str, message: str, **details: Any) -> dict:
    """Build the tool-result error dict consumed by dispatch and the envelope."""
    result = {"status": "error", "error_code": code, "message": message}
    if details:
        result["details"] = details
    return result


class ThinkEngineError(Exception):
    """Base exception for all engine errors."""

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

    def details(self) -> dict | None:
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "session_id": self.context.session_id,
                "tool_name": self.context.tool_name,
            },
        }
        details = self.details()
        if details:
            body["details"] = details
        return {"error": body}

    def to_result(self) -> dict:
        """Convert to the tool-result error dict."""
        return error_result(self.code, self.message, **(self.details() or {}))


# ─── Domain Errors (400-level) ──────────────────────────────────

class ArtifactValidationError(ThinkEngineError):
    """Artifact failed schema validation. Carries every offending field."""
    def __init__(
        self, artifact: str, fields: list[dict], context: ErrorContext | None = None,
    ):
        names = ", ".join(f["field"] or "<root>" for f in fields)
        super().__init__(
            f"Invalid {artifact}: {len(fields)} field error(s) ({names})",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.artifact = artifact
        self.fields = fields

    def details(self) -> dict:
        return {"fields": self.fields}


class ResourceNotFoundError(ThinkEngineError):
    """Requested session or resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
