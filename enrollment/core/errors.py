"""Error Hierarchy — typed, categorized exceptions for all enrollment failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the wire envelope {"error": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EnrollmentError base: FastAPI global handler catches all
    - Client-side failures (rejected, transport) share the hierarchy so the
      submission controller maps them to notifications in one place
"""

from dataclasses import dataclass, field
from enum import Enum
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
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    status_code: int | None = None


class EnrollmentError(Exception):
    """Base exception for all enrollment errors."""

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
        """Convert to the wire error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingFieldError(EnrollmentError):
    """A required enrollment field is absent or empty."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"{field_name} is required", "MISSING_FIELD",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, ctx, 400,
        )
        self.field_name = field_name


class SubmissionRejectedError(EnrollmentError):
    """Server answered a submission with a non-success status."""
    def __init__(self, message: str, status_code: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.status_code = status_code
        super().__init__(
            message, "SUBMISSION_REJECTED",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR, ctx, status_code,
        )
        self.status_code = status_code


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EnrollmentError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class EnrollmentCreateError(EnrollmentError):
    """Persisting an enrollment failed. The message never carries the cause."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to create enrollment", "ENROLLMENT_CREATE_FAILED",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, context, 500,
        )


class TransportFailureError(EnrollmentError):
    """No usable response was obtained from the enrollment endpoint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "TRANSPORT_FAILURE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )
