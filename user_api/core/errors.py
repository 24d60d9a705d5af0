"""Error Hierarchy — typed, categorized exceptions for all user API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry a human-readable message safe to return as-is
    - Storage errors (500-level) never carry driver details in their message
    - to_response() produces the REST envelope: {"message": ..., "error": {...}}

Design Decisions:
    - Single hierarchy with UserApiError base: one global handler catches all
    - Envelope: top-level "message" for humans, "error" for machine-readable fields
"""

from enum import Enum


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


class UserApiError(Exception):
    """Base exception for all user API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
            },
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(UserApiError):
    """Request input failed one or more validation rules."""
    def __init__(self, message: str, violations: list[str] | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.violations = violations or [message]

    @classmethod
    def from_violations(cls, violations: list[str]) -> "InputValidationError":
        return cls(", ".join(violations), violations)


class ResourceNotFoundError(UserApiError):
    """Requested resource does not exist."""
    def __init__(self, message: str = "User not found"):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class EmailConflictError(UserApiError):
    """Another user already owns the email address."""
    def __init__(self):
        super().__init__(
            "Email already exists", "EMAIL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
