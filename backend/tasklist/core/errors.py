"""Error Hierarchy: typed, categorized exceptions for every task-list failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - Missing and not-owned resources raise the same ResourceNotFoundError
    - Login failures never reveal whether the username exists
    - No passwords, hashes or tokens in messages
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """When the error happened, plus an optional client-facing message."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_message: str | None = None


class TaskListError(Exception):
    """Base exception for all task-list errors."""

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
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InputValidationError(TaskListError):
    """Malformed input. Never retried."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class DuplicateUsernameError(TaskListError):
    """Registration conflict on an existing username."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            f"Username '{username}' is already taken",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.username = username


class InvalidCredentialsError(TaskListError):
    """Unknown username or wrong password (deliberately indistinguishable)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid username or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthenticationError(TaskListError):
    """Session token rejected."""


class InvalidTokenError(AuthenticationError):
    """Token is malformed, forged or altered."""
    def __init__(self, reason: str = "Invalid token", context: ErrorContext | None = None):
        super().__init__(
            reason, "INVALID_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ExpiredTokenError(AuthenticationError):
    """Token signature is valid but its expiry has passed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Token has expired", "EXPIRED_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.INFO, context, 401,
        )


class ResourceNotFoundError(TaskListError):
    """Requested resource does not exist or is not owned by the requester."""
    def __init__(
        self, resource_type: str, resource_id: int | str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(TaskListError):
    """Storage backend operation failed. Propagated unchanged, never retried."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ConfigurationError(TaskListError):
    """Process-level misconfiguration (e.g. signing key). Fatal at startup."""
    def __init__(self, message: str, setting: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.setting = setting
