"""Error Hierarchy: typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400-level; database errors are 500-level
    - to_response() always produces the flat envelope {"error": "<message>"}
    - Database details stay in logs; the response carries a generic message
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity, drives the log level used by the API error handler."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.public_message = public_message or message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.public_message}


# --- Client errors (400-level) -------------------------------------------------

class InvalidRequestError(CatalogError):
    """Request could not be decoded (bad id, bad query, bad JSON body)."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ResourceNotFoundError(CatalogError):
    """No row matches the requested primary key."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# --- Infrastructure errors (500-level) -----------------------------------------

class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
            public_message="Database error",
        )
        self.operation = operation
