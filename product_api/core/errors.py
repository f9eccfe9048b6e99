"""Error Hierarchy — typed exceptions for every failure the API reports.

Invariants:
    - Every error carries a code (str) and an HTTP status
    - to_response() produces the REST envelope: {"error": message}
    - InputValidationError is the only error whose envelope is a list ({"errors": [...]})
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ProductApiError base: one global handler catches all
    - 4xx errors are recoverable; DatabaseError (503) is logged as critical
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for log routing."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ProductApiError(Exception):
    """Base exception for all product API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict[str, Any]:
        """Convert to REST error response."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class InputValidationError(ProductApiError):
    """One or more field rules rejected the request."""
    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            f"{len(errors)} field rule(s) failed",
            "VALIDATION_ERROR", ErrorSeverity.WARNING, 400,
        )
        self.errors = errors

    def to_response(self) -> dict[str, Any]:
        return {"errors": self.errors}


class ProductNotFoundError(ProductApiError):
    """No product row for the requested id."""
    def __init__(self, product_id: int):
        super().__init__(
            "Product not found", "PRODUCT_NOT_FOUND",
            ErrorSeverity.WARNING, 404,
        )
        self.product_id = product_id


class CorsOriginError(ProductApiError):
    """Request origin differs from the configured allowed origin."""
    def __init__(self, origin: str | None):
        super().__init__(
            "Origin not allowed by CORS", "CORS_REJECTED",
            ErrorSeverity.WARNING, 403,
        )
        self.origin = origin


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
