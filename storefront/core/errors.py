"""
Error hierarchy for the storefront backend.

Every error raised by the domain and application layers is an ApiError
carrying the HTTP status the API layer should answer with and a
human-readable message. The global handlers in api/error_handlers.py turn
them into {"code": <status>, "message": <text>} responses.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class ApiError(Exception):
    """Base exception for all storefront errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_response(self) -> Dict[str, Any]:
        """Convert to the REST error body."""
        body: Dict[str, Any] = {"code": self.status_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(ApiError):
    """Raised when a domain model rejects a field value (email, password, ...)."""
    status_code = 400


class BadRequestError(ApiError):
    """Raised when a request breaks a cart or user business rule."""
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class ForbiddenError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    """Raised when a versioned save finds the document changed underneath it."""
    status_code = 409


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class InternalError(ApiError):
    """Raised when persistence fails in a way the caller cannot fix."""
    status_code = 500
