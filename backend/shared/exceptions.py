"""
Base exception classes for the Linkora backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class LinkoraError(Exception):
    """
    Base exception for all Linkora errors.

    All custom exceptions should inherit from this class.
    ``status_code`` is the HTTP status the public API answers with when the
    error escapes a route.
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(LinkoraError):
    """Resource not found."""

    status_code = 404


class ValidationError(LinkoraError):
    """Input validation failed."""

    status_code = 422


class AuthenticationError(LinkoraError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(LinkoraError):
    """Authorization failed (plan or permission does not allow the operation)."""

    status_code = 403


class ExternalServiceError(LinkoraError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
