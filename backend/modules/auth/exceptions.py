"""
Authentication module exceptions.

The service reports these through ``AuthResult`` instead of raising, but
they carry the codes used there and by API error handlers.
"""

from shared.exceptions import AuthenticationError, ExternalServiceError


class AuthProviderError(ExternalServiceError):
    """Raised when a Supabase Auth or users-table call fails."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            f"{operation} failed: {message}",
            service="supabase",
            code="AUTH_PROVIDER_ERROR",
            details={"operation": operation},
        )


class NotSignedInError(AuthenticationError):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self, message: str = "No user logged in"):
        super().__init__(message, code="NOT_SIGNED_IN")


class UserNotFoundError(AuthenticationError):
    """Raised when a users row cannot be found or created."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
