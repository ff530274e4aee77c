"""
Authentication module interface.

The editor and the store depend on IAuthProvider, not on the Supabase
implementation. This enables testing with mocks.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

from modules.profiles.models import User, UserUpdate

from .models import AuthResult, AuthSession

SessionCallback = Callable[[str, Optional[AuthSession]], None]


@runtime_checkable
class IAuthProvider(Protocol):
    """
    Interface for the authentication collaborator.

    Every call reports failures through ``AuthResult.error``.
    """

    def get_current_session(self) -> Optional[AuthSession]:
        """
        Get the session restored by the auth client.

        Returns:
            The session, or None when signed out
        """
        ...

    def on_session_change(self, callback: SessionCallback) -> Callable[[], None]:
        """
        Call ``callback(event, session)`` whenever the session changes.

        Returns:
            A function that stops the notifications
        """
        ...

    def sign_up(self, email: str, password: str, username: Optional[str] = None) -> AuthResult:
        """Create an account. ``username`` is stored in the user metadata."""
        ...

    def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password."""
        ...

    def sign_out(self) -> AuthResult:
        """End the current session."""
        ...

    def reset_password(self, email: str) -> AuthResult:
        """Send a password reset email."""
        ...

    def fetch_user(self, user_id: str, email: Optional[str] = None) -> AuthResult:
        """
        Load the application user row, creating it when missing.

        Args:
            user_id: Supabase user ID
            email: Email for the row created on first sign-in
        """
        ...

    def update_user(self, user: User, update: UserUpdate) -> AuthResult:
        """Persist editable user fields and return the merged user."""
        ...
