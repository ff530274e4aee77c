"""
Authentication module.

Supabase Auth sessions and the application ``users`` row, bridged into
the profile store's cached user.

Public API:
- IAuthProvider: Interface for auth operations
- SupabaseAuthService: supabase-py implementation
- AuthSession / AuthResult: session and outcome models
- Auth exceptions: AuthProviderError, NotSignedInError, UserNotFoundError
"""

from .interfaces import IAuthProvider, SessionCallback
from .models import AuthResult, AuthSession
from .exceptions import AuthProviderError, NotSignedInError, UserNotFoundError
from .service import (
    SupabaseAuthService,
    get_auth_service,
    map_session,
    map_user_row,
    reset_auth_service,
)

__all__ = [
    # Interface
    "IAuthProvider",
    "SessionCallback",
    # Models
    "AuthResult",
    "AuthSession",
    # Exceptions
    "AuthProviderError",
    "NotSignedInError",
    "UserNotFoundError",
    # Service
    "SupabaseAuthService",
    "get_auth_service",
    "map_session",
    "map_user_row",
    "reset_auth_service",
]
