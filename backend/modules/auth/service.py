"""
Authentication service implementation.

Wraps Supabase Auth (sessions, sign-up/in/out, password reset) and the
``users`` table that holds the application-side user row. Every failure is
logged and returned in an ``AuthResult``; none of them touch store state.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, TYPE_CHECKING

from supabase import Client

from shared.database import get_supabase_anon_client
from modules.profiles.models import User, UserUpdate, fields_set

from .exceptions import AuthProviderError, NotSignedInError, UserNotFoundError
from .interfaces import SessionCallback
from .models import AuthResult, AuthSession

if TYPE_CHECKING:
    from modules.profiles.store import ProfileStore

logger = logging.getLogger(__name__)

USERS_TABLE = "users"

# users-table columns the editor may change
EDITABLE_USER_COLUMNS = ("username", "full_name", "avatar_url")


def map_session(session: Any) -> Optional[AuthSession]:
    """Convert a supabase-py ``Session`` into an ``AuthSession``."""
    if session is None or getattr(session, "user", None) is None:
        return None
    return AuthSession(
        user_id=session.user.id,
        email=session.user.email,
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=session.expires_at,
        user_metadata=dict(session.user.user_metadata or {}),
    )


def map_user_row(row: dict[str, Any]) -> User:
    """Convert a ``users`` row into the cached ``User`` model."""
    return User(
        id=row["id"],
        email=row["email"],
        username=row.get("username"),
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
        subscription_tier=row.get("subscription_tier") or "free",
        subscription_status=row.get("subscription_status") or "active",
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        profiles=[],
    )


def _failure(error: Exception, user_id: Optional[str] = None) -> AuthResult:
    code = getattr(error, "code", None)
    message = getattr(error, "message", None) or str(error)
    return AuthResult(user_id=user_id, error=message, code=code)


class SupabaseAuthService:
    """
    Implementation of the authentication collaborator on supabase-py.

    Uses the anon-key client so that Row Level Security applies to the
    ``users`` table.
    """

    def __init__(self, client: Optional[Client] = None):
        self._db = client or get_supabase_anon_client()

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    def get_current_session(self) -> Optional[AuthSession]:
        try:
            return map_session(self._db.auth.get_session())
        except Exception as e:
            logger.error(f"Error getting session: {e}")
            return None

    def on_session_change(self, callback: SessionCallback) -> Callable[[], None]:
        def handle(event: str, session: Any) -> None:
            callback(str(event), map_session(session))

        subscription = self._db.auth.on_auth_state_change(handle)
        return subscription.unsubscribe

    def sign_up(self, email: str, password: str, username: Optional[str] = None) -> AuthResult:
        try:
            response = self._db.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"username": username}},
                }
            )
        except Exception as e:
            logger.error(f"Error signing up {email}: {e}")
            return _failure(AuthProviderError("sign_up", str(e)))

        user_id = response.user.id if response.user else None
        return AuthResult(user_id=user_id, session=map_session(response.session))

    def sign_in(self, email: str, password: str) -> AuthResult:
        try:
            response = self._db.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.error(f"Error signing in {email}: {e}")
            return _failure(AuthProviderError("sign_in", str(e)))

        user_id = response.user.id if response.user else None
        return AuthResult(user_id=user_id, session=map_session(response.session))

    def sign_out(self) -> AuthResult:
        try:
            self._db.auth.sign_out()
        except Exception as e:
            logger.error(f"Error signing out: {e}")
            return _failure(AuthProviderError("sign_out", str(e)))
        return AuthResult()

    def reset_password(self, email: str) -> AuthResult:
        try:
            self._db.auth.reset_password_for_email(email)
        except Exception as e:
            logger.error(f"Error requesting password reset for {email}: {e}")
            return _failure(AuthProviderError("reset_password", str(e)))
        return AuthResult()

    # -------------------------------------------------------------------------
    # users table
    # -------------------------------------------------------------------------

    def fetch_user(self, user_id: str, email: Optional[str] = None) -> AuthResult:
        try:
            result = self._db.table(USERS_TABLE).select("*").eq("id", user_id).execute()
        except Exception as e:
            logger.error(f"Error fetching user profile {user_id}: {e}")
            return _failure(AuthProviderError("fetch_user", str(e)), user_id)

        if result.data:
            return AuthResult(user_id=user_id, user=map_user_row(result.data[0]))

        if not email:
            return _failure(UserNotFoundError(user_id), user_id)
        return self._create_user(user_id, email)

    def _create_user(self, user_id: str, email: str) -> AuthResult:
        logger.info(f"Creating users row for {user_id}")
        try:
            result = (
                self._db.table(USERS_TABLE)
                .insert(
                    {
                        "id": user_id,
                        "email": email,
                        "subscription_tier": "free",
                        "subscription_status": "active",
                    }
                )
                .execute()
            )
        except Exception as e:
            logger.error(f"Error creating user profile {user_id}: {e}")
            return _failure(AuthProviderError("create_user", str(e)), user_id)

        if not result.data:
            return _failure(UserNotFoundError(user_id), user_id)
        return AuthResult(user_id=user_id, user=map_user_row(result.data[0]))

    def update_user(self, user: Optional[User], update: UserUpdate) -> AuthResult:
        if user is None:
            return _failure(NotSignedInError())

        changes = {
            name: value
            for name, value in fields_set(update).items()
            if name in EDITABLE_USER_COLUMNS
        }
        changes["updated_at"] = datetime.now(timezone.utc).isoformat()

        try:
            result = (
                self._db.table(USERS_TABLE)
                .update(changes)
                .eq("id", user.id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error updating user {user.id}: {e}")
            return _failure(AuthProviderError("update_user", str(e)), user.id)

        if not result.data:
            return _failure(UserNotFoundError(user.id), user.id)

        row = result.data[0]
        data = user.model_dump()
        data.update({name: row.get(name) for name in EDITABLE_USER_COLUMNS if name in changes})
        data["updated_at"] = row["updated_at"]
        return AuthResult(user_id=user.id, user=User.model_validate(data))

    # -------------------------------------------------------------------------
    # Store bridge
    # -------------------------------------------------------------------------

    def sync_store(self, store: "ProfileStore") -> AuthResult:
        """
        Push the current session's user into ``store``.

        Signed out means ``store.set_user(None)``. When the users row cannot
        be loaded the store is left unchanged.
        """
        session = self.get_current_session()
        if session is None:
            store.set_user(None)
            return AuthResult()

        result = self.fetch_user(session.user_id, session.email)
        if result.ok:
            store.set_user(result.user)
        return result.model_copy(update={"session": session})

    def bind_store(self, store: "ProfileStore") -> Callable[[], None]:
        """
        Keep ``store``'s user in step with session changes.

        Returns:
            A function that stops the binding
        """

        def on_change(event: str, session: Optional[AuthSession]) -> None:
            if session is None:
                store.set_user(None)
                return
            result = self.fetch_user(session.user_id, session.email)
            if result.ok:
                store.set_user(result.user)

        return self.on_session_change(on_change)


# Module-level instance getter
_service_instance: Optional[SupabaseAuthService] = None


def get_auth_service() -> SupabaseAuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SupabaseAuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
