"""Tests for modules/auth/service.py."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from modules.auth.service import (
    SupabaseAuthService,
    get_auth_service,
    map_session,
    map_user_row,
)
from modules.plans.models import SubscriptionTier
from modules.profiles.models import UserUpdate
from tests.conftest import make_user


def make_session(user_id: str = "user-123", email: str = "test@example.com"):
    """A stand-in for a supabase-py Session."""
    return SimpleNamespace(
        user=SimpleNamespace(id=user_id, email=email, user_metadata={"username": "jane"}),
        access_token="access-token",
        refresh_token="refresh-token",
        expires_at=1705320000,
    )


def user_row(**overrides) -> dict:
    row = {
        "id": "user-123",
        "email": "test@example.com",
        "username": "jane",
        "full_name": "Jane Doe",
        "avatar_url": None,
        "subscription_tier": "pro",
        "subscription_status": "active",
        "created_at": "2024-01-15T12:00:00+00:00",
        "updated_at": "2024-01-15T12:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def service(client):
    return SupabaseAuthService(client)


def users_query(client):
    return client.table.return_value.select.return_value.eq.return_value


class TestMapping:
    def test_map_session(self):
        """Sessions should map onto AuthSession."""
        session = map_session(make_session())
        assert session.user_id == "user-123"
        assert session.email == "test@example.com"
        assert session.access_token == "access-token"
        assert session.user_metadata == {"username": "jane"}

    def test_map_session_none(self):
        """A missing session or user maps to None."""
        assert map_session(None) is None
        assert map_session(SimpleNamespace(user=None)) is None

    def test_map_user_row(self):
        """Rows should map onto the cached User."""
        user = map_user_row(user_row())
        assert user.id == "user-123"
        assert user.full_name == "Jane Doe"
        assert user.subscription_tier == SubscriptionTier.PRO
        assert user.profiles == []

    def test_map_user_row_defaults_tier(self):
        """Rows without a tier default to free."""
        assert map_user_row(user_row(subscription_tier=None)).subscription_tier == SubscriptionTier.FREE


class TestSessions:
    def test_get_current_session(self, service, client):
        """The restored session should be returned."""
        client.auth.get_session.return_value = make_session()
        assert service.get_current_session().user_id == "user-123"

    def test_get_current_session_error(self, service, client):
        """Provider errors read as signed out."""
        client.auth.get_session.side_effect = Exception("network down")
        assert service.get_current_session() is None

    def test_on_session_change(self, service, client):
        """Callbacks get the event name and a mapped session."""
        callback = MagicMock()
        subscription = MagicMock()
        client.auth.on_auth_state_change.return_value = subscription

        unsubscribe = service.on_session_change(callback)
        handler = client.auth.on_auth_state_change.call_args.args[0]
        handler("SIGNED_IN", make_session())

        event, session = callback.call_args.args
        assert event == "SIGNED_IN"
        assert session.user_id == "user-123"
        assert unsubscribe is subscription.unsubscribe


class TestCredentials:
    def test_sign_up_passes_username_metadata(self, service, client):
        """The username is stored in the user metadata."""
        client.auth.sign_up.return_value = SimpleNamespace(
            user=SimpleNamespace(id="user-123"), session=None
        )

        result = service.sign_up("test@example.com", "secret", username="jane")

        payload = client.auth.sign_up.call_args.args[0]
        assert payload["options"]["data"]["username"] == "jane"
        assert result.ok
        assert result.user_id == "user-123"
        assert result.session is None

    def test_sign_in(self, service, client):
        """Successful sign-in returns the session."""
        session = make_session()
        client.auth.sign_in_with_password.return_value = SimpleNamespace(
            user=session.user, session=session
        )

        result = service.sign_in("test@example.com", "secret")

        client.auth.sign_in_with_password.assert_called_once_with(
            {"email": "test@example.com", "password": "secret"}
        )
        assert result.session.access_token == "access-token"

    def test_sign_in_error(self, service, client):
        """Provider errors come back in the result."""
        client.auth.sign_in_with_password.side_effect = Exception("Invalid login credentials")

        result = service.sign_in("test@example.com", "wrong")

        assert not result.ok
        assert result.code == "AUTH_PROVIDER_ERROR"
        assert "Invalid login credentials" in result.error

    def test_sign_out(self, service, client):
        """sign_out reports success."""
        assert service.sign_out().ok
        client.auth.sign_out.assert_called_once()

    def test_reset_password_error(self, service, client):
        """Reset failures come back in the result."""
        client.auth.reset_password_for_email.side_effect = Exception("rate limited")
        assert service.reset_password("test@example.com").code == "AUTH_PROVIDER_ERROR"


class TestUsersTable:
    def test_fetch_existing_user(self, service, client):
        """Existing rows are returned as users."""
        users_query(client).execute.return_value.data = [user_row()]

        result = service.fetch_user("user-123")

        client.table.assert_called_with("users")
        assert result.user.username == "jane"

    def test_fetch_creates_missing_row(self, service, client):
        """A missing row is created on the free tier."""
        users_query(client).execute.return_value.data = []
        client.table.return_value.insert.return_value.execute.return_value.data = [
            user_row(subscription_tier="free", username=None)
        ]

        result = service.fetch_user("user-123", "test@example.com")

        inserted = client.table.return_value.insert.call_args.args[0]
        assert inserted["subscription_tier"] == "free"
        assert inserted["email"] == "test@example.com"
        assert result.user.subscription_tier == SubscriptionTier.FREE

    def test_fetch_missing_without_email(self, service, client):
        """Without an email no row can be created."""
        users_query(client).execute.return_value.data = []

        result = service.fetch_user("user-123")

        assert result.code == "USER_NOT_FOUND"
        client.table.return_value.insert.assert_not_called()

    def test_fetch_error(self, service, client):
        """Query failures come back in the result."""
        users_query(client).execute.side_effect = Exception("timeout")
        assert service.fetch_user("user-123").code == "AUTH_PROVIDER_ERROR"

    def test_update_user_requires_user(self, service, client):
        """Updating without a user fails without a query."""
        result = service.update_user(None, UserUpdate(full_name="Jane"))
        assert result.code == "NOT_SIGNED_IN"
        assert result.error == "No user logged in"
        client.table.assert_not_called()

    def test_update_user_writes_editable_columns_only(self, service, client):
        """Only username, full name and avatar are written."""
        query = client.table.return_value.update.return_value.eq.return_value
        query.execute.return_value.data = [
            user_row(full_name="Jane Q", updated_at="2024-02-01T00:00:00+00:00")
        ]
        user = make_user(user_id="user-123")

        result = service.update_user(
            user,
            UserUpdate(full_name="Jane Q", subscription_tier=SubscriptionTier.BUSINESS),
        )

        changes = client.table.return_value.update.call_args.args[0]
        assert changes["full_name"] == "Jane Q"
        assert "subscription_tier" not in changes
        assert "updated_at" in changes
        assert result.user.full_name == "Jane Q"
        assert result.user.subscription_tier == SubscriptionTier.FREE
        assert result.user.updated_at.month == 2


class TestStoreBridge:
    def test_sync_store_signed_in(self, service, client, store):
        """The signed-in user's row is pushed into the store."""
        client.auth.get_session.return_value = make_session()
        users_query(client).execute.return_value.data = [user_row()]

        result = service.sync_store(store)

        assert result.ok
        assert result.session.user_id == "user-123"
        assert store.user.subscription_tier == SubscriptionTier.PRO

    def test_sync_store_signed_out(self, service, client, store):
        """No session clears the cached user."""
        store.set_user(make_user())
        client.auth.get_session.return_value = None

        service.sync_store(store)

        assert store.user is None

    def test_sync_store_failure_leaves_store(self, service, client, store):
        """A failed fetch does not touch the store."""
        existing = make_user()
        store.set_user(existing)
        client.auth.get_session.return_value = make_session()
        users_query(client).execute.side_effect = Exception("timeout")

        result = service.sync_store(store)

        assert not result.ok
        assert store.user == existing

    def test_bind_store(self, service, client, store):
        """Session changes keep the store's user in step."""
        users_query(client).execute.return_value.data = [user_row()]
        service.bind_store(store)
        handler = client.auth.on_auth_state_change.call_args.args[0]

        handler("SIGNED_IN", make_session())
        assert store.user.id == "user-123"

        handler("SIGNED_OUT", None)
        assert store.user is None


class TestGetAuthService:
    def test_singleton(self):
        """get_auth_service should build one service on the anon client."""
        with patch("modules.auth.service.get_supabase_anon_client") as mock_client:
            first = get_auth_service()
            second = get_auth_service()
        assert first is second
        mock_client.assert_called_once()
