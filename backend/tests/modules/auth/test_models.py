"""Tests for modules/auth/models.py."""

import pytest
from pydantic import ValidationError

from modules.auth.models import AuthResult, AuthSession


class TestAuthSession:
    def test_minimal(self):
        """Only user id and access token are required."""
        session = AuthSession(user_id="user-123", access_token="token")
        assert session.email is None
        assert session.user_metadata == {}

    def test_frozen(self):
        """Sessions are immutable."""
        session = AuthSession(user_id="user-123", access_token="token")
        with pytest.raises(ValidationError):
            session.user_id = "other"


class TestAuthResult:
    def test_ok_without_error(self):
        """A result without an error is ok."""
        assert AuthResult(user_id="user-123").ok

    def test_not_ok_with_error(self):
        """A result with an error is not ok."""
        result = AuthResult(error="Invalid login credentials", code="AUTH_PROVIDER_ERROR")
        assert not result.ok
