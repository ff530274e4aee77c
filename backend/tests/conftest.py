"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timedelta, timezone

from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import reset_client_cache
from modules.auth.service import reset_auth_service
from modules.plans.models import SubscriptionTier
from modules.profiles.models import User
from modules.profiles.persistence import InMemoryStorage
from modules.profiles.store import ProfileStore


class FakeClock:
    """Deterministic clock that advances one second per reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)):
        self.now = start
        self.step = timedelta(seconds=1)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


def make_user(
    tier: SubscriptionTier = SubscriptionTier.FREE,
    user_id: str = "test-user-123",
    email: str = "test@example.com",
) -> User:
    """Create a cached user on the given tier."""
    return User(id=user_id, email=email, subscription_tier=tier)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and services before and after each test."""
    get_settings.cache_clear()
    reset_auth_service()
    reset_client_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_auth_service()
    reset_client_cache()
    reset_container()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage: InMemoryStorage, clock: FakeClock) -> ProfileStore:
    """A store with one default profile, persisting to memory."""
    return ProfileStore(storage=storage, origin="https://linkora.app", clock=clock)


@pytest.fixture
def free_user() -> User:
    return make_user(SubscriptionTier.FREE)


@pytest.fixture
def pro_user() -> User:
    return make_user(SubscriptionTier.PRO)


@pytest.fixture
def business_user() -> User:
    return make_user(SubscriptionTier.BUSINESS)
