"""
Subscription plan data models.

Plan limits use ``None`` for "unlimited" rather than a numeric sentinel.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from shared.models import CamelModel


class SubscriptionTier(str, Enum):
    """User subscription tiers. The value is also the plan id."""

    FREE = "free"
    PRO = "pro"
    BUSINESS = "business"


class SubscriptionStatus(str, Enum):
    """Billing status of a subscription."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    CANCELLED = "cancelled"


class PlanInterval(str, Enum):
    """Billing interval."""

    MONTH = "month"
    YEAR = "year"


class SubscriptionPlan(CamelModel):
    """
    A subscription plan and its feature limits.

    Plans are static catalog entries and never change at runtime.
    """

    id: SubscriptionTier = Field(..., description="Plan id (same as the tier)")
    name: str = Field(..., description="Display name")
    price: Decimal = Field(..., description="Price per interval in USD")
    interval: PlanInterval = Field(default=PlanInterval.MONTH, description="Billing interval")
    features: list[str] = Field(default_factory=list, description="Marketing feature list")
    max_profiles: Optional[int] = Field(
        None,
        description="Maximum number of profiles, None for unlimited",
    )
    max_links: Optional[int] = Field(
        None,
        description="Maximum links per profile, None for unlimited",
    )
    custom_domains: bool = Field(default=False, description="Custom domains allowed")
    analytics: bool = Field(default=False, description="Analytics dashboard allowed")
    premium_themes: bool = Field(default=False, description="Premium theme presets allowed")

    @property
    def unlimited_links(self) -> bool:
        return self.max_links is None

    @property
    def unlimited_profiles(self) -> bool:
        return self.max_profiles is None

    def allows_links(self, count: int) -> bool:
        """Whether a profile may hold ``count`` links on this plan."""
        return self.max_links is None or count <= self.max_links

    def allows_profiles(self, count: int) -> bool:
        """Whether a user may own ``count`` profiles on this plan."""
        return self.max_profiles is None or count <= self.max_profiles
