"""
Static subscription plan catalog.
"""

from decimal import Decimal
from typing import Optional, Union

from .models import PlanInterval, SubscriptionPlan, SubscriptionTier


SUBSCRIPTION_PLANS: tuple[SubscriptionPlan, ...] = (
    SubscriptionPlan(
        id=SubscriptionTier.FREE,
        name="Free",
        price=Decimal("0"),
        interval=PlanInterval.MONTH,
        features=[
            "1 profile",
            "10 links",
            "Basic themes",
            "Basic analytics",
        ],
        max_profiles=1,
        max_links=10,
        custom_domains=False,
        analytics=False,
        premium_themes=False,
    ),
    SubscriptionPlan(
        id=SubscriptionTier.PRO,
        name="Pro",
        price=Decimal("9.99"),
        interval=PlanInterval.MONTH,
        features=[
            "5 profiles",
            "Unlimited links",
            "Premium themes",
            "Advanced analytics",
            "QR codes",
            "Custom domains",
        ],
        max_profiles=5,
        max_links=None,
        custom_domains=True,
        analytics=True,
        premium_themes=True,
    ),
    SubscriptionPlan(
        id=SubscriptionTier.BUSINESS,
        name="Business",
        price=Decimal("29.99"),
        interval=PlanInterval.MONTH,
        features=[
            "Unlimited profiles",
            "Unlimited links",
            "All themes",
            "Advanced analytics",
            "QR codes",
            "Custom domains",
            "Team collaboration",
            "Priority support",
        ],
        max_profiles=None,
        max_links=None,
        custom_domains=True,
        analytics=True,
        premium_themes=True,
    ),
)


def get_plan(
    tier: Union[SubscriptionTier, str],
    plans: tuple[SubscriptionPlan, ...] = SUBSCRIPTION_PLANS,
) -> Optional[SubscriptionPlan]:
    """Look up a plan by tier/id. Returns None for unknown tiers."""
    key = tier.value if isinstance(tier, SubscriptionTier) else str(tier)
    for plan in plans:
        if plan.id.value == key:
            return plan
    return None


def get_free_plan() -> SubscriptionPlan:
    """The plan that applies when no user is signed in."""
    return SUBSCRIPTION_PLANS[0]
