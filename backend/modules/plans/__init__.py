"""
Subscription plans module.

Public API:
- SubscriptionPlan: plan model with feature limits
- SubscriptionTier / SubscriptionStatus / PlanInterval: enums
- SUBSCRIPTION_PLANS: the static catalog
- get_plan / get_free_plan: catalog lookups
"""

from .models import (
    PlanInterval,
    SubscriptionPlan,
    SubscriptionStatus,
    SubscriptionTier,
)
from .catalog import SUBSCRIPTION_PLANS, get_free_plan, get_plan

__all__ = [
    "PlanInterval",
    "SubscriptionPlan",
    "SubscriptionStatus",
    "SubscriptionTier",
    "SUBSCRIPTION_PLANS",
    "get_free_plan",
    "get_plan",
]
