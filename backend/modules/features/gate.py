"""
Feature gate.

Pure predicates combining a user's subscription tier with the plan catalog.
The user's tier is authoritative; a profile's own ``subscription_tier`` is
display metadata and is never consulted here.
"""

from typing import Optional, Union, TYPE_CHECKING

from modules.plans.catalog import SUBSCRIPTION_PLANS, get_free_plan, get_plan
from modules.plans.models import SubscriptionPlan, SubscriptionTier

from .models import Feature

if TYPE_CHECKING:
    from modules.profiles.models import User


def get_plan_for_user(
    user: Optional["User"],
    plans: tuple[SubscriptionPlan, ...] = SUBSCRIPTION_PLANS,
) -> Optional[SubscriptionPlan]:
    """The user's plan, or None when there is no user or the tier is unknown."""
    if user is None:
        return None
    return get_plan(user.subscription_tier, plans)


def effective_plan(
    user: Optional["User"],
    plans: tuple[SubscriptionPlan, ...] = SUBSCRIPTION_PLANS,
) -> SubscriptionPlan:
    """The plan whose limits apply: the user's plan, falling back to Free."""
    return get_plan_for_user(user, plans) or get_free_plan()


def can_use_feature(
    user: Optional["User"],
    feature: Union[Feature, str],
    plans: tuple[SubscriptionPlan, ...] = SUBSCRIPTION_PLANS,
) -> bool:
    """
    Whether ``user`` may use ``feature``.

    Default-deny: returns False with no user or when the user's tier has no
    plan in the catalog.

    Raises:
        ValueError: If ``feature`` is not a known feature key
    """
    feature = Feature(feature)

    plan = get_plan_for_user(user, plans)
    if user is None or plan is None:
        return False

    if feature == Feature.PREMIUM_THEMES:
        return plan.premium_themes
    if feature == Feature.ANALYTICS:
        return plan.analytics
    if feature == Feature.QR_CODES:
        return user.subscription_tier != SubscriptionTier.FREE
    if feature == Feature.CUSTOM_DOMAINS:
        return plan.custom_domains
    if feature == Feature.UNLIMITED_LINKS:
        return plan.unlimited_links
    if feature == Feature.MULTIPLE_PROFILES:
        return plan.unlimited_profiles or plan.max_profiles > 1
    return False
