"""Tests for modules/plans/catalog.py and models."""

from decimal import Decimal

from modules.plans.catalog import SUBSCRIPTION_PLANS, get_free_plan, get_plan
from modules.plans.models import SubscriptionTier


class TestCatalog:
    def test_three_plans(self):
        """Free, Pro and Business are offered, in that order."""
        assert [plan.id for plan in SUBSCRIPTION_PLANS] == [
            SubscriptionTier.FREE,
            SubscriptionTier.PRO,
            SubscriptionTier.BUSINESS,
        ]

    def test_free_plan_limits(self):
        """Free allows one profile with ten links and no premium features."""
        plan = get_free_plan()
        assert plan.price == Decimal("0")
        assert plan.max_profiles == 1
        assert plan.max_links == 10
        assert not plan.analytics
        assert not plan.premium_themes
        assert not plan.custom_domains

    def test_pro_plan_limits(self):
        """Pro allows five profiles and unlimited links."""
        plan = get_plan(SubscriptionTier.PRO)
        assert plan.max_profiles == 5
        assert plan.unlimited_links
        assert plan.premium_themes

    def test_business_plan_is_unlimited(self):
        """Business is unlimited in both dimensions."""
        plan = get_plan("business")
        assert plan.unlimited_profiles
        assert plan.unlimited_links


class TestGetPlan:
    def test_accepts_string_key(self):
        """Plans can be looked up by their string id."""
        assert get_plan("pro") is get_plan(SubscriptionTier.PRO)

    def test_unknown_tier(self):
        """Unknown tiers have no plan."""
        assert get_plan("enterprise") is None

    def test_custom_catalog(self):
        """A caller-supplied catalog is searched instead of the default."""
        assert get_plan("pro", plans=(get_free_plan(),)) is None


class TestPlanLimits:
    def test_allows_links(self):
        """allows_links compares against max_links, None meaning unlimited."""
        free = get_free_plan()
        assert free.allows_links(10)
        assert not free.allows_links(11)
        assert get_plan("pro").allows_links(10_000)

    def test_allows_profiles(self):
        """allows_profiles compares against max_profiles."""
        assert get_free_plan().allows_profiles(1)
        assert not get_free_plan().allows_profiles(2)
        assert get_plan("business").allows_profiles(500)
