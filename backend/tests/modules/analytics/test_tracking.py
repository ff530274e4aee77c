"""Tests for modules/analytics/tracking.py."""

from datetime import datetime, timezone

from modules.analytics.tracking import day_key, empty_analytics, record_click, record_view

NOW = datetime(2024, 1, 15, 23, 59, tzinfo=timezone.utc)


class TestDayKey:
    def test_iso_date(self):
        """Buckets are keyed by ISO calendar date."""
        assert day_key(NOW) == "2024-01-15"


class TestRecordView:
    def test_increments_total_and_today(self):
        """A view bumps the total and today's bucket."""
        analytics = record_view(empty_analytics("p1"), NOW)
        assert analytics.total_views == 1
        assert analytics.daily_stats["2024-01-15"].views == 1
        assert analytics.daily_stats["2024-01-15"].clicks == 0

    def test_does_not_mutate_input(self):
        """The original aggregate is left unchanged."""
        original = empty_analytics("p1")
        record_view(original, NOW)
        assert original.total_views == 0
        assert original.daily_stats == {}


class TestRecordClick:
    def test_increments_all_counters(self):
        """A click bumps the total, the link counter and today's bucket."""
        analytics = record_click(empty_analytics("p1"), "l1", NOW)
        assert analytics.total_clicks == 1
        assert analytics.link_stats["l1"].clicks == 1
        assert analytics.link_stats["l1"].last_clicked == NOW
        assert analytics.daily_stats["2024-01-15"].clicks == 1

    def test_total_equals_sum_of_link_clicks(self):
        """total_clicks always equals the sum of per-link clicks."""
        analytics = empty_analytics("p1")
        for link_id in ("a", "b", "a", "c", "a"):
            analytics = record_click(analytics, link_id, NOW)

        assert analytics.total_clicks == sum(s.clicks for s in analytics.link_stats.values())
        assert analytics.link_stats["a"].clicks == 3

    def test_daily_buckets_roll_up_to_totals(self):
        """Daily sums equal the totals across several days."""
        analytics = empty_analytics("p1")
        analytics = record_view(analytics, datetime(2024, 1, 14, tzinfo=timezone.utc))
        analytics = record_click(analytics, "a", datetime(2024, 1, 14, tzinfo=timezone.utc))
        analytics = record_view(analytics, NOW)

        assert sum(d.views for d in analytics.daily_stats.values()) == analytics.total_views
        assert sum(d.clicks for d in analytics.daily_stats.values()) == analytics.total_clicks
