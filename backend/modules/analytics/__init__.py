"""
Analytics module.

Per-profile view/click counters, their update rules, and the derived
reports shown on the dashboard.

Public API:
- Analytics, LinkStats, DailyStats: counter models
- record_view / record_click: counter updates
- top_links / daily_series / growth: reports
"""

from .models import (
    Analytics,
    DailyPoint,
    DailyStats,
    Growth,
    LinkStats,
    TimeRange,
    TopLink,
)
from .tracking import day_key, empty_analytics, record_click, record_view
from .reports import daily_series, growth, top_links

__all__ = [
    # Models
    "Analytics",
    "DailyPoint",
    "DailyStats",
    "Growth",
    "LinkStats",
    "TimeRange",
    "TopLink",
    # Tracking
    "day_key",
    "empty_analytics",
    "record_click",
    "record_view",
    # Reports
    "daily_series",
    "growth",
    "top_links",
]
