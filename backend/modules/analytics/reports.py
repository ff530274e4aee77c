"""
Derived analytics views for the dashboard.
"""

from datetime import date, timedelta
from typing import Optional, TYPE_CHECKING

from .models import Analytics, DailyPoint, Growth, TimeRange, TopLink

if TYPE_CHECKING:
    from modules.profiles.models import Profile


def top_links(profile: "Profile", analytics: Analytics, limit: int = 5) -> list[TopLink]:
    """Active links of ``profile`` ranked by clicks, highest first."""
    ranked = [
        TopLink(
            link_id=link.id,
            title=link.title,
            url=link.url,
            clicks=analytics.link_stats[link.id].clicks if link.id in analytics.link_stats else 0,
        )
        for link in profile.sorted_links(include_inactive=False)
    ]
    # sorted() is stable, so ties keep display order
    ranked = sorted(ranked, key=lambda item: item.clicks, reverse=True)
    return ranked[:limit]


def daily_series(
    analytics: Analytics,
    time_range: Optional[TimeRange] = None,
    today: Optional[date] = None,
) -> list[DailyPoint]:
    """
    Daily buckets sorted by date.

    With a ``time_range``, only buckets inside the trailing window ending at
    ``today`` are returned.
    """
    dates = sorted(analytics.daily_stats)
    if time_range is not None:
        end = today or date.today()
        start = (end - timedelta(days=time_range.days - 1)).isoformat()
        dates = [d for d in dates if start <= d <= end.isoformat()]

    return [
        DailyPoint(
            date=d,
            views=analytics.daily_stats[d].views,
            clicks=analytics.daily_stats[d].clicks,
        )
        for d in dates
    ]


def _percent_change(recent: int, previous: int) -> float:
    if previous <= 0:
        return 0.0
    return (recent - previous) / previous * 100


def growth(analytics: Analytics) -> Growth:
    """Compare the last three recorded days with the three days before them."""
    series = daily_series(analytics)
    if len(series) < 2:
        return Growth()

    recent = series[-3:]
    previous = series[-6:-3]

    return Growth(
        views=_percent_change(
            sum(p.views for p in recent),
            sum(p.views for p in previous),
        ),
        clicks=_percent_change(
            sum(p.clicks for p in recent),
            sum(p.clicks for p in previous),
        ),
    )
