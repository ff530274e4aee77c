"""
Counter updates for views and clicks.

These are pure functions: they return a new Analytics and never modify the
one passed in.
"""

from datetime import datetime

from .models import Analytics, DailyStats, LinkStats


def day_key(moment: datetime) -> str:
    """Bucket key for a timestamp: its ISO calendar date."""
    return moment.date().isoformat()


def empty_analytics(profile_id: str) -> Analytics:
    return Analytics(profile_id=profile_id)


def record_view(analytics: Analytics, now: datetime) -> Analytics:
    """Count one page view, both in the totals and in today's bucket."""
    key = day_key(now)
    daily = dict(analytics.daily_stats)
    bucket = daily.get(key, DailyStats())
    daily[key] = bucket.model_copy(update={"views": bucket.views + 1})

    return analytics.model_copy(
        update={
            "total_views": analytics.total_views + 1,
            "daily_stats": daily,
        }
    )


def record_click(analytics: Analytics, link_id: str, now: datetime) -> Analytics:
    """Count one click on ``link_id`` in the totals, the link counter and today's bucket."""
    link_stats = dict(analytics.link_stats)
    stats = link_stats.get(link_id, LinkStats())
    link_stats[link_id] = LinkStats(clicks=stats.clicks + 1, last_clicked=now)

    key = day_key(now)
    daily = dict(analytics.daily_stats)
    bucket = daily.get(key, DailyStats())
    daily[key] = bucket.model_copy(update={"clicks": bucket.clicks + 1})

    return analytics.model_copy(
        update={
            "total_clicks": analytics.total_clicks + 1,
            "link_stats": link_stats,
            "daily_stats": daily,
        }
    )
