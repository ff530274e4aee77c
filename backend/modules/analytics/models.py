"""
Analytics module data models.

Counters are kept per profile. ``total_clicks`` always equals the sum of
``link_stats[*].clicks`` and the daily buckets roll up to the totals; the
tracking functions update all of them together.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from shared.models import CamelModel


class TimeRange(str, Enum):
    """Report windows offered by the analytics dashboard."""

    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"

    @property
    def days(self) -> int:
        return int(self.value[:-1])


class LinkStats(CamelModel):
    """Click counters for one link."""

    clicks: int = Field(default=0, ge=0)
    last_clicked: Optional[datetime] = None


class DailyStats(CamelModel):
    """Counters for one calendar day (UTC)."""

    views: int = Field(default=0, ge=0)
    clicks: int = Field(default=0, ge=0)


class Analytics(CamelModel):
    """Aggregate counters for one profile."""

    profile_id: str = Field(..., description="Profile the counters belong to")
    total_views: int = Field(default=0, ge=0)
    total_clicks: int = Field(default=0, ge=0)
    link_stats: dict[str, LinkStats] = Field(
        default_factory=dict,
        description="Link id -> click counters",
    )
    daily_stats: dict[str, DailyStats] = Field(
        default_factory=dict,
        description="ISO date (YYYY-MM-DD) -> counters",
    )


class DailyPoint(CamelModel):
    """One row of a daily series."""

    date: str
    views: int
    clicks: int


class TopLink(CamelModel):
    """A link ranked by clicks."""

    link_id: str
    title: str
    url: str
    clicks: int


class Growth(CamelModel):
    """Percent change of the most recent three days over the three before."""

    views: float = 0.0
    clicks: float = 0.0
