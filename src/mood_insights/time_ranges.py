"""
Symbolic time-range tokens used by summaries and dashboard stats.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Union


class TimeRange(str, Enum):
    """Supported look-back windows."""

    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    LAST_YEAR = "1y"
    THIS_WEEK = "week"


_DAYS_BACK = {
    TimeRange.LAST_7_DAYS: 7,
    TimeRange.LAST_30_DAYS: 30,
    TimeRange.LAST_90_DAYS: 90,
    TimeRange.LAST_YEAR: 365,
}

TIME_RANGE_LABELS = {
    TimeRange.LAST_7_DAYS: "last 7 days",
    TimeRange.LAST_30_DAYS: "last 30 days",
    TimeRange.LAST_90_DAYS: "last 90 days",
    TimeRange.LAST_YEAR: "last year",
    TimeRange.THIS_WEEK: "this week",
}


def resolve_time_range(
    token: Union[TimeRange, str], now: Optional[datetime] = None
) -> datetime:
    """
    Resolve a range token to the UTC instant the window starts at.

    Rolling windows count back whole days from ``now``. ``week`` starts at
    midnight on the Monday of the current week.

    Raises:
        ValueError: If the token is not a known range.
    """
    time_range = TimeRange(token)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    if time_range is TimeRange.THIS_WEEK:
        monday = now - timedelta(days=now.weekday())
        return monday.replace(hour=0, minute=0, second=0, microsecond=0)

    return now - timedelta(days=_DAYS_BACK[time_range])
