"""
Consecutive-day streak counting for mood logs.
"""

from datetime import date, datetime, timezone
from typing import Iterable, List, Optional, Union

DateLike = Union[date, datetime, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # ISO date or timestamp; only the calendar day matters
    return date.fromisoformat(str(value)[:10])


def calculate_streak(dates: Iterable[DateLike], today: Optional[date] = None) -> int:
    """
    Count consecutive logged days ending today.

    ``dates`` must be ordered newest first with one entry per day. The walk
    starts at ``today`` and each entry extends the streak only when it sits
    exactly ``streak`` days before today; anything else stops the walk. A
    most recent entry dated yesterday therefore yields 0: the streak has to
    include today to count.

    Args:
        dates: Log dates, descending.
        today: Reference day (defaults to the current UTC date).

    Returns:
        Number of consecutive days, 0 for an empty sequence.
    """
    today = today or datetime.now(timezone.utc).date()
    streak = 0

    for value in dates:
        if (today - _as_date(value)).days != streak:
            break
        streak += 1

    return streak


def distinct_days(dates: Iterable[DateLike]) -> List[date]:
    """Collapse newest-first dates or timestamps to one entry per calendar day."""
    days: List[date] = []
    for value in dates:
        day = _as_date(value)
        if not days or days[-1] != day:
            days.append(day)
    return days
