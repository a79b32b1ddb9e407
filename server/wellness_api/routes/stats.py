"""Dashboard statistics API routes."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from mood_insights import (
    TimeRange,
    average_mood_score,
    calculate_streak,
    improvement_percentage,
    mood_distribution,
    mood_score,
    resolve_time_range,
)

from ..dependencies import get_diary_store, get_mood_store
from ..models.stats import DashboardStats, MoodShareModel
from ..services.auth import Session, require_session
from ..stores import DiaryStore, MoodStore

router = APIRouter(prefix="/api/stats", tags=["Statistics"])


@router.get("/dashboard", response_model=DashboardStats, response_model_by_alias=True)
async def get_dashboard_stats(
    time_range: TimeRange = Query(default=TimeRange.LAST_7_DAYS, description="Look-back window"),
    session: Session = Depends(require_session),
    moods: MoodStore = Depends(get_mood_store),
    diaries: DiaryStore = Depends(get_diary_store),
):
    """
    Get mood statistics for the dashboard.
    Streak and totals use all logs; average, improvement and distribution
    use the logs inside the requested window.
    """
    now = datetime.now(timezone.utc)
    today = now.date()

    all_logs = moods.list_for_user(session.user_id)
    start_date = resolve_time_range(time_range, now).date()
    windowed = [log for log in all_logs if log.date >= start_date]
    emojis = [log.emoji for log in windowed]

    today_log = next((log for log in all_logs if log.date == today), None)

    return DashboardStats(
        time_range=time_range.value,
        streak_days=calculate_streak((log.date for log in all_logs), today=today),
        average_score=round(average_mood_score(emojis), 1),
        improvement_percent=improvement_percentage([mood_score(e) for e in emojis]),
        entries_in_range=len(windowed),
        total_mood_logs=len(all_logs),
        total_diary_entries=len(diaries.list_for_user(session.user_id)),
        today=today_log,
        distribution=[MoodShareModel(**share.to_dict()) for share in mood_distribution(emojis)],
    )
