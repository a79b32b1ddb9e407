"""Diary API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from mood_insights import calculate_streak, distinct_days

from ..dependencies import get_diary_store
from ..models.diary import DiaryEntry, DiaryEntryCreate, DiaryStats
from ..services.auth import Session, require_session
from ..stores import DiaryStore

router = APIRouter(prefix="/api/diary", tags=["Diary"])


@router.post("", response_model=DiaryEntry, status_code=201)
async def create_entry(
    body: DiaryEntryCreate,
    session: Session = Depends(require_session),
    diaries: DiaryStore = Depends(get_diary_store),
):
    return diaries.create(session.user_id, body.title.strip(), body.content, mood=body.mood)


@router.get("", response_model=list[DiaryEntry])
async def list_entries(
    search: Optional[str] = Query(default=None, max_length=100, description="Match title, content or mood"),
    session: Session = Depends(require_session),
    diaries: DiaryStore = Depends(get_diary_store),
):
    """Diary entries, newest first."""
    return diaries.list_for_user(session.user_id, search=search)


@router.get("/stats", response_model=DiaryStats, response_model_by_alias=True)
async def diary_stats(
    session: Session = Depends(require_session),
    diaries: DiaryStore = Depends(get_diary_store),
):
    """Entry and word totals plus the current daily writing streak."""
    entries = diaries.list_for_user(session.user_id)
    total_words = sum(entry.word_count for entry in entries)

    return DiaryStats(
        total_entries=len(entries),
        total_words=total_words,
        average_words=round(total_words / len(entries), 1) if entries else 0,
        streak_days=calculate_streak(distinct_days(entry.created_at for entry in entries)),
    )


@router.delete("/{entry_id}", status_code=204)
async def delete_entry(
    entry_id: int,
    session: Session = Depends(require_session),
    diaries: DiaryStore = Depends(get_diary_store),
):
    if not diaries.delete(session.user_id, entry_id):
        raise HTTPException(status_code=404, detail="Diary entry not found")
