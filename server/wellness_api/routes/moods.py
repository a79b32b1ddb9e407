"""Mood log API routes."""
from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_mood_store
from ..models.mood import MoodLog, MoodLogCreate
from ..services.auth import Session, require_session
from ..stores import MoodStore

router = APIRouter(prefix="/api/moods", tags=["Mood Logs"])


@router.post("", response_model=MoodLog, status_code=201)
async def log_mood(
    body: MoodLogCreate,
    session: Session = Depends(require_session),
    moods: MoodStore = Depends(get_mood_store),
):
    """
    Log a mood for a day (today by default).
    A second log for the same day replaces the first.
    """
    log_date = body.date or datetime.now(timezone.utc).date()
    return moods.create(session.user_id, body.emoji, log_date, note=body.note)


@router.get("", response_model=list[MoodLog])
async def list_moods(
    session: Session = Depends(require_session),
    moods: MoodStore = Depends(get_mood_store),
):
    """All of the user's mood logs, newest day first."""
    return moods.list_for_user(session.user_id)


@router.get("/by-date/{log_date}", response_model=MoodLog)
async def get_mood_for_date(
    log_date: date,
    session: Session = Depends(require_session),
    moods: MoodStore = Depends(get_mood_store),
):
    mood = moods.get_by_date(session.user_id, log_date)
    if not mood:
        raise HTTPException(status_code=404, detail=f"No mood logged on {log_date.isoformat()}")
    return mood


@router.delete("/{log_id}", status_code=204)
async def delete_mood(
    log_id: int,
    session: Session = Depends(require_session),
    moods: MoodStore = Depends(get_mood_store),
):
    if not moods.delete(session.user_id, log_id):
        raise HTTPException(status_code=404, detail="Mood log not found")
