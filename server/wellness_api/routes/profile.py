"""Profile and data export API routes."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from ..dependencies import (
    get_chat_store,
    get_diary_store,
    get_mood_store,
    get_profile_store,
    get_summary_store,
)
from ..models.profile import Profile, ProfileUpdate
from ..services.auth import Session, require_session
from ..services.export import build_export, export_filename
from ..stores import ChatStore, DiaryStore, MoodStore, ProfileStore, SummaryStore

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Profile)
async def get_profile(
    session: Session = Depends(require_session),
    profiles: ProfileStore = Depends(get_profile_store),
):
    profile = profiles.get(session.user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.patch("", response_model=Profile)
async def update_profile(
    body: ProfileUpdate,
    session: Session = Depends(require_session),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Edit name, bio or location. Fields left out of the body are unchanged."""
    changes = body.model_dump(exclude_unset=True)
    if "name" in changes:
        if not changes["name"] or not changes["name"].strip():
            raise HTTPException(status_code=422, detail="Name must not be empty")
        changes["name"] = changes["name"].strip()

    profile = profiles.update(session.user_id, **changes)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("/export", response_class=PlainTextResponse)
async def export_data(
    session: Session = Depends(require_session),
    profiles: ProfileStore = Depends(get_profile_store),
    moods: MoodStore = Depends(get_mood_store),
    diaries: DiaryStore = Depends(get_diary_store),
    chats: ChatStore = Depends(get_chat_store),
    summaries: SummaryStore = Depends(get_summary_store),
):
    """Download everything the user has recorded as a text file."""
    profile = profiles.get(session.user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    generated_at = datetime.now(timezone.utc)
    document = build_export(
        profile,
        moods.list_for_user(session.user_id),
        diaries.list_for_user(session.user_id),
        chats.list_for_user(session.user_id),
        summaries.list_for_user(session.user_id),
        generated_at,
    )
    return PlainTextResponse(
        document,
        headers={"Content-Disposition": f'attachment; filename="{export_filename(generated_at)}"'},
    )
