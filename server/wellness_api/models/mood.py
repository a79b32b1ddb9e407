"""Mood log data models."""
from datetime import date as Date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mood_insights import is_palette_emoji, mood_label


class MoodLog(BaseModel):
    """A dated emoji check-in."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: str
    emoji: str = Field(min_length=1)
    note: Optional[str] = None
    date: Date
    created_at: datetime

    @property
    def label(self) -> str:
        return mood_label(self.emoji)


class MoodLogCreate(BaseModel):
    """Request body for logging a mood."""

    emoji: str
    note: Optional[str] = Field(default=None, max_length=2000)
    date: Optional[Date] = None

    @field_validator("emoji")
    @classmethod
    def emoji_in_palette(cls, value: str) -> str:
        if not is_palette_emoji(value):
            raise ValueError("emoji must be one of the mood palette options")
        return value

    @field_validator("note")
    @classmethod
    def blank_note_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("date")
    @classmethod
    def not_in_future(cls, value: Optional[Date]) -> Optional[Date]:
        if value is not None and value > datetime.now(timezone.utc).date():
            raise ValueError("mood logs cannot be dated in the future")
        return value
