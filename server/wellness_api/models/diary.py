"""Diary entry data models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiaryEntry(BaseModel):
    """Free-text diary entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: str
    title: str
    content: str
    mood: Optional[str] = None
    word_count: int = Field(ge=0)
    created_at: datetime


class DiaryEntryCreate(BaseModel):
    """Request body for a new diary entry."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    mood: Optional[str] = Field(default=None, max_length=50)

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class DiaryStats(BaseModel):
    """Writing totals for the diary page."""

    model_config = ConfigDict(populate_by_name=True)

    total_entries: int = Field(serialization_alias="totalEntries")
    total_words: int = Field(serialization_alias="totalWords")
    average_words: float = Field(serialization_alias="averageWords")
    streak_days: int = Field(serialization_alias="streakDays")
