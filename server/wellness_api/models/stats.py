"""Dashboard statistics models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .mood import MoodLog


class MoodShareModel(BaseModel):
    emoji: str
    label: str
    count: int
    percentage: int


class DashboardStats(BaseModel):
    """Aggregated mood statistics for the dashboard and summary pages."""

    model_config = ConfigDict(populate_by_name=True)

    time_range: str = Field(serialization_alias="timeRange")
    streak_days: int = Field(serialization_alias="streakDays")
    average_score: float = Field(serialization_alias="averageScore")
    improvement_percent: int = Field(serialization_alias="improvementPercent")
    entries_in_range: int = Field(serialization_alias="entriesInRange")
    total_mood_logs: int = Field(serialization_alias="totalMoodLogs")
    total_diary_entries: int = Field(serialization_alias="totalDiaryEntries")
    today: Optional[MoodLog] = None
    distribution: list[MoodShareModel] = []
