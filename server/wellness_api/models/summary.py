"""AI summary and recommendation models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mood_insights import ParseOutcome, TimeRange


class AISummary(BaseModel):
    """Stored AI-generated wellness summary."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    period: str
    summary: str
    created_at: datetime


class SummaryRequest(BaseModel):
    time_range: TimeRange = Field(default=TimeRange.LAST_7_DAYS, alias="timeRange")

    model_config = ConfigDict(populate_by_name=True)


class SummaryResponse(BaseModel):
    """Summary text plus recommendations returned to the summary page."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    recommendations: list[str]
    outcome: ParseOutcome
    mood_logs_count: int = Field(serialization_alias="moodLogsCount")
    diary_entries_count: int = Field(serialization_alias="diaryEntriesCount")
    summary_id: Optional[int] = Field(default=None, serialization_alias="summaryId")
    error: Optional[str] = None


class AIRecommendation(BaseModel):
    """Stored AI-generated recommendation set."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    source: str
    context: Optional[str] = None
    recommendations: list[str]
    created_at: datetime


class RecommendationRequest(BaseModel):
    source: str = Field(min_length=1, max_length=100)
    context: Optional[str] = Field(default=None, max_length=1000)


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recommendations: list[str]
    outcome: ParseOutcome
    recommendation_id: Optional[int] = Field(default=None, serialization_alias="id")
    error: Optional[str] = None
