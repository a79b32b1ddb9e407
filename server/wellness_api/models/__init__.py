"""Pydantic models for wellness records and API payloads."""
from .mood import MoodLog, MoodLogCreate
from .diary import DiaryEntry, DiaryEntryCreate, DiaryStats
from .chat import ChatMessage, ChatMessageCreate, ChatExchange
from .summary import (
    AISummary,
    AIRecommendation,
    SummaryRequest,
    SummaryResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from .profile import Profile, ProfileUpdate, SignUpRequest, SignInRequest, SessionResponse
from .stats import DashboardStats, MoodShareModel

__all__ = [
    "MoodLog",
    "MoodLogCreate",
    "DiaryEntry",
    "DiaryEntryCreate",
    "DiaryStats",
    "ChatMessage",
    "ChatMessageCreate",
    "ChatExchange",
    "AISummary",
    "AIRecommendation",
    "SummaryRequest",
    "SummaryResponse",
    "RecommendationRequest",
    "RecommendationResponse",
    "Profile",
    "ProfileUpdate",
    "SignUpRequest",
    "SignInRequest",
    "SessionResponse",
    "DashboardStats",
    "MoodShareModel",
]
