"""FastAPI dependency providers for stores and requesters."""
from fastapi import Depends

from .database import DatabaseManager, get_db
from .services.gemini import GenerativeTextClient, get_text_client
from .services.recommendation_requester import RecommendationRequester
from .services.summary_requester import SummaryRequester
from .stores import ChatStore, DiaryStore, MoodStore, ProfileStore, RecommendationStore, SummaryStore


def get_mood_store(db: DatabaseManager = Depends(get_db)) -> MoodStore:
    return MoodStore(db)


def get_diary_store(db: DatabaseManager = Depends(get_db)) -> DiaryStore:
    return DiaryStore(db)


def get_chat_store(db: DatabaseManager = Depends(get_db)) -> ChatStore:
    return ChatStore(db)


def get_summary_store(db: DatabaseManager = Depends(get_db)) -> SummaryStore:
    return SummaryStore(db)


def get_recommendation_store(db: DatabaseManager = Depends(get_db)) -> RecommendationStore:
    return RecommendationStore(db)


def get_profile_store(db: DatabaseManager = Depends(get_db)) -> ProfileStore:
    return ProfileStore(db)


def get_summary_requester(
    db: DatabaseManager = Depends(get_db),
    client: GenerativeTextClient = Depends(get_text_client),
) -> SummaryRequester:
    return SummaryRequester(MoodStore(db), DiaryStore(db), SummaryStore(db), client)


def get_recommendation_requester(
    db: DatabaseManager = Depends(get_db),
    client: GenerativeTextClient = Depends(get_text_client),
) -> RecommendationRequester:
    return RecommendationRequester(
        MoodStore(db), DiaryStore(db), ChatStore(db), RecommendationStore(db), client
    )
