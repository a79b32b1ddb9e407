"""Data-access wrappers, one per wellness entity."""
from .mood import MoodStore
from .diary import DiaryStore, count_words
from .chat import ChatStore
from .insights import SummaryStore, RecommendationStore
from .profiles import ProfileStore

__all__ = [
    "MoodStore",
    "DiaryStore",
    "count_words",
    "ChatStore",
    "SummaryStore",
    "RecommendationStore",
    "ProfileStore",
]
