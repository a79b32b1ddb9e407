"""API route modules."""
from .auth import router as auth_router
from .moods import router as moods_router
from .diary import router as diary_router
from .chat import router as chat_router
from .summaries import router as summaries_router
from .stats import router as stats_router
from .profile import router as profile_router

__all__ = [
    "auth_router",
    "moods_router",
    "diary_router",
    "chat_router",
    "summaries_router",
    "stats_router",
    "profile_router",
]
