"""
Context-aware wellness recommendations.

Looks at the latest mood logs, diary entries and chat messages, asks the text
API for a JSON list of suggestions and stores the list. Unparseable replies
fall back to a fixed list (still stored); API failures fall back to a
different fixed list and store nothing.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

from mood_insights import (
    FALLBACK_SUGGESTIONS,
    OFFLINE_SUGGESTIONS,
    ParseOutcome,
    parse_recommendation_reply,
)

from ..stores import ChatStore, DiaryStore, MoodStore, RecommendationStore
from .auth import Session
from .gemini import RECOMMENDATION_CONFIG, GenerationError, GenerativeTextClient
from .summary_requester import cap_error, describe_failure

log = logging.getLogger(__name__)

RECENT_MOODS = 5
RECENT_ENTRIES = 3
RECENT_MESSAGES = 5
DEFAULT_CONTEXT = "AI-generated wellness recommendations"

RECOMMENDATION_PROMPT = """Based on this user's recent wellness data, generate 3-4 specific, actionable recommendations for improving their mental wellbeing.

Recent data:
- Mood logs: {moods}
- Diary entries: {entries}
- Recent concerns: {messages}

Source: {source}
Context: {context}

Provide practical, evidence-based suggestions that are:
1. Specific and actionable
2. Appropriate for their current state
3. Focused on mental health and wellbeing
4. Realistic to implement

Return as a JSON array of strings, each recommendation being 15-30 words."""


@dataclass
class RecommendationResult:
    recommendations: List[str] = field(default_factory=list)
    outcome: ParseOutcome = ParseOutcome.PARSED
    recommendation_id: Optional[int] = None
    error: Optional[str] = None


class RecommendationRequester:
    """Generates and stores a recommendation set for one user."""

    def __init__(
        self,
        moods: MoodStore,
        diaries: DiaryStore,
        chats: ChatStore,
        recommendations: RecommendationStore,
        client: GenerativeTextClient,
    ):
        self.moods = moods
        self.diaries = diaries
        self.chats = chats
        self.recommendations = recommendations
        self.client = client

    def build_prompt(self, session: Session, source: str, context: Optional[str]) -> str:
        moods = [
            {"date": m.date.isoformat(), "emoji": m.emoji, "note": m.note}
            for m in self.moods.list_recent(session.user_id, RECENT_MOODS)
        ]
        entries = [
            {"title": e.title, "content": e.content, "mood": e.mood}
            for e in self.diaries.list_recent(session.user_id, RECENT_ENTRIES)
        ]
        messages = [
            m.content for m in self.chats.list_recent_user_messages(session.user_id, RECENT_MESSAGES)
        ]
        return RECOMMENDATION_PROMPT.format(
            moods=json.dumps(moods, ensure_ascii=False),
            entries=json.dumps(entries, ensure_ascii=False),
            messages=json.dumps(messages, ensure_ascii=False),
            source=source,
            context=context or "General wellness recommendations",
        )

    async def generate(self, session: Session, source: str, context: Optional[str] = None) -> RecommendationResult:
        log.info("Generating recommendations for user %s (source=%s)", session.user_id, source)
        prompt = self.build_prompt(session, source, context)

        try:
            reply = await self.client.generate(prompt, RECOMMENDATION_CONFIG)
        except (GenerationError, httpx.HTTPError) as e:
            log.error("Recommendation generation failed for user %s: %s", session.user_id, e)
            return RecommendationResult(
                recommendations=list(OFFLINE_SUGGESTIONS),
                outcome=ParseOutcome.FALLBACK,
                error=cap_error(describe_failure(e)),
            )

        parsed = parse_recommendation_reply(reply)
        outcome = ParseOutcome.PARSED
        if parsed is None:
            log.warning("Recommendation reply for user %s was not a JSON list", session.user_id)
            parsed = list(FALLBACK_SUGGESTIONS)
            outcome = ParseOutcome.FALLBACK

        stored = self.recommendations.create(
            session.user_id, source, parsed, context=context or DEFAULT_CONTEXT
        )
        return RecommendationResult(
            recommendations=stored.recommendations,
            outcome=outcome,
            recommendation_id=stored.id,
        )
