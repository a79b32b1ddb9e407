"""
Wellness summary generation.

Turns a user's recent mood logs and diary entries into a short narrative
summary plus three recommendations:

    resolve time range -> fetch moods/diary -> build prompt -> Gemini -> parse -> store

Failure policy:
- If the text API cannot be reached, answers with an error or sends a
  malformed envelope, the caller gets the fixed fallback summary and
  recommendations and nothing is stored. The error message is a fixed
  description; the underlying detail only goes to the log.
- If a reply arrives but cannot be parsed, defaults fill the gaps and the
  reply is still stored as a new summary row.
Every call is independent: regenerating always makes a new API call and a
new row.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

import httpx

from mood_insights import (
    FALLBACK_RECOMMENDATIONS,
    FALLBACK_SUMMARY,
    TIME_RANGE_LABELS,
    ParseOutcome,
    TimeRange,
    parse_summary_reply,
    resolve_time_range,
)

from ..models.diary import DiaryEntry
from ..models.mood import MoodLog
from ..stores import DiaryStore, MoodStore, SummaryStore
from .auth import Session
from .gemini import SUMMARY_CONFIG, GenerationError, GenerativeTextClient

log = logging.getLogger(__name__)

DIARY_ENTRY_LIMIT = 10
DIARY_EXCERPT_CHARS = 200
MAX_ERROR_CHARS = 200

SUMMARY_PROMPT = """Based on the following user's mental health data from the {period}, generate a personalized wellness summary (60-100 words) followed by exactly 3 specific, actionable recommendations for improving mental health.

Mood Logs:
{moods}

Diary Entries:
{diary}

Please provide:
1. A personalized summary (60-100 words) of their mental health patterns and progress
2. Exactly 3 specific, actionable recommendations for improving their mental health, each a short imperative sentence

Format your response as:
SUMMARY: [your 60-100 word summary]
RECOMMENDATIONS:
1. [first recommendation]
2. [second recommendation]
3. [third recommendation]"""


@dataclass
class SummaryResult:
    """Outcome of one summary request."""

    summary: str
    recommendations: List[str] = field(default_factory=list)
    outcome: ParseOutcome = ParseOutcome.PARSED
    mood_logs_count: int = 0
    diary_entries_count: int = 0
    summary_id: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "recommendations": self.recommendations,
            "outcome": self.outcome.value,
            "mood_logs_count": self.mood_logs_count,
            "diary_entries_count": self.diary_entries_count,
            "summary_id": self.summary_id,
            "error": self.error,
        }


def cap_error(message: str, limit: int = MAX_ERROR_CHARS) -> str:
    """Trim an error message to something safe to show a user."""
    message = " ".join(str(message).split()) or "Unknown error"
    return message if len(message) <= limit else message[: limit - 3] + "..."


def describe_failure(error: Exception) -> str:
    """Fixed, user-facing description of a failed text API call."""
    if isinstance(error, GenerationError):
        return str(error)
    if isinstance(error, httpx.TimeoutException):
        return "The AI service took too long to respond"
    return "The AI service is unavailable right now"


def format_mood_lines(moods: List[MoodLog]) -> str:
    if not moods:
        return "No mood logs found"
    return "\n".join(f"{m.date.isoformat()}: {m.emoji} ({m.note or 'no note'})" for m in moods)


def format_diary_lines(entries: List[DiaryEntry]) -> str:
    if not entries:
        return "No diary entries found"
    return "\n".join(f"{e.title}: {e.content[:DIARY_EXCERPT_CHARS]}..." for e in entries)


def build_summary_prompt(time_range: TimeRange, moods: List[MoodLog], entries: List[DiaryEntry]) -> str:
    return SUMMARY_PROMPT.format(
        period=TIME_RANGE_LABELS[time_range],
        moods=format_mood_lines(moods),
        diary=format_diary_lines(entries),
    )


class SummaryRequester:
    """Builds the summary prompt, calls the text API and stores the result."""

    def __init__(
        self,
        moods: MoodStore,
        diaries: DiaryStore,
        summaries: SummaryStore,
        client: GenerativeTextClient,
    ):
        self.moods = moods
        self.diaries = diaries
        self.summaries = summaries
        self.client = client

    async def generate(
        self,
        session: Session,
        time_range: TimeRange = TimeRange.LAST_7_DAYS,
        now: Optional[datetime] = None,
    ) -> SummaryResult:
        """
        Generate and store a summary for the session's user.

        Args:
            session: The caller's session.
            time_range: Look-back window token.
            now: Reference time (defaults to the current UTC time).

        Returns:
            SummaryResult; ``outcome`` is ``fallback`` whenever fixed content
            was substituted.
        """
        time_range = TimeRange(time_range)
        start = resolve_time_range(time_range, now)
        log.info("Generating summary for user %s, range %s", session.user_id, time_range.value)

        moods = self.moods.list_since(session.user_id, start.date())
        entries = self.diaries.list_since(session.user_id, start, limit=DIARY_ENTRY_LIMIT)
        prompt = build_summary_prompt(time_range, moods, entries)

        try:
            reply = await self.client.generate(prompt, SUMMARY_CONFIG)
        except (GenerationError, httpx.HTTPError) as e:
            log.error("Summary generation failed for user %s: %s", session.user_id, e)
            return SummaryResult(
                summary=FALLBACK_SUMMARY,
                recommendations=list(FALLBACK_RECOMMENDATIONS),
                outcome=ParseOutcome.FALLBACK,
                mood_logs_count=len(moods),
                diary_entries_count=len(entries),
                error=cap_error(describe_failure(e)),
            )

        parsed = parse_summary_reply(reply)
        if parsed.outcome is ParseOutcome.FALLBACK:
            log.warning("Summary reply for user %s could not be fully parsed", session.user_id)

        stored = self.summaries.create(session.user_id, time_range.value, parsed.summary)

        return SummaryResult(
            summary=parsed.summary,
            recommendations=parsed.recommendations,
            outcome=parsed.outcome,
            mood_logs_count=len(moods),
            diary_entries_count=len(entries),
            summary_id=stored.id,
        )
