"""
Mood Insights Module.

Pure statistics and parsing helpers behind the wellness dashboard and the
AI summary feature. Nothing in here touches the database or the network.
"""

from .mood_scale import MOOD_SCALE, MoodOption, is_palette_emoji, mood_label, mood_score
from .streak import calculate_streak, distinct_days
from .trends import MoodShare, average_mood_score, improvement_percentage, mood_distribution
from .time_ranges import TIME_RANGE_LABELS, TimeRange, resolve_time_range
from .reply_parser import (
    FALLBACK_RECOMMENDATIONS,
    FALLBACK_SUGGESTIONS,
    FALLBACK_SUMMARY,
    OFFLINE_SUGGESTIONS,
    ParseOutcome,
    SummaryParse,
    parse_recommendation_reply,
    parse_summary_reply,
)

__all__ = [
    "MOOD_SCALE",
    "MoodOption",
    "is_palette_emoji",
    "mood_label",
    "mood_score",
    "calculate_streak",
    "distinct_days",
    "MoodShare",
    "average_mood_score",
    "improvement_percentage",
    "mood_distribution",
    "TIME_RANGE_LABELS",
    "TimeRange",
    "resolve_time_range",
    "FALLBACK_RECOMMENDATIONS",
    "FALLBACK_SUGGESTIONS",
    "FALLBACK_SUMMARY",
    "OFFLINE_SUGGESTIONS",
    "ParseOutcome",
    "SummaryParse",
    "parse_recommendation_reply",
    "parse_summary_reply",
]
