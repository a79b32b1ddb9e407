"""
Parsers for free-form generative text replies.

Model output is best-effort. Both parsers always hand back usable content;
whether defaults were substituted is reported through ``ParseOutcome`` rather
than an exception.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

FALLBACK_SUMMARY = "Unable to generate summary at this time."

FALLBACK_RECOMMENDATIONS = [
    "Practice 10 minutes of daily meditation or deep breathing exercises",
    "Maintain a regular sleep schedule of 7-8 hours per night",
    "Engage in physical activity for at least 30 minutes, 3 times per week",
]

# Used when a recommendations reply arrives but is not a JSON list
FALLBACK_SUGGESTIONS = [
    "Take 5 minutes for deep breathing exercises to reduce stress and anxiety.",
    "Write in a journal for 10 minutes to process your thoughts and emotions.",
    "Go for a 15-minute walk outside to boost mood and get fresh air.",
    "Practice gratitude by listing 3 things you're thankful for today.",
]

# Used when the text API could not be reached at all
OFFLINE_SUGGESTIONS = [
    "Take a moment to breathe deeply and center yourself.",
    "Consider reaching out to a friend or loved one for support.",
    "Engage in an activity that brings you joy and relaxation.",
    "Practice self-compassion and be kind to yourself today.",
]

MAX_SUMMARY_RECOMMENDATIONS = 3
MAX_SUGGESTIONS = 4

_SUMMARY_PATTERN = re.compile(r"SUMMARY:\s*(.*?)(?=RECOMMENDATIONS:|\Z)", re.DOTALL)
_RECOMMENDATIONS_PATTERN = re.compile(r"RECOMMENDATIONS:\s*(.*)", re.DOTALL)
_NUMBERED_ITEM = re.compile(r"\d+\.\s+")
_JSON_ARRAY = re.compile(r"\[.*\]", re.DOTALL)


class ParseOutcome(str, Enum):
    """Whether a reply was parsed or defaults were substituted."""

    PARSED = "parsed"
    FALLBACK = "fallback"


@dataclass
class SummaryParse:
    """Summary text and recommendations extracted from a model reply."""

    summary: str
    recommendations: List[str] = field(default_factory=list)
    outcome: ParseOutcome = ParseOutcome.PARSED


def parse_summary_reply(text: str) -> SummaryParse:
    """
    Split a ``SUMMARY: ... RECOMMENDATIONS: 1. ... 2. ...`` reply.

    A missing summary is replaced by ``FALLBACK_SUMMARY`` and an empty
    recommendation list by ``FALLBACK_RECOMMENDATIONS``; either substitution
    marks the result as a fallback.
    """
    text = text or ""
    outcome = ParseOutcome.PARSED

    summary_match = _SUMMARY_PATTERN.search(text)
    summary = summary_match.group(1).strip() if summary_match else ""
    if not summary:
        summary = FALLBACK_SUMMARY
        outcome = ParseOutcome.FALLBACK

    recommendations: List[str] = []
    recommendations_match = _RECOMMENDATIONS_PATTERN.search(text)
    if recommendations_match:
        items = _NUMBERED_ITEM.split(recommendations_match.group(1))
        recommendations = [item.strip() for item in items if item.strip()]
        recommendations = recommendations[:MAX_SUMMARY_RECOMMENDATIONS]

    if not recommendations:
        recommendations = list(FALLBACK_RECOMMENDATIONS)
        outcome = ParseOutcome.FALLBACK

    return SummaryParse(summary=summary, recommendations=recommendations, outcome=outcome)


def parse_recommendation_reply(text: str) -> Optional[List[str]]:
    """
    Extract a JSON array of recommendation strings from a model reply.

    Models often wrap JSON in prose or code fences, so the first ``[...]``
    span is parsed. Returns None when no list of non-empty strings is found.
    """
    if not text:
        return None
    match = _JSON_ARRAY.search(text)
    if not match:
        return None
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None

    if not isinstance(data, list) or not data:
        return None
    if not all(isinstance(item, str) and item.strip() for item in data):
        return None

    return [item.strip() for item in data][:MAX_SUGGESTIONS]
