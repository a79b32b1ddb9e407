"""
Emoji mood palette and its numeric scale.

Scores run from 1 (lowest) to 10 (highest). Any emoji outside the palette
is treated as neutral when averaging.
"""

from dataclasses import dataclass
from typing import Dict

NEUTRAL_SCORE = 5


@dataclass(frozen=True)
class MoodOption:
    """One selectable mood in the picker."""

    emoji: str
    label: str
    score: int


_PALETTE = [
    MoodOption("😊", "Happy", 8),
    MoodOption("😄", "Excited", 9),
    MoodOption("😌", "Peaceful", 8),
    MoodOption("🙂", "Content", 7),
    MoodOption("😐", "Neutral", 5),
    MoodOption("🤔", "Thoughtful", 6),
    MoodOption("😔", "Sad", 3),
    MoodOption("😟", "Worried", 4),
    MoodOption("😢", "Upset", 2),
    MoodOption("😴", "Tired", 4),
    MoodOption("😤", "Frustrated", 3),
    MoodOption("🥰", "Loved", 10),
    MoodOption("😰", "Anxious", 3),
    MoodOption("😡", "Angry", 2),
    MoodOption("😭", "Heartbroken", 1),
]

MOOD_SCALE: Dict[str, MoodOption] = {option.emoji: option for option in _PALETTE}


def is_palette_emoji(emoji: str) -> bool:
    return emoji in MOOD_SCALE


def mood_score(emoji: str) -> int:
    """Numeric score for an emoji, neutral (5) when it is not in the palette."""
    option = MOOD_SCALE.get(emoji)
    return option.score if option else NEUTRAL_SCORE


def mood_label(emoji: str) -> str:
    option = MOOD_SCALE.get(emoji)
    return option.label if option else "Unknown"
