"""
Mood averages, period-over-period change and mood distribution.
"""

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .mood_scale import mood_label, mood_score


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity."""
    return math.floor(value + 0.5)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def average_mood_score(emojis: Iterable[str]) -> float:
    """Mean palette score over the given emojis, 0 when there are none."""
    scores = [mood_score(emoji) for emoji in emojis]
    return _mean(scores)


def improvement_percentage(scores: Sequence[float]) -> int:
    """
    Percentage change between the two halves of a score sequence.

    The sequence is split into a leading half (the first floor(n/2) values)
    and a trailing half (the remaining ceil(n/2) values). The result is the
    change of the trailing mean relative to the leading mean. With the
    newest-first ordering the dashboard uses, the leading half holds the most
    recent scores.

    Returns 0 for fewer than two scores or a leading mean of zero.
    """
    if len(scores) < 2:
        return 0

    split = len(scores) // 2
    leading_mean = _mean(scores[:split])
    trailing_mean = _mean(scores[split:])

    if leading_mean == 0:
        return 0

    return round_half_up(100 * (trailing_mean - leading_mean) / leading_mean)


@dataclass
class MoodShare:
    """How often one mood appears in a set of logs."""

    emoji: str
    label: str
    count: int
    percentage: int

    def to_dict(self) -> dict:
        return {
            "emoji": self.emoji,
            "label": self.label,
            "count": self.count,
            "percentage": self.percentage,
        }


def mood_distribution(emojis: Iterable[str]) -> List[MoodShare]:
    """Count moods, most frequent first, with whole-number percentages."""
    counts = Counter(emojis)
    total = sum(counts.values())
    if not total:
        return []

    shares = [
        MoodShare(
            emoji=emoji,
            label=mood_label(emoji),
            count=count,
            percentage=round_half_up(100 * count / total),
        )
        for emoji, count in counts.items()
    ]
    shares.sort(key=lambda share: (-share.count, share.label))
    return shares
