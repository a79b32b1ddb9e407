"""
Unit tests for the mood_insights statistics helpers.

These tests verify:
1. Streak counting from newest-first mood log dates
2. Mood score lookup and averaging
3. Improvement percentage between the two halves of a score sequence
4. Mood distribution and time-range resolution

Usage:
    pytest tests/test_mood_insights.py -v
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from mood_insights import (
    MOOD_SCALE,
    TimeRange,
    average_mood_score,
    calculate_streak,
    distinct_days,
    improvement_percentage,
    is_palette_emoji,
    mood_distribution,
    mood_label,
    mood_score,
    resolve_time_range,
)

TODAY = date(2026, 10, 19)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


# ============================================================================
# Streak
# ============================================================================


class TestCalculateStreak:
    """Consecutive-day streak ending today."""

    def test_empty_logs_have_no_streak(self):
        assert calculate_streak([], today=TODAY) == 0

    def test_single_log_today(self):
        assert calculate_streak([TODAY], today=TODAY) == 1

    def test_consecutive_days_ending_today(self):
        dates = [days_ago(0), days_ago(1), days_ago(2), days_ago(3)]
        assert calculate_streak(dates, today=TODAY) == 4

    def test_gap_stops_the_count(self):
        dates = [days_ago(0), days_ago(1), days_ago(3), days_ago(4)]
        assert calculate_streak(dates, today=TODAY) == 2

    def test_yesterday_without_today_is_zero(self):
        """Logging yesterday but not today breaks the streak immediately."""
        dates = [days_ago(1), days_ago(2)]
        assert calculate_streak(dates, today=TODAY) == 0

    def test_repeated_day_stops_the_walk(self):
        dates = [days_ago(0), days_ago(0), days_ago(1)]
        assert calculate_streak(dates, today=TODAY) == 1

    def test_repeated_day_counted_once_after_collapsing(self):
        dates = [days_ago(0), days_ago(0), days_ago(1)]
        assert calculate_streak(distinct_days(dates), today=TODAY) == 2

    def test_accepts_timestamps_and_strings(self):
        dates = [
            datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc),
            "2026-10-18T21:00:00+00:00",
            "2026-10-17",
        ]
        assert calculate_streak(dates, today=TODAY) == 3

    def test_future_dated_log_breaks_the_walk(self):
        assert calculate_streak([TODAY + timedelta(days=1), TODAY], today=TODAY) == 0


class TestDistinctDays:

    def test_timestamps_collapse_to_days(self):
        stamps = [
            datetime(2026, 10, 19, 21, 0, tzinfo=timezone.utc),
            datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc),
            "2026-10-18T12:00:00+00:00",
        ]
        assert distinct_days(stamps) == [date(2026, 10, 19), date(2026, 10, 18)]

    def test_empty(self):
        assert distinct_days([]) == []


# ============================================================================
# Mood scale and averages
# ============================================================================


class TestMoodScale:
    """Emoji palette lookups."""

    def test_palette_has_fifteen_moods_scored_one_to_ten(self):
        assert len(MOOD_SCALE) == 15
        assert all(1 <= option.score <= 10 for option in MOOD_SCALE.values())

    def test_known_emoji_score_and_label(self):
        assert mood_score("😊") == MOOD_SCALE["😊"].score
        assert mood_label("😊") == "Happy"
        assert is_palette_emoji("😊")

    def test_unmapped_emoji_is_neutral(self):
        assert mood_score("🦄") == 5
        assert mood_label("🦄") == "Unknown"
        assert not is_palette_emoji("🦄")


class TestAverageMoodScore:

    def test_empty_average_is_zero(self):
        assert average_mood_score([]) == 0

    def test_single_known_emoji(self):
        assert average_mood_score(["🥰"]) == MOOD_SCALE["🥰"].score

    def test_unmapped_emoji_counts_as_five(self):
        assert average_mood_score(["🦄"]) == 5

    def test_mean_over_mixed_entries(self):
        expected = (mood_score("😊") + mood_score("😭") + 5) / 3
        assert average_mood_score(["😊", "😭", "🦄"]) == pytest.approx(expected)


# ============================================================================
# Improvement percentage
# ============================================================================


class TestImprovementPercentage:

    def test_fewer_than_two_scores(self):
        assert improvement_percentage([]) == 0
        assert improvement_percentage([7]) == 0

    def test_flat_scores_show_no_change(self):
        assert improvement_percentage([5, 5, 5, 5]) == 0

    def test_trailing_half_doubling_is_one_hundred_percent(self):
        assert improvement_percentage([2, 2, 4, 4]) == 100

    def test_trailing_half_takes_the_extra_element(self):
        # leading [4], trailing [6, 6]
        assert improvement_percentage([4, 6, 6]) == 50

    def test_decline_is_negative(self):
        assert improvement_percentage([8, 8, 4, 4]) == -50

    def test_rounds_half_up(self):
        # (2.5 - 2) / 2 = 25%, (7 - 8) / 8 = -12.5% -> -12
        assert improvement_percentage([2, 2, 3, 2]) == 25
        assert improvement_percentage([8, 7]) == -12

    def test_zero_leading_mean(self):
        assert improvement_percentage([0, 5]) == 0


# ============================================================================
# Distribution and time ranges
# ============================================================================


class TestMoodDistribution:

    def test_empty(self):
        assert mood_distribution([]) == []

    def test_counts_sorted_by_frequency(self):
        shares = mood_distribution(["😊", "😔", "😊", "😊"])

        assert [share.emoji for share in shares] == ["😊", "😔"]
        assert shares[0].count == 3
        assert shares[0].percentage == 75
        assert shares[0].label == "Happy"
        assert shares[1].percentage == 25


class TestResolveTimeRange:

    NOW = datetime(2026, 10, 22, 15, 30, tzinfo=timezone.utc)  # a Thursday

    @pytest.mark.parametrize(
        "token,days",
        [("7d", 7), ("30d", 30), ("90d", 90), ("1y", 365)],
    )
    def test_rolling_windows(self, token, days):
        assert resolve_time_range(token, self.NOW) == self.NOW - timedelta(days=days)

    def test_week_starts_monday_midnight(self):
        start = resolve_time_range(TimeRange.THIS_WEEK, self.NOW)
        assert start == datetime(2026, 10, 19, 0, 0, tzinfo=timezone.utc)
        assert start.weekday() == 0

    def test_naive_now_is_treated_as_utc(self):
        start = resolve_time_range("7d", datetime(2026, 10, 22, 12, 0))
        assert start.tzinfo == timezone.utc

    def test_unknown_token_rejected(self):
        with pytest.raises(ValueError):
            resolve_time_range("2w", self.NOW)
