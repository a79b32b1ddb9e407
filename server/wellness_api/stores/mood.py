"""Mood log store."""
from datetime import date
from typing import Optional

from ..models.mood import MoodLog
from .base import BaseStore, utc_now


def _row_to_mood(row) -> MoodLog:
    """Convert SQLite row to MoodLog model."""
    return MoodLog(
        id=row["id"],
        user_id=row["user_id"],
        emoji=row["emoji"],
        note=row["note"],
        date=row["date"],
        created_at=row["created_at"],
    )


class MoodStore(BaseStore):
    """
    Mood logs, one per user per calendar day.

    Logging a mood for a day that already has one overwrites that day's
    emoji and note.
    """

    def create(self, user_id: str, emoji: str, log_date: date, note: Optional[str] = None) -> MoodLog:
        now = utc_now()
        with self._cursor("save mood log") as cursor:
            cursor.execute(
                """
                INSERT INTO moodlogs (user_id, emoji, note, date, created_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT (user_id, date)
                DO UPDATE SET emoji = excluded.emoji, note = excluded.note, updated_at = ?
                """,
                (user_id, emoji, note, log_date.isoformat(), now, now),
            )
            cursor.execute(
                "SELECT * FROM moodlogs WHERE user_id = ? AND date = ?",
                (user_id, log_date.isoformat()),
            )
            row = cursor.fetchone()
        return _row_to_mood(row)

    def list_for_user(self, user_id: str) -> list[MoodLog]:
        with self._cursor("load mood logs") as cursor:
            cursor.execute(
                """
                SELECT * FROM moodlogs
                WHERE user_id = ?
                ORDER BY date DESC, created_at DESC
                """,
                (user_id,),
            )
            rows = cursor.fetchall()
        return [_row_to_mood(row) for row in rows]

    def list_since(self, user_id: str, start_date: date) -> list[MoodLog]:
        with self._cursor("load mood logs") as cursor:
            cursor.execute(
                """
                SELECT * FROM moodlogs
                WHERE user_id = ? AND date >= ?
                ORDER BY date DESC, created_at DESC
                """,
                (user_id, start_date.isoformat()),
            )
            rows = cursor.fetchall()
        return [_row_to_mood(row) for row in rows]

    def list_recent(self, user_id: str, limit: int) -> list[MoodLog]:
        with self._cursor("load mood logs") as cursor:
            cursor.execute(
                """
                SELECT * FROM moodlogs
                WHERE user_id = ?
                ORDER BY created_at DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
            rows = cursor.fetchall()
        return [_row_to_mood(row) for row in rows]

    def get_by_date(self, user_id: str, log_date: date) -> Optional[MoodLog]:
        with self._cursor("load mood log") as cursor:
            cursor.execute(
                "SELECT * FROM moodlogs WHERE user_id = ? AND date = ?",
                (user_id, log_date.isoformat()),
            )
            row = cursor.fetchone()
        return _row_to_mood(row) if row else None

    def count(self, user_id: str) -> int:
        with self._cursor("count mood logs") as cursor:
            cursor.execute("SELECT COUNT(*) AS cnt FROM moodlogs WHERE user_id = ?", (user_id,))
            return cursor.fetchone()["cnt"]

    def delete(self, user_id: str, log_id: int) -> bool:
        """Delete one of the user's logs. Returns False if nothing matched."""
        with self._cursor("delete mood log") as cursor:
            cursor.execute(
                "DELETE FROM moodlogs WHERE id = ? AND user_id = ?",
                (log_id, user_id),
            )
            return cursor.rowcount > 0
