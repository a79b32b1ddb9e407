"""Diary entry store."""
from datetime import datetime, timezone
from typing import Optional

from ..models.diary import DiaryEntry
from .base import BaseStore, utc_now


def count_words(text: str) -> int:
    """Number of whitespace-separated words; runs of whitespace count once."""
    return len(text.split())


def _row_to_entry(row) -> DiaryEntry:
    """Convert SQLite row to DiaryEntry model."""
    return DiaryEntry(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        content=row["content"],
        mood=row["mood"],
        word_count=int(row["word_count"] or 0),
        created_at=row["created_at"],
    )


class DiaryStore(BaseStore):
    """Diary entries. Word count is fixed when the entry is written."""

    def create(self, user_id: str, title: str, content: str, mood: Optional[str] = None) -> DiaryEntry:
        with self._cursor("save diary entry") as cursor:
            cursor.execute(
                """
                INSERT INTO diaryentries (user_id, title, content, mood, word_count, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (user_id, title, content, mood or None, count_words(content), utc_now()),
            )
            cursor.execute("SELECT * FROM diaryentries WHERE id = ?", (cursor.lastrowid,))
            row = cursor.fetchone()
        return _row_to_entry(row)

    def list_for_user(self, user_id: str, search: Optional[str] = None) -> list[DiaryEntry]:
        """All entries, newest first, optionally filtered by a search term."""
        query = "SELECT * FROM diaryentries WHERE user_id = ?"
        params: list = [user_id]
        if search:
            term = f"%{search.lower()}%"
            query += " AND (lower(title) LIKE ? OR lower(content) LIKE ? OR lower(coalesce(mood, '')) LIKE ?)"
            params.extend([term, term, term])
        query += " ORDER BY created_at DESC"

        with self._cursor("load diary entries") as cursor:
            cursor.execute(query, params)
            rows = cursor.fetchall()
        return [_row_to_entry(row) for row in rows]

    def list_since(self, user_id: str, start: datetime, limit: int = 10) -> list[DiaryEntry]:
        with self._cursor("load diary entries") as cursor:
            cursor.execute(
                """
                SELECT * FROM diaryentries
                WHERE user_id = ? AND created_at >= ?
                ORDER BY created_at DESC
                LIMIT ?
                """,
                (user_id, start.astimezone(timezone.utc).isoformat(), limit),
            )
            rows = cursor.fetchall()
        return [_row_to_entry(row) for row in rows]

    def list_recent(self, user_id: str, limit: int) -> list[DiaryEntry]:
        with self._cursor("load diary entries") as cursor:
            cursor.execute(
                """
                SELECT * FROM diaryentries
                WHERE user_id = ?
                ORDER BY created_at DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
            rows = cursor.fetchall()
        return [_row_to_entry(row) for row in rows]

    def delete(self, user_id: str, entry_id: int) -> bool:
        with self._cursor("delete diary entry") as cursor:
            cursor.execute(
                "DELETE FROM diaryentries WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            )
            return cursor.rowcount > 0
