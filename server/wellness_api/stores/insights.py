"""Stores for AI summaries and AI recommendations.

Both tables are append-only: regenerating inserts a new row.
"""
import json
from typing import Optional

from ..models.summary import AIRecommendation, AISummary
from .base import BaseStore, utc_now


def _row_to_summary(row) -> AISummary:
    return AISummary(
        id=row["id"],
        user_id=row["user_id"],
        period=row["period"],
        summary=row["summary"],
        created_at=row["created_at"],
    )


def _row_to_recommendation(row) -> AIRecommendation:
    return AIRecommendation(
        id=row["id"],
        user_id=row["user_id"],
        source=row["source"],
        context=row["context"],
        recommendations=json.loads(row["recommendations"] or "[]"),
        created_at=row["created_at"],
    )


class SummaryStore(BaseStore):

    def create(self, user_id: str, period: str, summary: str) -> AISummary:
        with self._cursor("save summary") as cursor:
            cursor.execute(
                "INSERT INTO aisummaries (user_id, period, summary, created_at) VALUES (?, ?, ?, ?)",
                (user_id, period, summary, utc_now()),
            )
            cursor.execute("SELECT * FROM aisummaries WHERE id = ?", (cursor.lastrowid,))
            row = cursor.fetchone()
        return _row_to_summary(row)

    def list_for_user(self, user_id: str) -> list[AISummary]:
        with self._cursor("load summaries") as cursor:
            cursor.execute(
                "SELECT * FROM aisummaries WHERE user_id = ? ORDER BY created_at DESC, id DESC",
                (user_id,),
            )
            rows = cursor.fetchall()
        return [_row_to_summary(row) for row in rows]


class RecommendationStore(BaseStore):

    def create(
        self,
        user_id: str,
        source: str,
        recommendations: list[str],
        context: Optional[str] = None,
    ) -> AIRecommendation:
        with self._cursor("save recommendations") as cursor:
            cursor.execute(
                """
                INSERT INTO airecommendations (user_id, source, context, recommendations, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (user_id, source, context, json.dumps(recommendations), utc_now()),
            )
            cursor.execute("SELECT * FROM airecommendations WHERE id = ?", (cursor.lastrowid,))
            row = cursor.fetchone()
        return _row_to_recommendation(row)

    def list_for_user(self, user_id: str) -> list[AIRecommendation]:
        with self._cursor("load recommendations") as cursor:
            cursor.execute(
                "SELECT * FROM airecommendations WHERE user_id = ? ORDER BY created_at DESC, id DESC",
                (user_id,),
            )
            rows = cursor.fetchall()
        return [_row_to_recommendation(row) for row in rows]
