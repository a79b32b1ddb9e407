"""Chat message store. Messages are append-only."""
from ..models.chat import ChatMessage, Sender
from .base import BaseStore, utc_now


def _row_to_message(row) -> ChatMessage:
    return ChatMessage(
        id=row["id"],
        user_id=row["user_id"],
        content=row["content"],
        sender=row["sender"],
        timestamp=row["timestamp"],
    )


class ChatStore(BaseStore):

    def create(self, user_id: str, content: str, sender: Sender) -> ChatMessage:
        with self._cursor("save chat message") as cursor:
            cursor.execute(
                "INSERT INTO chatmessages (user_id, content, sender, timestamp) VALUES (?, ?, ?, ?)",
                (user_id, content, sender, utc_now()),
            )
            cursor.execute("SELECT * FROM chatmessages WHERE id = ?", (cursor.lastrowid,))
            row = cursor.fetchone()
        return _row_to_message(row)

    def list_for_user(self, user_id: str) -> list[ChatMessage]:
        """Full conversation in the order it happened."""
        with self._cursor("load chat messages") as cursor:
            cursor.execute(
                "SELECT * FROM chatmessages WHERE user_id = ? ORDER BY timestamp ASC, id ASC",
                (user_id,),
            )
            rows = cursor.fetchall()
        return [_row_to_message(row) for row in rows]

    def list_recent_user_messages(self, user_id: str, limit: int) -> list[ChatMessage]:
        with self._cursor("load chat messages") as cursor:
            cursor.execute(
                """
                SELECT * FROM chatmessages
                WHERE user_id = ? AND sender = 'user'
                ORDER BY timestamp DESC, id DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
            rows = cursor.fetchall()
        return [_row_to_message(row) for row in rows]
