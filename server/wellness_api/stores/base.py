"""Shared helpers for the per-entity stores."""
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generator

from ..database import DatabaseManager, PersistenceError

log = logging.getLogger(__name__)


def utc_now() -> str:
    """Current UTC timestamp in ISO-8601 form, as stored in every table."""
    return datetime.now(timezone.utc).isoformat()


class BaseStore:
    """Wraps a DatabaseManager and turns sqlite errors into PersistenceError."""

    def __init__(self, db: DatabaseManager):
        self.db = db

    @contextmanager
    def _cursor(self, action: str) -> Generator[sqlite3.Cursor, None, None]:
        try:
            with self.db.connect() as conn:
                yield conn.cursor()
        except sqlite3.Error as e:
            log.error("Failed to %s: %s", action, e)
            raise PersistenceError(f"Failed to {action}") from e
