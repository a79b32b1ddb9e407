"""SQLite connection manager for wellness data."""
import sqlite3
import threading
from contextlib import contextmanager
from typing import Generator, Optional
import logging

from .config import get_settings

log = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS profiles (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    bio TEXT,
    location TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT
);

CREATE TABLE IF NOT EXISTS credentials (
    user_id TEXT PRIMARY KEY REFERENCES profiles(id) ON DELETE CASCADE,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS sessions (
    token TEXT PRIMARY KEY,
    user_id TEXT NOT NULL REFERENCES profiles(id) ON DELETE CASCADE,
    created_at TEXT NOT NULL,
    expires_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS moodlogs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL REFERENCES profiles(id) ON DELETE CASCADE,
    emoji TEXT NOT NULL,
    note TEXT,
    date TEXT NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT,
    UNIQUE (user_id, date)
);

CREATE TABLE IF NOT EXISTS diaryentries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL REFERENCES profiles(id) ON DELETE CASCADE,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    mood TEXT,
    word_count INTEGER NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS chatmessages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL REFERENCES profiles(id) ON DELETE CASCADE,
    content TEXT NOT NULL,
    sender TEXT NOT NULL CHECK (sender IN ('user', 'ai')),
    timestamp TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS aisummaries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL REFERENCES profiles(id) ON DELETE CASCADE,
    period TEXT NOT NULL,
    summary TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS airecommendations (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL REFERENCES profiles(id) ON DELETE CASCADE,
    source TEXT NOT NULL,
    context TEXT,
    recommendations TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_moodlogs_user_date ON moodlogs (user_id, date DESC);
CREATE INDEX IF NOT EXISTS idx_diaryentries_user_created ON diaryentries (user_id, created_at DESC);
CREATE INDEX IF NOT EXISTS idx_chatmessages_user_ts ON chatmessages (user_id, timestamp);
"""


class PersistenceError(Exception):
    """Raised by the stores when a database operation fails."""


class DatabaseManager:
    """
    SQLite database manager for wellness data.

    Opens a short-lived connection per operation. The schema is created
    the first time a connection is requested.
    """

    def __init__(self, settings=None, db_path: Optional[str] = None):
        self.settings = settings or get_settings()
        self.db_path = db_path or self.settings.database_path
        self._schema_ready = False
        self._schema_lock = threading.Lock()

    @contextmanager
    def connect(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Get a read-write connection.

        Commits when the block exits cleanly and rolls back otherwise.
        """
        self._ensure_schema()
        conn = self._open()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create all tables and indexes if they do not exist yet."""
        conn = self._open()
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()
        log.info("Wellness schema ready at %s", self.db_path)

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        with self._schema_lock:
            if not self._schema_ready:
                self.init_schema()
                self._schema_ready = True

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        conn.execute("PRAGMA foreign_keys = ON")
        return conn


# Singleton instance
db_manager = DatabaseManager()


def get_db() -> DatabaseManager:
    """FastAPI dependency returning the shared database manager."""
    return db_manager
