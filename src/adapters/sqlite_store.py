"""SQLite adapter — durable key-value substrate in a single table."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from src.ports.storage_port import StorageError

logger = logging.getLogger(__name__)


class SQLiteKeyValueStore:
    """SQLite-backed implementation of KeyValueStore.

    Every get/set opens its own connection, so a broken database file only
    affects the call that touches it.
    """

    def __init__(self, db_path: str | None = None) -> None:
        if db_path is None:
            from src.config import settings
            db_path = settings.DATABASE_PATH

        self._db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        try:
            self._init_db()
        except StorageError as exc:
            logger.warning("Key-value table unavailable at %s: %s", db_path, exc)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _execute(self, query: str, params: tuple = ()) -> list[tuple]:
        try:
            with self._connect() as conn:
                return conn.execute(query, params).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc

    def _init_db(self) -> None:
        """Create the kv table if it doesn't exist."""
        self._execute("""
            CREATE TABLE IF NOT EXISTS kv (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        logger.debug("Key-value table initialized at %s", self._db_path)

    def get(self, key: str) -> str | None:
        try:
            rows = self._execute("SELECT value FROM kv WHERE key = ?", (key,))
        except StorageError as exc:
            logger.warning("Read of '%s' failed: %s", key, exc)
            return None
        if not rows:
            return None
        return rows[0][0]

    def set(self, key: str, value: str) -> None:
        try:
            self._execute(
                """
                INSERT INTO kv (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
        except StorageError as exc:
            logger.warning("Write of '%s' failed, keeping previous value: %s", key, exc)
