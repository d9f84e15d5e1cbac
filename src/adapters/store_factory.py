"""Storage factory — creates the right key-value substrate based on config."""

from __future__ import annotations

from src.config import settings
from src.ports.storage_port import KeyValueStore


def create_key_value_store(db_path: str | None = None) -> KeyValueStore:
    """Return the substrate matching the STORAGE_BACKEND setting.

    Args:
        db_path: Overrides DATABASE_PATH for the sqlite backend.
    """
    backend = settings.STORAGE_BACKEND.lower()

    if backend == "sqlite":
        from src.adapters.sqlite_store import SQLiteKeyValueStore

        return SQLiteKeyValueStore(db_path=db_path or settings.DATABASE_PATH)

    if backend == "memory":
        from src.adapters.memory_store import MemoryKeyValueStore

        return MemoryKeyValueStore()

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")
