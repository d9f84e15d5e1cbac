"""Shared test fixtures and configuration.

Pins environment variables before any src imports so src.config never reads
a developer's .env, and provides a memory substrate, a fixed clock and a
ready dashboard.
"""

import os

# Patch env vars BEFORE any src imports
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_PATH", "data/test_dashboard.db")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from datetime import datetime, timezone

import pytest

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
TODAY = "2024-03-15"


@pytest.fixture
def clock():
    """A clock frozen at NOW."""
    return lambda: NOW


@pytest.fixture
def kv():
    """Return an empty in-memory substrate."""
    from src.adapters.memory_store import MemoryKeyValueStore
    return MemoryKeyValueStore()


@pytest.fixture
def tmp_db_path(tmp_path):
    """Return a temporary SQLite DB path."""
    return str(tmp_path / "test_dashboard.db")


@pytest.fixture
def dashboard(kv, clock):
    """Return a Dashboard over the memory substrate with the frozen clock."""
    from src.core.snapshot import Dashboard
    return Dashboard(kv, clock=clock)
