"""Storage port — abstract interface for the durable key-value substrate.

Collection stores depend on this protocol, never on a specific backend.
Implementations must never raise from get/set: a failing medium leaves the
previously persisted value in place.
"""

from __future__ import annotations

from typing import Protocol


class StorageError(Exception):
    """Raised inside a backend when the underlying medium fails."""


class KeyValueStore(Protocol):
    """Synchronous string-keyed, string-valued storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...
