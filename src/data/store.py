"""
LifeOS Dashboard — Typed Collection Store.

Bridges one substrate key to one typed in-memory collection. Reading is
forgiving: a missing key, broken JSON or a value of the wrong shape all fall
back to the caller's default and never raise.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from src.ports.storage_port import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CollectionStore(Generic[T]):
    """JSON (de)serialization of one collection under one substrate key."""

    def __init__(self, substrate: KeyValueStore, key: str, adapter: TypeAdapter[T]) -> None:
        self._substrate = substrate
        self._key = key
        self._adapter = adapter

    @property
    def key(self) -> str:
        return self._key

    def decode(self, obj: Any) -> T | None:
        """Validate an already-parsed JSON value; None if it has the wrong shape."""
        try:
            return self._adapter.validate_python(obj)
        except ValidationError as exc:
            logger.warning(
                "Value for '%s' does not match the expected shape (%d errors)",
                self._key, exc.error_count(),
            )
            return None

    def encode(self, value: T) -> Any:
        """Return a JSON-ready deep copy of ``value``."""
        return self._adapter.dump_python(
            value, mode="json", by_alias=True, exclude_none=True,
        )

    def load(self, default: T) -> T:
        raw = self._substrate.get(self._key)
        if raw is None:
            logger.debug("No stored value for '%s', using default", self._key)
            return default
        try:
            obj = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Stored value for '%s' is not valid JSON: %s", self._key, exc)
            return default
        value = self.decode(obj)
        if value is None:
            return default
        return value

    def save(self, value: T) -> None:
        self._substrate.set(self._key, json.dumps(self.encode(value)))
        logger.debug("Saved '%s'", self._key)
