"""Shared plumbing for domain modules.

Each module owns one collection: it loads it once, mutates it in memory and
saves after every change. The in-memory value stays the source of truth even
when a save fails.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import TypeAdapter

from src.core.datekeys import day_key, utc_now
from src.data.store import CollectionStore
from src.ports.storage_port import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
Clock = Callable[[], datetime]


class DomainModule(Generic[T]):
    """Owner of one persisted collection.

    Subclasses set ``key`` (substrate key, never renamed), ``field`` (snapshot
    field name), ``adapter`` and ``default``.
    """

    key: ClassVar[str]
    field: ClassVar[str]
    adapter: ClassVar[TypeAdapter]

    def __init__(self, substrate: KeyValueStore, clock: Clock | None = None) -> None:
        self._clock = clock or utc_now
        self._store: CollectionStore[T] = CollectionStore(substrate, self.key, self.adapter)
        self._items: T = self._store.load(self.default())

    @classmethod
    def default(cls) -> T:
        raise NotImplementedError

    @property
    def items(self) -> T:
        """A copy of the collection. Change it through the module's operations."""
        return copy.deepcopy(self._items)

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> str:
        return day_key(self.now())

    def now_ms(self) -> int:
        return int(self.now().timestamp() * 1000)

    def _commit(self, value: T) -> None:
        self._items = value
        self._store.save(value)

    def snapshot(self) -> Any:
        """JSON-ready copy of the collection; later mutations don't leak into it."""
        return self._store.encode(self._items)

    def decode(self, obj: Any) -> T | None:
        return self._store.decode(obj)

    def replace(self, value: T) -> None:
        """Overwrite the whole collection with an already-decoded value."""
        self._commit(value)
        logger.info("Collection '%s' replaced", self.field)


class ListModule(DomainModule[list]):
    """A newest-first list of entities with an ``id`` attribute."""

    @classmethod
    def default(cls) -> list:
        return []

    def _ids(self) -> set[str]:
        return {item.id for item in self._items}

    def get(self, item_id: str):
        for item in self._items:
            if item.id == item_id:
                return item.model_copy(deep=True)
        return None

    def _prepend(self, item):
        """Insert at the front and return a detached copy for the caller."""
        self._commit([item, *self._items])
        return item.model_copy(deep=True)

    def _update(self, item_id: str, **changes):
        """Replace the matching entity with an updated copy; None if not found."""
        updated = None
        items = []
        for item in self._items:
            if item.id == item_id:
                item = item.model_copy(update=changes)
                updated = item
            items.append(item)
        if updated is None:
            return None
        self._commit(items)
        return updated.model_copy(deep=True)

    def remove(self, item_id: str) -> bool:
        """Delete an entity by id. Returns False when nothing matched."""
        items = [item for item in self._items if item.id != item_id]
        if len(items) == len(self._items):
            return False
        self._commit(items)
        logger.info("Removed %s #%s", self.field, item_id)
        return True
