"""Journal — one free-text entry per day."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from src.core.base import DomainModule

logger = logging.getLogger(__name__)


class Journal(DomainModule[dict]):
    key = "life:journal"
    field = "journal"
    adapter = TypeAdapter(dict[str, str])

    @classmethod
    def default(cls) -> dict[str, str]:
        return {}

    def text_for(self, day: str | None = None) -> str:
        return self._items.get(day or self.today(), "")

    def set_text(self, text: str, day: str | None = None) -> None:
        """Overwrite the whole entry for a day (today if omitted)."""
        day = day or self.today()
        self._commit({**self._items, day: text})
        logger.debug("Journal entry for %s updated (%d chars)", day, len(text))
