"""Health — daily weight and sleep readings with a rolling week view."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import get_args, Literal

from pydantic import TypeAdapter

from src.core.base import DomainModule
from src.core.datekeys import recent_day_keys
from src.data.models import HealthEntry, HealthState

logger = logging.getLogger(__name__)

HealthField = Literal["weight", "sleep"]
_FIELDS = get_args(HealthField)

WINDOW_DAYS = 7


@dataclass
class DayEntry:
    """One row of the rolling window. ``entry`` is None for days with no readings."""

    day: str
    entry: HealthEntry | None


class Health(DomainModule[HealthState]):
    key = "life:health"
    field = "health"
    adapter = TypeAdapter(HealthState)

    @classmethod
    def default(cls) -> HealthState:
        return HealthState()

    def today_entry(self) -> HealthEntry | None:
        return self._items.entries.get(self.today())

    def update(self, field: HealthField, value: str) -> HealthEntry | None:
        """Set one reading for today, keeping the day's other readings."""
        if field not in _FIELDS:
            logger.warning("Ignoring unknown health field %r", field)
            return None
        today = self.today()
        current = self._items.entries.get(today)
        values = current.model_dump(exclude_none=True) if current else {}
        values[field] = value
        entry = HealthEntry(**values)
        self._commit(HealthState(entries={**self._items.entries, today: entry}))
        return entry

    def last7(self) -> list[DayEntry]:
        """Today and the six days before it, oldest first, readings or not."""
        return [
            DayEntry(day=day, entry=self._items.entries.get(day))
            for day in recent_day_keys(WINDOW_DAYS, self.now())
        ]
