"""Events — a simple agenda keyed by day."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from src.core.base import ListModule
from src.core.ids import new_id
from src.data.models import Event, EventForm

logger = logging.getLogger(__name__)


class Events(ListModule):
    key = "life:events"
    field = "events"
    adapter = TypeAdapter(list[Event])

    def add(self, form: EventForm) -> Event | None:
        """Add an agenda entry. A title is required; the date defaults to today."""
        title = form.title.strip()
        if not title:
            return None
        event = Event(
            id=new_id(self._ids()),
            title=title,
            date=form.date or self.today(),
            time=form.time,
            note=form.note,
        )
        event = self._prepend(event)
        logger.info("Event added: #%s '%s' on %s", event.id, title, event.date)
        return event

    def on_day(self, day: str | None = None) -> list[Event]:
        """Events for one day (today if omitted), ordered by time."""
        day = day or self.today()
        return sorted((e for e in self._items if e.date == day), key=lambda e: e.time)
