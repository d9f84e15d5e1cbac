"""Notes — quick capture, newest first."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from src.core.base import ListModule
from src.core.ids import new_id
from src.data.models import Note

logger = logging.getLogger(__name__)


class Notes(ListModule):
    key = "life:notes"
    field = "notes"
    adapter = TypeAdapter(list[Note])

    def add(self, text: str) -> Note | None:
        text = text.strip()
        if not text:
            return None
        note = Note(id=new_id(self._ids()), text=text, at=self.now_ms())
        note = self._prepend(note)
        logger.info("Note added: #%s", note.id)
        return note
