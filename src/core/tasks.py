"""Tasks — a newest-first to-do list."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from src.core.base import ListModule
from src.core.ids import new_id
from src.data.models import Task

logger = logging.getLogger(__name__)


class Tasks(ListModule):
    key = "life:tasks"
    field = "tasks"
    adapter = TypeAdapter(list[Task])

    def add(self, text: str) -> Task | None:
        """Add an open task. Blank text is ignored."""
        text = text.strip()
        if not text:
            return None
        task = Task(id=new_id(self._ids()), text=text, done=False, created_at=self.now_ms())
        task = self._prepend(task)
        logger.info("Task added: #%s '%s'", task.id, text)
        return task

    def toggle(self, task_id: str) -> Task | None:
        """Flip a task between open and done."""
        task = self.get(task_id)
        if task is None:
            return None
        return self._update(task_id, done=not task.done)
