"""Goals — named targets with a 0–100 progress percentage."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from src.core.base import ListModule
from src.core.ids import new_id
from src.core.numbers import clamp_progress
from src.data.models import Goal

logger = logging.getLogger(__name__)


class Goals(ListModule):
    key = "life:goals"
    field = "goals"
    adapter = TypeAdapter(list[Goal])

    def add(self, name: str) -> Goal | None:
        name = name.strip()
        if not name:
            return None
        goal = Goal(id=new_id(self._ids()), name=name, progress=0)
        goal = self._prepend(goal)
        logger.info("Goal added: #%s '%s'", goal.id, name)
        return goal

    def set_progress(self, goal_id: str, raw_value: object) -> Goal | None:
        """Store progress parsed from raw input; non-numeric means 0, then clamp to [0, 100]."""
        return self._update(goal_id, progress=clamp_progress(raw_value))
