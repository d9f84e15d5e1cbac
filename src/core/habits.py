"""Habits — daily check-offs and streak counting."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from src.core.base import ListModule
from src.core.datekeys import shift_day_key
from src.core.ids import new_id
from src.data.models import Habit

logger = logging.getLogger(__name__)

_STARTER_HABITS = ("Move", "Read", "Mindfulness")


class Habits(ListModule):
    key = "life:habits"
    field = "habits"
    adapter = TypeAdapter(list[Habit])

    @classmethod
    def default(cls) -> list[Habit]:
        """First-run list: a few starter habits with empty logs."""
        habits: list[Habit] = []
        for name in _STARTER_HABITS:
            habits.append(Habit(id=new_id(h.id for h in habits), name=name))
        return habits

    def add(self, name: str) -> Habit | None:
        name = name.strip()
        if not name:
            return None
        habit = Habit(id=new_id(self._ids()), name=name)
        habit = self._prepend(habit)
        logger.info("Habit added: #%s '%s'", habit.id, name)
        return habit

    def toggle_today(self, habit_id: str) -> Habit | None:
        """Flip today's check-off; a day never logged counts as not done."""
        habit = self.get(habit_id)
        if habit is None:
            return None
        today = self.today()
        log = {**habit.log, today: not habit.log.get(today, False)}
        return self._update(habit_id, log=log)

    def streak(self, habit: Habit) -> int:
        """Count consecutive done days ending today.

        The chain must include today: if today isn't checked off yet the
        streak is 0, however long the run before it.
        """
        count = 0
        day = self.today()
        while habit.log.get(day) is True:
            count += 1
            day = shift_day_key(day, -1)
        return count
