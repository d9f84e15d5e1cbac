"""
LifeOS Dashboard — Data Models.

The Memory pillar: every collection persists as JSON under its own key and
survives restarts. Field names on the wire (``createdAt``, ``tx``...) are kept
stable so older stored data and exported backups keep loading.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.numbers import clamp_progress


class _Entity(BaseModel):
    """Base for stored entities. Immutable; unknown fields are carried along untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)


class Task(_Entity):
    id: str
    text: str
    done: bool = False
    created_at: int = Field(default=0, alias="createdAt")  # epoch ms


class Note(_Entity):
    id: str
    text: str
    at: int = 0  # epoch ms


class Habit(_Entity):
    """A daily habit. ``log`` maps day-key → done; a missing day means not done."""

    id: str
    name: str
    log: dict[str, bool] = Field(default_factory=dict)


class Goal(_Entity):
    id: str
    name: str
    progress: int = 0  # percent, always within [0, 100]

    @field_validator("progress", mode="before")
    @classmethod
    def clamp(cls, v: object) -> int:
        return clamp_progress(v)


class HealthEntry(_Entity):
    """One day's health readings, kept as the user typed them."""

    weight: str | None = None
    sleep: str | None = None


class HealthState(_Entity):
    entries: dict[str, HealthEntry] = Field(default_factory=dict)


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(_Entity):
    id: str
    date: str = ""                       # day-key YYYY-MM-DD
    type: TransactionType = TransactionType.EXPENSE
    amount: float
    category: str = ""
    note: str = ""


class Event(_Entity):
    id: str
    title: str
    date: str                            # day-key YYYY-MM-DD
    time: str = ""                       # free-form, usually HH:MM
    note: str = ""


# ---------------------------------------------------------------------------
# Input forms — what the UI hands to the domain modules
# ---------------------------------------------------------------------------

class TransactionForm(BaseModel):
    """Unvalidated ledger input. ``amount`` is raw text until Finance parses it."""

    type: TransactionType = TransactionType.EXPENSE
    amount: str | float = ""
    category: str = ""
    note: str = ""


class EventForm(BaseModel):
    """Agenda input. ``date`` of None means today."""

    title: str = ""
    date: str | None = None
    time: str = ""
    note: str = ""
