"""
LifeOS Dashboard — Snapshot export/import.

Composes all eight domain modules over one substrate. Export copies every
collection into a single document; import fans a document back out, replacing
only the collections whose field is present.

A document that isn't a JSON object changes nothing. Inside an object, each
field stands alone: blank values (null, "", 0, false) count as absent and a
malformed field is skipped without blocking the others. Every field is decoded
before any module is touched.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from src.core.base import Clock, DomainModule
from src.core.events import Events
from src.core.finance import Finance
from src.core.goals import Goals
from src.core.habits import Habits
from src.core.health import Health
from src.core.journal import Journal
from src.core.notes import Notes
from src.core.tasks import Tasks
from src.ports.storage_port import KeyValueStore

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    """Scalars that carry nothing to import. Empty lists and maps still count."""
    if isinstance(value, (list, dict)):
        return False
    return not value


class Dashboard:
    """All domain modules sharing one substrate and one clock."""

    def __init__(self, substrate: KeyValueStore, clock: Clock | None = None) -> None:
        self.tasks = Tasks(substrate, clock)
        self.notes = Notes(substrate, clock)
        self.habits = Habits(substrate, clock)
        self.goals = Goals(substrate, clock)
        self.health = Health(substrate, clock)
        self.finance = Finance(substrate, clock)
        self.events = Events(substrate, clock)
        self.journal = Journal(substrate, clock)

    @property
    def modules(self) -> dict[str, DomainModule]:
        """Snapshot field name → owning module, in export order."""
        return {
            module.field: module
            for module in (
                self.tasks, self.notes, self.habits, self.goals,
                self.health, self.finance, self.events, self.journal,
            )
        }

    def export_snapshot(self) -> dict[str, Any]:
        """Copy every collection into one document. Touches no module."""
        return {name: module.snapshot() for name, module in self.modules.items()}

    def import_snapshot(self, document: Any) -> bool:
        """Replace the collections named in ``document``; leave the rest alone.

        Returns False, changing nothing, if the document isn't a mapping. A
        field whose value doesn't decode is skipped; the other fields still
        apply.
        """
        if not isinstance(document, Mapping):
            logger.warning("Import rejected: expected an object, got %s", type(document).__name__)
            return False

        decoded: dict[str, Any] = {}
        for name, module in self.modules.items():
            if _is_blank(document.get(name)):
                continue
            value = module.decode(document[name])
            if value is None:
                logger.warning("Import skipped field '%s': malformed value", name)
                continue
            decoded[name] = value

        modules = self.modules
        for name, value in decoded.items():
            modules[name].replace(value)
        logger.info("Imported snapshot fields: %s", ", ".join(decoded) or "(none)")
        return True

    def import_json(self, text: str) -> bool:
        """Parse and import a JSON document. Never raises."""
        try:
            document = json.loads(text)
        except (json.JSONDecodeError, TypeError) as exc:
            logger.warning("Import rejected: not valid JSON: %s", exc)
            return False
        return self.import_snapshot(document)
