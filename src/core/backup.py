"""Backup files — write snapshots to disk and read them back.

The only async boundary in the core: reading an import file happens off the
event loop, then the parsed document is applied synchronously.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from src.core.datekeys import day_key
from src.core.snapshot import Dashboard

logger = logging.getLogger(__name__)


def export_filename(day: str | None = None) -> str:
    return f"life-dashboard-{day or day_key()}.json"


def export_to_file(dashboard: Dashboard, directory: str | Path | None = None) -> Path:
    """Write a pretty-printed snapshot into ``directory`` and return its path."""
    if directory is None:
        from src.config import settings
        directory = settings.EXPORT_DIR

    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / export_filename(dashboard.tasks.today())
    path.write_text(
        json.dumps(dashboard.export_snapshot(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Snapshot exported to %s", path)
    return path


async def import_from_file(dashboard: Dashboard, path: str | Path) -> bool:
    """Read a backup file and import it. Unreadable files change nothing."""
    try:
        text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read import file %s: %s", path, exc)
        return False
    imported = dashboard.import_json(text)
    if imported:
        logger.info("Snapshot imported from %s", path)
    return imported
