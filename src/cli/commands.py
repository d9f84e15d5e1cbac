"""
LifeOS Dashboard — Command line.

A thin consumer of the core: it opens the configured substrate, reads
snapshots and calls the export/import operations. No state logic lives here.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from src.adapters.store_factory import create_key_value_store
from src.core.backup import export_to_file, import_from_file
from src.core.snapshot import Dashboard

logger = logging.getLogger(__name__)


def render_summary(dashboard: Dashboard) -> str:
    """Plain-text overview of today's state."""
    lines: list[str] = [f"LifeOS — {dashboard.tasks.today()}", ""]

    open_tasks = [t for t in dashboard.tasks.items if not t.done]
    lines.append(f"Tasks: {len(open_tasks)} open / {len(dashboard.tasks.items)} total")
    for task in open_tasks[:8]:
        lines.append(f"  [ ] {task.text}")

    lines.append("Habits:")
    for habit in dashboard.habits.items:
        lines.append(f"  {habit.name}: {dashboard.habits.streak(habit)}d streak")

    for goal in dashboard.goals.items:
        lines.append(f"Goal {goal.name}: {goal.progress}%")

    totals = dashboard.finance.monthly_totals()
    lines.append(
        f"This month: +{totals.income:.0f} -{totals.expense:.0f} = {totals.net:.0f}"
    )

    lines.append("Health (7d):")
    for row in dashboard.health.last7():
        weight = row.entry.weight if row.entry and row.entry.weight else "-"
        sleep = row.entry.sleep if row.entry and row.entry.sleep else "-"
        lines.append(f"  {row.day}  weight {weight}  sleep {sleep}")

    for event in dashboard.events.on_day():
        lines.append(f"Today {event.time or '--:--'} {event.title}")

    if dashboard.journal.text_for():
        lines.append("Journal: written today")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifeos", description="LifeOS personal dashboard")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("summary", help="print today's overview")
    export = sub.add_parser("export", help="write a JSON backup")
    export.add_argument("directory", nargs="?", default=None)
    imp = sub.add_parser("import", help="restore from a JSON backup")
    imp.add_argument("file")
    return parser


def run(argv: list[str] | None = None, dashboard: Dashboard | None = None) -> int:
    """Execute one command; returns a process exit code."""
    args = build_parser().parse_args(argv)
    if dashboard is None:
        dashboard = Dashboard(create_key_value_store())

    if args.command == "export":
        path = export_to_file(dashboard, args.directory)
        print(f"Exported to {path}")
        return 0

    if args.command == "import":
        if asyncio.run(import_from_file(dashboard, args.file)):
            print("Import complete")
            return 0
        print("Import failed: nothing was changed")
        return 1

    print(render_summary(dashboard))
    return 0


def main() -> None:
    """Entry point: configure logging and dispatch the command."""
    from src.config import settings

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    raise SystemExit(run())


if __name__ == "__main__":
    main()
