"""A scripted walk through the task manager's operations."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import TextIO

from taskboard.manager import TaskManager
from taskboard.task import Task


def create_due_date(days_from_now: int) -> datetime:
    """The local time ``days_from_now`` whole days from now."""
    return datetime.now() + timedelta(hours=24 * days_from_now)


def run_demo(out: TextIO | None = None) -> TaskManager:
    """Run the demonstration, writing its report to ``out``; return the final manager."""
    out = out if out is not None else sys.stdout
    manager = TaskManager()

    manager.add_task(Task("Complete Report", "Write quarterly report", create_due_date(5), 2))
    manager.add_task(Task("Review Code", "Review team's pull requests", create_due_date(2), 3))
    manager.add_task(
        Task("Update Documentation", "Update API documentation", create_due_date(7), 1)
    )

    manager.add_urgent_task(
        Task("Fix Production Bug", "Critical bug in payment system", create_due_date(1), 5),
        True,
    )
    manager.add_urgent_task(
        Task("Client Meeting Prep", "Prepare presentation for client", create_due_date(1), 4),
        False,
    )

    out.write("Initial Task List:\n")
    manager.display_all_tasks(out)

    out.write("\nMarking 'Review Code' as completed...\n")
    manager.mark_task_completed("Review Code")

    out.write("\nSorting regular tasks by priority...\n")
    manager.sort_by_priority()

    out.write("\nUpdated Task List:\n")
    manager.display_all_tasks(out)

    out.write("\nRemoving 'Fix Production Bug' from urgent tasks...\n")
    manager.remove_urgent_task("Fix Production Bug")

    out.write("\nFinal Task List:\n")
    manager.display_all_tasks(out)

    out.write("\nTask Statistics:\n")
    out.write(f"Regular Tasks: {manager.regular_count()}\n")
    out.write(f"Urgent Tasks: {manager.urgent_count()}\n")
    return manager


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration on standard output."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())