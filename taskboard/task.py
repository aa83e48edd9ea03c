"""A single task with a title, description, due date and priority."""

from __future__ import annotations

import itertools
import json
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

_ids = itertools.count(1)

SEPARATOR = "------------------------"


def _next_id() -> int:
    return next(_ids)


@dataclass
class Task:
    """A task; every new task gets the next id in a process-wide sequence."""

    title: str
    description: str
    due_date: datetime
    priority: int
    completed: bool = field(default=False, init=False)
    id: int = field(default_factory=_next_id, init=False)

    def _local_due(self) -> datetime:
        """The due date in local time; naive datetimes are taken as local."""
        if self.due_date.tzinfo is None:
            return self.due_date
        return self.due_date.astimezone()

    def due_date_string(self) -> str:
        """The local due date as YYYY-MM-DD."""
        return self._local_due().strftime("%Y-%m-%d")

    def to_json(self) -> str:
        """A compact JSON object describing the task."""
        return json.dumps(
            {
                "id": self.id,
                "title": self.title,
                "description": self.description,
                "completed": self.completed,
                "dueDate": self.due_date_string(),
                "priority": self.priority,
            },
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def describe(self) -> str:
        """A multi-line, human-readable description of the task."""
        status = "Completed" if self.completed else "Pending"
        return (
            f"ID: {self.id}\n"
            f"Title: {self.title}\n"
            f"Description: {self.description}\n"
            f"Status: {status}\n"
            f"Due Date: {self._local_due().ctime()}\n"
            f"Priority: {self.priority}\n"
            f"{SEPARATOR}\n"
        )

    def display(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.describe())