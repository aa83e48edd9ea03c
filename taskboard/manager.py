"""A collection of regular and urgent tasks."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TextIO

from taskboard.task import Task


def parse_due_date(text: str) -> datetime:
    """Parse a YYYY-MM-DD date as local midnight; raise ValueError if malformed."""
    return datetime.strptime(text.strip(), "%Y-%m-%d")


def _find(tasks: Iterable[Task], predicate: Callable[[Task], bool]) -> Task | None:
    return next((task for task in tasks if predicate(task)), None)


class TaskManager:
    """Regular tasks kept in insertion order and urgent tasks in a double-ended queue."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._urgent: deque[Task] = deque()

    def add_task(self, task: Task) -> None:
        """Append a regular task."""
        self._tasks.append(task)

    def add_urgent_task(self, task: Task, to_front: bool = True) -> None:
        """Add an urgent task at the front or the back of the urgent queue."""
        if to_front:
            self._urgent.appendleft(task)
        else:
            self._urgent.append(task)

    def create_task(
        self,
        title: str,
        description: str,
        due_date: str,
        priority: int,
        is_urgent: bool = False,
    ) -> Task:
        """Build a task from a YYYY-MM-DD date and add it; urgent ones go to the front."""
        task = Task(title, description, parse_due_date(due_date), priority)
        if is_urgent:
            self.add_urgent_task(task, True)
        else:
            self.add_task(task)
        return task

    @staticmethod
    def _remove(tasks: list[Task] | deque[Task], predicate: Callable[[Task], bool]) -> bool:
        task = _find(tasks, predicate)
        if task is None:
            return False
        tasks.remove(task)
        return True

    def remove_task(self, title: str) -> bool:
        """Remove the first regular task with this title."""
        return self._remove(self._tasks, lambda t: t.title == title)

    def remove_task_by_id(self, task_id: int) -> bool:
        """Remove the regular task with this id."""
        return self._remove(self._tasks, lambda t: t.id == task_id)

    def remove_urgent_task(self, title: str) -> bool:
        """Remove the first urgent task with this title."""
        return self._remove(self._urgent, lambda t: t.title == title)

    def remove_urgent_task_by_id(self, task_id: int) -> bool:
        """Remove the urgent task with this id."""
        return self._remove(self._urgent, lambda t: t.id == task_id)

    def _complete(self, predicate: Callable[[Task], bool]) -> bool:
        task = _find(self._tasks, predicate) or _find(self._urgent, predicate)
        if task is None:
            return False
        task.completed = True
        return True

    def mark_task_completed(self, title: str) -> bool:
        """Complete the first task with this title, regular tasks searched first."""
        return self._complete(lambda t: t.title == title)

    def mark_task_completed_by_id(self, task_id: int) -> bool:
        """Complete the task with this id, regular tasks searched first."""
        return self._complete(lambda t: t.id == task_id)

    def display_all_tasks(self, file: TextIO | None = None) -> None:
        """Write every regular task, then every urgent task."""
        out = file if file is not None else sys.stdout
        out.write("\n=== Regular Tasks ===\n")
        for task in self._tasks:
            task.display(out)
        out.write("\n=== Urgent Tasks ===\n")
        for task in self._urgent:
            task.display(out)

    def sort_by_priority(self) -> None:
        """Sort regular tasks from highest to lowest priority."""
        self._tasks.sort(key=lambda t: t.priority, reverse=True)

    def sort_by_due_date(self) -> None:
        """Sort regular tasks from earliest to latest due date."""
        self._tasks.sort(key=lambda t: t.due_date)

    def sort_by_title(self) -> None:
        """Sort regular tasks alphabetically by title."""
        self._tasks.sort(key=lambda t: t.title)

    def to_json(self) -> str:
        """All tasks as a JSON object with regularTasks and urgentTasks arrays."""
        regular = ",".join(task.to_json() for task in self._tasks)
        urgent = ",".join(task.to_json() for task in self._urgent)
        return f'{{"regularTasks":[{regular}],"urgentTasks":[{urgent}]}}'

    def regular_count(self) -> int:
        """Number of regular tasks."""
        return len(self._tasks)

    def urgent_count(self) -> int:
        """Number of urgent tasks."""
        return len(self._urgent)

    def all_tasks(self) -> list[Task]:
        """Regular tasks followed by urgent tasks, as a new list."""
        return [*self._tasks, *self._urgent]