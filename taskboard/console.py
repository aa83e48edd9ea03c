"""An interactive, menu-driven task list with priority and normal tasks."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

MENU = (
    "\n=== Task Manager Menu ===\n"
    "1. Add New Task\n"
    "2. Display All Tasks\n"
    "3. Mark Task as Completed\n"
    "4. Remove Completed Tasks\n"
    "5. Exit\n"
    "Enter your choice: "
)

EXIT_CHOICE = 5


@dataclass
class SimpleTask:
    """A task whose priority and due date are free text."""

    title: str
    description: str
    priority: str
    due_date: str
    completed: bool = False


def _format_list(tasks: Iterable[SimpleTask]) -> str:
    return "".join(
        f"\n{index}. Title: {task.title}"
        f"\n   Description: {task.description}"
        f"\n   Priority: {task.priority}"
        f"\n   Due Date: {task.due_date}"
        f"\n   Status: {'Completed' if task.completed else 'Pending'}"
        "\n"
        for index, task in enumerate(tasks, start=1)
    )


class ConsoleTaskManager:
    """High-priority tasks go to the front of a queue, low ones to its back, the rest to a list."""

    def __init__(self) -> None:
        self._normal: list[SimpleTask] = []
        self._priority: deque[SimpleTask] = deque()

    def add_task(self, task: SimpleTask) -> None:
        """File a task by its priority text: High, Low, or anything else."""
        if task.priority == "High":
            self._priority.appendleft(task)
        elif task.priority == "Low":
            self._priority.append(task)
        else:
            self._normal.append(task)

    def priority_tasks(self) -> list[SimpleTask]:
        """The priority queue, front first."""
        return list(self._priority)

    def normal_tasks(self) -> list[SimpleTask]:
        """The normal tasks in insertion order."""
        return list(self._normal)

    def format_tasks(self) -> str:
        """The full listing: priority tasks, then normal tasks."""
        return (
            "\n=== Priority Tasks ===\n"
            + _format_list(self._priority)
            + "\n=== Normal Tasks ===\n"
            + _format_list(self._normal)
        )

    def display_tasks(self, file: TextIO | None = None) -> None:
        """Write the listing to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format_tasks())

    def mark_task_completed(self, title: str) -> bool:
        """Complete the first task with this title, normal tasks searched first."""
        for task in (*self._normal, *self._priority):
            if task.title == title:
                task.completed = True
                return True
        return False

    def remove_completed_tasks(self) -> None:
        """Drop every completed task, keeping the order of the rest."""
        self._normal = [task for task in self._normal if not task.completed]
        self._priority = deque(task for task in self._priority if not task.completed)


def _read_choice(stdin: TextIO) -> int | None:
    """The next menu choice; None at end of input, 0 for anything not a number."""
    while True:
        line = stdin.readline()
        if not line:
            return None
        text = line.strip()
        if not text:
            continue
        try:
            return int(text)
        except ValueError:
            return 0


def _prompt(stdin: TextIO, stdout: TextIO, message: str) -> str:
    stdout.write(message)
    return stdin.readline().rstrip("\r\n")


def run_menu(manager: ConsoleTaskManager, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user exits or input ends."""
    while True:
        stdout.write(MENU)
        choice = _read_choice(stdin)
        if choice is None:
            return
        if choice == 1:
            title = _prompt(stdin, stdout, "Enter task title: ")
            description = _prompt(stdin, stdout, "Enter task description: ")
            priority = _prompt(stdin, stdout, "Enter priority (High/Medium/Low): ")
            due_date = _prompt(stdin, stdout, "Enter due date (DD/MM/YYYY): ")
            manager.add_task(SimpleTask(title, description, priority, due_date))
            stdout.write("Task added successfully!\n")
        elif choice == 2:
            manager.display_tasks(stdout)
        elif choice == 3:
            title = _prompt(stdin, stdout, "Enter task title to mark as completed: ")
            if manager.mark_task_completed(title):
                stdout.write("Task marked as completed!\n")
            else:
                stdout.write("Task not found!\n")
        elif choice == 4:
            manager.remove_completed_tasks()
            stdout.write("Completed tasks removed!\n")
        elif choice == EXIT_CHOICE:
            stdout.write("Thank you for using Task Manager!\n")
            return
        else:
            stdout.write("Invalid choice! Please try again.\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    run_menu(ConsoleTaskManager(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())