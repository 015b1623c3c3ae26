"""Loading, sorting, showing and changing the tasks kept in a task file."""

from __future__ import annotations

import re
import sys
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Iterable

from taskbook.store import TaskStore
from taskbook.task import (
    Task,
    TaskPriority,
    TaskStatus,
    parse_priority,
    parse_status,
    prompt_task,
)

ReadLine = Callable[[], str]
Write = Callable[[str], None]
Clock = Callable[[], datetime]

GREEN = "\033[1;32m"
RED = "\033[1;31m"
RESET = "\033[0m"

NEAR_THRESHOLD = timedelta(hours=24)

_DATE = re.compile(r"\s*(\d{1,2})/(\d{1,2})/(\d{1,4})")
_PRIORITY_RANK = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}
_EDIT_PRIORITY_ERROR = (
    "Invalid priority. Priority must be 'Low', 'Medium', or 'High'."
)
_EDIT_STATUS_ERROR = (
    "Invalid status. Status must be 'Pending', 'In Progress', or 'Completed'."
)


class SortMethod(Enum):
    """Order in which tasks are listed."""

    DATE = 1
    PRIORITY = 2
    CATEGORY = 3


def parse_deadline(text: str) -> datetime | None:
    """Read a DD/MM/YYYY deadline as local midnight of that day.

    A day past the end of its month rolls over into the next month.
    Returns None when the text cannot be read as a date.
    """
    match = _DATE.match(text)
    if match is None:
        return None
    day, month, year = (int(part) for part in match.groups())
    if not 1 <= day <= 31 or not 1 <= month <= 12 or year < 1:
        return None
    try:
        return datetime(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def is_deadline_near(deadline: str, now: datetime | None = None) -> bool:
    """Tell whether ``deadline`` lies within 24 hours either side of ``now``."""
    moment = parse_deadline(deadline)
    if moment is None:
        return False
    if now is None:
        now = datetime.now()
    return abs(moment - now) <= NEAR_THRESHOLD


def colour_for(task: Task, now: datetime | None = None) -> str:
    """Return the terminal colour code for ``task``, or an empty string."""
    completed = task.status is TaskStatus.COMPLETED
    if is_deadline_near(task.deadline, now):
        return GREEN if completed else RED
    if completed:
        return GREEN
    if task.priority is TaskPriority.HIGH:
        return RED
    return ""


def render_task(task: Task, now: datetime | None = None) -> str:
    """Return the task's details wrapped in its colour and a reset code."""
    return colour_for(task, now) + task.details() + RESET


def sort_tasks(tasks: Iterable[Task], method: SortMethod | int) -> list[Task]:
    """Return ``tasks`` ordered by deadline text, priority or category."""
    method = SortMethod(method)
    if method is SortMethod.DATE:
        return sorted(tasks, key=lambda task: task.deadline)
    if method is SortMethod.PRIORITY:
        return sorted(tasks, key=lambda task: -_PRIORITY_RANK[task.priority])
    return sorted(tasks, key=lambda task: task.category)


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _read_nonblank(read_line: ReadLine) -> str:
    line = read_line()
    while not line.strip():
        line = read_line()
    return line.lstrip()


class TaskManager:
    """Interactive operations on the tasks kept in a store."""

    def __init__(
        self,
        store: TaskStore | None = None,
        read_line: ReadLine | None = None,
        write: Write | None = None,
        error: Write | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.store = store if store is not None else TaskStore()
        self.read_line = read_line or _read_stdin_line
        self.write = write or sys.stdout.write
        self.error = error or sys.stderr.write
        self.clock = clock or datetime.now
        self.tasks: list[Task] = []

    def create_task(self) -> Task | None:
        """Ask for a new task and store it unless its ID is already taken."""
        try:
            task = prompt_task(self.read_line, self.write)
        except ValueError as exc:
            self.error(f"Error: {exc}\n")
            return None

        if self.store.contains_id(task.task_id):
            self.write(
                "Task with the same ID already exists! "
                "Please choose a different ID.\n"
            )
            return None

        self.tasks.append(task)
        self.write("Task created successfully!\n")
        self.store.append(task)
        self.write(f"Task with ID {task.task_id} saved to file.\n")
        return task

    def view_tasks(self, method: SortMethod | int) -> list[Task]:
        """Reload the tasks, show them in the chosen order and return them."""
        try:
            method = SortMethod(method)
        except ValueError:
            return []
        self.tasks = self.store.load()
        if not self.tasks:
            self.write("No tasks present in the file!\n")
            return []
        self.tasks = sort_tasks(self.tasks, method)
        now = self.clock()
        for task in self.tasks:
            self.write(render_task(task, now) + "\n")
        return list(self.tasks)

    def edit_task(self, task_id: int) -> bool:
        """Ask for a new priority and status of a task and save all tasks.

        Returns whether the edit was saved.
        """
        if not self.tasks:
            self.tasks = self.store.load()

        task = next((t for t in self.tasks if t.task_id == task_id), None)
        if task is None:
            self.error(f"Task with ID {task_id} not found.\n")
            return False

        self.write("Enter the new Priority (Low, Medium, High): ")
        word, _, rest = _read_nonblank(self.read_line).partition(" ")
        word, _, extra = word.partition("\t")
        rest = (extra + " " + rest if extra else rest).lstrip()
        try:
            task.priority = parse_priority(word)
        except ValueError:
            self.error(f"Error: {_EDIT_PRIORITY_ERROR}\n")
            return False

        self.write("Enter the new Status (Pending, In Progress, Completed): ")
        status_text = rest if rest.strip() else _read_nonblank(self.read_line)
        try:
            task.status = parse_status(status_text)
        except ValueError:
            self.error(f"Error: {_EDIT_STATUS_ERROR}\n")
            return False

        self.write("Task edited successfully.\n")
        try:
            self.store.write_all(self.tasks)
        except OSError:
            self.error("Unable to open file for writing.\n")
            return False
        return True

    def delete_task(self, task_id: int) -> bool:
        """Remove a task from the store and report whether it was there."""
        try:
            found = self.store.delete(task_id)
        except FileNotFoundError:
            self.error(f"Unable to open file: {self.store.path}\n")
            return False
        if found:
            self.write(f"Task with ID {task_id} has been deleted.\n")
        else:
            self.write(f"Task with ID {task_id} not found.\n")
        return found