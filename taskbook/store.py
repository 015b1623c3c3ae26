"""Plain-text storage of tasks, one comma-separated record per line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from taskbook.task import Task, TaskPriority, TaskStatus

_FIELD_COUNT = 8
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ID_ERROR = "Task ID must be a positive integer!"


def _read_int(text: str) -> int:
    """Read the integer at the start of ``text`` as a 32-bit signed value."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"No task ID in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"Task ID out of range: {match.group(1)}")
    return value


def _record_id(line: str) -> int:
    return _read_int(line.split(",", 1)[0])


def _lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` split on newlines only."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    yield from parts


def format_task(task: Task) -> str:
    """Return the stored line for ``task``, without a trailing newline."""
    return ",".join(
        [
            str(task.task_id),
            task.category,
            task.title,
            task.description,
            task.deadline,
            task.priority.value,
            task.status.value,
            task.label,
        ]
    )


def parse_task(line: str) -> Task:
    """Build a task from a stored line.

    The ID must be a positive integer. Priority and status are matched
    without regard to letter case; unrecognised values keep the defaults.
    Missing fields are empty and anything past the label is ignored.
    """
    fields = line.split(",")
    fields += [""] * (_FIELD_COUNT - len(fields))
    id_text, category, title, description, deadline, priority, status, label = (
        fields[:_FIELD_COUNT]
    )

    task_id = _read_int(id_text)
    if task_id <= 0:
        raise ValueError(_ID_ERROR)

    task = Task(
        task_id=task_id,
        title=title,
        description=description,
        deadline=deadline,
        category=category,
        label=label,
    )
    lowered_priority = priority.lower()
    for candidate in TaskPriority:
        if candidate.value.lower() == lowered_priority:
            task.priority = candidate
    lowered_status = status.lower()
    for candidate in TaskStatus:
        if candidate.value.lower() == lowered_status:
            task.status = candidate
    return task


@dataclass
class TaskStore:
    """A file holding one task per line."""

    path: Path = Path("project.txt")

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def _read_text(self) -> str:
        with self.path.open(encoding="utf-8", newline="") as handle:
            return handle.read()

    def load(self) -> list[Task]:
        """Return every stored task in file order; none if the file is absent."""
        try:
            text = self._read_text()
        except FileNotFoundError:
            return []
        return [parse_task(line) for line in _lines(text)]

    def append(self, task: Task) -> None:
        """Add ``task`` at the end of the file, creating it if needed."""
        with self.path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(format_task(task) + "\n")

    def write_all(self, tasks: Iterable[Task]) -> None:
        """Replace the file's contents with ``tasks``."""
        with self.path.open("w", encoding="utf-8", newline="") as handle:
            for task in tasks:
                handle.write(format_task(task) + "\n")

    def contains_id(self, task_id: int) -> bool:
        """Tell whether a stored line carries ``task_id``."""
        try:
            text = self._read_text()
        except FileNotFoundError:
            return False
        return any(_record_id(line) == task_id for line in _lines(text))

    def delete(self, task_id: int) -> bool:
        """Remove the task with ``task_id`` and report whether it was there.

        The file is rewritten only when the task was found. A missing file
        raises FileNotFoundError.
        """
        remaining: list[Task] = []
        found = False
        for line in _lines(self._read_text()):
            if _record_id(line) == task_id:
                found = True
            else:
                remaining.append(parse_task(line))
        if found:
            self.write_all(remaining)
        return found