"""Task records, their priority and status, and interactive entry of a task."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

ReadLine = Callable[[], str]
Write = Callable[[str], None]

_PRIORITY_ERROR = "Invalid priority! Priority must be 'Low', 'Medium', or 'High'"
_STATUS_ERROR = (
    "Invalid status! Status must be 'Pending', 'In Progress', or 'Completed'"
)
_DATE_FORMAT_ERROR = "Invalid date format! Please enter in DD/MM/YYYY format"
_DATE_RANGE_ERROR = (
    "Invalid date! Please enter a valid date that isn't less than the current one"
)
_ID_ERROR = "Task ID must be a positive integer"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class TaskStatus(Enum):
    """Progress of a task."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    def __str__(self) -> str:
        return self.value


class TaskPriority(Enum):
    """Importance of a task."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value


@dataclass
class Task:
    """A single task with its descriptive fields."""

    task_id: int = 0
    title: str = ""
    description: str = ""
    deadline: str = ""
    priority: TaskPriority = TaskPriority.LOW
    status: TaskStatus = TaskStatus.PENDING
    category: str = ""
    label: str = ""

    def details(self) -> str:
        """Return the multi-line description shown to the user."""
        lines = [
            f"Category: {self.category}",
            f"Label: {self.label}",
            "",
            f"Task ID: {self.task_id}",
            f"Title: {self.title}",
            f"Description: {self.description}",
            f"Deadline: {self.deadline}",
            f"Priority: {self.priority.value}",
            f"Status: {self.status.value}",
        ]
        return "\n".join(lines) + "\n"


def parse_priority(text: str) -> TaskPriority:
    """Map 'low', 'medium' or 'high' in any letter case to a priority."""
    lowered = text.lower()
    for priority in TaskPriority:
        if priority.value.lower() == lowered:
            return priority
    raise ValueError(_PRIORITY_ERROR)


def parse_status(text: str) -> TaskStatus:
    """Map 'pending', 'in progress' or 'completed' in any letter case to a status."""
    lowered = text.lower()
    for status in TaskStatus:
        if status.value.lower() == lowered:
            return status
    raise ValueError(_STATUS_ERROR)


class _UnreadableNumber(ValueError):
    """A date part holds no number at all."""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise _UnreadableNumber("stoi")
    return int(match.group(1))


def check_deadline(text: str) -> str:
    """Validate a DD/MM/YYYY deadline and return it unchanged.

    Raises ValueError when the shape or the day, month or year is wrong.
    """
    if len(text) != 10 or text[2] != "/" or text[5] != "/":
        raise ValueError(_DATE_FORMAT_ERROR)
    day = _leading_int(text[0:2])
    month = _leading_int(text[3:5])
    year = _leading_int(text[6:10])
    if not 1 <= day <= 31 or not 1 <= month <= 12 or year < 2024:
        raise ValueError(_DATE_RANGE_ERROR)
    return text


def _read_skipping_blank(read_line: ReadLine) -> str:
    """Read the next line that is not blank, without its leading whitespace."""
    line = read_line()
    while not line.strip():
        line = read_line()
    return line.lstrip()


def _read_id(read_line: ReadLine) -> int:
    line = _read_skipping_blank(read_line)
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(_ID_ERROR)
    task_id = int(match.group(1))
    if task_id < 0:
        raise ValueError(_ID_ERROR)
    return task_id


def prompt_task(read_line: ReadLine, write: Write) -> Task:
    """Ask for every field of a new task and return it.

    Deadline, priority and status are asked again until valid. A negative or
    unreadable task ID, or a deadline whose parts hold no digits, raises
    ValueError. ``read_line`` raises EOFError when input runs out.
    """
    write("Enter the Task Category (Personal, Work, etc.): ")
    category = _read_skipping_blank(read_line)

    write("Add a Label: ")
    label = read_line()

    write("\nEnter the Task ID: ")
    task_id = _read_id(read_line)

    write("Enter Title: ")
    title = read_line()

    write("Enter Description: ")
    description = read_line()

    while True:
        write("Enter Deadline (DD/MM/YYYY): ")
        deadline = _read_skipping_blank(read_line)
        try:
            check_deadline(deadline)
        except _UnreadableNumber:
            raise
        except ValueError as error:
            write(f"{error}\n")
        else:
            break

    while True:
        write("Enter the Task Priority (Low, Medium, High): ")
        try:
            priority = parse_priority(_read_skipping_blank(read_line))
        except ValueError:
            write("Invalid input! Priority must be 'Low', 'Medium', or 'High'\n")
        else:
            break

    while True:
        write("Enter the Task Status (Pending, In Progress, Completed): ")
        try:
            status = parse_status(_read_skipping_blank(read_line))
        except ValueError:
            write(
                "Invalid input! Status must be 'Pending', 'In Progress', "
                "or 'Completed'\n"
            )
        else:
            break

    return Task(
        task_id=task_id,
        title=title,
        description=description,
        deadline=deadline,
        priority=priority,
        status=status,
        category=category,
        label=label,
    )