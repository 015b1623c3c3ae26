"""Menu-driven command line for managing the task file."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Callable

from taskbook.manager import TaskManager
from taskbook.store import TaskStore

ReadLine = Callable[[], str]
Write = Callable[[str], None]

_NUMBER = re.compile(r"\s*([+-]?\d+)")

_MAIN_MENU = (
    "Main Menu:\n"
    "1. Create Task\n"
    "2. View Tasks\n"
    "3. Edit Task\n"
    "4. Delete Task\n"
    "5. Exit Program\n"
    "\n"
    "Enter your choice (1-5): "
)
_VIEW_MENU = (
    "View Options:\n"
    "1. View by Date\n"
    "2. View by Priority\n"
    "3. View by Category\n"
    "Enter your choice (1-3): "
)
_EXIT = 5
_VIEW_ERROR = "Invalid view option. Please enter a number between 1 and 3.\n"
_ID_ERROR = "Invalid task ID. Please enter a positive integer.\n"


def _read_number(read_line: ReadLine) -> int | None:
    line = read_line()
    while not line.strip():
        line = read_line()
    match = _NUMBER.match(line)
    return int(match.group(1)) if match else None


def _read_task_id(read_line: ReadLine) -> int:
    task_id = _read_number(read_line)
    if task_id is None or task_id < 0:
        raise ValueError(_ID_ERROR)
    return task_id


def _serve(
    read_line: ReadLine,
    write: Write,
    report: Write,
    store: TaskStore | None,
) -> int:
    manager = TaskManager(
        store=store, read_line=read_line, write=write, error=report
    )
    write("Welcome To The Task Management System\n\n")

    choice: int | None = None
    while choice != _EXIT:
        try:
            write(_MAIN_MENU)
            choice = _read_number(read_line)
            write("\n")

            if choice == 1:
                manager.create_task()
            elif choice == 2:
                write(_VIEW_MENU)
                view = _read_number(read_line)
                if view is None or not 1 <= view <= 3:
                    raise ValueError(_VIEW_ERROR)
                write("\n")
                manager.view_tasks(view)
            elif choice == 3:
                write("Enter the task ID you want to update: ")
                manager.edit_task(_read_task_id(read_line))
            elif choice == 4:
                write("Enter the task ID you want to delete: ")
                manager.delete_task(_read_task_id(read_line))
            elif choice == _EXIT:
                write("Thank you for using our system! Have a nice day.\n")
            else:
                write("Invalid choice. Please enter a number between 1 and 5.\n")
            write("\n")
        except EOFError:
            return 0
        except (ValueError, OSError) as exc:
            report(f"Error: {exc}\n")
    return 0


def run(read_line: ReadLine, write: Write) -> int:
    """Serve the main menu until the user exits or input runs out."""
    return _serve(read_line, write, write, None)


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive task manager."""
    parser = argparse.ArgumentParser(
        prog="taskbook", description="Manage tasks kept in a text file."
    )
    parser.add_argument(
        "--file",
        default="project.txt",
        help="task file to use (default: project.txt)",
    )
    args = parser.parse_args(argv)
    return _serve(
        _read_stdin_line,
        sys.stdout.write,
        sys.stderr.write,
        TaskStore(Path(args.file)),
    )


if __name__ == "__main__":
    sys.exit(main())