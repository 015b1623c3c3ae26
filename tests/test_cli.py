import io

import pytest

from taskbook.cli import main, run
from taskbook.store import TaskStore
from taskbook.task import Task, TaskPriority, TaskStatus


def reader(lines):
    items = iter(lines)

    def read_line():
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def session(workdir, capsys, lines):
    out = []
    run(reader(lines), out.append)
    captured = capsys.readouterr()
    text = "".join(out) + captured.out
    errors = captured.err
    store = TaskStore(workdir / "project.txt")
    return text, text + errors, store


def test_exit_immediately(workdir, capsys):
    out, everything, _ = session(workdir, capsys, ["5"])
    assert out.startswith("Welcome To The Task Management System\n\n")
    assert "Thank you for using our system! Have a nice day." in out
    assert "Error:" not in everything


def test_invalid_choice_then_exit(workdir, capsys):
    out, _, _ = session(workdir, capsys, ["9", "5"])
    assert "Invalid choice. Please enter a number between 1 and 5." in out
    assert out.count("Main Menu:") == 2


def test_invalid_view_option(workdir, capsys):
    _, everything, _ = session(workdir, capsys, ["2", "7", "5"])
    assert (
        "Error: Invalid view option. Please enter a number between 1 and 3."
        in everything
    )


def test_negative_ids_are_rejected(workdir, capsys):
    _, everything, _ = session(workdir, capsys, ["3", "-1", "4", "-2", "5"])
    assert (
        everything.count("Error: Invalid task ID. Please enter a positive integer.")
        == 2
    )


def test_input_running_out_ends_session(workdir, capsys):
    out, _, store = session(workdir, capsys, ["1", "Work"])
    assert "Task created successfully!" not in out
    assert not (workdir / "project.txt").exists() or store.load() == []


def test_create_view_delete_flow(workdir, capsys):
    lines = [
        "1",
        "Home",
        "weekend",
        "4",
        "Paint fence",
        "Blue paint",
        "01/08/2030",
        "medium",
        "pending",
        "2",
        "3",
        "4",
        "4",
        "5",
    ]
    out, everything, store = session(workdir, capsys, lines)
    assert "Error:" not in everything
    assert "Task created successfully!" in out
    assert "Title: Paint fence" in out
    assert "Task with ID 4 has been deleted." in out
    assert store.load() == []


def test_edit_through_menu(workdir, capsys):
    store = TaskStore(workdir / "project.txt")
    task = Task(task_id=2, title="t", deadline="01/01/2031", category="Work")
    store.write_all([task])
    out, _, _ = session(workdir, capsys, ["3", "2", "high", "completed", "5"])
    assert "Task edited successfully." in out
    stored = store.load()[0]
    assert stored.priority is TaskPriority.HIGH
    assert stored.status is TaskStatus.COMPLETED


def test_main_uses_given_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "tasks.txt"
    TaskStore(path).write_all([Task(task_id=3, title="x", category="C")])
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n3\n5\n"))
    assert main(["--file", str(path)]) == 0
    assert "Task with ID 3 has been deleted." in capsys.readouterr().out
    assert TaskStore(path).load() == []