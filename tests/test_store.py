import pytest

from taskbook.store import TaskStore, format_task, parse_task
from taskbook.task import Task, TaskPriority, TaskStatus


def _task(task_id, category="Work", priority=TaskPriority.HIGH):
    return Task(
        task_id=task_id,
        title="Report",
        description="Write it",
        deadline="01/02/2025",
        priority=priority,
        status=TaskStatus.COMPLETED,
        category=category,
        label="urgent",
    )


def test_format_task_field_order():
    line = format_task(_task(7))
    assert line == "7,Work,Report,Write it,01/02/2025,High,Completed,urgent"


def test_parse_task_case_insensitive_enums():
    task = parse_task("3,Home,Title,Desc,05/06/2026,medium,in progress,lbl")
    assert task.task_id == 3
    assert task.category == "Home"
    assert task.title == "Title"
    assert task.description == "Desc"
    assert task.deadline == "05/06/2026"
    assert task.priority is TaskPriority.MEDIUM
    assert task.status is TaskStatus.IN_PROGRESS
    assert task.label == "lbl"


def test_parse_format_round_trip():
    original = _task(12, priority=TaskPriority.LOW)
    assert parse_task(format_task(original)) == original


def test_parse_task_unknown_enums_keep_defaults():
    task = parse_task("4,A,B,C,01/01/2030,urgent,done,x")
    assert task.priority is TaskPriority.LOW
    assert task.status is TaskStatus.PENDING


def test_parse_task_missing_fields_are_empty():
    task = parse_task("9,Work")
    assert task.category == "Work"
    assert task.title == ""
    assert task.label == ""


def test_parse_task_label_stops_at_comma():
    task = parse_task("5,A,B,C,01/01/2030,Low,Pending,lbl,extra")
    assert task.label == "lbl"


@pytest.mark.parametrize("line", ["0,A,B,C,D,Low,Pending,x", "-2,A", "", "abc,A"])
def test_parse_task_rejects_bad_ids(line):
    with pytest.raises(ValueError):
        parse_task(line)


def test_load_missing_file_is_empty(tmp_path):
    assert TaskStore(tmp_path / "none.txt").load() == []


def test_append_then_load(tmp_path):
    store = TaskStore(tmp_path / "project.txt")
    first, second = _task(1), _task(2, category="Personal")
    store.append(first)
    store.append(second)
    assert store.load() == [first, second]
    assert (tmp_path / "project.txt").read_text().count("\n") == 2


def test_write_all_replaces_contents(tmp_path):
    store = TaskStore(tmp_path / "project.txt")
    store.append(_task(1))
    store.write_all([_task(5)])
    assert [task.task_id for task in store.load()] == [5]


def test_contains_id(tmp_path):
    store = TaskStore(tmp_path / "project.txt")
    assert not store.contains_id(1)
    store.append(_task(1))
    assert store.contains_id(1)
    assert not store.contains_id(2)


def test_delete_existing(tmp_path):
    store = TaskStore(tmp_path / "project.txt")
    store.write_all([_task(1), _task(2), _task(3)])
    assert store.delete(2) is True
    assert [task.task_id for task in store.load()] == [1, 3]


def test_delete_absent_leaves_file(tmp_path):
    path = tmp_path / "project.txt"
    store = TaskStore(path)
    store.write_all([_task(1)])
    before = path.read_text()
    assert store.delete(8) is False
    assert path.read_text() == before


def test_delete_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TaskStore(tmp_path / "none.txt").delete(1)