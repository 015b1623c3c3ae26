# taskbook

A small terminal task manager. Tasks are kept in a plain text file, by default
`project.txt` in the current directory. Each line holds one task with
comma-separated fields, in this order: ID, category, title, description,
deadline, priority, status and label. Because commas separate the fields, a
comma inside a field is not kept intact.

## Installing

```
pip install .
```

## Running

```
taskbook
taskbook --file my-tasks.txt
```

`--file` names the task file to use; it defaults to `project.txt`. The
program runs until you choose to exit or input runs out.

The main menu offers:

1. **Create Task**: asks for a category, a label, a numeric ID, a title, a
   description, a deadline in `DD/MM/YYYY` form, a priority (`Low`, `Medium`,
   `High`) and a status (`Pending`, `In Progress`, `Completed`). Priority and
   status are not case sensitive. The deadline must have day 1 to 31, month
   1 to 12 and a year of 2024 or later. Deadline, priority and status are asked
   for again until a valid value is given. A negative ID is reported as an
   error, and an ID that is already in the file is refused. A new task is
   appended to the file.
2. **View Tasks**: reloads the file and lists every task, either by date
   (the deadline text compared as written), by priority (highest first) or by
   category (alphabetical). Each task is coloured with terminal colour codes:
   - a task whose deadline is within 24 hours of now, before or after, is
     green if completed and red otherwise;
   - any other completed task is green;
   - any other high-priority task is red.
3. **Edit Task**: for the task with a given ID, asks for a new priority and a
   new status and writes all tasks back to the file. An invalid priority or
   status is reported and nothing is saved.
4. **Delete Task**: removes the task with a given ID from the file; the file is
   rewritten only when the task was found.
5. **Exit Program**.

## Using it from Python

- `taskbook.task`: the `Task` dataclass with its `details()` text,
  `TaskPriority`, `TaskStatus`, `parse_priority`, `parse_status`,
  `check_deadline` and `prompt_task(read_line, write)`, which asks for a new
  task over any pair of input and output functions.
- `taskbook.store`: `TaskStore(path)`, with `load`, `append`, `write_all`,
  `contains_id` and `delete`, together with `format_task` and `parse_task`
  for single lines.
- `taskbook.manager`: `TaskManager` with `create_task`, `view_tasks`,
  `edit_task` and `delete_task`; `SortMethod`, `sort_tasks`, `render_task`,
  `colour_for`, `is_deadline_near` and `parse_deadline`.
- `taskbook.cli`: `run(read_line, write)` runs the menu over any pair of
  input and output functions, ending when `read_line` raises `EOFError`;
  `main()` runs it on the terminal.

## What it does not do

There are no reminders, no recurring tasks and no search; tasks can only be
created, listed, have their priority and status changed, and be deleted.

## Testing

```
pip install .[test]
pytest
```