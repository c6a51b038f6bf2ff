# localtodo

A small command-line task list. It keeps your tasks, and the id of the task
you are working on, as JSON files in `~/.localtodo` (`tasks.json` and
`current.json`). The directory is created the first time it is needed. Each
time you start and stop a task, a work session is added to that task's log.

## Installation

```
pip install .
```

This installs the `localtodo` command.

## Usage

### Add a task

The title is required. The body, the priority (1 high, 2 medium, 3 low) and a
single tag are optional:

```
localtodo add "Write report" --body "Quarterly numbers" -p 1 -t work
```

The new task has status `todo` and gets a random UUID as its id. The command
prints the title and the id.

### List tasks

The task you are working on is marked with an arrow:

```
localtodo list
```

```
0: --> [in_progress] Write report 3f1c...
1:     [todo] Buy milk 9a2e...
```

If there are no tasks, it prints `No tasks found.`

### Start a task

```
localtodo start <id>
```

This opens a work session, makes the task the current one and marks it active.
A task with status `todo` becomes `in_progress`. A task with status `done`
cannot be started, and neither can one whose last session is still open.

### Stop a task

```
localtodo stop <id>
localtodo stop <id> --close-time 2024-05-01T17:30:00
```

This closes the task's open session now, or at `--close-time` if you give one
(an ISO 8601 time; without an offset it is read as local time). `-a` /
`--auto-closed` marks the session as closed automatically. Stopping also
clears the current task. A task with no open session cannot be stopped.

### Switch to a task

```
localtodo switch <id>
```

If the task still has an open session, that session is closed first. A session
that was started on an earlier day is closed automatically at the midnight
following the day it started. Then a new session is started as with `start`.

`start` and `switch` also take `--comment`; it is accepted but not stored.

When a command fails (an unknown id, a task that is already started, a file
that cannot be read or written), the error is printed as
`todo: error: ...` on standard error and the exit status is 1.

## Using it from Python

```python
from localtodo.storage import Store
from localtodo.cli import add_task, list_tasks, start_task, stop_task

store = Store("/path/to/existing/dir")   # defaults to ~/.localtodo
task = add_task(store, "Write report", body="", priority=1, tag="work")
start_task(store, task.id)
stop_task(store, task.id)
list_tasks(store)
```

`Store` loads `tasks.json` and `current.json` from its directory when it is
created (missing files mean no tasks and no current task) and writes them back
with `save_all()`. A directory given to `Store` must already exist. Tasks are
`localtodo.models.Task` dataclasses, with `Tag` and `WorkSession` records;
each has `to_dict()` and `from_dict()` for its JSON form. Storage problems
raise `localtodo.storage.StorageError`, and failed commands raise
`localtodo.cli.CommandError`.

## What it does not do

There are no commands to mark a task done or blocked, to edit or delete a
task, to add notes or comments, to summarise the time worked or to export the
data. Fields such as `notes` and `estimated_task_time_in_days` are stored and
loaded, but nothing in the command line sets them.