"""Command-line interface: add, list, start, stop and switch tasks."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timedelta

from localtodo.models import Tag, Task, WorkSession
from localtodo.storage import Store, StorageError

log = logging.getLogger(__name__)

_CURRENT_MARKER = "-->"
_PADDING = " " * len(_CURRENT_MARKER)


class CommandError(Exception):
    """Raised when a command cannot be carried out."""


def _now() -> datetime:
    return datetime.now().astimezone()


def pointer(task_id: str, current_task: str) -> str:
    """Marker shown in front of the current task, padding in front of the others."""
    if task_id != current_task:
        return _PADDING
    return _CURRENT_MARKER


def list_tasks(store: Store) -> None:
    tasks = store.list_tasks()
    if not tasks:
        print("No tasks found.")
        return
    for index, task in enumerate(tasks):
        print(f"{index}: {pointer(task.id, store.current)} [{task.status}] {task.title} {task.id}")


def add_task(store: Store, title: str, body: str = "", priority: int = 0, tag: str = "") -> Task:
    now = _now()
    task = Task(
        id=store.new_id(),
        title=title,
        body=body,
        tags=[Tag(name=tag)] if tag else [],
        priority=priority,
        status="todo",
        is_active=False,
        entered_at=now,
        last_updated=now,
    )
    store.add_task(task)
    log.info("Added item..")
    try:
        store.save_all()
    except StorageError as exc:
        raise CommandError(f"Failed to add task: {exc}.") from exc
    print(f"Task added: {task.title} ({task.id})")
    return task


def _find(store: Store, task_id: str) -> Task:
    try:
        return store.get_task(task_id)
    except StorageError as exc:
        raise CommandError(str(exc)) from exc


def start_task(store: Store, task_id: str, comment: str = "") -> WorkSession:
    task = _find(store, task_id)
    if task.status == "done":
        raise CommandError("Can't work on a completed task.")
    if task.work_log and task.work_log[-1].is_open:
        raise CommandError(f"Task already started. id = {task_id}")
    if task.status == "todo":
        task.status = "in_progress"
    task.is_active = True
    session = WorkSession(started_at=_now())
    task.work_log.append(session)
    store.update_task(task)
    store.current = task_id
    try:
        store.save_all()
    except StorageError as exc:
        raise CommandError(f"Failed to start task: {exc}.") from exc
    print(f"{session.started_at}, Started task: {task.title}")
    return session


def stop_task(
    store: Store,
    task_id: str,
    close_time: datetime | None = None,
    auto_closed: bool = False,
) -> WorkSession:
    task = _find(store, task_id)
    if not task.work_log or not task.work_log[-1].is_open:
        raise CommandError(f"The task has not been started, so cannot be ended. id = {task_id}")
    session = task.work_log[-1]
    session.ended_at = close_time if close_time is not None else _now()
    session.auto_closed = auto_closed
    store.current = ""
    try:
        store.save_all()
    except StorageError as exc:
        raise CommandError(f"Failed to stop task: {exc}.") from exc
    return session


def switch_task(store: Store, task_id: str, comment: str = "") -> WorkSession:
    """Close the task's open session (auto-closing one left from a prior day) and start anew."""
    task = _find(store, task_id)
    if task.work_log and task.work_log[-1].is_open:
        started = task.work_log[-1].started_at
        now = _now()
        close_time = now
        auto_close = False
        if started.date() != now.date():
            auto_close = True
            midnight = started.replace(hour=0, minute=0, second=0, microsecond=0)
            close_time = midnight + timedelta(days=1)
        stop_task(store, task_id, close_time, auto_close)
    return start_task(store, task_id, comment)


def _parse_cli_time(text: str) -> datetime:
    try:
        value = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid time: {text!r}") from exc
    return value if value.tzinfo is not None else value.astimezone()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Add a new task")
    add.add_argument("title", help="Title of new task.")
    add.add_argument("--body", default="", help="Body of new task. This is a longer description.")
    add.add_argument(
        "-p",
        "--priority",
        type=int,
        default=0,
        help="The priority of the tasks, 1 meaning high, 2 meaning medium and 3 meaning low.",
    )
    add.add_argument("-t", "--tag", default="", help="Tags to add to the task.")

    commands.add_parser("list", help="List tasks")

    start = commands.add_parser("start", help="Start or resume a task")
    start.add_argument("id", help="ID of the task you are starting.")
    start.add_argument("--comment", default="", help="any additional information.")

    stop = commands.add_parser("stop", help="Stop current task")
    stop.add_argument("id", help="The id of the task you want to stop.")
    stop.add_argument(
        "--close-time", type=_parse_cli_time, default=None, help="Time the task is to be closed at."
    )
    stop.add_argument(
        "-a",
        "--auto-closed",
        action="store_true",
        help="if this task is autoclosed because it overran the threshold.",
    )

    switch = commands.add_parser("switch", help="Switch to another task")
    switch.add_argument("id", help="The id of the task you want to switch to.")
    switch.add_argument("--comment", default="", help="any additional information.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        store = Store()
        if args.command == "add":
            add_task(store, args.title, args.body, args.priority, args.tag)
        elif args.command == "list":
            list_tasks(store)
        elif args.command == "start":
            start_task(store, args.id, args.comment)
        elif args.command == "stop":
            stop_task(store, args.id, args.close_time, args.auto_closed)
        elif args.command == "switch":
            switch_task(store, args.id, args.comment)
    except (CommandError, StorageError) as exc:
        print(f"todo: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())