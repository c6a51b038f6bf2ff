"""JSON-file persistence for tasks and the current task id."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any

from localtodo.models import Task

TASKS_FILE = "tasks.json"
CURRENT_FILE = "current.json"


class StorageError(Exception):
    """Raised when the store cannot be read, written or queried."""


def default_dir() -> Path:
    """Return ~/.localtodo, creating it if needed."""
    directory = Path.home() / ".localtodo"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _load_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise StorageError(f"error reading {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise StorageError(f"invalid JSON in {path}: {exc}") from exc


def _save_json(path: Path, value: Any) -> None:
    path.write_text(json.dumps(value, indent=2), encoding="utf-8")


class Store:
    """Tasks and the current task id, kept in a directory of JSON files."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_dir()
        self.tasks: list[Task] = []
        self.current = ""
        self.load_all()

    def new_id(self) -> str:
        return str(uuid.uuid4())

    def load_all(self) -> None:
        """Read tasks and the current id from disk; missing files mean empty."""
        raw_tasks = _load_json(self.path / TASKS_FILE)
        raw_current = _load_json(self.path / CURRENT_FILE)
        try:
            tasks = [Task.from_dict(item) for item in raw_tasks or []]
        except (TypeError, ValueError, AttributeError) as exc:
            raise StorageError(f"invalid task data: {exc}") from exc
        self.tasks = tasks
        self.current = raw_current or ""

    def save_all(self) -> None:
        """Write tasks and the current id to disk."""
        try:
            _save_json(self.path / TASKS_FILE, [task.to_dict() for task in self.tasks])
        except OSError as exc:
            raise StorageError(f"error saving tasks: {exc}.") from exc
        try:
            _save_json(self.path / CURRENT_FILE, self.current)
        except OSError as exc:
            raise StorageError(f"error saving current task: {exc}.") from exc

    def list_tasks(self) -> list[Task]:
        return self.tasks

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def update_task(self, task: Task) -> None:
        """Replace the stored task that has the same id."""
        for index, existing in enumerate(self.tasks):
            if existing.id == task.id:
                self.tasks[index] = task
                return
        raise StorageError(f"No id found for id= {task.id}")

    def get_task(self, task_id: str) -> Task:
        """Return the last task with the given id."""
        matches = [task for task in self.tasks if task.id == task_id]
        if not matches:
            raise StorageError(f"No task defined for id = {task_id}")
        return matches[-1]