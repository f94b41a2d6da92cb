"""JSON file persistence for the task store.

File layout: an object keyed by stringified task id, each value a record
with capitalized fields::

    {
     "1": {
      "ID": 1,
      "Description": "Buy milk",
      "Status": "Pending",
      "DueDate": "2024-01-01T00:00:00Z",
      "CompletedDate": "0001-01-01T00:00:00Z"
     }
    }

Timestamps are RFC 3339. An unset completion date is written as the zero
timestamp ``0001-01-01T00:00:00Z``, which files from older versions also use.
"""

from __future__ import annotations

import contextlib
import json
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tasktrack_cli.exceptions import PersistenceReadError, PersistenceWriteError
from tasktrack_cli.models import Task, TaskStatus
from tasktrack_cli.repositories import TaskStore
from tasktrack_cli.utils.logger import get_logger

ZERO_TIME = "0001-01-01T00:00:00Z"
_INDENT = 1


class TaskRecord(BaseModel):
    """One task as stored in the JSON file."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="ID")
    description: str = Field(default="", alias="Description")
    status: TaskStatus = Field(default=TaskStatus.PENDING, alias="Status")
    due_date: datetime = Field(alias="DueDate")
    completed_date: datetime | None = Field(default=None, alias="CompletedDate")

    @field_validator("due_date", "completed_date", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not value:
                return None
            return datetime.fromisoformat(value)
        return value

    @classmethod
    def from_task(cls, task: Task) -> TaskRecord:
        return cls(
            id=task.id,
            description=task.description,
            status=task.status,
            due_date=datetime(task.due_date.year, task.due_date.month, task.due_date.day),
            completed_date=task.completed_date,
        )

    def to_task(self, fallback_id: int) -> Task:
        """Build the in-memory task.

        A "Complete" record without a completion date loads as pending.
        """
        completed = self.completed_date
        if completed is not None and completed.year <= 1:
            completed = None
        status = self.status
        if status is TaskStatus.PENDING or completed is None:
            status, completed = TaskStatus.PENDING, None
        return Task(
            id=self.id or fallback_id,
            description=self.description,
            status=status,
            due_date=self.due_date.date(),
            completed_date=completed,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "Description": self.description,
            "Status": self.status.value,
            "DueDate": self.due_date.date().isoformat() + "T00:00:00Z",
            "CompletedDate": (
                self.completed_date.isoformat() if self.completed_date else ZERO_TIME
            ),
        }


class JsonTaskGateway:
    """Loads and saves a :class:`TaskStore` as a JSON document."""

    def __init__(self, clock: Callable[[], datetime] | None = None):
        """Initialize the gateway.

        Args:
            clock: Optional clock handed to the stores this gateway builds.
        """
        self._clock = clock
        self._logger = get_logger()

    def load(self, path: str | Path) -> TaskStore:
        """Read the task file at *path* into a new store.

        A missing or empty file is a first run and yields an empty store.

        Raises:
            PersistenceReadError: If the file exists but cannot be read or is
                not a valid task document
        """
        path = Path(path)
        if not path.exists():
            self._logger.info("no task file at %s, starting empty", path)
            return TaskStore(clock=self._clock)

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceReadError(f"Cannot read {path}: {e}", path) from e

        if not raw.strip():
            return TaskStore(clock=self._clock)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceReadError(f"{path} is not valid JSON: {e}", path) from e

        if data is None:
            return TaskStore(clock=self._clock)
        if not isinstance(data, dict):
            raise PersistenceReadError(f"{path} does not contain a task mapping", path)

        tasks = [self._decode(key, value, path) for key, value in data.items()]
        store = TaskStore.from_tasks(tasks, clock=self._clock)
        self._logger.info(
            "loaded %d task(s) from %s, next id %d", len(store), path, store.next_id
        )
        return store

    def save(self, path: str | Path, store: TaskStore) -> None:
        """Write every task in *store* to *path*, replacing the old file.

        The document is written to a sibling temporary file first and then
        moved over the target, so a failed write leaves the old file intact.

        Raises:
            PersistenceWriteError: If the file cannot be written
        """
        path = Path(path)
        document = {
            str(task_id): TaskRecord.from_task(task).to_json()
            for task_id, task in sorted(store.tasks().items())
        }
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(document, indent=_INDENT), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            self._logger.error("failed to save tasks to %s: %s", path, e)
            raise PersistenceWriteError(f"Cannot write {path}: {e}", path) from e
        self._logger.info("saved %d task(s) to %s", len(document), path)

    def _decode(self, key: str, value: Any, path: Path) -> Task:
        try:
            fallback_id = int(key)
        except ValueError:
            fallback_id = 0
        try:
            record = TaskRecord.model_validate(value)
            task = record.to_task(fallback_id)
        except (ValidationError, ValueError) as e:
            raise PersistenceReadError(
                f"{path} has an invalid task record '{key}': {e}", path
            ) from e
        if task.status is not record.status:
            self._logger.warning(
                "task %d is marked complete without a completion date, "
                "loading it as pending",
                task.id,
            )
        return task
