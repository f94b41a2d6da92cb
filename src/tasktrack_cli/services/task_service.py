"""Task service - Business logic for task operations.

This service layer sits between commands and the task store, binding an
in-memory store to the file it was loaded from.
"""

from __future__ import annotations

import shutil
from datetime import date
from pathlib import Path

from tasktrack_cli.adapters import JsonTaskGateway
from tasktrack_cli.config import get_config_manager
from tasktrack_cli.exceptions import PersistenceReadError, PersistenceWriteError
from tasktrack_cli.models import Task, TaskStatus
from tasktrack_cli.repositories import TaskStore
from tasktrack_cli.utils.logger import get_logger


class TaskService:
    """Service for task business logic.

    The task file is read once by :meth:`load` and written by :meth:`save`.
    With ``autosave`` enabled, every successful mutation is saved right away.
    """

    def __init__(
        self,
        path: str | Path,
        gateway: JsonTaskGateway | None = None,
        *,
        autosave: bool = False,
        store: TaskStore | None = None,
    ):
        """Initialize the task service.

        Args:
            path: Task file location
            gateway: Persistence gateway, a JsonTaskGateway by default
            autosave: Save after every mutation instead of only on save()
            store: Pre-built store; when given, load() is not needed
        """
        self.path = Path(path)
        self.gateway = gateway or JsonTaskGateway()
        self.autosave = autosave
        self.store = store if store is not None else TaskStore()
        self.load_error: PersistenceReadError | None = None
        self.dirty = False
        self._logger = get_logger()

    def load(self) -> TaskStore:
        """Load the task file, falling back to an empty store if it is unreadable.

        A read failure is kept on ``load_error`` so callers can warn about it.
        """
        try:
            self.store = self.gateway.load(self.path)
            self.load_error = None
        except PersistenceReadError as e:
            self._logger.warning("starting with an empty store: %s", e)
            self.load_error = e
            self.store = TaskStore()
        return self.store

    @property
    def backup_path(self) -> Path:
        """Where an unreadable task file is copied before it is overwritten."""
        return self.path.with_name(self.path.name + ".bak")

    def save(self) -> None:
        """Write the store to the task file.

        If the file could not be read at load time, it is first copied to
        :attr:`backup_path`.

        Raises:
            PersistenceWriteError: If the file (or its backup) cannot be written
        """
        if self.load_error is not None:
            self._backup_unreadable()
        self.gateway.save(self.path, self.store)
        self.dirty = False

    def _backup_unreadable(self) -> None:
        if not self.path.exists():
            self.load_error = None
            return
        try:
            shutil.copyfile(self.path, self.backup_path)
        except OSError as e:
            raise PersistenceWriteError(
                f"Cannot back up unreadable {self.path}: {e}", self.path
            ) from e
        self._logger.warning("kept unreadable task file as %s", self.backup_path)
        self.load_error = None

    def flush(self) -> None:
        """Save only if something changed since the last save."""
        if self.dirty:
            self.save()

    def _after_mutation(self) -> None:
        self.dirty = True
        if self.autosave:
            self.save()

    def add_task(self, description: str, due_date: date) -> Task:
        """Create a new task.

        Returns:
            The created Task
        """
        task_id = self.store.create(description, due_date)
        self._after_mutation()
        return self.store.get(task_id)

    def get_task(self, task_id: int) -> Task:
        return self.store.get(task_id)

    def update_task(self, task_id: int, description: str) -> Task:
        task = self.store.update(task_id, description)
        self._after_mutation()
        return task

    def delete_task(self, task_id: int) -> Task:
        task = self.store.delete(task_id)
        self._after_mutation()
        return task

    def complete_task(self, task_id: int) -> Task:
        """Mark a task as completed.

        Already completed tasks are returned unchanged.
        """
        was_complete = self.store.get(task_id).is_complete
        task = self.store.complete(task_id)
        if not was_complete:
            self._after_mutation()
        return task

    def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        """List tasks newest first, optionally only those with *status*."""
        tasks = self.store.list_tasks()
        if status is not None:
            tasks = [task for task in tasks if task.status is status]
        return tasks


def get_task_service(
    file: str | None = None,
    profile: str = "default",
    *,
    strict: bool = False,
) -> TaskService:
    """Build a loaded TaskService from the active configuration.

    Args:
        file: Optional task file path overriding configuration
        profile: Configuration profile name
        strict: Raise instead of falling back to an empty store when the
            task file is unreadable

    Raises:
        PersistenceReadError: If strict and the task file is unreadable
    """
    config_manager = get_config_manager(profile)
    service = TaskService(
        config_manager.task_file(file),
        autosave=config_manager.config.storage.autosave,
    )
    service.load()
    if strict and service.load_error is not None:
        raise service.load_error
    return service
