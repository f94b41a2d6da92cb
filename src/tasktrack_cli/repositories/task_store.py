"""In-memory task store.

The store is the single owner of the task mapping and of the id counter.
It performs no I/O; loading and saving live in
:mod:`tasktrack_cli.adapters.json_file`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime

from tasktrack_cli.exceptions import MalformedInputError, TaskNotFoundError
from tasktrack_cli.models import Task, TaskStatus
from tasktrack_cli.utils.logger import get_logger


def _now() -> datetime:
    return datetime.now().astimezone()


def _clean_description(description: str) -> str:
    cleaned = description.strip()
    if not cleaned:
        raise MalformedInputError("Task description cannot be empty")
    return cleaned


class TaskStore:
    """Mapping of task id to Task plus the next-id counter.

    Ids start at 1 and only ever grow; deleting a task never frees its id.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        """Initialize an empty store.

        Args:
            clock: Optional callable returning the current time, used to stamp
                completed tasks. Defaults to local time with UTC offset.
        """
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._clock = clock or _now
        self._logger = get_logger()

    @classmethod
    def from_tasks(
        cls,
        tasks: Iterable[Task],
        clock: Callable[[], datetime] | None = None,
    ) -> TaskStore:
        """Build a store from already persisted tasks.

        The counter is reconciled to one past the highest id present, since
        it is not persisted on its own.
        """
        store = cls(clock=clock)
        for task in tasks:
            if task.id in store._tasks:
                store._logger.warning("duplicate task id %d on load, keeping last", task.id)
            store._tasks[task.id] = task
        if store._tasks:
            store._next_id = max(store._tasks) + 1
        return store

    @property
    def next_id(self) -> int:
        """Id the next created task will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def tasks(self) -> dict[int, Task]:
        """Return a shallow copy of the id -> task mapping."""
        return dict(self._tasks)

    def create(self, description: str, due_date: date) -> int:
        """Create a pending task and return its id.

        Raises:
            MalformedInputError: If the description is blank
        """
        task = Task(
            id=self._next_id,
            description=_clean_description(description),
            due_date=due_date,
        )
        self._tasks[task.id] = task
        self._next_id += 1
        self._logger.info("task created: %d", task.id)
        return task.id

    def get(self, task_id: int) -> Task:
        """Look up a task by id.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        try:
            return self._tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def update(self, task_id: int, new_description: str) -> Task:
        """Replace a task's description. Nothing else changes."""
        task = self.get(task_id)
        task.description = _clean_description(new_description)
        self._logger.info("task updated: %d", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        """Remove a task and return it. Its id is never issued again."""
        task = self.get(task_id)
        del self._tasks[task_id]
        self._logger.info("task deleted: %d", task_id)
        return task

    def complete(self, task_id: int) -> Task:
        """Mark a task complete and stamp the completion time.

        Completing an already complete task is a no-op; the first completion
        time is kept.
        """
        task = self.get(task_id)
        if task.is_complete:
            self._logger.debug("task already complete: %d", task_id)
            return task
        task.completed_date = self._clock()
        task.status = TaskStatus.COMPLETE
        self._logger.info("task completed: %d", task_id)
        return task

    def list_tasks(self) -> list[Task]:
        """Return all tasks, newest (highest id) first."""
        return sorted(self._tasks.values(), key=lambda t: t.id, reverse=True)
