"""Exceptions raised by TaskTrack CLI."""


class TaskTrackError(Exception):
    """Base exception for TaskTrack errors."""


class TaskNotFoundError(TaskTrackError):
    """Raised when an operation references a task id that does not exist."""

    def __init__(self, task_id: int):
        super().__init__(f"No task found with ID {task_id}")
        self.task_id = task_id


class MalformedInputError(TaskTrackError):
    """Raised when an id, date or description cannot be accepted."""


class PersistenceError(TaskTrackError):
    """Base exception for task file errors."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class PersistenceReadError(PersistenceError):
    """Raised when the task file exists but cannot be read or decoded."""


class PersistenceWriteError(PersistenceError):
    """Raised when the task file cannot be written."""
