"""Task storage for TaskTrack CLI."""

from tasktrack_cli.repositories.task_store import TaskStore

__all__ = ["TaskStore"]
