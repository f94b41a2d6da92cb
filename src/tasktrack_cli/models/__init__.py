"""Data models for TaskTrack CLI."""

from tasktrack_cli.models.task import Task, TaskStatus

__all__ = ["Task", "TaskStatus"]
