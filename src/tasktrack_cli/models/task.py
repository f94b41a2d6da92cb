"""Task data models."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Lifecycle state of a task. A task only ever moves Pending -> Complete."""

    PENDING = "Pending"
    COMPLETE = "Complete"


class Task(BaseModel):
    """Task model.

    Attributes:
        id: Identifier issued by the store, never reused
        description: Free-form task text
        status: Pending or Complete
        due_date: Calendar date the task is due
        completed_date: Moment the task was completed, None while pending
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(ge=1)
    description: str
    status: TaskStatus = TaskStatus.PENDING
    due_date: date
    completed_date: datetime | None = None

    @property
    def is_complete(self) -> bool:
        return self.status is TaskStatus.COMPLETE
