"""
Task model for the todo CLI.

A Task is an immutable snapshot of one row in the todo table. The store
builds a fresh instance for every query, so callers never hold a live record.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from todo.constants import DONE_LABEL, PENDING_LABEL


class TaskStatus(str, Enum):
    """The two states of a task. Values are the display labels."""

    PENDING = PENDING_LABEL
    DONE = DONE_LABEL


class ListOrder(str, Enum):
    """Supported orderings for listing tasks."""

    BY_INSERTION = "id"
    BY_STATUS = "status"


class Task(BaseModel):
    """
    A single to-do item.

    Fields:
    - id: Store-assigned identifier, positive and never reused
    - name: Task text, non-empty
    - created_at: Insertion timestamp
    - done: Completion flag
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    created_at: datetime
    done: bool = False

    @property
    def status(self) -> TaskStatus:
        """Get the completion flag as a TaskStatus."""
        return TaskStatus.DONE if self.done else TaskStatus.PENDING
