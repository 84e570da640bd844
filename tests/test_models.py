"""
Tests for the Task model.
"""
from datetime import datetime

import pytest
from pydantic import ValidationError

from todo.models import ListOrder, Task, TaskStatus


def test_task_defaults_to_pending():
    """Test that done defaults to False."""
    task = Task(id=1, name="Task", created_at=datetime(2024, 1, 1))
    assert task.done is False
    assert task.status is TaskStatus.PENDING


def test_task_status_done():
    """Test the status property for a finished task."""
    task = Task(id=1, name="Task", created_at=datetime(2024, 1, 1), done=True)
    assert task.status is TaskStatus.DONE
    assert task.status.value == "Done"


def test_task_rejects_empty_name():
    """Test that a task can't be built with an empty name."""
    with pytest.raises(ValidationError):
        Task(id=1, name="", created_at=datetime(2024, 1, 1))


@pytest.mark.parametrize("task_id", [0, -5])
def test_task_rejects_non_positive_id(task_id):
    """Test that ids must be positive."""
    with pytest.raises(ValidationError):
        Task(id=task_id, name="Task", created_at=datetime(2024, 1, 1))


def test_task_is_frozen():
    """Test that tasks are immutable snapshots."""
    task = Task(id=1, name="Task", created_at=datetime(2024, 1, 1))
    with pytest.raises(ValidationError):
        task.done = True


def test_list_order_values():
    """Test the string values used by the CLI and config."""
    assert ListOrder("id") is ListOrder.BY_INSERTION
    assert ListOrder("status") is ListOrder.BY_STATUS
