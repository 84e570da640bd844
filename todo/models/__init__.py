"""
Models for the todo CLI.

- Task: Immutable snapshot of a stored task
- TaskStatus: Pending / Done
- ListOrder: Orderings supported by TaskStore.list
"""

from todo.models.task import ListOrder, Task, TaskStatus

__all__ = [
    "ListOrder",
    "Task",
    "TaskStatus",
]
