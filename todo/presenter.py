"""
Text rendering for task listings.

Pure functions: nothing here touches the database or writes to the terminal.
Lengths are counted in str code points, so slicing never splits a
multi-byte character. East Asian wide characters still count as one column.
"""

from dataclasses import dataclass
from typing import Iterable, List

import click

from todo.constants import (
    ELLIPSIS,
    ID_WIDTH,
    NAME_WIDTH,
    STATUS_WIDTH,
    TIMESTAMP_FORMAT,
)
from todo.models.task import Task, TaskStatus


def truncate_at(text: str, max_len: int) -> str:
    """
    Shorten text to at most max_len characters, marking the cut with '...'.

    Args:
        text: The text to shorten.
        max_len: Maximum length of the result. Must leave room for more
            than the ellipsis itself.

    Returns:
        text unchanged if it fits, otherwise its first max_len - 3
        characters followed by '...'.

    Raises:
        ValueError: If max_len is 3 or less.

    Examples:
        >>> truncate_at("short", 44)
        'short'
        >>> truncate_at("abcdefgh", 6)
        'abc...'
    """
    if max_len <= len(ELLIPSIS):
        raise ValueError(f"max_len must be greater than {len(ELLIPSIS)}, got {max_len}")
    if len(text) > max_len:
        return text[:max_len - len(ELLIPSIS)] + ELLIPSIS
    return text


def status_label(task: Task) -> str:
    """Return 'Done' or 'Pending' for a task."""
    return task.status.value


@dataclass(frozen=True)
class TaskLine:
    """One listing line, split into already padded columns."""

    id_text: str
    name_text: str
    status_text: str
    created_text: str
    done: bool

    def plain(self) -> str:
        """The line without colours."""
        return f"{self.id_text} | {self.name_text} {self.status_text} {self.created_text}"

    def styled(self) -> str:
        """The line with terminal colours applied to each column."""
        status_color = "green" if self.done else "red"
        return (
            f"{click.style(self.id_text, fg='bright_cyan')} | "
            f"{click.style(self.name_text, bold=True)} "
            f"{click.style(self.status_text, fg=status_color)} "
            f"{click.style(self.created_text, dim=True)}"
        )


def build_line(task: Task) -> TaskLine:
    """Lay out a task into padded columns."""
    label = status_label(task)
    return TaskLine(
        id_text=f"{task.id:>{ID_WIDTH}}",
        name_text=f"{truncate_at(task.name, NAME_WIDTH):<{NAME_WIDTH}}",
        status_text=f"{label:<{STATUS_WIDTH}}",
        created_text=task.created_at.strftime(TIMESTAMP_FORMAT),
        done=task.status is TaskStatus.DONE,
    )


def render(tasks: Iterable[Task]) -> List[str]:
    """Render tasks to plain lines, keeping the order they were given in."""
    return [build_line(task).plain() for task in tasks]
