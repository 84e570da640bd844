"""
Task store for the todo CLI.

Owns every Task record in the SQLite database. Callers get Task snapshots
back, never rows or cursors.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Union

import pydantic

from todo import bootstrap
from todo.constants import MAX_TASK_ID, VALIDATION_NAME_REQUIRED
from todo.exceptions import StorageError, ValidationError
from todo.models.task import ListOrder, Task

logger = logging.getLogger(__name__)

_LIST_SQL = {
    ListOrder.BY_INSERTION: "SELECT id, name, created_at, done FROM todo ORDER BY id",
    ListOrder.BY_STATUS: "SELECT id, name, created_at, done FROM todo ORDER BY done, id",
}


class TaskStore:
    """
    Persistent CRUD over the todo table.

    The store holds one connection for its whole lifetime; use it as a
    context manager (or call close()) to release it. Every operation runs
    in its own transaction, and any sqlite3.Error is re-raised as
    StorageError.

    Toggling or removing an id that doesn't exist is a successful no-op.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        """
        Initialize the TaskStore with an open connection.

        Args:
            conn: Connection whose schema has already been ensured
                (see todo.bootstrap.connect).
        """
        self._conn: Optional[sqlite3.Connection] = conn

    @classmethod
    def open(cls, db_path: Union[str, Path]) -> "TaskStore":
        """Bootstrap the database at db_path and return a store for it."""
        store = cls(bootstrap.connect(Path(db_path)))
        logger.info("TaskStore ready db=%s total=%s", db_path, store.count())
        return store

    def close(self) -> None:
        """Close the underlying connection. Calling twice is harmless."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Helpers
    # =========================================================================

    @contextmanager
    def _transaction(self, action: str) -> Iterator[sqlite3.Connection]:
        if self._conn is None:
            raise StorageError(f"Failed to {action}: store is closed")
        try:
            with self._conn:
                yield self._conn
        except sqlite3.Error as e:
            raise StorageError(f"Failed to {action}: {e}") from e

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        try:
            return Task(
                id=int(row["id"]),
                name=str(row["name"]),
                created_at=datetime.fromisoformat(str(row["created_at"])),
                done=bool(row["done"]),
            )
        except (TypeError, ValueError, pydantic.ValidationError) as e:
            raise StorageError(f"Corrupt task row id={row['id']!r}: {e}") from e

    # =========================================================================
    # Operations
    # =========================================================================

    def add(self, name: str) -> int:
        """
        Create a pending task.

        Args:
            name: Task text. Must be non-empty; it is stored as given.

        Returns:
            The id assigned to the new task.

        Raises:
            ValidationError: If name is empty.
            StorageError: If the insert fails.
        """
        if not name:
            raise ValidationError(VALIDATION_NAME_REQUIRED)

        with self._transaction("add task") as conn:
            cur = conn.execute("INSERT INTO todo (name) VALUES (?)", (name,))
            task_id = int(cur.lastrowid)
        logger.debug("Added task id=%s", task_id)
        return task_id

    def list(self, order: ListOrder = ListOrder.BY_INSERTION) -> List[Task]:
        """
        Return all tasks.

        Args:
            order: BY_INSERTION sorts by id. BY_STATUS puts pending tasks
                first, then done tasks, each group sorted by id.

        Returns:
            Task snapshots, empty if there are none.
        """
        sql = _LIST_SQL[ListOrder(order)]
        with self._transaction("list tasks") as conn:
            rows = conn.execute(sql).fetchall()
        return [self._row_to_task(r) for r in rows]

    def toggle(self, task_id: int) -> None:
        """Flip the done flag of a task. Unknown ids are ignored."""
        if not 0 < task_id <= MAX_TASK_ID:
            logger.debug("Toggle skipped, id=%s can't exist", task_id)
            return
        with self._transaction("toggle task") as conn:
            cur = conn.execute("UPDATE todo SET done = 1 - done WHERE id = ?", (task_id,))
        logger.debug("Toggled task id=%s rows=%s", task_id, cur.rowcount)

    def remove(self, task_id: int) -> None:
        """Delete a task permanently. Unknown ids are ignored."""
        if not 0 < task_id <= MAX_TASK_ID:
            logger.debug("Remove skipped, id=%s can't exist", task_id)
            return
        with self._transaction("remove task") as conn:
            cur = conn.execute("DELETE FROM todo WHERE id = ?", (task_id,))
        logger.debug("Removed task id=%s rows=%s", task_id, cur.rowcount)

    def reset(self) -> None:
        """Delete every task. Ids already handed out are still never reused."""
        with self._transaction("reset tasks") as conn:
            cur = conn.execute("DELETE FROM todo")
        logger.info("Reset removed %s task(s)", cur.rowcount)

    def count(self) -> int:
        """Number of stored tasks."""
        with self._transaction("count tasks") as conn:
            row = conn.execute("SELECT COUNT(*) FROM todo").fetchone()
        return int(row[0])
