"""
Database bootstrap for the todo CLI.

Makes sure the database folder and the todo table exist before the
TaskStore is handed a connection.
"""

import logging
import sqlite3
from pathlib import Path

from todo.exceptions import StorageError

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS todo (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT NOT NULL,
    created_at  TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    done        INTEGER NOT NULL DEFAULT 0
);
"""


def ensure_db_dir(db_path: Path) -> None:
    """Create the folder holding the database file if it doesn't exist.

    Creation errors are logged, not raised; connecting afterwards reports
    the real failure.
    """
    folder = db_path.parent
    if folder.exists():
        return
    try:
        folder.mkdir(parents=True, exist_ok=True)
        logger.info("Folder '%s' created.", folder)
    except OSError as e:
        logger.error("Error creating folder '%s': %s", folder, e)


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the todo table if missing. Idempotent."""
    try:
        with conn:
            conn.executescript(SCHEMA_SQL)
    except sqlite3.Error as e:
        raise StorageError(f"Failed to create schema: {e}") from e


def connect(db_path: Path) -> sqlite3.Connection:
    """
    Open a ready-to-use connection to the database at db_path.

    Args:
        db_path: Database file, or ':memory:' for a throwaway database.

    Returns:
        An open connection with sqlite3.Row rows and the schema in place.

    Raises:
        StorageError: If the database can't be opened or initialised.
    """
    if str(db_path) != MEMORY_DB:
        ensure_db_dir(db_path)

    try:
        conn = sqlite3.connect(str(db_path))
    except sqlite3.Error as e:
        raise StorageError(f"Failed to open database at {db_path}: {e}") from e

    conn.row_factory = sqlite3.Row
    try:
        ensure_schema(conn)
    except StorageError:
        conn.close()
        raise
    return conn
