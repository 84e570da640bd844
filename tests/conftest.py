"""
Test fixtures for the todo CLI test suite.

Provides:
- Temporary directory fixtures (isolated from the working directory's todo_db/)
- File-backed and in-memory TaskStore fixtures
- A CLI runner bound to a temporary database
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from todo.constants import CONFIG_PATH_ENV_VAR, DB_PATH_ENV_VAR, reset_config_manager
from todo.logging_setup import LOGGER_NAME
from todo.store import TaskStore


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch) -> Generator[None, None, None]:
    """Keep environment overrides, the config singleton and logging state out of every test."""
    monkeypatch.delenv(DB_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="todo_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def db_path(temp_dir: Path) -> Path:
    """Database path inside a not-yet-existing folder."""
    return temp_dir / "todo_db" / "todo.sqlite"


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store(db_path: Path) -> Generator[TaskStore, None, None]:
    """A file-backed TaskStore, closed after the test."""
    with TaskStore.open(db_path) as s:
        yield s


@pytest.fixture
def memory_store() -> Generator[TaskStore, None, None]:
    """An in-memory TaskStore, closed after the test."""
    with TaskStore.open(":memory:") as s:
        yield s


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def runner(temp_dir: Path, monkeypatch) -> CliRunner:
    """Create a CLI test runner working inside the temporary directory."""
    monkeypatch.chdir(temp_dir)
    return CliRunner()
