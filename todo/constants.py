"""
Constants for the todo CLI application.

Note: Most of these constants serve as default fallback values.
Actual values are loaded from todo_db/config.json at runtime via ConfigManager.
"""
import json
import os
from pathlib import Path
from typing import Any, Optional

from todo.exceptions import ConfigurationError

# =============================================================================
# Default Fallback Values
# These are used if config.json doesn't exist or doesn't specify a value.
# =============================================================================

# Storage defaults
DEFAULT_DB_DIR = "todo_db"
DEFAULT_DB_FILENAME = "todo.sqlite"
DEFAULT_CONFIG_FILENAME = "config.json"

# Environment overrides
DB_PATH_ENV_VAR = "TODO_DB"
CONFIG_PATH_ENV_VAR = "TODO_CONFIG"

# Listing / logging defaults
DEFAULT_LIST_ORDER = "id"
VALID_LIST_ORDERS = ["id", "status"]
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Largest id SQLite can store (signed 64-bit INTEGER)
MAX_TASK_ID = 2 ** 63 - 1

# Display layout (not configurable)
ID_WIDTH = 4
NAME_WIDTH = 44
STATUS_WIDTH = 8
ELLIPSIS = "..."
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Status labels (not configurable)
DONE_LABEL = "Done"
PENDING_LABEL = "Pending"

# Validation error messages (not configurable)
VALIDATION_NAME_REQUIRED = "Task name must not be empty."


# =============================================================================
# Config Loader
# Load values from todo_db/config.json at runtime.
# =============================================================================

_config_manager_instance: Optional['ConfigManager'] = None


def default_config_path() -> Path:
    """Config file location: TODO_CONFIG env var, else todo_db/config.json."""
    env = os.getenv(CONFIG_PATH_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path(DEFAULT_DB_DIR) / DEFAULT_CONFIG_FILENAME


class ConfigManager:
    """
    Manages loading configuration from a config.json file with fallback to defaults.

    Usage:
        # With default path (todo_db/config.json)
        config = ConfigManager()
        order = config.get_str('list_order', DEFAULT_LIST_ORDER)

        # With custom path
        config = ConfigManager(config_path=Path("/custom/path/config.json"))
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Direct path to config.json file. Defaults to default_config_path().
        """
        self._config: Optional[dict] = None
        self._config_path = config_path if config_path is not None else default_config_path()

    def _load_config(self) -> dict:
        """Load config from config.json file."""
        if self._config is not None:
            return self._config

        if self._config_path.exists():
            try:
                with open(self._config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                self._config = data if isinstance(data, dict) else {}
            except (json.JSONDecodeError, OSError):
                self._config = {}
        else:
            self._config = {}

        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value with fallback to default.

        Args:
            key: Configuration key name.
            default: Default value if key not found.

        Returns:
            Config value or default.
        """
        config = self._load_config()
        return config.get(key, default)

    def get_str(self, key: str, default: str) -> str:
        """Get a string config value with fallback."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path


def get_config_manager(reset: bool = False) -> ConfigManager:
    """
    Get the singleton ConfigManager instance with default path.

    Args:
        reset: If True, reset the singleton and create a new instance.

    Returns:
        ConfigManager singleton instance.
    """
    global _config_manager_instance
    if _config_manager_instance is None or reset:
        _config_manager_instance = ConfigManager()
    return _config_manager_instance


def reset_config_manager() -> None:
    """Reset the singleton ConfigManager instance (useful for testing)."""
    global _config_manager_instance
    _config_manager_instance = None


# Convenience functions for common config access
def get_list_order(config: Optional[ConfigManager] = None) -> str:
    """Get the default list order ('id' or 'status') from config or default."""
    config = config or get_config_manager()
    value = config.get_str('list_order', DEFAULT_LIST_ORDER).lower()
    if value not in VALID_LIST_ORDERS:
        raise ConfigurationError(
            f"Invalid list_order '{value}' in {config.config_path}. "
            f"Must be one of: {', '.join(VALID_LIST_ORDERS)}."
        )
    return value


def get_log_level(config: Optional[ConfigManager] = None) -> str:
    """Get the log level name from config or default."""
    config = config or get_config_manager()
    value = config.get_str('log_level', DEFAULT_LOG_LEVEL).upper()
    if value not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log_level '{value}' in {config.config_path}. "
            f"Must be one of: {', '.join(VALID_LOG_LEVELS)}."
        )
    return value


def resolve_db_path(db_option: Optional[str] = None, config: Optional[ConfigManager] = None) -> Path:
    """
    Resolve the database file location.

    Precedence: --db option, TODO_DB env var, 'db_path' config key,
    then ./todo_db/todo.sqlite.
    """
    if db_option:
        return Path(db_option).expanduser()

    env = os.getenv(DB_PATH_ENV_VAR)
    if env:
        return Path(env).expanduser()

    config = config or get_config_manager()
    configured = config.get('db_path')
    if configured:
        return Path(str(configured)).expanduser()

    return Path(DEFAULT_DB_DIR) / DEFAULT_DB_FILENAME
