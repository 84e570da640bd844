"""
Custom exceptions for the todo CLI application.
"""


class TodoError(Exception):
    """Base exception for all todo-related errors."""
    pass


class ValidationError(TodoError):
    """Raised when input for a task operation is invalid."""
    pass


class StorageError(TodoError):
    """Raised when the underlying database cannot be read or written."""
    pass


class ConfigurationError(TodoError):
    """Raised when there's a configuration or setup issue."""
    pass
