"""
Logging configuration for the todo CLI.

Everything goes to stderr so that command output on stdout stays clean.
"""

import logging
import sys
from typing import Union

LOGGER_NAME = "todo"


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Configure the 'todo' logger with a single stderr handler.

    Safe to call more than once: existing handlers are replaced, not stacked.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    logging.captureWarnings(True)
    return logger
