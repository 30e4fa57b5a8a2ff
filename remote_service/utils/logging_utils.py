"""
Logging utilities for remote_service.

This module provides consistent logging configuration and utility functions
for the remote_service package.

Settings come from the environment (or a ``.env`` file loaded when the
package is imported):

- ``REMOTE_SERVICE_LOG_LEVEL``: level name, INFO if unset or unknown. The
  same level is handed to uvicorn through ``get_log_level``.
- ``REMOTE_SERVICE_LOG_DIR``: directory for ``<logger name>.log`` files.
"""

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_level(level=None):
    """
    Resolve a logging level.

    Args:
        level: Explicit level (int or name). Falls back to the
            REMOTE_SERVICE_LOG_LEVEL environment variable, then INFO.

    Returns:
        Numeric logging level
    """
    if isinstance(level, int):
        return level

    level_name = level or os.environ.get("REMOTE_SERVICE_LOG_LEVEL", "INFO")
    resolved = logging.getLevelName(level_name.upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name=None, level=None, log_file=None):
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (defaults to root logger if None)
        level: Logging level (defaults to INFO if None or if env var not set)
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(get_log_level(level))

    # Clear existing handlers to avoid duplicates when called multiple times
    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name=None):
    """
    Get an existing logger or create a new one with default settings.

    Only handlers attached to the named logger itself count as configured;
    handlers on ancestors such as the root logger are ignored.

    Args:
        name: Logger name (optional)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        log_dir = os.environ.get("REMOTE_SERVICE_LOG_DIR")
        log_file = None

        if log_dir:
            log_file = Path(log_dir) / f"{name or 'remote_service'}.log"

        logger = setup_logger(name, log_file=log_file)

    return logger
