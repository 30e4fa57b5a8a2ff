"""
Utility functions for the remote_service package.
"""

from remote_service.utils.logging_utils import get_log_level, get_logger, setup_logger

__all__ = [
    "get_log_level",
    "get_logger",
    "setup_logger",
]
