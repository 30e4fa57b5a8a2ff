"""
Remote service bootstrap.

This module builds the startup configuration, the web application and
launches it on its fixed port.
"""

from dotenv import find_dotenv, load_dotenv

# Must run before the imports below create their loggers
load_dotenv(find_dotenv(usecwd=True))

from remote_service.application import RemoteServiceApplication  # noqa: E402
from remote_service.config import StartupConfig  # noqa: E402
from remote_service.errors import StartupFailure  # noqa: E402

__all__ = [
    "RemoteServiceApplication",
    "StartupConfig",
    "StartupFailure",
]
