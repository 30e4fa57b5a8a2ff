"""
Main module for the package.

This module contains the process entry point: it builds the startup
configuration, constructs the application and hands control to the server.
"""

import sys
from typing import Optional, Sequence

from remote_service.application import RemoteServiceApplication
from remote_service.config import StartupConfig
from remote_service.errors import StartupFailure
from remote_service.utils.logging_utils import get_logger

# Get module logger
logger = get_logger(__name__)


def main(args: Optional[Sequence[str]] = None) -> None:
    """
    Start the remote service. Does not return while the server is running.

    Args:
        args: Command-line arguments forwarded verbatim to the application.
            Defaults to ``sys.argv[1:]``.

    Raises:
        StartupFailure: If the application cannot be built or started
    """
    if args is None:
        args = sys.argv[1:]

    config = StartupConfig.default()
    app = RemoteServiceApplication(config)
    app.run(args)


def run_main() -> None:
    """Console script entry point: exit non-zero on startup failure."""
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Remote service interrupted")
    except StartupFailure as e:
        logger.exception(f"Remote service failed to start: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    run_main()
