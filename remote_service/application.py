"""
Application wrapper around the FastAPI app and the uvicorn server.

The application is built from a StartupConfig and started explicitly with
``run``, which blocks until the server shuts down.
"""

import contextlib
import signal
import threading
from typing import Sequence

import uvicorn

from remote_service.config import StartupConfig
from remote_service.errors import StartupFailure
from remote_service.server import create_app
from remote_service.utils.logging_utils import get_log_level, get_logger

logger = get_logger(__name__)

# Listen on every interface, matching the framework default
DEFAULT_HOST = "0.0.0.0"


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt


@contextlib.contextmanager
def terminate_as_interrupt():
    """
    Treat SIGTERM like Ctrl-C while the server runs.

    uvicorn re-raises the signal that stopped it once shutdown is complete.
    With the default SIGTERM disposition that kills the process; as an
    interrupt it is absorbed by ``uvicorn.run`` and the process exits 0.
    Signal handlers can only be set from the main thread, elsewhere this
    does nothing.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGTERM, _raise_interrupt)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


class RemoteServiceApplication:
    """A web application parameterized by its startup configuration."""

    def __init__(self, config: StartupConfig, host: str = DEFAULT_HOST):
        """
        Initialize the application.

        Args:
            config: Startup configuration, must contain ``server.port``
            host: Interface to bind

        Raises:
            StartupFailure: If the configuration is unusable
        """
        config.validate()

        self.config = config
        self.host = host
        self.app = create_app()

    @property
    def port(self) -> int:
        return self.config.port

    def run(self, args: Sequence[str] = ()) -> None:
        """
        Start serving. Blocks for the lifetime of the server.

        Args:
            args: Command-line arguments, stored verbatim on the app state.
                They never affect how the server is configured.

        Raises:
            StartupFailure: If the server cannot be started
        """
        self.app.state.application_arguments = tuple(args)

        logger.info(f"Starting remote service on port {self.port}")
        logger.debug(f"Application arguments: {list(args)}")

        try:
            with terminate_as_interrupt():
                uvicorn.run(
                    self.app,
                    host=self.host,
                    port=self.port,
                    log_level=get_log_level(),
                )
        except Exception as e:
            logger.error(f"Error starting remote service: {str(e)}")
            raise StartupFailure(f"Could not start remote service on port {self.port}") from e

        logger.info("Remote service stopped")
