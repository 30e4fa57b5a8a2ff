"""Errors raised while bootstrapping the remote service."""


class StartupFailure(Exception):
    """Raised when the application cannot be constructed or started.

    There is no degraded mode: callers are expected to let this terminate
    the process.
    """
