"""Startup configuration module."""

from .startup_config import DEFAULT_SERVER_PORT, SERVER_PORT_KEY, StartupConfig

__all__ = ["StartupConfig", "SERVER_PORT_KEY", "DEFAULT_SERVER_PORT"]
