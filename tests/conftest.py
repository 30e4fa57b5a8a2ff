"""
Configuration module for pytest.

This module contains fixtures and setup/teardown functions for tests.
"""

import os
import socket

import pytest
from fastapi.testclient import TestClient

from remote_service.config import StartupConfig
from remote_service.server import create_app

SERVICE_PORT = 8083


@pytest.fixture
def startup_config():
    """Return the default startup configuration."""
    return StartupConfig.default()


@pytest.fixture
def web_app():
    """Create a fresh web application."""
    return create_app()


@pytest.fixture
def client(web_app):
    """Test client that returns 500 responses instead of raising."""
    with TestClient(web_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def occupied_service_port():
    """Hold the service port open for the duration of a test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    # Ports left in TIME_WAIT by earlier tests must not block the bind
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind(("0.0.0.0", SERVICE_PORT))
    except OSError as e:
        sock.close()
        pytest.skip(f"cannot hold port {SERVICE_PORT}: {e}")

    sock.listen(1)
    try:
        yield sock
    finally:
        sock.close()


@pytest.fixture
def test_env_vars():
    """Set up logging environment variables."""
    env_vars = {
        "REMOTE_SERVICE_LOG_LEVEL": "DEBUG",
    }

    # Save original values and set test values
    original = {var: os.environ.get(var) for var in env_vars}
    os.environ.update(env_vars)

    yield env_vars

    # Restore original values
    for var, value in original.items():
        if value is not None:
            os.environ[var] = value
        else:
            os.environ.pop(var, None)
