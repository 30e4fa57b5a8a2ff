"""
A ``.env`` file in the working directory controls the package loggers.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent

SHOW_LEVELS = (
    "import logging, remote_service.main; "
    "print(logging.getLogger('remote_service.application').level); "
    "print(logging.getLogger('remote_service.main').level)"
)


@pytest.fixture
def clean_env():
    """Process environment without the logging variables."""
    env = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith("REMOTE_SERVICE_LOG_")
    }
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    return env


def logger_levels(cwd, env):
    result = subprocess.run(
        [sys.executable, "-c", SHOW_LEVELS],
        cwd=str(cwd),
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
    return [int(line) for line in result.stdout.split()]


class TestDotenvLogging:
    """Test suite for loading logging settings from .env."""

    def test_log_level_from_dotenv(self, tmp_path, clean_env):
        """Loggers created at import pick up the level from .env."""
        (tmp_path / ".env").write_text("REMOTE_SERVICE_LOG_LEVEL=DEBUG\n")

        assert logger_levels(tmp_path, clean_env) == [10, 10]

    def test_log_dir_from_dotenv(self, tmp_path, clean_env):
        """Loggers created at import write to the directory from .env."""
        log_dir = tmp_path / "logs"
        (tmp_path / ".env").write_text(f"REMOTE_SERVICE_LOG_DIR={log_dir}\n")

        logger_levels(tmp_path, clean_env)

        assert (log_dir / "remote_service.application.log").exists()

    def test_default_without_dotenv(self, tmp_path, clean_env):
        """Without a .env file the level defaults to INFO."""
        assert logger_levels(tmp_path, clean_env) == [20, 20]
