"""Tests for kickoff.utils.logging module."""

import importlib
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import kickoff.utils.logging as logging_module


@pytest.fixture
def reload_logging():
    """Reload the logging module after each test so env changes don't leak."""
    yield
    logger = logging.getLogger("kickoff")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logging_module._logger = None
    importlib.reload(logging_module)


class TestLoggingConfig:
    """Tests for environment-driven configuration."""

    def test_log_disabled_by_default(self, reload_logging):
        """Logging is disabled when KICKOFF_LOG is not set."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is False

    def test_log_enabled_with_env_var(self, reload_logging):
        """Logging is enabled when KICKOFF_LOG=true."""
        with patch.dict(os.environ, {"KICKOFF_LOG": "TRUE"}):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is True

    @pytest.mark.parametrize(
        ("value", "enabled"),
        [("1", True), ("yes", True), ("on", True), ("no", False), ("", False)],
    )
    def test_log_flag_values(self, reload_logging, value, enabled):
        with patch.dict(os.environ, {"KICKOFF_LOG": value}):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is enabled

    def test_log_file_default_path(self):
        """Default log file is in home directory."""
        if "KICKOFF_LOG_FILE" in os.environ:
            pytest.skip("KICKOFF_LOG_FILE set in environment")
        assert logging_module.LOG_FILE == Path.home() / ".kickoff.log"

    def test_log_file_custom_path(self, reload_logging, tmp_path):
        """Custom log file path from environment."""
        custom_path = tmp_path / "custom.log"
        with patch.dict(os.environ, {"KICKOFF_LOG_FILE": str(custom_path)}):
            importlib.reload(logging_module)

            assert logging_module.LOG_FILE == custom_path


class TestSetupLogging:
    """Tests for setup_logging and the log helpers."""

    def test_null_handler_when_disabled(self, reload_logging):
        """Disabled logging installs only a NullHandler."""
        with patch.dict(os.environ, {"KICKOFF_LOG": "false"}):
            importlib.reload(logging_module)
            logging_module._logger = None

            logger = logging_module.setup_logging()

            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_setup_is_idempotent(self, reload_logging):
        """Repeated calls return the same logger."""
        logging_module._logger = None

        first = logging_module.setup_logging()
        second = logging_module.setup_logging()

        assert first is second

    def test_writes_messages_and_commands_when_enabled(self, reload_logging, tmp_path):
        """Messages and commands reach the log file."""
        log_file = tmp_path / "logs" / "kickoff.log"
        env = {"KICKOFF_LOG": "true", "KICKOFF_LOG_FILE": str(log_file)}
        with patch.dict(os.environ, env):
            importlib.reload(logging_module)
            logging_module._logger = None

            logging_module.log_message("hello from a test")
            logging_module.log_command("fnm install 22", exit_code=3)
            for handler in logging.getLogger("kickoff").handlers:
                handler.flush()

        content = log_file.read_text()
        assert "hello from a test" in content
        assert "COMMAND: fnm install 22 | EXIT_CODE: 3" in content
