"""Debug log for kickoff runs.

Nothing is written unless KICKOFF_LOG is truthy. The log records the
console messages, the prompts answered and every external command with
its exit code, which is usually enough to replay a failed scaffold.

Environment Variables:
    KICKOFF_LOG: "true", "1", "yes" or "on" turns the log on
    KICKOFF_LOG_FILE: Where to write it (default: ~/.kickoff.log)
"""

import logging
import os
from pathlib import Path

LOGGER_NAME = "kickoff"

_TRUTHY = {"true", "1", "yes", "on"}
_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_ENABLED = os.environ.get("KICKOFF_LOG", "").strip().lower() in _TRUTHY
LOG_FILE = Path(os.environ.get("KICKOFF_LOG_FILE", str(Path.home() / ".kickoff.log")))

_logger: logging.Logger | None = None


def _build_handler() -> logging.Handler:
    if not LOG_ENABLED:
        return logging.NullHandler()
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(LOG_FILE)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def setup_logging() -> logging.Logger:
    """Attach the one handler the "kickoff" logger needs.

    Safe to call repeatedly; only the first call touches handlers.
    """
    global _logger

    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.handlers.clear()
        logger.addHandler(_build_handler())
        if LOG_ENABLED:
            logger.setLevel(logging.DEBUG)
        _logger = logger
    return _logger


def get_logger() -> logging.Logger:
    return _logger if _logger is not None else setup_logging()


def log_message(message: str) -> None:
    get_logger().info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Record an external command (node, fnm, the fetch tool) and its exit code."""
    get_logger().info("COMMAND: %s | EXIT_CODE: %d", command, exit_code)


__all__ = [
    "LOGGER_NAME",
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_command",
]
