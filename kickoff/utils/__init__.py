"""Utility modules for KICKOFF.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
- retry: Retry with exponential backoff for network calls
"""

from kickoff.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_banner,
)
from kickoff.utils.errors import (
    CatalogFetchError,
    ExitCode,
    KickoffError,
    PullError,
    RuntimeInstallError,
    SelectionAbortedError,
)
from kickoff.utils.logging import log_command, log_message, setup_logging
from kickoff.utils.retry import (
    RetryConfig,
    RetryExhaustedError,
    calculate_backoff_delay,
    with_retry,
)

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "show_banner",
    # Errors
    "ExitCode",
    "KickoffError",
    "CatalogFetchError",
    "RuntimeInstallError",
    "SelectionAbortedError",
    "PullError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
    # Retry
    "RetryConfig",
    "RetryExhaustedError",
    "calculate_backoff_delay",
    "with_retry",
]
