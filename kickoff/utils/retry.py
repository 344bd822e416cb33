"""Retry utilities for transient network failures.

Catalog downloads get a small number of automatic retries with
exponential backoff and jitter. This module includes:
- RetryConfig: retry policy
- RetryExhaustedError: raised once every attempt has failed
- calculate_backoff_delay: exponential backoff with jitter calculation
- with_retry: decorator for automatic retry logic
"""

import json
import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any, TypeVar

import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retrying a failed request."""

    max_retries: int = 1  # Retries after the first attempt
    base_delay_seconds: float = 1.0
    max_delay_seconds: float = 10.0
    jitter_factor: float = 0.5  # Random jitter (0-50% of delay)

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.base_delay_seconds < 0:
            raise ValueError("base_delay_seconds must be >= 0")
        if self.jitter_factor < 0 or self.jitter_factor > 1:
            raise ValueError("jitter_factor must be in [0, 1]")
        if self.max_delay_seconds < self.base_delay_seconds:
            raise ValueError("max_delay_seconds must be >= base_delay_seconds")


class RetryExhaustedError(Exception):
    """Raised when every attempt failed with a retryable error.

    Attributes:
        attempts: Total number of attempts made
        last_error: The exception raised by the final attempt
    """

    def __init__(self, message: str, attempts: int, last_error: Exception | None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


def calculate_backoff_delay(attempt: int, config: RetryConfig) -> float:
    """Calculate delay with exponential backoff and jitter.

    Formula: min(base * 2^attempt + jitter, max_delay)

    Args:
        attempt: Current attempt number (0-indexed)
        config: Retry configuration

    Returns:
        Delay in seconds
    """
    exponential_delay = config.base_delay_seconds * (2**attempt)
    jitter = random.uniform(0, config.jitter_factor * exponential_delay)
    delay: float = min(exponential_delay + jitter, config.max_delay_seconds)
    return delay


def is_retryable_error(error: Exception) -> bool:
    """Check if an error should trigger a retry.

    Transport failures, timeouts, HTTP error statuses and malformed JSON
    bodies are all treated as transient.
    """
    return isinstance(error, httpx.HTTPError | json.JSONDecodeError)


def with_retry(
    config: RetryConfig,
    on_retry: Callable[[int, float, Exception], None] | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator for retrying functions on transient network errors.

    Args:
        config: Retry configuration
        on_retry: Optional callback called before each retry.
                  Receives (attempt_number, delay_seconds, exception).

    Returns:
        Decorator function

    Usage:
        @with_retry(RetryConfig(max_retries=1))
        def download():
            ...

    Raises:
        RetryExhaustedError: When all retries are exhausted
        Exception: Non-retryable errors are re-raised immediately
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            last_exception: Exception | None = None

            for attempt in range(config.max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    if not is_retryable_error(e):
                        raise

                    last_exception = e

                    if attempt >= config.max_retries:
                        break

                    delay = calculate_backoff_delay(attempt, config)
                    if on_retry:
                        on_retry(attempt + 1, delay, e)
                    time.sleep(delay)

            raise RetryExhaustedError(
                f"Giving up after {config.max_retries + 1} attempts: {last_exception}",
                attempts=config.max_retries + 1,
                last_error=last_exception,
            )

        return wrapper

    return decorator


__all__ = [
    "RetryConfig",
    "RetryExhaustedError",
    "calculate_backoff_delay",
    "is_retryable_error",
    "with_retry",
]
