"""HTTP helpers for downloading remote JSON catalogs.

A shared ``httpx.Client`` may be injected for connection reuse or, in tests,
for a client built on ``httpx.MockTransport``. Without one, a short-lived
client is created per request.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from kickoff import __version__
from kickoff.utils.errors import CatalogFetchError
from kickoff.utils.logging import log_message
from kickoff.utils.retry import RetryConfig, RetryExhaustedError, with_retry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
USER_AGENT = f"kickoff/{__version__}"


def _log_retry(attempt: int, delay: float, error: Exception) -> None:
    log_message(f"Request failed ({error}), retry {attempt} in {delay:.1f}s")


def fetch_json(
    url: str,
    *,
    resource: str,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    retry_config: RetryConfig | None = None,
    http_client: httpx.Client | None = None,
) -> Any:
    """Download and decode a JSON document.

    Args:
        url: Address of the document
        resource: Human-readable name used in error messages
        timeout_seconds: Per-request timeout
        retry_config: Retry policy (defaults to one automatic retry)
        http_client: Optional shared client

    Returns:
        The decoded JSON value

    Raises:
        CatalogFetchError: If every attempt fails
    """
    config = retry_config or RetryConfig()

    @with_retry(config, on_retry=_log_retry)
    def _get() -> Any:
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        if http_client is not None:
            response = http_client.get(url, headers=headers, timeout=timeout_seconds)
        else:
            with httpx.Client(timeout=timeout_seconds, follow_redirects=True) as client:
                response = client.get(url, headers=headers)
        response.raise_for_status()
        return response.json()

    log_message(f"Fetching {resource} from {url}")
    try:
        return _get()
    except RetryExhaustedError as e:
        logger.debug("Fetching %s failed after %d attempts", resource, e.attempts)
        reason = _describe_error(e.last_error)
        raise CatalogFetchError(resource, reason) from e.last_error


def _describe_error(error: Exception | None) -> str:
    """Turn an httpx/JSON error into a short reason string."""
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code}"
    if isinstance(error, httpx.TimeoutException):
        return "request timed out"
    if isinstance(error, httpx.RequestError):
        return f"connection failed: {error}"
    if error is None:
        return ""
    return f"invalid JSON: {error}"


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "USER_AGENT",
    "fetch_json",
]
