"""Tests for kickoff.utils.retry module."""

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest

from kickoff.utils.retry import (
    RetryConfig,
    RetryExhaustedError,
    calculate_backoff_delay,
    is_retryable_error,
    with_retry,
)


@pytest.fixture
def fast_config():
    """Deterministic config with tiny delays."""
    return RetryConfig(
        max_retries=2,
        base_delay_seconds=0.01,
        max_delay_seconds=0.1,
        jitter_factor=0.0,
    )


def _connect_error() -> httpx.ConnectError:
    return httpx.ConnectError("boom", request=httpx.Request("GET", "https://example.test"))


class TestRetryConfig:
    def test_defaults(self):
        config = RetryConfig()
        assert config.max_retries == 1
        assert config.base_delay_seconds == 1.0

    def test_rejects_negative_retries(self):
        with pytest.raises(ValueError, match="max_retries"):
            RetryConfig(max_retries=-1)

    def test_rejects_bad_jitter(self):
        with pytest.raises(ValueError, match="jitter_factor"):
            RetryConfig(jitter_factor=1.5)

    def test_rejects_max_below_base(self):
        with pytest.raises(ValueError, match="max_delay_seconds"):
            RetryConfig(base_delay_seconds=5.0, max_delay_seconds=1.0)

    def test_zero_delay_allowed(self):
        config = RetryConfig(base_delay_seconds=0.0, max_delay_seconds=0.0)
        assert config.base_delay_seconds == 0.0


class TestCalculateBackoffDelay:
    def test_exponential_growth_without_jitter(self):
        config = RetryConfig(base_delay_seconds=1.0, max_delay_seconds=100.0, jitter_factor=0.0)

        assert calculate_backoff_delay(0, config) == 1.0
        assert calculate_backoff_delay(1, config) == 2.0
        assert calculate_backoff_delay(3, config) == 8.0

    def test_capped_at_max_delay(self):
        config = RetryConfig(base_delay_seconds=1.0, max_delay_seconds=3.0, jitter_factor=0.0)
        assert calculate_backoff_delay(5, config) == 3.0

    def test_jitter_stays_in_range(self):
        config = RetryConfig(base_delay_seconds=1.0, max_delay_seconds=10.0, jitter_factor=0.5)
        for _ in range(20):
            delay = calculate_backoff_delay(1, config)
            assert 2.0 <= delay <= 3.0


class TestIsRetryableError:
    def test_transport_error_is_retryable(self):
        assert is_retryable_error(_connect_error())

    def test_json_error_is_retryable(self):
        assert is_retryable_error(json.JSONDecodeError("bad", "x", 0))

    def test_value_error_is_not_retryable(self):
        assert not is_retryable_error(ValueError("nope"))


class TestWithRetry:
    def test_returns_first_success(self, fast_config):
        func = MagicMock(return_value="ok")

        assert with_retry(fast_config)(func)() == "ok"
        assert func.call_count == 1

    @patch("kickoff.utils.retry.time.sleep")
    def test_retries_then_succeeds(self, mock_sleep, fast_config):
        func = MagicMock(side_effect=[_connect_error(), "ok"])
        on_retry = MagicMock()

        result = with_retry(fast_config, on_retry=on_retry)(func)()

        assert result == "ok"
        assert func.call_count == 2
        on_retry.assert_called_once()
        assert on_retry.call_args[0][0] == 1
        mock_sleep.assert_called_once()

    @patch("kickoff.utils.retry.time.sleep")
    def test_exhausted_raises_with_last_error(self, mock_sleep, fast_config):
        errors = [_connect_error() for _ in range(3)]
        func = MagicMock(side_effect=errors)

        with pytest.raises(RetryExhaustedError) as exc_info:
            with_retry(fast_config)(func)()

        assert exc_info.value.attempts == 3
        assert exc_info.value.last_error is errors[-1]
        assert func.call_count == 3
        assert mock_sleep.call_count == 2

    def test_non_retryable_propagates_immediately(self, fast_config):
        func = MagicMock(side_effect=KeyError("missing"))

        with pytest.raises(KeyError):
            with_retry(fast_config)(func)()

        assert func.call_count == 1

    def test_zero_retries_means_single_attempt(self):
        config = RetryConfig(max_retries=0, base_delay_seconds=0.0, max_delay_seconds=0.0)
        func = MagicMock(side_effect=_connect_error())

        with pytest.raises(RetryExhaustedError) as exc_info:
            with_retry(config)(func)()

        assert exc_info.value.attempts == 1
        assert func.call_count == 1
