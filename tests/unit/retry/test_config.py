r"""Unit tests for RetryConfig and AsyncRetryConfig."""

from __future__ import annotations

import dataclasses

import pytest
from coola.equality import objects_are_equal

from aretry.block import AsyncioSleepStrategy, ThreadSleepStrategy
from aretry.limit import AsyncNoAttemptTimeLimit, NoAttemptTimeLimit, async_fixed_time_limit
from aretry.predicate import ExceptionClassPredicate, RejectionPredicate
from aretry.retry import AsyncRetryConfig, RetryConfig
from aretry.stop import NeverStopStrategy, stop_after_attempt
from aretry.wait import FixedWaitStrategy, fixed_wait

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    """Test that empty slots are filled with the defaults."""
    config = RetryConfig()
    assert isinstance(config.attempt_time_limiter, NoAttemptTimeLimit)
    assert isinstance(config.stop_strategy, NeverStopStrategy)
    assert isinstance(config.wait_strategy, FixedWaitStrategy)
    assert config.wait_strategy.sleep_time == 0
    assert isinstance(config.block_strategy, ThreadSleepStrategy)
    assert isinstance(config.rejection_predicate, RejectionPredicate)
    assert len(config.rejection_predicate) == 0
    assert config.listeners == ()
    assert config.name is None


def test_retry_config_custom_values() -> None:
    stop = stop_after_attempt(3)
    wait = fixed_wait(100)
    predicate = RejectionPredicate([ExceptionClassPredicate(OSError)])
    config = RetryConfig(
        stop_strategy=stop, wait_strategy=wait, rejection_predicate=predicate, name="sync"
    )
    assert config.stop_strategy is stop
    assert config.wait_strategy is wait
    assert config.rejection_predicate is predicate
    assert config.name == "sync"


def test_retry_config_listeners_to_tuple() -> None:
    listener = print
    config = RetryConfig(listeners=[listener])  # type: ignore[arg-type]
    assert objects_are_equal(config.listeners, (listener,))


def test_retry_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        RetryConfig().name = "other"  # type: ignore[misc]


def test_retry_config_merge() -> None:
    """Test that merge returns a new config and leaves the original as is."""
    config = RetryConfig(stop_strategy=stop_after_attempt(3))
    merged = config.merge(name="merged", wait_strategy=fixed_wait(10), stop_strategy=None)
    assert merged.name == "merged"
    assert merged.wait_strategy.sleep_time == 10
    assert merged.stop_strategy is config.stop_strategy
    assert config.name is None


def test_retry_config_rejects_async_block_strategy() -> None:
    with pytest.raises(TypeError, match=r"block_strategy must be an instance of BlockStrategy"):
        RetryConfig(block_strategy=AsyncioSleepStrategy())  # type: ignore[arg-type]


def test_retry_config_rejects_async_time_limiter() -> None:
    with pytest.raises(
        TypeError, match=r"attempt_time_limiter must be an instance of AttemptTimeLimiter"
    ):
        RetryConfig(attempt_time_limiter=async_fixed_time_limit(10))  # type: ignore[arg-type]


def test_retry_config_rejects_wrong_stop_strategy() -> None:
    with pytest.raises(TypeError, match=r"stop_strategy must be an instance of StopStrategy"):
        RetryConfig(stop_strategy=fixed_wait(10))  # type: ignore[arg-type]


######################################
#     Tests for AsyncRetryConfig     #
######################################


def test_async_retry_config_defaults() -> None:
    config = AsyncRetryConfig()
    assert isinstance(config.attempt_time_limiter, AsyncNoAttemptTimeLimit)
    assert isinstance(config.block_strategy, AsyncioSleepStrategy)
    assert isinstance(config.stop_strategy, NeverStopStrategy)
    assert len(config.rejection_predicate) == 0


def test_async_retry_config_rejects_thread_block_strategy() -> None:
    with pytest.raises(
        TypeError, match=r"block_strategy must be an instance of AsyncBlockStrategy"
    ):
        AsyncRetryConfig(block_strategy=ThreadSleepStrategy())  # type: ignore[arg-type]


def test_async_retry_config_merge() -> None:
    config = AsyncRetryConfig()
    merged = config.merge(stop_strategy=stop_after_attempt(2))
    assert merged.stop_strategy.max_attempt_number == 2
    assert isinstance(config.stop_strategy, NeverStopStrategy)
