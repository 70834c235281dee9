r"""Unit tests for IncrementingWaitStrategy."""

from __future__ import annotations

import pytest

from aretry.attempt import Attempt
from aretry.wait import IncrementingWaitStrategy


def test_incrementing_wait_strategy() -> None:
    strategy = IncrementingWaitStrategy(500, 100)
    assert [
        strategy.compute_sleep_time(Attempt.from_result(None, n, 0)) for n in range(1, 5)
    ] == [500, 600, 700, 800]


def test_incrementing_wait_strategy_negative_increment_clamped() -> None:
    """Test that a shrinking delay never goes below 0."""
    strategy = IncrementingWaitStrategy(100, -60)
    assert [
        strategy.compute_sleep_time(Attempt.from_result(None, n, 0)) for n in range(1, 5)
    ] == [100, 40, 0, 0]


def test_incrementing_wait_strategy_negative_initial() -> None:
    with pytest.raises(ValueError, match=r"initial_sleep_time must be >= 0"):
        IncrementingWaitStrategy(-1, 100)


def test_incrementing_wait_strategy_repr() -> None:
    assert repr(IncrementingWaitStrategy(5, 10)) == (
        "IncrementingWaitStrategy(initial_sleep_time=5, increment=10)"
    )
