r"""Unit tests for CompositeWaitStrategy."""

from __future__ import annotations

import pytest

from aretry.attempt import Attempt
from aretry.wait import (
    CompositeWaitStrategy,
    ExponentialWaitStrategy,
    FixedWaitStrategy,
    IncrementingWaitStrategy,
)


@pytest.mark.parametrize("attempt_number", [1, 2, 5, 12])
def test_composite_wait_strategy_sums_members(attempt_number: int) -> None:
    """Test that the delay is the sum of every member's delay."""
    members = [
        FixedWaitStrategy(50),
        IncrementingWaitStrategy(10, 20),
        ExponentialWaitStrategy(1, 5000),
    ]
    attempt = Attempt.from_result(None, attempt_number, 0)
    assert CompositeWaitStrategy(members).compute_sleep_time(attempt) == sum(
        member.compute_sleep_time(attempt) for member in members
    )


def test_composite_wait_strategy_single_member() -> None:
    strategy = CompositeWaitStrategy([FixedWaitStrategy(7)])
    assert strategy.compute_sleep_time(Attempt.from_result(None, 1, 0)) == 7


def test_composite_wait_strategy_empty() -> None:
    with pytest.raises(ValueError, match=r"Need at least one wait strategy"):
        CompositeWaitStrategy([])


def test_composite_wait_strategy_none_member() -> None:
    with pytest.raises(TypeError, match=r"Cannot have a None wait strategy"):
        CompositeWaitStrategy([FixedWaitStrategy(1), None])  # type: ignore[list-item]
