r"""Incrementing wait strategy."""

from __future__ import annotations

__all__ = ["IncrementingWaitStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.utils.validation import check_non_negative
from aretry.wait.base import WaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class IncrementingWaitStrategy(WaitStrategy):
    """Sleep ``initial_sleep_time`` after the first failure, then add
    ``increment`` for every further failure.

    Calculates delay as: ``initial_sleep_time + increment * (attempt_number - 1)``.
    A negative increment makes the delay shrink; it never goes below 0.

    Args:
        initial_sleep_time: The first delay in milliseconds. Must be >= 0.
        increment: Milliseconds added per failed attempt. May be negative.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import IncrementingWaitStrategy
        >>> strategy = IncrementingWaitStrategy(initial_sleep_time=500, increment=100)
        >>> [strategy.compute_sleep_time(Attempt.from_result(None, n, 0)) for n in (1, 2, 3)]
        [500, 600, 700]
        >>> shrinking = IncrementingWaitStrategy(initial_sleep_time=100, increment=-60)
        >>> [shrinking.compute_sleep_time(Attempt.from_result(None, n, 0)) for n in (1, 2, 3)]
        [100, 40, 0]

        ```
    """

    def __init__(self, initial_sleep_time: int, increment: int) -> None:
        check_non_negative(initial_sleep_time, "initial_sleep_time")
        self.initial_sleep_time = initial_sleep_time
        self.increment = increment

    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:
        result = self.initial_sleep_time + self.increment * (failed_attempt.attempt_number - 1)
        return max(result, 0)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(initial_sleep_time={self.initial_sleep_time}, "
            f"increment={self.increment})"
        )
