r"""Stop strategy bounding the time spent retrying."""

from __future__ import annotations

__all__ = ["StopAfterDelayStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.stop.base import StopStrategy
from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class StopAfterDelayStrategy(StopStrategy):
    """Stop once ``max_delay`` ms have passed since the first attempt.

    The check happens after a rejected attempt, so the loop can overrun
    ``max_delay`` by up to one attempt; it never starts a new attempt
    after the budget is spent.

    Args:
        max_delay: The time budget in milliseconds. Must be >= 0.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.stop import StopAfterDelayStrategy
        >>> strategy = StopAfterDelayStrategy(1000)
        >>> strategy.should_stop(Attempt.from_result(None, 4, 999))
        False
        >>> strategy.should_stop(Attempt.from_result(None, 5, 1000))
        True

        ```
    """

    def __init__(self, max_delay: int) -> None:
        check_non_negative(max_delay, "max_delay")
        self.max_delay = max_delay

    def should_stop(self, failed_attempt: Attempt[Any]) -> bool:
        return failed_attempt.delay_since_first_attempt >= self.max_delay

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_delay={self.max_delay})"
