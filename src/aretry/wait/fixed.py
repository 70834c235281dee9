r"""Fixed wait strategy."""

from __future__ import annotations

__all__ = ["FixedWaitStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.utils.validation import check_non_negative
from aretry.wait.base import WaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class FixedWaitStrategy(WaitStrategy):
    """Sleep the same amount of time after every failed attempt.

    Args:
        sleep_time: The delay in milliseconds. Must be >= 0.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import FixedWaitStrategy
        >>> strategy = FixedWaitStrategy(sleep_time=250)
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 1, 0))
        250
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 10, 5000))
        250

        ```
    """

    def __init__(self, sleep_time: int) -> None:
        check_non_negative(sleep_time, "sleep_time")
        self.sleep_time = sleep_time

    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:  # noqa: ARG002
        return self.sleep_time

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sleep_time={self.sleep_time})"
