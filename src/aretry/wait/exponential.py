r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWaitStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.utils.validation import check_non_negative, check_positive
from aretry.wait.base import WaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


def check_multiplier_and_maximum_wait(multiplier: int, maximum_wait: int) -> None:
    """Validate the arguments shared by the growing wait strategies.

    Raises:
        ValueError: If ``multiplier <= 0``, ``maximum_wait < 0`` or
            ``multiplier >= maximum_wait``.
    """
    check_positive(multiplier, "multiplier")
    check_non_negative(maximum_wait, "maximum_wait")
    if multiplier >= maximum_wait:
        msg = f"multiplier must be < maximum_wait, got multiplier={multiplier} and maximum_wait={maximum_wait}"
        raise ValueError(msg)


class ExponentialWaitStrategy(WaitStrategy):
    """Exponential wait strategy.

    Calculates delay as: ``round(multiplier * 2 ** attempt_number)``,
    capped at ``maximum_wait``. The first failed attempt therefore waits
    ``2 * multiplier``.

    Args:
        multiplier: Factor applied to the power of two. Must be > 0.
        maximum_wait: Cap in milliseconds. Must be >= 0 and > multiplier.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import ExponentialWaitStrategy
        >>> strategy = ExponentialWaitStrategy(multiplier=100, maximum_wait=5000)
        >>> [strategy.compute_sleep_time(Attempt.from_result(None, n, 0)) for n in range(1, 7)]
        [200, 400, 800, 1600, 3200, 5000]

        ```
    """

    def __init__(self, multiplier: int, maximum_wait: int) -> None:
        check_multiplier_and_maximum_wait(multiplier, maximum_wait)
        self.multiplier = multiplier
        self.maximum_wait = maximum_wait

    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:
        result = round(self.multiplier * 2**failed_attempt.attempt_number)
        result = min(result, self.maximum_wait)
        return max(result, 0)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(multiplier={self.multiplier}, "
            f"maximum_wait={self.maximum_wait})"
        )
