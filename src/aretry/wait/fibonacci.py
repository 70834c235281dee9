r"""Fibonacci wait strategy."""

from __future__ import annotations

__all__ = ["FibonacciWaitStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.wait.base import WaitStrategy
from aretry.wait.exponential import check_multiplier_and_maximum_wait

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class FibonacciWaitStrategy(WaitStrategy):
    """Fibonacci wait strategy.

    Calculates delay as: ``multiplier * fib(attempt_number)`` with
    ``fib(0) = 0`` and ``fib(1) = 1``, capped at ``maximum_wait``. This
    grows more gently than the exponential strategy.

    Args:
        multiplier: Factor applied to the Fibonacci number. Must be > 0.
        maximum_wait: Cap in milliseconds. Must be >= 0 and > multiplier.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import FibonacciWaitStrategy
        >>> strategy = FibonacciWaitStrategy(multiplier=10, maximum_wait=100)
        >>> [strategy.compute_sleep_time(Attempt.from_result(None, n, 0)) for n in range(1, 9)]
        [10, 10, 20, 30, 50, 80, 100, 100]

        ```
    """

    def __init__(self, multiplier: int, maximum_wait: int) -> None:
        check_multiplier_and_maximum_wait(multiplier, maximum_wait)
        self.multiplier = multiplier
        self.maximum_wait = maximum_wait

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (``fib(0) = 0``)."""
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:
        result = self.multiplier * self._fibonacci(failed_attempt.attempt_number)
        if result > self.maximum_wait or result < 0:
            result = self.maximum_wait
        return max(result, 0)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(multiplier={self.multiplier}, "
            f"maximum_wait={self.maximum_wait})"
        )
