r"""Composite wait strategy."""

from __future__ import annotations

__all__ = ["CompositeWaitStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.wait.base import WaitStrategy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.attempt import Attempt


class CompositeWaitStrategy(WaitStrategy):
    """Sum the delays of several wait strategies.

    Every member computes its delay from the same failed attempt, so the
    order of the members does not change the total.

    Args:
        strategies: The member strategies. At least one is required and
            none may be None.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import (
        ...     CompositeWaitStrategy,
        ...     FibonacciWaitStrategy,
        ...     FixedWaitStrategy,
        ... )
        >>> strategy = CompositeWaitStrategy(
        ...     [FixedWaitStrategy(50), FibonacciWaitStrategy(10, 1000)]
        ... )
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 5, 0))
        100

        ```
    """

    def __init__(self, strategies: Iterable[WaitStrategy]) -> None:
        self.strategies: tuple[WaitStrategy, ...] = tuple(strategies)
        if not self.strategies:
            msg = "Need at least one wait strategy"
            raise ValueError(msg)
        if any(strategy is None for strategy in self.strategies):
            msg = "Cannot have a None wait strategy"
            raise TypeError(msg)

    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:
        return sum(strategy.compute_sleep_time(failed_attempt) for strategy in self.strategies)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.strategies)!r})"
