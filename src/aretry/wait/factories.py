r"""Factory functions for the built-in wait strategies.

All times are in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "exception_wait",
    "exponential_wait",
    "fibonacci_wait",
    "fixed_wait",
    "incrementing_wait",
    "join",
    "no_wait",
    "random_wait",
]

import sys
from typing import TYPE_CHECKING, TypeVar

from aretry.wait.composite import CompositeWaitStrategy
from aretry.wait.exception import ExceptionWaitStrategy
from aretry.wait.exponential import ExponentialWaitStrategy
from aretry.wait.fibonacci import FibonacciWaitStrategy
from aretry.wait.fixed import FixedWaitStrategy
from aretry.wait.incrementing import IncrementingWaitStrategy
from aretry.wait.random import RandomWaitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.wait.base import WaitStrategy

E = TypeVar("E", bound=BaseException)

_NO_WAIT = FixedWaitStrategy(0)


def no_wait() -> WaitStrategy:
    """Return a strategy that retries immediately. This is the default."""
    return _NO_WAIT


def fixed_wait(sleep_time: int) -> WaitStrategy:
    """Return a strategy that sleeps ``sleep_time`` ms between attempts."""
    return FixedWaitStrategy(sleep_time)


def random_wait(minimum: int, maximum: int | None = None) -> WaitStrategy:
    """Return a strategy that sleeps a random time between attempts.

    ``random_wait(maximum)`` draws from ``[0, maximum)`` and
    ``random_wait(minimum, maximum)`` from ``[minimum, maximum)``.

    Example:
        ```pycon
        >>> from aretry.wait import random_wait
        >>> random_wait(1000)
        RandomWaitStrategy(minimum=0, maximum=1000)
        >>> random_wait(200, 1000)
        RandomWaitStrategy(minimum=200, maximum=1000)

        ```
    """
    if maximum is None:
        minimum, maximum = 0, minimum
    return RandomWaitStrategy(minimum, maximum)


def incrementing_wait(initial_sleep_time: int, increment: int) -> WaitStrategy:
    """Return a strategy whose delay grows by ``increment`` per failure."""
    return IncrementingWaitStrategy(initial_sleep_time, increment)


def exponential_wait(multiplier: int = 1, maximum_wait: int = sys.maxsize) -> WaitStrategy:
    """Return an exponential strategy, by default effectively uncapped."""
    return ExponentialWaitStrategy(multiplier, maximum_wait)


def fibonacci_wait(multiplier: int = 1, maximum_wait: int = sys.maxsize) -> WaitStrategy:
    """Return a Fibonacci strategy, by default effectively uncapped."""
    return FibonacciWaitStrategy(multiplier, maximum_wait)


def exception_wait(exception_class: type[E], function: Callable[[E], int]) -> WaitStrategy:
    """Return a strategy that derives the delay from a matching exception."""
    return ExceptionWaitStrategy(exception_class, function)


def join(*strategies: WaitStrategy) -> WaitStrategy:
    """Return a strategy whose delay is the sum of ``strategies``.

    Raises:
        ValueError: If no strategy is given.
        TypeError: If one of the strategies is None.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import fixed_wait, incrementing_wait, join
        >>> strategy = join(fixed_wait(100), incrementing_wait(10, 10))
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 3, 0))
        130

        ```
    """
    return CompositeWaitStrategy(strategies)
