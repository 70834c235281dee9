r"""Wait strategies computing the delay between attempts.

This package provides fixed, random, incrementing, exponential, Fibonacci,
exception-driven and composite wait strategies, plus factory functions
for each. All delays are in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "CompositeWaitStrategy",
    "ExceptionWaitStrategy",
    "ExponentialWaitStrategy",
    "FibonacciWaitStrategy",
    "FixedWaitStrategy",
    "IncrementingWaitStrategy",
    "RandomWaitStrategy",
    "WaitStrategy",
    "exception_wait",
    "exponential_wait",
    "fibonacci_wait",
    "fixed_wait",
    "incrementing_wait",
    "join",
    "no_wait",
    "random_wait",
]

from aretry.wait.base import WaitStrategy
from aretry.wait.composite import CompositeWaitStrategy
from aretry.wait.exception import ExceptionWaitStrategy
from aretry.wait.exponential import ExponentialWaitStrategy
from aretry.wait.factories import (
    exception_wait,
    exponential_wait,
    fibonacci_wait,
    fixed_wait,
    incrementing_wait,
    join,
    no_wait,
    random_wait,
)
from aretry.wait.fibonacci import FibonacciWaitStrategy
from aretry.wait.fixed import FixedWaitStrategy
from aretry.wait.incrementing import IncrementingWaitStrategy
from aretry.wait.random import RandomWaitStrategy
