r"""Attempt time limiters bounding the duration of a single attempt."""

from __future__ import annotations

__all__ = [
    "AsyncAttemptTimeLimiter",
    "AsyncFixedAttemptTimeLimit",
    "AsyncNoAttemptTimeLimit",
    "AttemptTimeLimiter",
    "FixedAttemptTimeLimit",
    "NoAttemptTimeLimit",
    "async_fixed_time_limit",
    "async_no_time_limit",
    "fixed_time_limit",
    "no_time_limit",
]

from typing import TYPE_CHECKING

from aretry.limit.base import AsyncAttemptTimeLimiter, AttemptTimeLimiter
from aretry.limit.fixed import AsyncFixedAttemptTimeLimit, FixedAttemptTimeLimit
from aretry.limit.no_limit import AsyncNoAttemptTimeLimit, NoAttemptTimeLimit

if TYPE_CHECKING:
    from concurrent.futures import Executor

_NO_TIME_LIMIT = NoAttemptTimeLimit()
_ASYNC_NO_TIME_LIMIT = AsyncNoAttemptTimeLimit()


def no_time_limit() -> AttemptTimeLimiter:
    """Return a limiter that calls the work inline. This is the default."""
    return _NO_TIME_LIMIT


def fixed_time_limit(duration: int, executor: Executor) -> AttemptTimeLimiter:
    """Return a limiter failing attempts slower than ``duration`` ms."""
    return FixedAttemptTimeLimit(duration, executor)


def async_no_time_limit() -> AsyncAttemptTimeLimiter:
    """Return an async limiter that awaits the work directly."""
    return _ASYNC_NO_TIME_LIMIT


def async_fixed_time_limit(duration: int) -> AsyncAttemptTimeLimiter:
    """Return an async limiter cancelling attempts slower than ``duration`` ms."""
    return AsyncFixedAttemptTimeLimit(duration)
