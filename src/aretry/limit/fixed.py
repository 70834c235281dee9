r"""Time limiters enforcing a fixed budget per attempt.

The synchronous limiter runs the work on a worker of a caller-supplied
``concurrent.futures.Executor``. Python cannot kill a running thread, so
on overrun the future is cancelled on a best-effort basis and the worker
may keep running; the retry loop simply stops waiting for it. The
executor belongs to the caller and is never shut down here.
"""

from __future__ import annotations

__all__ = ["AsyncFixedAttemptTimeLimit", "FixedAttemptTimeLimit"]

import asyncio
import concurrent.futures
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.exceptions import AttemptTimeoutError, Interrupted
from aretry.limit.base import AsyncAttemptTimeLimiter, AttemptTimeLimiter
from aretry.utils.validation import check_not_none, check_positive

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.cancellation import CancellationToken

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)

# Seconds between two checks of the cancellation token while waiting.
_POLL_INTERVAL = 0.05


class FixedAttemptTimeLimit(AttemptTimeLimiter):
    """Fail an attempt that runs longer than ``duration`` milliseconds.

    Args:
        duration: The time budget of one attempt, in milliseconds.
        executor: The executor running the work. It is shared by every
            run of the retryer and is never shut down by this class.

    Raises:
        ValueError: If ``duration`` is not positive.
        TypeError: If ``executor`` is None.

    Example:
        ```pycon
        >>> import time
        >>> from concurrent.futures import ThreadPoolExecutor
        >>> from aretry.limit import FixedAttemptTimeLimit
        >>> with ThreadPoolExecutor(max_workers=1) as executor:
        ...     limiter = FixedAttemptTimeLimit(50, executor)
        ...     limiter.call(lambda: time.sleep(1))
        ...
        Traceback (most recent call last):
        ...
        aretry.exceptions.AttemptTimeoutError: Attempt did not complete within 50 ms

        ```
    """

    def __init__(self, duration: int, executor: concurrent.futures.Executor) -> None:
        check_positive(duration, "duration")
        self._duration = duration
        self._executor = check_not_none(executor, "executor")

    @property
    def duration(self) -> int:
        return self._duration

    def call(self, func: Callable[[], T], token: CancellationToken | None = None) -> T:
        if token is not None:
            token.raise_if_cancelled()
        future = self._executor.submit(func)
        timeout = self._duration / 1000
        if token is None:
            done, _ = concurrent.futures.wait([future], timeout=timeout)
            if not done:
                self._abandon(future)
                raise AttemptTimeoutError(self._duration) from None
            return future.result()

        deadline = time.monotonic() + timeout
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                self._abandon(future)
                raise AttemptTimeoutError(self._duration) from None
            done, _ = concurrent.futures.wait([future], timeout=min(remaining, _POLL_INTERVAL))
            if done:
                return future.result()
            if token.is_cancelled():
                future.cancel()
                msg = "attempt interrupted while waiting for its result"
                raise Interrupted(msg)

    def _abandon(self, future: concurrent.futures.Future[T]) -> None:
        if not future.cancel():
            logger.debug(
                f"Attempt exceeded {self._duration} ms and could not be cancelled, "
                "its worker keeps running"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(duration={self._duration}, executor={self._executor!r})"


class AsyncFixedAttemptTimeLimit(AsyncAttemptTimeLimiter):
    """Cancel an awaited attempt that runs longer than ``duration`` milliseconds.

    Unlike the threaded variant, the overrunning coroutine is actually
    cancelled by ``asyncio.timeout``. A ``TimeoutError`` raised by the work
    itself before the budget runs out propagates unchanged.

    Args:
        duration: The time budget of one attempt, in milliseconds.

    Raises:
        ValueError: If ``duration`` is not positive.
    """

    def __init__(self, duration: int) -> None:
        check_positive(duration, "duration")
        self._duration = duration

    @property
    def duration(self) -> int:
        return self._duration

    async def call(self, func: Callable[[], Awaitable[T]]) -> T:
        try:
            async with asyncio.timeout(self._duration / 1000) as budget:
                return await func()
        except TimeoutError:
            if budget.expired():
                raise AttemptTimeoutError(self._duration) from None
            raise

    def __repr__(self) -> str:
        return f"{type(self).__name__}(duration={self._duration})"
