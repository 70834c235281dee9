r"""Asynchronous retry loop.

``AsyncRetryer`` runs the same loop as ``Retryer`` in an asyncio task.
Cancellation is the task's own: an ``asyncio.CancelledError`` delivered
while the work is awaited or while the loop sleeps ends the run with a
``RetryError`` instead. The cancellation request is never withdrawn, so
``asyncio.current_task().cancelling()`` stays positive after the run, but
the caller sees ``RetryError`` rather than ``CancelledError``. An enclosing
``asyncio.timeout`` that fires during the run therefore lets the
``RetryError`` through instead of converting it to ``TimeoutError``, and
an enclosing ``asyncio.TaskGroup`` reports it as a failure of the task.
Callers that need the native cancellation semantics should check
``cancelling()`` and re-raise ``CancelledError`` themselves.
"""

from __future__ import annotations

__all__ = ["AsyncRetryer"]

import asyncio
import time
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.attempt import Attempt
from aretry.listener import ListenerManager
from aretry.retry.config import AsyncRetryConfig
from aretry.retry.executor_core import (
    accept,
    elapsed_ms,
    interruption_error,
    log_attempt,
    log_wait,
    raise_retry_error,
)
from aretry.utils.structured_logging import operation_scope
from aretry.utils.validation import check_not_none

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


class AsyncRetryer:
    """Awaits a coroutine function repeatedly until its outcome is accepted.

    Args:
        config: The retry policies. Defaults to ``AsyncRetryConfig()``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.retry import AsyncRetryConfig, AsyncRetryer
        >>> from aretry.predicate import ExceptionClassPredicate, RejectionPredicate
        >>> from aretry.stop import stop_after_attempt
        >>> calls = []
        >>> async def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("reset")
        ...     return "ok"
        ...
        >>> retryer = AsyncRetryer(
        ...     AsyncRetryConfig(
        ...         stop_strategy=stop_after_attempt(5),
        ...         rejection_predicate=RejectionPredicate([ExceptionClassPredicate(OSError)]),
        ...     )
        ... )
        >>> asyncio.run(retryer.call(flaky))
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(self, config: AsyncRetryConfig | None = None) -> None:
        self.config = config if config is not None else AsyncRetryConfig()
        self.listeners = ListenerManager(self.config.listeners)

    async def call(self, func: Callable[[], Awaitable[T]]) -> T:
        """Await ``func()`` until its outcome is accepted.

        Args:
            func: The zero-argument coroutine function.

        Returns:
            The result of the accepted attempt.

        Raises:
            ExecutionError: If an accepted attempt raised an exception.
            RetryError: If the stop strategy gave up or the task was
                cancelled.
        """
        check_not_none(func, "func")
        with operation_scope(self.config.name):
            return await self._call(func)

    async def run(self, action: Callable[[], Awaitable[Any]]) -> None:
        """Await a side-effecting ``action`` until it is accepted."""
        check_not_none(action, "action")

        async def _run() -> None:
            await action()

        await self.call(_run)

    async def _call(self, func: Callable[[], Awaitable[T]]) -> T:
        config = self.config
        start_time = time.monotonic()
        attempt_number = 0
        while True:
            attempt_number += 1
            attempt: Attempt[T]
            try:
                result = await config.attempt_time_limiter.call(func)
            except Exception as exc:
                attempt = Attempt.from_exception(exc, attempt_number, elapsed_ms(start_time))
            except asyncio.CancelledError:
                raise interruption_error(attempt_number, start_time) from None
            else:
                attempt = Attempt.from_result(result, attempt_number, elapsed_ms(start_time))

            log_attempt(attempt)
            self.listeners.notify(attempt)
            if not config.rejection_predicate.test(attempt):
                return accept(attempt)
            if config.stop_strategy.should_stop(attempt):
                raise_retry_error(attempt)

            sleep_time = config.wait_strategy.compute_sleep_time(attempt)
            log_wait(attempt, sleep_time)
            try:
                await config.block_strategy.block(sleep_time)
            except asyncio.CancelledError:
                raise interruption_error(attempt_number, start_time) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
