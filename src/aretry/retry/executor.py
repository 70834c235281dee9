r"""Synchronous retry loop."""

from __future__ import annotations

__all__ = ["Retryer"]

import time
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.attempt import Attempt
from aretry.exceptions import Interrupted
from aretry.listener import ListenerManager
from aretry.retry.config import RetryConfig
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
    from collections.abc import Callable

    from aretry.cancellation import CancellationToken

T = TypeVar("T")


class Retryer:
    """Calls a function repeatedly until its outcome is accepted.

    The retryer holds policies only. Each call keeps its attempt counter
    and start time in local variables, so one instance can serve many
    threads at once.

    The loop, for attempt numbers 1, 2, ...:

    1. Run the work through the attempt time limiter. A returned value or a
       raised ``Exception`` becomes an ``Attempt``.
    2. Notify the listeners of the attempt.
    3. If the rejection predicate accepts the attempt, return its result or
       raise ``ExecutionError`` from its exception.
    4. If the stop strategy says stop, raise ``RetryError``.
    5. Block for the delay computed by the wait strategy, then loop.

    If the cancellation token fires while the work runs or while the loop
    blocks, the run ends immediately with a ``RetryError`` whose last
    attempt is interrupted; listeners and strategies are not consulted and
    the token stays cancelled.

    Args:
        config: The retry policies. Defaults to ``RetryConfig()``, which
            calls the work once and returns its outcome.

    Example:
        ```pycon
        >>> from aretry.retry import RetryConfig, Retryer
        >>> from aretry.predicate import RejectionPredicate, ResultPredicate
        >>> from aretry.stop import stop_after_attempt
        >>> answers = iter([None, None, 42])
        >>> retryer = Retryer(
        ...     RetryConfig(
        ...         stop_strategy=stop_after_attempt(5),
        ...         rejection_predicate=RejectionPredicate([ResultPredicate(lambda r: r is None)]),
        ...     )
        ... )
        >>> retryer.call(lambda: next(answers))
        42

        ```
    """

    def __init__(self, config: RetryConfig | None = None) -> None:
        self.config = config if config is not None else RetryConfig()
        self.listeners = ListenerManager(self.config.listeners)

    def call(self, func: Callable[[], T], *, token: CancellationToken | None = None) -> T:
        """Call ``func`` until its outcome is accepted.

        Args:
            func: The zero-argument work.
            token: Optional cancellation token observed while the work runs
                (through the time limiter) and while the loop blocks.

        Returns:
            The result of the accepted attempt.

        Raises:
            ExecutionError: If an accepted attempt raised an exception.
            RetryError: If the stop strategy gave up or the run was
                cancelled.
        """
        check_not_none(func, "func")
        with operation_scope(self.config.name):
            return self._call(func, token)

    def run(self, action: Callable[[], Any], *, token: CancellationToken | None = None) -> None:
        """Call a side-effecting ``action`` until it is accepted.

        The action's return value is discarded, so only exception
        conditions are meaningful.
        """
        check_not_none(action, "action")

        def _run() -> None:
            action()

        self.call(_run, token=token)

    def _call(self, func: Callable[[], T], token: CancellationToken | None) -> T:
        config = self.config
        start_time = time.monotonic()
        attempt_number = 0
        while True:
            attempt_number += 1
            attempt: Attempt[T]
            try:
                result = config.attempt_time_limiter.call(func, token)
            except Exception as exc:
                attempt = Attempt.from_exception(exc, attempt_number, elapsed_ms(start_time))
            except Interrupted:
                raise interruption_error(attempt_number, start_time, token) from None
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
                config.block_strategy.block(sleep_time, token)
            except Interrupted:
                raise interruption_error(attempt_number, start_time, token) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
