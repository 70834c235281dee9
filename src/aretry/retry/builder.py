r"""Fluent builder for retryers."""

from __future__ import annotations

__all__ = ["RetryerBuilder"]

from typing import TYPE_CHECKING, Any

from aretry.block import AsyncBlockStrategy, BlockStrategy
from aretry.limit import AsyncAttemptTimeLimiter, AttemptTimeLimiter
from aretry.predicate import (
    ExceptionClassPredicate,
    ExceptionPredicate,
    RejectionPredicate,
    ResultPredicate,
)
from aretry.retry.config import AsyncRetryConfig, RetryConfig
from aretry.retry.executor import Retryer
from aretry.retry.executor_async import AsyncRetryer
from aretry.utils.validation import check_not_none

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt
    from aretry.listener import RetryListener
    from aretry.stop import StopStrategy
    from aretry.wait import WaitStrategy


class RetryerBuilder:
    """Assemble a ``Retryer`` or an ``AsyncRetryer`` step by step.

    Every ``with_*`` and ``retry_if_*`` method returns the builder itself.
    The wait, stop and block strategies and the attempt time limiter can
    be set once; setting one of them a second time raises ``RuntimeError``. Retry conditions and
    listeners accumulate.

    Args:
        name: Optional operation name attached to the retry log records.

    Example:
        ```pycon
        >>> from aretry.retry import RetryerBuilder
        >>> from aretry.stop import stop_after_attempt
        >>> from aretry.wait import fixed_wait
        >>> retryer = (
        ...     RetryerBuilder()
        ...     .retry_if_exception_of_type(OSError)
        ...     .retry_if_result(lambda result: result is None)
        ...     .with_wait_strategy(fixed_wait(10))
        ...     .with_stop_strategy(stop_after_attempt(3))
        ...     .build()
        ... )
        >>> retryer.call(lambda: "done")
        'done'
        >>> RetryerBuilder().with_stop_strategy(stop_after_attempt(3)).with_stop_strategy(
        ...     stop_after_attempt(4)
        ... )
        Traceback (most recent call last):
        ...
        RuntimeError: a stop strategy has already been set: StopAfterAttemptStrategy(max_attempt_number=3)

        ```
    """

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self._attempt_time_limiter: AttemptTimeLimiter | AsyncAttemptTimeLimiter | None = None
        self._stop_strategy: StopStrategy | None = None
        self._wait_strategy: WaitStrategy | None = None
        self._block_strategy: BlockStrategy | AsyncBlockStrategy | None = None
        self._rejection_predicate = RejectionPredicate()
        self._listeners: list[RetryListener | Callable[[Attempt[Any]], Any]] = []

    def with_retry_listener(
        self, listener: RetryListener | Callable[[Attempt[Any]], Any]
    ) -> RetryerBuilder:
        """Add a listener notified of every result or exception bearing attempt."""
        self._listeners.append(check_not_none(listener, "listener"))
        return self

    def with_wait_strategy(self, wait_strategy: WaitStrategy) -> RetryerBuilder:
        """Set the wait strategy.

        Raises:
            RuntimeError: If a wait strategy has already been set.
            TypeError: If ``wait_strategy`` is None.
        """
        check_not_none(wait_strategy, "wait_strategy")
        if self._wait_strategy is not None:
            msg = f"a wait strategy has already been set: {self._wait_strategy!r}"
            raise RuntimeError(msg)
        self._wait_strategy = wait_strategy
        return self

    def with_stop_strategy(self, stop_strategy: StopStrategy) -> RetryerBuilder:
        """Set the stop strategy.

        Raises:
            RuntimeError: If a stop strategy has already been set.
            TypeError: If ``stop_strategy`` is None.
        """
        check_not_none(stop_strategy, "stop_strategy")
        if self._stop_strategy is not None:
            msg = f"a stop strategy has already been set: {self._stop_strategy!r}"
            raise RuntimeError(msg)
        self._stop_strategy = stop_strategy
        return self

    def with_block_strategy(
        self, block_strategy: BlockStrategy | AsyncBlockStrategy
    ) -> RetryerBuilder:
        """Set the block strategy.

        Raises:
            RuntimeError: If a block strategy has already been set.
            TypeError: If ``block_strategy`` is None.
        """
        check_not_none(block_strategy, "block_strategy")
        if self._block_strategy is not None:
            msg = f"a block strategy has already been set: {self._block_strategy!r}"
            raise RuntimeError(msg)
        self._block_strategy = block_strategy
        return self

    def with_attempt_time_limiter(
        self, attempt_time_limiter: AttemptTimeLimiter | AsyncAttemptTimeLimiter
    ) -> RetryerBuilder:
        """Set the attempt time limiter.

        Raises:
            RuntimeError: If an attempt time limiter has already been set.
            TypeError: If ``attempt_time_limiter`` is None.
        """
        check_not_none(attempt_time_limiter, "attempt_time_limiter")
        if self._attempt_time_limiter is not None:
            msg = (
                "an attempt time limiter has already been set: "
                f"{self._attempt_time_limiter!r}"
            )
            raise RuntimeError(msg)
        self._attempt_time_limiter = attempt_time_limiter
        return self

    def retry_if_exception(
        self, predicate: Callable[[Exception], bool] | None = None
    ) -> RetryerBuilder:
        """Retry if the work raises an exception.

        Args:
            predicate: Optional filter on the raised exception. Without it,
                every ``Exception`` triggers a retry.
        """
        if predicate is None:
            return self.retry_if_exception_of_type(Exception)
        self._rejection_predicate = self._rejection_predicate.or_(ExceptionPredicate(predicate))
        return self

    def retry_if_exception_of_type(
        self, exception_class: type[BaseException] | tuple[type[BaseException], ...]
    ) -> RetryerBuilder:
        """Retry if the work raises an instance of ``exception_class``."""
        self._rejection_predicate = self._rejection_predicate.or_(
            ExceptionClassPredicate(exception_class)
        )
        return self

    def retry_if_result(self, predicate: Callable[[Any], bool]) -> RetryerBuilder:
        """Retry if the work returns a value satisfying ``predicate``."""
        self._rejection_predicate = self._rejection_predicate.or_(ResultPredicate(predicate))
        return self

    def build(self) -> Retryer:
        """Build a synchronous retryer.

        Raises:
            TypeError: If an asyncio-only strategy was configured.
        """
        return Retryer(
            RetryConfig(
                attempt_time_limiter=self._attempt_time_limiter,
                stop_strategy=self._stop_strategy,
                wait_strategy=self._wait_strategy,
                block_strategy=self._block_strategy,
                rejection_predicate=self._rejection_predicate,
                listeners=tuple(self._listeners),
                name=self._name,
            )
        )

    def build_async(self) -> AsyncRetryer:
        """Build an asyncio retryer.

        Raises:
            TypeError: If a thread-based limiter or block strategy was
                configured.
        """
        return AsyncRetryer(
            AsyncRetryConfig(
                attempt_time_limiter=self._attempt_time_limiter,
                stop_strategy=self._stop_strategy,
                wait_strategy=self._wait_strategy,
                block_strategy=self._block_strategy,
                rejection_predicate=self._rejection_predicate,
                listeners=tuple(self._listeners),
                name=self._name,
            )
        )
