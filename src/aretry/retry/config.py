r"""Configuration dataclasses for the retry loops.

A configuration holds one policy object per slot. Slots left as ``None``
are filled with the defaults when the configuration is created:

- attempt time limiter: no time limit
- stop strategy: never stop
- wait strategy: no wait
- block strategy: sleep on the calling thread (or task)
- rejection predicate: accept every attempt
- listeners: none
"""

from __future__ import annotations

__all__ = ["AsyncRetryConfig", "RetryConfig"]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from aretry.block import (
    AsyncBlockStrategy,
    BlockStrategy,
    asyncio_sleep_strategy,
    thread_sleep_strategy,
)
from aretry.limit import (
    AsyncAttemptTimeLimiter,
    AttemptTimeLimiter,
    async_no_time_limit,
    no_time_limit,
)
from aretry.predicate import RejectionPredicate
from aretry.stop import StopStrategy, never_stop
from aretry.wait import WaitStrategy, no_wait

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt
    from aretry.listener import RetryListener


def _check_slot(value: Any, expected: type, name: str) -> None:
    if not isinstance(value, expected):
        msg = f"{name} must be an instance of {expected.__name__}, got {type(value).__name__}"
        raise TypeError(msg)


@dataclass(frozen=True)
class RetryConfig:
    """Configuration of a synchronous ``Retryer``.

    Args:
        attempt_time_limiter: Runs each attempt, optionally under a budget.
        stop_strategy: Decides when to give up.
        wait_strategy: Computes the delay before the next attempt.
        block_strategy: Performs the delay.
        rejection_predicate: Decides whether an attempt triggers a retry.
        listeners: Notified of every result or exception bearing attempt.
        name: Optional operation name attached to the retry log records.

    Raises:
        TypeError: If a slot holds an object of the wrong kind.

    Example:
        ```pycon
        >>> from aretry.retry import RetryConfig
        >>> from aretry.stop import stop_after_attempt
        >>> config = RetryConfig(stop_strategy=stop_after_attempt(3))
        >>> config.stop_strategy
        StopAfterAttemptStrategy(max_attempt_number=3)
        >>> config.wait_strategy
        FixedWaitStrategy(sleep_time=0)
        >>> named = config.merge(name="sync-inventory")
        >>> named.name, config.name
        ('sync-inventory', None)

        ```
    """

    attempt_time_limiter: AttemptTimeLimiter | None = None
    stop_strategy: StopStrategy | None = None
    wait_strategy: WaitStrategy | None = None
    block_strategy: BlockStrategy | None = None
    rejection_predicate: RejectionPredicate | None = None
    listeners: tuple[RetryListener | Callable[[Attempt[Any]], Any], ...] = field(
        default_factory=tuple
    )
    name: str | None = None

    def __post_init__(self) -> None:
        _fill_common_defaults(self)
        if self.attempt_time_limiter is None:
            object.__setattr__(self, "attempt_time_limiter", no_time_limit())
        if self.block_strategy is None:
            object.__setattr__(self, "block_strategy", thread_sleep_strategy())
        _check_slot(self.attempt_time_limiter, AttemptTimeLimiter, "attempt_time_limiter")
        _check_slot(self.block_strategy, BlockStrategy, "block_strategy")

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with the given slots replaced.

        Only non-None override values are applied.

        Args:
            **overrides: Slots to replace.

        Returns:
            A new config. The current one is unchanged.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


@dataclass(frozen=True)
class AsyncRetryConfig:
    """Configuration of an ``AsyncRetryer``.

    Same slots as ``RetryConfig``, except that the attempt time limiter and
    the block strategy are their asyncio variants.
    """

    attempt_time_limiter: AsyncAttemptTimeLimiter | None = None
    stop_strategy: StopStrategy | None = None
    wait_strategy: WaitStrategy | None = None
    block_strategy: AsyncBlockStrategy | None = None
    rejection_predicate: RejectionPredicate | None = None
    listeners: tuple[RetryListener | Callable[[Attempt[Any]], Any], ...] = field(
        default_factory=tuple
    )
    name: str | None = None

    def __post_init__(self) -> None:
        _fill_common_defaults(self)
        if self.attempt_time_limiter is None:
            object.__setattr__(self, "attempt_time_limiter", async_no_time_limit())
        if self.block_strategy is None:
            object.__setattr__(self, "block_strategy", asyncio_sleep_strategy())
        _check_slot(self.attempt_time_limiter, AsyncAttemptTimeLimiter, "attempt_time_limiter")
        _check_slot(self.block_strategy, AsyncBlockStrategy, "block_strategy")

    def merge(self, **overrides: Any) -> AsyncRetryConfig:
        """Create a new config with the given slots replaced."""
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


def _fill_common_defaults(config: RetryConfig | AsyncRetryConfig) -> None:
    if config.stop_strategy is None:
        object.__setattr__(config, "stop_strategy", never_stop())
    if config.wait_strategy is None:
        object.__setattr__(config, "wait_strategy", no_wait())
    if config.rejection_predicate is None:
        object.__setattr__(config, "rejection_predicate", RejectionPredicate())
    object.__setattr__(config, "listeners", tuple(config.listeners))
    _check_slot(config.stop_strategy, StopStrategy, "stop_strategy")
    _check_slot(config.wait_strategy, WaitStrategy, "wait_strategy")
    _check_slot(config.rejection_predicate, RejectionPredicate, "rejection_predicate")
