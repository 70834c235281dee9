r"""Abstract base classes for attempt time limiters."""

from __future__ import annotations

__all__ = ["AsyncAttemptTimeLimiter", "AttemptTimeLimiter"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.cancellation import CancellationToken

T = TypeVar("T")


class AttemptTimeLimiter(ABC):
    """Runs one invocation of the work, optionally under a time budget."""

    @abstractmethod
    def call(self, func: Callable[[], T], token: CancellationToken | None = None) -> T:
        """Invoke ``func`` and return its result.

        Args:
            func: The zero-argument work.
            token: The cancellation token of the current run, if any.

        Returns:
            The value returned by ``func``.

        Raises:
            AttemptTimeoutError: If the time budget was exceeded.
            Interrupted: If the token was cancelled.
            Exception: Anything raised by ``func``, unchanged.
        """


class AsyncAttemptTimeLimiter(ABC):
    """Awaits one invocation of the async work, optionally under a time budget."""

    @abstractmethod
    async def call(self, func: Callable[[], Awaitable[T]]) -> T:
        """Await ``func()`` and return its result."""
