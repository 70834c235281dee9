r"""Time limiters that do not limit anything."""

from __future__ import annotations

__all__ = ["AsyncNoAttemptTimeLimit", "NoAttemptTimeLimit"]

from typing import TYPE_CHECKING, TypeVar

from aretry.limit.base import AsyncAttemptTimeLimiter, AttemptTimeLimiter

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.cancellation import CancellationToken

T = TypeVar("T")


class NoAttemptTimeLimit(AttemptTimeLimiter):
    """Call the work inline on the calling thread.

    Example:
        ```pycon
        >>> from aretry.limit import NoAttemptTimeLimit
        >>> NoAttemptTimeLimit().call(lambda: 42)
        42

        ```
    """

    def call(self, func: Callable[[], T], token: CancellationToken | None = None) -> T:
        if token is not None:
            token.raise_if_cancelled()
        return func()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AsyncNoAttemptTimeLimit(AsyncAttemptTimeLimiter):
    """Await the work directly in the current task."""

    async def call(self, func: Callable[[], Awaitable[T]]) -> T:
        return await func()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
