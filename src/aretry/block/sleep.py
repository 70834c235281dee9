r"""Block strategies that sleep."""

from __future__ import annotations

__all__ = ["AsyncioSleepStrategy", "ThreadSleepStrategy"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from aretry.block.base import AsyncBlockStrategy, BlockStrategy
from aretry.exceptions import Interrupted

if TYPE_CHECKING:
    from aretry.cancellation import CancellationToken

logger: logging.Logger = logging.getLogger(__name__)


class ThreadSleepStrategy(BlockStrategy):
    """Sleep on the calling thread. This is the default block strategy.

    Without a token this is ``time.sleep``. With a token the thread waits on
    the token instead, so a cancellation wakes it up immediately.

    Example:
        ```pycon
        >>> from aretry.block import ThreadSleepStrategy
        >>> from aretry.cancellation import CancellationToken
        >>> strategy = ThreadSleepStrategy()
        >>> strategy.block(1)
        >>> token = CancellationToken()
        >>> token.cancel()
        >>> strategy.block(60_000, token)
        Traceback (most recent call last):
        ...
        aretry.exceptions.Interrupted: sleep interrupted after 0 ms of 60000 ms

        ```
    """

    def block(self, sleep_time: int, token: CancellationToken | None = None) -> None:
        if token is None:
            time.sleep(sleep_time / 1000)
            return
        start = time.monotonic()
        if token.wait(sleep_time / 1000):
            elapsed = round((time.monotonic() - start) * 1000)
            logger.debug(f"Sleep of {sleep_time} ms interrupted after {elapsed} ms")
            msg = f"sleep interrupted after {elapsed} ms of {sleep_time} ms"
            raise Interrupted(msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AsyncioSleepStrategy(AsyncBlockStrategy):
    """Suspend the current task with ``asyncio.sleep``.

    Other tasks keep running during the wait. Cancelling the task raises
    ``asyncio.CancelledError`` out of ``block``.
    """

    async def block(self, sleep_time: int) -> None:
        await asyncio.sleep(sleep_time / 1000)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
