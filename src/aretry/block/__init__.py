r"""Block strategies performing the suspension between attempts."""

from __future__ import annotations

__all__ = [
    "AsyncBlockStrategy",
    "AsyncioSleepStrategy",
    "BlockStrategy",
    "ThreadSleepStrategy",
    "asyncio_sleep_strategy",
    "thread_sleep_strategy",
]

from aretry.block.base import AsyncBlockStrategy, BlockStrategy
from aretry.block.sleep import AsyncioSleepStrategy, ThreadSleepStrategy

_THREAD_SLEEP = ThreadSleepStrategy()
_ASYNCIO_SLEEP = AsyncioSleepStrategy()


def thread_sleep_strategy() -> BlockStrategy:
    """Return the default synchronous block strategy."""
    return _THREAD_SLEEP


def asyncio_sleep_strategy() -> AsyncBlockStrategy:
    """Return the default asyncio block strategy."""
    return _ASYNCIO_SLEEP
