r"""Abstract base classes for block strategies."""

from __future__ import annotations

__all__ = ["AsyncBlockStrategy", "BlockStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.cancellation import CancellationToken


class BlockStrategy(ABC):
    """Suspends the calling thread between two attempts.

    Implementations must observe cancellation: if ``token`` is cancelled
    before or during the suspension, ``block`` raises
    ``aretry.exceptions.Interrupted`` instead of returning.
    """

    @abstractmethod
    def block(self, sleep_time: int, token: CancellationToken | None = None) -> None:
        """Block for ``sleep_time`` milliseconds.

        Args:
            sleep_time: The delay computed by the wait strategy, in ms.
            token: The cancellation token of the current run, if any.

        Raises:
            Interrupted: If the token was cancelled.
        """


class AsyncBlockStrategy(ABC):
    """Suspends the current asyncio task between two attempts.

    Task cancellation must be allowed to surface as
    ``asyncio.CancelledError``.
    """

    @abstractmethod
    async def block(self, sleep_time: int) -> None:
        """Suspend the task for ``sleep_time`` milliseconds."""
