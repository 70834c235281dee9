r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["WaitStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class WaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long to sleep before the next attempt,
    given the attempt that just failed. Implementations must not keep
    per-run state: one instance is shared by every run of a retryer.
    """

    @abstractmethod
    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:
        """Compute the delay before the next attempt.

        Args:
            failed_attempt: The attempt that was rejected.

        Returns:
            The delay in milliseconds, never negative.
        """
