r"""Abstract base class for stop strategies."""

from __future__ import annotations

__all__ = ["StopStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class StopStrategy(ABC):
    """Abstract base class for stop strategies.

    A stop strategy is consulted after every rejected attempt and decides
    whether the loop gives up with a ``RetryError``.
    """

    @abstractmethod
    def should_stop(self, failed_attempt: Attempt[Any]) -> bool:
        """Return True to stop retrying after ``failed_attempt``."""
