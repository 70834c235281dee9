r"""Stop strategy that never stops."""

from __future__ import annotations

__all__ = ["NeverStopStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.stop.base import StopStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class NeverStopStrategy(StopStrategy):
    """Retry forever. This is the default stop strategy.

    Pair it with a non-zero wait strategy to avoid hammering a failing
    dependency.
    """

    def should_stop(self, failed_attempt: Attempt[Any]) -> bool:  # noqa: ARG002
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
