r"""Stop strategies deciding when the retry loop gives up."""

from __future__ import annotations

__all__ = [
    "NeverStopStrategy",
    "StopAfterAttemptStrategy",
    "StopAfterDelayStrategy",
    "StopStrategy",
    "never_stop",
    "stop_after_attempt",
    "stop_after_delay",
]

from aretry.stop.after_attempt import StopAfterAttemptStrategy
from aretry.stop.after_delay import StopAfterDelayStrategy
from aretry.stop.base import StopStrategy
from aretry.stop.never import NeverStopStrategy

_NEVER_STOP = NeverStopStrategy()


def never_stop() -> StopStrategy:
    """Return a strategy that never stops retrying. This is the default."""
    return _NEVER_STOP


def stop_after_attempt(attempt_number: int) -> StopStrategy:
    """Return a strategy that stops after ``attempt_number`` attempts."""
    return StopAfterAttemptStrategy(attempt_number)


def stop_after_delay(duration: int) -> StopStrategy:
    """Return a strategy that stops once ``duration`` ms have elapsed."""
    return StopAfterDelayStrategy(duration)
