r"""Stop strategy bounding the number of attempts."""

from __future__ import annotations

__all__ = ["StopAfterAttemptStrategy"]

from typing import TYPE_CHECKING, Any

from aretry.stop.base import StopStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class StopAfterAttemptStrategy(StopStrategy):
    """Stop once ``max_attempt_number`` attempts have been made.

    Args:
        max_attempt_number: Total number of attempts, including the first
            one. Must be >= 1.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.stop import StopAfterAttemptStrategy
        >>> strategy = StopAfterAttemptStrategy(3)
        >>> strategy.should_stop(Attempt.from_result(None, 2, 0))
        False
        >>> strategy.should_stop(Attempt.from_result(None, 3, 0))
        True

        ```
    """

    def __init__(self, max_attempt_number: int) -> None:
        if max_attempt_number < 1:
            msg = f"max_attempt_number must be >= 1, got {max_attempt_number}"
            raise ValueError(msg)
        self.max_attempt_number = max_attempt_number

    def should_stop(self, failed_attempt: Attempt[Any]) -> bool:
        return failed_attempt.attempt_number >= self.max_attempt_number

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_attempt_number={self.max_attempt_number})"
