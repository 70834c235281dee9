r"""Random wait strategy."""

from __future__ import annotations

__all__ = ["RandomWaitStrategy"]

import random
from typing import TYPE_CHECKING, Any

from aretry.utils.validation import check_non_negative
from aretry.wait.base import WaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt

# Process-wide source shared by every RandomWaitStrategy instance.
_RANDOM = random.Random()  # noqa: S311


class RandomWaitStrategy(WaitStrategy):
    """Sleep a uniformly random amount of time in ``[minimum, maximum)``.

    The draw uses a process-wide ``random.Random`` instance. Jitter does not
    need a cryptographic source.

    Args:
        minimum: Lower bound (inclusive) in milliseconds. Must be >= 0.
        maximum: Upper bound (exclusive) in milliseconds. Must be > minimum.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import RandomWaitStrategy
        >>> strategy = RandomWaitStrategy(minimum=100, maximum=200)
        >>> 100 <= strategy.compute_sleep_time(Attempt.from_result(None, 1, 0)) < 200
        True

        ```
    """

    def __init__(self, minimum: int, maximum: int) -> None:
        check_non_negative(minimum, "minimum")
        if maximum <= minimum:
            msg = f"maximum must be > minimum, got maximum={maximum} and minimum={minimum}"
            raise ValueError(msg)
        self.minimum = minimum
        self.maximum = maximum

    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:  # noqa: ARG002
        return _RANDOM.randrange(self.minimum, self.maximum)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(minimum={self.minimum}, maximum={self.maximum})"
