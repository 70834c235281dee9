r"""Exceptions raised by the retry loops and strategies.

The taxonomy is:

- ``ExecutionError``: an attempt raised an exception that no retry
  condition matched. The original exception is the ``__cause__``.
- ``RetryError``: the stop strategy ended the loop, or the loop was
  interrupted. The last attempt's exception, if any, is the ``__cause__``.
- ``AttemptTimeoutError``: a fixed attempt time limit was exceeded. The
  retry loop treats it like any other exception raised by the work.
- ``Interrupted``: the cancellation token fired at a suspension point. It
  derives from ``BaseException`` so that ``except Exception`` blocks and
  ``retry_if_exception()`` never classify it as a fault.
"""

from __future__ import annotations

__all__ = ["AttemptTimeoutError", "ExecutionError", "Interrupted", "RetryError"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class RetryError(Exception):
    """Raised when the retry loop gives up.

    Args:
        number_of_failed_attempts: How many attempts were made.
        last_failed_attempt: The attempt that ended the loop. It is an
            interrupted attempt when the loop was cancelled.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.exceptions import RetryError
        >>> error = RetryError(3, Attempt.from_result(None, 3, 20))
        >>> error.number_of_failed_attempts
        3
        >>> str(error)
        'Retrying failed to complete successfully after 3 attempts.'

        ```
    """

    def __init__(self, number_of_failed_attempts: int, last_failed_attempt: Attempt[Any]) -> None:
        super().__init__(
            f"Retrying failed to complete successfully after "
            f"{number_of_failed_attempts} attempts."
        )
        self.number_of_failed_attempts = number_of_failed_attempts
        self.last_failed_attempt = last_failed_attempt


class ExecutionError(Exception):
    """Raised when an attempt's exception is accepted as final.

    The exception raised by the work is attached unchanged as
    ``__cause__`` and is also available as ``cause``.

    Args:
        attempt: The exception-bearing attempt that was accepted.
    """

    def __init__(self, attempt: Attempt[Any]) -> None:
        cause = attempt.exception_cause
        super().__init__(
            f"Attempt {attempt.attempt_number} raised a non-retryable "
            f"{type(cause).__name__}: {cause}"
        )
        self.attempt = attempt

    @property
    def cause(self) -> Exception:
        """The exception raised by the work."""
        return self.attempt.exception_cause


class AttemptTimeoutError(TimeoutError):
    """Raised when an attempt does not finish within its time limit.

    Args:
        duration: The time limit, in milliseconds.
    """

    def __init__(self, duration: int) -> None:
        super().__init__(f"Attempt did not complete within {duration} ms")
        self.duration = duration


class Interrupted(BaseException):  # noqa: N818
    """Raised at a suspension point when the cancellation token fired."""
