r"""Shared core logic for the retry loops.

This module provides the helpers used by both the synchronous and the
asynchronous retry loop: elapsed-time measurement, transition logging and
creation of the terminal errors.
"""

from __future__ import annotations

__all__ = [
    "accept",
    "elapsed_ms",
    "interruption_error",
    "log_attempt",
    "log_wait",
    "raise_retry_error",
]

import logging
import time
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from aretry.attempt import Attempt
from aretry.exceptions import ExecutionError, RetryError
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from aretry.cancellation import CancellationToken

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def elapsed_ms(start_time: float) -> int:
    """Return the whole milliseconds elapsed since ``start_time``.

    Args:
        start_time: A ``time.monotonic()`` timestamp.
    """
    return max(0, int((time.monotonic() - start_time) * 1000))


def log_attempt(attempt: Attempt[Any]) -> None:
    """Log the outcome of an attempt at DEBUG level."""
    if attempt.has_exception():
        outcome = f"raised {type(attempt.exception_cause).__name__}: {attempt.exception_cause}"
    else:
        outcome = f"returned {attempt.result!r}"
    log_structured(
        logger,
        logging.DEBUG,
        f"Attempt {attempt.attempt_number} {outcome}",
        attempt_number=attempt.attempt_number,
        delay_since_first_attempt=attempt.delay_since_first_attempt,
    )


def log_wait(attempt: Attempt[Any], sleep_time: int) -> None:
    """Log the delay before the attempt following ``attempt``."""
    log_structured(
        logger,
        logging.DEBUG,
        f"Attempt {attempt.attempt_number} rejected, waiting {sleep_time} ms before retrying",
        attempt_number=attempt.attempt_number,
        delay_since_first_attempt=attempt.delay_since_first_attempt,
        sleep_time=sleep_time,
    )


def accept(attempt: Attempt[T]) -> T:
    """Finish the run with an accepted attempt.

    Args:
        attempt: The attempt that the rejection predicate accepted.

    Returns:
        The attempt's result.

    Raises:
        ExecutionError: If the attempt raised an exception. The exception
            is attached as ``__cause__``.
    """
    if attempt.has_exception():
        log_structured(
            logger,
            logging.DEBUG,
            f"Attempt {attempt.attempt_number} raised a non-retryable exception",
            attempt_number=attempt.attempt_number,
            delay_since_first_attempt=attempt.delay_since_first_attempt,
        )
        raise ExecutionError(attempt) from attempt.exception_cause
    return attempt.result


def raise_retry_error(attempt: Attempt[Any]) -> NoReturn:
    """Finish the run because the stop strategy gave up.

    Raises:
        RetryError: Always. Its ``__cause__`` is the attempt's exception if
            it has one, None otherwise.
    """
    log_structured(
        logger,
        logging.DEBUG,
        f"Stopping after {attempt.attempt_number} attempts "
        f"and {attempt.delay_since_first_attempt} ms",
        attempt_number=attempt.attempt_number,
        delay_since_first_attempt=attempt.delay_since_first_attempt,
    )
    error = RetryError(attempt.attempt_number, attempt)
    if attempt.has_exception():
        raise error from attempt.exception_cause
    raise error from None


def interruption_error(
    attempt_number: int, start_time: float, token: CancellationToken | None = None
) -> RetryError:
    """Create the error ending a run that was cancelled.

    The cancellation is re-asserted on ``token`` so that the caller still
    observes it after the loop returned.

    Args:
        attempt_number: The number of the attempt in progress.
        start_time: The ``time.monotonic()`` timestamp of the run start.
        token: The cancellation token of the run, if any.

    Returns:
        A ``RetryError`` whose last attempt is an interrupted attempt.
    """
    attempt: Attempt[Any] = Attempt.from_interruption(attempt_number, elapsed_ms(start_time))
    log_structured(
        logger,
        logging.DEBUG,
        f"Interrupted during attempt {attempt_number}",
        attempt_number=attempt_number,
        delay_since_first_attempt=attempt.delay_since_first_attempt,
    )
    if token is not None:
        token.cancel()
    return RetryError(attempt_number, attempt)
