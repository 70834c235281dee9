r"""The outcome of a single invocation of the retried work.

An ``Attempt`` is created by the retry loop right after the work returns,
raises or is interrupted, and is handed unchanged to the rejection
predicate, the stop and wait strategies and every listener.
"""

from __future__ import annotations

__all__ = ["Attempt"]

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from aretry.utils.validation import check_non_negative

T = TypeVar("T")

_RESULT = "result"
_EXCEPTION = "exception"
_INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class Attempt(Generic[T]):
    """Immutable record of one invocation.

    An attempt carries exactly one of a result or an exception, except for
    an interrupted attempt which carries neither: the invocation (or the
    wait that followed it) was cancelled before an outcome could be
    classified.

    Use the ``from_result``, ``from_exception`` and ``from_interruption``
    factories rather than the constructor.

    Attributes:
        attempt_number: The 1-based ordinal of this attempt within a run.
        delay_since_first_attempt: Milliseconds elapsed since the run
            started, measured when this attempt completed.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> attempt = Attempt.from_result("ok", attempt_number=1, delay_since_first_attempt=0)
        >>> attempt.has_result(), attempt.has_exception()
        (True, False)
        >>> attempt.result
        'ok'
        >>> failed = Attempt.from_exception(OSError("boom"), 2, 150)
        >>> failed.exception_cause
        OSError('boom')
        >>> failed.result
        Traceback (most recent call last):
        ...
        RuntimeError: The attempt resulted in an exception, not in a result

        ```
    """

    attempt_number: int
    delay_since_first_attempt: int
    _kind: str = field(repr=False)
    _result: Any = field(default=None, repr=False)
    _exception: Exception | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.attempt_number < 1:
            msg = f"attempt_number must be >= 1, got {self.attempt_number}"
            raise ValueError(msg)
        check_non_negative(self.delay_since_first_attempt, "delay_since_first_attempt")

    @classmethod
    def from_result(
        cls, result: T, attempt_number: int, delay_since_first_attempt: int
    ) -> Attempt[T]:
        """Create an attempt that returned ``result`` (which may be None)."""
        return cls(attempt_number, delay_since_first_attempt, _RESULT, _result=result)

    @classmethod
    def from_exception(
        cls, exception: Exception, attempt_number: int, delay_since_first_attempt: int
    ) -> Attempt[T]:
        """Create an attempt that raised ``exception``."""
        return cls(attempt_number, delay_since_first_attempt, _EXCEPTION, _exception=exception)

    @classmethod
    def from_interruption(cls, attempt_number: int, delay_since_first_attempt: int) -> Attempt[T]:
        """Create an attempt that was cancelled before it had an outcome."""
        return cls(attempt_number, delay_since_first_attempt, _INTERRUPTED)

    def has_result(self) -> bool:
        """Return True if the invocation returned a result."""
        return self._kind == _RESULT

    def has_exception(self) -> bool:
        """Return True if the invocation raised an exception."""
        return self._kind == _EXCEPTION

    def is_interrupted(self) -> bool:
        """Return True if the attempt was cancelled without an outcome."""
        return self._kind == _INTERRUPTED

    @property
    def result(self) -> T:
        """The returned value.

        Raises:
            RuntimeError: If the attempt did not return a result.
        """
        if self._kind == _EXCEPTION:
            msg = "The attempt resulted in an exception, not in a result"
            raise RuntimeError(msg)
        if self._kind == _INTERRUPTED:
            msg = "The attempt was interrupted and has no result"
            raise RuntimeError(msg)
        return self._result

    @property
    def exception_cause(self) -> Exception:
        """The raised exception.

        Raises:
            RuntimeError: If the attempt did not raise an exception.
        """
        if self._exception is None:
            msg = "The attempt resulted in a result, not in an exception"
            if self._kind == _INTERRUPTED:
                msg = "The attempt was interrupted and has no exception"
            raise RuntimeError(msg)
        return self._exception

    def __repr__(self) -> str:
        if self._kind == _RESULT:
            outcome = f"result={self._result!r}"
        elif self._kind == _EXCEPTION:
            outcome = f"exception={self._exception!r}"
        else:
            outcome = "interrupted"
        return (
            f"Attempt(attempt_number={self.attempt_number}, "
            f"delay_since_first_attempt={self.delay_since_first_attempt}, {outcome})"
        )
