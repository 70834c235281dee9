r"""Rejection predicates deciding whether an attempt triggers a retry.

A ``RejectionPredicate`` is an ordered, immutable collection of retry
conditions combined with logical OR. Each condition looks at one side of
an attempt only: exception conditions ignore result-bearing attempts and
result conditions ignore exception-bearing attempts.
"""

from __future__ import annotations

__all__ = [
    "ExceptionClassPredicate",
    "ExceptionPredicate",
    "RejectionPredicate",
    "ResultPredicate",
]

from typing import TYPE_CHECKING, Any

from aretry.utils.validation import check_not_none

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.attempt import Attempt

    RetryCondition = Callable[[Attempt[Any]], bool]


class ExceptionClassPredicate:
    """Retry if the attempt raised an instance of ``exception_class``.

    Args:
        exception_class: The exception type (or tuple of types) to retry
            on. Subclasses match too.
    """

    def __init__(self, exception_class: type[BaseException] | tuple[type[BaseException], ...]) -> None:
        self.exception_class = check_not_none(exception_class, "exception_class")

    def __call__(self, attempt: Attempt[Any]) -> bool:
        if not attempt.has_exception():
            return False
        return isinstance(attempt.exception_cause, self.exception_class)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.exception_class!r})"


class ExceptionPredicate:
    """Retry if the attempt raised an exception satisfying ``predicate``.

    Args:
        predicate: Called with the raised exception.
    """

    def __init__(self, predicate: Callable[[Exception], bool]) -> None:
        self.predicate = check_not_none(predicate, "exception_predicate")

    def __call__(self, attempt: Attempt[Any]) -> bool:
        if not attempt.has_exception():
            return False
        return bool(self.predicate(attempt.exception_cause))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.predicate!r})"


class ResultPredicate:
    """Retry if the attempt returned a result satisfying ``predicate``.

    Args:
        predicate: Called with the returned value (which may be None).
    """

    def __init__(self, predicate: Callable[[Any], bool]) -> None:
        self.predicate = check_not_none(predicate, "result_predicate")

    def __call__(self, attempt: Attempt[Any]) -> bool:
        if not attempt.has_result():
            return False
        return bool(self.predicate(attempt.result))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.predicate!r})"


class RejectionPredicate:
    """Disjunction of retry conditions.

    ``test`` returns True ("reject, retry") as soon as one condition holds.
    A predicate without conditions accepts every attempt, so the loop
    returns (or raises ``ExecutionError``) after the first attempt.

    Args:
        conditions: The retry conditions, evaluated in order.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.predicate import (
        ...     ExceptionClassPredicate,
        ...     RejectionPredicate,
        ...     ResultPredicate,
        ... )
        >>> predicate = RejectionPredicate().or_(ResultPredicate(lambda r: r is None))
        >>> predicate = predicate.or_(ExceptionClassPredicate(OSError))
        >>> predicate.test(Attempt.from_result(None, 1, 0))
        True
        >>> predicate.test(Attempt.from_exception(ConnectionError(), 1, 0))
        True
        >>> predicate.test(Attempt.from_exception(ValueError(), 1, 0))
        False
        >>> RejectionPredicate().test(Attempt.from_result(None, 1, 0))
        False

        ```
    """

    def __init__(self, conditions: Iterable[RetryCondition] = ()) -> None:
        self._conditions: tuple[RetryCondition, ...] = tuple(conditions)
        for condition in self._conditions:
            check_not_none(condition, "condition")

    @property
    def conditions(self) -> tuple[RetryCondition, ...]:
        return self._conditions

    def or_(self, condition: RetryCondition) -> RejectionPredicate:
        """Return a new predicate that also retries when ``condition`` holds."""
        check_not_none(condition, "condition")
        return RejectionPredicate((*self._conditions, condition))

    def test(self, attempt: Attempt[Any]) -> bool:
        """Return True if ``attempt`` should trigger a retry."""
        if attempt.is_interrupted():
            return False
        return any(condition(attempt) for condition in self._conditions)

    def __call__(self, attempt: Attempt[Any]) -> bool:
        return self.test(attempt)

    def __len__(self) -> int:
        return len(self._conditions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._conditions)!r})"
