r"""Wait strategy driven by the exception an attempt raised."""

from __future__ import annotations

__all__ = ["ExceptionWaitStrategy"]

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.utils.validation import check_not_none
from aretry.wait.base import WaitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt

E = TypeVar("E", bound=BaseException)


class ExceptionWaitStrategy(WaitStrategy, Generic[E]):
    """Compute the delay from the raised exception.

    If the failed attempt raised an instance of ``exception_class``, the
    delay is ``function(exception)``; otherwise it is 0. This is typically
    combined with another strategy through ``CompositeWaitStrategy``.

    Args:
        exception_class: The exception type handled by ``function``.
        function: Maps a matching exception to a delay in milliseconds.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import ExceptionWaitStrategy
        >>> class Throttled(Exception):
        ...     def __init__(self, backoff_ms):
        ...         super().__init__(backoff_ms)
        ...         self.backoff_ms = backoff_ms
        ...
        >>> strategy = ExceptionWaitStrategy(Throttled, lambda exc: exc.backoff_ms)
        >>> strategy.compute_sleep_time(Attempt.from_exception(Throttled(750), 1, 0))
        750
        >>> strategy.compute_sleep_time(Attempt.from_exception(OSError(), 1, 0))
        0

        ```
    """

    def __init__(self, exception_class: type[E], function: Callable[[E], int]) -> None:
        self.exception_class = check_not_none(exception_class, "exception_class")
        self.function = check_not_none(function, "function")

    def compute_sleep_time(self, failed_attempt: Attempt[Any]) -> int:
        if failed_attempt.has_exception():
            cause = failed_attempt.exception_cause
            if isinstance(cause, self.exception_class):
                return max(int(self.function(cause)), 0)
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.exception_class.__name__}, {self.function!r})"
