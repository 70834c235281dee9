r"""Retry listeners observing every classified attempt.

A listener is any object with an ``on_retry(attempt)`` method, or a plain
callable taking the attempt. Listeners are notified synchronously, in
registration order, after each attempt that returned or raised and before
the loop decides whether to accept it. An exception raised by a listener
propagates out of the retry loop immediately.
"""

from __future__ import annotations

__all__ = ["ListenerManager", "RetryListener"]

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from aretry.utils.validation import check_not_none

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.attempt import Attempt


@runtime_checkable
class RetryListener(Protocol):
    """Protocol of a retry listener."""

    def on_retry(self, attempt: Attempt[Any]) -> None:
        """Called with every result or exception bearing attempt."""


class ListenerManager:
    """Dispatches attempts to the registered listeners.

    Args:
        listeners: The listeners, notified in the given order.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.listener import ListenerManager
        >>> seen = []
        >>> manager = ListenerManager([lambda attempt: seen.append(attempt.attempt_number)])
        >>> manager.notify(Attempt.from_result(None, 1, 0))
        >>> seen
        [1]

        ```
    """

    def __init__(self, listeners: Iterable[RetryListener | Callable[[Attempt[Any]], Any]] = ()) -> None:
        self._listeners = tuple(check_not_none(listener, "listener") for listener in listeners)

    @property
    def listeners(self) -> tuple[RetryListener | Callable[[Attempt[Any]], Any], ...]:
        return self._listeners

    def notify(self, attempt: Attempt[Any]) -> None:
        """Notify every listener of ``attempt``."""
        for listener in self._listeners:
            if isinstance(listener, RetryListener):
                listener.on_retry(attempt)
            else:
                listener(attempt)

    def __len__(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._listeners)!r})"
