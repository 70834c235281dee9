r"""Cooperative cancellation for the synchronous retry loop.

Python threads cannot be interrupted from the outside, so the synchronous
loop observes a ``CancellationToken`` instead. The token is checked before
each invocation, while waiting on a time-limited invocation and during the
sleep between attempts. Once cancelled, a token stays cancelled: callers
further up the stack can still see the signal after the loop gave up.
"""

from __future__ import annotations

__all__ = ["CancellationToken"]

import threading

from aretry.exceptions import Interrupted


class CancellationToken:
    """A thread-safe, one-shot cancellation flag.

    Example:
        ```pycon
        >>> from aretry.cancellation import CancellationToken
        >>> token = CancellationToken()
        >>> token.is_cancelled()
        False
        >>> token.wait(0.01)
        False
        >>> token.cancel()
        >>> token.is_cancelled()
        True
        >>> token.raise_if_cancelled()
        Traceback (most recent call last):
        ...
        aretry.exceptions.Interrupted: operation was cancelled

        ```
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Calling it again is a no-op."""
        self._event.set()

    def is_cancelled(self) -> bool:
        """Return True if cancellation was requested."""
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancellation is requested or ``timeout`` seconds pass.

        Args:
            timeout: Maximum time to wait in seconds, or None to wait forever.

        Returns:
            True if the token was cancelled, False on timeout.
        """
        return self._event.wait(timeout)

    def raise_if_cancelled(self) -> None:
        """Raise ``Interrupted`` if cancellation was requested."""
        if self._event.is_set():
            msg = "operation was cancelled"
            raise Interrupted(msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cancelled={self.is_cancelled()})"
