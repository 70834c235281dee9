r"""Parameter validation utilities for strategy construction.

This module provides the checks shared by the stop, wait, block and
time-limit strategies so that invalid configuration is rejected when a
strategy is built, never when a retry loop is already running.
"""

from __future__ import annotations

__all__ = ["check_non_negative", "check_not_none", "check_positive"]

from typing import Any, TypeVar

T = TypeVar("T")


def check_not_none(value: T | None, name: str) -> T:
    """Check that a required argument was provided.

    Args:
        value: The value to check.
        name: The argument name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        TypeError: If the value is ``None``.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_not_none
        >>> check_not_none(42, "sleep_time")
        42
        >>> check_not_none(None, "listener")
        Traceback (most recent call last):
        ...
        TypeError: listener may not be None

        ```
    """
    if value is None:
        msg = f"{name} may not be None"
        raise TypeError(msg)
    return value


def check_non_negative(value: Any, name: str) -> None:
    """Check that a numeric argument is ``>= 0``.

    Args:
        value: The value to check.
        name: The argument name used in the error message.

    Raises:
        ValueError: If the value is negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_non_negative
        >>> check_non_negative(0, "sleep_time")
        >>> check_non_negative(-1, "sleep_time")
        Traceback (most recent call last):
        ...
        ValueError: sleep_time must be >= 0, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def check_positive(value: Any, name: str) -> None:
    """Check that a numeric argument is ``> 0``.

    Args:
        value: The value to check.
        name: The argument name used in the error message.

    Raises:
        ValueError: If the value is zero or negative.
    """
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)
