r"""Unit tests for retry listeners."""

from __future__ import annotations

from typing import Any

import pytest

from aretry.attempt import Attempt
from aretry.listener import ListenerManager, RetryListener


class RecordingListener:
    def __init__(self, name: str, log: list[tuple[str, int]]) -> None:
        self.name = name
        self.log = log

    def on_retry(self, attempt: Attempt[Any]) -> None:
        self.log.append((self.name, attempt.attempt_number))


def test_recording_listener_is_retry_listener() -> None:
    assert isinstance(RecordingListener("a", []), RetryListener)


def test_listener_manager_notifies_in_order() -> None:
    """Test that listeners are notified in registration order."""
    log: list[tuple[str, int]] = []
    manager = ListenerManager([RecordingListener("first", log), RecordingListener("second", log)])
    manager.notify(Attempt.from_result(None, 1, 0))
    manager.notify(Attempt.from_result(None, 2, 0))
    assert log == [("first", 1), ("second", 1), ("first", 2), ("second", 2)]


def test_listener_manager_plain_callable() -> None:
    """Test that a plain callable can be used as listener."""
    seen: list[Attempt[Any]] = []
    attempt = Attempt.from_exception(OSError(), 1, 0)
    ListenerManager([seen.append]).notify(attempt)
    assert seen == [attempt]


def test_listener_manager_propagates_listener_error() -> None:
    """Test that a failing listener stops the notification."""
    log: list[tuple[str, int]] = []

    def failing(attempt: Attempt[Any]) -> None:
        msg = f"listener failed on attempt {attempt.attempt_number}"
        raise RuntimeError(msg)

    manager = ListenerManager([failing, RecordingListener("after", log)])
    with pytest.raises(RuntimeError, match=r"listener failed on attempt 1"):
        manager.notify(Attempt.from_result(None, 1, 0))
    assert log == []


def test_listener_manager_empty() -> None:
    manager = ListenerManager()
    assert len(manager) == 0
    manager.notify(Attempt.from_result(None, 1, 0))


def test_listener_manager_none_listener() -> None:
    with pytest.raises(TypeError, match=r"listener may not be None"):
        ListenerManager([None])  # type: ignore[list-item]
