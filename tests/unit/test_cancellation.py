r"""Unit tests for CancellationToken."""

from __future__ import annotations

import threading

import pytest

from aretry.cancellation import CancellationToken
from aretry.exceptions import Interrupted


def test_cancellation_token_initial_state() -> None:
    token = CancellationToken()
    assert not token.is_cancelled()
    token.raise_if_cancelled()


def test_cancellation_token_cancel() -> None:
    """Test that cancel is sticky and idempotent."""
    token = CancellationToken()
    token.cancel()
    token.cancel()
    assert token.is_cancelled()


def test_cancellation_token_raise_if_cancelled() -> None:
    token = CancellationToken()
    token.cancel()
    with pytest.raises(Interrupted, match=r"operation was cancelled"):
        token.raise_if_cancelled()


def test_cancellation_token_wait_timeout() -> None:
    """Test that wait returns False when nothing cancels the token."""
    assert not CancellationToken().wait(0.01)


def test_cancellation_token_wait_woken_by_other_thread() -> None:
    """Test that wait returns True as soon as another thread cancels."""
    token = CancellationToken()
    timer = threading.Timer(0.05, token.cancel)
    timer.start()
    try:
        assert token.wait(5.0)
    finally:
        timer.cancel()


def test_cancellation_token_repr() -> None:
    token = CancellationToken()
    assert repr(token) == "CancellationToken(cancelled=False)"
    token.cancel()
    assert repr(token) == "CancellationToken(cancelled=True)"
