r"""Unit tests for NeverStopStrategy."""

from __future__ import annotations

from aretry.attempt import Attempt
from aretry.stop import NeverStopStrategy


def test_never_stop_strategy() -> None:
    strategy = NeverStopStrategy()
    assert not strategy.should_stop(Attempt.from_result(None, 1, 0))
    assert not strategy.should_stop(Attempt.from_exception(OSError(), 10_000, 3_600_000))


def test_never_stop_strategy_repr() -> None:
    assert repr(NeverStopStrategy()) == "NeverStopStrategy()"
