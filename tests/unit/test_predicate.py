r"""Unit tests for rejection predicates."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.attempt import Attempt
from aretry.predicate import (
    ExceptionClassPredicate,
    ExceptionPredicate,
    RejectionPredicate,
    ResultPredicate,
)

##############################################
#     Tests for ExceptionClassPredicate      #
##############################################


def test_exception_class_predicate_matches_subclass() -> None:
    """Test that subclasses of the configured class match."""
    predicate = ExceptionClassPredicate(OSError)
    assert predicate(Attempt.from_exception(ConnectionResetError(), 1, 0))


def test_exception_class_predicate_other_class() -> None:
    predicate = ExceptionClassPredicate(OSError)
    assert not predicate(Attempt.from_exception(ValueError(), 1, 0))


def test_exception_class_predicate_tuple() -> None:
    predicate = ExceptionClassPredicate((KeyError, TimeoutError))
    assert predicate(Attempt.from_exception(TimeoutError(), 1, 0))


def test_exception_class_predicate_ignores_results() -> None:
    assert not ExceptionClassPredicate(Exception)(Attempt.from_result(None, 1, 0))


def test_exception_class_predicate_none() -> None:
    with pytest.raises(TypeError, match=r"exception_class may not be None"):
        ExceptionClassPredicate(None)  # type: ignore[arg-type]


#########################################
#     Tests for ExceptionPredicate      #
#########################################


def test_exception_predicate_called_with_exception() -> None:
    """Test that the predicate receives the raised exception."""
    error = OSError("disk full")
    func = Mock(return_value=True)
    assert ExceptionPredicate(func)(Attempt.from_exception(error, 1, 0))
    func.assert_called_once_with(error)


def test_exception_predicate_false() -> None:
    assert not ExceptionPredicate(lambda exc: "retry" in str(exc))(
        Attempt.from_exception(OSError("fatal"), 1, 0)
    )


def test_exception_predicate_ignores_results() -> None:
    """Test that result-bearing attempts never reach the predicate."""
    func = Mock(return_value=True)
    assert not ExceptionPredicate(func)(Attempt.from_result("ok", 1, 0))
    func.assert_not_called()


#####################################
#     Tests for ResultPredicate     #
#####################################


def test_result_predicate_none_result() -> None:
    assert ResultPredicate(lambda result: result is None)(Attempt.from_result(None, 1, 0))


def test_result_predicate_false() -> None:
    assert not ResultPredicate(lambda result: result is None)(Attempt.from_result(1, 1, 0))


def test_result_predicate_ignores_exceptions() -> None:
    """Test that exception-bearing attempts never reach the predicate."""
    func = Mock(return_value=True)
    assert not ResultPredicate(func)(Attempt.from_exception(OSError(), 1, 0))
    func.assert_not_called()


def test_result_predicate_none() -> None:
    with pytest.raises(TypeError, match=r"result_predicate may not be None"):
        ResultPredicate(None)  # type: ignore[arg-type]


########################################
#     Tests for RejectionPredicate     #
########################################


def test_rejection_predicate_empty_accepts_everything() -> None:
    """Test that a predicate without conditions never retries."""
    predicate = RejectionPredicate()
    assert len(predicate) == 0
    assert not predicate.test(Attempt.from_result(None, 1, 0))
    assert not predicate.test(Attempt.from_exception(OSError(), 1, 0))


def test_rejection_predicate_or_returns_new_instance() -> None:
    """Test that or_ leaves the original predicate unchanged."""
    original = RejectionPredicate()
    extended = original.or_(ExceptionClassPredicate(OSError))
    assert extended is not original
    assert len(original) == 0
    assert len(extended) == 1


def test_rejection_predicate_disjunction() -> None:
    """Test that any matching condition rejects the attempt."""
    predicate = RejectionPredicate(
        [ResultPredicate(lambda result: result is None), ExceptionClassPredicate(OSError)]
    )
    assert predicate.test(Attempt.from_result(None, 1, 0))
    assert predicate.test(Attempt.from_exception(FileNotFoundError(), 1, 0))
    assert not predicate.test(Attempt.from_result(0, 1, 0))
    assert not predicate.test(Attempt.from_exception(KeyError(), 1, 0))


def test_rejection_predicate_short_circuits() -> None:
    """Test that conditions after the first match are not evaluated."""
    first = Mock(return_value=True)
    second = Mock(return_value=True)
    assert RejectionPredicate([first, second])(Attempt.from_result(None, 1, 0))
    second.assert_not_called()


def test_rejection_predicate_interrupted_attempt() -> None:
    """Test that conditions never see interrupted attempts."""
    condition = Mock(return_value=True)
    assert not RejectionPredicate([condition]).test(Attempt.from_interruption(1, 0))
    condition.assert_not_called()


def test_rejection_predicate_conditions_order() -> None:
    first = ExceptionClassPredicate(OSError)
    second = ResultPredicate(bool)
    assert RejectionPredicate().or_(first).or_(second).conditions == (first, second)


def test_rejection_predicate_none_condition() -> None:
    with pytest.raises(TypeError, match=r"condition may not be None"):
        RejectionPredicate().or_(None)  # type: ignore[arg-type]
