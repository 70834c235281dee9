r"""Unit tests for the parameter validation helpers."""

from __future__ import annotations

import pytest

from aretry.utils.validation import check_non_negative, check_not_none, check_positive

####################################
#     Tests for check_not_none     #
####################################


def test_check_not_none_returns_value() -> None:
    value = object()
    assert check_not_none(value, "value") is value


def test_check_not_none_falsy_value() -> None:
    assert check_not_none(0, "value") == 0


def test_check_not_none_none() -> None:
    with pytest.raises(TypeError, match=r"listener may not be None"):
        check_not_none(None, "listener")


########################################
#     Tests for check_non_negative     #
########################################


@pytest.mark.parametrize("value", [0, 1, 10_000, 0.5])
def test_check_non_negative_valid(value: float) -> None:
    check_non_negative(value, "sleep_time")


@pytest.mark.parametrize("value", [-1, -0.5])
def test_check_non_negative_invalid(value: float) -> None:
    with pytest.raises(ValueError, match=r"sleep_time must be >= 0, got"):
        check_non_negative(value, "sleep_time")


####################################
#     Tests for check_positive     #
####################################


@pytest.mark.parametrize("value", [1, 0.1, 5000])
def test_check_positive_valid(value: float) -> None:
    check_positive(value, "duration")


@pytest.mark.parametrize("value", [0, -1])
def test_check_positive_invalid(value: int) -> None:
    with pytest.raises(ValueError, match=rf"duration must be > 0, got {value}"):
        check_positive(value, "duration")
