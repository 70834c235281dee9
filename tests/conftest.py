from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.attempt import Attempt

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def result_attempt() -> Attempt[str]:
    """Create the second attempt of a run, which returned a result."""
    return Attempt.from_result("payload", attempt_number=2, delay_since_first_attempt=150)


@pytest.fixture
def exception_attempt() -> Attempt[str]:
    """Create the second attempt of a run, which raised an exception."""
    return Attempt.from_exception(
        ConnectionError("reset by peer"), attempt_number=2, delay_since_first_attempt=150
    )
