from __future__ import annotations

import asyncio
import json
import logging
from io import StringIO

import pytest

from aretry.utils.structured_logging import (
    StructuredFormatter,
    get_operation,
    log_structured,
    operation_scope,
)


@pytest.fixture
def stream_logger() -> tuple[logging.Logger, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("tests.structured_logging")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, stream


############################################
#     Tests for operation name scoping     #
############################################


def test_get_operation_initially_none() -> None:
    assert get_operation() is None


def test_operation_scope_sets_and_resets() -> None:
    with operation_scope("sync-orders"):
        assert get_operation() == "sync-orders"
    assert get_operation() is None


def test_operation_scope_nested() -> None:
    with operation_scope("outer"):
        with operation_scope("inner"):
            assert get_operation() == "inner"
        assert get_operation() == "outer"


def test_operation_scope_none_keeps_current() -> None:
    with operation_scope("outer"), operation_scope(None):
        assert get_operation() == "outer"


def test_operation_scope_reset_on_error() -> None:
    with pytest.raises(ValueError, match=r"boom"), operation_scope("failing"):
        msg = "boom"
        raise ValueError(msg)
    assert get_operation() is None


def test_operation_scope_isolated_between_tasks() -> None:
    """Test that each asyncio task sees its own operation name."""

    async def worker(name: str) -> str | None:
        with operation_scope(name):
            await asyncio.sleep(0.01)
            return get_operation()

    async def main() -> list[str | None]:
        return await asyncio.gather(worker("a"), worker("b"))

    assert asyncio.run(main()) == ["a", "b"]


##############################################
#     Tests for StructuredFormatter          #
##############################################


def test_structured_formatter_basic_log(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    """Test that StructuredFormatter produces valid JSON."""
    logger, stream = stream_logger
    logger.info("attempt made")
    log_data = json.loads(stream.getvalue())
    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "tests.structured_logging"
    assert log_data["message"] == "attempt made"
    assert log_data["timestamp"].endswith("Z")
    assert "operation" not in log_data


def test_structured_formatter_extra_fields(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    logger.debug("rejected", extra={"attempt_number": 3, "sleep_time": 400})
    log_data = json.loads(stream.getvalue())
    assert log_data["attempt_number"] == 3
    assert log_data["sleep_time"] == 400


def test_structured_formatter_operation(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    with operation_scope("fetch-user"):
        logger.info("attempt made")
    assert json.loads(stream.getvalue())["operation"] == "fetch-user"


def test_structured_formatter_non_serializable(
    stream_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = stream_logger
    logger.info("with object", extra={"payload": object()})
    assert json.loads(stream.getvalue())["payload"].startswith("<object object")


def test_structured_formatter_exception(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    try:
        msg = "boom"
        raise ValueError(msg)
    except ValueError:
        logger.exception("failed")
    assert "ValueError: boom" in json.loads(stream.getvalue())["exception"]


####################################
#     Tests for log_structured     #
####################################


def test_log_structured(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    log_structured(logger, logging.DEBUG, "waiting", attempt_number=1, delay_since_first_attempt=0)
    log_data = json.loads(stream.getvalue())
    assert log_data["message"] == "waiting"
    assert log_data["attempt_number"] == 1
    assert log_data["delay_since_first_attempt"] == 0


def test_log_structured_level_disabled(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    logger.setLevel(logging.WARNING)
    log_structured(logger, logging.DEBUG, "hidden", attempt_number=1)
    assert stream.getvalue() == ""
