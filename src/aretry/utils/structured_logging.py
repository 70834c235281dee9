r"""Structured logging utilities for machine-readable retry logs.

The retry loops log every transition (attempt made, rejected, waiting,
stopping, interrupted) at DEBUG level. This module provides an opt-in JSON
formatter for those records and a context-scoped *operation name* so that
log lines from concurrent retry runs can be told apart.

Example:
    Enable structured logging for aretry:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Name the operation being retried:

    ```python
    from aretry.retry import RetryConfig, Retryer

    retryer = Retryer(RetryConfig(name="fetch-user"))
    retryer.call(fetch_user)  # every log line carries "operation": "fetch-user"
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "get_operation",
    "log_structured",
    "operation_scope",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_operation", default=None
)

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRIBUTES = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_operation() -> str | None:
    """Get the name of the operation retried in the current context.

    Returns:
        The operation name, or None outside of a named retry run.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import get_operation, operation_scope
        >>> get_operation() is None
        True
        >>> with operation_scope("charge-card"):
        ...     get_operation()
        ...
        'charge-card'

        ```
    """
    return _operation.get()


@contextmanager
def operation_scope(name: str | None) -> Generator[None, None, None]:
    """Bind an operation name to the current context.

    The previous value is restored on exit, so scopes nest. Because the
    value lives in a context variable, each thread and each asyncio task
    sees its own operation name.

    Args:
        name: The operation name. ``None`` leaves the current value as is.
    """
    if name is None:
        yield
        return
    token = _operation.set(name)
    try:
        yield
    finally:
        _operation.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp (UTC, millisecond precision)
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - operation: Operation name, when set through ``operation_scope``
        - module, function, line: Source location
        - thread: Thread name

    Fields passed through ``extra`` (for example ``attempt_number``) are
    copied into the JSON object as-is; values that are not JSON
    serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doc_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("attempt rejected", extra={"attempt_number": 2})
        >>> json.loads(stream.getvalue())["attempt_number"]
        2

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
        }

        operation = get_operation()
        if operation is not None:
            log_data["operation"] = operation

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRIBUTES and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured fields.

    The call is skipped entirely when ``level`` is not enabled, which keeps
    the retry loop cheap when debug logging is off.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)
