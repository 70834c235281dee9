r"""Retry conditions and waits for httpx clients.

Example:
    Retry transient failures of an HTTP call, honouring ``Retry-After``:

    ```python
    import httpx

    from aretry.contrib.httpx import is_retryable_response, is_transient_httpx_error, retry_after_wait
    from aretry.retry import RetryerBuilder
    from aretry.stop import stop_after_attempt
    from aretry.wait import exponential_wait, join

    retryer = (
        RetryerBuilder(name="get-user")
        .retry_if_exception(is_transient_httpx_error)
        .retry_if_result(is_retryable_response)
        .with_wait_strategy(join(exponential_wait(100, 10_000), retry_after_wait()))
        .with_stop_strategy(stop_after_attempt(4))
        .build()
    )
    with httpx.Client() as client:
        response = retryer.call(lambda: client.get("https://api.example.com/users/1"))
    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "is_retryable_response",
    "is_transient_httpx_error",
    "parse_retry_after",
    "retry_after_wait",
]

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx

from aretry.utils.validation import check_non_negative
from aretry.wait import ExceptionWaitStrategy, WaitStrategy

logger: logging.Logger = logging.getLogger(__name__)

# Rate limiting (429) and the 5xx codes that usually clear up on their own.
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def is_transient_httpx_error(
    exc: Exception, status_codes: tuple[int, ...] = RETRY_STATUS_CODES
) -> bool:
    """Return True if ``exc`` is an httpx error worth retrying.

    Timeouts and transport errors (connection refused, reset, ...) are
    transient. An ``httpx.HTTPStatusError`` raised by
    ``response.raise_for_status()`` is transient if its status code is in
    ``status_codes``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.contrib.httpx import is_transient_httpx_error
        >>> is_transient_httpx_error(httpx.ConnectError("refused"))
        True
        >>> is_transient_httpx_error(ValueError("bad input"))
        False

        ```
    """
    if isinstance(exc, (httpx.TimeoutException, httpx.TransportError)):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in status_codes
    return False


def is_retryable_response(
    response: httpx.Response, status_codes: tuple[int, ...] = RETRY_STATUS_CODES
) -> bool:
    """Return True if ``response`` has a status code worth retrying.

    Non-response results (for example None) are never retried.
    """
    if not isinstance(response, httpx.Response):
        return False
    return response.status_code in status_codes


def parse_retry_after(value: str | None, now: datetime | None = None) -> int | None:
    """Convert a ``Retry-After`` header value to a delay in milliseconds.

    RFC 9110 allows either a non-negative integer number of seconds
    (``"120"``) or an HTTP-date (``"Wed, 21 Oct 2015 07:28:00 GMT"``).
    A date is measured from ``now``, which defaults to the current UTC time;
    a date without a zone is read as UTC.

    Args:
        value: The header value, or None if the header is absent.
        now: The reference time for HTTP-dates.

    Returns:
        The delay in milliseconds, or None if ``value`` is absent or is
        neither form. A date that has already passed gives 0.

    Example:
        ```pycon
        >>> from datetime import datetime, timezone
        >>> from aretry.contrib.httpx import parse_retry_after
        >>> parse_retry_after(" 3 ")
        3000
        >>> parse_retry_after(
        ...     "Wed, 21 Oct 2015 07:28:30 GMT",
        ...     now=datetime(2015, 10, 21, 7, 28, tzinfo=timezone.utc),
        ... )
        30000
        >>> parse_retry_after("1.5") is None
        True

        ```
    """
    if value is None:
        return None
    text = value.strip()
    if text.isascii() and text.isdigit():
        return int(text) * 1000

    try:
        when = parsedate_to_datetime(text)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring unusable Retry-After value {value!r}")
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    return max(0, round((when - now).total_seconds() * 1000))


def retry_after_wait(default: int = 0) -> WaitStrategy:
    """Return a wait strategy honouring the ``Retry-After`` header.

    The strategy applies to attempts that raised ``httpx.HTTPStatusError``.
    It waits for the delay announced by the response's ``Retry-After``
    header, or ``default`` milliseconds when the header is absent or
    invalid. Other attempts wait 0 ms, so combine it with another strategy
    using ``aretry.wait.join``.

    Args:
        default: The delay in milliseconds used without a usable header.

    Raises:
        ValueError: If ``default`` is negative.
    """
    check_non_negative(default, "default")

    def _delay(exc: httpx.HTTPStatusError) -> int:
        delay = parse_retry_after(exc.response.headers.get("Retry-After"))
        return default if delay is None else delay

    return ExceptionWaitStrategy(httpx.HTTPStatusError, _delay)
