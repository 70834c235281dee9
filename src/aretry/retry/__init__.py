r"""Retry loops and their configuration.

Public API:
    - RetryConfig / AsyncRetryConfig: The policies of a retry loop
    - Retryer: Synchronous retry loop
    - AsyncRetryer: asyncio retry loop
    - RetryerBuilder: Fluent construction of both
"""

from __future__ import annotations

__all__ = ["AsyncRetryConfig", "AsyncRetryer", "RetryConfig", "Retryer", "RetryerBuilder"]

from aretry.retry.builder import RetryerBuilder
from aretry.retry.config import AsyncRetryConfig, RetryConfig
from aretry.retry.executor import Retryer
from aretry.retry.executor_async import AsyncRetryer
