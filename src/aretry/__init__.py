r"""Root package of aretry, a generic retry-execution engine."""

from __future__ import annotations

__all__ = [
    "AsyncRetryConfig",
    "AsyncRetryer",
    "Attempt",
    "AttemptTimeoutError",
    "CancellationToken",
    "ExecutionError",
    "Interrupted",
    "RejectionPredicate",
    "RetryConfig",
    "RetryError",
    "RetryListener",
    "Retryer",
    "RetryerBuilder",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.attempt import Attempt
from aretry.cancellation import CancellationToken
from aretry.exceptions import AttemptTimeoutError, ExecutionError, Interrupted, RetryError
from aretry.listener import RetryListener
from aretry.predicate import RejectionPredicate
from aretry.retry import AsyncRetryConfig, AsyncRetryer, RetryConfig, Retryer, RetryerBuilder

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
