r"""Utility functions shared by the strategies and the retry loops."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "check_non_negative",
    "check_not_none",
    "check_positive",
    "get_operation",
    "log_structured",
    "operation_scope",
]

from aretry.utils.structured_logging import (
    StructuredFormatter,
    get_operation,
    log_structured,
    operation_scope,
)
from aretry.utils.validation import check_non_negative, check_not_none, check_positive
