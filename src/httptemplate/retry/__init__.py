r"""Bounded retry of write requests that hit a transient server
status.

Public API:
    - RetryPolicy: Immutable retry configuration
    - RetryOutcome: Snapshot of a failed attempt handed to ``on_retry``
    - RetryDriver: Loop repeating an attempt under a policy
"""

from __future__ import annotations

__all__ = ["RetryDriver", "RetryOutcome", "RetryPolicy", "compute_wait_time", "is_retryable_error"]

from httptemplate.retry.config import RetryOutcome, RetryPolicy, is_retryable_error
from httptemplate.retry.driver import RetryDriver
from httptemplate.retry.wait_time import compute_wait_time
