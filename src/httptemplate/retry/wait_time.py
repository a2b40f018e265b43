r"""Wait time computation between two write attempts."""

from __future__ import annotations

__all__ = ["compute_wait_time"]

import logging
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httptemplate.retry.config import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def compute_wait_time(policy: RetryPolicy, attempt: int) -> float:
    r"""Compute the wait before the next attempt.

    The wait strategy gives the base wait, which is then capped at
    ``max_wait_time`` and finally extended by a random jitter when
    ``jitter_factor`` is positive.

    Args:
        policy: The retry policy.
        attempt: The retry number (0-indexed).

    Returns:
        The wait in seconds, jitter included.

    Example:
        ```pycon
        >>> from httptemplate.retry import RetryPolicy, compute_wait_time
        >>> from httptemplate.wait import ExponentialWait
        >>> policy = RetryPolicy(wait=ExponentialWait(base_delay=0.3))
        >>> compute_wait_time(policy, attempt=2)
        1.2
        >>> compute_wait_time(policy.merge(max_wait_time=1.0), attempt=2)
        1.0

        ```
    """
    wait_time = policy.wait.compute(attempt)
    if policy.max_wait_time is not None and wait_time > policy.max_wait_time:
        logger.debug(
            f"Capping wait time from {wait_time:.2f}s to {policy.max_wait_time:.2f}s "
            f"(max_wait_time={policy.max_wait_time:.2f}s)"
        )
        wait_time = policy.max_wait_time

    if policy.jitter_factor > 0:
        jitter = random.uniform(0, policy.jitter_factor) * wait_time  # noqa: S311
        logger.debug(
            f"Waiting {wait_time + jitter:.2f}s before retry "
            f"(base={wait_time:.2f}s, jitter={jitter:.2f}s)"
        )
        return wait_time + jitter

    logger.debug(f"Waiting {wait_time:.2f}s before retry")
    return wait_time
