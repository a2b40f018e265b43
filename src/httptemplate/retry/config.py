r"""Configuration and outcome dataclasses for the retry loop."""

from __future__ import annotations

__all__ = ["DEFAULT_MAX_ATTEMPTS", "RetryOutcome", "RetryPolicy", "is_retryable_error"]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from httptemplate.exceptions import RetryableHttpError
from httptemplate.validation import validate_max_attempts, validate_wait_params
from httptemplate.wait import BaseWaitStrategy, FixedWait

if TYPE_CHECKING:
    from collections.abc import Callable

    from httptemplate.response import Response
    from httptemplate.status import StatusClass

# Total attempts, the first one included
DEFAULT_MAX_ATTEMPTS = 5


def is_retryable_error(error: Exception) -> bool:
    r"""Indicate whether a failed attempt should be repeated.

    Only ``RetryableHttpError`` qualifies: transport faults and failed
    status codes are surfaced immediately.

    Args:
        error: The exception raised by the attempt.

    Returns:
        ``True`` if the attempt should be repeated.
    """
    return isinstance(error, RetryableHttpError)


@dataclass(frozen=True)
class RetryOutcome:
    r"""Snapshot of a failed attempt, passed to the ``on_retry`` hook.

    Attributes:
        attempt: The attempt that just failed (1-indexed).
        max_attempts: The configured maximum number of attempts.
        error: The failure raised by the attempt.
        status_class: The bucket of the status code, if a response was
            received.
        response: The response of the failed attempt, if any.
        wait_time: The wait in seconds before the next attempt.
    """

    attempt: int
    max_attempts: int
    error: Exception
    status_class: StatusClass | None = None
    response: Response | None = None
    wait_time: float = 0.0


@dataclass(frozen=True)
class RetryPolicy:
    r"""Immutable configuration of the retry loop.

    Args:
        max_attempts: Total number of attempts, the first one included.
            Must be >= 1.
        wait: Strategy computing the wait between two attempts.
        retry_if: Predicate deciding whether a failure is retried.
            Defaults to retrying ``RetryableHttpError`` only.
        jitter_factor: Factor for adding random jitter to waits. The
            jitter is ``random.uniform(0, jitter_factor) * wait`` and is
            added to the wait. Must be >= 0.
        max_wait_time: Optional cap on a single wait in seconds.
            Must be > 0 if provided.
        on_retry: Optional hook called with a ``RetryOutcome`` before
            sleeping.

    Raises:
        ConfigurationError: If a parameter is out of range.

    Example:
        ```pycon
        >>> from httptemplate.retry import RetryPolicy
        >>> from httptemplate.wait import ExponentialWait
        >>> policy = RetryPolicy()
        >>> policy.max_attempts
        5
        >>> policy.wait
        FixedWait(delay=0.01)
        >>> policy.merge(max_attempts=3, wait=ExponentialWait()).max_attempts
        3
        >>> policy.max_attempts
        5

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    wait: BaseWaitStrategy = field(default_factory=FixedWait)
    retry_if: Callable[[Exception], bool] = is_retryable_error
    jitter_factor: float = 0.0
    max_wait_time: float | None = None
    on_retry: Callable[[RetryOutcome], None] | None = None

    def __post_init__(self) -> None:
        validate_max_attempts(self.max_attempts)
        validate_wait_params(jitter_factor=self.jitter_factor, max_wait_time=self.max_wait_time)

    def merge(self, **overrides: Any) -> RetryPolicy:
        r"""Create a new policy with the non-``None`` overrides applied.

        Args:
            **overrides: Fields to override.

        Returns:
            A new ``RetryPolicy``; this one is left unchanged.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
