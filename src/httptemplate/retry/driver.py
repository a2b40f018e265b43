r"""Retry driver repeating a write attempt under a ``RetryPolicy``.

The driver knows nothing about HTTP verbs: it calls a zero-argument
attempt, inspects the failure through the policy predicate and either
sleeps and tries again or gives up.
"""

from __future__ import annotations

__all__ = ["RetryDriver"]

import logging
import time
from typing import TYPE_CHECKING

from httptemplate.exceptions import HttpRequestFailedError, RetryExhaustedError
from httptemplate.retry.config import RetryOutcome, RetryPolicy
from httptemplate.retry.wait_time import compute_wait_time

if TYPE_CHECKING:
    from collections.abc import Callable

    from httptemplate.response import Response

logger: logging.Logger = logging.getLogger(__name__)


class RetryDriver:
    r"""Run an attempt until it succeeds, fails for good, or the
    attempt budget is spent.

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``.

    Example:
        ```pycon
        >>> from httptemplate import Response
        >>> from httptemplate.retry import RetryDriver, RetryPolicy
        >>> driver = RetryDriver(RetryPolicy(max_attempts=3))
        >>> driver.call(lambda: Response(201, b"created"), method="POST", url="https://x.org")
        Response(status_code=201, body=b'created', headers=())

        ```
    """

    def __init__(self, policy: RetryPolicy | None = None) -> None:
        self.policy = policy or RetryPolicy()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy!r})"

    def call(
        self,
        attempt: Callable[[], Response],
        *,
        method: str,
        url: str,
        failed_if: Callable[[int], bool] | None = None,
    ) -> Response:
        r"""Call ``attempt`` until it returns or raises a non retryable
        failure.

        Args:
            attempt: A zero-argument callable issuing one request.
            method: The HTTP method, used in logs and errors.
            url: The URL, used in logs and errors.
            failed_if: Optional predicate on the final status code. It is
                checked once, after the loop, not after every attempt.

        Returns:
            The response of the first successful attempt.

        Raises:
            RetryExhaustedError: If every attempt failed with a retryable
                error. The last failure is chained as the cause.
            HttpRequestFailedError: If ``failed_if`` rejects the final
                status code.
            Exception: Any failure rejected by ``policy.retry_if``, on the
                attempt where it happens.
        """
        policy = self.policy
        for attempt_number in range(1, policy.max_attempts + 1):
            logger.debug(
                f"{method} request to {url} (attempt {attempt_number}/{policy.max_attempts})"
            )
            try:
                response = attempt()
            except Exception as exc:
                if not policy.retry_if(exc):
                    raise
                if attempt_number == policy.max_attempts:
                    logger.debug(
                        f"{method} request to {url} failed after {attempt_number} attempts: {exc}"
                    )
                    raise RetryExhaustedError(
                        method=method,
                        url=url,
                        message=(
                            f"{method} request to {url} failed after "
                            f"{attempt_number} attempts: {exc}"
                        ),
                        attempts=attempt_number,
                        last_error=exc,
                    ) from exc
                self._wait(exc, attempt_number)
                continue

            if attempt_number > 1:
                logger.debug(
                    f"{method} request to {url} succeeded on attempt {attempt_number} "
                    f"with status {response.status_code}"
                )
            if failed_if is not None and failed_if(response.status_code):
                raise HttpRequestFailedError(
                    method=method,
                    url=url,
                    message=(
                        f"{method} request to {url} failed with status "
                        f"{response.status_code}. response: {response.text}"
                    ),
                    status_code=response.status_code,
                    response=response,
                )
            return response

        msg = f"max_attempts must be >= 1, got {policy.max_attempts}"  # pragma: no cover
        raise RuntimeError(msg)  # pragma: no cover

    def _wait(self, error: Exception, attempt_number: int) -> None:
        wait_time = compute_wait_time(self.policy, attempt=attempt_number - 1)
        if self.policy.on_retry is not None:
            response = getattr(error, "response", None)
            self.policy.on_retry(
                RetryOutcome(
                    attempt=attempt_number,
                    max_attempts=self.policy.max_attempts,
                    error=error,
                    status_class=response.status_class if response is not None else None,
                    response=response,
                    wait_time=wait_time,
                )
            )
        time.sleep(wait_time)
