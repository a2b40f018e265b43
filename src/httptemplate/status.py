r"""Status code classification.

Two predicates are kept apart on purpose: ``is_read_failed`` decides
whether a completed request counts as a failure, ``is_write_retryable``
decides whether a write attempt should be tried again. ``classify``
projects a status code onto the three buckets used in logs and retry
outcomes.
"""

from __future__ import annotations

__all__ = [
    "READ_SUCCESS_STATUS_CODES",
    "RETRYABLE_STATUS_CODES",
    "StatusClass",
    "classify",
    "is_read_failed",
    "is_write_retryable",
]

from enum import Enum

# 200 OK through 204 No Content
READ_SUCCESS_STATUS_CODES = range(200, 205)

# HTTP status codes that make a write attempt worth repeating
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRYABLE_STATUS_CODES = (502, 503, 504)


class StatusClass(Enum):
    r"""Bucket a status code falls into."""

    SUCCESS = "success"
    CLIENT_FAILURE = "client_failure"
    RETRYABLE = "retryable"


def is_read_failed(status_code: int) -> bool:
    r"""Indicate whether a status code is outside the ``200..204`` band.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``True`` if the request should be treated as failed.

    Example:
        ```pycon
        >>> from httptemplate.status import is_read_failed
        >>> is_read_failed(200)
        False
        >>> is_read_failed(204)
        False
        >>> is_read_failed(206)
        True
        >>> is_read_failed(404)
        True

        ```
    """
    return status_code not in READ_SUCCESS_STATUS_CODES


def is_write_retryable(status_code: int) -> bool:
    r"""Indicate whether a write attempt with this status code should be
    retried.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``True`` for 502, 503 and 504.

    Example:
        ```pycon
        >>> from httptemplate.status import is_write_retryable
        >>> is_write_retryable(503)
        True
        >>> is_write_retryable(500)
        False

        ```
    """
    return status_code in RETRYABLE_STATUS_CODES


def classify(status_code: int) -> StatusClass:
    r"""Project a status code onto its ``StatusClass``.

    Args:
        status_code: The HTTP status code.

    Returns:
        The bucket the status code belongs to.

    Example:
        ```pycon
        >>> from httptemplate.status import classify
        >>> classify(201)
        <StatusClass.SUCCESS: 'success'>
        >>> classify(502)
        <StatusClass.RETRYABLE: 'retryable'>
        >>> classify(404)
        <StatusClass.CLIENT_FAILURE: 'client_failure'>

        ```
    """
    if not is_read_failed(status_code):
        return StatusClass.SUCCESS
    if is_write_retryable(status_code):
        return StatusClass.RETRYABLE
    return StatusClass.CLIENT_FAILURE
