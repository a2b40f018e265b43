r"""Exception hierarchy for HTTP template requests.

Every failure raised by this package derives from ``HttpTemplateError``.
Failures tied to a specific request derive from ``HttpRequestError`` and
carry the method, URL, status code and the normalised ``Response`` when
one was received.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "HttpRequestError",
    "HttpRequestFailedError",
    "HttpTemplateError",
    "RetryExhaustedError",
    "RetryableHttpError",
    "TransportError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httptemplate.response import Response


class HttpTemplateError(Exception):
    r"""Base class for all errors raised by ``httptemplate``."""


class ConfigurationError(HttpTemplateError):
    r"""Raised when the template is used in a way its configuration does
    not support.

    Example:
        ```pycon
        >>> from httptemplate.exceptions import ConfigurationError
        >>> raise ConfigurationError("a codec is required")  # doctest: +SKIP

        ```
    """


class HttpRequestError(HttpTemplateError):
    r"""Base class for errors tied to a single HTTP request.

    Args:
        method: The HTTP method (e.g., "GET", "POST").
        url: The URL that was requested.
        message: Human readable description of the failure.
        status_code: The HTTP status code, if a response was received.
        response: The normalised response, if one was received.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from httptemplate.exceptions import HttpRequestError
        >>> error = HttpRequestError(
        ...     method="GET",
        ...     url="https://api.example.com/data",
        ...     message="GET request to https://api.example.com/data failed with status 404",
        ...     status_code=404,
        ... )
        >>> error.status_code
        404

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.status_code = status_code
        self.response = response
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r}, "
            f"status_code={self.status_code!r})"
        )


class TransportError(HttpRequestError):
    r"""Raised when the transport fails before a response is available.

    Connectivity problems, timeouts and malformed responses all end up
    here. These errors are never retried.
    """


class RetryableHttpError(HttpRequestError):
    r"""Raised when a write request comes back with a transient server
    status (502, 503 or 504).

    This is the signal watched by ``RetryDriver``. It only escapes the
    driver wrapped in ``RetryExhaustedError``, or directly from the raw
    byte paths that are not retried.
    """

    @property
    def body(self) -> bytes:
        r"""The raw body returned with the transient status."""
        if self.response is None:
            return b""
        return self.response.body


class HttpRequestFailedError(HttpRequestError):
    r"""Raised when a completed request has a status code outside the
    success band of its verb."""


class RetryExhaustedError(HttpRequestError):
    r"""Raised when every allowed attempt failed with a retryable error.

    Args:
        method: The HTTP method.
        url: The URL that was requested.
        message: Human readable description of the failure.
        attempts: Number of attempts that were made.
        last_error: The failure observed on the final attempt.
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        attempts: int,
        last_error: Exception,
    ) -> None:
        super().__init__(
            method=method,
            url=url,
            message=message,
            status_code=getattr(last_error, "status_code", None),
            response=getattr(last_error, "response", None),
            cause=last_error,
        )
        self.attempts = attempts
        self.last_error = last_error
