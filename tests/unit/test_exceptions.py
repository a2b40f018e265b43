r"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import httpx
import pytest

from httptemplate import Response
from httptemplate.exceptions import (
    HttpRequestError,
    HttpRequestFailedError,
    HttpTemplateError,
    RetryableHttpError,
    RetryExhaustedError,
    TransportError,
)

TEST_URL = "https://api.example.com/data"


def test_http_request_error_attributes() -> None:
    """Test that request details are exposed as attributes."""
    response = Response(404, b"missing")
    error = HttpRequestFailedError(
        method="GET", url=TEST_URL, message="boom", status_code=404, response=response
    )

    assert str(error) == "boom"
    assert error.method == "GET"
    assert error.url == TEST_URL
    assert error.status_code == 404
    assert error.response is response
    assert error.cause is None
    assert isinstance(error, HttpRequestError)
    assert isinstance(error, HttpTemplateError)


def test_http_request_error_repr() -> None:
    """Test the repr of a request error."""
    error = TransportError(method="GET", url=TEST_URL, message="boom")
    assert repr(error) == f"TransportError(method='GET', url='{TEST_URL}', status_code=None)"


def test_retryable_http_error_body() -> None:
    """Test that the retryable error exposes the response body."""
    error = RetryableHttpError(
        method="POST",
        url=TEST_URL,
        message="boom",
        status_code=503,
        response=Response(503, b"busy"),
    )
    assert error.body == b"busy"


def test_retryable_http_error_body_without_response() -> None:
    """Test the body of a retryable error without response."""
    assert RetryableHttpError(method="POST", url=TEST_URL, message="boom").body == b""


def test_retry_exhausted_error_wraps_last_error() -> None:
    """Test that the exhausted error carries the last failure."""
    last = RetryableHttpError(
        method="PUT", url=TEST_URL, message="boom", status_code=504, response=Response(504)
    )
    error = RetryExhaustedError(
        method="PUT", url=TEST_URL, message="gave up", attempts=5, last_error=last
    )

    assert error.attempts == 5
    assert error.last_error is last
    assert error.cause is last
    assert error.status_code == 504
    assert error.response == Response(504)


def test_transport_error_chains_cause() -> None:
    """Test that a transport error can be raised from the httpx fault."""
    fault = httpx.ConnectError("refused")
    with pytest.raises(TransportError) as exc_info:
        raise TransportError(method="GET", url=TEST_URL, message="boom", cause=fault) from fault

    assert exc_info.value.__cause__ is fault
    assert exc_info.value.cause is fault
