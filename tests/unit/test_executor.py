r"""Unit tests for RequestExecutor."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx
import pytest

from httptemplate import Response
from httptemplate.exceptions import ConfigurationError, RetryableHttpError, TransportError
from httptemplate.executor import RequestExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_URL = "https://api.example.com/data"

#####################################
#     Tests for RequestExecutor     #
#####################################


def test_executor_invalid_accept_type() -> None:
    """Test that an empty accept type is rejected."""
    with pytest.raises(ConfigurationError, match=r"accept_type must be a non-empty string"):
        RequestExecutor(Mock(spec=httpx.Client), accept_type="")


def test_executor_get_builds_response(
    make_client: Callable[..., httpx.Client], seen_requests: list[httpx.Request]
) -> None:
    """Test that the transport response is normalised."""
    client = make_client((200, b"result body text", [("X-Foo", "1"), ("X-Foo", "2")]))

    response = RequestExecutor(client).execute("GET", TEST_URL)

    assert response == Response(200, b"result body text", [("X-Foo", "1"), ("X-Foo", "2")])
    assert len(seen_requests) == 1
    assert seen_requests[0].method == "GET"
    assert seen_requests[0].headers["Accept"] == "application/json"
    assert "content-type" not in seen_requests[0].headers


def test_executor_sends_body_with_content_type(
    make_client: Callable[..., httpx.Client], seen_requests: list[httpx.Request]
) -> None:
    """Test that the body and its content type are sent."""
    executor = RequestExecutor(make_client(201), accept_type="*/*")

    executor.execute(
        "post",
        TEST_URL,
        content=b"body message",
        content_type="text/plain",
        headers={"SOMETHING": "I'm extra", "Content-Type": "image/png"},
    )

    request = seen_requests[0]
    assert request.method == "POST"
    assert request.content == b"body message"
    assert request.headers.get_list("Content-Type") == ["text/plain"]
    assert request.headers["Accept"] == "*/*"
    assert request.headers["SOMETHING"] == "I'm extra"


def test_executor_content_type_ignored_without_body(
    make_client: Callable[..., httpx.Client], seen_requests: list[httpx.Request]
) -> None:
    """Test that no Content-Type is sent without a body."""
    RequestExecutor(make_client(200)).execute("GET", TEST_URL, content_type="text/plain")
    assert "content-type" not in seen_requests[0].headers


def test_executor_query_params(
    make_client: Callable[..., httpx.Client], seen_requests: list[httpx.Request]
) -> None:
    """Test that query parameters are added to the URL."""
    RequestExecutor(make_client(200)).execute("GET", TEST_URL, params={"page": 2})
    assert str(seen_requests[0].url) == f"{TEST_URL}?page=2"


@pytest.mark.parametrize("method", ["POST", "PUT"])
@pytest.mark.parametrize("status_code", [502, 503, 504])
def test_executor_write_retryable_status(
    make_client: Callable[..., httpx.Client], method: str, status_code: int
) -> None:
    """Test that transient statuses of writes raise RetryableHttpError."""
    executor = RequestExecutor(make_client((status_code, b"try later", ())))

    with pytest.raises(
        RetryableHttpError,
        match=rf"{method} failed to: {TEST_URL}\. Status = {status_code}, message = try later",
    ) as exc_info:
        executor.execute(method, TEST_URL, content=b"{}", content_type="application/json")

    error = exc_info.value
    assert error.status_code == status_code
    assert error.body == b"try later"
    assert error.response == Response(status_code, b"try later")


@pytest.mark.parametrize("method", ["GET", "HEAD", "DELETE"])
def test_executor_read_transient_status_returned(
    make_client: Callable[..., httpx.Client], method: str
) -> None:
    """Test that transient statuses of other verbs are returned."""
    response = RequestExecutor(make_client(503)).execute(method, TEST_URL)
    assert response.status_code == 503


def test_executor_raise_retryable_disabled(make_client: Callable[..., httpx.Client]) -> None:
    """Test that the retryable check can be turned off for a write."""
    response = RequestExecutor(make_client(502)).execute(
        "POST", TEST_URL, content=b"a=b", raise_retryable=False
    )
    assert response.status_code == 502


@pytest.mark.parametrize("status_code", [400, 404, 500])
def test_executor_write_other_failures_returned(
    make_client: Callable[..., httpx.Client], status_code: int
) -> None:
    """Test that non transient failures of writes are returned."""
    response = RequestExecutor(make_client(status_code)).execute("PUT", TEST_URL, content=b"x")
    assert response.status_code == status_code


@pytest.mark.parametrize(
    "fault",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("read timed out"),
        httpx.RemoteProtocolError("malformed response"),
    ],
)
def test_executor_transport_fault(
    make_client: Callable[..., httpx.Client], fault: httpx.RequestError
) -> None:
    """Test that transport faults are wrapped in TransportError."""
    executor = RequestExecutor(make_client(fault))

    with pytest.raises(TransportError, match=rf"GET request to {TEST_URL} failed") as exc_info:
        executor.execute("GET", TEST_URL)

    assert exc_info.value.__cause__ is fault
    assert exc_info.value.cause is fault
    assert exc_info.value.status_code is None


def test_executor_closes_response_on_success() -> None:
    """Test that the streamed response is closed after reading."""
    stream = httpx.ByteStream(b"done")
    stream.close = Mock()  # type: ignore[method-assign]
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, stream=stream))
    )

    RequestExecutor(client).execute("GET", TEST_URL)

    stream.close.assert_called_once_with()


def test_executor_closes_response_on_retryable_status() -> None:
    """Test that the streamed response is closed before raising."""
    stream = httpx.ByteStream(b"busy")
    stream.close = Mock()  # type: ignore[method-assign]
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(503, stream=stream))
    )

    with pytest.raises(RetryableHttpError):
        RequestExecutor(client).execute("POST", TEST_URL, content=b"x")

    stream.close.assert_called_once_with()


def test_executor_does_not_close_client(make_client: Callable[..., httpx.Client]) -> None:
    """Test that the client stays usable after a request."""
    client = make_client(200)
    executor = RequestExecutor(client)

    executor.execute("GET", TEST_URL)
    executor.execute("GET", TEST_URL)

    assert not client.is_closed
