from __future__ import annotations

from typing import TYPE_CHECKING, Union
from unittest.mock import Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

# A scripted reply: a status code, a ``(status, body, headers)`` tuple, or an
# exception raised by the transport.
Reply = Union[int, tuple, Exception]

TEST_URL = "https://api.example.com/data"


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def seen_requests() -> list[httpx.Request]:
    """Collect the requests received by the mock transport."""
    return []


@pytest.fixture
def make_client(seen_requests: list[httpx.Request]) -> Callable[..., httpx.Client]:
    """Create an httpx.Client whose transport plays scripted replies.

    Replies are consumed in order; the last one is repeated once the
    others are used up. Bodies are served from a plain byte stream so
    no ``Content-Length`` header is added to the scripted headers.
    """

    def _make(*replies: Reply) -> httpx.Client:
        queue = list(replies)

        def handler(request: httpx.Request) -> httpx.Response:
            request.read()
            seen_requests.append(request)
            reply = queue.pop(0) if len(queue) > 1 else queue[0]
            if isinstance(reply, Exception):
                raise reply
            if isinstance(reply, int):
                reply = (reply, b"", ())
            status_code, body, headers = reply
            return httpx.Response(
                status_code, headers=list(headers), stream=httpx.ByteStream(body)
            )

        return httpx.Client(transport=httpx.MockTransport(handler))

    return _make
