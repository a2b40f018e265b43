r"""Unit tests for the Response value."""

from __future__ import annotations

import dataclasses

import pytest

from httptemplate import Response, StatusClass

##############################
#     Tests for Response     #
##############################


def test_response_round_trip() -> None:
    """Test that accessors return the exact values given."""
    headers = (("Content-Type", "text/plain"), ("X-Id", "1"))
    response = Response(201, b"\x00\xffbody", headers)

    assert response.status_code == 201
    assert response.body == b"\x00\xffbody"
    assert response.headers == headers


def test_response_defaults() -> None:
    """Test a response built from a status code only."""
    response = Response(204)
    assert response.body == b""
    assert response.headers == ()


def test_response_body_is_copied_to_bytes() -> None:
    """Test that a bytearray body is materialized as bytes."""
    body = bytearray(b"abc")
    response = Response(200, body)
    body.extend(b"def")

    assert isinstance(response.body, bytes)
    assert response.body == b"abc"


def test_response_headers_from_mapping() -> None:
    """Test that mapping headers become ordered pairs."""
    response = Response(200, b"", {"foo": "bar", "bar": ["baz", "qux"]})
    assert response.headers == (("foo", "bar"), ("bar", "baz"), ("bar", "qux"))


def test_response_duplicate_headers_preserved() -> None:
    """Test that duplicate names stay separate entries."""
    response = Response(200, b"", [("Set-Cookie", "a=1"), ("X", "y"), ("Set-Cookie", "b=2")])

    assert response.get_all("set-cookie") == ["a=1", "b=2"]
    assert response.header_map == {"Set-Cookie": ["a=1", "b=2"], "X": ["y"]}


def test_response_get_header() -> None:
    """Test case-insensitive lookup of the first header value."""
    response = Response(200, b"", [("ETag", "v1"), ("etag", "v2")])

    assert response.get_header("etag") == "v1"
    assert response.get_header("missing") is None
    assert response.get_header("missing", "default") == "default"


def test_response_text() -> None:
    """Test that the body is decoded as UTF-8."""
    assert Response(200, "héllo".encode()).text == "héllo"


def test_response_text_invalid_utf8() -> None:
    """Test that undecodable bytes are replaced."""
    assert Response(200, b"ok\xff").text == "ok�"


def test_response_equality() -> None:
    """Test structural equality over the three fields."""
    assert Response(200, b"a", {"k": "v"}) == Response(200, b"a", [("k", "v")])
    assert Response(200, b"a", {"k": "v"}) != Response(201, b"a", {"k": "v"})
    assert Response(200, b"a", {"k": "v"}) != Response(200, b"b", {"k": "v"})
    assert Response(200, b"a", {"k": "v"}) != Response(200, b"a", {"k": "w"})


def test_response_header_order_matters() -> None:
    """Test that header order is part of equality."""
    assert Response(200, b"", [("a", "1"), ("b", "2")]) != Response(
        200, b"", [("b", "2"), ("a", "1")]
    )


def test_response_is_hashable() -> None:
    """Test that equal responses hash alike."""
    assert hash(Response(200, b"a", {"k": "v"})) == hash(Response(200, b"a", [("k", "v")]))


def test_response_is_immutable() -> None:
    """Test that fields cannot be reassigned."""
    response = Response(200)
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.status_code = 500  # type: ignore[misc]


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [(200, StatusClass.SUCCESS), (404, StatusClass.CLIENT_FAILURE), (503, StatusClass.RETRYABLE)],
)
def test_response_status_class(status_code: int, expected: StatusClass) -> None:
    """Test the status class accessor."""
    assert Response(status_code).status_class is expected
