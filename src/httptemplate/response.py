r"""Immutable HTTP response value returned by every template
operation."""

from __future__ import annotations

__all__ = ["Response"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from httptemplate.headers import map_headers
from httptemplate.status import StatusClass, classify

if TYPE_CHECKING:
    from httptemplate.headers import HeaderPairs, HeaderSource


@dataclass(frozen=True, init=False)
class Response:
    r"""A completed HTTP response with a fully buffered body.

    Args:
        status_code: The HTTP status code.
        body: The raw response body.
        headers: The response headers, as a mapping or as ``(name, value)``
            pairs. They are stored as ordered pairs, so duplicate names
            are kept in the order they were received.

    Example:
        ```pycon
        >>> from httptemplate import Response
        >>> response = Response(200, b"hello", {"foo": "bar", "bar": ["baz", "qux"]})
        >>> response.status_code
        200
        >>> response.text
        'hello'
        >>> response.headers
        (('foo', 'bar'), ('bar', 'baz'), ('bar', 'qux'))
        >>> response.get_all("BAR")
        ['baz', 'qux']
        >>> response == Response(200, b"hello", [("foo", "bar"), ("bar", "baz"), ("bar", "qux")])
        True

        ```
    """

    status_code: int
    body: bytes
    headers: HeaderPairs

    def __init__(
        self, status_code: int, body: bytes = b"", headers: HeaderSource | None = None
    ) -> None:
        object.__setattr__(self, "status_code", status_code)
        object.__setattr__(self, "body", bytes(body))
        object.__setattr__(self, "headers", map_headers(headers))

    @property
    def text(self) -> str:
        r"""The body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    @property
    def status_class(self) -> StatusClass:
        r"""The bucket the status code falls into."""
        return classify(self.status_code)

    @property
    def header_map(self) -> dict[str, list[str]]:
        r"""The headers grouped by name, in first appearance order."""
        grouped: dict[str, list[str]] = {}
        for name, value in self.headers:
            grouped.setdefault(name, []).append(value)
        return grouped

    def get_all(self, name: str) -> list[str]:
        r"""Return every value of a header.

        Args:
            name: The header name, compared case-insensitively.

        Returns:
            The values in the order they were received.
        """
        key = name.lower()
        return [value for header, value in self.headers if header.lower() == key]

    def get_header(self, name: str, default: str | None = None) -> str | None:
        r"""Return the first value of a header.

        Args:
            name: The header name, compared case-insensitively.
            default: The value returned if the header is missing.

        Returns:
            The first value of the header or ``default``.
        """
        values = self.get_all(name)
        return values[0] if values else default
