r"""Header conversion helpers.

``map_headers`` turns whatever the transport hands back into the ordered
``(name, value)`` pairs stored on ``Response``. ``build_request_headers``
assembles the outgoing headers so that content negotiation is always
controlled by the template, never by caller supplied extras.
"""

from __future__ import annotations

__all__ = ["HeaderPairs", "build_request_headers", "map_headers"]

from collections.abc import Iterable, Mapping
from typing import Union

import httpx

HeaderPairs = tuple[tuple[str, str], ...]

HeaderSource = Union[httpx.Headers, Mapping[str, object], Iterable[tuple[object, object]]]


def _to_str(value: str | bytes, encoding: str = "utf-8") -> str:
    if isinstance(value, bytes):
        return value.decode(encoding)
    return str(value)


def map_headers(headers: HeaderSource | None) -> HeaderPairs:
    r"""Convert a header collection into ordered ``(name, value)`` pairs.

    Header name case is preserved and duplicate names stay as separate
    entries in the order they were received.

    Args:
        headers: An ``httpx.Headers`` instance, a mapping from name to a
            value or an iterable of values, or an iterable of
            ``(name, value)`` pairs. ``None`` means no headers.

    Returns:
        The headers as a tuple of ``(name, value)`` pairs.

    Example:
        ```pycon
        >>> import httpx
        >>> from httptemplate.headers import map_headers
        >>> map_headers(httpx.Headers([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]))
        (('Set-Cookie', 'a=1'), ('Set-Cookie', 'b=2'))
        >>> map_headers({"foo": "bar", "bar": ["baz", "qux"]})
        (('foo', 'bar'), ('bar', 'baz'), ('bar', 'qux'))

        ```
    """
    if headers is None:
        return ()
    if isinstance(headers, httpx.Headers):
        # ``raw`` keeps the original name case, unlike ``multi_items``
        return tuple(
            (_to_str(name, headers.encoding), _to_str(value, headers.encoding))
            for name, value in headers.raw
        )
    if isinstance(headers, Mapping):
        pairs = []
        for name, value in headers.items():
            if isinstance(value, (str, bytes)):
                pairs.append((_to_str(name), _to_str(value)))
            else:
                pairs.extend((_to_str(name), _to_str(item)) for item in value)
        return tuple(pairs)
    return tuple((_to_str(name), _to_str(value)) for name, value in headers)


def build_request_headers(
    accept_type: str,
    content_type: str | None = None,
    extra_headers: Mapping[str, str] | None = None,
) -> httpx.Headers:
    r"""Build the headers of an outgoing request.

    Extra headers are applied first. Any extra header named
    ``Content-Type`` (in any case) is dropped. ``Accept`` is then set to
    ``accept_type`` and, when a body is sent, ``Content-Type`` to
    ``content_type``. Extra headers whose names only differ by case
    collapse into one header holding the last supplied value.

    Args:
        accept_type: The value of the ``Accept`` header.
        content_type: The value of the ``Content-Type`` header, or
            ``None`` when the request has no body.
        extra_headers: Additional headers supplied by the caller.

    Returns:
        The outgoing headers.

    Example:
        ```pycon
        >>> from httptemplate.headers import build_request_headers
        >>> headers = build_request_headers(
        ...     "application/json",
        ...     content_type="text/plain",
        ...     extra_headers={"content-type": "image/png", "X-Trace": "abc"},
        ... )
        >>> headers["Content-Type"], headers["Accept"], headers["X-Trace"]
        ('text/plain', 'application/json', 'abc')

        ```
    """
    headers = httpx.Headers()
    for name, value in (extra_headers or {}).items():
        if name.lower() == "content-type":
            continue
        headers[name] = value
    headers["Accept"] = accept_type
    if content_type is not None:
        headers["Content-Type"] = content_type
    return headers
