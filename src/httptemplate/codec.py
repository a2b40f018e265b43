r"""Body codecs turning payloads into request bodies and response bodies
into values.

A template works without a codec: payloads are then sent as their string
representation and responses are only available as text or bytes.
"""

from __future__ import annotations

__all__ = ["BodyCodec", "JsonCodec", "convert", "default_serialize"]

import collections.abc
import dataclasses
import json
from types import UnionType
from typing import Any, Protocol, Union, get_args, get_origin, get_type_hints, runtime_checkable


@runtime_checkable
class BodyCodec(Protocol):
    r"""Define the interface of a body codec."""

    def serialize(self, value: Any) -> bytes:
        r"""Encode a payload into a request body."""

    def deserialize(self, data: bytes, target: Any = None) -> Any:
        r"""Decode a response body, optionally into ``target``."""


def default_serialize(value: Any) -> bytes:
    r"""Encode a payload when no codec is configured.

    Args:
        value: The payload. ``bytes`` are sent as is, ``None`` as
            ``null`` and anything else is converted with ``str``.

    Returns:
        The UTF-8 encoded body.

    Example:
        ```pycon
        >>> from httptemplate.codec import default_serialize
        >>> default_serialize({"a": 1})
        b"{'a': 1}"
        >>> default_serialize(None)
        b'null'

        ```
    """
    if value is None:
        return b"null"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value).encode("utf-8")


class JsonCodec:
    r"""JSON codec built on the standard ``json`` module.

    Dataclass instances are serialized through ``dataclasses.asdict``.
    When a target type is given, the decoded value is converted into it:

    - ``list[X]``, ``set[X]``, ``tuple[X, ...]`` and ``dict[str, X]`` are
      converted element by element.
    - ``X | None`` converts non-null values into ``X``.
    - Dataclasses are built from the keys matching their fields, nested
      dataclass fields included. Unknown keys are ignored.
    - Other classes receive a JSON object as keyword arguments and any
      other value positionally.

    An empty body decodes to ``None`` whatever the target.

    Args:
        **dumps_kwargs: Extra keyword arguments for ``json.dumps``.

    Example:
        ```pycon
        >>> from dataclasses import dataclass
        >>> from httptemplate.codec import JsonCodec
        >>> @dataclass
        ... class Flight:
        ...     carrier: str
        ...     number: int
        ...
        >>> codec = JsonCodec()
        >>> codec.serialize(Flight("AA", 100))
        b'{"carrier": "AA", "number": 100}'
        >>> codec.deserialize(b'{"carrier": "UA", "number": 7, "gate": "B4"}', Flight)
        Flight(carrier='UA', number=7)
        >>> codec.deserialize(b'[{"carrier": "DL", "number": 1}]', list[Flight])
        [Flight(carrier='DL', number=1)]
        >>> codec.deserialize(b"[1, 2]")
        [1, 2]

        ```
    """

    def __init__(self, **dumps_kwargs: Any) -> None:
        self._dumps_kwargs = dumps_kwargs

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def serialize(self, value: Any) -> bytes:
        return json.dumps(value, default=self._default, **self._dumps_kwargs).encode("utf-8")

    def deserialize(self, data: bytes, target: Any = None) -> Any:
        if not data:
            return None
        return convert(json.loads(data), target)

    @staticmethod
    def _default(value: Any) -> Any:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return dataclasses.asdict(value)
        msg = f"Object of type {type(value).__name__} is not JSON serializable"
        raise TypeError(msg)


def convert(value: Any, target: Any) -> Any:
    r"""Convert a decoded JSON value into ``target``.

    Args:
        value: The value returned by ``json.loads``.
        target: A class, a parameterized generic such as ``list[X]`` or
            ``dict[str, X]``, an optional type, or ``None``/``Any`` to
            keep the value unchanged.

    Returns:
        The converted value. ``None`` is always returned unchanged.

    Example:
        ```pycon
        >>> from httptemplate.codec import convert
        >>> convert({"a": "1", "b": "2"}, dict[str, int])
        {'a': 1, 'b': 2}
        >>> convert(None, int) is None
        True

        ```
    """
    if value is None or target is None or target is Any:
        return value
    origin = get_origin(target)
    if origin is not None:
        return _convert_generic(value, origin, get_args(target))
    if dataclasses.is_dataclass(target) and isinstance(value, dict):
        hints = get_type_hints(target)
        kwargs = {
            f.name: convert(value[f.name], hints.get(f.name))
            for f in dataclasses.fields(target)
            if f.init and f.name in value
        }
        return target(**kwargs)
    if isinstance(value, target):
        return value
    if isinstance(value, dict):
        return target(**value)
    return target(value)


def _convert_generic(value: Any, origin: Any, args: tuple[Any, ...]) -> Any:
    if origin is Union or origin is UnionType:
        options = [arg for arg in args if arg is not type(None)]
        return convert(value, options[0]) if len(options) == 1 else value
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(convert(item, args[0]) for item in value)
        if args:
            return tuple(convert(item, arg) for item, arg in zip(value, args))
        return tuple(value)
    if origin in (list, set, frozenset) or origin in (
        collections.abc.Sequence,
        collections.abc.Iterable,
        collections.abc.Collection,
    ):
        item_type = args[0] if args else None
        container = origin if origin in (list, set, frozenset) else list
        return container(convert(item, item_type) for item in value)
    if origin is dict or origin is collections.abc.Mapping:
        value_type = args[1] if len(args) == 2 else None
        return {key: convert(item, value_type) for key, item in value.items()}
    return value
