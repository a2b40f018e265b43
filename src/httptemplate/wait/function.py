r"""Wait strategy backed by a plain function."""

from __future__ import annotations

__all__ = ["FunctionWait"]

from typing import TYPE_CHECKING

from httptemplate.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable


class FunctionWait(BaseWaitStrategy):
    r"""Delegate the wait computation to a function of the retry number.

    Args:
        func: A function mapping the retry number (0-indexed) to a wait
            in seconds.

    Example:
        ```pycon
        >>> from httptemplate.wait import FunctionWait
        >>> wait = FunctionWait(lambda attempt: 0.5 * attempt)
        >>> wait.compute(3)
        1.5

        ```
    """

    def __init__(self, func: Callable[[int], float]) -> None:
        self.func = func

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(func={self.func!r})"

    def compute(self, attempt: int) -> float:
        delay = self.func(attempt)
        if delay < 0:
            msg = f"wait function returned a negative delay: {delay}"
            raise ValueError(msg)
        return delay
