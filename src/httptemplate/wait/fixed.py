r"""Fixed wait strategy."""

from __future__ import annotations

__all__ = ["FixedWait"]

from httptemplate.wait.base import BaseWaitStrategy


class FixedWait(BaseWaitStrategy):
    r"""Wait the same amount of time before every retry.

    Args:
        delay: The wait in seconds (default: 0.01).

    Example:
        ```pycon
        >>> from httptemplate.wait import FixedWait
        >>> wait = FixedWait(delay=0.5)
        >>> wait.compute(0)
        0.5
        >>> wait.compute(7)
        0.5

        ```
    """

    def __init__(self, delay: float = 0.01) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedWait):
            return NotImplemented
        return self.delay == other.delay

    def __hash__(self) -> int:
        return hash((self.__class__, self.delay))

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
