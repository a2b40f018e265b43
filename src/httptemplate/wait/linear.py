r"""Linear wait strategy."""

from __future__ import annotations

__all__ = ["LinearWait"]

from httptemplate.wait.base import BaseWaitStrategy, check_delays


class LinearWait(BaseWaitStrategy):
    r"""Grow the wait by ``base_delay`` after every retry.

    The wait is ``base_delay * (attempt + 1)``, capped at ``max_delay``
    when one is given.

    Args:
        base_delay: The wait before the first retry (default: 1.0).
        max_delay: Optional cap in seconds.

    Example:
        ```pycon
        >>> from httptemplate.wait import LinearWait
        >>> wait = LinearWait(base_delay=1.0)
        >>> wait.compute(0), wait.compute(1), wait.compute(2)
        (1.0, 2.0, 3.0)
        >>> LinearWait(base_delay=2.0, max_delay=5.0).compute(5)
        5.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        check_delays(base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def compute(self, attempt: int) -> float:
        delay = self.base_delay * (attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
