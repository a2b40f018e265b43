r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWait"]

from httptemplate.wait.base import BaseWaitStrategy, check_delays


class ExponentialWait(BaseWaitStrategy):
    r"""Double the wait after every retry.

    The wait is ``base_delay * (2 ** attempt)``, capped at ``max_delay``
    when one is given.

    Args:
        base_delay: The wait before the first retry (default: 0.3).
        max_delay: Optional cap in seconds.

    Example:
        ```pycon
        >>> from httptemplate.wait import ExponentialWait
        >>> wait = ExponentialWait(base_delay=0.3)
        >>> wait.compute(0)
        0.3
        >>> wait.compute(2)
        1.2
        >>> ExponentialWait(base_delay=1.0, max_delay=5.0).compute(10)
        5.0

        ```
    """

    def __init__(self, base_delay: float = 0.3, max_delay: float | None = None) -> None:
        check_delays(base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def compute(self, attempt: int) -> float:
        delay = self.base_delay * (2**attempt)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
