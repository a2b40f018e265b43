r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy"]

from abc import ABC, abstractmethod


class BaseWaitStrategy(ABC):
    r"""Abstract base class for wait strategies.

    A wait strategy determines how long the retry driver sleeps before
    repeating a write attempt that came back with a transient status.
    """

    @abstractmethod
    def compute(self, attempt: int) -> float:
        r"""Compute the wait before the next attempt.

        Args:
            attempt: The retry number (0-indexed). ``attempt=0`` is the
                wait before the second attempt, ``attempt=1`` the wait
                before the third one, etc.

        Returns:
            The wait in seconds.
        """


def check_delays(base_delay: float, max_delay: float | None) -> None:
    r"""Reject a negative base delay or a non-positive cap.

    Raises:
        ValueError: If one of the delays is invalid.
    """
    if base_delay < 0:
        msg = f"base_delay must be non-negative, got {base_delay}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)
