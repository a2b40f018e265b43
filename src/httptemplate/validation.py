r"""Parameter validation for template and retry configuration.

Invalid values are reported as ``ConfigurationError`` before any request
is issued.
"""

from __future__ import annotations

__all__ = [
    "validate_max_attempts",
    "validate_media_type",
    "validate_timeout",
    "validate_wait_params",
]

from typing import TYPE_CHECKING

from httptemplate.exceptions import ConfigurationError

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    r"""Validate the timeout used when the template creates its own
    client.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ConfigurationError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from httptemplate.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        httptemplate.exceptions.ConfigurationError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ConfigurationError(msg)


def validate_media_type(name: str, value: str) -> None:
    r"""Validate a content or accept type.

    Args:
        name: The parameter name, used in the error message.
        value: The media type.

    Raises:
        ConfigurationError: If the media type is empty.
    """
    if not isinstance(value, str) or not value.strip():
        msg = f"{name} must be a non-empty string, got {value!r}"
        raise ConfigurationError(msg)


def validate_max_attempts(max_attempts: int) -> None:
    r"""Validate the maximum number of attempts of the retry loop.

    Args:
        max_attempts: Total number of attempts, the first one included.
            Must be an integer >= 1.

    Raises:
        ConfigurationError: If max_attempts is not an integer or is lower
            than 1.
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an int, got {type(max_attempts).__name__}"
        raise ConfigurationError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ConfigurationError(msg)


def validate_wait_params(jitter_factor: float = 0.0, max_wait_time: float | None = None) -> None:
    r"""Validate the parameters shaping the wait between attempts.

    Args:
        jitter_factor: Factor for adding random jitter to waits.
            Must be >= 0.
        max_wait_time: Optional cap on a single wait. Must be > 0 if
            provided.

    Raises:
        ConfigurationError: If one of the parameters is out of range.
    """
    if jitter_factor < 0:
        msg = f"jitter_factor must be >= 0, got {jitter_factor}"
        raise ConfigurationError(msg)
    if max_wait_time is not None and max_wait_time <= 0:
        msg = f"max_wait_time must be > 0, got {max_wait_time}"
        raise ConfigurationError(msg)
