r"""Configuration dataclass and defaults for ``HttpTemplate``.

The configuration is an immutable value handed to the template at
construction. Nothing is read from module level state afterwards.
"""

from __future__ import annotations

__all__ = [
    "APPLICATION_JSON",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT",
    "FORM_URLENCODED",
    "READ_SUCCESS_STATUS_CODES",
    "RETRYABLE_STATUS_CODES",
    "WRITE_METHODS",
    "TemplateConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from httptemplate.retry.config import DEFAULT_MAX_ATTEMPTS, RetryPolicy
from httptemplate.status import READ_SUCCESS_STATUS_CODES, RETRYABLE_STATUS_CODES
from httptemplate.validation import validate_media_type

if TYPE_CHECKING:
    from httptemplate.codec import BodyCodec

APPLICATION_JSON = "application/json"

FORM_URLENCODED = "application/x-www-form-urlencoded"

# Default timeout in seconds, used only when the template creates its own
# httpx.Client
DEFAULT_TIMEOUT = 10.0

# Methods whose 502/503/504 responses are raised as RetryableHttpError
WRITE_METHODS = ("POST", "PUT")


@dataclass(frozen=True)
class TemplateConfig:
    r"""Configuration of an ``HttpTemplate``.

    Args:
        content_type: Default ``Content-Type`` of request bodies.
        accept_type: ``Accept`` header sent with every request.
        retry_policy: Policy of the retry loop wrapping write requests.
        codec: Optional body codec. Without one, payloads are sent as
            their string representation and typed deserialization is
            refused.

    Raises:
        ConfigurationError: If a media type is empty.

    Example:
        ```pycon
        >>> from httptemplate import TemplateConfig
        >>> from httptemplate.codec import JsonCodec
        >>> config = TemplateConfig()
        >>> config.content_type, config.accept_type
        ('application/json', 'application/json')
        >>> config.retry_policy.max_attempts
        5
        >>> merged = config.merge(accept_type="*/*", codec=JsonCodec())
        >>> merged.accept_type
        '*/*'
        >>> config.codec is None
        True

        ```
    """

    content_type: str = APPLICATION_JSON
    accept_type: str = APPLICATION_JSON
    retry_policy: RetryPolicy = field(default_factory=RetryPolicy)
    codec: BodyCodec | None = None

    def __post_init__(self) -> None:
        validate_media_type("content_type", self.content_type)
        validate_media_type("accept_type", self.accept_type)

    def merge(self, **overrides: Any) -> TemplateConfig:
        r"""Create a new config with the non-``None`` overrides applied.

        Args:
            **overrides: Fields to override.

        Returns:
            A new ``TemplateConfig``; this one is left unchanged.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
