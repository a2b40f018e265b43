r"""httptemplate - Uniform HTTP request/response template over httpx.

This package wraps an ``httpx.Client`` behind verb oriented operations that
all return the same immutable ``Response`` value: status code, fully
buffered body and ordered headers.

Key Features:
    - One ``Response`` type for GET, HEAD, POST, PUT and DELETE
    - Bounded retry of POST/PUT on transient server statuses (502, 503, 504)
    - Fixed, linear, exponential or custom waits between attempts
    - Optional body codec (JSON included) for structured payloads
    - ``Accept`` and ``Content-Type`` always controlled by the template
    - Structured errors for transport faults and failed statuses

Example:
    ```pycon
    >>> from httptemplate import HttpTemplate, TemplateConfig
    >>> from httptemplate.retry import RetryPolicy
    >>> from httptemplate.wait import ExponentialWait
    >>> config = TemplateConfig(
    ...     retry_policy=RetryPolicy(max_attempts=3, wait=ExponentialWait(base_delay=0.5))
    ... )
    >>> with HttpTemplate(config=config) as template:  # doctest: +SKIP
    ...     body = template.get_simple("https://api.example.com/data")
    ...     response = template.post("https://api.example.com/data", {"key": "value"})
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "HttpRequestError",
    "HttpRequestFailedError",
    "HttpTemplate",
    "HttpTemplateError",
    "JsonCodec",
    "RequestExecutor",
    "Response",
    "RetryDriver",
    "RetryExhaustedError",
    "RetryPolicy",
    "RetryableHttpError",
    "StatusClass",
    "TemplateConfig",
    "TransportError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from httptemplate.codec import JsonCodec
from httptemplate.config import TemplateConfig
from httptemplate.exceptions import (
    ConfigurationError,
    HttpRequestError,
    HttpRequestFailedError,
    HttpTemplateError,
    RetryableHttpError,
    RetryExhaustedError,
    TransportError,
)
from httptemplate.executor import RequestExecutor
from httptemplate.response import Response
from httptemplate.retry import RetryDriver, RetryPolicy
from httptemplate.status import StatusClass
from httptemplate.template import HttpTemplate

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
