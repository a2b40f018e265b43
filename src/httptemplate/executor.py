r"""Single attempt request execution.

``RequestExecutor`` performs exactly one round trip through an
``httpx.Client`` and turns the result into a ``Response``. Retrying is
left to ``RetryDriver`` one layer up.
"""

from __future__ import annotations

__all__ = ["RequestExecutor"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from httptemplate.config import APPLICATION_JSON, WRITE_METHODS
from httptemplate.exceptions import RetryableHttpError, TransportError
from httptemplate.headers import build_request_headers
from httptemplate.response import Response
from httptemplate.status import is_write_retryable
from httptemplate.validation import validate_media_type

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)


class RequestExecutor:
    r"""Issue one request and normalise its response.

    Args:
        client: The ``httpx.Client`` used as transport. The executor never
            closes it.
        accept_type: The ``Accept`` header sent with every request.

    Example:
        ```pycon
        >>> import httpx
        >>> from httptemplate.executor import RequestExecutor
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))
        >>> executor = RequestExecutor(httpx.Client(transport=transport))
        >>> executor.execute("GET", "https://api.example.com/data").text
        'ok'

        ```
    """

    def __init__(self, client: httpx.Client, accept_type: str = APPLICATION_JSON) -> None:
        validate_media_type("accept_type", accept_type)
        self._client = client
        self._accept_type = accept_type

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(accept_type={self._accept_type!r})"

    def execute(
        self,
        method: str,
        url: str | httpx.URL,
        *,
        content: bytes | None = None,
        content_type: str | None = None,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
        follow_redirects: bool = True,
        raise_retryable: bool | None = None,
    ) -> Response:
        r"""Perform a single request.

        ``Accept`` is always set to the configured accept type and, when a
        body is sent, ``Content-Type`` to ``content_type``. Extra headers
        named ``Content-Type`` are ignored.

        Args:
            method: The HTTP method.
            url: The target URL.
            content: Optional request body.
            content_type: The ``Content-Type`` of the body. Ignored when
                there is no body.
            headers: Optional extra headers.
            params: Optional query parameters, in any form accepted by
                ``httpx``.
            follow_redirects: Whether redirects are followed.
            raise_retryable: Whether a 502, 503 or 504 status raises
                ``RetryableHttpError``. Defaults to ``True`` for POST and
                PUT and ``False`` otherwise.

        Returns:
            The response, with its body fully read.

        Raises:
            TransportError: If the transport fails before a response is
                available.
            RetryableHttpError: If ``raise_retryable`` applies and the
                status code is transient.
        """
        method = method.upper()
        if raise_retryable is None:
            raise_retryable = method in WRITE_METHODS
        request_headers = build_request_headers(
            accept_type=self._accept_type,
            content_type=content_type if content is not None else None,
            extra_headers=headers,
        )

        logger.debug(f"Sending {method} request to {url}")
        try:
            with self._client.stream(
                method,
                url,
                content=content,
                headers=request_headers,
                params=params,
                follow_redirects=follow_redirects,
            ) as raw_response:
                raw_response.read()
                response = Response(
                    status_code=raw_response.status_code,
                    body=raw_response.content,
                    headers=raw_response.headers,
                )
        except httpx.RequestError as exc:
            logger.debug(f"{method} request to {url} encountered {type(exc).__name__}: {exc}")
            raise TransportError(
                method=method,
                url=str(url),
                message=f"{method} request to {url} failed: {exc}",
                cause=exc,
            ) from exc

        logger.debug(f"{method} request to {url} returned status {response.status_code}")
        if raise_retryable and is_write_retryable(response.status_code):
            logger.warning(f"{method} request to {url} hit server error {response.status_code}")
            raise RetryableHttpError(
                method=method,
                url=str(url),
                message=(
                    f"{method} failed to: {url}. Status = {response.status_code}, "
                    f"message = {response.text}"
                ),
                status_code=response.status_code,
                response=response,
            )
        return response
