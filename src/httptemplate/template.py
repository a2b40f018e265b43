r"""Verb oriented facade assembling executor, retry driver and codec.

``HttpTemplate`` is the entry point of the package. Reads are single
attempts, codec based writes are retried on transient statuses and
validated afterwards, raw byte writes and DELETE go out once.
"""

from __future__ import annotations

__all__ = ["HttpTemplate"]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from httptemplate.codec import default_serialize
from httptemplate.config import DEFAULT_TIMEOUT, FORM_URLENCODED, TemplateConfig
from httptemplate.exceptions import ConfigurationError, HttpRequestFailedError
from httptemplate.executor import RequestExecutor
from httptemplate.retry.driver import RetryDriver
from httptemplate.status import is_read_failed
from httptemplate.validation import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType
    from typing import Self

    from httptemplate.codec import BodyCodec
    from httptemplate.response import Response

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class HttpTemplate:
    r"""Uniform request/response facade over an ``httpx.Client``.

    When no client is given, the template creates one with ``timeout``
    and closes it on ``close()`` or when the ``with`` block exits. A
    client passed in is never closed by the template.

    Args:
        client: Optional ``httpx.Client`` used as transport.
        config: Optional ``TemplateConfig``. Defaults to JSON content and
            accept types, the default retry policy and no codec.
        timeout: Timeout of the client created when ``client`` is
            ``None``. Must be > 0.

    Example:
        ```pycon
        >>> from httptemplate import HttpTemplate, TemplateConfig
        >>> from httptemplate.codec import JsonCodec
        >>> with HttpTemplate(config=TemplateConfig(codec=JsonCodec())) as template:  # doctest: +SKIP
        ...     flights = template.get_json("https://api.example.com/flights")
        ...     template.post_and_forget("https://api.example.com/flights", {"id": 7})
        ...

        ```
    """

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        config: TemplateConfig | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._config: TemplateConfig = config or TemplateConfig()
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        self._executor = RequestExecutor(self._client, accept_type=self._config.accept_type)
        self._driver = RetryDriver(self._config.retry_policy)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self._config!r})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def config(self) -> TemplateConfig:
        r"""The configuration of this template."""
        return self._config

    def close(self) -> None:
        r"""Close the underlying client if this template created it."""
        if self._owns_client:
            self._client.close()

    ###############
    #     GET     #
    ###############

    def get(
        self,
        url: str | httpx.URL,
        *,
        consumer: Callable[[Response], None] | None = None,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
    ) -> Response:
        r"""Send a GET request without status validation.

        Args:
            url: The URL to send the GET request to.
            consumer: Optional callable receiving the response before it
                is returned.
            headers: Optional extra headers.
            params: Optional query parameters.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: If the transport fails.
        """
        response = self._executor.execute("GET", url, headers=headers, params=params)
        if consumer is not None:
            consumer(response)
        return response

    def get_as(
        self,
        url: str | httpx.URL,
        transform: Callable[[str], T],
        *,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
    ) -> T:
        r"""Send a GET request and transform its body.

        Args:
            url: The URL to send the GET request to.
            transform: Callable applied to the body text.
            headers: Optional extra headers.
            params: Optional query parameters.

        Returns:
            The transformed body.

        Raises:
            HttpRequestFailedError: If the status code is outside
                ``200..204``.
            TransportError: If the transport fails.
        """
        response = self.get(url, headers=headers, params=params)
        self._check_status("GET", url, response)
        return transform(response.text)

    def get_simple(
        self,
        url: str | httpx.URL,
        *,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
    ) -> str:
        r"""Send a GET request and return its body as text.

        Raises:
            HttpRequestFailedError: If the status code is outside
                ``200..204``.
        """
        return self.get_as(url, str, headers=headers, params=params)

    def get_json(
        self,
        url: str | httpx.URL,
        target: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
    ) -> T | Any:
        r"""Send a GET request and deserialize its body with the codec.

        Args:
            url: The URL to send the GET request to.
            target: Optional type the body is decoded into, such as a
                dataclass or ``list[Flight]``.
            headers: Optional extra headers.
            params: Optional query parameters.

        Returns:
            The decoded body.

        Raises:
            ConfigurationError: If no codec is configured. Nothing is sent
                in that case.
            HttpRequestFailedError: If the status code is outside
                ``200..204``.
        """
        codec = self._require_codec()
        response = self.get(url, headers=headers, params=params)
        self._check_status("GET", url, response)
        return codec.deserialize(response.body, target)

    def head(
        self,
        url: str | httpx.URL,
        *,
        follow_redirects: bool = True,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Send a HEAD request without status validation.

        Args:
            url: The URL to send the HEAD request to.
            follow_redirects: Whether redirects are followed.
            headers: Optional extra headers.

        Returns:
            The response, whatever its status code.
        """
        return self._executor.execute(
            "HEAD", url, headers=headers, follow_redirects=follow_redirects
        )

    ################
    #     POST     #
    ################

    def post(
        self,
        url: str | httpx.URL,
        body: Any,
        *,
        consumer: Callable[[Response], None] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Serialize ``body`` and POST it, retrying transient statuses.

        Args:
            url: The URL to send the POST request to.
            body: The payload, serialized with the codec if one is
                configured and with ``str`` otherwise.
            consumer: Optional callable receiving the response of the
                attempt that ended the retry loop.
            headers: Optional extra headers. ``Content-Type`` entries are
                ignored.

        Returns:
            The response.

        Raises:
            RetryExhaustedError: If every attempt hit 502, 503 or 504.
            HttpRequestFailedError: If the final status code is outside
                ``200..204``.
            TransportError: If the transport fails.
        """
        return self._send_with_retry("POST", url, body, consumer=consumer, headers=headers)

    def post_and_forget(
        self, url: str | httpx.URL, body: Any, *, headers: Mapping[str, str] | None = None
    ) -> None:
        r"""POST ``body`` and discard the response.

        Failures are raised exactly as with ``post``.
        """
        self.post(url, body, headers=headers)

    def post_simple(
        self, url: str | httpx.URL, body: Any, *, headers: Mapping[str, str] | None = None
    ) -> str:
        r"""POST ``body`` and return the response body as text."""
        return self.post(url, body, headers=headers).text

    def post_as(
        self,
        url: str | httpx.URL,
        body: Any,
        transform: Callable[[str], T],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> T:
        r"""POST ``body`` and transform the response body text."""
        return transform(self.post(url, body, headers=headers).text)

    def post_without_validation(
        self,
        url: str | httpx.URL,
        body: Any,
        *,
        consumer: Callable[[Response], None] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> int:
        r"""POST ``body`` with retries but without final status
        validation.

        Returns:
            The status code of the final attempt.

        Raises:
            RetryExhaustedError: If every attempt hit 502, 503 or 504.
            TransportError: If the transport fails.
        """
        response = self._send_with_retry(
            "POST", url, body, consumer=consumer, headers=headers, validate=False
        )
        return response.status_code

    def post_bytes(
        self,
        url: str | httpx.URL,
        content: bytes,
        *,
        content_type: str | None = None,
        headers: Mapping[str, str] | None = None,
        retry: bool = False,
    ) -> Response:
        r"""POST raw bytes without serialization or status validation.

        Args:
            url: The URL to send the POST request to.
            content: The request body.
            content_type: ``Content-Type`` of the body. Defaults to the
                configured content type.
            headers: Optional extra headers. ``Content-Type`` entries are
                ignored.
            retry: Whether transient statuses are retried. When
                ``False``, a single attempt is made and a 502, 503 or 504
                is raised as ``RetryableHttpError``.

        Returns:
            The response.
        """
        return self._send_bytes("POST", url, content, content_type, headers, retry)

    def post_form(
        self,
        url: str | httpx.URL,
        form_values: Mapping[str, str],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> int:
        r"""POST url-encoded form values in a single attempt.

        Args:
            url: The URL to send the form to.
            form_values: The form fields.
            headers: Optional extra headers.

        Returns:
            The status code.

        Raises:
            HttpRequestFailedError: If the status code is outside
                ``200..204``.
            TransportError: If the transport fails.
        """
        content = str(httpx.QueryParams(form_values)).encode("ascii")
        response = self._executor.execute(
            "POST",
            url,
            content=content,
            content_type=FORM_URLENCODED,
            headers=headers,
            raise_retryable=False,
        )
        self._check_status("POST", url, response)
        return response.status_code

    ###############
    #     PUT     #
    ###############

    def put(
        self,
        url: str | httpx.URL,
        body: Any,
        *,
        consumer: Callable[[Response], None] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Serialize ``body`` and PUT it, retrying transient statuses.

        Same contract as ``post``.
        """
        return self._send_with_retry("PUT", url, body, consumer=consumer, headers=headers)

    def put_and_forget(
        self, url: str | httpx.URL, body: Any, *, headers: Mapping[str, str] | None = None
    ) -> None:
        r"""PUT ``body`` and discard the response."""
        self.put(url, body, headers=headers)

    def put_as(
        self,
        url: str | httpx.URL,
        body: Any,
        transform: Callable[[str], T],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> T:
        r"""PUT ``body`` and transform the response body text."""
        return transform(self.put(url, body, headers=headers).text)

    def put_bytes(
        self,
        url: str | httpx.URL,
        content: bytes,
        *,
        content_type: str | None = None,
        headers: Mapping[str, str] | None = None,
        retry: bool = False,
    ) -> Response:
        r"""PUT raw bytes without serialization or status validation.

        Same contract as ``post_bytes``.
        """
        return self._send_bytes("PUT", url, content, content_type, headers, retry)

    ##################
    #     DELETE     #
    ##################

    def delete(
        self, url: str | httpx.URL, *, headers: Mapping[str, str] | None = None
    ) -> Response:
        r"""Send a DELETE request in a single attempt.

        Args:
            url: The URL to send the DELETE request to.
            headers: Optional extra headers.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: If the transport fails.
        """
        return self._executor.execute("DELETE", url, headers=headers)

    def _send_with_retry(
        self,
        method: str,
        url: str | httpx.URL,
        body: Any,
        *,
        consumer: Callable[[Response], None] | None,
        headers: Mapping[str, str] | None,
        validate: bool = True,
    ) -> Response:
        content = self._serialize(body)

        def attempt() -> Response:
            response = self._executor.execute(
                method,
                url,
                content=content,
                content_type=self._config.content_type,
                headers=headers,
            )
            if consumer is not None:
                consumer(response)
            return response

        return self._driver.call(
            attempt,
            method=method,
            url=str(url),
            failed_if=is_read_failed if validate else None,
        )

    def _send_bytes(
        self,
        method: str,
        url: str | httpx.URL,
        content: bytes,
        content_type: str | None,
        headers: Mapping[str, str] | None,
        retry: bool,
    ) -> Response:
        def attempt() -> Response:
            return self._executor.execute(
                method,
                url,
                content=bytes(content),
                content_type=content_type or self._config.content_type,
                headers=headers,
            )

        if retry:
            return self._driver.call(attempt, method=method, url=str(url))
        return attempt()

    def _serialize(self, body: Any) -> bytes:
        if self._config.codec is None:
            return default_serialize(body)
        return self._config.codec.serialize(body)

    def _require_codec(self) -> BodyCodec:
        if self._config.codec is None:
            msg = "A codec must be configured for typed deserialization"
            raise ConfigurationError(msg)
        return self._config.codec

    @staticmethod
    def _check_status(method: str, url: str | httpx.URL, response: Response) -> None:
        if is_read_failed(response.status_code):
            logger.debug(f"{method} request to {url} failed with status {response.status_code}")
            raise HttpRequestFailedError(
                method=method,
                url=str(url),
                message=(
                    f"{method} request to {url} failed with status "
                    f"{response.status_code}. response: {response.text}"
                ),
                status_code=response.status_code,
                response=response,
            )
