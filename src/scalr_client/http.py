"""HTTP request layer for the Scalr API.

``HTTPClient`` and ``AsyncHTTPClient`` wrap an httpx client whose transport
is a retrying transport from ``scalr_client.transport``. They add the bearer
token and JSON:API headers, encode request bodies, log each exchange and turn
error responses into exceptions from ``scalr_client.errors``.

Header precedence, lowest first:

1. ``Authorization``, ``User-Agent``, ``Content-Type`` and ``Accept``
2. the client's default headers (``headers=`` and ``with_header``)
3. the headers passed to a single call

Example:
    ```python
    from scalr_client.http import HTTPClient

    with HTTPClient("https://example.scalr.io/api/iacp/v3/", token) as http:
        response = http.get("environments", params={"page[size]": 10})
        print(response.json())
    ```
"""

import copy
import json
import logging
import time
from collections.abc import Mapping
from typing import Any

import httpx

from scalr_client.errors import TransportError, exception_for
from scalr_client.jsonapi import MEDIA_TYPE
from scalr_client.log import sanitize_headers, sanitize_url
from scalr_client.transport import ATTEMPTS_EXTENSION, AsyncRetryTransport, RetryTransport
from scalr_client.version import user_agent as default_user_agent
from scalr_client.version import user_agent_with_app

logger = logging.getLogger(__name__)

DEFAULT_RETRY_MAX = 5
DEFAULT_TIMEOUT = 30.0

Body = Mapping[str, Any] | list[Any] | bytes | str | None


def encode_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Query parameters as strings.

    ``None`` and ``""`` are dropped, booleans become ``true``/``false`` and
    sequences are joined with commas.
    """
    encoded: dict[str, str] = {}
    for name, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            encoded[name] = "true" if value else "false"
        elif isinstance(value, list | tuple | set):
            encoded[name] = ",".join(str(item) for item in value)
        else:
            encoded[name] = str(value)
    return encoded


class _BaseHTTPClient:
    """Header handling, body encoding and logging shared by both clients."""

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        retry_max: int = DEFAULT_RETRY_MAX,
        retry_server_errors: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
        user_agent: str | None = None,
        app_info: tuple[str, str] | None = None,
        backoff_base: float = 1.0,
    ) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url
        self.retry_max = retry_max
        self.retry_server_errors = retry_server_errors
        self.timeout = timeout
        self.backoff_base = backoff_base

        if user_agent is None:
            user_agent = user_agent_with_app(*app_info) if app_info else default_user_agent()
        self.user_agent = user_agent

        self._token = token
        self._headers = httpx.Headers(headers or {})

    @property
    def headers(self) -> httpx.Headers:
        """Copy of the client's default headers."""
        return httpx.Headers(self._headers)

    def with_header(self, key: str, value: str):
        """Return a client that also sends ``key: value`` on every request.

        The copy shares the connection pool with this client; closing either
        closes both. This client's headers are left untouched.
        """
        clone = copy.copy(self)
        clone._headers = httpx.Headers(self._headers)
        clone._headers[key] = value
        return clone

    def _retry_policy(self) -> dict[str, Any]:
        return {
            "max_retries": self.retry_max,
            "retry_server_errors": self.retry_server_errors,
            "backoff_base": self.backoff_base,
        }

    def _merge_headers(self, headers: Mapping[str, str] | None) -> httpx.Headers:
        merged = httpx.Headers(
            {
                "Authorization": f"Bearer {self._token}",
                "User-Agent": self.user_agent,
                "Content-Type": MEDIA_TYPE,
                "Accept": MEDIA_TYPE,
            }
        )
        merged.update(self._headers)
        if headers:
            merged.update(headers)
        return merged

    def _build_request(
        self,
        client: httpx.Client | httpx.AsyncClient,
        method: str,
        path: str,
        body: Body,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
    ) -> httpx.Request:
        method = method.upper()
        content = self._encode_body(body)
        request = client.build_request(
            method,
            path.lstrip("/"),
            params=params,
            content=content,
            headers=self._merge_headers(headers),
        )
        url = sanitize_url(str(request.url))
        logger.debug(f"Starting HTTP request: {method} {url}")
        if content is not None:
            logger.debug(f"Request body prepared: {method} {url} (bodySize={len(content)})")
        logger.debug(f"Sending HTTP request: {method} {url} headers={sanitize_headers(request.headers.multi_items())}")
        return request

    @staticmethod
    def _encode_body(body: Body) -> bytes | None:
        if body is None:
            return None
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode()
        return json.dumps(body).encode()

    def _transport_failed(self, request: httpx.Request, error: httpx.TransportError) -> TransportError:
        url = sanitize_url(str(request.url))
        logger.error(f"HTTP request failed after all retries: {request.method} {url}: {error}")
        return TransportError(f"request failed after {self.retry_max} retries: {error}")

    def _check_response(self, request: httpx.Request, response: httpx.Response, started: float) -> httpx.Response:
        url = sanitize_url(str(request.url))
        elapsed = time.monotonic() - started
        attempts = response.extensions.get(ATTEMPTS_EXTENSION, 1)
        logger.debug(f"Received HTTP response: {request.method} {url} status={response.status_code} ({elapsed:.3f}s)")

        if response.status_code >= 400:
            error = exception_for(response)
            logger.error(
                f"HTTP request returned error: {request.method} {url} status={response.status_code} "
                f"(attempts={attempts}): {error}"
            )
            raise error

        logger.info(
            f"HTTP request completed successfully: {request.method} {url} "
            f"status={response.status_code} (attempts={attempts}, {elapsed:.3f}s)"
        )
        return response


class HTTPClient(_BaseHTTPClient):
    """Synchronous Scalr HTTP client.

    Args:
        base_url: API root, e.g. ``https://example.scalr.io/api/iacp/v3/``.
        token: Bearer token.
        retry_max: Retries after the first attempt.
        retry_server_errors: Also retry 5xx responses.
        timeout: Per-request timeout in seconds.
        headers: Default headers sent with every request.
        user_agent: Replaces the generated ``User-Agent``.
        app_info: ``(name, version)`` appended to the generated ``User-Agent``.
        transport: Innermost httpx transport, e.g. ``httpx.MockTransport``.
        backoff_base: Base of the exponential backoff, in seconds.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        transport: httpx.BaseTransport | None = None,
        **options: Any,
    ) -> None:
        super().__init__(base_url, token, **options)
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=RetryTransport(wrapped_transport=transport or httpx.HTTPTransport(), **self._retry_policy()),
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Body = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and return the response.

        Raises:
            HTTPError: The API answered with a status of 400 or above.
            TransportError: No response arrived, even after retrying.
        """
        request = self._build_request(self._client, method, path, body, params, headers)
        started = time.monotonic()
        try:
            response = self._client.send(request)
        except httpx.TransportError as e:
            raise self._transport_failed(request, e) from e
        return self._check_response(request, response, started)

    def get(self, path: str, *, params=None, headers=None) -> httpx.Response:
        return self.request("GET", path, params=params, headers=headers)

    def post(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return self.request("POST", path, body=body, params=params, headers=headers)

    def patch(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return self.request("PATCH", path, body=body, params=params, headers=headers)

    def put(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return self.request("PUT", path, body=body, params=params, headers=headers)

    def delete(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return self.request("DELETE", path, body=body, params=params, headers=headers)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncHTTPClient(_BaseHTTPClient):
    """``HTTPClient`` counterpart for asyncio code.

    Takes the same arguments; ``transport`` must be an async httpx transport.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ) -> None:
        super().__init__(base_url, token, **options)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=AsyncRetryTransport(
                wrapped_transport=transport or httpx.AsyncHTTPTransport(), **self._retry_policy()
            ),
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Body = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        request = self._build_request(self._client, method, path, body, params, headers)
        started = time.monotonic()
        try:
            response = await self._client.send(request)
        except httpx.TransportError as e:
            raise self._transport_failed(request, e) from e
        return self._check_response(request, response, started)

    async def get(self, path: str, *, params=None, headers=None) -> httpx.Response:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return await self.request("POST", path, body=body, params=params, headers=headers)

    async def patch(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return await self.request("PATCH", path, body=body, params=params, headers=headers)

    async def put(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return await self.request("PUT", path, body=body, params=params, headers=headers)

    async def delete(self, path: str, body: Body = None, *, params=None, headers=None) -> httpx.Response:
        return await self.request("DELETE", path, body=body, params=params, headers=headers)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
