"""Retrying transports for the Scalr HTTP client.

``RetryTransport`` (sync) and ``AsyncRetryTransport`` wrap another httpx
transport and repeat a request when:

| Condition | Retried |
|---|---|
| 429 Too Many Requests | always, any method |
| 5xx | only with ``retry_server_errors=True`` |
| ``httpx.TransportError`` (connect, read, timeout) | always |

Before retry ``n`` the transport sleeps ``cap + uniform(0, cap)`` seconds with
``cap = backoff_base * 2**n``. Delays above ``max_backoff`` collapse to
``max_backoff + uniform(0, 1)``. A ``Retry-After`` header on a 429, either
seconds or an HTTP-date, replaces the computed delay, bounded by
``max_backoff``.

Once the attempts run out the last response is returned for the caller to
classify, or the last network error is re-raised.

Example:
    ```python
    import httpx

    from scalr_client.transport import RetryTransport

    transport = RetryTransport(wrapped_transport=httpx.HTTPTransport(), max_retries=5)
    with httpx.Client(transport=transport) as client:
        client.get("https://example.scalr.io/api/iacp/v3/environments")
    ```
"""

import asyncio
import logging
import math
import random
import time
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

from scalr_client.log import sanitize_url

logger = logging.getLogger(__name__)

ATTEMPTS_EXTENSION = "scalr_client.attempts"


def parse_retry_after(value: str | None) -> float | None:
    """Seconds requested by a ``Retry-After`` header value.

    Accepts delta-seconds, fractional or not, and HTTP-dates. Returns None for
    anything unparsable, negative or already in the past.
    """
    if not value:
        return None

    try:
        delay = float(value)
    except ValueError:
        try:
            retry_date = parsedate_to_datetime(value)
        except (ValueError, TypeError):
            return None
        delay = (retry_date - datetime.now(UTC)).total_seconds()

    if not math.isfinite(delay) or delay < 0:
        return None
    return delay


class _RetryPolicy:
    """Decisions shared by the sync and async transports."""

    def __init__(
        self,
        *,
        max_retries: int = 5,
        retry_server_errors: bool = False,
        backoff_base: float = 1.0,
        max_backoff: float = 32.0,
    ) -> None:
        self.max_retries = max_retries
        self.retry_server_errors = retry_server_errors
        self.backoff_base = backoff_base
        self.max_backoff = max_backoff

    def _retry_delay(self, request: httpx.Request, response: httpx.Response, retries: int) -> float | None:
        """Seconds to wait before the next attempt, or None to stop."""
        if retries >= self.max_retries:
            return None

        status = response.status_code
        url = sanitize_url(str(request.url))
        if status == 429:
            logger.warning(f"Rate limit encountered: {request.method} {url} (attempt {retries + 1})")
            delay = self._parse_retry_after(response)
            return delay if delay is not None else self._calculate_backoff_delay(retries + 1)

        if status >= 500 and self.retry_server_errors:
            logger.warning(
                f"Server error encountered: {request.method} {url} returned {status} (attempt {retries + 1})"
            )
            return self._calculate_backoff_delay(retries + 1)

        return None

    def _parse_retry_after(self, response: httpx.Response) -> float | None:
        delay = parse_retry_after(response.headers.get("Retry-After"))
        if delay is None:
            return None
        return min(delay, self.max_backoff)

    def _calculate_backoff_delay(self, retry_number: int) -> float:
        """Exponential backoff with jitter for retry ``retry_number`` (1-based)."""
        cap = self.backoff_base * (2**retry_number)
        delay = cap + random.uniform(0, cap)
        if delay > self.max_backoff:
            delay = self.max_backoff + random.uniform(0, 1)
        return delay

    def _log_retry(self, request: httpx.Request, reason: object, delay: float, retries: int) -> None:
        logger.warning(
            f"Retrying HTTP request {request.method} {sanitize_url(str(request.url))} after {reason}, "
            f"retrying in {delay:.2f}s (attempt {retries}/{self.max_retries})"
        )


class RetryTransport(_RetryPolicy, httpx.BaseTransport):
    """Synchronous retrying transport."""

    def __init__(self, *, wrapped_transport: httpx.BaseTransport, **policy) -> None:
        super().__init__(**policy)
        self._wrapped_transport = wrapped_transport

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        retries = 0
        while True:
            try:
                response = self._wrapped_transport.handle_request(request)
            except httpx.TransportError as e:
                if retries >= self.max_retries:
                    raise
                retries += 1
                delay = self._calculate_backoff_delay(retries)
                self._log_retry(request, e, delay, retries)
                time.sleep(delay)
                continue

            delay = self._retry_delay(request, response, retries)
            if delay is None:
                response.extensions[ATTEMPTS_EXTENSION] = retries + 1
                return response

            response.close()
            retries += 1
            self._log_retry(request, response.status_code, delay, retries)
            time.sleep(delay)

    def close(self) -> None:
        self._wrapped_transport.close()


class AsyncRetryTransport(_RetryPolicy, httpx.AsyncBaseTransport):
    """Asynchronous retrying transport, sleeping with ``asyncio.sleep``."""

    def __init__(self, *, wrapped_transport: httpx.AsyncBaseTransport, **policy) -> None:
        super().__init__(**policy)
        self._wrapped_transport = wrapped_transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        retries = 0
        while True:
            try:
                response = await self._wrapped_transport.handle_async_request(request)
            except httpx.TransportError as e:
                if retries >= self.max_retries:
                    raise
                retries += 1
                delay = self._calculate_backoff_delay(retries)
                self._log_retry(request, e, delay, retries)
                await asyncio.sleep(delay)
                continue

            delay = self._retry_delay(request, response, retries)
            if delay is None:
                response.extensions[ATTEMPTS_EXTENSION] = retries + 1
                return response

            await response.aclose()
            retries += 1
            self._log_retry(request, response.status_code, delay, retries)
            await asyncio.sleep(delay)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()
