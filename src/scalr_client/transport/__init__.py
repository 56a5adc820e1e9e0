"""Retrying httpx transports."""

from scalr_client.transport.retry import ATTEMPTS_EXTENSION, AsyncRetryTransport, RetryTransport, parse_retry_after

__all__ = ["ATTEMPTS_EXTENSION", "AsyncRetryTransport", "RetryTransport", "parse_retry_after"]
