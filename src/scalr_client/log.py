"""Logging helpers for the Scalr client.

The library itself only emits records through module loggers below
``scalr_client`` and never installs handlers on its own; applications decide
where records go. ``configure_logging`` is a convenience for scripts and for
the ``scalr-gen`` CLI.
"""

import json
import logging
import sys
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import IO, Any

REDACTED = "[REDACTED]"

_SENSITIVE_HEADERS = frozenset(["authorization"])

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

logger = logging.getLogger("scalr_client")
logger.addHandler(logging.NullHandler())


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(
    level: int | str = logging.INFO,
    *,
    json_format: bool = False,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the handler installed by a previous call.
    """
    for handler in list(logger.handlers):
        if getattr(handler, "_scalr_client_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._scalr_client_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def default_logger(stream: IO[str] | None = None) -> logging.Logger:
    """INFO level text logging to stderr."""
    return configure_logging(logging.INFO, stream=stream)


def debug_logger(stream: IO[str] | None = None) -> logging.Logger:
    """DEBUG level text logging, including request and response details."""
    return configure_logging(logging.DEBUG, stream=stream)


def sanitize_headers(
    headers: Mapping[str, str | Iterable[str]] | Iterable[tuple[str, str]],
) -> dict[str, str]:
    """Flatten headers for logging with credentials redacted.

    Multi-valued headers keep their first value.
    """
    items = headers.items() if isinstance(headers, Mapping) else headers
    result: dict[str, str] = {}
    for key, value in items:
        if key in result:
            continue
        if not isinstance(value, str):
            value = next(iter(value), "")
        result[key] = REDACTED if key.lower() in _SENSITIVE_HEADERS else value
    return result


def sanitize_url(url: str) -> str:
    """Prepare a URL for logging. Query parameters carry no credentials today."""
    return url
