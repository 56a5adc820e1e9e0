"""Map error responses to exceptions."""

import json

import httpx

from scalr_client.errors.exceptions import (
    ConflictError,
    ForbiddenError,
    HTTPError,
    NotFoundError,
    ServerError,
    TooManyRequestsError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from scalr_client.errors.models import JSONAPIError
from scalr_client.transport.retry import parse_retry_after

EXCEPTION_MAP: dict[int, type[HTTPError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: TooManyRequestsError,
}


def parse_errors(content: bytes) -> list[JSONAPIError]:
    """Extract the JSON:API ``errors`` array from a response body.

    Bodies that are not JSON, or JSON without an ``errors`` array, give an
    empty list.
    """
    try:
        data = json.loads(content)
    except (ValueError, UnicodeDecodeError):
        return []
    if not isinstance(data, dict) or not isinstance(data.get("errors"), list):
        return []
    return [JSONAPIError.from_dict(item) for item in data["errors"] if isinstance(item, dict)]


def exception_for(response: httpx.Response) -> HTTPError:
    """Build the exception that describes an error response.

    The first JSON:API error becomes the message; otherwise the raw body is
    used as is.
    """
    status_code = response.status_code
    content = response.read()
    errors = parse_errors(content)
    message = str(errors[0]) if errors else content.decode(errors="replace")

    exc_class = EXCEPTION_MAP.get(status_code)
    if exc_class is None:
        exc_class = ServerError if status_code >= 500 else HTTPError

    if exc_class is TooManyRequestsError:
        return TooManyRequestsError(
            message,
            retry_after=parse_retry_after(response.headers.get("Retry-After")),
            status_code=status_code,
            response=response,
            errors=errors,
        )

    return exc_class(message, status_code=status_code, response=response, errors=errors)


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching ``HTTPError`` subclass for status codes >= 400."""
    if response.status_code < 400:
        return
    raise exception_for(response)
