"""Error types raised by the Scalr client.

Example:
    ```python
    from scalr_client.errors import NotFoundError

    try:
        client.workspaces.read_by_id("ws-missing")
    except NotFoundError as e:
        print(e.status_code, e.message)
    ```
"""

from scalr_client.errors.exceptions import (
    APIError,
    ConflictError,
    ForbiddenError,
    HTTPError,
    InvalidArgumentError,
    NotFoundError,
    ServerError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from scalr_client.errors.handler import exception_for, parse_errors, raise_for_status
from scalr_client.errors.models import JSONAPIError, JSONAPIErrorSource

__all__ = [
    "APIError",
    "ConflictError",
    "ForbiddenError",
    "HTTPError",
    "InvalidArgumentError",
    "JSONAPIError",
    "JSONAPIErrorSource",
    "NotFoundError",
    "ServerError",
    "TooManyRequestsError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "exception_for",
    "parse_errors",
    "raise_for_status",
]
