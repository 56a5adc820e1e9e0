"""Structured exceptions for Scalr API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from scalr_client.errors.models import JSONAPIError


class APIError(Exception):
    """Base exception for API errors.

    ``str()`` renders as ``"<label>: <message>"``. ``errors`` holds every
    JSON:API error object from the response body, if it had any.
    """

    label = "API error"

    def __init__(
        self,
        message: str = "",
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        errors: "list[JSONAPIError] | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.errors = errors if errors is not None else []

    @property
    def error(self) -> "JSONAPIError | None":
        """The first JSON:API error, which also supplied the message."""
        return self.errors[0] if self.errors else None

    def __str__(self) -> str:
        if self.message:
            return f"{self.label}: {self.message}"
        return self.label


class HTTPError(APIError):
    """Error response without a more specific class."""

    @property
    def label(self) -> str:  # type: ignore[override]
        return f"HTTP {self.status_code}"


class UnauthorizedError(HTTPError):
    """401 Unauthorized."""

    label = "unauthorized"


class ForbiddenError(HTTPError):
    """403 Forbidden."""

    label = "forbidden"


class NotFoundError(HTTPError):
    """404 Not Found."""

    label = "not found"


class ConflictError(HTTPError):
    """409 Conflict."""

    label = "conflict"


class UnprocessableEntityError(HTTPError):
    """422 Unprocessable Entity (validation errors)."""

    label = "unprocessable entity"


class TooManyRequestsError(HTTPError):
    """429 Too Many Requests."""

    label = "too many requests"

    def __init__(self, message: str = "", retry_after: float | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(HTTPError):
    """5xx server errors."""


class TransportError(APIError):
    """The request never produced a response, even after retrying."""

    label = "transport error"

    def __str__(self) -> str:
        return self.message or self.label


class InvalidArgumentError(ValueError):
    """Raised before any request when arguments or options are invalid."""
