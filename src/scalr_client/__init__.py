"""Python client for the Scalr API.

Each REST resource of the Scalr API is a service on ``Client``. Requests and
responses use JSON:API; models, request options and pagination wrap that
format in dataclasses. The ``scalr-gen`` command (``scalr_client.generator``)
generates a client package from Scalr's OpenAPI document on top of the same
runtime.

Example:
    ```python
    from scalr_client import Client
    from scalr_client.resources import EnvironmentCreateOptions

    with Client("example.scalr.io", token) as scalr:
        env = scalr.environments.create(EnvironmentCreateOptions(name="dev", account="acc-123"))
        for workspace in scalr.workspaces.iterate():
            print(workspace.name)
    ```
"""

from scalr_client.auth import CredentialError, CredentialNotFoundError
from scalr_client.client import Client
from scalr_client.config import ClientConfig, ConfigurationError
from scalr_client.errors import (
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
from scalr_client.log import configure_logging
from scalr_client.pagination import PageInfo, PageIterator
from scalr_client.value import UNSET, Value
from scalr_client.version import __version__

__all__ = [
    "UNSET",
    "APIError",
    "Client",
    "ClientConfig",
    "ConfigurationError",
    "ConflictError",
    "CredentialError",
    "CredentialNotFoundError",
    "ForbiddenError",
    "HTTPError",
    "InvalidArgumentError",
    "NotFoundError",
    "PageInfo",
    "PageIterator",
    "ServerError",
    "TooManyRequestsError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "Value",
    "__version__",
    "configure_logging",
]
