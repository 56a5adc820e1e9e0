"""Credential resolution for the Scalr client.

The API authenticates with a bearer token only. This package finds that token
(and the hostname) in code, the environment, a ``.env`` file or a token file.
"""

from scalr_client.auth.credentials import CredentialResolver
from scalr_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
