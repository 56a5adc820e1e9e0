"""Access tokens."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from scalr_client.models import Model, Options, attribute, option, parse_datetime
from scalr_client.resources.base import ResourceService, require_id


@dataclass
class AccessToken(Model):
    resource_type: ClassVar[str] = "access-tokens"

    created_at: datetime | None = attribute(decode=parse_datetime)
    description: str = ""
    token: str = ""
    name: str = ""
    expires_in: int = 0


@dataclass
class AccessTokenUpdateOptions(Options):
    resource_type: ClassVar[str] = "access-tokens"

    description: str | None = option()
    name: str | None = option()


class AccessTokens(ResourceService):
    """Read, rename and revoke access tokens.

    Tokens are created through the owning resource (agent pools, service
    accounts), so there is no ``create`` here.
    """

    def read(self, access_token_id: str) -> AccessToken:
        require_id(access_token_id, "access token")
        return self._read(self._path("access-tokens/{}", access_token_id), AccessToken)

    def update(self, access_token_id: str, options: AccessTokenUpdateOptions) -> AccessToken:
        require_id(access_token_id, "access token")
        return self._update(self._path("access-tokens/{}", access_token_id), AccessToken, options)

    def delete(self, access_token_id: str) -> None:
        require_id(access_token_id, "access token")
        self._delete(self._path("access-tokens/{}", access_token_id))
