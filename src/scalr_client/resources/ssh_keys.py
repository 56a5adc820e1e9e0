"""Account SSH keys used to fetch private modules during runs."""

from dataclasses import dataclass
from typing import Any, ClassVar

from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, attribute, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "account-ssh-keys"


@dataclass
class SSHKey(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    private_key: str = attribute("private_key", default="")
    is_shared: bool = False

    account: ResourceIdentifier | None = relation()
    environments: list[Any] = relation(many=True)


@dataclass
class SSHKeyListOptions(ListOptions):
    sort: str | None = query_param("sort")
    include: str | None = query_param("include")
    name: str | None = query_param("filter[name]")
    account: str | None = query_param("filter[account]")


@dataclass
class SSHKeyCreateOptions(Options):
    """The create endpoint expects ``private_key`` and ``is_shared`` with underscores."""

    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    private_key: str | None = option("private_key")
    is_shared: bool | None = option("is_shared")

    account: str | None = option_relation("accounts")
    environments: list[str] | None = option_relation("environments", many=True)


@dataclass
class SSHKeyUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    private_key: str | None = option("private_key")
    is_shared: bool | None = option()

    environments: list[str] | None = option_relation("environments", many=True)


class SSHKeys(ResourceService):
    def list(self, options: SSHKeyListOptions | None = None) -> ResourceList[SSHKey]:
        return self._list("ssh-keys", SSHKey, options)

    def iterate(self, options: SSHKeyListOptions | None = None):
        return self._iterate(self.list, options or SSHKeyListOptions())

    def create(self, options: SSHKeyCreateOptions) -> SSHKey:
        return self._create("ssh-keys", SSHKey, options)

    def read(self, ssh_key_id: str) -> SSHKey:
        require_id(ssh_key_id, "SSH key")
        return self._read(self._path("ssh-keys/{}", ssh_key_id), SSHKey)

    def update(self, ssh_key_id: str, options: SSHKeyUpdateOptions) -> SSHKey:
        require_id(ssh_key_id, "SSH key")
        return self._update(self._path("ssh-keys/{}", ssh_key_id), SSHKey, options)

    def delete(self, ssh_key_id: str) -> None:
        require_id(ssh_key_id, "SSH key")
        self._delete(self._path("ssh-keys/{}", ssh_key_id))
