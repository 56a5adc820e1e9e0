"""Checkov policy-scanning integrations."""

from dataclasses import dataclass
from typing import Any, ClassVar

from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, Struct, attribute, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, require_id

_TYPE = "checkov-integrations"


@dataclass
class CheckovIntegrationVCSRepo(Struct):
    """Repository holding external Checkov checks."""

    identifier: str | None = None
    branch: str | None = None
    path: str | None = None


@dataclass
class CheckovIntegration(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    version: str = ""
    cli_args: str = ""
    is_shared: bool = False
    vcs_repo: CheckovIntegrationVCSRepo | None = attribute(decode=CheckovIntegrationVCSRepo.from_dict)
    external_checks_enabled: bool = False
    environments: list[Any] = relation(many=True)
    vcs_provider: ResourceIdentifier | None = relation()


@dataclass
class CheckovIntegrationListOptions(ListOptions):
    pass


@dataclass
class CheckovIntegrationCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    version: str | None = option()
    cli_args: str | None = option()
    is_shared: bool | None = option()
    vcs_repo: CheckovIntegrationVCSRepo | None = option()
    external_checks_enabled: bool | None = option()
    environments: list[str] | None = option_relation("environments", many=True)
    vcs_provider: str | None = option_relation("vcs-providers")


@dataclass
class CheckovIntegrationUpdateOptions(CheckovIntegrationCreateOptions):
    """Same fields as create; ``vcs_repo=None`` detaches the repository."""


class CheckovIntegrations(ResourceService):
    def list(self, options: CheckovIntegrationListOptions | None = None) -> ResourceList[CheckovIntegration]:
        return self._list("integrations/checkov", CheckovIntegration, options)

    def iterate(self, options: CheckovIntegrationListOptions | None = None):
        return self._iterate(self.list, options or CheckovIntegrationListOptions())

    def create(self, options: CheckovIntegrationCreateOptions) -> CheckovIntegration:
        return self._create("integrations/checkov", CheckovIntegration, options)

    def read(self, integration_id: str) -> CheckovIntegration:
        require_id(integration_id, "Checkov integration")
        return self._read(self._path("integrations/checkov/{}", integration_id), CheckovIntegration)

    def update(self, integration_id: str, options: CheckovIntegrationUpdateOptions) -> CheckovIntegration:
        require_id(integration_id, "Checkov integration")
        return self._update(self._path("integrations/checkov/{}", integration_id), CheckovIntegration, options)

    def delete(self, integration_id: str) -> None:
        require_id(integration_id, "Checkov integration")
        self._delete(self._path("integrations/checkov/{}", integration_id))
