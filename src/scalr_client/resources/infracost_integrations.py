"""Infracost integrations for cost estimation in runs."""

from dataclasses import dataclass
from typing import Any, ClassVar

from scalr_client.models import Model, Options, attribute, enum_value, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id
from scalr_client.resources.event_bridge_integrations import IntegrationStatus

_TYPE = "infracost-integration"


@dataclass
class InfracostIntegration(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    status: IntegrationStatus | None = attribute(decode=enum_value(IntegrationStatus))
    api_key: str = ""
    is_shared: bool = False

    environments: list[Any] = relation(many=True)


@dataclass
class InfracostIntegrationListOptions(ListOptions):
    infracost_integration: str | None = query_param("filter[infracost-integration]")
    name: str | None = query_param("filter[name]")


@dataclass
class InfracostIntegrationCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    api_key: str | None = option()
    is_shared: bool | None = option()

    environments: list[str] | None = option_relation("environments", many=True)


@dataclass
class InfracostIntegrationUpdateOptions(InfracostIntegrationCreateOptions):
    """Only the fields that are set are changed."""


class InfracostIntegrations(ResourceService):
    def list(self, options: InfracostIntegrationListOptions | None = None) -> ResourceList[InfracostIntegration]:
        return self._list("integrations/infracost", InfracostIntegration, options)

    def iterate(self, options: InfracostIntegrationListOptions | None = None):
        return self._iterate(self.list, options or InfracostIntegrationListOptions())

    def create(self, options: InfracostIntegrationCreateOptions) -> InfracostIntegration:
        return self._create("integrations/infracost", InfracostIntegration, options)

    def read(self, integration_id: str) -> InfracostIntegration:
        require_id(integration_id, "Infracost integration")
        return self._read(self._path("integrations/infracost/{}", integration_id), InfracostIntegration)

    def update(self, integration_id: str, options: InfracostIntegrationUpdateOptions) -> InfracostIntegration:
        require_id(integration_id, "Infracost integration")
        return self._update(self._path("integrations/infracost/{}", integration_id), InfracostIntegration, options)

    def delete(self, integration_id: str) -> None:
        require_id(integration_id, "Infracost integration")
        self._delete(self._path("integrations/infracost/{}", integration_id))
