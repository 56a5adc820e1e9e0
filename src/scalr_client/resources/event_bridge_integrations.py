"""AWS EventBridge integrations that forward account events to AWS."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, attribute, enum_value, option, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "aws-event-bridge-integrations"


class IntegrationStatus(StrEnum):
    ACTIVE = "active"
    DISABLED = "disabled"
    FAILED = "failed"


@dataclass
class EventBridgeIntegration(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    status: IntegrationStatus | None = attribute(decode=enum_value(IntegrationStatus))
    event_source: str = ""
    event_source_arn: str = ""
    aws_account_id: str = ""
    region: str = ""

    account: ResourceIdentifier | None = relation()


@dataclass
class EventBridgeIntegrationListOptions(ListOptions):
    name: str | None = query_param("filter[name]")


@dataclass
class EventBridgeIntegrationCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    aws_account_id: str | None = option()
    region: str | None = option()


@dataclass
class EventBridgeIntegrationUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    status: IntegrationStatus | None = option()


class EventBridgeIntegrations(ResourceService):
    def list(self, options: EventBridgeIntegrationListOptions | None = None) -> ResourceList[EventBridgeIntegration]:
        return self._list("integrations/aws-event-bridge", EventBridgeIntegration, options)

    def iterate(self, options: EventBridgeIntegrationListOptions | None = None):
        return self._iterate(self.list, options or EventBridgeIntegrationListOptions())

    def create(self, options: EventBridgeIntegrationCreateOptions) -> EventBridgeIntegration:
        return self._create("integrations/aws-event-bridge", EventBridgeIntegration, options)

    def read(self, integration_id: str) -> EventBridgeIntegration:
        require_id(integration_id, "EventBridge integration")
        return self._read(self._path("integrations/aws-event-bridge/{}", integration_id), EventBridgeIntegration)

    def update(self, integration_id: str, options: EventBridgeIntegrationUpdateOptions) -> EventBridgeIntegration:
        require_id(integration_id, "EventBridge integration")
        return self._update(
            self._path("integrations/aws-event-bridge/{}", integration_id), EventBridgeIntegration, options
        )

    def delete(self, integration_id: str) -> None:
        require_id(integration_id, "EventBridge integration")
        self._delete(self._path("integrations/aws-event-bridge/{}", integration_id))
