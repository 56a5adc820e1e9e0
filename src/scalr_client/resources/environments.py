"""Environments group workspaces and hold shared settings."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, ClassVar

from scalr_client.errors import InvalidArgumentError
from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, attribute, enum_value, option, option_relation, parse_datetime, relation
from scalr_client.resources.base import (
    ListOptions,
    ResourceList,
    ResourceService,
    given,
    query_param,
    related_id,
    require_id,
    valid_string_id,
)

_TYPE = "environments"


class EnvironmentStatus(StrEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class Environment(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    created_at: datetime | None = attribute(decode=parse_datetime)
    status: EnvironmentStatus | None = attribute(decode=enum_value(EnvironmentStatus))
    remote_backend: bool = False
    mask_sensitive_output: bool = False
    is_federated_to_account: bool = False

    account: ResourceIdentifier | None = relation()
    policy_groups: list[Any] = relation(many=True)
    default_provider_configurations: list[Any] = relation(many=True)
    provider_configurations: list[Any] = relation(many=True)
    created_by: ResourceIdentifier | None = relation()
    tags: list[Any] = relation(many=True)
    storage_profile: Any = relation()
    default_workspace_agent_pool: ResourceIdentifier | None = relation()


@dataclass
class EnvironmentListOptions(ListOptions):
    include: str | None = query_param("include")
    environment: str | None = query_param("filter[environment]")
    account: str | None = query_param("filter[account]")
    name: str | None = query_param("filter[name]")
    tag: str | None = query_param("filter[tag]")


@dataclass
class EnvironmentCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    remote_backend: bool | None = option()
    mask_sensitive_output: bool | None = option()
    is_federated_to_account: bool | None = option()

    account: str | None = option_relation("accounts")
    default_provider_configurations: list[str] | None = option_relation("provider-configurations", many=True)
    storage_profile: str | None = option_relation("storage-profiles")
    default_workspace_agent_pool: str | None = option_relation("agent-pools")
    tags: list[str] | None = option_relation("tags", many=True)

    def validate(self) -> None:
        account = related_id(self.account)
        if account is None:
            raise InvalidArgumentError("account is required")
        if not valid_string_id(account):
            raise InvalidArgumentError("invalid value for account ID")
        if given(self.name) is None:
            raise InvalidArgumentError("name is required")


@dataclass
class EnvironmentUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    mask_sensitive_output: bool | None = option()
    is_federated_to_account: bool | None = option()

    default_provider_configurations: list[str] | None = option_relation("provider-configurations", many=True)
    storage_profile: str | None = option_relation("storage-profiles")
    default_workspace_agent_pool: str | None = option_relation("agent-pools")


@dataclass
class EnvironmentDefaultProviderConfigurationsOptions(Options):
    """Replace only the default provider configurations of an environment."""

    resource_type: ClassVar[str] = _TYPE

    default_provider_configurations: list[str] | None = option_relation("provider-configurations", many=True)


class Environments(ResourceService):
    def list(self, options: EnvironmentListOptions | None = None) -> ResourceList[Environment]:
        return self._list("environments", Environment, options)

    def iterate(self, options: EnvironmentListOptions | None = None):
        return self._iterate(self.list, options or EnvironmentListOptions())

    def create(self, options: EnvironmentCreateOptions) -> Environment:
        options.validate()
        return self._create("environments", Environment, options)

    def read(self, environment_id: str) -> Environment:
        require_id(environment_id, "environment")
        return self._read(self._path("environments/{}", environment_id), Environment, params={"include": "created-by"})

    def update(self, environment_id: str, options: EnvironmentUpdateOptions) -> Environment:
        require_id(environment_id, "environment")
        return self._update(self._path("environments/{}", environment_id), Environment, options)

    def update_default_provider_configuration_only(
        self, environment_id: str, provider_configuration_ids: Iterable[Any]
    ) -> Environment:
        """Set the default provider configurations, leaving other settings alone.

        An empty iterable removes every default.
        """
        require_id(environment_id, "environment")
        options = EnvironmentDefaultProviderConfigurationsOptions(
            default_provider_configurations=[related_id(item) for item in provider_configuration_ids]
        )
        return self._update(self._path("environments/{}", environment_id), Environment, options)

    def delete(self, environment_id: str) -> None:
        require_id(environment_id, "environment")
        self._delete(self._path("environments/{}", environment_id))
