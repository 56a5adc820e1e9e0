"""Provider configurations: credentials and settings for Terraform providers.

One resource type covers every provider. Attributes prefixed with ``aws_``,
``azurerm_``, ``google_`` or ``scalr_`` only apply to that provider.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, attribute, enum_value, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "provider-configurations"


class AwsDefaultTagsStrategy(StrEnum):
    SKIP = "skip"
    UPDATE = "update"


@dataclass
class ProviderConfiguration(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    provider_name: str = ""
    export_shell_variables: bool = False
    is_shared: bool = False
    is_custom: bool = False

    aws_access_key: str = ""
    aws_secret_key: str = ""
    aws_account_type: str = ""
    aws_credentials_type: str = ""
    aws_trusted_entity_type: str = ""
    aws_role_arn: str = ""
    aws_external_id: str = ""
    aws_audience: str = ""
    aws_default_tags: dict[str, str] | None = None
    aws_default_tags_strategy: AwsDefaultTagsStrategy | None = attribute(decode=enum_value(AwsDefaultTagsStrategy))

    azurerm_client_id: str = ""
    azurerm_client_secret: str = ""
    azurerm_subscription_id: str = ""
    azurerm_tenant_id: str = ""
    azurerm_auth_type: str = ""
    azurerm_audience: str = ""

    google_auth_type: str = ""
    google_service_account_email: str = ""
    google_workload_provider_name: str = ""
    google_project: str = ""
    google_credentials: str = ""
    google_use_default_project: bool = False

    scalr_hostname: str = ""
    scalr_token: str = ""

    account: ResourceIdentifier | None = relation()
    parameters: list[Any] = relation(many=True)
    environments: list[Any] = relation(many=True)
    owners: list[Any] = relation(many=True)


@dataclass
class ProviderConfigurationListOptions(ListOptions):
    sort: str | None = query_param("sort")
    include: str | None = query_param("include")
    provider_configuration: str | None = query_param("filter[provider-configuration]")
    provider_name: str | None = query_param("filter[provider-name]")
    name: str | None = query_param("filter[name]")
    account: str | None = query_param("filter[account]")


@dataclass
class _ProviderConfigurationSettings(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    export_shell_variables: bool | None = option()
    is_shared: bool | None = option()

    aws_access_key: str | None = option()
    aws_secret_key: str | None = option()
    aws_account_type: str | None = option()
    aws_credentials_type: str | None = option()
    aws_trusted_entity_type: str | None = option()
    aws_role_arn: str | None = option()
    aws_external_id: str | None = option()
    aws_audience: str | None = option()
    aws_default_tags: dict[str, str] | None = option()
    aws_default_tags_strategy: AwsDefaultTagsStrategy | None = option()

    azurerm_client_id: str | None = option()
    azurerm_client_secret: str | None = option()
    azurerm_subscription_id: str | None = option()
    azurerm_tenant_id: str | None = option()
    azurerm_auth_type: str | None = option()
    azurerm_audience: str | None = option()

    google_auth_type: str | None = option()
    google_service_account_email: str | None = option()
    google_workload_provider_name: str | None = option()
    google_project: str | None = option()
    google_credentials: str | None = option()
    google_use_default_project: bool | None = option()

    scalr_hostname: str | None = option()
    scalr_token: str | None = option()

    environments: list[str] | None = option_relation("environments", many=True)
    owners: list[str] | None = option_relation("teams", many=True)


@dataclass
class ProviderConfigurationCreateOptions(_ProviderConfigurationSettings):
    provider_name: str | None = option()
    is_custom: bool | None = option()

    account: str | None = option_relation("accounts")


@dataclass
class ProviderConfigurationUpdateOptions(_ProviderConfigurationSettings):
    """The provider and account of a configuration are fixed at creation."""


class ProviderConfigurations(ResourceService):
    def list(self, options: ProviderConfigurationListOptions | None = None) -> ResourceList[ProviderConfiguration]:
        return self._list("provider-configurations", ProviderConfiguration, options)

    def iterate(self, options: ProviderConfigurationListOptions | None = None):
        return self._iterate(self.list, options or ProviderConfigurationListOptions())

    def create(self, options: ProviderConfigurationCreateOptions) -> ProviderConfiguration:
        return self._create("provider-configurations", ProviderConfiguration, options)

    def read(self, configuration_id: str) -> ProviderConfiguration:
        require_id(configuration_id, "provider configuration")
        return self._read(
            self._path("provider-configurations/{}", configuration_id),
            ProviderConfiguration,
            params={"include": "parameters"},
        )

    def update(self, configuration_id: str, options: ProviderConfigurationUpdateOptions) -> ProviderConfiguration:
        require_id(configuration_id, "provider configuration")
        return self._update(
            self._path("provider-configurations/{}", configuration_id), ProviderConfiguration, options
        )

    def delete(self, configuration_id: str) -> None:
        require_id(configuration_id, "provider configuration")
        self._delete(self._path("provider-configurations/{}", configuration_id))
