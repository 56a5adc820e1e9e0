"""OIDC workload identity providers trusted to assume service accounts."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from scalr_client.models import Model, Options, attribute, option, parse_datetime, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "workload-identity-providers"


@dataclass
class WorkloadIdentityProvider(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    url: str = ""
    allowed_audiences: list[str] = attribute(default_factory=list)
    created_at: datetime | None = attribute(decode=parse_datetime)
    created_by_email: str | None = None
    status: str = ""

    assume_service_account_policies: list[Any] = relation(many=True)


@dataclass
class WorkloadIdentityProviderListOptions(ListOptions):
    sort: str | None = query_param("sort")
    query: str | None = query_param("query")
    workload_identity_provider: str | None = query_param("filter[workload-identity-provider]")
    name: str | None = query_param("filter[name]")
    url: str | None = query_param("filter[url]")


@dataclass
class WorkloadIdentityProviderCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    url: str | None = option()
    allowed_audiences: list[str] | None = option()


@dataclass
class WorkloadIdentityProviderUpdateOptions(Options):
    """The provider URL cannot change after creation."""

    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    allowed_audiences: list[str] | None = option()


class WorkloadIdentityProviders(ResourceService):
    def list(
        self, options: WorkloadIdentityProviderListOptions | None = None
    ) -> ResourceList[WorkloadIdentityProvider]:
        return self._list("workload-identity-providers", WorkloadIdentityProvider, options)

    def iterate(self, options: WorkloadIdentityProviderListOptions | None = None):
        return self._iterate(self.list, options or WorkloadIdentityProviderListOptions())

    def create(self, options: WorkloadIdentityProviderCreateOptions) -> WorkloadIdentityProvider:
        return self._create("workload-identity-providers", WorkloadIdentityProvider, options)

    def read(self, provider_id: str) -> WorkloadIdentityProvider:
        require_id(provider_id, "workload identity provider")
        return self._read(self._path("workload-identity-providers/{}", provider_id), WorkloadIdentityProvider)

    def update(self, provider_id: str, options: WorkloadIdentityProviderUpdateOptions) -> WorkloadIdentityProvider:
        require_id(provider_id, "workload identity provider")
        return self._update(
            self._path("workload-identity-providers/{}", provider_id), WorkloadIdentityProvider, options
        )

    def delete(self, provider_id: str) -> None:
        require_id(provider_id, "workload identity provider")
        self._delete(self._path("workload-identity-providers/{}", provider_id))
