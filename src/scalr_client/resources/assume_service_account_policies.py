"""Assume policies: which workload identity tokens may act as a service account."""

from dataclasses import dataclass
from typing import Any, ClassVar

from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, Struct, attribute, list_of, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "assume-service-account-policies"


@dataclass
class ClaimCondition(Struct):
    """Match on one claim of the identity token.

    ``operator`` defaults server-side to an exact match.
    """

    claim: str = ""
    value: str = ""
    operator: str | None = None


@dataclass
class AssumeServiceAccountPolicy(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    maximum_session_duration: int = 0
    claim_conditions: list[ClaimCondition] = attribute(default_factory=list, decode=list_of(ClaimCondition.from_dict))
    created_at: str = ""
    created_by_email: str | None = None
    provider: Any = relation()
    service_account: ResourceIdentifier | None = relation()


@dataclass
class AssumeServiceAccountPolicyListOptions(ListOptions):
    query: str | None = query_param("query")
    assume_service_account_policy: str | None = query_param("filter[assume-service-account-policy]")
    service_account: str | None = query_param("filter[service-account]")
    workload_identity_provider: str | None = query_param("filter[workload-identity-provider]")
    name: str | None = query_param("filter[name]")


@dataclass
class AssumeServiceAccountPolicyCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    provider: str | None = option_relation("workload-identity-providers")
    maximum_session_duration: int | None = option()
    claim_conditions: list[ClaimCondition] | None = option()


@dataclass
class AssumeServiceAccountPolicyUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    maximum_session_duration: int | None = option()
    claim_conditions: list[ClaimCondition] | None = option()


class AssumeServiceAccountPolicies(ResourceService):
    def list(
        self, options: AssumeServiceAccountPolicyListOptions | None = None
    ) -> ResourceList[AssumeServiceAccountPolicy]:
        return self._list(_TYPE, AssumeServiceAccountPolicy, options)

    def iterate(self, options: AssumeServiceAccountPolicyListOptions | None = None):
        return self._iterate(self.list, options or AssumeServiceAccountPolicyListOptions())

    def create(
        self, service_account_id: str, options: AssumeServiceAccountPolicyCreateOptions
    ) -> AssumeServiceAccountPolicy:
        require_id(service_account_id, "service account")
        path = self._path("service-accounts/{}/assume-policies", service_account_id)
        return self._create(path, AssumeServiceAccountPolicy, options)

    def read(self, service_account_id: str, policy_id: str) -> AssumeServiceAccountPolicy:
        path = self._policy_path(service_account_id, policy_id)
        return self._read(path, AssumeServiceAccountPolicy, params={"include": "service-account,provider"})

    def update(
        self, service_account_id: str, policy_id: str, options: AssumeServiceAccountPolicyUpdateOptions
    ) -> AssumeServiceAccountPolicy:
        path = self._policy_path(service_account_id, policy_id)
        return self._update(path, AssumeServiceAccountPolicy, options)

    def delete(self, service_account_id: str, policy_id: str) -> None:
        self._delete(self._policy_path(service_account_id, policy_id))

    def _policy_path(self, service_account_id: str, policy_id: str) -> str:
        require_id(service_account_id, "service account")
        require_id(policy_id, "assume service account policy")
        return self._path("service-accounts/{}/assume-policies/{}", service_account_id, policy_id)
