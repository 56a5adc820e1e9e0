"""Request shapes of the CRUD services that need no special handling."""

import pytest

from scalr_client.errors import InvalidArgumentError
from scalr_client.resources.access_tokens import AccessTokenUpdateOptions
from scalr_client.resources.assume_service_account_policies import (
    AssumeServiceAccountPolicyCreateOptions,
    ClaimCondition,
)
from scalr_client.resources.checkov_integrations import CheckovIntegrationCreateOptions, CheckovIntegrationVCSRepo
from scalr_client.resources.drift_detections import (
    DriftDetectionCreateOptions,
    DriftDetectionSchedulePeriod,
    DriftDetectionScheduleRunMode,
    DriftDetectionUpdateOptions,
    DriftDetectionWorkspaceFilter,
)
from scalr_client.resources.event_bridge_integrations import IntegrationStatus
from scalr_client.resources.module_namespaces import ModuleNamespaceCreateOptions
from scalr_client.resources.module_versions import ModuleVersionListOptions, ModuleVersionStatus
from scalr_client.resources.provider_configurations import AwsDefaultTagsStrategy, ProviderConfigurationCreateOptions
from scalr_client.resources.ssh_keys import SSHKeyCreateOptions
from scalr_client.resources.storage_profiles import StorageProfileBackendType
from scalr_client.testing import list_document, request_json, resource_document, resource_object


@pytest.mark.unit
@pytest.mark.parametrize(
    ("service", "path", "type_"),
    [
        ("access_tokens", "access-tokens", "access-tokens"),
        ("checkov_integrations", "integrations/checkov", "checkov-integrations"),
        ("drift_detections", "drift-detection-schedules", "drift-detection-schedule"),
        ("event_bridge_integrations", "integrations/aws-event-bridge", "aws-event-bridge-integrations"),
        ("infracost_integrations", "integrations/infracost", "infracost-integration"),
        ("module_namespaces", "module-namespaces", "module-namespaces"),
        ("provider_configurations", "provider-configurations", "provider-configurations"),
        ("run_schedule_rules", "run-schedule-rules", "run-schedule-rules"),
        ("ssh_keys", "ssh-keys", "account-ssh-keys"),
        ("storage_profiles", "storage-profiles", "storage-profiles"),
        ("workload_identity_providers", "workload-identity-providers", "workload-identity-providers"),
    ],
)
def test_read_and_delete_paths(api, service, path, type_):
    api.add("GET", f"{path}/obj-1", json=resource_document(type_, "obj-1", {"name": "thing"}))
    api.add("DELETE", f"{path}/obj-1", status_code=204)

    with api.client() as scalr:
        resources = getattr(scalr, service)
        found = resources.read("obj-1")
        resources.delete("obj-1")
        with pytest.raises(InvalidArgumentError, match="ID"):
            resources.read("has space")

    assert found.id == "obj-1"
    assert found.resource_type == type_
    assert [call.method for call in api.calls] == ["GET", "DELETE"]


class TestAccessTokens:
    @pytest.mark.unit
    def test_update(self, api):
        api.add("PATCH", "access-tokens/at-1", json=resource_document("access-tokens", "at-1", {"description": "ci"}))

        with api.client() as scalr:
            token = scalr.access_tokens.update("at-1", AccessTokenUpdateOptions(description="ci"))

        assert token.description == "ci"
        assert request_json(api.calls[0])["data"] == {"type": "access-tokens", "attributes": {"description": "ci"}}


class TestAssumeServiceAccountPolicies:
    @pytest.mark.unit
    def test_create_and_read(self, api):
        policy = resource_document(
            "assume-service-account-policies",
            "asp-1",
            {"name": "gha", "claim-conditions": [{"claim": "sub", "value": "repo:org/*", "operator": "like"}]},
            {"service-account": ("service-accounts", "sa-1"), "provider": ("workload-identity-providers", "wip-1")},
        )
        api.add("POST", "service-accounts/sa-1/assume-policies", status_code=201, json=policy)
        api.add("GET", "service-accounts/sa-1/assume-policies/asp-1", json=policy)

        with api.client() as scalr:
            created = scalr.assume_service_account_policies.create(
                "sa-1",
                AssumeServiceAccountPolicyCreateOptions(
                    name="gha", provider="wip-1", claim_conditions=[ClaimCondition(claim="sub", value="repo:org/*")]
                ),
            )
            read = scalr.assume_service_account_policies.read("sa-1", "asp-1")

        assert created.claim_conditions == [ClaimCondition(claim="sub", value="repo:org/*", operator="like")]
        assert read.provider.id == "wip-1"
        assert request_json(api.calls[0])["data"]["attributes"]["claim-conditions"] == [
            {"claim": "sub", "value": "repo:org/*"}
        ]
        assert api.calls[1].url.params["include"] == "service-account,provider"

    @pytest.mark.unit
    def test_delete_validates_both_ids(self, api):
        with api.client() as scalr:
            with pytest.raises(InvalidArgumentError, match="invalid value for service account ID"):
                scalr.assume_service_account_policies.delete("", "asp-1")
            with pytest.raises(InvalidArgumentError, match="invalid value for assume service account policy ID"):
                scalr.assume_service_account_policies.delete("sa-1", "")


class TestCheckovIntegrations:
    @pytest.mark.unit
    def test_create_with_repo(self, api):
        api.add("POST", "integrations/checkov", status_code=201, json=resource_document("checkov-integrations", "ci-1"))

        with api.client() as scalr:
            scalr.checkov_integrations.create(
                CheckovIntegrationCreateOptions(
                    name="checkov",
                    external_checks_enabled=True,
                    vcs_repo=CheckovIntegrationVCSRepo(identifier="org/checks", path="policies"),
                    vcs_provider="vcs-1",
                )
            )

        data = request_json(api.calls[0])["data"]
        assert data["attributes"]["vcs-repo"] == {"identifier": "org/checks", "path": "policies"}
        assert data["relationships"]["vcs-provider"] == {"data": {"type": "vcs-providers", "id": "vcs-1"}}


class TestDriftDetections:
    @pytest.mark.unit
    def test_create(self, api):
        api.add(
            "POST",
            "drift-detection-schedules",
            status_code=201,
            json=resource_document(
                "drift-detection-schedule",
                "dd-1",
                {"schedule": "daily", "run-mode": "plan", "workspace-filters": {"name-patterns": ["prod-*"]}},
                {"environment": ("environments", "env-1")},
            ),
        )

        with api.client() as scalr:
            schedule = scalr.drift_detections.create(
                DriftDetectionCreateOptions(
                    schedule=DriftDetectionSchedulePeriod.DAILY,
                    run_mode="plan",
                    workspace_filters=DriftDetectionWorkspaceFilter(name_patterns=["prod-*"]),
                    environment="env-1",
                )
            )

        assert schedule.run_mode is DriftDetectionScheduleRunMode.PLAN
        assert schedule.workspace_filters == DriftDetectionWorkspaceFilter(name_patterns=["prod-*"])
        assert request_json(api.calls[0])["data"]["attributes"] == {
            "schedule": "daily",
            "workspace-filters": {"name-patterns": ["prod-*"]},
            "run-mode": "plan",
        }

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("options", "message"),
        [
            (DriftDetectionCreateOptions(schedule="daily"), "environment is required"),
            (DriftDetectionCreateOptions(schedule="hourly", environment="env-1"), "invalid value for schedule"),
            (DriftDetectionCreateOptions(environment="env-1"), "invalid value for schedule"),
            (
                DriftDetectionCreateOptions(schedule="weekly", run_mode="apply", environment="env-1"),
                "invalid value for run_mode",
            ),
        ],
    )
    def test_validation(self, api, options, message):
        with api.client() as scalr, pytest.raises(InvalidArgumentError, match=message):
            scalr.drift_detections.create(options)

    @pytest.mark.unit
    def test_update_is_validated(self, api):
        with api.client() as scalr, pytest.raises(InvalidArgumentError, match="environment is required"):
            scalr.drift_detections.update("dd-1", DriftDetectionUpdateOptions(schedule="weekly"))

        assert api.calls == []


class TestIntegrations:
    @pytest.mark.unit
    def test_unknown_status_is_kept(self, api):
        api.add(
            "GET",
            "integrations/aws-event-bridge",
            json=list_document(
                [
                    resource_object("aws-event-bridge-integrations", "eb-1", {"status": "active"}),
                    resource_object("aws-event-bridge-integrations", "eb-2", {"status": "paused"}),
                ]
            ),
        )

        with api.client() as scalr:
            statuses = [item.status for item in scalr.event_bridge_integrations.list()]

        assert statuses == [IntegrationStatus.ACTIVE, "paused"]


class TestModuleRegistry:
    @pytest.mark.unit
    def test_versions_require_module_filter(self, api):
        with api.client() as scalr:
            with pytest.raises(InvalidArgumentError, match=r"filter\[module\] is required"):
                scalr.module_versions.list(ModuleVersionListOptions())
            with pytest.raises(InvalidArgumentError, match=r"filter\[module\] is required"):
                scalr.module_versions.iterate(None)

        assert api.calls == []

    @pytest.mark.unit
    def test_versions_list(self, api):
        api.add(
            "GET",
            "module-versions",
            json=list_document([resource_object("module-versions", "mv-1", {"version": "1.0.0", "status": "ok"})]),
        )

        with api.client() as scalr:
            versions = scalr.module_versions.list(ModuleVersionListOptions(module="mod-1", status="ok"))

        assert versions.items[0].status is ModuleVersionStatus.OK
        assert api.calls[0].url.params["filter[module]"] == "mod-1"

    @pytest.mark.unit
    def test_namespace_create(self, api):
        api.add("POST", "module-namespaces", status_code=201, json=resource_document("module-namespaces", "ns-1"))

        with api.client() as scalr:
            scalr.module_namespaces.create(
                ModuleNamespaceCreateOptions(name="platform", is_shared=False, owners=["team-1"])
            )

        assert request_json(api.calls[0])["data"] == {
            "type": "module-namespaces",
            "attributes": {"name": "platform", "is-shared": False},
            "relationships": {"owners": {"data": [{"type": "teams", "id": "team-1"}]}},
        }


class TestProviderConfigurations:
    @pytest.mark.unit
    def test_create(self, api):
        api.add(
            "POST",
            "provider-configurations",
            status_code=201,
            json=resource_document(
                "provider-configurations",
                "pcfg-1",
                {"provider-name": "aws", "aws-default-tags": {"team": "core"}, "aws-default-tags-strategy": "update"},
            ),
        )

        with api.client() as scalr:
            created = scalr.provider_configurations.create(
                ProviderConfigurationCreateOptions(
                    name="aws",
                    provider_name="aws",
                    aws_default_tags={"team": "core"},
                    aws_default_tags_strategy=AwsDefaultTagsStrategy("update"),
                    account="acc-1",
                )
            )

        assert created.aws_default_tags == {"team": "core"}
        attributes = request_json(api.calls[0])["data"]["attributes"]
        assert attributes["provider-name"] == "aws"
        assert attributes["aws-default-tags"] == {"team": "core"}


class TestSSHKeys:
    @pytest.mark.unit
    def test_create_uses_underscored_keys(self, api):
        api.add("POST", "ssh-keys", status_code=201, json=resource_document("account-ssh-keys", "key-1"))

        with api.client() as scalr:
            scalr.ssh_keys.create(
                SSHKeyCreateOptions(name="deploy", private_key="-----BEGIN", is_shared=True, account="acc-1")
            )

        data = request_json(api.calls[0])["data"]
        assert data["attributes"] == {"name": "deploy", "private_key": "-----BEGIN", "is_shared": True}
        assert data["relationships"] == {"account": {"data": {"type": "accounts", "id": "acc-1"}}}


class TestStorageProfiles:
    @pytest.mark.unit
    def test_backend_type(self, api):
        api.add(
            "GET",
            "storage-profiles/sp-1",
            json=resource_document(
                "storage-profiles", "sp-1", {"backend-type": "aws-s3", "aws-s3-region": "us-east-1"}
            ),
        )

        with api.client() as scalr:
            profile = scalr.storage_profiles.read("sp-1")

        assert profile.backend_type is StorageProfileBackendType.AWS_S3
        assert profile.aws_s3_region == "us-east-1"
