"""Resource services, one module per Scalr API resource.

Importing this package registers every resource model, so relationships in
responses decode into the matching model class.
"""

from scalr_client.resources.access_tokens import AccessToken, AccessTokens, AccessTokenUpdateOptions
from scalr_client.resources.assume_service_account_policies import (
    AssumeServiceAccountPolicies,
    AssumeServiceAccountPolicy,
    AssumeServiceAccountPolicyCreateOptions,
    AssumeServiceAccountPolicyListOptions,
    AssumeServiceAccountPolicyUpdateOptions,
    ClaimCondition,
)
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService
from scalr_client.resources.checkov_integrations import (
    CheckovIntegration,
    CheckovIntegrationCreateOptions,
    CheckovIntegrationListOptions,
    CheckovIntegrations,
    CheckovIntegrationUpdateOptions,
    CheckovIntegrationVCSRepo,
)
from scalr_client.resources.drift_detections import (
    DriftDetection,
    DriftDetectionCreateOptions,
    DriftDetections,
    DriftDetectionSchedulePeriod,
    DriftDetectionScheduleRunMode,
    DriftDetectionUpdateOptions,
    DriftDetectionWorkspaceFilter,
)
from scalr_client.resources.environment_hooks import (
    EnvironmentHook,
    EnvironmentHookCreateOptions,
    EnvironmentHookListOptions,
    EnvironmentHooks,
    EnvironmentHookUpdateOptions,
)
from scalr_client.resources.environments import (
    Environment,
    EnvironmentCreateOptions,
    EnvironmentListOptions,
    Environments,
    EnvironmentStatus,
    EnvironmentUpdateOptions,
)
from scalr_client.resources.event_bridge_integrations import (
    EventBridgeIntegration,
    EventBridgeIntegrationCreateOptions,
    EventBridgeIntegrationListOptions,
    EventBridgeIntegrations,
    EventBridgeIntegrationUpdateOptions,
    IntegrationStatus,
)
from scalr_client.resources.federated_environments import FederatedEnvironments
from scalr_client.resources.hook_environment_links import (
    HookEnvironmentLink,
    HookEnvironmentLinkCreateOptions,
    HookEnvironmentLinkListOptions,
    HookEnvironmentLinks,
    HookEnvironmentLinkUpdateOptions,
)
from scalr_client.resources.hooks import Hook, HookCreateOptions, HookListOptions, Hooks, HookUpdateOptions, HookVCSRepo
from scalr_client.resources.infracost_integrations import (
    InfracostIntegration,
    InfracostIntegrationCreateOptions,
    InfracostIntegrationListOptions,
    InfracostIntegrations,
    InfracostIntegrationUpdateOptions,
)
from scalr_client.resources.module_namespaces import (
    ModuleNamespace,
    ModuleNamespaceCreateOptions,
    ModuleNamespaceListOptions,
    ModuleNamespaces,
    ModuleNamespaceUpdateOptions,
)
from scalr_client.resources.module_versions import (
    ModuleVersion,
    ModuleVersionListOptions,
    ModuleVersions,
    ModuleVersionStatus,
)
from scalr_client.resources.provider_configuration_defaults import ProviderConfigurationDefaults
from scalr_client.resources.provider_configurations import (
    AwsDefaultTagsStrategy,
    ProviderConfiguration,
    ProviderConfigurationCreateOptions,
    ProviderConfigurationListOptions,
    ProviderConfigurations,
    ProviderConfigurationUpdateOptions,
)
from scalr_client.resources.remote_state_consumers import RemoteStateConsumers
from scalr_client.resources.run_schedule_rules import (
    RunScheduleRule,
    RunScheduleRuleCreateOptions,
    RunScheduleRuleListOptions,
    RunScheduleRules,
    RunScheduleRuleUpdateOptions,
    ScheduleMode,
)
from scalr_client.resources.ssh_key_links import SSHKeyLinks
from scalr_client.resources.ssh_keys import SSHKey, SSHKeyCreateOptions, SSHKeyListOptions, SSHKeys, SSHKeyUpdateOptions
from scalr_client.resources.storage_profiles import (
    StorageProfile,
    StorageProfileBackendType,
    StorageProfileCreateOptions,
    StorageProfileListOptions,
    StorageProfiles,
    StorageProfileUpdateOptions,
)
from scalr_client.resources.variables import (
    CategoryType,
    Variable,
    VariableCreateOptions,
    VariableListOptions,
    Variables,
    VariableUpdateOptions,
)
from scalr_client.resources.workload_identity_providers import (
    WorkloadIdentityProvider,
    WorkloadIdentityProviderCreateOptions,
    WorkloadIdentityProviderListOptions,
    WorkloadIdentityProviders,
    WorkloadIdentityProviderUpdateOptions,
)
from scalr_client.resources.workspaces import (
    Output,
    Workspace,
    WorkspaceAutoQueueRuns,
    WorkspaceCreateOptions,
    WorkspaceEnvironmentType,
    WorkspaceExecutionMode,
    WorkspaceHooks,
    WorkspaceIaCPlatform,
    WorkspaceListOptions,
    WorkspaceRunScheduleOptions,
    Workspaces,
    WorkspaceTerragrunt,
    WorkspaceUpdateOptions,
    WorkspaceVCSRepo,
)

__all__ = [
    "AccessToken",
    "AccessTokenUpdateOptions",
    "AccessTokens",
    "AssumeServiceAccountPolicies",
    "AssumeServiceAccountPolicy",
    "AssumeServiceAccountPolicyCreateOptions",
    "AssumeServiceAccountPolicyListOptions",
    "AssumeServiceAccountPolicyUpdateOptions",
    "AwsDefaultTagsStrategy",
    "CategoryType",
    "CheckovIntegration",
    "CheckovIntegrationCreateOptions",
    "CheckovIntegrationListOptions",
    "CheckovIntegrationUpdateOptions",
    "CheckovIntegrationVCSRepo",
    "CheckovIntegrations",
    "ClaimCondition",
    "DriftDetection",
    "DriftDetectionCreateOptions",
    "DriftDetectionSchedulePeriod",
    "DriftDetectionScheduleRunMode",
    "DriftDetectionUpdateOptions",
    "DriftDetectionWorkspaceFilter",
    "DriftDetections",
    "Environment",
    "EnvironmentCreateOptions",
    "EnvironmentHook",
    "EnvironmentHookCreateOptions",
    "EnvironmentHookListOptions",
    "EnvironmentHookUpdateOptions",
    "EnvironmentHooks",
    "EnvironmentListOptions",
    "EnvironmentStatus",
    "EnvironmentUpdateOptions",
    "Environments",
    "EventBridgeIntegration",
    "EventBridgeIntegrationCreateOptions",
    "EventBridgeIntegrationListOptions",
    "EventBridgeIntegrationUpdateOptions",
    "EventBridgeIntegrations",
    "FederatedEnvironments",
    "Hook",
    "HookCreateOptions",
    "HookEnvironmentLink",
    "HookEnvironmentLinkCreateOptions",
    "HookEnvironmentLinkListOptions",
    "HookEnvironmentLinkUpdateOptions",
    "HookEnvironmentLinks",
    "HookListOptions",
    "HookUpdateOptions",
    "HookVCSRepo",
    "Hooks",
    "InfracostIntegration",
    "InfracostIntegrationCreateOptions",
    "InfracostIntegrationListOptions",
    "InfracostIntegrationUpdateOptions",
    "InfracostIntegrations",
    "IntegrationStatus",
    "ListOptions",
    "ModuleNamespace",
    "ModuleNamespaceCreateOptions",
    "ModuleNamespaceListOptions",
    "ModuleNamespaceUpdateOptions",
    "ModuleNamespaces",
    "ModuleVersion",
    "ModuleVersionListOptions",
    "ModuleVersionStatus",
    "ModuleVersions",
    "Output",
    "ProviderConfiguration",
    "ProviderConfigurationCreateOptions",
    "ProviderConfigurationDefaults",
    "ProviderConfigurationListOptions",
    "ProviderConfigurationUpdateOptions",
    "ProviderConfigurations",
    "RemoteStateConsumers",
    "ResourceList",
    "ResourceService",
    "RunScheduleRule",
    "RunScheduleRuleCreateOptions",
    "RunScheduleRuleListOptions",
    "RunScheduleRuleUpdateOptions",
    "RunScheduleRules",
    "SSHKey",
    "SSHKeyCreateOptions",
    "SSHKeyLinks",
    "SSHKeyListOptions",
    "SSHKeyUpdateOptions",
    "SSHKeys",
    "ScheduleMode",
    "StorageProfile",
    "StorageProfileBackendType",
    "StorageProfileCreateOptions",
    "StorageProfileListOptions",
    "StorageProfileUpdateOptions",
    "StorageProfiles",
    "Variable",
    "VariableCreateOptions",
    "VariableListOptions",
    "VariableUpdateOptions",
    "Variables",
    "WorkloadIdentityProvider",
    "WorkloadIdentityProviderCreateOptions",
    "WorkloadIdentityProviderListOptions",
    "WorkloadIdentityProviderUpdateOptions",
    "WorkloadIdentityProviders",
    "Workspace",
    "WorkspaceAutoQueueRuns",
    "WorkspaceCreateOptions",
    "WorkspaceEnvironmentType",
    "WorkspaceExecutionMode",
    "WorkspaceHooks",
    "WorkspaceIaCPlatform",
    "WorkspaceListOptions",
    "WorkspaceRunScheduleOptions",
    "WorkspaceTerragrunt",
    "WorkspaceUpdateOptions",
    "WorkspaceVCSRepo",
    "Workspaces",
]
