"""The ``Client`` facade: one HTTP client, every resource service.

Example:
    ```python
    from scalr_client import Client

    with Client.from_env() as scalr:
        for workspace in scalr.workspaces.iterate():
            print(workspace.name)
    ```
"""

import logging
from typing import Any

from scalr_client.config import ClientConfig
from scalr_client.http import HTTPClient
from scalr_client.resources import (
    AccessTokens,
    AssumeServiceAccountPolicies,
    CheckovIntegrations,
    DriftDetections,
    EnvironmentHooks,
    Environments,
    EventBridgeIntegrations,
    FederatedEnvironments,
    HookEnvironmentLinks,
    Hooks,
    InfracostIntegrations,
    ModuleNamespaces,
    ModuleVersions,
    ProviderConfigurationDefaults,
    ProviderConfigurations,
    RemoteStateConsumers,
    RunScheduleRules,
    SSHKeyLinks,
    SSHKeys,
    StorageProfiles,
    Variables,
    WorkloadIdentityProviders,
    Workspaces,
)

logger = logging.getLogger(__name__)

_CONFIG_OPTIONS = ("retry_max", "retry_server_errors", "timeout", "app_name", "app_version")


class Client:
    """Entry point for the Scalr API.

    Args:
        hostname: Scalr host, e.g. ``example.scalr.io``. Defaults to
            ``SCALR_HOSTNAME``.
        token: API token. Defaults to ``SCALR_TOKEN`` or the file named by
            ``SCALR_TOKEN_FILE``.
        config: A resolved config; when given, ``hostname``, ``token`` and
            the config keywords must not be passed.
        **http_options: ``retry_max``, ``retry_server_errors``, ``timeout``,
            ``app_name`` and ``app_version`` feed the config; anything else
            (``transport``, ``headers``, ``user_agent``, ``backoff_base``) goes
            to ``HTTPClient``.

    Raises:
        CredentialNotFoundError: No hostname or token was found.
        ConfigurationError: A setting from the environment is malformed.
    """

    def __init__(
        self,
        hostname: str | None = None,
        token: str | None = None,
        *,
        config: ClientConfig | None = None,
        **http_options: Any,
    ) -> None:
        config_options = {key: http_options.pop(key) for key in _CONFIG_OPTIONS if key in http_options}
        if config is None:
            config = ClientConfig.resolve(hostname, token, **config_options)
        elif hostname is not None or token is not None or config_options:
            raise TypeError("pass either config or individual settings, not both")
        self.config = config

        app_info = (config.app_name, config.app_version or "") if config.app_name else None
        self.http = HTTPClient(
            config.base_url,
            config.token,
            retry_max=config.retry_max,
            retry_server_errors=config.retry_server_errors,
            timeout=config.timeout,
            app_info=app_info,
            **http_options,
        )
        logger.debug(f"Scalr client ready for {config.base_url}")

        self.access_tokens = AccessTokens(self.http)
        self.assume_service_account_policies = AssumeServiceAccountPolicies(self.http)
        self.checkov_integrations = CheckovIntegrations(self.http)
        self.drift_detections = DriftDetections(self.http)
        self.environments = Environments(self.http)
        self.environment_hooks = EnvironmentHooks(self.http)
        self.event_bridge_integrations = EventBridgeIntegrations(self.http)
        self.federated_environments = FederatedEnvironments(self.http)
        self.hooks = Hooks(self.http)
        self.hook_environment_links = HookEnvironmentLinks(self.http)
        self.infracost_integrations = InfracostIntegrations(self.http)
        self.module_namespaces = ModuleNamespaces(self.http)
        self.module_versions = ModuleVersions(self.http)
        self.provider_configurations = ProviderConfigurations(self.http)
        self.provider_configuration_defaults = ProviderConfigurationDefaults(self.environments)
        self.remote_state_consumers = RemoteStateConsumers(self.http)
        self.run_schedule_rules = RunScheduleRules(self.http)
        self.ssh_keys = SSHKeys(self.http)
        self.ssh_key_links = SSHKeyLinks(self.http)
        self.storage_profiles = StorageProfiles(self.http)
        self.variables = Variables(self.http)
        self.workload_identity_providers = WorkloadIdentityProviders(self.http)
        self.workspaces = Workspaces(self.http)

    @classmethod
    def from_env(cls, **http_options: Any) -> "Client":
        """Build a client from ``SCALR_*`` variables and ``.env``."""
        return cls(**http_options)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
