"""Mark provider configurations as defaults of an environment.

There is no dedicated endpoint: the environment is read, its
``default-provider-configurations`` list is changed, and the list is written
back.
"""

import logging

from scalr_client.errors import InvalidArgumentError
from scalr_client.resources.base import require_id
from scalr_client.resources.environments import Environments

logger = logging.getLogger(__name__)


class ProviderConfigurationDefaults:
    def __init__(self, environments: Environments) -> None:
        self._environments = environments

    def _current(self, environment_id: str) -> list[str]:
        environment = self._environments.read(environment_id)
        return [item.id for item in environment.default_provider_configurations]

    def create(self, environment_id: str, provider_configuration_id: str) -> None:
        require_id(environment_id, "environment")
        require_id(provider_configuration_id, "provider configuration")

        current = self._current(environment_id)
        if provider_configuration_id in current:
            raise InvalidArgumentError(
                f"provider configuration with ID {provider_configuration_id} "
                f"is already default for environment with ID {environment_id}"
            )
        self._environments.update_default_provider_configuration_only(
            environment_id, [*current, provider_configuration_id]
        )
        logger.info(f"Provider configuration {provider_configuration_id} is now default for {environment_id}")

    def delete(self, environment_id: str, provider_configuration_id: str) -> None:
        require_id(environment_id, "environment")
        require_id(provider_configuration_id, "provider configuration")

        current = self._current(environment_id)
        if provider_configuration_id not in current:
            raise InvalidArgumentError("provider configuration is not in the list of default provider configurations")
        remaining = [item for item in current if item != provider_configuration_id]
        self._environments.update_default_provider_configuration_only(environment_id, remaining)
        logger.info(f"Provider configuration {provider_configuration_id} is no longer default for {environment_id}")
