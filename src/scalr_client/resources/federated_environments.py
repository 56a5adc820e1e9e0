"""Environments federated with another environment.

Federation is managed through the environment's relationship endpoint;
members are referenced by environment ID.
"""

from collections.abc import Iterable
from typing import Any

from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, require_id
from scalr_client.resources.environments import Environment

_RELATED_TYPE = "environments"


class FederatedEnvironments(ResourceService):
    def _relationship_path(self, environment_id: str) -> str:
        require_id(environment_id, "environment")
        return self._path("environments/{}/relationships/federated-environments", environment_id)

    def list(self, environment_id: str, options: ListOptions | None = None) -> ResourceList[Environment]:
        """Federated environments; each item carries only its ID."""
        return self._list(self._relationship_path(environment_id), Environment, options)

    def iterate(self, environment_id: str, options: ListOptions | None = None):
        return self._iterate(lambda page: self.list(environment_id, page), options or ListOptions())

    def add(self, environment_id: str, environments: Iterable[Any]) -> None:
        self._add_relationship(self._relationship_path(environment_id), environments, _RELATED_TYPE)

    def replace(self, environment_id: str, environments: Iterable[Any]) -> None:
        self._replace_relationship(self._relationship_path(environment_id), environments, _RELATED_TYPE)

    def delete(self, environment_id: str, environments: Iterable[Any]) -> None:
        self._delete_relationship(self._relationship_path(environment_id), environments, _RELATED_TYPE)
