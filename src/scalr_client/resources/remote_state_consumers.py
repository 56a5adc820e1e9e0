"""Workspaces allowed to read another workspace's state."""

from collections.abc import Iterable
from typing import Any

from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, require_id
from scalr_client.resources.workspaces import Workspace


class RemoteStateConsumers(ResourceService):
    def _relationship_path(self, workspace_id: str) -> str:
        require_id(workspace_id, "workspace")
        return self._path("workspaces/{}/relationships/remote-state-consumers", workspace_id)

    def list(self, workspace_id: str, options: ListOptions | None = None) -> ResourceList[Workspace]:
        return self._list(self._relationship_path(workspace_id), Workspace, options)

    def iterate(self, workspace_id: str, options: ListOptions | None = None):
        return self._iterate(lambda page: self.list(workspace_id, page), options or ListOptions())

    def add(self, workspace_id: str, workspaces: Iterable[Any]) -> None:
        self._add_relationship(self._relationship_path(workspace_id), workspaces, "workspaces")

    def replace(self, workspace_id: str, workspaces: Iterable[Any]) -> None:
        self._replace_relationship(self._relationship_path(workspace_id), workspaces, "workspaces")

    def delete(self, workspace_id: str, workspaces: Iterable[Any]) -> None:
        self._delete_relationship(self._relationship_path(workspace_id), workspaces, "workspaces")
