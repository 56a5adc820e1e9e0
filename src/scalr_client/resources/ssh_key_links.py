"""Attach an SSH key to a workspace, or detach it."""

from scalr_client.jsonapi import MEDIA_TYPE
from scalr_client.resources.base import ResourceService, require_id
from scalr_client.resources.workspaces import Workspace


class SSHKeyLinks(ResourceService):
    def create(self, workspace_id: str, ssh_key_id: str) -> Workspace:
        """Link the key and return the updated workspace."""
        require_id(workspace_id, "workspace")
        require_id(ssh_key_id, "SSH key")
        response = self._http.post(
            self._path("workspaces/{}/ssh-key-links", workspace_id),
            {"ssh-key": ssh_key_id},
            headers={"Content-Type": MEDIA_TYPE},
        )
        return self._decode(Workspace, response)

    def delete(self, workspace_id: str) -> None:
        require_id(workspace_id, "workspace")
        self._delete(self._path("workspaces/{}/ssh-key-links/", workspace_id))
