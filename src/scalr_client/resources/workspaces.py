"""Workspaces: the unit that holds state, variables and runs."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, ClassVar

from scalr_client.errors import InvalidArgumentError
from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import (
    Model,
    Options,
    Struct,
    attribute,
    enum_value,
    option,
    option_relation,
    parse_datetime,
    relation,
)
from scalr_client.resources.base import (
    ListOptions,
    ResourceList,
    ResourceService,
    given,
    query_param,
    require_id,
    valid_string,
    valid_string_id,
)

logger = logging.getLogger(__name__)

_TYPE = "workspaces"


class WorkspaceExecutionMode(StrEnum):
    REMOTE = "remote"
    LOCAL = "local"


class WorkspaceAutoQueueRuns(StrEnum):
    SKIP_FIRST = "skip_first"
    ALWAYS = "always"
    NEVER = "never"
    ON_CREATE_ONLY = "on_create_only"


class WorkspaceIaCPlatform(StrEnum):
    TERRAFORM = "terraform"
    OPENTOFU = "opentofu"


class WorkspaceEnvironmentType(StrEnum):
    PRODUCTION = "production"
    STAGING = "staging"
    TESTING = "testing"
    DEVELOPMENT = "development"
    UNMAPPED = "unmapped"


@dataclass
class WorkspaceActions(Struct):
    is_destroyable: bool = False


@dataclass
class WorkspacePermissions(Struct):
    can_destroy: bool = False
    can_force_unlock: bool = False
    can_lock: bool = False
    can_queue_apply: bool = False
    can_queue_destroy: bool = False
    can_queue_run: bool = False
    can_read_settings: bool = False
    can_unlock: bool = False
    can_update: bool = False
    can_update_variable: bool = False


@dataclass
class WorkspaceVCSRepo(Struct):
    """Where the workspace's configuration comes from.

    When used in options, unset fields are left out of the request.
    """

    branch: str | None = None
    identifier: str | None = None
    ingress_submodules: bool | None = None
    path: str | None = None
    trigger_prefixes: list[str] | None = None
    trigger_patterns: str | None = None
    dry_runs_enabled: bool | None = None
    version_constraint: str | None = None


@dataclass
class WorkspaceTerragrunt(Struct):
    version: str | None = None
    use_run_all: bool | None = None
    include_external_dependencies: bool | None = None


@dataclass
class WorkspaceHooks(Struct):
    """Shell commands run around each stage of a run."""

    pre_init: str | None = None
    pre_plan: str | None = None
    post_plan: str | None = None
    pre_apply: str | None = None
    post_apply: str | None = None


@dataclass
class Output(Struct):
    name: str = ""
    value: Any = None
    sensitive: bool = False


@dataclass
class Workspace(Model):
    resource_type: ClassVar[str] = _TYPE

    actions: WorkspaceActions | None = attribute(decode=WorkspaceActions.from_dict)
    auto_apply: bool = False
    force_latest_run: bool = False
    deletion_protection_enabled: bool = False
    can_queue_destroy_plan: bool = False
    created_at: datetime | None = attribute(decode=parse_datetime)
    file_triggers_enabled: bool = False
    locked: bool = False
    migration_environment: str = ""
    name: str = ""
    operations: bool = False
    execution_mode: WorkspaceExecutionMode | None = attribute(decode=enum_value(WorkspaceExecutionMode))
    permissions: WorkspacePermissions | None = attribute(decode=WorkspacePermissions.from_dict)
    terraform_version: str = ""
    iac_platform: WorkspaceIaCPlatform | None = attribute(decode=enum_value(WorkspaceIaCPlatform))
    vcs_repo: WorkspaceVCSRepo | None = attribute(decode=WorkspaceVCSRepo.from_dict)
    terragrunt: WorkspaceTerragrunt | None = attribute(decode=WorkspaceTerragrunt.from_dict)
    working_directory: str = ""
    apply_schedule: str = ""
    destroy_schedule: str = ""
    has_resources: bool = False
    auto_queue_runs: WorkspaceAutoQueueRuns | None = attribute(decode=enum_value(WorkspaceAutoQueueRuns))
    hooks: WorkspaceHooks | None = attribute(decode=WorkspaceHooks.from_dict)
    run_operation_timeout: int | None = None
    var_files: list[str] = attribute(default_factory=list)
    environment_type: WorkspaceEnvironmentType | None = attribute(decode=enum_value(WorkspaceEnvironmentType))
    remote_state_sharing: bool = False

    current_run: ResourceIdentifier | None = relation()
    latest_run: ResourceIdentifier | None = relation()
    environment: Any = relation()
    created_by: ResourceIdentifier | None = relation()
    vcs_provider: ResourceIdentifier | None = relation()
    agent_pool: ResourceIdentifier | None = relation()
    module_version: Any = relation()
    tags: list[Any] = relation(many=True)
    configuration_version: ResourceIdentifier | None = relation()
    ssh_key: Any = relation()


@dataclass
class WorkspaceListOptions(ListOptions):
    include: str | None = query_param("include")
    workspace: str | None = query_param("filter[workspace]")
    account: str | None = query_param("filter[account]")
    environment: str | None = query_param("filter[environment]")
    name: str | None = query_param("filter[name]")
    tag: str | None = query_param("filter[tag]")
    agent_pool: str | None = query_param("filter[agent-pool]")
    fields: str | None = query_param("fields[workspaces]")


@dataclass
class WorkspaceCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    auto_apply: bool | None = option()
    force_latest_run: bool | None = option()
    deletion_protection_enabled: bool | None = option()
    operations: bool | None = option()
    execution_mode: WorkspaceExecutionMode | None = option()
    terraform_version: str | None = option()
    terragrunt: WorkspaceTerragrunt | None = option()
    iac_platform: WorkspaceIaCPlatform | None = option()
    vcs_repo: WorkspaceVCSRepo | None = option()
    hooks: WorkspaceHooks | None = option()
    working_directory: str | None = option()
    auto_queue_runs: WorkspaceAutoQueueRuns | None = option()
    var_files: list[str] | None = option()
    environment_type: WorkspaceEnvironmentType | None = option()
    run_operation_timeout: int | None = option()
    remote_state_sharing: bool | None = option()

    environment: str | None = option_relation("environments")
    vcs_provider: str | None = option_relation("vcs-providers")
    agent_pool: str | None = option_relation("agent-pools")
    module_version: str | None = option_relation("module-versions")
    tags: list[str] | None = option_relation("tags", many=True)


@dataclass
class WorkspaceUpdateOptions(Options):
    """Partial update; ``vcs_repo=None`` or ``terragrunt=None`` clear the block."""

    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    auto_apply: bool | None = option()
    force_latest_run: bool | None = option()
    deletion_protection_enabled: bool | None = option()
    file_triggers_enabled: bool | None = option()
    operations: bool | None = option()
    execution_mode: WorkspaceExecutionMode | None = option()
    terraform_version: str | None = option()
    terragrunt: WorkspaceTerragrunt | None = option()
    iac_platform: WorkspaceIaCPlatform | None = option()
    vcs_repo: WorkspaceVCSRepo | None = option()
    hooks: WorkspaceHooks | None = option()
    working_directory: str | None = option()
    auto_queue_runs: WorkspaceAutoQueueRuns | None = option()
    var_files: list[str] | None = option()
    environment_type: WorkspaceEnvironmentType | None = option()
    run_operation_timeout: int | None = option()
    remote_state_sharing: bool | None = option()

    vcs_provider: str | None = option_relation("vcs-providers")
    agent_pool: str | None = option_relation("agent-pools")
    module_version: str | None = option_relation("module-versions")


@dataclass
class WorkspaceRunScheduleOptions:
    """Cron expressions for scheduled runs; None removes a schedule."""

    apply_schedule: str | None = None
    destroy_schedule: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"apply-schedule": self.apply_schedule, "destroy-schedule": self.destroy_schedule}


class Workspaces(ResourceService):
    def list(self, options: WorkspaceListOptions | None = None) -> ResourceList[Workspace]:
        return self._list("workspaces", Workspace, options)

    def iterate(self, options: WorkspaceListOptions | None = None):
        return self._iterate(self.list, options or WorkspaceListOptions())

    def create(self, options: WorkspaceCreateOptions) -> Workspace:
        name = given(options.name)
        if not valid_string(name):
            raise InvalidArgumentError("name is required")
        if not valid_string_id(name):
            raise InvalidArgumentError("invalid value for name")
        return self._create("workspaces", Workspace, options)

    def read(self, environment_id: str, workspace_name: str) -> Workspace:
        """Find a workspace by environment and name.

        Raises:
            InvalidArgumentError: The filter did not match exactly one workspace.
        """
        if not valid_string_id(environment_id):
            raise InvalidArgumentError("invalid value for environment")
        if not valid_string_id(workspace_name):
            raise InvalidArgumentError("invalid value for workspace")

        options = WorkspaceListOptions(include="created-by", environment=environment_id, name=workspace_name)
        found = self.list(options)
        if len(found.items) != 1:
            logger.debug(f"Workspace lookup {environment_id}/{workspace_name} matched {len(found.items)} results")
            raise InvalidArgumentError("invalid filters")
        return found.items[0]

    def read_by_id(self, workspace_id: str) -> Workspace:
        require_id(workspace_id, "workspace")
        return self._read(self._path("workspaces/{}", workspace_id), Workspace, params={"include": "created-by"})

    def update(self, workspace_id: str, options: WorkspaceUpdateOptions) -> Workspace:
        require_id(workspace_id, "workspace")
        return self._update(self._path("workspaces/{}", workspace_id), Workspace, options)

    def delete(self, workspace_id: str) -> None:
        require_id(workspace_id, "workspace")
        self._delete(self._path("workspaces/{}", workspace_id))

    def set_schedule(self, workspace_id: str, options: WorkspaceRunScheduleOptions) -> Workspace:
        require_id(workspace_id, "workspace")
        response = self._http.post(
            self._path("workspaces/{}/actions/set-schedule", workspace_id),
            options.to_dict(),
            headers={"Content-Type": "application/json"},
        )
        return self._decode(Workspace, response)

    def read_outputs(self, workspace_id: str):
        """Outputs of the workspace's current state, as ``Output`` records."""
        require_id(workspace_id, "workspace")
        response = self._http.get(
            self._path("workspaces/{}/outputs", workspace_id),
            headers={"Content-Type": "application/json"},
        )
        payload = response.json()
        return [Output.from_dict(item) for item in payload.get("data") or []]
