"""Hooks: scripts from a VCS repository run at chosen points of a run."""

from dataclasses import dataclass
from typing import Any, ClassVar

from scalr_client.errors import InvalidArgumentError
from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, Struct, attribute, option, option_relation, relation
from scalr_client.resources.base import (
    ListOptions,
    ResourceList,
    ResourceService,
    given,
    query_param,
    related_id,
    require_id,
    valid_string_id,
)

_TYPE = "hooks"


@dataclass
class HookVCSRepo(Struct):
    identifier: str | None = None
    branch: str | None = None


@dataclass
class Hook(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    description: str = ""
    interpreter: str = ""
    scriptfile_path: str = ""
    vcs_repo: HookVCSRepo | None = attribute(decode=HookVCSRepo.from_dict)

    vcs_provider: Any = relation()
    account: ResourceIdentifier | None = relation()


@dataclass
class HookListOptions(ListOptions):
    account: str | None = query_param("filter[account]")
    name: str | None = query_param("filter[name]")
    events: str | None = query_param("filter[events]")
    query: str | None = query_param("query")
    sort: str | None = query_param("sort")
    include: str | None = query_param("include")


@dataclass
class HookCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    description: str | None = option()
    interpreter: str | None = option()
    scriptfile_path: str | None = option()
    vcs_repo: HookVCSRepo | None = option()

    account: str | None = option_relation("accounts")
    vcs_provider: str | None = option_relation("vcs-providers")

    def validate(self) -> None:
        account = related_id(self.account)
        if account is None:
            raise InvalidArgumentError("account is required")
        if not valid_string_id(account):
            raise InvalidArgumentError("invalid value for account ID")
        vcs_provider = related_id(self.vcs_provider)
        if vcs_provider is None:
            raise InvalidArgumentError("vcs provider is required")
        if not valid_string_id(vcs_provider):
            raise InvalidArgumentError("invalid value for vcs provider ID")
        if given(self.vcs_repo) is None:
            raise InvalidArgumentError("vcs repo is required")
        if given(self.name) is None:
            raise InvalidArgumentError("name is required")
        if given(self.interpreter) is None:
            raise InvalidArgumentError("interpreter is required")
        if given(self.scriptfile_path) is None:
            raise InvalidArgumentError("scriptfile path is required")


@dataclass
class HookUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    description: str | None = option()
    interpreter: str | None = option()
    scriptfile_path: str | None = option()
    vcs_repo: HookVCSRepo | None = option()

    vcs_provider: str | None = option_relation("vcs-providers")


class Hooks(ResourceService):
    def list(self, options: HookListOptions | None = None) -> ResourceList[Hook]:
        return self._list("hooks", Hook, options)

    def iterate(self, options: HookListOptions | None = None):
        return self._iterate(self.list, options or HookListOptions())

    def create(self, options: HookCreateOptions) -> Hook:
        options.validate()
        return self._create("hooks", Hook, options)

    def read(self, hook_id: str) -> Hook:
        require_id(hook_id, "Hook")
        return self._read(self._path("hooks/{}", hook_id), Hook)

    def update(self, hook_id: str, options: HookUpdateOptions) -> Hook:
        require_id(hook_id, "Hook")
        return self._update(self._path("hooks/{}", hook_id), Hook, options)

    def delete(self, hook_id: str) -> None:
        require_id(hook_id, "Hook")
        self._delete(self._path("hooks/{}", hook_id))
