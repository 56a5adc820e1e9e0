"""Links attaching hooks to environments for chosen run events."""

from dataclasses import dataclass
from typing import Any, ClassVar

from scalr_client.errors import InvalidArgumentError
from scalr_client.models import Model, Options, attribute, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, given, query_param, require_id

_TYPE = "hook-environment-links"


@dataclass
class HookEnvironmentLink(Model):
    resource_type: ClassVar[str] = _TYPE

    events: list[str] = attribute(default_factory=list)
    environment: Any = relation()
    hook: Any = relation()


@dataclass
class HookEnvironmentLinkListOptions(ListOptions):
    """``environment`` is mandatory; the API only lists links per environment."""

    environment: str | None = query_param("filter[environment]")
    events: str | None = query_param("filter[events]")
    query: str | None = query_param("query")
    sort: str | None = query_param("sort")
    include: str | None = query_param("include")


@dataclass
class HookEnvironmentLinkCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    events: list[str] | None = option()
    environment: str | None = option_relation("environments")
    hook: str | None = option_relation("hooks")


@dataclass
class HookEnvironmentLinkUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    events: list[str] | None = option()


class HookEnvironmentLinks(ResourceService):
    model: ClassVar[type[HookEnvironmentLink]] = HookEnvironmentLink
    label: ClassVar[str] = "Hook Environment Link"

    def list(self, options: HookEnvironmentLinkListOptions) -> ResourceList[HookEnvironmentLink]:
        if options is None or given(options.environment) is None:
            raise InvalidArgumentError("environment is required")
        return self._list("hook-environment-links", self.model, options)

    def iterate(self, options: HookEnvironmentLinkListOptions):
        if options is None or given(options.environment) is None:
            raise InvalidArgumentError("environment is required")
        return self._iterate(self.list, options)

    def create(self, options: HookEnvironmentLinkCreateOptions) -> HookEnvironmentLink:
        if given(options.environment) is None:
            raise InvalidArgumentError("environment is required")
        if given(options.hook) is None:
            raise InvalidArgumentError("hook is required")
        return self._create("hook-environment-links", self.model, options)

    def read(self, link_id: str) -> HookEnvironmentLink:
        require_id(link_id, self.label)
        return self._read(self._path("hook-environment-links/{}", link_id), self.model)

    def update(self, link_id: str, options: HookEnvironmentLinkUpdateOptions) -> HookEnvironmentLink:
        require_id(link_id, self.label)
        return self._update(self._path("hook-environment-links/{}", link_id), self.model, options)

    def delete(self, link_id: str) -> None:
        require_id(link_id, self.label)
        self._delete(self._path("hook-environment-links/{}", link_id))
