"""Module namespaces group private registry modules and control who may use them."""

from dataclasses import dataclass
from typing import Any, ClassVar

from scalr_client.models import Model, Options, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "module-namespaces"


@dataclass
class ModuleNamespace(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    is_shared: bool = False

    environments: list[Any] = relation(many=True)
    modules: list[Any] = relation(many=True)
    owners: list[Any] = relation(many=True)


@dataclass
class ModuleNamespaceListOptions(ListOptions):
    sort: str | None = query_param("sort")
    name: str | None = query_param("filter[name]")
    environment: str | None = query_param("filter[environment]")


@dataclass
class ModuleNamespaceCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    is_shared: bool | None = option()

    environments: list[str] | None = option_relation("environments", many=True)
    owners: list[str] | None = option_relation("teams", many=True)


@dataclass
class ModuleNamespaceUpdateOptions(Options):
    """The name of a namespace cannot change."""

    resource_type: ClassVar[str] = _TYPE

    is_shared: bool | None = option()

    environments: list[str] | None = option_relation("environments", many=True)
    owners: list[str] | None = option_relation("teams", many=True)


class ModuleNamespaces(ResourceService):
    def list(self, options: ModuleNamespaceListOptions | None = None) -> ResourceList[ModuleNamespace]:
        return self._list("module-namespaces", ModuleNamespace, options)

    def iterate(self, options: ModuleNamespaceListOptions | None = None):
        return self._iterate(self.list, options or ModuleNamespaceListOptions())

    def create(self, options: ModuleNamespaceCreateOptions) -> ModuleNamespace:
        return self._create("module-namespaces", ModuleNamespace, options)

    def read(self, namespace_id: str) -> ModuleNamespace:
        require_id(namespace_id, "module namespace")
        return self._read(self._path("module-namespaces/{}", namespace_id), ModuleNamespace)

    def update(self, namespace_id: str, options: ModuleNamespaceUpdateOptions) -> ModuleNamespace:
        require_id(namespace_id, "module namespace")
        return self._update(self._path("module-namespaces/{}", namespace_id), ModuleNamespace, options)

    def delete(self, namespace_id: str) -> None:
        require_id(namespace_id, "module namespace")
        self._delete(self._path("module-namespaces/{}", namespace_id))
