"""Read-only access to versions of private registry modules."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from scalr_client.errors import InvalidArgumentError
from scalr_client.models import Model, attribute, enum_value
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "module-versions"


class ModuleVersionStatus(StrEnum):
    NOT_UPLOADED = "not_uploaded"
    PENDING = "pending"
    OK = "ok"
    ERRORED = "reg_ingress_failed"
    PENDING_DELETE = "pending_delete"


@dataclass
class ModuleVersion(Model):
    resource_type: ClassVar[str] = _TYPE

    is_root_module: bool = False
    status: ModuleVersionStatus | None = attribute(decode=enum_value(ModuleVersionStatus))
    version: str = ""


@dataclass
class ModuleVersionListOptions(ListOptions):
    module: str | None = query_param("filter[module]")
    status: str | None = query_param("filter[status]")
    version: str | None = query_param("filter[version]")
    include: str | None = query_param("include")


class ModuleVersions(ResourceService):
    def list(self, options: ModuleVersionListOptions) -> ResourceList[ModuleVersion]:
        """Versions of one module; ``options.module`` must be set."""
        if options is None or not options.module:
            raise InvalidArgumentError("filter[module] is required")
        return self._list("module-versions", ModuleVersion, options)

    def iterate(self, options: ModuleVersionListOptions):
        if options is None or not options.module:
            raise InvalidArgumentError("filter[module] is required")
        return self._iterate(self.list, options)

    def read(self, module_version_id: str) -> ModuleVersion:
        require_id(module_version_id, "module version")
        return self._read(self._path("module-versions/{}", module_version_id), ModuleVersion)
