"""Terraform and shell variables scoped to an account, environment or workspace."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from scalr_client.errors import InvalidArgumentError
from scalr_client.jsonapi import ResourceIdentifier
from scalr_client.models import Model, Options, attribute, enum_value, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, given, query_param, require_id

_TYPE = "vars"


class CategoryType(StrEnum):
    ENV = "env"
    TERRAFORM = "terraform"


@dataclass
class Variable(Model):
    resource_type: ClassVar[str] = _TYPE

    key: str = ""
    value: str = ""
    category: CategoryType | None = attribute(decode=enum_value(CategoryType))
    hcl: bool = False
    sensitive: bool = False
    final: bool = False

    workspace: Any = relation()
    environment: Any = relation()
    account: ResourceIdentifier | None = relation()


@dataclass
class VariableListOptions(ListOptions):
    account: str | None = query_param("filter[account]")
    environment: str | None = query_param("filter[environment]")
    workspace: str | None = query_param("filter[workspace]")


@dataclass
class VariableCreateOptions(Options):
    """Scope the variable with exactly one of ``workspace``, ``environment`` or ``account``."""

    resource_type: ClassVar[str] = _TYPE

    key: str | None = option()
    value: str | None = option()
    category: CategoryType | None = option()
    hcl: bool | None = option()
    sensitive: bool | None = option()
    final: bool | None = option()

    workspace: str | None = option_relation("workspaces")
    environment: str | None = option_relation("environments")
    account: str | None = option_relation("accounts")

    def validate(self) -> None:
        if given(self.key) is None:
            raise InvalidArgumentError("key is required")
        if given(self.category) is None:
            raise InvalidArgumentError("category is required")


@dataclass
class VariableUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    key: str | None = option()
    value: str | None = option()
    hcl: bool | None = option()
    sensitive: bool | None = option()
    final: bool | None = option()


def _force(force: bool) -> dict[str, str]:
    return {"force": "true" if force else "false"}


class Variables(ResourceService):
    def list(self, options: VariableListOptions | None = None) -> ResourceList[Variable]:
        return self._list("vars", Variable, options)

    def iterate(self, options: VariableListOptions | None = None):
        return self._iterate(self.list, options or VariableListOptions())

    def create(self, options: VariableCreateOptions, force: bool = False) -> Variable:
        """Create a variable; ``force`` overrides a final variable of the same key higher up."""
        options.validate()
        return self._create("vars", Variable, options, params=_force(force))

    def read(self, variable_id: str) -> Variable:
        require_id(variable_id, "variable")
        return self._read(self._path("vars/{}", variable_id), Variable)

    def update(self, variable_id: str, options: VariableUpdateOptions, force: bool = False) -> Variable:
        require_id(variable_id, "variable")
        return self._update(self._path("vars/{}", variable_id), Variable, options, params=_force(force), id=variable_id)

    def delete(self, variable_id: str) -> None:
        require_id(variable_id, "variable")
        self._delete(self._path("vars/{}", variable_id))
