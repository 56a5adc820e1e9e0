"""Cron rules that queue runs on a workspace."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from scalr_client.models import Model, Options, attribute, enum_value, option, option_relation, relation
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "run-schedule-rules"


class ScheduleMode(StrEnum):
    APPLY = "apply"
    DESTROY = "destroy"
    REFRESH = "refresh"


@dataclass
class RunScheduleRule(Model):
    resource_type: ClassVar[str] = _TYPE

    schedule: str = ""
    schedule_mode: ScheduleMode | None = attribute(decode=enum_value(ScheduleMode))

    workspace: Any = relation()


@dataclass
class RunScheduleRuleListOptions(ListOptions):
    workspace: str | None = query_param("filter[workspace]")
    include: str | None = query_param("include")


@dataclass
class RunScheduleRuleCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    schedule: str | None = option()
    schedule_mode: ScheduleMode | None = option()

    workspace: str | None = option_relation("workspaces")


@dataclass
class RunScheduleRuleUpdateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    schedule: str | None = option()
    schedule_mode: ScheduleMode | None = option()


class RunScheduleRules(ResourceService):
    def list(self, options: RunScheduleRuleListOptions | None = None) -> ResourceList[RunScheduleRule]:
        return self._list("run-schedule-rules", RunScheduleRule, options)

    def iterate(self, options: RunScheduleRuleListOptions | None = None):
        return self._iterate(self.list, options or RunScheduleRuleListOptions())

    def create(self, options: RunScheduleRuleCreateOptions) -> RunScheduleRule:
        return self._create("run-schedule-rules", RunScheduleRule, options)

    def read(self, rule_id: str) -> RunScheduleRule:
        require_id(rule_id, "run schedule rule")
        path = self._path("run-schedule-rules/{}", rule_id)
        return self._read(path, RunScheduleRule, params={"include": "workspace"})

    def update(self, rule_id: str, options: RunScheduleRuleUpdateOptions) -> RunScheduleRule:
        require_id(rule_id, "run schedule rule")
        return self._update(self._path("run-schedule-rules/{}", rule_id), RunScheduleRule, options)

    def delete(self, rule_id: str) -> None:
        require_id(rule_id, "run schedule rule")
        self._delete(self._path("run-schedule-rules/{}", rule_id))
