"""Drift detection schedules, one per environment."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from scalr_client.errors import InvalidArgumentError
from scalr_client.models import Model, Options, Struct, attribute, enum_value, option, option_relation, relation
from scalr_client.resources.base import ResourceService, given, related_id, require_id, valid_choice, valid_string_id

_TYPE = "drift-detection-schedule"


class DriftDetectionSchedulePeriod(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"


class DriftDetectionScheduleRunMode(StrEnum):
    REFRESH_ONLY = "refresh-only"
    PLAN = "plan"


@dataclass
class DriftDetectionWorkspaceFilter(Struct):
    """Limits which workspaces of the environment are checked."""

    name_patterns: list[str] | None = None
    environment_types: list[str] | None = None
    tags: list[str] | None = None

    def is_empty(self) -> bool:
        return self.name_patterns is None and self.environment_types is None and self.tags is None


@dataclass
class DriftDetection(Model):
    resource_type: ClassVar[str] = _TYPE

    schedule: DriftDetectionSchedulePeriod | None = attribute(decode=enum_value(DriftDetectionSchedulePeriod))
    workspace_filters: DriftDetectionWorkspaceFilter | None = attribute(
        decode=DriftDetectionWorkspaceFilter.from_dict
    )
    run_mode: DriftDetectionScheduleRunMode | None = attribute(decode=enum_value(DriftDetectionScheduleRunMode))
    environment: Any = relation()


@dataclass
class DriftDetectionCreateOptions(Options):
    resource_type: ClassVar[str] = _TYPE

    schedule: DriftDetectionSchedulePeriod | str | None = option()
    workspace_filters: DriftDetectionWorkspaceFilter | None = option()
    run_mode: DriftDetectionScheduleRunMode | str | None = option()
    environment: str | None = option_relation("environments")

    def validate(self) -> None:
        environment = related_id(self.environment)
        if environment is None:
            raise InvalidArgumentError("environment is required")
        if not valid_string_id(environment):
            raise InvalidArgumentError("invalid value for environment ID")
        if not valid_choice(given(self.schedule), DriftDetectionSchedulePeriod):
            raise InvalidArgumentError("invalid value for schedule")
        run_mode = given(self.run_mode)
        if run_mode is not None and not valid_choice(run_mode, DriftDetectionScheduleRunMode):
            raise InvalidArgumentError("invalid value for run_mode")


@dataclass
class DriftDetectionUpdateOptions(DriftDetectionCreateOptions):
    """The API replaces the whole schedule, so the same fields are required."""


class DriftDetections(ResourceService):
    def create(self, options: DriftDetectionCreateOptions) -> DriftDetection:
        options.validate()
        return self._create("drift-detection-schedules", DriftDetection, options)

    def read(self, schedule_id: str) -> DriftDetection:
        require_id(schedule_id, "drift detection schedule")
        return self._read(self._path("drift-detection-schedules/{}", schedule_id), DriftDetection)

    def update(self, schedule_id: str, options: DriftDetectionUpdateOptions) -> DriftDetection:
        require_id(schedule_id, "drift detection schedule")
        options.validate()
        return self._update(self._path("drift-detection-schedules/{}", schedule_id), DriftDetection, options)

    def delete(self, schedule_id: str) -> None:
        require_id(schedule_id, "drift detection schedule")
        self._delete(self._path("drift-detection-schedules/{}", schedule_id))
