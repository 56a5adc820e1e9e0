"""Environment hooks, the environment-side view of hook environment links.

Both services talk to the same ``hook-environment-links`` endpoint.
"""

from dataclasses import dataclass
from typing import ClassVar

from scalr_client.resources.hook_environment_links import (
    HookEnvironmentLink,
    HookEnvironmentLinkCreateOptions,
    HookEnvironmentLinkListOptions,
    HookEnvironmentLinks,
    HookEnvironmentLinkUpdateOptions,
)


@dataclass
class EnvironmentHook(HookEnvironmentLink):
    pass


@dataclass
class EnvironmentHookListOptions(HookEnvironmentLinkListOptions):
    pass


@dataclass
class EnvironmentHookCreateOptions(HookEnvironmentLinkCreateOptions):
    pass


@dataclass
class EnvironmentHookUpdateOptions(HookEnvironmentLinkUpdateOptions):
    pass


class EnvironmentHooks(HookEnvironmentLinks):
    model: ClassVar[type[HookEnvironmentLink]] = EnvironmentHook
    label: ClassVar[str] = "Environment Hook"
