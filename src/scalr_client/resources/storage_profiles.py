"""Storage profiles: where state and run artifacts are kept."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, ClassVar

from scalr_client.models import Model, Options, attribute, enum_value, option, parse_datetime
from scalr_client.resources.base import ListOptions, ResourceList, ResourceService, query_param, require_id

_TYPE = "storage-profiles"


class StorageProfileBackendType(StrEnum):
    GOOGLE = "google"
    AWS_S3 = "aws-s3"
    AZURERM = "azurerm"


@dataclass
class StorageProfile(Model):
    resource_type: ClassVar[str] = _TYPE

    name: str = ""
    default: bool = False
    is_system: bool = False
    backend_type: StorageProfileBackendType | None = attribute(decode=enum_value(StorageProfileBackendType))
    created_at: datetime | None = attribute(decode=parse_datetime)
    updated_at: datetime | None = attribute(decode=parse_datetime)
    error_message: str | None = None

    google_credentials: Any = None
    google_encryption_key: str | None = None
    google_project: str | None = None
    google_storage_bucket: str | None = None

    aws_s3_audience: str | None = None
    aws_s3_bucket_name: str | None = None
    aws_s3_region: str | None = None
    aws_s3_role_arn: str | None = None

    azurerm_audience: str | None = None
    azurerm_client_id: str | None = None
    azurerm_container_name: str | None = None
    azurerm_storage_account: str | None = None
    azurerm_tenant_id: str | None = None


@dataclass
class StorageProfileListOptions(ListOptions):
    query: str | None = query_param("query")
    storage_profile: str | None = query_param("filter[storage-profile]")
    name: str | None = query_param("filter[name]")
    default: bool | None = query_param("filter[default]")


@dataclass
class StorageProfileCreateOptions(Options):
    """``google_credentials`` is sent as given, normally the parsed key file."""

    resource_type: ClassVar[str] = _TYPE

    name: str | None = option()
    default: bool | None = option()
    backend_type: StorageProfileBackendType | None = option()

    google_credentials: Any = option()
    google_encryption_key: str | None = option()
    google_project: str | None = option()
    google_storage_bucket: str | None = option()

    aws_s3_audience: str | None = option()
    aws_s3_bucket_name: str | None = option()
    aws_s3_region: str | None = option()
    aws_s3_role_arn: str | None = option()

    azurerm_audience: str | None = option()
    azurerm_client_id: str | None = option()
    azurerm_container_name: str | None = option()
    azurerm_storage_account: str | None = option()
    azurerm_tenant_id: str | None = option()


@dataclass
class StorageProfileUpdateOptions(StorageProfileCreateOptions):
    pass


class StorageProfiles(ResourceService):
    def list(self, options: StorageProfileListOptions | None = None) -> ResourceList[StorageProfile]:
        return self._list("storage-profiles", StorageProfile, options)

    def iterate(self, options: StorageProfileListOptions | None = None):
        return self._iterate(self.list, options or StorageProfileListOptions())

    def create(self, options: StorageProfileCreateOptions) -> StorageProfile:
        return self._create("storage-profiles", StorageProfile, options)

    def read(self, profile_id: str) -> StorageProfile:
        require_id(profile_id, "storage profile")
        return self._read(self._path("storage-profiles/{}", profile_id), StorageProfile)

    def update(self, profile_id: str, options: StorageProfileUpdateOptions) -> StorageProfile:
        require_id(profile_id, "storage profile")
        return self._update(self._path("storage-profiles/{}", profile_id), StorageProfile, options)

    def delete(self, profile_id: str) -> None:
        require_id(profile_id, "storage profile")
        self._delete(self._path("storage-profiles/{}", profile_id))
