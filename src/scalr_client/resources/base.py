"""Shared plumbing for resource services."""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from scalr_client.errors import InvalidArgumentError
from scalr_client.http import HTTPClient, encode_params
from scalr_client.jsonapi import Document, Pagination, ResourceIdentifier
from scalr_client.models import Model, Options, identifiers
from scalr_client.pagination import PageIterator
from scalr_client.value import is_unset, wrap

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Model)

_ID_PATTERN = re.compile(r"^[a-zA-Z0-9\-._]+$")


def valid_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def valid_string_id(value: Any) -> bool:
    """True for non-empty IDs made of letters, digits, ``-``, ``.`` and ``_``."""
    return valid_string(value) and _ID_PATTERN.match(value) is not None


def require_id(value: Any, what: str) -> str:
    """Return ``value`` or raise ``invalid value for <what> ID``."""
    if not valid_string_id(value):
        raise InvalidArgumentError(f"invalid value for {what} ID")
    return value


def given(value: Any) -> Any:
    """Concrete value of an option field; None when unset or null."""
    raw, _ = wrap(value).get()
    return raw


def related_id(value: Any) -> Any:
    """ID of a relationship option given as an ID, model or identifier."""
    value = given(value)
    return getattr(value, "id", value)


def valid_choice(value: Any, choices: type[Enum]) -> bool:
    return value in {member.value for member in choices}


def query_param(name: str) -> Any:
    """A list option sent as the query parameter ``name``."""
    return field(default=None, metadata={"query": name})


@dataclass
class ListOptions:
    """Paging parameters accepted by every listing.

    Subclasses add filters with ``query_param("filter[name]")`` fields. Fields left
    at ``None`` are not sent.
    """

    page_number: int | None = query_param("page[number]")
    page_size: int | None = query_param("page[size]")

    def to_params(self) -> dict[str, str]:
        params: dict[str, Any] = {}
        for f in fields(self):
            name = f.metadata.get("query")
            value = getattr(self, f.name)
            if name and not is_unset(value):
                params[name] = value
        return encode_params(params)


@dataclass
class ResourceList(Generic[T]):
    """One page of a listing."""

    items: list[T]
    pagination: Pagination | None = None

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class ResourceService:
    """Base for resource services.

    Provides request helpers that encode options, decode documents into
    models and log what they did.
    """

    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    @staticmethod
    def _path(template: str, *ids: str) -> str:
        """Fill ``{}`` placeholders in ``template`` with URL-escaped IDs."""
        return template.format(*(quote(str(value), safe="") for value in ids))

    @staticmethod
    def _decode(model: type[T], response) -> T:
        return model.from_document(Document.parse(response.content))

    def _list(self, path: str, model: type[T], options: ListOptions | None = None, params=None) -> ResourceList[T]:
        merged = options.to_params() if options is not None else {}
        if params:
            merged.update(params)
        response = self._http.get(path, params=merged)
        document = Document.parse(response.content)
        items = model.list_from_document(document)
        logger.debug(f"Listed {len(items)} {model.resource_type or model.__name__} from {path}")
        return ResourceList(items=items, pagination=document.pagination)

    def _iterate(self, list_page, options: ListOptions) -> PageIterator[T]:
        """Lazy iterator over every page of ``list_page(options)``."""

        def fetch_page(page_number: int):
            page = list_page(replace(options, page_number=page_number))
            return page.items, page.pagination

        return PageIterator(fetch_page, page_size=options.page_size or 0)

    def _read(self, path: str, model: type[T], params: Mapping[str, Any] | None = None) -> T:
        return self._decode(model, self._http.get(path, params=params))

    def _create(self, path: str, model: type[T], options: Options, params=None) -> T:
        response = self._http.post(path, options.to_document(), params=params)
        created = self._decode(model, response)
        logger.info(f"Created {created.resource_type} {created.id}")
        return created

    def _update(self, path: str, model: type[T], options: Options, params=None, id: str | None = None) -> T:
        response = self._http.patch(path, options.to_document(id=id), params=params)
        return self._decode(model, response)

    def _delete(self, path: str) -> None:
        self._http.delete(path)
        logger.info(f"Deleted {path}")

    def _relationship_body(self, values: Iterable[Any], resource_type: str) -> dict[str, Any]:
        return {"data": [identifier.to_dict() for identifier in identifiers(values, resource_type)]}

    def _add_relationship(self, path: str, values: Iterable[Any], resource_type: str) -> None:
        self._http.post(path, self._relationship_body(values, resource_type))

    def _replace_relationship(self, path: str, values: Iterable[Any], resource_type: str) -> None:
        self._http.patch(path, self._relationship_body(values, resource_type))

    def _delete_relationship(self, path: str, values: Iterable[Any], resource_type: str) -> None:
        self._http.delete(path, self._relationship_body(values, resource_type))


__all__ = [
    "ListOptions",
    "ResourceIdentifier",
    "ResourceList",
    "ResourceService",
    "given",
    "query_param",
    "related_id",
    "require_id",
    "valid_choice",
    "valid_string",
    "valid_string_id",
]
