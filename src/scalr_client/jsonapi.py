"""JSON:API document codec.

Scalr speaks ``application/vnd.api+json``. Responses are parsed into
``Document`` objects holding ``Resource`` entries; request bodies are built
with ``build_document``.

See: https://jsonapi.org/format/

Example:
    ```python
    doc = Document.parse(response.content)
    for resource in doc.resources():
        print(resource.type, resource.id, resource.attributes["name"])
    if doc.pagination and doc.pagination.next_page:
        ...

    body = build_document(
        "environments",
        {"name": "prod"},
        {"account": relationship_data(ResourceIdentifier("acc-1", "accounts"))},
    )
    ```
"""

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from scalr_client.errors.models import JSONAPIError

MEDIA_TYPE = "application/vnd.api+json"


class DocumentError(ValueError):
    """A response body is not a usable JSON:API document."""


@dataclass(frozen=True)
class ResourceIdentifier:
    """A ``{"id", "type"}`` reference to another resource."""

    id: str
    type: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResourceIdentifier":
        return cls(id=str(data.get("id", "")), type=str(data.get("type", "")))

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "id": self.id}


@dataclass
class Resource:
    """A resource object from ``data`` or ``included``."""

    type: str
    id: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    relationships: dict[str, Any] = field(default_factory=dict)
    links: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Resource":
        if not isinstance(data, Mapping):
            raise DocumentError(f"resource object must be a JSON object, got {type(data).__name__}")
        return cls(
            type=str(data.get("type", "")),
            id=str(data.get("id") or ""),
            attributes=dict(data.get("attributes") or {}),
            relationships=dict(data.get("relationships") or {}),
            links=dict(data.get("links") or {}),
            meta=dict(data.get("meta") or {}),
        )

    @property
    def identifier(self) -> ResourceIdentifier:
        return ResourceIdentifier(self.id, self.type)

    def relationship(self, name: str) -> ResourceIdentifier | list[ResourceIdentifier] | None:
        """Linkage of relationship ``name``.

        Returns a list for to-many relationships, a single identifier for
        to-one, and None when the relationship is absent or empty.
        """
        entry = self.relationships.get(name)
        if not isinstance(entry, Mapping) or "data" not in entry:
            return None
        data = entry["data"]
        if data is None:
            return None
        if isinstance(data, list):
            return [ResourceIdentifier.from_dict(item) for item in data]
        return ResourceIdentifier.from_dict(data)


@dataclass(frozen=True)
class Pagination:
    """``meta.pagination`` of a listing response."""

    current_page: int = 0
    page_size: int = 0
    prev_page: int | None = None
    next_page: int | None = None
    total_pages: int = 0
    total_count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Pagination":
        return cls(
            current_page=int(data.get("current-page") or 0),
            page_size=int(data.get("page-size") or 0),
            prev_page=_optional_int(data.get("prev-page")),
            next_page=_optional_int(data.get("next-page")),
            total_pages=int(data.get("total-pages") or 0),
            total_count=int(data.get("total-count") or 0),
        )


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)


@dataclass
class Document:
    """A top-level JSON:API document.

    ``data`` is a single ``Resource``, a list of them, or None. Relationship
    documents hold ``ResourceIdentifier`` entries in ``data`` instead.
    """

    data: Resource | list[Resource] | None = None
    included: list[Resource] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    errors: list[JSONAPIError] = field(default_factory=list)
    links: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def parse(cls, content: bytes | str) -> "Document":
        """Decode a response body.

        Raises:
            DocumentError: The body is not JSON or not a JSON object.
        """
        if not content or not content.strip():
            return cls()
        try:
            payload = json.loads(content)
        except (ValueError, UnicodeDecodeError) as e:
            raise DocumentError(f"response body is not valid JSON: {e}") from e
        return cls.from_json(payload)

    @classmethod
    def from_json(cls, payload: Any) -> "Document":
        if not isinstance(payload, Mapping):
            raise DocumentError(f"JSON:API document must be an object, got {type(payload).__name__}")

        raw_data = payload.get("data")
        data: Resource | list[Resource] | None
        if raw_data is None:
            data = None
        elif isinstance(raw_data, list):
            data = [Resource.from_dict(item) for item in raw_data]
        else:
            data = Resource.from_dict(raw_data)

        return cls(
            data=data,
            included=[Resource.from_dict(item) for item in payload.get("included") or []],
            meta=dict(payload.get("meta") or {}),
            errors=[JSONAPIError.from_dict(item) for item in payload.get("errors") or []],
            links=dict(payload.get("links") or {}),
        )

    def resources(self) -> list[Resource]:
        """``data`` as a list, whether the document holds one resource or many."""
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return list(self.data)
        return [self.data]

    def resource(self) -> Resource:
        """The single primary resource.

        Raises:
            DocumentError: ``data`` is empty or a list.
        """
        if isinstance(self.data, Resource):
            return self.data
        if self.data is None:
            raise DocumentError("document has no primary data")
        raise DocumentError("document holds a collection, expected a single resource")

    @property
    def pagination(self) -> Pagination | None:
        raw = self.meta.get("pagination")
        if not isinstance(raw, Mapping):
            return None
        return Pagination.from_dict(raw)

    def find_included(self, type_: str, id_: str) -> Resource | None:
        for resource in self.included:
            if resource.type == type_ and resource.id == id_:
                return resource
        return None


def relationship_data(
    identifiers: ResourceIdentifier | Iterable[ResourceIdentifier] | None,
) -> dict[str, Any]:
    """Relationship object for a request body.

    A single identifier gives to-one linkage, an iterable gives to-many and
    None clears the relationship.
    """
    if identifiers is None:
        return {"data": None}
    if isinstance(identifiers, ResourceIdentifier):
        return {"data": identifiers.to_dict()}
    return {"data": [identifier.to_dict() for identifier in identifiers]}


def build_document(
    type_: str,
    attributes: Mapping[str, Any] | None = None,
    relationships: Mapping[str, Any] | None = None,
    id: str | None = None,
) -> dict[str, Any]:
    """Request document ``{"data": {...}}`` for a single resource.

    Empty ``attributes`` and ``relationships`` are left out.
    """
    data: dict[str, Any] = {"type": type_}
    if id:
        data["id"] = id
    if attributes:
        data["attributes"] = dict(attributes)
    if relationships:
        data["relationships"] = dict(relationships)
    return {"data": data}
