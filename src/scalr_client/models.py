"""Dataclass bases for resources, request options and nested objects.

Three kinds of class describe the API's data:

* ``Model``: a resource as returned by the API. ``from_resource`` fills the
  dataclass from a JSON:API resource object, resolving relationships through
  ``included`` where the related type has a registered model.
* ``Options``: a request body. Every field defaults to ``UNSET`` and is left
  out of the payload; ``None`` is sent as JSON ``null``.
* ``Struct``: a nested attribute object such as a VCS repo block.

Attribute keys default to the field name with ``_`` replaced by ``-``;
``attribute("private_key")`` overrides that.

Example:
    ```python
    @dataclass
    class Tag(Model):
        resource_type: ClassVar[str] = "tags"

        name: str = ""
        created_at: datetime | None = attribute(decode=parse_datetime)
        account: ResourceIdentifier | None = relation()
    ```
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, TypeVar

from scalr_client.jsonapi import Document, Resource, ResourceIdentifier, build_document, relationship_data
from scalr_client.value import UNSET, Value, is_unset, wrap

M = TypeVar("M", bound="Model")
S = TypeVar("S", bound="Struct")

_ATTRIBUTE = "attribute"
_RELATION = "relation"


def dashify(name: str) -> str:
    return name.replace("_", "-")


def attribute(
    name: str | None = None,
    *,
    default: Any = None,
    default_factory: Callable[[], Any] | None = None,
    decode: Callable[[Any], Any] | None = None,
) -> Any:
    """Declare an attribute field.

    Args:
        name: Key in ``attributes``; defaults to the dashed field name.
        default: Value when the key is absent.
        default_factory: Factory for mutable defaults.
        decode: Converter applied to non-null raw values.
    """
    metadata = {"kind": _ATTRIBUTE, "name": name, "decode": decode}
    if default_factory is not None:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def relation(name: str | None = None, *, type: str | None = None, many: bool = False) -> Any:
    """Declare a relationship field.

    On models the field holds the related model, or a ``ResourceIdentifier``
    when no model is registered for the type. On options it holds IDs and
    ``type`` names the related resource type for the request body.
    """
    metadata = {"kind": _RELATION, "name": name, "type": type, "many": many}
    if many:
        return field(default_factory=list, metadata=metadata)
    return field(default=None, metadata=metadata)


def option(name: str | None = None) -> Any:
    """An ``Options`` attribute field; unset unless given."""
    return field(default=UNSET, metadata={"kind": _ATTRIBUTE, "name": name})


def option_relation(type: str, name: str | None = None, *, many: bool = False) -> Any:
    """An ``Options`` relationship field holding an ID or a list of IDs."""
    return field(default=UNSET, metadata={"kind": _RELATION, "name": name, "type": type, "many": many})


def parse_datetime(value: str) -> datetime:
    """Parse an RFC 3339 timestamp, including a trailing ``Z``."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def enum_value(choices: type[Enum]) -> Callable[[Any], Any]:
    """Decode into ``choices``, keeping values the enum does not know as plain strings."""

    def _decode(value: Any) -> Any:
        try:
            return choices(value)
        except ValueError:
            return value

    return _decode


def list_of(decode: Callable[[Any], Any]) -> Callable[[list[Any]], list[Any]]:
    """Apply ``decode`` to each element of a list attribute."""

    def _decode(values: list[Any]) -> list[Any]:
        return [decode(item) for item in values or []]

    return _decode


def encode_value(value: Any) -> Any:
    """Turn an option value into plain JSON data."""
    if isinstance(value, Value):
        value = value.encode()
    if isinstance(value, Struct):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {key: encode_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [encode_value(item) for item in value]
    return value


def _key(f) -> str:
    return f.metadata.get("name") or dashify(f.name)


def _decode(f, raw: Any) -> Any:
    decode = f.metadata.get("decode")
    if raw is None or decode is None:
        return raw
    return decode(raw)


@dataclass
class Struct:
    """Nested attribute object.

    ``to_dict`` leaves out fields that are ``None`` or ``UNSET``; pass
    ``Value.null()`` to send an explicit null.
    """

    @classmethod
    def from_dict(cls: type[S], data: Mapping[str, Any]) -> S:
        kwargs = {}
        for f in fields(cls):
            key = _key(f)
            if key in data:
                kwargs[f.name] = _decode(f, data[key])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or is_unset(value):
                continue
            result[_key(f)] = encode_value(value)
        return result


@dataclass
class Model:
    """A resource returned by the API."""

    resource_type: ClassVar[str] = ""
    _registry: ClassVar[dict[str, type["Model"]]] = {}

    id: str = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        resource_type = cls.__dict__.get("resource_type")
        if resource_type:
            cls._registry.setdefault(resource_type, cls)

    @classmethod
    def model_for(cls, resource_type: str) -> type["Model"] | None:
        """Registered model for a JSON:API type.

        A base class that declares its own ``_registry`` keeps its subclasses
        apart from the models in ``scalr_client.resources``.
        """
        return cls._registry.get(resource_type)

    @property
    def identifier(self) -> ResourceIdentifier:
        return ResourceIdentifier(self.id, self.resource_type)

    @classmethod
    def from_resource(cls: type[M], resource: Resource, document: Document | None = None, *, _depth: int = 0) -> M:
        """Build a model from a resource object.

        Related resources found in ``document.included`` are decoded one level
        deep; deeper relations keep only their IDs.
        """
        kwargs: dict[str, Any] = {"id": resource.id}
        for f in fields(cls):
            kind = f.metadata.get("kind", _ATTRIBUTE)
            if f.name == "id":
                continue
            key = _key(f)
            if kind == _RELATION:
                linkage = resource.relationship(key)
                if linkage is None:
                    continue
                if isinstance(linkage, list):
                    kwargs[f.name] = [_related(cls, item, document, _depth) for item in linkage]
                elif f.metadata.get("many"):
                    kwargs[f.name] = [_related(cls, linkage, document, _depth)]
                else:
                    kwargs[f.name] = _related(cls, linkage, document, _depth)
            elif key in resource.attributes:
                kwargs[f.name] = _decode(f, resource.attributes[key])
        return cls(**kwargs)

    @classmethod
    def from_document(cls: type[M], document: Document) -> M:
        return cls.from_resource(document.resource(), document)

    @classmethod
    def list_from_document(cls: type[M], document: Document) -> list[M]:
        return [cls.from_resource(resource, document) for resource in document.resources()]


def _related(owner: type[Model], identifier: ResourceIdentifier, document: Document | None, depth: int) -> Any:
    model = owner.model_for(identifier.type)
    if model is None:
        return identifier
    if document is not None and depth == 0:
        included = document.find_included(identifier.type, identifier.id)
        if included is not None:
            return model.from_resource(included, document, _depth=depth + 1)
    return model(id=identifier.id)


def _identifier(value: Any, resource_type: str) -> ResourceIdentifier:
    if isinstance(value, ResourceIdentifier):
        return value
    if isinstance(value, Model):
        return value.identifier if value.resource_type else ResourceIdentifier(value.id, resource_type)
    return ResourceIdentifier(str(value), resource_type)


@dataclass
class Options:
    """A request body for create and update calls."""

    resource_type: ClassVar[str] = ""

    def attributes(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for f in fields(self):
            if f.metadata.get("kind", _ATTRIBUTE) != _ATTRIBUTE:
                continue
            value = wrap(getattr(self, f.name))
            if value.is_set:
                result[_key(f)] = encode_value(value)
        return result

    def relationships(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for f in fields(self):
            if f.metadata.get("kind") != _RELATION:
                continue
            value = wrap(getattr(self, f.name))
            if not value.is_set:
                continue
            target = f.metadata["type"]
            raw, _ = value.get()
            if raw is None:
                result[_key(f)] = relationship_data([] if f.metadata.get("many") else None)
            elif f.metadata.get("many"):
                result[_key(f)] = relationship_data(_identifier(item, target) for item in _as_list(raw))
            else:
                result[_key(f)] = relationship_data(_identifier(raw, target))
        return result

    def to_document(self, id: str | None = None) -> dict[str, Any]:
        """JSON:API request document; ``id`` is only sent when given."""
        return build_document(self.resource_type, self.attributes(), self.relationships(), id=id)


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, str | ResourceIdentifier | Model):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return [value]


def identifiers(values: Iterable[Any], resource_type: str) -> list[ResourceIdentifier]:
    """Identifiers for IDs, models or identifiers, typed as ``resource_type``."""
    return [_identifier(value, resource_type) for value in values]


__all__ = [
    "Model",
    "Options",
    "Struct",
    "attribute",
    "dashify",
    "encode_value",
    "enum_value",
    "identifiers",
    "list_of",
    "option",
    "option_relation",
    "parse_datetime",
    "relation",
]
