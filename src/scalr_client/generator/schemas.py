"""Turn ``components.schemas`` into render data for schema modules.

Three kinds of module are produced:

* resource schemas (objects with ``type`` and ``attributes``): a response
  model, a request options class, their enums and nested object classes;
* document schemas used as request bodies (``WorkspaceDocument`` and plain
  JSON bodies such as ``Reason``);
* simple schemas referenced from those documents' ``data`` (``TagRelationship``).
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any

from scalr_client.generator.loader import deref, iter_operations, ref_name
from scalr_client.generator.naming import clean_description, enum_member, python_identifier, to_camel, to_snake

logger = logging.getLogger(__name__)

HELPER_NAMES = frozenset(
    {
        "attribute",
        "dataclass",
        "enum_value",
        "field",
        "list_of",
        "option",
        "option_relation",
        "parse_datetime",
        "relation",
    }
)
MODEL_RESERVED = HELPER_NAMES | {
    "attributes",
    "from_document",
    "from_resource",
    "id",
    "identifier",
    "list_from_document",
    "model_for",
    "relationships",
    "resource_type",
    "to_document",
}
STRUCT_RESERVED = HELPER_NAMES | {"from_dict", "identifier", "to_dict"}

_DOCUMENT_KEYS = ("data", "included", "links", "meta")


class Imports:
    """``from module import name`` lines needed by one generated module."""

    def __init__(self) -> None:
        self._names: dict[str, set[str]] = defaultdict(set)

    def add(self, module: str, *names: str) -> None:
        self._names[module].update(names)

    def lines(self) -> list[str]:
        # stdlib first, then the runtime, then relative imports
        def order(module: str) -> tuple[int, str]:
            if module.startswith("."):
                return 2, module
            if module.startswith("scalr_client"):
                return 1, module
            return 0, module

        return [
            f"from {module} import {', '.join(sorted(self._names[module]))}"
            for module in sorted(self._names, key=order)
        ]


@dataclass
class EnumSpec:
    name: str
    base: str
    members: list[tuple[str, str]]
    description: str = ""


@dataclass
class FieldSpec:
    name: str
    annotation: str
    default: str
    description: str = ""


@dataclass
class ClassSpec:
    name: str
    base: str
    fields: list[FieldSpec] = field(default_factory=list)
    description: str = ""
    resource_type: str | None = None
    identifier: bool = False


@dataclass
class SchemaModule:
    """Everything the schema template needs for one module."""

    name: str
    module: str
    description: str = ""
    enums: list[EnumSpec] = field(default_factory=list)
    classes: list[ClassSpec] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    type_checking: list[str] = field(default_factory=list)

    @property
    def exports(self) -> list[str]:
        return [enum.name for enum in self.enums] + [cls.name for cls in self.classes]


def is_resource_schema(schema: Any) -> bool:
    """A JSON:API resource declares both ``type`` and ``attributes``."""
    properties = schema.get("properties") if isinstance(schema, dict) else None
    return isinstance(properties, dict) and "type" in properties and "attributes" in properties


def extract_type_name(spec: dict[str, Any], schema: dict[str, Any]) -> str:
    """JSON:API type from the first value of the ``type`` property's enum."""
    type_property = deref(spec, (schema.get("properties") or {}).get("type"))
    if not isinstance(type_property, dict):
        return ""
    values = type_property.get("enum") or []
    if values and isinstance(values[0], str):
        return values[0]
    return ""


def schema_type(schema: dict[str, Any]) -> str | None:
    type_ = schema.get("type")
    if isinstance(type_, list):
        return next((item for item in type_ if item != "null"), None)
    return type_


def _properties(spec: dict[str, Any], schema: Any) -> dict[str, Any]:
    schema = deref(spec, schema)
    if not isinstance(schema, dict):
        return {}
    return {name: deref(spec, value) for name, value in (schema.get("properties") or {}).items()}


def _literal(value: Any) -> str:
    return repr(value)


def _unique(name: str, taken: set[str]) -> str:
    while name in taken:
        name += "_"
    taken.add(name)
    return name


class SchemaBuilder:
    """Builds ``SchemaModule`` data for every schema worth generating."""

    def __init__(self, spec: dict[str, Any]) -> None:
        self.spec = spec
        self.schemas: dict[str, Any] = (spec.get("components") or {}).get("schemas") or {}
        self.canonical = {
            operation["x-resource"]
            for _, _, operation in iter_operations(spec)
            if isinstance(operation.get("x-resource"), str)
        }
        self.type_to_schema = self._map_types()
        self.modules: dict[str, SchemaModule] = {}

    def _map_types(self) -> dict[str, str]:
        mapping: dict[str, str] = {}
        for name in sorted(self.schemas):
            schema = deref(self.spec, self.schemas[name])
            if not is_resource_schema(schema):
                continue
            type_name = extract_type_name(self.spec, schema)
            if not type_name:
                continue
            existing = mapping.get(type_name)
            if existing is None or (name in self.canonical and existing not in self.canonical):
                mapping[type_name] = name
        return mapping

    def resource_schema(self, name: str) -> bool:
        schema = self.schemas.get(name)
        return schema is not None and is_resource_schema(deref(self.spec, schema))

    def schema_for_type(self, type_name: str) -> str | None:
        return self.type_to_schema.get(type_name)

    def type_for_schema(self, schema_name: str) -> str:
        for type_name, name in self.type_to_schema.items():
            if name == schema_name:
                return type_name
        return ""

    def module_for(self, schema_name: str) -> str:
        return to_snake(schema_name)

    def build(self, request_bodies: set[str]) -> list[SchemaModule]:
        """Resource schemas plus the request-body documents and what they reference."""
        for name in sorted(self.schemas):
            schema = deref(self.spec, self.schemas[name])
            if is_resource_schema(schema):
                self.modules[name] = self.build_resource(name, schema)

        referenced: set[str] = set()
        for name in sorted(request_bodies):
            schema = deref(self.spec, self.schemas.get(name))
            if not isinstance(schema, dict) or is_resource_schema(schema):
                continue
            self.modules[name] = self.build_document(name, schema)
            data = (schema.get("properties") or {}).get("data")
            if isinstance(data, dict):
                if "$ref" in data:
                    referenced.add(ref_name(data["$ref"]))
                elif isinstance(data.get("items"), dict) and "$ref" in data["items"]:
                    referenced.add(ref_name(data["items"]["$ref"]))

        for name in sorted(referenced):
            schema = deref(self.spec, self.schemas.get(name))
            if not isinstance(schema, dict) or is_resource_schema(schema) or name in self.modules:
                continue
            self.modules[name] = self.build_simple(name, schema)

        return [self.modules[name] for name in sorted(self.modules)]

    def python_type(self, schema: Any, imports: Imports) -> tuple[str, str | None]:
        """Annotation and decode expression for a property schema."""
        schema = deref(self.spec, schema)
        if not isinstance(schema, dict):
            imports.add("typing", "Any")
            return "Any", None

        type_ = schema_type(schema)
        if type_ == "array":
            item, decode = self.python_type(schema.get("items") or {}, imports)
            if decode:
                imports.add("scalr_client.models", "list_of")
                decode = f"list_of({decode})"
            return f"list[{item}]", decode
        if schema.get("enum"):
            return ("int", None) if type_ == "integer" else ("str", None)
        if type_ == "string":
            if schema.get("format") == "date-time":
                imports.add("datetime", "datetime")
                imports.add("scalr_client.models", "parse_datetime")
                return "datetime", "parse_datetime"
            return "str", None
        if type_ == "integer":
            return "int", None
        if type_ == "number":
            return "float", None
        if type_ == "boolean":
            return "bool", None
        imports.add("typing", "Any")
        if type_ == "object":
            return "dict[str, Any]", None
        return "Any", None

    def build_resource(self, name: str, schema: dict[str, Any]) -> SchemaModule:
        imports = Imports()
        imports.add("dataclasses", "dataclass")
        imports.add("typing", "ClassVar")
        imports.add("scalr_client.models", "Options", "attribute", "option")
        imports.add("scalr_client.value", "Value")
        imports.add("._base", "SchemaModel")
        type_name = extract_type_name(self.spec, schema)
        module = SchemaModule(
            name=name, module=self.module_for(name), description=clean_description(schema.get("description"))
        )

        model = ClassSpec(name, "SchemaModel", description=module.description, resource_type=type_name)
        request = ClassSpec(f"{name}Request", "Options", resource_type=type_name)
        nested: list[ClassSpec] = []
        nested_requests: list[ClassSpec] = []
        model_names: set[str] = set(MODEL_RESERVED)
        request_names: set[str] = set(MODEL_RESERVED)
        class_names: set[str] = {name, f"{name}Request"}

        attributes = _properties(self.spec, schema["properties"]["attributes"])
        for key in sorted(attributes):
            attr = attributes[key]
            if not isinstance(attr, dict):
                continue
            description = clean_description(attr.get("description"))
            read_only = bool(attr.get("readOnly"))
            field_name = python_identifier(key, MODEL_RESERVED)

            if schema_type(attr) == "object" and attr.get("properties"):
                struct_name = self._class_name(name + to_camel(key), "Nested", class_names)
                class_names.add(f"{struct_name}Request")
                imports.add("scalr_client.models", "Struct")
                nested.append(self._nested_struct(struct_name, attr, imports, request=False))
                nested_requests.append(self._nested_struct(f"{struct_name}Request", attr, imports, request=True))
                response_type, decode = struct_name, f"{struct_name}.from_dict"
                request_type = f"{struct_name}Request"
            elif attr.get("enum"):
                enum_name = self._class_name(name + to_camel(key), "Enum", class_names)
                module.enums.append(self._enum(enum_name, attr, imports))
                imports.add("scalr_client.models", "enum_value")
                response_type, decode = f"{enum_name} | str", f"enum_value({enum_name})"
                request_type = enum_name
            else:
                response_type, decode = self.python_type(attr, imports)
                request_type = response_type

            default = f'attribute("{key}", decode={decode})' if decode else f'attribute("{key}")'
            model.fields.append(
                FieldSpec(_unique(field_name, model_names), f"{response_type} | None", default, description)
            )
            if not read_only:
                request.fields.append(
                    FieldSpec(
                        _unique(field_name, request_names), f"Value[{request_type}]", f'option("{key}")', description
                    )
                )

        relationships = _properties(self.spec, (schema["properties"]).get("relationships"))
        for key in sorted(relationships):
            rel = relationships[key]
            if not isinstance(rel, dict):
                continue
            target_type, to_many = self._relationship_target(rel)
            target = self.schema_for_type(target_type) if target_type else None
            if target is None:
                logger.debug(f"Skipping relationship {name}.{key}: no schema for type {target_type!r}")
                continue
            if target != name:
                module.type_checking.append(f"from .{self.module_for(target)} import {target}")
            field_name = python_identifier(key, MODEL_RESERVED)
            description = clean_description(rel.get("description"))
            if to_many:
                imports.add("scalr_client.models", "relation")
                model.fields.append(
                    FieldSpec(
                        _unique(field_name, model_names),
                        f"list[{target}]",
                        f'relation("{key}", many=True)',
                        description,
                    )
                )
            else:
                imports.add("scalr_client.models", "relation")
                model.fields.append(
                    FieldSpec(_unique(field_name, model_names), f"{target} | None", f'relation("{key}")', description)
                )
            if rel.get("readOnly"):
                continue
            imports.add("scalr_client.models", "option_relation")
            if to_many:
                request.fields.append(
                    FieldSpec(
                        _unique(field_name, request_names),
                        "Value[list[str]]",
                        f'option_relation("{target_type}", "{key}", many=True)',
                        description,
                    )
                )
            else:
                request.fields.append(
                    FieldSpec(
                        _unique(field_name, request_names),
                        "Value[str]",
                        f'option_relation("{target_type}", "{key}")',
                        description,
                    )
                )

        if module.type_checking:
            imports.add("typing", "TYPE_CHECKING")
            module.type_checking = sorted(set(module.type_checking))
        if module.enums:
            for base in {enum.base for enum in module.enums}:
                imports.add("enum", base)

        nested.sort(key=lambda cls: cls.name)
        nested_requests.sort(key=lambda cls: cls.name)
        module.classes = [*nested, model, *nested_requests, request]
        module.imports = imports.lines()
        return module

    def _relationship_target(self, rel: dict[str, Any]) -> tuple[str | None, bool]:
        data = deref(self.spec, (rel.get("properties") or {}).get("data"))
        if not isinstance(data, dict):
            return None, False
        to_many = schema_type(data) == "array"
        item = deref(self.spec, data.get("items")) if to_many else data
        if not isinstance(item, dict):
            return None, to_many
        type_property = deref(self.spec, (item.get("properties") or {}).get("type"))
        values = type_property.get("enum") if isinstance(type_property, dict) else None
        if not values:
            return None, to_many
        return str(values[0]), to_many

    def _class_name(self, name: str, suffix: str, taken: set[str]) -> str:
        """``name``, suffixed until no component schema or class in the module owns it."""
        while name in self.schemas or name in taken:
            name += suffix
        taken.add(name)
        return name

    def _enum(self, name: str, schema: dict[str, Any], imports: Imports) -> EnumSpec:
        integer = schema_type(schema) == "integer"
        members: list[tuple[str, str]] = []
        taken: set[str] = set()
        for value in schema["enum"]:
            if value is None:
                continue
            member = _unique(enum_member(value), taken)
            members.append((member, _literal(int(value) if integer else str(value))))
        return EnumSpec(
            name=name,
            base="IntEnum" if integer else "StrEnum",
            members=members,
            description=clean_description(schema.get("description")),
        )

    def _nested_struct(self, name: str, schema: dict[str, Any], imports: Imports, *, request: bool) -> ClassSpec:
        spec = ClassSpec(name, "Struct", description=clean_description(schema.get("description")))
        taken = set(STRUCT_RESERVED)
        properties = _properties(self.spec, schema)
        for key in sorted(properties):
            prop = properties[key]
            if not isinstance(prop, dict):
                continue
            field_name = _unique(python_identifier(key, STRUCT_RESERVED), taken)
            annotation, decode = self.python_type(prop, imports)
            description = clean_description(prop.get("description"))
            if request:
                if prop.get("readOnly"):
                    continue
                spec.fields.append(FieldSpec(field_name, f"Value[{annotation}]", f'option("{key}")', description))
            else:
                default = f'attribute("{key}", decode={decode})' if decode else f'attribute("{key}")'
                spec.fields.append(FieldSpec(field_name, f"{annotation} | None", default, description))
        return spec

    def build_document(self, name: str, schema: dict[str, Any]) -> SchemaModule:
        """Request-body wrapper, or a plain JSON object when it has no document keys."""
        imports = Imports()
        imports.add("dataclasses", "dataclass")
        imports.add("scalr_client.models", "Struct", "attribute")
        module = SchemaModule(
            name=name, module=self.module_for(name), description=clean_description(schema.get("description"))
        )
        cls = ClassSpec(name, "Struct", description=module.description)
        properties = _properties(self.spec, schema)

        if any(key in properties for key in _DOCUMENT_KEYS):
            imports.add("typing", "Any")
            if "data" in properties:
                annotation, _ = self.python_type(properties["data"], imports)
                cls.fields.append(FieldSpec("data", f"{annotation} | None", 'attribute("data")'))
            if "included" in properties:
                cls.fields.append(FieldSpec("included", "list[dict[str, Any]] | None", 'attribute("included")'))
            if "links" in properties:
                cls.fields.append(FieldSpec("links", "dict[str, str] | None", 'attribute("links")'))
            if "meta" in properties:
                cls.fields.append(FieldSpec("meta", "dict[str, Any] | None", 'attribute("meta")'))
        else:
            taken = set(STRUCT_RESERVED)
            for key in sorted(properties):
                prop = properties[key]
                annotation, decode = self.python_type(prop, imports)
                default = f'attribute("{key}", decode={decode})' if decode else f'attribute("{key}")'
                cls.fields.append(
                    FieldSpec(
                        _unique(python_identifier(key, STRUCT_RESERVED), taken),
                        f"{annotation} | None",
                        default,
                        clean_description(prop.get("description")) if isinstance(prop, dict) else "",
                    )
                )

        module.classes = [cls]
        module.imports = imports.lines()
        return module

    def build_simple(self, name: str, schema: dict[str, Any]) -> SchemaModule:
        """Small object such as a relationship identifier; ``type`` first, ``id`` second."""
        imports = Imports()
        imports.add("dataclasses", "dataclass")
        imports.add("scalr_client.models", "Struct", "attribute")
        module = SchemaModule(
            name=name, module=self.module_for(name), description=clean_description(schema.get("description"))
        )
        cls = ClassSpec(name, "Struct", description=module.description)
        properties = _properties(self.spec, schema)

        def order(key: str) -> tuple[int, str]:
            return {"type": 0, "id": 1}.get(key, 2), key

        taken = set(STRUCT_RESERVED)
        for key in sorted(properties, key=order):
            prop = properties[key]
            annotation, decode = self.python_type(prop, imports)
            if key == "type" and isinstance(prop, dict) and prop.get("enum"):
                default = f'attribute("type", default={_literal(prop["enum"][0])})'
            elif decode:
                default = f'attribute("{key}", decode={decode})'
            else:
                default = f'attribute("{key}")'
            field_name = key if key in ("type", "id") else _unique(python_identifier(key, STRUCT_RESERVED), taken)
            description = clean_description(prop.get("description")) if isinstance(prop, dict) else ""
            cls.fields.append(FieldSpec(field_name, f"{annotation} | None", default, description))

        if "type" in properties and "id" in properties:
            cls.identifier = True
            imports.add("scalr_client.jsonapi", "ResourceIdentifier")
        module.classes = [cls]
        module.imports = imports.lines()
        return module
