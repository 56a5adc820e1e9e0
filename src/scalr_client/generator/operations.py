"""Turn ``paths`` into render data for the operation modules.

Operations are grouped by their ``x-resource`` extension; those without
one land in a ``Misc`` group. Each group becomes one module with one class.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from scalr_client.generator.loader import deref, iter_operations, ref_name
from scalr_client.generator.naming import clean_description, python_identifier, to_snake
from scalr_client.generator.schemas import Imports, SchemaBuilder, schema_type
from scalr_client.jsonapi import MEDIA_TYPE

logger = logging.getLogger(__name__)

MISC = "Misc"
PLAIN_JSON = "application/json"

PARAM_RESERVED = frozenset(
    {
        "body",
        "document",
        "encode_params",
        "fetch_page",
        "headers",
        "identifiers",
        "items",
        "page",
        "params",
        "path",
        "quote",
        "response",
        "self",
    }
)


@dataclass
class Param:
    name: str
    key: str
    annotation: str
    description: str = ""


@dataclass
class Operation:
    """One API call as the operations template renders it."""

    name: str
    method: str
    path: str
    description: str = ""
    path_params: list[Param] = field(default_factory=list)
    query_params: list[Param] = field(default_factory=list)
    returns: str = "none"
    return_type: str = "None"
    model: str | None = None
    body_kind: str | None = None
    body_name: str = "body"
    body_type: str = ""
    relationship_type: str = ""
    plain_json: bool = False

    @property
    def paginated(self) -> bool:
        return self.returns == "list" and any(param.key == "page[number]" for param in self.query_params)

    @property
    def signature(self) -> str:
        parts = ["self"]
        parts += [f"{param.name}: {param.annotation}" for param in self.path_params]
        if self.body_kind:
            parts.append(f"{self.body_name}: {self.body_type}")
        if self.query_params:
            parts.append("*")
            parts += [f"{param.name}: {param.annotation} | None = None" for param in self.query_params]
        return ", ".join(parts)

    @property
    def iterate_signature(self) -> str:
        params = [param for param in self.query_params if param.key != "page[number]"]
        parts = ["self"]
        parts += [f"{param.name}: {param.annotation}" for param in self.path_params]
        if params:
            parts.append("*")
            parts += [f"{param.name}: {param.annotation} | None = None" for param in params]
        return ", ".join(parts)

    @property
    def page_size_param(self) -> str | None:
        for param in self.query_params:
            if param.key == "page[size]":
                return param.name
        return None

    @property
    def page_size_expression(self) -> str:
        name = self.page_size_param
        return f"{name} or 0" if name else "0"

    @property
    def forwarded_arguments(self) -> str:
        """Call arguments for the paginated wrapper, with ``page_number`` left to the iterator."""
        parts = [param.name for param in self.path_params]
        for param in self.query_params:
            value = "page_number" if param.key == "page[number]" else param.name
            parts.append(f"{param.name}={value}")
        return ", ".join(parts)

    @property
    def path_expression(self) -> str:
        expression = repr(self.path)
        for param in self.path_params:
            expression += f'.replace("{{{param.key}}}", quote(str({param.name}), safe=""))'
        return expression

    @property
    def params_expression(self) -> str | None:
        if not self.query_params:
            return None
        items = ", ".join(f"{param.key!r}: {param.name}" for param in self.query_params)
        return f"encode_params({{{items}}})"


@dataclass
class ResourceGroup:
    name: str
    module: str
    class_name: str
    attribute: str
    operations: list[Operation] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)


def resource_name(operation: dict[str, Any]) -> str:
    resource = operation.get("x-resource")
    return resource if isinstance(resource, str) and resource else ""


def request_body_schemas(spec: dict[str, Any]) -> set[str]:
    """Names of the schemas referenced directly by request bodies."""
    names: set[str] = set()
    for _, _, operation in iter_operations(spec):
        body = deref(spec, operation.get("requestBody"))
        if not isinstance(body, dict):
            continue
        content = body.get("content") or {}
        media = content.get(MEDIA_TYPE) or content.get(PLAIN_JSON)
        schema = media.get("schema") if isinstance(media, dict) else None
        if isinstance(schema, dict) and "$ref" in schema:
            names.add(ref_name(schema["$ref"]))
    return names


class OperationBuilder:
    """Builds one ``ResourceGroup`` per ``x-resource``."""

    def __init__(self, spec: dict[str, Any], schemas: SchemaBuilder, generated: set[str]) -> None:
        self.spec = spec
        self.schemas = schemas
        self.generated = generated

    def build(self) -> list[ResourceGroup]:
        grouped: dict[str, list[Operation]] = {}
        for path, method, raw in iter_operations(self.spec):
            resource = resource_name(raw)
            operation = self.parse_operation(path, method, raw, resource)
            grouped.setdefault(resource or MISC, []).append(operation)

        names = sorted(name for name in grouped if name != MISC)
        if MISC in grouped:
            names.append(MISC)

        groups = []
        taken_attributes: set[str] = set()
        for name in names:
            operations = sorted(grouped[name], key=lambda op: op.name)
            _dedupe_names(operations)
            module = to_snake(name)
            attribute = python_identifier(name, frozenset({"close", "config", "from_env", "http"}))
            while attribute in taken_attributes:
                attribute += "_"
            taken_attributes.add(attribute)
            groups.append(
                ResourceGroup(
                    name=name,
                    module=module,
                    class_name=f"{name}Operations",
                    attribute=attribute,
                    operations=operations,
                    imports=self._imports(operations),
                )
            )
        return groups

    def _imports(self, operations: list[Operation]) -> list[str]:
        imports = Imports()
        imports.add("scalr_client.http", "HTTPClient")
        schema_names: set[str] = set()
        for op in operations:
            if op.path_params:
                imports.add("urllib.parse", "quote")
            if op.query_params:
                imports.add("scalr_client.http", "encode_params")
            if op.returns in ("model", "list", "document"):
                imports.add("scalr_client.jsonapi", "Document")
            if op.returns == "list":
                imports.add("scalr_client.resources.base", "ResourceList")
            if op.paginated:
                imports.add("scalr_client.pagination", "PageIterator")
            if op.model:
                schema_names.add(op.model)
            if op.body_kind in ("options", "struct"):
                schema_names.add(op.body_type)
            if op.body_kind == "relationship":
                imports.add("collections.abc", "Iterable")
                imports.add("typing", "Any")
                imports.add("scalr_client.models", "identifiers")
            if op.body_kind == "raw":
                imports.add("typing", "Any")
            if any(param.annotation == "Any" for param in op.query_params):
                imports.add("typing", "Any")
        if schema_names:
            imports.add("..schemas", *schema_names)
        return imports.lines()

    def parse_operation(self, path: str, method: str, raw: dict[str, Any], resource: str) -> Operation:
        operation_id = raw.get("operationId") or f"{method}_{path}"
        op = Operation(
            name=python_identifier(operation_id),
            method=method.upper(),
            path=path,
            description=clean_description(raw.get("description") or raw.get("summary")),
        )

        taken = set(PARAM_RESERVED)
        for parameter in raw.get("parameters") or []:
            parameter = deref(self.spec, parameter)
            if not isinstance(parameter, dict):
                continue
            name = python_identifier(parameter.get("name", ""), PARAM_RESERVED)
            while name in taken:
                name += "_"
            location = parameter.get("in")
            if location == "path":
                taken.add(name)
                op.path_params.append(Param(name, parameter["name"], "str"))
            elif location == "query":
                taken.add(name)
                op.query_params.append(self.query_param(name, parameter))

        body = deref(self.spec, raw.get("requestBody"))
        if isinstance(body, dict):
            self._request_body(op, body, path, resource, taken)

        responses = raw.get("responses") or {}
        response = responses.get("200") or responses.get("201") or responses.get(200) or responses.get(201)
        if response is not None:
            self._response(op, deref(self.spec, response), path)
        return op

    def query_param(self, name: str, parameter: dict[str, Any]) -> Param:
        key = parameter["name"]
        if key.startswith("filter["):
            annotation = "str"
        elif key in ("sort", "include"):
            annotation = "list[str]"
        elif key.startswith("page["):
            annotation = "int"
        else:
            schema = deref(self.spec, parameter.get("schema"))
            annotation = self._simple_type(schema)
        return Param(name, key, annotation, clean_description(parameter.get("description")))

    def _simple_type(self, schema: Any) -> str:
        if not isinstance(schema, dict):
            return "str"
        type_ = schema_type(schema)
        if type_ == "array":
            return f"list[{self._simple_type(deref(self.spec, schema.get('items')))}]"
        return {"integer": "int", "number": "float", "boolean": "bool", "string": "str"}.get(type_ or "", "Any")

    def _request_body(self, op: Operation, body: dict[str, Any], path: str, resource: str, taken: set[str]) -> None:
        content = body.get("content") or {}
        media = content.get(MEDIA_TYPE)
        if media is None:
            media = content.get(PLAIN_JSON)
            op.plain_json = media is not None
        schema = media.get("schema") if isinstance(media, dict) else None

        if not isinstance(schema, dict) or "$ref" not in schema:
            op.body_kind, op.body_type = "raw", "dict[str, Any]"
            return

        name = ref_name(schema["$ref"])
        relationship = "/relationships/" in path and op.method in ("POST", "PATCH", "DELETE")
        if relationship:
            item = self.relationship_item(name)
            if item is not None:
                type_name, _ = item
                op.body_kind, op.body_type = "relationship", "Iterable[Any]"
                op.relationship_type = type_name
                body_name = python_identifier(path.rstrip("/").rsplit("/", 1)[-1], PARAM_RESERVED)
                while body_name in taken:
                    body_name += "_"
                op.body_name = body_name
                return

        if name.endswith("Document"):
            base = name[: -len("Document")]
            if self.schemas.resource_schema(base):
                op.body_kind, op.body_type = "options", f"{base}Request"
                return
        if resource and name == f"{resource}Document" and self.schemas.resource_schema(resource):
            op.body_kind, op.body_type = "options", f"{resource}Request"
            return
        if name in self.generated and not self.schemas.resource_schema(name):
            op.body_kind, op.body_type = "struct", name
            return
        op.body_kind, op.body_type = "raw", "dict[str, Any]"

    def relationship_item(self, document_name: str) -> tuple[str, str | None] | None:
        """``(json:api type, model name)`` of the items in a relationship document."""
        document = deref(self.spec, self.schemas.schemas.get(document_name))
        if not isinstance(document, dict):
            return None
        data = (document.get("properties") or {}).get("data")
        data_schema = deref(self.spec, data)
        if not isinstance(data_schema, dict) or schema_type(data_schema) != "array":
            return None
        items = data_schema.get("items")
        if not isinstance(items, dict) or "$ref" not in items:
            return None
        item_name = ref_name(items["$ref"])
        item = deref(self.spec, items)
        type_property = deref(self.spec, (item.get("properties") or {}).get("type")) if isinstance(item, dict) else None
        values = type_property.get("enum") if isinstance(type_property, dict) else None
        if values and isinstance(values[0], str) and values[0]:
            return values[0], self.schemas.schema_for_type(values[0])
        if item_name.endswith("Relationship") and self.schemas.resource_schema(item_name[: -len("Relationship")]):
            base = item_name[: -len("Relationship")]
            return self.schemas.type_for_schema(base), base
        return None

    def _response(self, op: Operation, response: Any, path: str) -> None:
        content = (response.get("content") or {}) if isinstance(response, dict) else {}
        media = content.get(MEDIA_TYPE)
        schema = media.get("schema") if isinstance(media, dict) else None
        if not isinstance(schema, dict) or "$ref" not in schema:
            op.returns, op.return_type = "text", "str"
            return

        document_name = ref_name(schema["$ref"])
        if "/relationships/" in path and op.method == "GET":
            item = self.relationship_item(document_name)
            if item is not None and item[1] is not None:
                op.returns, op.model = "list", item[1]
                op.return_type = f"ResourceList[{item[1]}]"
                return

        name, is_list = document_name, False
        if name.endswith("ListingDocument"):
            name, is_list = name[: -len("ListingDocument")], True
        elif name.endswith("Document"):
            name = name[: -len("Document")]

        if not self.schemas.resource_schema(name):
            op.returns, op.return_type = "document", "Document"
            return
        op.model = name
        if is_list:
            op.returns, op.return_type = "list", f"ResourceList[{name}]"
        else:
            op.returns, op.return_type = "model", name


def _dedupe_names(operations: list[Operation]) -> None:
    taken: set[str] = set()
    for op in operations:
        while op.name in taken or f"iter_{op.name}" in taken:
            op.name += "_"
        taken.add(op.name)
        if op.paginated:
            taken.add(f"iter_{op.name}")
