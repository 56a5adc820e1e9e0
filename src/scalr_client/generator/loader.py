"""Load OpenAPI documents and follow internal ``$ref`` pointers.

Documents may be JSON or YAML. Only OpenAPI 3.x is accepted and only
references inside the same document (``#/...``) are followed.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from scalr_client.generator.exceptions import SpecParseError

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def load_spec(path: str | Path) -> dict[str, Any]:
    """Read and parse an OpenAPI document.

    Raises:
        SpecParseError: The file is missing, empty, unparsable, or not OpenAPI 3.x.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Spec file not found: {path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecParseError(f"Failed to read spec file {path}: {e}") from e
    if not content.strip():
        raise SpecParseError(f"Spec file is empty: {path}")

    spec = parse_content(content, json_only=file_path.suffix.lower() == ".json")
    validate_openapi_version(spec)
    return spec


def parse_content(content: str, *, json_only: bool = False) -> dict[str, Any]:
    """Parse JSON, falling back to YAML unless ``json_only`` is set."""
    try:
        result = json.loads(content)
    except json.JSONDecodeError as e:
        if json_only:
            raise SpecParseError(f"Invalid JSON: {e}") from e
        try:
            result = yaml.safe_load(content)
        except yaml.YAMLError as yaml_error:
            raise SpecParseError(f"Failed to parse spec as JSON or YAML: {yaml_error}") from yaml_error

    if not isinstance(result, dict):
        raise SpecParseError(f"Spec must be a JSON/YAML object (got {type(result).__name__})")
    return result


def validate_openapi_version(spec: dict[str, Any]) -> str:
    if "swagger" in spec:
        raise SpecParseError(f"Swagger {spec['swagger']} is not supported; convert the document to OpenAPI 3.x")
    version = spec.get("openapi")
    if version is None:
        raise SpecParseError("Missing 'openapi' field. Is this an OpenAPI 3.x document?")
    version = str(version)
    if not version.startswith("3."):
        raise SpecParseError(f"Unsupported OpenAPI version: {version}")
    return version


def ref_name(ref: str) -> str:
    """Last segment of a reference, e.g. ``Workspace`` for ``#/components/schemas/Workspace``."""
    return ref.rsplit("/", 1)[-1]


def lookup(spec: dict[str, Any], ref: str) -> Any:
    """Return the object a ``#/...`` JSON pointer refers to.

    Raises:
        SpecParseError: The pointer is external or does not resolve.
    """
    if not ref.startswith("#/"):
        raise SpecParseError(f"External references are not supported: {ref}")
    node: Any = spec
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            raise SpecParseError(f"Unresolvable reference: {ref}")
        node = node[part]
    return node


def deref(spec: dict[str, Any], node: Any) -> Any:
    """Follow ``$ref`` chains until a concrete object is reached."""
    seen: set[str] = set()
    while isinstance(node, dict) and "$ref" in node:
        ref = node["$ref"]
        if ref in seen:
            raise SpecParseError(f"Circular reference: {ref}")
        seen.add(ref)
        node = lookup(spec, ref)
    return node


def iter_operations(spec: dict[str, Any]):
    """Yield ``(path, method, operation)`` for every operation, in document order."""
    for path, path_item in (spec.get("paths") or {}).items():
        path_item = deref(spec, path_item)
        shared_parameters = path_item.get("parameters") or []
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            if shared_parameters:
                operation = {**operation, "parameters": _merge_parameters(spec, shared_parameters, operation)}
            yield path, method, operation


def _merge_parameters(spec: dict[str, Any], shared: list[Any], operation: dict[str, Any]) -> list[Any]:
    own = operation.get("parameters") or []
    overridden = set()
    for parameter in own:
        parameter = deref(spec, parameter)
        overridden.add((parameter.get("name"), parameter.get("in")))
    merged = []
    for parameter in shared:
        resolved = deref(spec, parameter)
        if (resolved.get("name"), resolved.get("in")) not in overridden:
            merged.append(parameter)
    return merged + list(own)
