"""Render a Python client package from an OpenAPI document.

The generated package holds only schema classes, operation classes and a
``Client``; the HTTP layer, the ``Value`` wrapper and the JSON:API codec are
imported from the installed ``scalr_client`` runtime.

Example:
    ```python
    from scalr_client.generator import Generator

    Generator("./scalr", "scalr").generate("openapi.yml")
    ```
"""

import ast
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from scalr_client.generator.exceptions import GeneratorError
from scalr_client.generator.loader import deref, load_spec
from scalr_client.generator.naming import python_identifier
from scalr_client.generator.operations import OperationBuilder, request_body_schemas
from scalr_client.generator.schemas import SchemaBuilder

logger = logging.getLogger(__name__)

HEADER = "# Code generated by scalr-gen. DO NOT EDIT."


@dataclass(frozen=True)
class SpecMetadata:
    """API settings read from ``servers`` and ``components.parameters``."""

    server_variable: str
    base_path: str
    prefer_header: str = ""


def parse_metadata(spec: dict[str, Any]) -> SpecMetadata:
    """Read the server variable, base path and ``Prefer`` default.

    ``https://{Domain}/api/iacp/v3`` gives ``Domain`` and ``/api/iacp/v3``.

    Raises:
        GeneratorError: No servers are declared or the URL has no variable.
    """
    servers = spec.get("servers") or []
    if not servers:
        raise GeneratorError("no servers defined in spec")

    server_url = str(servers[0].get("url", ""))
    start, end = server_url.find("{"), server_url.find("}")
    if start == -1 or end == -1:
        raise GeneratorError(f"invalid server URL format: {server_url}")

    prefer = ""
    parameters = (spec.get("components") or {}).get("parameters") or {}
    param = deref(spec, parameters.get("PreferParam"))
    if (
        isinstance(param, dict)
        and param.get("in") == "header"
        and param.get("name") == "Prefer"
        and param.get("required")
    ):
        default = (deref(spec, param.get("schema")) or {}).get("default")
        if isinstance(default, str):
            prefer = default

    return SpecMetadata(
        server_variable=server_url[start + 1 : end],
        base_path=server_url[end + 1 :].rstrip("/"),
        prefer_header=prefer,
    )


def _docstring(text: str) -> str:
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if text.endswith('"'):
        text = text[:-1] + '\\"'
    return text


def create_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("scalr_client.generator", "templates"),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters["docstring"] = _docstring
    env.filters["pystr"] = repr
    return env


class Generator:
    """Generates a client package into ``output_dir``.

    Args:
        output_dir: Package directory; removed and recreated on every run.
        package_name: Name used in the generated docstrings.
    """

    def __init__(self, output_dir: str | Path, package_name: str) -> None:
        self.output_dir = Path(output_dir)
        self.package_name = package_name
        self.env = create_environment()

    def generate(self, spec_path: str | Path) -> None:
        """Read ``spec_path`` and write the package.

        Raises:
            SpecParseError: The document cannot be read.
            GeneratorError: Metadata is missing, or writing or rendering failed.
        """
        logger.info(f"Reading OpenAPI spec from {spec_path}")
        spec = load_spec(spec_path)

        schemas = (spec.get("components") or {}).get("schemas") or {}
        logger.info(f"Loaded {len(schemas)} schemas, {len(spec.get('paths') or {})} paths")

        metadata = parse_metadata(spec)
        logger.info(f"Detected API base path: {metadata.base_path}")
        if metadata.prefer_header:
            logger.info(f'Detected "Prefer" header: {metadata.prefer_header!r}')

        self._prepare_output()

        logger.info("Generating schemas...")
        schema_builder = SchemaBuilder(spec)
        modules = schema_builder.build(request_body_schemas(spec))
        schemas_dir = self.output_dir / "schemas"
        self._render("base.py.j2", schemas_dir / "_base.py")
        for module in modules:
            self._render("schema.py.j2", schemas_dir / f"{module.module}.py", module=module)
        self._render(
            "schemas_init.py.j2",
            schemas_dir / "__init__.py",
            modules=modules,
            exports=sorted(name for module in modules for name in module.exports),
        )
        logger.debug(f"Generated {len(modules)} schema modules")

        logger.info("Generating operations...")
        groups = OperationBuilder(spec, schema_builder, set(schema_builder.modules)).build()
        ops_dir = self.output_dir / "ops"
        self._render("ops_init.py.j2", ops_dir / "__init__.py")
        for group in groups:
            self._render("operations.py.j2", ops_dir / f"{group.module}.py", group=group)
        logger.debug(f"Generated {len(groups)} operation modules")

        logger.info("Generating main client...")
        server_arg = python_identifier(metadata.server_variable, frozenset({"cls", "options", "self", "token"}))
        self._render(
            "client.py.j2",
            self.output_dir / "client.py",
            groups=groups,
            metadata=metadata,
            server_arg=server_arg,
            base_url_expression=f'f"https://{{{server_arg}}}{{BASE_PATH}}/"',
        )
        self._render("package_init.py.j2", self.output_dir / "__init__.py")

        logger.info("Checking generated code...")
        self.check_syntax()
        logger.info("Generation completed.")

    def _prepare_output(self) -> None:
        logger.info(f"Preparing output directory: {self.output_dir}")
        try:
            if self.output_dir.exists():
                shutil.rmtree(self.output_dir)
            (self.output_dir / "schemas").mkdir(parents=True)
            (self.output_dir / "ops").mkdir()
        except OSError as e:
            raise GeneratorError(f"failed to prepare output directory {self.output_dir}: {e}") from e

    def _render(self, template_name: str, target: Path, **context: Any) -> None:
        try:
            content = self.env.get_template(template_name).render(
                header=HEADER, package=self.package_name, **context
            )
        except TemplateError as e:
            raise GeneratorError(f"failed to render {template_name} for {target.name}: {e}") from e
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise GeneratorError(f"failed to write {target}: {e}") from e

    def check_syntax(self) -> list[Path]:
        """Parse every generated module; return the ones that fail.

        A module that does not parse is logged as a warning and left in place.
        """
        failed = []
        for path in sorted(self.output_dir.rglob("*.py")):
            try:
                ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
            except SyntaxError as e:
                logger.warning(f"Generated module {path} does not parse: {e}")
                failed.append(path)
        return failed
