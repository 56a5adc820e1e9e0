"""OpenAPI-to-Python code generator behind the ``scalr-gen`` command."""

from scalr_client.generator.exceptions import GeneratorError, SpecParseError
from scalr_client.generator.generator import Generator, SpecMetadata, parse_metadata
from scalr_client.generator.loader import load_spec
from scalr_client.generator.naming import is_valid_package_name, sanitize_package_name

__all__ = [
    "Generator",
    "GeneratorError",
    "SpecMetadata",
    "SpecParseError",
    "is_valid_package_name",
    "load_spec",
    "parse_metadata",
    "sanitize_package_name",
]
