"""Exceptions raised by the code generator."""


class GeneratorError(Exception):
    """Generation could not complete."""


class SpecParseError(GeneratorError):
    """The OpenAPI document could not be read or is not usable."""
