"""Identifier helpers for generated code."""

import keyword
import re

_WORD_BOUNDARY = re.compile(r"[^a-zA-Z0-9]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_PACKAGE_NAME = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]*$")


def _words(name: str) -> list[str]:
    words = []
    for chunk in _WORD_BOUNDARY.split(name):
        words.extend(part for part in _CAMEL_BOUNDARY.split(chunk) if part)
    return words


def to_snake(name: str) -> str:
    """``WorkspaceVcsRepo`` and ``vcs-repo`` both become ``workspace_vcs_repo``/``vcs_repo``."""
    return "_".join(word.lower() for word in _words(name))


def to_camel(name: str) -> str:
    """``vcs-repo`` becomes ``VcsRepo``."""
    return "".join(word[:1].upper() + word[1:] for word in _words(name))


def python_identifier(name: str, reserved: frozenset[str] = frozenset()) -> str:
    """A snake_case identifier for ``name``.

    ``filter[some-thing]`` becomes ``filter_some_thing``; keywords and
    ``reserved`` names get a trailing underscore.
    """
    identifier = to_snake(name) or "value"
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    if keyword.iskeyword(identifier) or identifier in reserved:
        identifier += "_"
    return identifier


def enum_member(value: object) -> str:
    """Member name for an enum value, e.g. ``refresh-only`` -> ``REFRESH_ONLY``."""
    name = to_snake(str(value)).upper()
    if not name:
        return "EMPTY"
    if name[0].isdigit():
        return f"V_{name}"
    return name


def clean_description(description: str | None) -> str:
    """Collapse a description to a single line."""
    if not description:
        return ""
    return " ".join(description.split())


def sanitize_package_name(name: str) -> str:
    """Turn ``name`` into a usable package and directory name.

    Raises:
        ValueError: Nothing usable is left, or the result is still invalid.
    """
    if not name:
        raise ValueError("package name cannot be empty")

    name = name.lower()
    kept = []
    for position, char in enumerate(name):
        if char.isalpha() or char == "_" or (position > 0 and char.isdigit()):
            kept.append(char)
        elif (char.isdigit() or char.isspace() or char == "-") and position > 0:
            kept.append("_")

    sanitized = "".join(kept)
    if not sanitized:
        raise ValueError(f"package name {name!r} contains only invalid characters")
    if not sanitized[0].isalpha():
        sanitized = f"pkg_{sanitized}"
    if keyword.iskeyword(sanitized):
        sanitized = f"{sanitized}_pkg"
    if not is_valid_package_name(sanitized):
        raise ValueError(f"cannot create valid package name from {name!r}")
    return sanitized


def is_valid_package_name(name: str) -> bool:
    return bool(_PACKAGE_NAME.match(name))
