"""Tri-state field values for partial updates.

A PATCH body has to tell three situations apart: a field that was not
touched (omitted from the payload), a field that should be cleared (sent as
``null``), and a field set to a concrete value. ``Value`` carries that
distinction; ``UNSET`` is the shared "not touched" instance and the default
for every option field.

Example:
    ```python
    from scalr_client.value import UNSET, Value

    Value.of("main")  # {"branch": "main"}
    Value.null()  # {"branch": null}
    UNSET  # key omitted
    ```
"""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_UNSET = "unset"
_NULL = "null"
_SET = "set"


class Value(Generic[T]):
    """A value that is either unset, explicitly null, or set."""

    __slots__ = ("_state", "_value")

    def __init__(self, state: str = _UNSET, value: T | None = None) -> None:
        self._state = state
        self._value = value

    @classmethod
    def of(cls, value: T) -> "Value[T]":
        return cls(_SET, value)

    @classmethod
    def null(cls) -> "Value[T]":
        return cls(_NULL)

    @classmethod
    def unset(cls) -> "Value[T]":
        return UNSET

    @property
    def is_set(self) -> bool:
        """True for explicit null and for a concrete value."""
        return self._state != _UNSET

    @property
    def is_null(self) -> bool:
        return self._state == _NULL

    def get(self) -> tuple[T | None, bool]:
        """Return ``(value, True)`` when set to a value, else ``(None, False)``."""
        if self._state == _SET:
            return self._value, True
        return None, False

    def clear(self) -> None:
        """Reset to the unset state."""
        if self is UNSET:
            return
        self._state = _UNSET
        self._value = None

    def encode(self) -> Any:
        """JSON-ready payload. Only meaningful when ``is_set`` is true."""
        return self._value if self._state == _SET else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._state == other._state and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._state)

    def __bool__(self) -> bool:
        return self._state == _SET

    def __repr__(self) -> str:
        if self._state == _SET:
            return f"Value.of({self._value!r})"
        return f"Value.{self._state}()"


UNSET: Value[Any] = Value()


def wrap(value: Any) -> Value[Any]:
    """Lift a plain option value into a ``Value``.

    ``None`` becomes an explicit null; an existing ``Value`` is returned as is.
    """
    if isinstance(value, Value):
        return value
    if value is None:
        return Value.null()
    return Value.of(value)


def is_unset(value: Any) -> bool:
    return isinstance(value, Value) and not value.is_set


def omit_unset(fields: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Drop unset entries and unwrap the rest into plain JSON values."""
    items = fields.items() if isinstance(fields, Mapping) else fields
    result: dict[str, Any] = {}
    for key, value in items:
        wrapped = wrap(value)
        if wrapped.is_set:
            result[key] = wrapped.encode()
    return result
