"""JSON:API error objects.

See: https://jsonapi.org/format/#error-objects
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class JSONAPIErrorSource:
    """Where in the request the error originated."""

    pointer: str = ""  # JSON pointer into the request document
    parameter: str = ""  # query parameter name


@dataclass
class JSONAPIError:
    """A single entry of a JSON:API ``errors`` array."""

    title: str = ""
    status: str = ""
    detail: str = ""
    source: JSONAPIErrorSource | None = None
    code: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JSONAPIError":
        source = data.get("source")
        return cls(
            title=data.get("title") or "",
            status=str(data.get("status") or ""),
            detail=data.get("detail") or "",
            source=JSONAPIErrorSource(
                pointer=source.get("pointer") or "",
                parameter=source.get("parameter") or "",
            )
            if isinstance(source, dict)
            else None,
            code=str(data.get("code") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
            "code": self.code,
        }
        if self.source is not None:
            data["source"] = {"pointer": self.source.pointer, "parameter": self.source.parameter}
        return data

    def __str__(self) -> str:
        message = self.title
        if self.detail:
            message = f"{self.title}: {self.detail}"
        if self.source is not None and self.source.pointer:
            message = f"{message} ({self.source.pointer})"
        return message
