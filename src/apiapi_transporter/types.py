"""Request and response shapes exchanged with the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Request:
    """Abstract outgoing request built by the dispatching framework."""

    method: str
    uri: str
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)

    def get_header(self, name: str, default: str = "") -> str:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default


@dataclass(frozen=True)
class ResponseStatus:
    code: int
    message: str


@dataclass
class ResponseResult:
    status: ResponseStatus
    headers: dict[str, str]
    body: bytes

    def get_header(self, name: str, default: str | None = None) -> str | None:
        # Last occurrence wins, matching how the mapping was filled.
        wanted = name.lower()
        found = default
        for key, value in self.headers.items():
            if key.lower() == wanted:
                found = value
        return found

    def as_dict(self) -> dict[str, Any]:
        """Render the ``headers``/``body``/``response`` shape used by the dispatcher."""
        return {
            "headers": dict(self.headers),
            "body": self.body,
            "response": {"code": self.status.code, "message": self.status.message},
        }


__all__ = ["Request", "ResponseResult", "ResponseStatus"]
