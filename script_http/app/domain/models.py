"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Any, Union

from script_http.app.constants import DEFAULT_METHOD, JSON_CONTENT_TYPE, OUTPUT_TOKEN


@unique
class OutputFormat(Enum):
    TEXT = OUTPUT_TOKEN.TEXT
    JSON = OUTPUT_TOKEN.JSON


@dataclass(frozen=True)
class HeaderEntry:
    name: str
    value: str

    def as_pair(self) -> tuple[str, str]:
        return (self.name, self.value)


@dataclass(frozen=True)
class EmptyBody:
    """No body was given. Still sent, as empty content."""

    content: bytes = b""
    content_type: str | None = None


@dataclass(frozen=True)
class TextBody:
    """Literal body: strings are UTF-8 encoded, bytes pass through."""

    content: bytes
    content_type: str | None = None

    @staticmethod
    def from_text(text: str) -> "TextBody":
        return TextBody(content=text.encode("utf-8"))


@dataclass(frozen=True)
class JsonBody:
    """Structured body (mapping or sequence), serialized once as compact JSON."""

    value: Any
    content: bytes
    content_type: str | None = JSON_CONTENT_TYPE


RequestBody = Union[EmptyBody, TextBody, JsonBody]


@dataclass(frozen=True)
class RequestDescriptor:
    """Validated request. Built by validate_descriptor, consumed once by the executor."""

    url: str
    method: str = DEFAULT_METHOD
    headers: tuple[HeaderEntry, ...] = ()
    body: RequestBody = field(default_factory=EmptyBody)
    output: OutputFormat = OutputFormat.TEXT

    def has_header(self, name: str) -> bool:
        lowered = name.lower()
        return any(entry.name.lower() == lowered for entry in self.headers)
