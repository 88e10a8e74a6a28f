"""HTTP client port: contract for sending one fully built request.

The executor depends on this port; infrastructure (httpx) implements it.
Keeps the domain and application layers free of transport imports.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class HttpClientError(Exception):
    """Base for transport failures (connect, TLS, DNS, invalid url, I/O)."""


class HttpClientTimeoutError(HttpClientError):
    """Raised when the request times out."""


@dataclass(frozen=True)
class OutgoingRequest:
    """Wire-ready request: canonical method, raw url, ordered headers, encoded body."""

    method: str
    url: str
    headers: tuple[tuple[str, str], ...]
    content: bytes


@dataclass(frozen=True)
class RawResponse:
    """Fully read response. Status is not interpreted at this layer."""

    status_code: int
    headers: tuple[tuple[str, str], ...]
    body: bytes
    url: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class AbstractHttpClient(Protocol):
    """Port: send requests over a pooled, reusable transport."""

    def send(self, request: OutgoingRequest) -> RawResponse:
        """Send and read the whole body; raise HttpClientTimeoutError or HttpClientError on failure."""
        ...

    def close(self) -> None:
        """Release the connection pool. Further sends are not allowed."""
        ...
