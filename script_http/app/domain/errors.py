"""Error taxonomy for the request pipeline.

Every failure the pipeline reports is one of these. None of them is fatal to the
host: the embedding layer catches ScriptHttpError and surfaces it as a script-level
failure, or calls to_value() when it wants the error as plain data.
"""
from __future__ import annotations

from typing import Any


class ScriptHttpError(Exception):
    """Base error; carries a kind tag and a human-readable message."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_value(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


class ClientInitError(ScriptHttpError):
    """Transport, TLS or resolver setup failed while creating a client."""

    kind = "client_init"


class InvalidDescriptor(ScriptHttpError):
    """Request value is missing a required field or has the wrong shape."""

    kind = "invalid_descriptor"


class InvalidHeader(ScriptHttpError):
    """Header entry violates HTTP grammar or lacks a colon separator."""

    kind = "invalid_header"


class TransportError(ScriptHttpError):
    """Unknown method, bad url, or any failure while sending the request."""

    kind = "transport"


class DecodeError(ScriptHttpError):
    """Response body is not valid UTF-8 text or not valid JSON."""

    kind = "decode"
