"""Response decoder: shape a fully read body as text or as a JSON value tree."""
from __future__ import annotations

import json
from typing import Any

from script_http.app.domain.errors import DecodeError
from script_http.app.domain.models import OutputFormat
from script_http.app.ports.http_client import RawResponse


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid literal {name!r}")


def decode_text(body: bytes) -> str:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"response body is not valid UTF-8: {exc}") from exc


def decode_json(body: bytes) -> Any:
    text = decode_text(body)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"response body is not valid JSON: {exc}") from exc


def decode(response: RawResponse, output: OutputFormat) -> Any:
    if output is OutputFormat.JSON:
        return decode_json(response.body)
    return decode_text(response.body)
