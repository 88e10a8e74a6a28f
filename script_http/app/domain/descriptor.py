"""Request descriptor validator.

validate_descriptor is the only way to build a RequestDescriptor from caller data.
It is pure: it reads the value, raises InvalidDescriptor or InvalidHeader on the
first problem, and never touches the network. Unknown fields are ignored and a
None field counts as absent.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from script_http.app.constants import DEFAULT_METHOD, DESCRIPTOR_FIELD
from script_http.app.domain.errors import InvalidDescriptor
from script_http.app.domain.headers import parse_header, parse_header_pair
from script_http.app.domain.models import (
    EmptyBody,
    HeaderEntry,
    JsonBody,
    OutputFormat,
    RequestBody,
    RequestDescriptor,
    TextBody,
)


def _type_name(value: Any) -> str:
    return type(value).__name__


def _resolve_url(value: Mapping[str, Any]) -> str:
    url = value.get(DESCRIPTOR_FIELD.URL)
    if url is None:
        raise InvalidDescriptor("missing required field: url")
    if not isinstance(url, str):
        raise InvalidDescriptor(f"field url must be a string, got {_type_name(url)}")
    return url


def _resolve_method(value: Mapping[str, Any]) -> str:
    method = value.get(DESCRIPTOR_FIELD.METHOD)
    if method is None:
        return DEFAULT_METHOD
    if not isinstance(method, str):
        raise InvalidDescriptor(f"field method must be a string, got {_type_name(method)}")
    return method


def _resolve_headers(value: Mapping[str, Any]) -> tuple[HeaderEntry, ...]:
    headers = value.get(DESCRIPTOR_FIELD.HEADERS)
    if headers is None:
        return ()
    if isinstance(headers, Mapping):
        return tuple(parse_header_pair(name, item) for name, item in headers.items())
    if isinstance(headers, (list, tuple)):
        return tuple(parse_header(item) for item in headers)
    raise InvalidDescriptor(
        f"field headers must be a map or a list of strings, got {_type_name(headers)}"
    )


def resolve_body(body: Any) -> RequestBody:
    """Pick the body variant once; structured values are serialized here.

    Values of any other type are sent as their str() form.
    """
    if body is None:
        return EmptyBody()
    if isinstance(body, str):
        return TextBody.from_text(body)
    if isinstance(body, (bytes, bytearray)):
        return TextBody(content=bytes(body))
    if isinstance(body, (bool, int, float)):
        try:
            return TextBody.from_text(json.dumps(body, allow_nan=False))
        except ValueError as exc:
            raise InvalidDescriptor(f"field body cannot be serialized as JSON: {exc}") from exc
    if isinstance(body, (Mapping, list, tuple)):
        try:
            encoded = json.dumps(body, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise InvalidDescriptor(f"field body cannot be serialized as JSON: {exc}") from exc
        return JsonBody(value=body, content=encoded.encode("utf-8"))
    return TextBody.from_text(str(body))


def _resolve_output(value: Mapping[str, Any]) -> OutputFormat:
    output = value.get(DESCRIPTOR_FIELD.OUTPUT)
    if output is None:
        return OutputFormat.TEXT
    if isinstance(output, str):
        for fmt in OutputFormat:
            if fmt.value == output:
                return fmt
    raise InvalidDescriptor(f'unsupported output {output!r}: expected "text" or "json"')


def validate_descriptor(value: Any) -> RequestDescriptor:
    if not isinstance(value, Mapping):
        raise InvalidDescriptor(f"request must be a map, got {_type_name(value)}")

    url = _resolve_url(value)
    method = _resolve_method(value)
    headers = _resolve_headers(value)
    output = _resolve_output(value)
    body = resolve_body(value.get(DESCRIPTOR_FIELD.BODY))

    return RequestDescriptor(
        url=url,
        method=method,
        headers=headers,
        body=body,
        output=output,
    )
