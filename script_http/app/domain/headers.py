"""Header codec: turn one caller-supplied header item into a validated HeaderEntry.

Two shapes are accepted: an explicit (name, value) pair, or a raw "Name: Value"
string split on the first colon. Names must be HTTP tokens; values may hold visible
ASCII, space and tab. Casing is left alone and nothing is de-duplicated.
"""
from __future__ import annotations

import string
from typing import Any

from script_http.app.domain.errors import InvalidHeader
from script_http.app.domain.models import HeaderEntry

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")
_VALUE_CHARS = frozenset(chr(code) for code in range(0x21, 0x7F)) | {" ", "\t"}


def _first_invalid(text: str, allowed: frozenset[str]) -> int | None:
    for index, char in enumerate(text):
        if char not in allowed:
            return index
    return None


def _value_text(value: Any) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(type(value).__name__)


def parse_header_pair(name: Any, value: Any) -> HeaderEntry:
    if not isinstance(name, str):
        raise InvalidHeader(f"header name {name!r} must be a string")
    if not name:
        raise InvalidHeader("header name must not be empty")
    bad = _first_invalid(name, _TOKEN_CHARS)
    if bad is not None:
        raise InvalidHeader(
            f"{name!r} is not a valid header name (invalid character {name[bad]!r} at position {bad})"
        )

    try:
        text = _value_text(value)
    except TypeError as exc:
        raise InvalidHeader(f"value of header {name!r} must be a string, not {exc}") from exc
    bad = _first_invalid(text, _VALUE_CHARS)
    if bad is not None:
        raise InvalidHeader(
            f"value of header {name!r} is not a valid header value "
            f"(invalid character {text[bad]!r} at position {bad})"
        )
    return HeaderEntry(name=name, value=text)


def parse_header_line(text: str) -> HeaderEntry:
    name, sep, value = text.partition(":")
    if not sep:
        raise InvalidHeader(f"{text} is not a valid header")
    return parse_header_pair(name.strip(), value.strip())


def parse_header(item: Any) -> HeaderEntry:
    """Parse a raw header line or a (name, value) pair."""
    if isinstance(item, str):
        return parse_header_line(item)
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return parse_header_pair(item[0], item[1])
    raise InvalidHeader(f"{item!r} is not a valid header")
