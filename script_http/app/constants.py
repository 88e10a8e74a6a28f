"""Constants shared across the request pipeline."""
from __future__ import annotations


DEFAULT_METHOD = "GET"

HTTP_METHODS = frozenset(
    {
        "GET",
        "HEAD",
        "POST",
        "PUT",
        "DELETE",
        "CONNECT",
        "OPTIONS",
        "TRACE",
        "PATCH",
    }
)


class OUTPUT_TOKEN:
    TEXT = "text"
    JSON = "json"


class DESCRIPTOR_FIELD:
    METHOD = "method"
    URL = "url"
    HEADERS = "headers"
    BODY = "body"
    OUTPUT = "output"


JSON_CONTENT_TYPE = "application/json"
