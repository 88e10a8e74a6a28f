"""Fakes and handlers shared by unit and integration tests."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx

from script_http.app.ports.http_client import HttpClientError, OutgoingRequest, RawResponse

FIXTURES = Path(__file__).parent / "fixtures"


class FakeHttpClient:
    """Implements AbstractHttpClient for tests; records every send()."""

    def __init__(
        self,
        response: RawResponse | None = None,
        *,
        raise_on_send: Exception | None = None,
    ) -> None:
        self.response = response or RawResponse(
            status_code=200, headers=(), body=b"", url="http://example.test/"
        )
        self.sent: list[OutgoingRequest] = []
        self.closed = False
        self._raise_on_send = raise_on_send

    @property
    def call_count(self) -> int:
        return len(self.sent)

    def send(self, request: OutgoingRequest) -> RawResponse:
        self.sent.append(request)
        if self._raise_on_send is not None:
            raise self._raise_on_send
        return self.response

    def close(self) -> None:
        self.closed = True


class FailingCloseClient(FakeHttpClient):
    def close(self) -> None:
        raise HttpClientError("close failed")


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Answer with the request itself as JSON; header names keep their original case."""
    payload = {
        "method": request.method,
        "url": str(request.url),
        "headers": {key.decode(): value.decode() for key, value in request.headers.raw},
        "header_list": [[key.decode(), value.decode()] for key, value in request.headers.raw],
        "body": request.content.decode("utf-8", errors="replace"),
    }
    return httpx.Response(200, json=payload)


def body_echo_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=request.content)


def static_handler(body: bytes, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=body)

    return handler


class CountingTransport(httpx.MockTransport):
    """MockTransport that counts requests reaching the network layer."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        super().__init__(handler)
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return super().handle_request(request)


def echoed(text: str) -> dict[str, Any]:
    return json.loads(text)


