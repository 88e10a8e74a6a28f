"""Concrete HTTP client implementation using a blocking httpx.Client.

httpx.Client owns the connection pool and is safe to share between threads, so one
HttpxHttpClient can serve any number of concurrent callers.
"""
from __future__ import annotations

from types import TracebackType

import httpx

from script_http.app.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
    OutgoingRequest,
    RawResponse,
)

_SCHEMES = ("http", "https")


def _parse_url(raw: str) -> httpx.URL:
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise HttpClientError(f"invalid url {raw!r}: {exc}") from exc
    if url.scheme not in _SCHEMES or not url.host:
        raise HttpClientError(f"invalid url {raw!r}: expected an absolute http or https url")
    return url


class HttpxHttpClient(AbstractHttpClient):
    """AbstractHttpClient implementation using httpx.Client."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def send(self, request: OutgoingRequest) -> RawResponse:
        if self._client.is_closed:
            raise HttpClientError("client has been closed")
        url = _parse_url(request.url)
        try:
            httpx_request = self._client.build_request(
                request.method,
                url,
                headers=list(request.headers),
                content=request.content,
            )
            response = self._client.send(httpx_request)
        except httpx.TimeoutException as exc:
            raise HttpClientTimeoutError(f"timeout while requesting {request.url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise HttpClientError(f"request to {request.url} failed: {exc}") from exc

        return RawResponse(
            status_code=response.status_code,
            headers=tuple(response.headers.multi_items()),
            body=response.content,
            url=str(response.url),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxHttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
