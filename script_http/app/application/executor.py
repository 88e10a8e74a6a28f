"""Request executor: turn a validated descriptor into one blocking round trip.

Uses the HTTP port (AbstractHttpClient); the concrete client is created by the
caller and may be shared. Port failures are mapped to TransportError. Status codes
are not interpreted unless error_for_status is set.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from script_http.app.constants import HTTP_METHODS
from script_http.app.core import SERVICE_NAME
from script_http.app.domain.errors import TransportError
from script_http.app.domain.models import RequestDescriptor
from script_http.app.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    OutgoingRequest,
    RawResponse,
)


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def resolve_method(token: str) -> str:
    canonical = token.upper()
    if canonical not in HTTP_METHODS:
        raise TransportError("invalid method")
    return canonical


def build_request(descriptor: RequestDescriptor) -> OutgoingRequest:
    headers = [entry.as_pair() for entry in descriptor.headers]
    content_type = descriptor.body.content_type
    if content_type is not None and not descriptor.has_header("Content-Type"):
        headers.append(("Content-Type", content_type))

    return OutgoingRequest(
        method=resolve_method(descriptor.method),
        url=descriptor.url,
        headers=tuple(headers),
        content=descriptor.body.content,
    )


class RequestExecutor:
    """Sends descriptors through an injectable AbstractHttpClient."""

    def __init__(self, client: AbstractHttpClient, *, error_for_status: bool = False) -> None:
        self._client = client
        self._error_for_status = error_for_status

    def execute(self, descriptor: RequestDescriptor) -> RawResponse:
        request = build_request(descriptor)
        _log(
            "request_sending",
            method=request.method,
            url=request.url,
            header_count=len(request.headers),
            body_bytes=len(request.content),
        )
        try:
            response = self._client.send(request)
        except HttpClientError as exc:
            _log("request_failed", method=request.method, url=request.url, error=str(exc))
            raise TransportError(str(exc)) from exc

        _log(
            "response_received",
            method=request.method,
            url=response.url,
            status_code=response.status_code,
            body_bytes=len(response.body),
        )
        if self._error_for_status and not response.is_success:
            raise TransportError(f"http status {response.status_code} for {response.url}")
        return response


def execute(
    client: AbstractHttpClient,
    descriptor: RequestDescriptor,
    *,
    error_for_status: bool = False,
) -> RawResponse:
    """One-shot form of RequestExecutor.execute.

    Settings are not consulted here; pass error_for_status to reject non-2xx responses.
    """
    return RequestExecutor(client, error_for_status=error_for_status).execute(descriptor)
