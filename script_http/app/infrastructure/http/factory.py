"""HTTP client factory: builds a pooled client from settings."""
from __future__ import annotations

import ssl
from typing import Any

import httpx
from loguru import logger

from script_http.app.config.settings import Settings
from script_http.app.core import SERVICE_NAME
from script_http.app.domain.errors import ClientInitError
from script_http.app.infrastructure.http.httpx_client import HttpxHttpClient


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _verify(settings: Settings) -> ssl.SSLContext | bool:
    if not settings.verify_tls:
        return False
    if settings.ca_bundle_path:
        return ssl.create_default_context(cafile=settings.ca_bundle_path)
    return ssl.create_default_context()


def create_client(
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> HttpxHttpClient:
    """Build a new client. Every call returns an independent connection pool.

    transport replaces the network layer (e.g. httpx.MockTransport in tests).
    """
    settings = settings or Settings()
    try:
        client = httpx.Client(
            verify=_verify(settings),
            timeout=httpx.Timeout(
                connect=settings.connect_timeout_seconds,
                read=settings.read_timeout_seconds,
                write=settings.read_timeout_seconds,
                pool=settings.connect_timeout_seconds,
            ),
            limits=httpx.Limits(
                max_connections=settings.max_connections,
                max_keepalive_connections=settings.max_keepalive_connections,
            ),
            follow_redirects=settings.follow_redirects,
            max_redirects=settings.max_redirects,
            headers={"User-Agent": settings.user_agent} if settings.user_agent else None,
            transport=transport,
        )
    except (OSError, ValueError) as exc:
        logger.warning("http client init failed: {}", exc)
        raise ClientInitError(f"failed to create http client: {exc}") from exc

    _log(
        "client_created",
        follow_redirects=settings.follow_redirects,
        verify_tls=settings.verify_tls,
        max_connections=settings.max_connections,
    )
    return HttpxHttpClient(client)
