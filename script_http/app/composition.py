"""Composition root: the surface an embedding layer registers with its script engine.

ScriptHttp wires settings, client factory, validator, executor and decoder. It tracks the
clients it hands out weakly: a client the caller drops is collected with its pool,
and close() releases whichever are still alive.
"""
from __future__ import annotations

import dataclasses
import threading
import weakref
from types import TracebackType
from typing import Any

from loguru import logger

from script_http.app.application.executor import RequestExecutor
from script_http.app.config.settings import Settings
from script_http.app.constants import DEFAULT_METHOD
from script_http.app.core import SERVICE_NAME
from script_http.app.domain.decoder import decode
from script_http.app.domain.descriptor import validate_descriptor
from script_http.app.domain.errors import DecodeError
from script_http.app.domain.models import RequestDescriptor
from script_http.app.infrastructure.http.factory import create_client
from script_http.app.ports.http_client import AbstractHttpClient


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class ScriptHttp:
    """Script-facing HTTP module: client(), request(), get()."""

    def __init__(self, *, settings: Settings | None = None, transport: Any = None) -> None:
        self._settings = settings or Settings()
        self._transport = transport
        self._clients: weakref.WeakSet[AbstractHttpClient] = weakref.WeakSet()
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings

    def client(self) -> AbstractHttpClient:
        """Create a new HTTP client."""
        client = create_client(self._settings, transport=self._transport)
        with self._lock:
            self._clients.add(client)
        return client

    def request(self, client: AbstractHttpClient, value: Any) -> Any:
        """Validate value, send it over client and decode the body as requested."""
        return self._run(client, validate_descriptor(value))

    def get(self, client: AbstractHttpClient, value: Any) -> Any:
        """Execute a GET request; any method in value is ignored."""
        descriptor = dataclasses.replace(validate_descriptor(value), method=DEFAULT_METHOD)
        return self._run(client, descriptor)

    def _run(self, client: AbstractHttpClient, descriptor: RequestDescriptor) -> Any:
        executor = RequestExecutor(client, error_for_status=self._settings.error_for_status)
        response = executor.execute(descriptor)
        try:
            return decode(response, descriptor.output)
        except DecodeError as exc:
            _log("decode_failed", url=response.url, output=descriptor.output.value, error=exc.message)
            raise

    def close(self) -> None:
        with self._lock:
            clients = list(self._clients)
            self._clients.clear()
        for client in clients:
            try:
                client.close()
            except Exception as exc:
                logger.warning("http client close failed: {}", exc)
        _log("clients_closed", count=len(clients))

    def __enter__(self) -> "ScriptHttp":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def create_script_http(settings: Settings | None = None) -> ScriptHttp:
    return ScriptHttp(settings=settings)
