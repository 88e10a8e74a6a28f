"""Structured-value HTTP requests for embedded scripting layers."""
from script_http.app.application.executor import RequestExecutor, execute
from script_http.app.composition import ScriptHttp, create_script_http
from script_http.app.config.settings import Settings
from script_http.app.domain.decoder import decode
from script_http.app.domain.descriptor import validate_descriptor
from script_http.app.domain.errors import (
    ClientInitError,
    DecodeError,
    InvalidDescriptor,
    InvalidHeader,
    ScriptHttpError,
    TransportError,
)
from script_http.app.domain.headers import parse_header
from script_http.app.domain.models import OutputFormat, RequestDescriptor
from script_http.app.infrastructure.http.factory import create_client

__all__ = [
    "ClientInitError",
    "DecodeError",
    "InvalidDescriptor",
    "InvalidHeader",
    "OutputFormat",
    "RequestDescriptor",
    "RequestExecutor",
    "ScriptHttp",
    "ScriptHttpError",
    "Settings",
    "TransportError",
    "create_client",
    "create_script_http",
    "decode",
    "execute",
    "parse_header",
    "validate_descriptor",
]
