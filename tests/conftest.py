from __future__ import annotations

import pytest

from script_http.app.composition import ScriptHttp
from script_http.app.config.settings import Settings
from tests.helpers import FIXTURES, CountingTransport, FakeHttpClient, echo_handler


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def fake_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture()
def echo_transport() -> CountingTransport:
    return CountingTransport(echo_handler)


@pytest.fixture()
def script_http(settings: Settings, echo_transport: CountingTransport):
    module = ScriptHttp(settings=settings, transport=echo_transport)
    yield module
    module.close()


@pytest.fixture()
def example_page() -> bytes:
    return (FIXTURES / "example_com.html").read_bytes()
