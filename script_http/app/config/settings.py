from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    connect_timeout_seconds: float = Field(10.0, validation_alias="SCRIPT_HTTP_CONNECT_TIMEOUT_SECONDS")
    read_timeout_seconds: float = Field(30.0, validation_alias="SCRIPT_HTTP_READ_TIMEOUT_SECONDS")

    follow_redirects: bool = Field(True, validation_alias="SCRIPT_HTTP_FOLLOW_REDIRECTS")
    max_redirects: int = Field(10, validation_alias="SCRIPT_HTTP_MAX_REDIRECTS")

    verify_tls: bool = Field(True, validation_alias="SCRIPT_HTTP_VERIFY_TLS")
    # Empty means the system trust store.
    ca_bundle_path: str = Field("", validation_alias="SCRIPT_HTTP_CA_BUNDLE_PATH")

    max_connections: int = Field(100, validation_alias="SCRIPT_HTTP_MAX_CONNECTIONS")
    max_keepalive_connections: int = Field(20, validation_alias="SCRIPT_HTTP_MAX_KEEPALIVE_CONNECTIONS")

    user_agent: str = Field("script-http/0.1.0", validation_alias="SCRIPT_HTTP_USER_AGENT")

    # Off by default: non-2xx bodies are handed back like any other response.
    error_for_status: bool = Field(False, validation_alias="SCRIPT_HTTP_ERROR_FOR_STATUS")
