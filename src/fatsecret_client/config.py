"""Client configuration."""

import os
from urllib.parse import urlsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Client settings loaded from ``FATSECRET_``-prefixed environment variables."""

    consumer_key: str
    consumer_secret: str
    api_base_url: str = "https://platform.fatsecret.com/rest/server.api"
    response_format: str = "json"
    region: str | None = None
    language: str | None = None
    request_timeout_seconds: float = 15
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FATSECRET_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def reject_query_string(cls, value: str) -> str:
        """Signed requests need a base URL without query or fragment."""
        parts = urlsplit(value)
        if parts.query or parts.fragment:
            raise ValueError("api_base_url must not have a query or fragment")
        return value
