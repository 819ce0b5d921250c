"""Dependency container wiring for the client."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fatsecret_client.adapters.transport import HttpxTransport, Transport
from fatsecret_client.app_logging import configure_logging
from fatsecret_client.config import Settings
from fatsecret_client.domain.credentials import Credentials
from fatsecret_client.services.client import FatSecretClient


@dataclass
class AppContainer:
    """Holds the configured client and its collaborators."""

    settings: Settings
    transport: Transport
    client: FatSecretClient
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(logging.DEBUG if resolved_settings.debug else logging.INFO)
    transport = HttpxTransport.create(
        timeout_seconds=resolved_settings.request_timeout_seconds
    )
    client = FatSecretClient(
        credentials=Credentials(
            consumer_key=resolved_settings.consumer_key,
            consumer_secret=resolved_settings.consumer_secret,
        ),
        transport=transport,
        base_url=resolved_settings.api_base_url,
        response_format=resolved_settings.response_format,
        region=resolved_settings.region,
        language=resolved_settings.language,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await transport.close()

    return AppContainer(
        settings=resolved_settings,
        transport=transport,
        client=client,
        close_resources=close_resources,
    )
