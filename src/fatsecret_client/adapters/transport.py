"""HTTP transport for signed FatSecret requests."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from fatsecret_client.domain.results import TransportResponse

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Interface for issuing a GET to a fully signed URL."""

    async def fetch(self, url: str) -> TransportResponse:
        """Fetch the URL and return its body, or an error message."""


@dataclass
class HttpxTransport(Transport):
    """HTTPX-backed transport."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, timeout_seconds: float = 15) -> "HttpxTransport":
        """Create a transport with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(), timeout_seconds=timeout_seconds)

    async def fetch(self, url: str) -> TransportResponse:
        """Issue a GET; network failures are returned as errors, not raised."""
        try:
            response = await self.http_client.get(url, timeout=self.timeout_seconds)
        except httpx.HTTPError as exc:
            return TransportResponse(error=str(exc) or exc.__class__.__name__)
        if response.is_error:
            _logger.warning("FatSecret responded with HTTP %s", response.status_code)
        return TransportResponse(body=response.text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
