"""Shared test fixtures."""

import itertools
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlsplit

import pytest

from fatsecret_client.adapters.transport import Transport
from fatsecret_client.config import Settings
from fatsecret_client.domain.credentials import Credentials
from fatsecret_client.domain.results import TransportResponse
from fatsecret_client.services.client import FatSecretClient

FIXED_TIMESTAMP = 1700000000


@dataclass
class FakeTransport(Transport):
    """Fake transport that records URLs and replays queued responses."""

    responses: list[TransportResponse] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)

    def queue_json(self, payload: object) -> None:
        self.responses.append(TransportResponse(body=json.dumps(payload)))

    async def fetch(self, url: str) -> TransportResponse:
        self.urls.append(url)
        if self.responses:
            return self.responses.pop(0)
        return TransportResponse(body="{}")

    def last_query(self) -> dict[str, str]:
        return dict(parse_qsl(urlsplit(self.urls[-1]).query))


def sequential_nonces() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"nonce{next(counter)}"


@pytest.fixture
def settings() -> Settings:
    return Settings(consumer_key="consumer-key", consumer_secret="consumer-secret")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> FatSecretClient:
    return FatSecretClient(
        credentials=Credentials(
            consumer_key="consumer-key", consumer_secret="consumer-secret"
        ),
        transport=transport,
        clock=lambda: FIXED_TIMESTAMP,
        nonce_factory=sequential_nonces(),
    )


@pytest.fixture
def oatmeal_servings() -> list[dict[str, str]]:
    return [
        {
            "serving_id": "1",
            "serving_description": "1 cup",
            "measurement_description": "cup",
            "metric_serving_amount": "234.000",
            "metric_serving_unit": "g",
            "number_of_units": "1.000",
            "calories": "166",
            "carbohydrate": "28.08",
            "protein": "5.94",
            "fat": "3.56",
        },
        {
            "serving_id": "2",
            "serving_description": "100 g",
            "measurement_description": "g",
            "metric_serving_amount": "100.000",
            "metric_serving_unit": "g",
            "number_of_units": "100.000",
            "calories": "71",
            "carbohydrate": "12.00",
            "protein": "2.54",
            "fat": "1.52",
        },
        {
            "serving_id": "3",
            "serving_description": "1 packet",
            "measurement_description": "serving",
            "metric_serving_amount": "28.000",
            "metric_serving_unit": "g",
            "number_of_units": "1.000",
            "calories": "100",
        },
    ]
