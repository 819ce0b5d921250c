"""FatSecret Platform REST API client."""

import json
import logging
import re
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlsplit

from fatsecret_client.adapters.transport import Transport
from fatsecret_client.domain.credentials import Credentials
from fatsecret_client.domain.parameters import ParameterStore
from fatsecret_client.domain.requests import (
    AUTOCOMPLETE_METHOD,
    RequestConfig,
    Resource,
)
from fatsecret_client.domain.results import ApiError, ApiResult, TransportResponse
from fatsecret_client.domain.servings import ServingTable
from fatsecret_client.services.servings import normalize_servings, servings_from_food
from fatsecret_client.services.signing import (
    OAUTH_VERSION,
    SIGNATURE_METHOD,
    sign_request,
)
from fatsecret_client.services.urls import build_signed_url, build_url

DEFAULT_API_BASE_URL = "https://platform.fatsecret.com/rest/server.api"
AUTOCOMPLETE_MAX_RESULTS = 10
_LEADING_INT = re.compile(r"\s*[+-]?\d+", re.ASCII)

_logger = logging.getLogger(__name__)


def current_timestamp() -> int:
    """Return the current Unix time in seconds."""
    return int(time.time())


def generate_nonce() -> str:
    """Return a random single-use token."""
    return secrets.token_hex(16)


@dataclass
class FatSecretClient:
    """Signs and issues FatSecret API requests.

    Every call builds its own request parameters, so one client can serve
    concurrent calls.
    """

    credentials: Credentials
    transport: Transport
    base_url: str = DEFAULT_API_BASE_URL
    response_format: str = "json"
    region: str | None = None
    language: str | None = None
    clock: Callable[[], int] = current_timestamp
    nonce_factory: Callable[[], str] = generate_nonce
    debug: bool = False

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url)
        if parts.query or parts.fragment:
            raise ValueError("base_url must not have a query or fragment")

    def food(self) -> "ResourceView":
        """Return a view bound to the food resource."""
        return ResourceView(self, Resource.FOOD)

    def recipe(self) -> "ResourceView":
        """Return a view bound to the recipe resource."""
        return ResourceView(self, Resource.RECIPE)

    async def search(
        self,
        resource: Resource | str,
        expression: str,
        page: int = 0,
        max_results: int = 10,
    ) -> ApiResult:
        """Search foods or recipes by expression."""
        config = RequestConfig(
            method=_resolve_resource(resource).value.search,
            params={
                "search_expression": expression,
                "page_number": page,
                "max_results": max_results,
            },
        )
        return await self.request(config)

    async def autocomplete(self, expression: str, max_results: int = 10) -> ApiResult:
        """Return food name suggestions for a partial expression.

        ``max_results`` outside 1-10 falls back to 10.
        """
        if not 0 < max_results <= AUTOCOMPLETE_MAX_RESULTS:
            max_results = AUTOCOMPLETE_MAX_RESULTS
        config = RequestConfig(
            method=AUTOCOMPLETE_METHOD,
            params={"expression": expression, "max_results": max_results},
        )
        return await self.request(config)

    async def get(self, resource: Resource | str, item_id: int | str) -> ApiResult:
        """Fetch a single food or recipe by id."""
        methods = _resolve_resource(resource).value
        config = RequestConfig(
            method=methods.get, params={methods.id_parameter: item_id}
        )
        return await self.request(config)

    async def get_servings(self, food_id: int | str) -> ServingTable:
        """Return the normalized serving table for a food.

        Ids are coerced to a non-negative int; an id with no leading digits
        becomes 0.
        """
        result = await self.get(Resource.FOOD, _absint(food_id))
        if isinstance(result, ApiError):
            return {}
        return normalize_servings(servings_from_food(result))

    async def get_measurements(self, food_id: int | str) -> list[str]:
        """Return the display keys of a food's serving table."""
        return list(await self.get_servings(food_id))

    def parameters(self, config: RequestConfig) -> dict[str, str]:
        """Return canonical parameters with a fresh nonce and timestamp."""
        store = ParameterStore(
            {
                "format": self.response_format,
                "oauth_consumer_key": self.credentials.consumer_key,
                "oauth_signature_method": SIGNATURE_METHOD,
                "oauth_version": OAUTH_VERSION,
            }
        )
        # Pass-through only; these require a Premier subscription upstream.
        if self.region:
            store.set_parameter("region", self.region)
        if self.language:
            store.set_parameter("language", self.language)
        for key, value in config.params.items():
            store.set_parameter(key, value)
        store.set_parameter("method", config.method)
        store.set_parameter("oauth_timestamp", self.clock())
        store.set_parameter("oauth_nonce", self.nonce_factory())
        return store.get_parameters()

    def url(self, config: RequestConfig) -> str:
        """Return the unsigned request URL."""
        return build_url(self.base_url, self.parameters(config))

    def signed_url(self, config: RequestConfig) -> str:
        """Return the fully signed request URL."""
        params = self.parameters(config)
        signature = sign_request(
            "GET", self.base_url, params, self.credentials.consumer_secret
        )
        return build_signed_url(self.base_url, params, signature)

    async def request(self, config: RequestConfig) -> ApiResult:
        """Issue a signed GET for the request and decode the response."""
        if self.debug:
            _logger.info("FatSecret request: method=%s", config.method)
        response = await self.transport.fetch(self.signed_url(config))
        if not response.ok:
            _logger.warning("FatSecret %s failed: %s", config.method, response.error)
            return ApiError(message=str(response.error))
        return self._decode(config.method, response)

    def _decode(self, method: str, response: TransportResponse) -> ApiResult:
        if not response.body:
            return None
        if self.response_format != "json":
            _logger.debug(
                "Not decoding %s response in %s format", method, self.response_format
            )
            return None
        try:
            payload = json.loads(response.body)
        except json.JSONDecodeError:
            _logger.warning("FatSecret %s returned a non-JSON body", method)
            return None
        if isinstance(payload, dict | list):
            return payload
        return None


@dataclass(frozen=True)
class ResourceView:
    """Client operations bound to one resource type."""

    client: FatSecretClient
    resource: Resource

    async def search(
        self, expression: str, page: int = 0, max_results: int = 10
    ) -> ApiResult:
        return await self.client.search(self.resource, expression, page, max_results)

    async def get(self, item_id: int | str) -> ApiResult:
        return await self.client.get(self.resource, item_id)

    async def autocomplete(self, expression: str, max_results: int = 10) -> ApiResult:
        if self.resource is not Resource.FOOD:
            raise ValueError("Autocomplete is only available for foods")
        return await self.client.autocomplete(expression, max_results)


def _absint(value: int | str) -> int:
    """Leading integer of the value as a non-negative int, 0 if there is none."""
    match = _LEADING_INT.match(str(value))
    return abs(int(match.group())) if match else 0


def _resolve_resource(resource: Resource | str) -> Resource:
    """Accept a Resource or its name (``"food"``, ``"recipe"``)."""
    if isinstance(resource, Resource):
        return resource
    try:
        return Resource[str(resource).upper()]
    except KeyError:
        raise ValueError(f"Unknown resource: {resource!r}") from None
