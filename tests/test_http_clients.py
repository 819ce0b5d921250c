"""Tests for the HTTP transport adapter."""

import asyncio
import json

import httpx

from fatsecret_client.adapters.transport import HttpxTransport


def _mock_transport(handler) -> HttpxTransport:  # type: ignore[no-untyped-def]
    return HttpxTransport(
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )


def test_httpx_transport_returns_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods": {}})

    transport = _mock_transport(handler)

    url = "https://api.test/rest/server.api?method=foods.search"
    response = asyncio.run(transport.fetch(url))

    assert response.ok
    assert json.loads(response.body) == {"foods": {}}
    assert seen[0].method == "GET"
    assert seen[0].url.params["method"] == "foods.search"


def test_httpx_transport_keeps_encoded_signature() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="{}")

    transport = _mock_transport(handler)

    url = "https://api.test/api?a=1&oauth_signature=ab%2Bc%3D"
    asyncio.run(transport.fetch(url))

    assert seen[0].url.params["oauth_signature"] == "ab+c="


def test_httpx_transport_passes_error_status_bodies_through() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text='{"error": {"code": 1}}')

    transport = _mock_transport(handler)

    response = asyncio.run(transport.fetch("https://api.test/api"))

    assert response.ok
    assert response.body == '{"error": {"code": 1}}'


def test_httpx_transport_reports_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = _mock_transport(handler)

    response = asyncio.run(transport.fetch("https://api.test/api"))

    assert not response.ok
    assert response.error == "connection refused"
    assert response.body is None


def test_httpx_transport_close() -> None:
    transport = HttpxTransport.create(timeout_seconds=5)

    asyncio.run(transport.close())

    assert transport.http_client.is_closed
    assert transport.timeout_seconds == 5
