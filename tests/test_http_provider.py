"""Tests for the HTTP catalog provider."""

import httpx
import pytest

from brew_buddy.exceptions import CollectionFetchError, ImageResolutionError
from brew_buddy.providers.http import HttpCatalogClient


def _client(handler):
    transport = httpx.MockTransport(handler)
    return HttpCatalogClient(client=httpx.AsyncClient(transport=transport, base_url="http://catalog.test"))


@pytest.mark.asyncio
async def test_fetch_beverages_sends_query_and_parses_page():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json={
                "content": [
                    {"id": "1", "name": "Espresso", "type": "COFFEE", "imageResourceRef": "img/1"},
                    {"id": "2", "name": "Sencha", "type": "TEA", "tags": ["Green"]},
                ],
                "totalElements": 2,
                "totalPages": 1,
                "size": 1000,
                "number": 0,
            },
        )

    page = await _client(handler).fetch_beverages(type="TEA", name_contains="sen", size=1000)

    assert seen["path"] == "/api/beverages"
    assert seen["params"] == {"type": "TEA", "nameContains": "sen", "size": "1000"}
    assert [b.name for b in page.content] == ["Espresso", "Sencha"]
    assert page.content[0].image_resource_ref == "img/1"
    assert page.total_elements == 2


@pytest.mark.asyncio
async def test_fetch_beverages_omits_unset_params():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"content": []})

    await _client(handler).fetch_beverages()

    assert seen["params"] == {}


@pytest.mark.asyncio
async def test_fetch_beverages_accepts_bare_list():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"id": "1", "name": "Espresso"}])

    page = await _client(handler).fetch_beverages(size=10)

    assert [b.id for b in page.content] == ["1"]
    assert page.total_elements == 1


@pytest.mark.asyncio
async def test_fetch_beverages_non_success_status_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with pytest.raises(CollectionFetchError, match="503"):
        await _client(handler).fetch_beverages()


@pytest.mark.asyncio
async def test_fetch_beverages_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CollectionFetchError):
        await _client(handler).fetch_beverages()


@pytest.mark.asyncio
async def test_fetch_beverages_malformed_payload_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"content": [{"id": "1"}]})

    with pytest.raises(CollectionFetchError, match="Malformed"):
        await _client(handler).fetch_beverages()


@pytest.mark.asyncio
async def test_image_url_returns_bare_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        return httpx.Response(200, text="https://cdn.example/1?sig=abc\n")

    url = await _client(handler).image_url("1")

    assert url == "https://cdn.example/1?sig=abc"
    assert seen["path"] == "/api/beverages/1/image-url"


@pytest.mark.asyncio
async def test_image_url_unquotes_json_string():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json="https://cdn.example/1?sig=abc")

    assert await _client(handler).image_url("1") == "https://cdn.example/1?sig=abc"


@pytest.mark.asyncio
async def test_image_url_failure_raises_resolution_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    with pytest.raises(ImageResolutionError) as excinfo:
        await _client(handler).image_url("1")

    assert excinfo.value.beverage_id == "1"


@pytest.mark.asyncio
async def test_image_url_empty_body_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="  ")

    with pytest.raises(ImageResolutionError):
        await _client(handler).image_url("1")


def test_base_url_from_env(monkeypatch):
    monkeypatch.setenv("BREW_BUDDY_API_BASE_URL", "https://api.example/v1/")

    client = HttpCatalogClient()

    assert client.base_url == "https://api.example/v1"


@pytest.mark.asyncio
async def test_fetch_beverages_accepts_numeric_ids():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"content": [{"id": 1, "name": "Espresso"}, {"id": 22, "name": "Sencha"}], "totalElements": 2},
        )

    page = await _client(handler).fetch_beverages()

    assert [b.id for b in page.content] == ["1", "22"]
