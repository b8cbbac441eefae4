"""HTTP catalog provider implementation."""

from __future__ import annotations

import json
import logging
import os
from urllib.parse import quote

import httpx

from brew_buddy.config import DEFAULT_API_BASE_URL, normalize_base_url
from brew_buddy.exceptions import CollectionFetchError, ImageResolutionError
from brew_buddy.providers.base import BeverageSource, ImageReferenceSource
from brew_buddy.schema import BeveragePage

BEVERAGES_PATH = "/api/beverages"


class HttpCatalogClient(BeverageSource, ImageReferenceSource):
    """Beverage source and image reference issuer backed by the catalog REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the HTTP client.

        Args:
            base_url: API base address. Falls back to BREW_BUDDY_API_BASE_URL env var.
            timeout: Per-request timeout in seconds.
            client: Preconfigured client, mainly for tests. Its base_url wins.
        """
        self.logger = logging.getLogger(__name__)
        self.base_url = normalize_base_url(base_url or os.getenv("BREW_BUDDY_API_BASE_URL") or DEFAULT_API_BASE_URL)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def fetch_beverages(
        self,
        *,
        type: str | None = None,
        name_contains: str | None = None,
        size: int | None = None,
    ) -> BeveragePage:
        params: dict[str, str | int] = {}
        if type:
            params["type"] = type
        if name_contains:
            params["nameContains"] = name_contains
        if size is not None:
            params["size"] = size

        try:
            response = await self.client.get(BEVERAGES_PATH, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CollectionFetchError(
                f"Catalog request failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise CollectionFetchError(f"Catalog request failed: {e}") from e

        try:
            payload = response.json()
            if isinstance(payload, list):
                # Some deployments answer with a bare array instead of a page envelope.
                payload = {"content": payload, "totalElements": len(payload), "size": len(payload)}
            page = BeveragePage.model_validate(payload)
        except ValueError as e:
            raise CollectionFetchError(f"Malformed catalog response: {e}") from e

        self.logger.debug("fetched %d of %d beverages", len(page.content), page.total_elements)
        return page

    async def image_url(self, beverage_id: str) -> str:
        path = f"{BEVERAGES_PATH}/{quote(beverage_id, safe='')}/image-url"
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ImageResolutionError(
                beverage_id, f"image URL request failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ImageResolutionError(beverage_id, f"image URL request failed: {e}") from e

        url = response.text.strip()
        if url.startswith('"'):
            try:
                url = str(json.loads(url)).strip()
            except ValueError as e:
                raise ImageResolutionError(beverage_id, "image URL response is not a string") from e
        if not url:
            raise ImageResolutionError(beverage_id, "empty image URL")
        return url

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
