"""Signed image URL resolution with bounded retry."""

from __future__ import annotations

import asyncio
import logging
from typing import Literal

from brew_buddy.exceptions import ImageResolutionError
from brew_buddy.providers.base import ImageReferenceSource
from brew_buddy.store import CatalogStore

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "placeholder:beverage"
DEFAULT_RETRY_LIMIT = 2

SlotState = Literal["pending", "loaded", "error"]


class RenderScope:
    """Lifetime of a rendering context. Results arriving after close are dropped."""

    def __init__(self) -> None:
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def close(self) -> None:
        self._active = False


class ImageReferenceResolver:
    """Obtains signed URLs and writes them back to the store by id."""

    def __init__(
        self,
        source: ImageReferenceSource,
        store: CatalogStore,
        *,
        retry_limit: int = DEFAULT_RETRY_LIMIT,
    ):
        self.source = source
        self.store = store
        self.retry_limit = retry_limit

    async def resolve(self, beverage_id: str) -> str:
        try:
            url = await self.source.image_url(beverage_id)
        except ImageResolutionError:
            raise
        except Exception as e:
            raise ImageResolutionError(beverage_id, f"image reference lookup failed: {e}") from e
        if not url:
            raise ImageResolutionError(beverage_id, "empty image URL")
        return url

    async def _resolve_isolated(self, beverage_id: str) -> str | None:
        try:
            return await self.resolve(beverage_id)
        except ImageResolutionError as e:
            logger.warning("initial image resolution failed: %s", e)
            return None

    async def resolve_all(self, scope: RenderScope) -> dict[str, str]:
        """Resolve every referenced image concurrently and commit the successes.

        Each resolution fails on its own; a failure leaves that record without
        a URL and never cancels its siblings.
        """
        ids = [b.id for b in self.store.snapshot if b.image_resource_ref]
        if not ids:
            return {}

        results = await asyncio.gather(*(self._resolve_isolated(beverage_id) for beverage_id in ids))
        urls = {beverage_id: url for beverage_id, url in zip(ids, results) if url}

        if not scope.active:
            logger.debug("render scope closed, discarding %d resolved image URLs", len(urls))
            return {}
        self.store.apply_image_urls(urls)
        return urls

    async def refresh(self, beverage_id: str, scope: RenderScope) -> str | None:
        """Request a fresh URL and commit it. Returns None if the scope closed meanwhile."""
        url = await self.resolve(beverage_id)
        if not scope.active:
            return None
        self.store.apply_image_urls({beverage_id: url})
        return url

    def slot(self, beverage_id: str, scope: RenderScope) -> "ImageSlot":
        beverage = self.store.get(beverage_id)
        return ImageSlot(
            beverage_id,
            url=beverage.image_url if beverage else None,
            resolver=self,
            scope=scope,
        )


class ImageSlot:
    """Image state of one rendered element.

    The retry counter belongs to the element, so two elements showing the
    same beverage each get their own budget of ``retry_limit + 1`` attempts.
    """

    def __init__(
        self,
        beverage_id: str,
        *,
        url: str | None,
        resolver: ImageReferenceResolver,
        scope: RenderScope,
    ):
        self.beverage_id = beverage_id
        self.url = url
        self.retry_count = 0
        self.state: SlotState = "pending" if url else "error"
        self._resolver = resolver
        self._scope = scope

    @property
    def terminal(self) -> bool:
        return self.retry_count > self._resolver.retry_limit

    @property
    def src(self) -> str:
        if self.terminal or not self.url:
            return PLACEHOLDER_IMAGE
        return self.url

    def on_load(self) -> None:
        if self.url:
            self.state = "loaded"

    async def on_load_error(self) -> bool:
        """Handle a failed image load. Returns True if a fresh URL was obtained."""
        while not self.terminal:
            self.retry_count += 1
            if self.terminal:
                break
            try:
                url = await self._resolver.refresh(self.beverage_id, self._scope)
            except ImageResolutionError as e:
                logger.warning("image refresh attempt %d failed: %s", self.retry_count, e)
                continue
            if url is None:
                return False
            self.url = url
            self.state = "pending"
            return True

        logger.info("image retries exhausted for %s, showing placeholder", self.beverage_id)
        self.state = "error"
        return False
