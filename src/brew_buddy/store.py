"""In-memory snapshot of the beverage catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from brew_buddy.exceptions import CollectionFetchError
from brew_buddy.providers.base import BeverageSource
from brew_buddy.schema import Beverage

logger = logging.getLogger(__name__)


class CatalogStore:
    """Holds the latest fetched collection as an immutable tuple.

    The snapshot is never mutated in place. A fetch replaces it wholesale and
    per-record updates produce a new tuple with the affected records swapped
    by id, so anyone holding a previous snapshot keeps a consistent view.
    """

    def __init__(self, beverages: Iterable[Beverage] = ()):
        self._snapshot: tuple[Beverage, ...] = tuple(beverages)

    @property
    def snapshot(self) -> tuple[Beverage, ...]:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def get(self, beverage_id: str) -> Beverage | None:
        for beverage in self._snapshot:
            if beverage.id == beverage_id:
                return beverage
        return None

    def replace(self, beverages: Iterable[Beverage]) -> None:
        self._snapshot = tuple(beverages)

    def clear(self) -> None:
        self._snapshot = ()

    def apply_image_urls(self, urls: Mapping[str, str]) -> None:
        """Replace-by-id every record whose id appears in ``urls``."""
        if not urls:
            return
        self._snapshot = tuple(
            b.model_copy(update={"image_url": urls[b.id]}) if b.id in urls else b
            for b in self._snapshot
        )

    async def refresh(self, source: BeverageSource, *, size: int = 1000) -> tuple[Beverage, ...]:
        """Fetch the whole collection as one oversized page and commit it.

        Raises:
            CollectionFetchError: The snapshot is cleared before re-raising so
                no stale collection stays on display.
        """
        try:
            page = await source.fetch_beverages(size=size)
        except CollectionFetchError:
            logger.error("catalog fetch failed, clearing snapshot", exc_info=True)
            self.clear()
            raise

        if page.total_elements > len(page.content):
            logger.warning(
                "catalog truncated: received %d of %d beverages", len(page.content), page.total_elements
            )
        self.replace(page.content)
        return self._snapshot
