"""Page view models for the beverage list and statistics pages."""

from __future__ import annotations

from typing import Literal

from brew_buddy.charts import tag_frequency_chart, type_distribution_chart
from brew_buddy.config import CatalogConfig
from brew_buddy.exceptions import CollectionFetchError
from brew_buddy.facets import TagInput, derive_facets, reconcile_brand
from brew_buddy.filters import apply_filters
from brew_buddy.images import ImageReferenceResolver, ImageSlot, RenderScope
from brew_buddy.providers.base import BeverageSource, ImageReferenceSource
from brew_buddy.schema import Beverage, ChartDatum, Facets, FilterCriteria, UsageSummary
from brew_buddy.stats import summarize_usage
from brew_buddy.store import CatalogStore

ViewState = Literal["loading", "error", "empty", "ready"]


class _CatalogPage:
    def __init__(
        self,
        source: BeverageSource,
        *,
        config: CatalogConfig | None = None,
        store: CatalogStore | None = None,
    ):
        self.source = source
        self.config = config or CatalogConfig.from_env()
        self.store = store if store is not None else CatalogStore()
        self.scope = RenderScope()
        self.state: ViewState = "loading"
        self.error: str | None = None

    @property
    def beverages(self) -> tuple[Beverage, ...]:
        return self.store.snapshot

    async def load(self) -> ViewState:
        self.state = "loading"
        self.error = None
        try:
            await self.store.refresh(self.source, size=self.config.page_size)
        except CollectionFetchError as e:
            if self.scope.active:
                self.state = "error"
                self.error = str(e)
            return self.state

        if not self.scope.active:
            return self.state
        await self._after_fetch()
        if self.scope.active:
            self.state = "ready" if self.store.snapshot else "empty"
        return self.state

    async def _after_fetch(self) -> None:
        return None

    def close(self) -> None:
        self.scope.close()


class BeverageListView(_CatalogPage):
    """Filterable beverage list with per-card image state."""

    def __init__(
        self,
        source: BeverageSource,
        images: ImageReferenceSource | None = None,
        *,
        config: CatalogConfig | None = None,
        store: CatalogStore | None = None,
    ):
        super().__init__(source, config=config, store=store)
        if images is None and isinstance(source, ImageReferenceSource):
            images = source
        self.resolver = (
            ImageReferenceResolver(images, self.store, retry_limit=self.config.image_retry_limit)
            if images is not None
            else None
        )
        self.tag_input = TagInput()
        self._criteria = FilterCriteria()
        self._slots: dict[str, ImageSlot] = {}

    async def _after_fetch(self) -> None:
        self._criteria = reconcile_brand(self.store.snapshot, self._criteria)
        if self.resolver is not None:
            # First paint waits for the whole batch.
            await self.resolver.resolve_all(self.scope)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria.model_copy(update={"tags": frozenset(self.tag_input.selected)})

    def select_type(self, type_filter: str | None) -> None:
        selected = self._criteria.model_copy(update={"type_filter": type_filter or None})
        self._criteria = reconcile_brand(self.store.snapshot, selected)

    def select_brand(self, brand_filter: str | None) -> None:
        self._criteria = self._criteria.model_copy(update={"brand_filter": brand_filter or None})

    def set_search(self, text: str) -> None:
        self._criteria = self._criteria.model_copy(update={"search_text": text})

    def add_tag(self, text: str) -> bool:
        self.tag_input.type_text(text)
        return self.tag_input.commit()

    def remove_tag(self, tag: str) -> None:
        self.tag_input.remove(tag)

    def handle_tag_key(self, key: str) -> bool:
        return self.tag_input.handle_key(key)

    def clear_filters(self) -> None:
        self._criteria = FilterCriteria()
        self.tag_input.clear()

    def visible(self) -> list[Beverage]:
        return apply_filters(self.store.snapshot, self.criteria)

    def facets(self) -> Facets:
        return derive_facets(self.store.snapshot, self.criteria)

    def image_slot(self, beverage_id: str, key: str | None = None) -> ImageSlot | None:
        """Return the image state of one rendered element.

        The slot is kept for the lifetime of the view, so repeated renders of
        the same element share one retry budget. Pass a distinct ``key`` when
        the same beverage is rendered more than once.
        """
        if self.resolver is None:
            return None
        element_key = key or beverage_id
        slot = self._slots.get(element_key)
        if slot is None or slot.beverage_id != beverage_id:
            slot = self.resolver.slot(beverage_id, self.scope)
            self._slots[element_key] = slot
        return slot

    def close(self) -> None:
        super().close()
        self._slots.clear()


class StatsView(_CatalogPage):
    """Usage overview with type and tag bar charts."""

    def summary(self) -> UsageSummary:
        return summarize_usage(self.store.snapshot, tag_limit=self.config.tag_frequency_limit)

    def type_chart(self) -> list[ChartDatum]:
        return type_distribution_chart(self.summary().type_distribution)

    def tag_chart(self) -> list[ChartDatum]:
        return tag_frequency_chart(self.summary().tag_frequency)
