"""In-memory sample catalog provider."""

from __future__ import annotations

from collections.abc import Iterable

from brew_buddy.exceptions import ImageResolutionError
from brew_buddy.providers.base import BeverageSource, ImageReferenceSource
from brew_buddy.schema import Beverage, BeveragePage

SAMPLE_BEVERAGES: tuple[Beverage, ...] = (
    Beverage(
        id="sample-espresso",
        type="Coffee",
        name="Espresso",
        tags=("Strong", "Hot", "Espresso"),
        image_resource_ref="https://images.unsplash.com/photo-1509042239860-f550ce710b93",
    ),
    Beverage(
        id="sample-green-tea",
        type="Tea",
        name="Green Tea",
        tags=("Green", "Hot"),
        image_resource_ref="https://images.unsplash.com/photo-1504196606672-aef5c9cefc92",
    ),
    Beverage(
        id="sample-black-tea",
        type="Tea",
        name="Black Tea",
        image_resource_ref="https://images.unsplash.com/photo-1584270354949-1d3e7f9f0d3d",
    ),
    Beverage(
        id="sample-lemonade",
        type="Juice",
        name="Lemonade",
        image_resource_ref="https://images.unsplash.com/photo-1551024709-8f23befc6cf7",
    ),
)


class SampleCatalog(BeverageSource, ImageReferenceSource):
    """Serves a fixed set of beverages; image references are already URLs."""

    def __init__(self, beverages: Iterable[Beverage] | None = None):
        self.beverages = tuple(SAMPLE_BEVERAGES if beverages is None else beverages)

    async def fetch_beverages(
        self,
        *,
        type: str | None = None,
        name_contains: str | None = None,
        size: int | None = None,
    ) -> BeveragePage:
        matches = [
            b
            for b in self.beverages
            if (not type or b.type == type)
            and (not name_contains or name_contains.lower() in b.name.lower())
        ]
        page_size = size if size is not None and size > 0 else max(len(matches), 1)
        content = matches[:page_size]
        return BeveragePage(
            content=content,
            total_elements=len(matches),
            total_pages=-(-len(matches) // page_size),
            size=page_size,
            number=0,
        )

    async def image_url(self, beverage_id: str) -> str:
        for beverage in self.beverages:
            if beverage.id == beverage_id:
                if not beverage.image_resource_ref:
                    raise ImageResolutionError(beverage_id, "no image reference")
                return beverage.image_resource_ref
        raise ImageResolutionError(beverage_id, "unknown beverage")
