"""Facet derivation and tag selection state."""

from __future__ import annotations

from collections.abc import Iterable

from brew_buddy.filters import matches_type
from brew_buddy.schema import Beverage, Facets, FilterCriteria

COMMIT_KEYS = frozenset({"Enter", ","})
DELETE_KEY = "Backspace"


def _sorted_unique(values: Iterable[str | None]) -> list[str]:
    return sorted({value for value in values if value})


def derive_types(collection: Iterable[Beverage]) -> list[str]:
    return _sorted_unique(b.type for b in collection)


def derive_tags(collection: Iterable[Beverage]) -> list[str]:
    return _sorted_unique(tag for b in collection for tag in b.tags or ())


def derive_brands(collection: Iterable[Beverage], type_filter: str | None = None) -> list[str]:
    """Brands available under the selected type.

    Only the type filter narrows this list. Brand, tag and search selections
    are ignored so that every offered brand yields results combined with the
    current type.
    """
    return _sorted_unique(b.brand for b in collection if matches_type(b, type_filter))


def derive_facets(collection: Iterable[Beverage], criteria: FilterCriteria) -> Facets:
    beverages = list(collection)
    return Facets(
        types=derive_types(beverages),
        brands=derive_brands(beverages, criteria.type_filter),
        tags=derive_tags(beverages),
    )


def reconcile_brand(collection: Iterable[Beverage], criteria: FilterCriteria) -> FilterCriteria:
    """Drop the brand selection when the recomputed brand list no longer offers it."""
    if not criteria.brand_filter:
        return criteria
    if criteria.brand_filter in derive_brands(collection, criteria.type_filter):
        return criteria
    return criteria.model_copy(update={"brand_filter": None})


class TagInput:
    """Chip-style tag entry: a text buffer plus an ordered selection."""

    def __init__(self, selected: Iterable[str] = ()):
        self.buffer = ""
        self._selected: list[str] = []
        for tag in selected:
            self._add(tag)

    @property
    def selected(self) -> tuple[str, ...]:
        return tuple(self._selected)

    def _add(self, raw: str) -> bool:
        tag = raw.strip()
        if not tag or tag in self._selected:
            return False
        self._selected.append(tag)
        return True

    def type_text(self, text: str) -> None:
        self.buffer = text

    def commit(self) -> bool:
        """Move the buffer into the selection. Returns True when a tag was added."""
        added = self._add(self.buffer)
        self.buffer = ""
        return added

    def backspace(self) -> str | None:
        """Delete one character, or pop the most recent tag when the buffer is empty."""
        if self.buffer:
            self.buffer = self.buffer[:-1]
            return None
        if self._selected:
            return self._selected.pop()
        return None

    def remove(self, tag: str) -> None:
        self._selected = [t for t in self._selected if t != tag]

    def clear(self) -> None:
        self._selected = []
        self.buffer = ""

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns True if the key was consumed."""
        if key in COMMIT_KEYS:
            self.commit()
            return True
        if key == DELETE_KEY:
            self.backspace()
            return True
        return False
