"""Filter engine for the beverage catalog."""

from __future__ import annotations

from collections.abc import Iterable

from brew_buddy.schema import Beverage, FilterCriteria


def matches_type(beverage: Beverage, type_filter: str | None) -> bool:
    return not type_filter or beverage.type == type_filter


def matches_brand(beverage: Beverage, brand_filter: str | None) -> bool:
    return not brand_filter or beverage.brand == brand_filter


def matches_tags(beverage: Beverage, tags: Iterable[str]) -> bool:
    """True when the beverage carries every tag, ignoring case."""
    wanted = {tag.casefold() for tag in tags}
    if not wanted:
        return True
    carried = {tag.casefold() for tag in beverage.tags or ()}
    return wanted <= carried


def matches_search(beverage: Beverage, search_text: str) -> bool:
    needle = search_text.strip().casefold()
    if not needle:
        return True
    haystack = [beverage.name, beverage.type or "", *(beverage.tags or ())]
    return any(needle in value.casefold() for value in haystack)


def apply_filters(collection: Iterable[Beverage], criteria: FilterCriteria | None = None) -> list[Beverage]:
    """Return the beverages matching all active criteria, in their original order."""
    if criteria is None or criteria.is_empty:
        return list(collection)

    return [
        beverage
        for beverage in collection
        if matches_type(beverage, criteria.type_filter)
        and matches_brand(beverage, criteria.brand_filter)
        and matches_tags(beverage, criteria.tags)
        and matches_search(beverage, criteria.search_text)
    ]
