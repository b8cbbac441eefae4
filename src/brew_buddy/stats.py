"""Usage statistics over a beverage collection."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from brew_buddy.schema import (
    UNKNOWN_TYPE,
    Beverage,
    TagFrequencyEntry,
    TypeDistributionEntry,
    UsageSummary,
)

DEFAULT_TAG_LIMIT = 10


def type_distribution(collection: Sequence[Beverage]) -> list[TypeDistributionEntry]:
    """Count beverages per type, most common first.

    Ties keep the order in which types first appear in the collection.
    Percentages are left unrounded; use :func:`format_percentage` for display.
    """
    # Counter preserves first-insertion order and sorted() is stable.
    counts = Counter(b.type if b.type and b.type.strip() else UNKNOWN_TYPE for b in collection)
    total = max(len(collection), 1)
    entries = [
        TypeDistributionEntry(type=type_, count=count, percentage=count * 100 / total)
        for type_, count in counts.items()
    ]
    return sorted(entries, key=lambda entry: entry.count, reverse=True)


def tag_frequency(collection: Iterable[Beverage], limit: int = DEFAULT_TAG_LIMIT) -> list[TagFrequencyEntry]:
    """Top ``limit`` tags by number of beverages carrying them."""
    counts: Counter[str] = Counter()
    for beverage in collection:
        # A beverage counts once per tag, however often it lists it.
        counts.update(dict.fromkeys(beverage.tags or (), 1))
    entries = [TagFrequencyEntry(tag=tag, count=count) for tag, count in counts.items()]
    return sorted(entries, key=lambda entry: entry.count, reverse=True)[:limit]


def unique_tag_count(collection: Iterable[Beverage]) -> int:
    return len({tag for b in collection for tag in b.tags or ()})


def summarize_usage(collection: Iterable[Beverage], tag_limit: int = DEFAULT_TAG_LIMIT) -> UsageSummary:
    beverages = list(collection)
    distribution = type_distribution(beverages)
    return UsageSummary(
        total_beverages=len(beverages),
        type_count=len(distribution),
        unique_tag_count=unique_tag_count(beverages),
        type_distribution=distribution,
        tag_frequency=tag_frequency(beverages, limit=tag_limit),
    )


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"
