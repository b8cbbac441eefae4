"""Horizontal bar chart model."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from brew_buddy.schema import ChartDatum, TagFrequencyEntry, TypeDistributionEntry

DEFAULT_PALETTE: tuple[str, ...] = (
    "#6f4e37",
    "#4f7942",
    "#c68e17",
    "#8b3a62",
    "#2e6f9e",
    "#b5651d",
    "#5f9ea0",
    "#a0522d",
)
MIN_WIDTH_PERCENT = 4.0
INSIDE_LABEL_MIN_WIDTH = 22.0


def build_bar_chart(
    data: Iterable[tuple[str, float]],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> list[ChartDatum]:
    """Turn ``(label, value)`` pairs into bars sorted by value, largest first.

    Colors follow the position after sorting, not the label, so a label can
    change color when the ranking changes.

    Raises:
        ValueError: If a value is negative or the palette is empty.
    """
    if not palette:
        raise ValueError("palette must contain at least one color")

    pairs = list(data)
    for label, value in pairs:
        if value < 0:
            raise ValueError(f"negative chart value for {label!r}: {value}")

    ordered = sorted(pairs, key=lambda pair: pair[1], reverse=True)
    total = max(sum(value for _, value in ordered), 1)
    largest = max(max((value for _, value in ordered), default=0), 1)

    chart: list[ChartDatum] = []
    for position, (label, value) in enumerate(ordered):
        width = max(MIN_WIDTH_PERCENT, value * 100 / largest)
        chart.append(
            ChartDatum(
                label=label,
                value=value,
                color=palette[position % len(palette)],
                width_percent=width,
                label_inside=width > INSIDE_LABEL_MIN_WIDTH,
                share_percent=value * 100 / total,
            )
        )
    return chart


def type_distribution_chart(
    entries: Iterable[TypeDistributionEntry],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> list[ChartDatum]:
    return build_bar_chart(((e.type, e.count) for e in entries), palette)


def tag_frequency_chart(
    entries: Iterable[TagFrequencyEntry],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> list[ChartDatum]:
    return build_bar_chart(((e.tag, e.count) for e in entries), palette)
