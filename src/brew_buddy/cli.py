"""Command-line interface for brew-buddy."""

import argparse
import asyncio
import json
import logging
import sys

from brew_buddy import __version__
from brew_buddy.core import select_source
from brew_buddy.exceptions import BrewBuddyError
from brew_buddy.providers.base import BeverageSource
from brew_buddy.schema import Beverage, ChartDatum
from brew_buddy.stats import format_percentage
from brew_buddy.views import BeverageListView, StatsView

BAR_CELLS = 30


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = select_source(args.source, base_url=args.base_url)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        return asyncio.run(_run(args, source))
    except BrewBuddyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brew-buddy",
        description="Browse a beverage catalog and its usage statistics",
    )
    parser.add_argument(
        "--source",
        help="Data source: http or sample (default: BREW_BUDDY_SOURCE env var, then http)",
    )
    parser.add_argument(
        "--base-url",
        help="Catalog API base URL (default: BREW_BUDDY_API_BASE_URL env var)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"brew-buddy {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    drinks = commands.add_parser("drinks", help="List beverages")
    drinks.add_argument("--type", help="Only show this beverage type")
    drinks.add_argument("--brand", help="Only show this brand")
    drinks.add_argument(
        "--tag",
        action="append",
        default=[],
        help="Require a tag (repeatable, case-insensitive)",
    )
    drinks.add_argument("--search", default="", help="Match name, type or tag")
    drinks.add_argument("--json", action="store_true", help="Output as JSON")

    stats = commands.add_parser("stats", help="Show usage statistics")
    stats.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def _run(args: argparse.Namespace, source: BeverageSource) -> int:
    try:
        if args.command == "drinks":
            return await _drinks(args, source)
        return await _stats(args, source)
    finally:
        await source.aclose()


async def _drinks(args: argparse.Namespace, source: BeverageSource) -> int:
    view = BeverageListView(source)
    try:
        await view.load()
        if view.state == "error":
            print(f"Error: Could not load beverages. {view.error}", file=sys.stderr)
            return 1

        view.select_brand(args.brand)
        view.select_type(args.type)
        if args.brand and view.criteria.brand_filter is None:
            print(f"Note: brand {args.brand!r} is not available for this type, ignoring it", file=sys.stderr)
        for tag in args.tag:
            view.add_tag(tag)
        view.set_search(args.search)

        visible = view.visible()
        if args.json:
            rows = [b.model_dump(mode="json", by_alias=True, exclude_none=True) for b in visible]
            print(json.dumps(rows, indent=2, ensure_ascii=False))
        else:
            _print_beverages(view, visible)
        return 0
    finally:
        view.close()


async def _stats(args: argparse.Namespace, source: BeverageSource) -> int:
    view = StatsView(source)
    try:
        await view.load()
        if view.state == "error":
            print(f"Error: Could not load statistics. {view.error}", file=sys.stderr)
            return 1

        summary = view.summary()
        if args.json:
            print(summary.model_dump_json(indent=2))
        else:
            _print_stats(view)
        return 0
    finally:
        view.close()


def _print_beverages(view: BeverageListView, visible: list[Beverage]) -> None:
    """Print the beverage list in human-readable format."""
    print()
    print("  My Drinks")
    print()

    if view.state == "empty":
        print("  No beverages found yet.")
        print()
        return
    if not visible:
        print("  No beverages match the current filters.")
        print()
        return

    for beverage in visible:
        slot = view.image_slot(beverage.id)
        fields = [
            ("Name", beverage.name),
            ("Type", beverage.type),
            ("Brand", beverage.brand),
            ("Tags", _format_list(beverage.tags)),
            ("Image", slot.src if slot else None),
        ]
        for label, value in fields:
            display = value if value else "-"
            print(f"  {label + ':':<8} {display}")
        print()


def _print_stats(view: StatsView) -> None:
    """Print the overview counters and bar charts."""
    summary = view.summary()
    print()
    print("  Statistics")
    print()

    if view.state == "empty":
        print("  No data available.")
        print()
        return

    print(f"  {'Total Beverages:':<18} {summary.total_beverages}")
    print(f"  {'Types:':<18} {summary.type_count}")
    print(f"  {'Unique Tags:':<18} {summary.unique_tag_count}")
    print()

    print("  Distribution by Type")
    for datum in view.type_chart():
        text = f"{datum.value:g} ({format_percentage(datum.share_percent)})"
        print(f"  {datum.label:<14} {_format_bar(datum, text)}")
    print()

    tag_chart = view.tag_chart()
    if tag_chart:
        print("  Most Common Tags")
        for datum in tag_chart:
            print(f"  {datum.label:<14} {_format_bar(datum, f'{datum.value:g}')}")
        print()


def _format_bar(datum: ChartDatum, text: str) -> str:
    """Render a bar with its label inside when wide enough, otherwise after it."""
    cells = max(1, round(datum.width_percent / 100 * BAR_CELLS))
    if datum.label_inside:
        return f" {text} ".center(max(cells, len(text) + 4), "█")
    return "█" * cells + " " + text


def _format_list(items: tuple[str, ...] | None) -> str | None:
    """Format tags as comma-separated string."""
    if not items:
        return None
    return ", ".join(items)


if __name__ == "__main__":
    sys.exit(main())
