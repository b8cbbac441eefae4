"""Tests for usage statistics."""

import math

from brew_buddy import Beverage, summarize_usage
from brew_buddy.stats import format_percentage, tag_frequency, type_distribution, unique_tag_count


def _beverage(i, type_=None, tags=None):
    return Beverage(id=str(i), name=f"Drink {i}", type=type_, tags=tags)


def test_type_distribution_orders_by_count():
    beverages = [_beverage(i, t) for i, t in enumerate(["COFFEE", "TEA", "TEA", "OTHER"])]

    result = type_distribution(beverages)

    assert [(e.type, e.count, e.percentage) for e in result] == [
        ("TEA", 2, 50.0),
        ("COFFEE", 1, 25.0),
        ("OTHER", 1, 25.0),
    ]


def test_type_distribution_buckets_missing_type_as_unknown():
    beverages = [_beverage(1, None), _beverage(2, ""), _beverage(3, "TEA")]

    result = type_distribution(beverages)

    assert result[0].type == "Unknown"
    assert result[0].count == 2


def test_type_distribution_percentages_sum_to_100():
    beverages = [_beverage(i, t) for i, t in enumerate(["A", "B", "C", "A", "B", "A", "D"])]

    total = sum(e.percentage for e in type_distribution(beverages))

    assert math.isclose(total, 100.0)


def test_type_distribution_keeps_unrounded_percentage():
    beverages = [_beverage(i, t) for i, t in enumerate(["A", "B", "B"])]

    result = type_distribution(beverages)

    assert result[1].percentage == 100 / 3
    assert format_percentage(result[1].percentage) == "33.3%"


def test_tag_frequency_counts_each_beverage_once_per_tag():
    beverages = [
        _beverage(1, tags=("Hot", "Hot", "Strong")),
        _beverage(2, tags=("Hot",)),
    ]

    result = tag_frequency(beverages)

    assert [(e.tag, e.count) for e in result] == [("Hot", 2), ("Strong", 1)]


def test_tag_frequency_ties_keep_first_seen_order():
    beverages = [
        _beverage(1, tags=("Zesty", "Apple")),
        _beverage(2, tags=("Mint", "Apple")),
    ]

    result = tag_frequency(beverages)

    assert [e.tag for e in result] == ["Apple", "Zesty", "Mint"]


def test_tag_frequency_truncates_to_limit():
    beverages = [_beverage(i, tags=tuple(f"t{j}" for j in range(i + 1))) for i in range(12)]

    result = tag_frequency(beverages)

    assert len(result) == 10
    assert result[0].tag == "t0"
    assert result[0].count == 12
    assert [e.count for e in result] == sorted((e.count for e in result), reverse=True)


def test_unique_tag_count_is_case_sensitive_union():
    beverages = [_beverage(1, tags=("Hot", "Green")), _beverage(2, tags=("hot", "Green"))]

    assert unique_tag_count(beverages) == 3


def test_empty_collection_yields_empty_results():
    summary = summarize_usage([])

    assert summary.total_beverages == 0
    assert summary.type_count == 0
    assert summary.unique_tag_count == 0
    assert summary.type_distribution == []
    assert summary.tag_frequency == []


def test_summarize_usage_overview_counters():
    beverages = [
        _beverage(1, "Coffee", ("Strong", "Hot", "Espresso")),
        _beverage(2, "Tea", ("Green", "Hot")),
        _beverage(3, "Tea"),
        _beverage(4, "Juice"),
    ]

    summary = summarize_usage(beverages, tag_limit=2)

    assert summary.total_beverages == 4
    assert summary.type_count == 3
    assert summary.unique_tag_count == 4
    assert summary.type_distribution[0].type == "Tea"
    assert [e.tag for e in summary.tag_frequency] == ["Hot", "Strong"]
