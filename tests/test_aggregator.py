from __future__ import annotations

import random

import pytest

from log_trend.analyzers.trend import MonthlyAggregate, MonthlyAggregator
from log_trend.core import ClassifiedEntry, Level


def _entries() -> list[ClassifiedEntry]:
    return (
        [ClassifiedEntry("2022-07", Level.INFORMATION)] * 3
        + [ClassifiedEntry("2022-07", Level.WARNING)] * 2
        + [ClassifiedEntry("2022-08", Level.ERROR)] * 4
    )


def test_aggregate_counts_each_level_per_month() -> None:
    result = MonthlyAggregator().aggregate(_entries())

    assert result == {
        "2022-07": MonthlyAggregate("2022-07", information_count=3, warning_count=2),
        "2022-08": MonthlyAggregate("2022-08", error_count=4),
    }


def test_aggregate_of_nothing_is_empty() -> None:
    assert MonthlyAggregator().aggregate([]) == {}


def test_aggregate_is_order_independent() -> None:
    entries = _entries()
    shuffled = entries[:]
    random.Random(7).shuffle(shuffled)

    assert MonthlyAggregator().aggregate(entries) == MonthlyAggregator().aggregate(shuffled)


def test_merge_adds_counts_from_partial_aggregators() -> None:
    entries = _entries()
    left, right = MonthlyAggregator(), MonthlyAggregator()
    left.aggregate(entries[:4])
    right.aggregate(entries[4:])

    merged = left.merge(right).snapshot()

    assert merged == MonthlyAggregator().aggregate(entries)


def test_snapshot_is_a_copy() -> None:
    aggregator = MonthlyAggregator()
    snapshot = aggregator.aggregate(_entries())

    aggregator.process_entry(ClassifiedEntry("2022-07", Level.ERROR))

    assert snapshot["2022-07"].error_count == 0
    assert aggregator.snapshot()["2022-07"].error_count == 1


def test_aggregate_add_rejects_different_month() -> None:
    with pytest.raises(ValueError):
        MonthlyAggregate("2022-07").add(MonthlyAggregate("2022-08"))


def test_collect_counts_every_classified_entry() -> None:
    aggregator = MonthlyAggregator()

    assert aggregator.collect(_entries()) == len(_entries())
    assert sum(a.error_count for a in aggregator.snapshot().values()) == 4
