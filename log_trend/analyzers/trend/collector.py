# log_trend/analyzers/trend/collector.py
from dataclasses import replace
from typing import Dict, Iterable

from log_trend.core import ClassifiedEntry, DataCollector
from .models import MonthlyAggregate, MonthlyStats


class MonthlyAggregator(DataCollector):
    """Accumulates classified entries into per-month counters.

    Each aggregator owns its own MonthlyStats, so independent sources can be
    aggregated separately and combined afterwards with merge().
    """

    def __init__(self):
        self.stats = MonthlyStats()

    def is_interested(self, entry: ClassifiedEntry) -> bool:
        """Every classified entry is counted"""
        return True

    def process_entry(self, entry: ClassifiedEntry) -> None:
        self.stats.add_entry(entry)

    def aggregate(self, entries: Iterable[ClassifiedEntry]) -> Dict[str, MonthlyAggregate]:
        """Fold entries into the counters and return a snapshot of them"""
        self.collect(entries)
        return self.snapshot()

    def merge(self, other: "MonthlyAggregator") -> "MonthlyAggregator":
        """Add another aggregator's counts into this one"""
        self.stats.merge(other.stats)
        return self

    def snapshot(self) -> Dict[str, MonthlyAggregate]:
        """Copies of the current aggregates, keyed by month"""
        return {key: replace(aggregate) for key, aggregate in self.stats.months.items()}
