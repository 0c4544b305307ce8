# log_trend/analyzers/trend/models.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from log_trend.core import ClassifiedEntry, Level


@dataclass
class MonthlyAggregate:
    """Severity counters for one calendar month"""
    month_key: str
    information_count: int = 0
    warning_count: int = 0
    error_count: int = 0

    def increment(self, level: Level) -> None:
        if level is Level.ERROR:
            self.error_count += 1
        elif level is Level.WARNING:
            self.warning_count += 1
        elif level is Level.INFORMATION:
            self.information_count += 1
        else:
            raise ValueError(f"Unknown level: {level!r}")

    def add(self, other: "MonthlyAggregate") -> None:
        """Add another aggregate's counts for the same month"""
        if other.month_key != self.month_key:
            raise ValueError(
                f"Cannot merge month {other.month_key} into {self.month_key}"
            )
        self.information_count += other.information_count
        self.warning_count += other.warning_count
        self.error_count += other.error_count


@dataclass
class MonthlyStats:
    """Container for all per-month aggregates of one run"""
    months: Dict[str, MonthlyAggregate] = field(default_factory=dict)

    def get_or_create(self, month_key: str) -> MonthlyAggregate:
        if month_key not in self.months:
            self.months[month_key] = MonthlyAggregate(month_key=month_key)
        return self.months[month_key]

    def add_entry(self, entry: ClassifiedEntry) -> None:
        self.get_or_create(entry.month_key).increment(entry.level)

    def merge(self, other: "MonthlyStats") -> None:
        for month_key, aggregate in other.months.items():
            self.get_or_create(month_key).add(aggregate)


@dataclass(frozen=True)
class ReportRecord:
    """One month of the final report

    A percent change of None means there is nothing to compare against:
    either no earlier month exists or the earlier month's count was zero.
    """
    year: int
    month: int
    information_count: int
    warning_count: int
    error_count: int
    warning_percent_change: Optional[float] = None
    error_percent_change: Optional[float] = None

    @property
    def month_key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form; absent percent changes are left out entirely"""
        data: Dict[str, Any] = {
            'year': self.year,
            'month': self.month,
            'information_count': self.information_count,
            'warning_count': self.warning_count,
            'error_count': self.error_count,
        }
        if self.warning_percent_change is not None:
            data['warning_percent_change'] = self.warning_percent_change
        if self.error_percent_change is not None:
            data['error_percent_change'] = self.error_percent_change
        return data


Report = List[ReportRecord]
