# log_trend/analyzers/trend/analyzer.py
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Optional, Sequence, Tuple

from log_trend.core import Analyzer
from .models import MonthlyAggregate, Report, ReportRecord

MONTH_KEY_SEPARATOR = "-"
PERCENT_QUANTUM = Decimal("0.01")


def split_month_key(month_key: str) -> Tuple[int, int]:
    """Split a "YYYY-MM" key into integer year and month

    Raises:
        ValueError: If the key is not a valid month key
    """
    year_part, separator, month_part = month_key.partition(MONTH_KEY_SEPARATOR)
    if not separator:
        raise ValueError(f"Invalid month key: {month_key!r}")

    year, month = int(year_part), int(month_part)
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range in key {month_key!r}")
    return year, month


def percent_change(current: int, previous: int) -> Optional[float]:
    """Signed percentage change from previous to current, None when previous is 0

    Rounded to two decimals with halves going away from zero.
    """
    if previous == 0:
        return None

    change = Decimal(current - previous) * 100 / Decimal(previous)
    return float(change.quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP))


class TrendCalculator(Analyzer):
    def analyze(self, aggregates: Sequence[MonthlyAggregate]) -> Report:
        return self.compute_trends(aggregates)

    def compute_trends(self, aggregates: Sequence[MonthlyAggregate]) -> Report:
        """Build report records, comparing each month with the one before it

        The aggregates must be sorted by month key. A month missing from the
        data is skipped, not treated as a zero month.
        """
        report: Report = []
        previous: Optional[MonthlyAggregate] = None

        for current in aggregates:
            if previous is not None and current.month_key <= previous.month_key:
                raise ValueError(
                    f"Aggregates out of order: {current.month_key} after {previous.month_key}"
                )

            year, month = split_month_key(current.month_key)
            warning_change = error_change = None
            if previous is not None:
                warning_change = percent_change(current.warning_count, previous.warning_count)
                error_change = percent_change(current.error_count, previous.error_count)

            report.append(
                ReportRecord(
                    year=year,
                    month=month,
                    information_count=current.information_count,
                    warning_count=current.warning_count,
                    error_count=current.error_count,
                    warning_percent_change=warning_change,
                    error_percent_change=error_change,
                )
            )
            previous = current

        return report


class ReportAssembler:
    """Orders the monthly aggregates and turns them into the final report"""

    def __init__(self, calculator: Optional[TrendCalculator] = None):
        self.calculator = calculator or TrendCalculator()

    def assemble(self, aggregates: Mapping[str, MonthlyAggregate]) -> Report:
        ordered = sorted(aggregates.values(), key=lambda x: x.month_key)
        return self.calculator.compute_trends(ordered)
