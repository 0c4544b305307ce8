# log_trend/analyzers/trend/__init__.py
from .analyzer import ReportAssembler, TrendCalculator, percent_change, split_month_key
from .collector import MonthlyAggregator
from .models import MonthlyAggregate, MonthlyStats, Report, ReportRecord
from .reporter import TREND_THEME, HtmlReporter, JsonReporter, TrendReporter

__all__ = [
    'ReportAssembler',
    'TrendCalculator',
    'percent_change',
    'split_month_key',
    'MonthlyAggregator',
    'MonthlyAggregate',
    'MonthlyStats',
    'Report',
    'ReportRecord',
    'HtmlReporter',
    'JsonReporter',
    'TREND_THEME',
    'TrendReporter'
]
