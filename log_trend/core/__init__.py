# log_trend/core/__init__.py
from .classifier import ClassifiedEntry, Level, LineClassifier, classify_lines
from .log import LogReader, LogSource
from .collector import DataCollector
from .analyzer import Analyzer
from .reporter import DocumentReporter, Reporter
from .preprocessor import LogPreprocessor
from .errors import EmptyInputError, LogTrendError
from .logs import setup_logging

__all__ = [
    'ClassifiedEntry',
    'Level',
    'LineClassifier',
    'classify_lines',
    'LogReader',
    'LogSource',
    'DataCollector',
    'Analyzer',
    'Reporter',
    'DocumentReporter',
    'LogPreprocessor',
    'EmptyInputError',
    'LogTrendError',
    'setup_logging'
]
