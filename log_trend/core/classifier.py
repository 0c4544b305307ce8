# log_trend/core/classifier.py
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple

DATE_PREFIX_LENGTH = 10

DEFAULT_DATE_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%m/%d/%Y",
    "%d.%m.%Y",
    "%d-%m-%Y",
    "%Y%m%d",
)


class Level(str, Enum):
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"


# Checked in this order, first hit wins
LEVEL_TOKENS: Tuple[Tuple[Level, Tuple[str, ...]], ...] = (
    (Level.ERROR, ("ERROR", "Error")),
    (Level.WARNING, ("WARN", "Warning")),
    (Level.INFORMATION, ("INFO", "Information")),
)


@dataclass(frozen=True)
class ClassifiedEntry:
    """Month and severity extracted from one log line"""
    month_key: str
    level: Level


def month_key_for(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


class LineClassifier:
    """Extracts a date and a severity level from a raw log line.

    The date is read from the first ten characters of the line only, and the
    level is found by plain case-sensitive substring search. Both rules are
    heuristics and are kept deliberately simple.
    """

    def __init__(self, date_formats: Optional[Sequence[str]] = None):
        self.date_formats = tuple(date_formats) if date_formats else DEFAULT_DATE_FORMATS

    def parse_date(self, line: str) -> Optional[date]:
        """Parse the leading date fragment of a line, None if it is not a date"""
        fragment = line[:DATE_PREFIX_LENGTH].strip()
        if not fragment:
            return None

        for fmt in self.date_formats:
            try:
                return datetime.strptime(fragment, fmt).date()
            except (ValueError, TypeError):
                continue
        return None

    @staticmethod
    def parse_level(line: str) -> Optional[Level]:
        """Find the highest priority level token contained in the line"""
        for level, tokens in LEVEL_TOKENS:
            if any(token in line for token in tokens):
                return level
        return None

    def classify(self, line: str) -> Optional[ClassifiedEntry]:
        day = self.parse_date(line)
        if day is None:
            return None

        level = self.parse_level(line)
        if level is None:
            return None

        return ClassifiedEntry(month_key=month_key_for(day), level=level)


def classify_lines(
    lines: Iterable[str], classifier: Optional[LineClassifier] = None
) -> Iterator[ClassifiedEntry]:
    """Lazily classify lines, dropping the ones that cannot be classified"""
    classifier = classifier or LineClassifier()
    for line in lines:
        entry = classifier.classify(line)
        if entry is not None:
            yield entry
