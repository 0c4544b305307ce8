# log_trend/core/collector.py
from abc import ABC, abstractmethod
from typing import Iterable

from .classifier import ClassifiedEntry


class DataCollector(ABC):
    """Base class for folding classified entries into statistics"""

    @abstractmethod
    def process_entry(self, entry: ClassifiedEntry) -> None:
        """Process a single classified entry"""

    @abstractmethod
    def is_interested(self, entry: ClassifiedEntry) -> bool:
        """Determine if this collector counts the given entry"""

    def collect(self, entries: Iterable[ClassifiedEntry]) -> int:
        """Feed entries to process_entry, returning how many were of interest"""
        accepted = 0
        for entry in entries:
            if self.is_interested(entry):
                self.process_entry(entry)
                accepted += 1
        return accepted
