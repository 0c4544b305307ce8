# log_trend/core/analyzer.py
from abc import ABC, abstractmethod
from typing import Any


class Analyzer(ABC):
    """Base class for turning collected statistics into report records"""

    @abstractmethod
    def analyze(self, data: Any) -> Any:
        """Derive report data from what a collector gathered"""
