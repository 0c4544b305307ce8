# log_trend/core/reporter.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from rich.console import Console


class Reporter(ABC):
    """Base class for reports printed to a console"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @abstractmethod
    def generate_report(self, analysis_result: Any) -> None:
        """Generate and display the report"""


class DocumentReporter(ABC):
    """Base class for reports rendered to a text document"""

    @abstractmethod
    def render(self, analysis_result: Any) -> str:
        """Render the whole document"""

    def write(self, analysis_result: Any, path: Path) -> None:
        path.write_text(self.render(analysis_result), encoding="utf-8")
