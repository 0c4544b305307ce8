# log_trend/analyzers/trend/reporter.py
import html
import json
from typing import List, Optional

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from tabulate import tabulate

from log_trend.core import DocumentReporter, Reporter
from .models import Report, ReportRecord

ABSENT = "-"
HEADERS = ["Month", "Information", "Warning", "Error", "Warning change", "Error change"]
DEFAULT_TITLE = "Log Level Trend"


def format_percent(value: Optional[float]) -> str:
    if value is None:
        return ABSENT
    return f"{value:+.2f}%"


def record_row(record: ReportRecord) -> List[str]:
    return [
        record.month_key,
        str(record.information_count),
        str(record.warning_count),
        str(record.error_count),
        format_percent(record.warning_percent_change),
        format_percent(record.error_percent_change),
    ]


TREND_THEME = Theme(
    {
        "month": "cyan",
        "info_count": "green",
        "warn_count": "yellow",
        "error_count": "red",
        "increase": "red",
        "decrease": "green",
        "absent": "bright_black",
        "title": "magenta",
    }
)


class TrendReporter(Reporter):
    def __init__(self, console: Optional[Console] = None):
        super().__init__(console or Console(force_terminal=True))
        self.console.push_theme(TREND_THEME)

    @staticmethod
    def _change_cell(value: Optional[float]) -> Text:
        # rising warning/error volume is shown in red
        if value is None:
            return Text(ABSENT, style="absent")
        style = "increase" if value > 0 else "decrease" if value < 0 else ""
        return Text(format_percent(value), style=style)

    def generate_report(self, analysis_result: Report) -> None:
        """Print the monthly trend table"""
        title_panel = Panel(
            DEFAULT_TITLE, box=ROUNDED, style="title", padding=(0, 1), expand=False
        )
        self.console.print(title_panel)
        self.console.print("")

        if not analysis_result:
            self.console.print("No classified log entries.", style="absent")
            return

        table = Table(box=ROUNDED)
        table.add_column(HEADERS[0], style="month")
        table.add_column(HEADERS[1], justify="right", style="info_count")
        table.add_column(HEADERS[2], justify="right", style="warn_count")
        table.add_column(HEADERS[3], justify="right", style="error_count")
        table.add_column(HEADERS[4], justify="right")
        table.add_column(HEADERS[5], justify="right")

        for record in analysis_result:
            table.add_row(
                record.month_key,
                str(record.information_count),
                str(record.warning_count),
                str(record.error_count),
                self._change_cell(record.warning_percent_change),
                self._change_cell(record.error_percent_change),
            )

        self.console.print(table)


class JsonReporter(DocumentReporter):
    """Serializes the report as a JSON array of monthly records"""

    def render(self, report: Report) -> str:
        return json.dumps([record.to_dict() for record in report], indent=2) + "\n"


HTML_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; margin: 2em; }}
table {{ border-collapse: collapse; }}
th, td {{ border: 1px solid #ccc; padding: 0.3em 0.8em; text-align: right; }}
th:first-child, td:first-child {{ text-align: left; }}
</style>
</head>
<body>
<h1>{title}</h1>
{table}
</body>
</html>
"""


class HtmlReporter(DocumentReporter):
    """Renders the report as a standalone HTML page"""

    def __init__(self, title: str = DEFAULT_TITLE):
        self.title = title

    def render(self, report: Report) -> str:
        rows = [record_row(record) for record in report]
        table = tabulate(rows, headers=HEADERS, tablefmt="html", disable_numparse=True)
        return HTML_PAGE.format(title=html.escape(self.title), table=table)
