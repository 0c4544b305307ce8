# log_trend/cli.py
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .analyzers.trend import HtmlReporter, JsonReporter, Report, TrendReporter
from .config import TrendSettings
from .core import LogTrendError, setup_logging
from .core.log import DEFAULT_PATTERN
from .pipeline import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monthly Information/Warning/Error volumes and trends from log files"
    )
    parser.add_argument(
        "paths", type=Path, nargs="+", help="Log files or directories of log files"
    )
    parser.add_argument(
        "-p",
        "--pattern",
        default=DEFAULT_PATTERN,
        help=f"Glob used to pick files inside directories (default: {DEFAULT_PATTERN})",
    )
    parser.add_argument(
        "--json", metavar="FILE", help="Write the report as JSON to FILE ('-' for stdout)"
    )
    parser.add_argument("--html", type=Path, metavar="FILE", help="Write an HTML report to FILE")
    parser.add_argument(
        "--no-table", action="store_true", help="Do not print the console table"
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes aggregating files (default: $LOG_TREND_WORKERS or 1)",
    )
    parser.add_argument(
        "--date-format",
        dest="date_formats",
        action="append",
        metavar="FMT",
        help="strptime format tried on the leading date; repeat to give several",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More diagnostics (-vv for debug)"
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> TrendSettings:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return TrendSettings.from_args(args)
    except ValueError as e:
        parser.error(str(e))


def publish(report: Report, settings: TrendSettings) -> None:
    """Hand the report to every requested renderer"""
    if settings.json_output:
        json_reporter = JsonReporter()
        if settings.json_to_stdout:
            sys.stdout.write(json_reporter.render(report))
        else:
            json_reporter.write(report, Path(settings.json_output))

    if settings.html_output:
        HtmlReporter().write(report, settings.html_output)

    # stdout belongs to the JSON output when it is sent there
    if settings.show_table and not settings.json_to_stdout:
        TrendReporter().generate_report(report)


def main(argv: Optional[List[str]] = None) -> int:
    settings = parse_args(argv)
    setup_logging(settings.verbosity)
    console = Console(stderr=True)

    try:
        result = run(settings)
        publish(result.report, settings)
    except KeyboardInterrupt:
        console.print("Stopped by user")
        return 130
    except (LogTrendError, OSError) as e:
        console.print(f"Error: {e}", style="red", markup=False)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
