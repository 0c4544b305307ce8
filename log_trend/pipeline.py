# log_trend/pipeline.py
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import List, Optional, Sequence, Tuple

from log_trend.analyzers.trend import MonthlyAggregator, Report, ReportAssembler
from log_trend.config import TrendSettings
from log_trend.core import (
    EmptyInputError,
    LineClassifier,
    LogPreprocessor,
    LogReader,
    LogSource,
    classify_lines,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    report: Report
    file_count: int
    line_count: int
    classified_count: int


def aggregate_blob(
    blob: str, classifier: Optional[LineClassifier] = None
) -> Tuple[MonthlyAggregator, int]:
    """Aggregate one file's contents, returning its aggregator and line count"""
    lines = list(LogPreprocessor.split_lines(blob))
    aggregator = MonthlyAggregator()
    aggregator.aggregate(classify_lines(lines, classifier))
    return aggregator, len(lines)


def build_report(
    blobs: Sequence[str],
    workers: int = 1,
    classifier: Optional[LineClassifier] = None,
) -> PipelineResult:
    """Run classification, aggregation and trend calculation over file contents

    With more than one worker every blob gets its own aggregator in a worker
    process; the partial results are merged here, in the calling process.
    Otherwise all blobs are read as one line stream.
    """
    classifier = classifier or LineClassifier()
    work = partial(aggregate_blob, classifier=classifier)

    partials: List[Tuple[MonthlyAggregator, int]]
    if workers > 1 and len(blobs) > 1:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            partials = list(executor.map(work, blobs))
    else:
        stream = list(LogPreprocessor.iter_lines(blobs))
        single = MonthlyAggregator()
        single.aggregate(classify_lines(stream, classifier))
        partials = [(single, len(stream))]

    total = MonthlyAggregator()
    line_count = 0
    for aggregator, lines in partials:
        total.merge(aggregator)
        line_count += lines

    report = ReportAssembler().assemble(total.snapshot())
    classified_count = sum(
        r.information_count + r.warning_count + r.error_count for r in report
    )
    return PipelineResult(
        report=report,
        file_count=len(blobs),
        line_count=line_count,
        classified_count=classified_count,
    )


def run(settings: TrendSettings) -> PipelineResult:
    """Read the configured log files and build the trend report

    Raises:
        FileNotFoundError: If an input path does not exist
        EmptyInputError: If no files are found or they hold no lines
    """
    files = LogSource(settings.paths, settings.pattern).files()
    if not files:
        raise EmptyInputError(
            f"No log files matching {settings.pattern!r} found in: "
            + ", ".join(str(p) for p in settings.paths)
        )

    blobs = list(LogReader.read_blobs(files))
    result = build_report(
        blobs,
        workers=settings.workers,
        classifier=LineClassifier(settings.date_formats),
    )

    if result.line_count == 0:
        raise EmptyInputError(f"{len(files)} log file(s) found but they contain no lines")

    logger.info(
        "Classified %d of %d line(s) from %d file(s) into %d month(s)",
        result.classified_count,
        result.line_count,
        result.file_count,
        len(result.report),
    )
    if result.classified_count == 0:
        logger.warning("No line could be classified; the report is empty")

    return result
