# log_trend/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from log_trend.core.classifier import DEFAULT_DATE_FORMATS
from log_trend.core.log import DEFAULT_PATTERN

DEFAULT_WORKERS = 1
WORKERS_ENV = "LOG_TREND_WORKERS"
STDOUT = "-"


def workers_from_env(environ: Mapping[str, str]) -> Optional[int]:
    """Read the worker count from the environment, None if unset

    Raises:
        ValueError: If the variable is set but not an integer
    """
    value = environ.get(WORKERS_ENV, "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{WORKERS_ENV} must be an integer, got {value!r}")


@dataclass(frozen=True)
class TrendSettings:
    """Effective options for one run"""
    paths: Tuple[Path, ...]
    pattern: str = DEFAULT_PATTERN
    workers: int = DEFAULT_WORKERS
    date_formats: Tuple[str, ...] = DEFAULT_DATE_FORMATS
    json_output: Optional[str] = None
    html_output: Optional[Path] = None
    show_table: bool = True
    verbosity: int = 0

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def json_to_stdout(self) -> bool:
        return self.json_output == STDOUT

    @classmethod
    def from_args(cls, args, environ: Optional[Mapping[str, str]] = None) -> "TrendSettings":
        """Build settings from parsed CLI args; the CLI wins over the environment"""
        environ = os.environ if environ is None else environ

        workers = args.workers
        if workers is None:
            workers = workers_from_env(environ)
        if workers is None:
            workers = DEFAULT_WORKERS

        return cls(
            paths=tuple(args.paths),
            pattern=args.pattern,
            workers=workers,
            date_formats=tuple(args.date_formats) if args.date_formats else DEFAULT_DATE_FORMATS,
            json_output=args.json,
            html_output=args.html,
            show_table=not args.no_table,
            verbosity=args.verbose,
        )
