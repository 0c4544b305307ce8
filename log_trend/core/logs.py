# log_trend/core/logs.py
import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "log_trend"


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Send log_trend's diagnostics to stderr through rich

    stdout stays reserved for report output (e.g. JSON written to '-').
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
