# log_trend/core/log.py
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.log"


class LogSource:
    """Resolves input paths into the ordered list of log files to read"""

    def __init__(self, paths: Sequence[Path], pattern: str = DEFAULT_PATTERN):
        self.paths = [Path(p) for p in paths]
        self.pattern = pattern

    def files(self) -> List[Path]:
        """Expand directories and validate file paths

        Raises:
            FileNotFoundError: If an input path does not exist
        """
        files: List[Path] = []
        for path in self.paths:
            if not path.exists():
                raise FileNotFoundError(f"Log path {path} does not exist")

            if path.is_dir():
                matches = sorted(p for p in path.glob(self.pattern) if p.is_file())
                logger.debug("%d file(s) matching %s in %s", len(matches), self.pattern, path)
                files.extend(matches)
            else:
                files.append(path)

        logger.info("Found %d log file(s)", len(files))
        return files


class LogReader:
    """Common log reader for all sources"""

    @staticmethod
    def read_blob(file_path: Path) -> str:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    @classmethod
    def read_blobs(cls, files: Iterable[Path]) -> Iterator[str]:
        for file_path in files:
            logger.debug("Reading %s", file_path)
            yield cls.read_blob(file_path)
