# log_trend/core/preprocessor.py
from typing import Iterable, Iterator

BOM = "\ufeff"


class LogPreprocessor:
    """Turn raw file contents into a single stream of log lines"""

    @staticmethod
    def split_lines(blob: str) -> Iterator[str]:
        """
        Split one file's contents into lines.

        Args:
            blob: Full text of a single log file

        Returns:
            Iterator over the lines, without line terminators
        """
        if blob.startswith(BOM):
            blob = blob[len(BOM):]
        yield from blob.splitlines()

    @classmethod
    def iter_lines(cls, blobs: Iterable[str]) -> Iterator[str]:
        """Concatenate several files into one line stream"""
        for blob in blobs:
            yield from cls.split_lines(blob)
