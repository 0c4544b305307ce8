# log_trend/core/errors.py


class LogTrendError(Exception):
    """Base class for errors raised by log_trend"""


class EmptyInputError(LogTrendError):
    """Raised when the file source yields no files or no lines"""
