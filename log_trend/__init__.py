# log_trend/__init__.py
"""Monthly severity-level trend report for application log files."""

__version__ = "0.1.0"
