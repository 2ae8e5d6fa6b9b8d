# h2h_scraper/utils/__init__.py
"""
Utils module - logging and date helpers
"""

from .logger import get_logger, strip_ansi, RunLog, ScraperLogger, console_sink, file_sink
from .dates import format_match_date, parse_short_date, today

__all__ = [
    'get_logger',
    'strip_ansi',
    'RunLog',
    'ScraperLogger',
    'console_sink',
    'file_sink',
    'format_match_date',
    'parse_short_date',
    'today',
]
