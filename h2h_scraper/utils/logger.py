# h2h_scraper/utils/logger.py
import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.config import config

# Base formatting for module loggers
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format=config.LOG_FORMAT,
    datefmt=config.LOG_DATE_FORMAT,
    stream=sys.stdout,
)

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def get_logger(name: str) -> logging.Logger:
    """Module logger."""
    return logging.getLogger(name)


def strip_ansi(message: str) -> str:
    return _ANSI_RE.sub("", message)


class PlainFormatter(logging.Formatter):
    """Message text only, ANSI escapes removed."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(record.getMessage())


class BufferHandler(logging.Handler):
    """Keeps every formatted line in memory, in arrival order."""

    def __init__(self):
        super().__init__()
        self.lines: List[str] = []
        self.setFormatter(PlainFormatter())

    def emit(self, record: logging.LogRecord):
        try:
            self.lines.append(self.format(record))
        except Exception:
            self.handleError(record)


def console_sink(stream=None) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(PlainFormatter())
    return handler


def file_sink(path) -> logging.Handler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(PlainFormatter())
    return handler


class RunLog:
    """User-facing run log.

    ``record(message)`` fans one message out to every sink (console, file, ...).
    A buffer sink is always attached so the full log of the run can be handed
    to a store at the end. Messages spanning several lines are split so the
    artifact keeps one message per line.
    """

    def __init__(self, sinks: Optional[Iterable[logging.Handler]] = None, name: Optional[str] = None):
        # detached from the logging registry: each run gets its own handler set
        self.logger = logging.Logger(name or "h2h_scraper.run")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        self.buffer = BufferHandler()
        self.logger.addHandler(self.buffer)
        for sink in sinks or ():
            self.logger.addHandler(sink)

    @property
    def lines(self) -> List[str]:
        return list(self.buffer.lines)

    def record(self, message: str, level: int = logging.INFO):
        for line in str(message).splitlines() or [""]:
            if line.strip():
                self.logger.log(level, line)

    def close(self):
        for h in list(self.logger.handlers):
            if h is not self.buffer:
                h.close()
                self.logger.removeHandler(h)


class ScraperLogger:
    """Frames a scraper run in the module log."""

    def log_scraper_start(self):
        """Log the start of a scraper session"""
        logger = get_logger("h2h_scraper.main")
        logger.info("=" * 50)
        logger.info("🚀 SCRAPER SESSION STARTED")
        logger.info(f"Time: {datetime.now().isoformat()}")
        logger.info("=" * 50)

    def log_scraper_end(self, success: bool, duration: float, stats: dict = None):
        """Log the end of a scraper session"""
        logger = get_logger("h2h_scraper.main")
        logger.info("=" * 50)

        if success:
            logger.info("✅ SCRAPER SESSION COMPLETED")
        else:
            logger.info("❌ SCRAPER SESSION FAILED")

        logger.info(f"Duration: {duration:.2f}s")

        if stats:
            logger.info(f"Stats: {stats}")

        logger.info("=" * 50)
