# h2h_scraper/core/exceptions.py
from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for every error raised by the scraper."""


class ConfigError(ScraperError):
    pass


class InvalidDateError(ScraperError, ValueError):
    pass


class NetworkError(ScraperError):
    """A request failed at the transport, HTTP or JSON-decoding level."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DiscoveryTransportError(NetworkError):
    """The fixtures-by-date request failed. Fatal to the run."""


class EnrichmentTransportError(NetworkError):
    """A single head-to-head request failed. The link is skipped."""
