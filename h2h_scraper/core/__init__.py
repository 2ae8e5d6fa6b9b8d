# h2h_scraper/core/__init__.py
"""
Core module - configuration, errors and the HTTP client
"""

from .config import config, Config, Destination, RunConfig
from .exceptions import (
    ScraperError,
    ConfigError,
    InvalidDateError,
    NetworkError,
    DiscoveryTransportError,
    EnrichmentTransportError,
)

__all__ = [
    'config',
    'Config',
    'Destination',
    'RunConfig',
    'ScraperError',
    'ConfigError',
    'InvalidDateError',
    'NetworkError',
    'DiscoveryTransportError',
    'EnrichmentTransportError',
]
