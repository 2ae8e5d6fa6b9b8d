# h2h_scraper/scrapers/__init__.py
"""
Scrapers module - fixture discovery and per-match enrichment
"""

from .base_scraper import BaseScraper
from .fixtures_scraper import FixturesScraper
from .match_scraper import MatchEnricher

__all__ = [
    "BaseScraper",
    "FixturesScraper",
    "MatchEnricher",
]
