# h2h_scraper/processors/__init__.py
"""
Processors turn raw LiveScore payloads into model objects:

- FixturesProcessor: fixtures-by-date payload -> [MatchLink]
- H2HProcessor: h2h.json payload -> MatchRecord
"""

from .fixtures_processor import FixturesProcessor, slugify, has_stages
from .h2h_processor import H2HProcessor, h2h_processor, build_score_entry

__all__ = [
    "FixturesProcessor", "slugify", "has_stages",
    "H2HProcessor", "h2h_processor", "build_score_entry",
]
