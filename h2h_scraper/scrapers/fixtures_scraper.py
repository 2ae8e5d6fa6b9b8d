# h2h_scraper/scrapers/fixtures_scraper.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .base_scraper import BaseScraper
from ..core.config import Config
from ..core.exceptions import DiscoveryTransportError
from ..models import FixtureQuery, MatchLink
from ..processors.fixtures_processor import FixturesProcessor
from ..utils.logger import get_logger

logger = get_logger(__name__)


class FixturesScraper(BaseScraper):
    """Fixture discovery: one request for the target date, then a pure filter on ``Pids["8"]``."""

    def __init__(self, client, build_id: Optional[str] = None, host: Optional[str] = None):
        super().__init__(client)
        self.host = (host or Config.FIXTURES_HOST).rstrip("/")
        self.processor = FixturesProcessor(build_id=build_id)
        self.last_payload: Any = None

    def build_url(self, query: FixtureQuery) -> str:
        return f"{self.host}/v1/api/app/date/{Config.SPORT}/{query.target_token}/0"

    @staticmethod
    def build_params() -> Dict[str, Any]:
        return {"countryCode": Config.COUNTRY_CODE, "locale": Config.LOCALE, "MD": 1}

    def discover(self, query: FixtureQuery) -> List[MatchLink]:
        """Raises DiscoveryTransportError when the request itself fails."""
        payload = self._fetch(self.build_url(query), params=self.build_params(),
                              error_cls=DiscoveryTransportError)
        self.last_payload = payload
        links = self.processor.process(payload)
        self.scraped_count = len(links)
        logger.info(f"[discover] {len(links)} h2h links for {query.target_token}")
        return links
