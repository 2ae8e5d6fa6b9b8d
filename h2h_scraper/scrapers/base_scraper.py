# h2h_scraper/scrapers/base_scraper.py
from __future__ import annotations

from typing import Any, Dict, Optional, Type

from ..core.exceptions import NetworkError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class BaseScraper:
    """Shared HTTP access and counters for the LiveScore scrapers."""

    def __init__(self, client):
        # anything exposing get_json(url, params=None, error_cls=...)
        self.client = client
        self.scraped_count = 0
        self.errors_count = 0

    def _fetch(self, url: str, params: Optional[Dict[str, Any]] = None,
               error_cls: Type[NetworkError] = NetworkError) -> Any:
        if not self.client:
            raise RuntimeError("HTTP client is not initialized on this scraper.")
        logger.info(f"[fetch] {url}")
        return self.client.get_json(url, params=params, error_cls=error_cls)

    def _handle_scraping_error(self, error: Exception, scraper_type: str):
        self.errors_count += 1
        logger.error(f"{scraper_type} scraper error: {error}")

    def get_stats(self) -> Dict[str, int]:
        return {"scraped": self.scraped_count, "errors": self.errors_count}
