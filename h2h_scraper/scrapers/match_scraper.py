# h2h_scraper/scrapers/match_scraper.py
from __future__ import annotations

from typing import Optional

from .base_scraper import BaseScraper
from ..core.exceptions import EnrichmentTransportError
from ..models import MatchLink, MatchRecord
from ..processors.h2h_processor import H2HProcessor, h2h_processor
from ..utils.logger import RunLog, get_logger

logger = get_logger(__name__)


class MatchEnricher(BaseScraper):
    """Match enrichment for one MatchLink at a time.

    ``enrich`` never raises. A failed link is reported on the run log and
    exposed through ``last_error`` so the caller can persist the report
    unchanged before moving on.
    """

    def __init__(self, client, run_log: RunLog, processor: Optional[H2HProcessor] = None):
        super().__init__(client)
        self.run_log = run_log
        self.processor = processor or h2h_processor
        self.last_error: Optional[Exception] = None
        self.empty_count = 0

    def enrich(self, link: MatchLink, index: int = 0) -> Optional[MatchRecord]:
        self.last_error = None
        try:
            payload = self._fetch(link.url, error_cls=EnrichmentTransportError)
            record = self.processor.process(payload, self.run_log)
        except Exception as e:
            self.last_error = e
            self._handle_scraping_error(e, "H2H")
            self.run_log.record(f"Skipping URL {index + 1} due to error: {e}")
            return None

        if not record.has_data:
            self.empty_count += 1
            self.run_log.record("No H2H, Home, or Away data found for this URL")
            return None

        self.scraped_count += 1
        return record

    def get_stats(self):
        stats = super().get_stats()
        stats["empty"] = self.empty_count
        return stats
