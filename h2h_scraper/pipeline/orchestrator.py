# h2h_scraper/pipeline/orchestrator.py
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from tqdm import tqdm

from .store import ReportStore, build_store
from ..core.config import RunConfig
from ..core.http_client import LivescoreClient
from ..models import FixturesReport, MatchLink
from ..processors.fixtures_processor import has_stages
from ..scrapers import FixturesScraper, MatchEnricher
from ..utils.logger import RunLog, console_sink, get_logger

logger = get_logger(__name__)

HEADER = "=== FOOTBALL FIXTURES SCRAPER ==="


class RunState(str, Enum):
    IDLE = "idle"
    DISCOVERING = "discovering"
    NO_MATCHES = "no_matches"
    ENRICHING = "enriching"
    DONE = "done"


class FixturesPipeline:
    """Discovery -> enrichment for one target date.

    The pipeline owns the report. It is saved after every appended match,
    after every failed link, and once more by ``finalize`` on every exit
    path.
    """

    def __init__(self, run_config: RunConfig, client=None, store: Optional[ReportStore] = None,
                 run_log: Optional[RunLog] = None):
        self.run_config = run_config
        self._owns_client = client is None
        self.client = client or LivescoreClient(timeout=run_config.timeout)
        self.store = store or build_store(run_config.destination, run_config.output_dir)
        self.run_log = run_log or RunLog(sinks=[console_sink()])
        self.report = FixturesReport.for_query(run_config.query)
        self.fixtures_scraper = FixturesScraper(self.client, build_id=run_config.build_id)
        self.enricher = MatchEnricher(self.client, self.run_log)
        self.state = RunState.IDLE
        self.links: List[MatchLink] = []
        self.finalized = False
        self.saves = 0

    # ---------- stages ----------
    def discover(self) -> List[MatchLink]:
        self.state = RunState.DISCOVERING
        links = self.fixtures_scraper.discover(self.run_config.query)
        if not has_stages(self.fixtures_scraper.last_payload):
            self.run_log.record("No stages found in initial response")
            self.state = RunState.NO_MATCHES
            return []
        self.run_log.record(f"Total Matches Found: {len(links)}")
        return links

    def process_link(self, index: int, link: MatchLink):
        self.run_log.record(f"Processing Fixtures {index + 1}: {link.team1} vs {link.team2}")
        record = self.enricher.enrich(link, index)
        if record is not None:
            self.report.add_match(record)
            self.save()
        elif self.enricher.last_error is not None:
            self.save()

    def _iter_links(self) -> Iterable[MatchLink]:
        if self.run_config.show_progress:
            return tqdm(self.links, desc="Fixtures", unit="match")
        return self.links

    def run(self) -> FixturesReport:
        self.run_log.record(HEADER)
        try:
            try:
                self.links = self.discover()
            except Exception as e:
                # transport failures and malformed payloads end the run the same way
                self.run_log.record(f"Error in first API call: {e}")
                return self.report

            self.report.total_matches_tomorrow = len(self.links)
            if self.state == RunState.NO_MATCHES:
                return self.report
            if not self.links:
                self.state = RunState.NO_MATCHES
                self.run_log.record("No Matches Found")
                return self.report

            self.state = RunState.ENRICHING
            for index, link in enumerate(self._iter_links()):
                self.process_link(index, link)
            self.run_log.record("All Fixtures processed")
            return self.report
        finally:
            self.finalize()

    # ---------- persistence ----------
    def save(self) -> bool:
        ok = True
        try:
            self.store.save_report(self.report.to_dict())
            self.run_log.record("Fixtures data updated")
        except Exception as e:
            logger.exception(f"[orchestrator] report save failed: {e}")
            self.run_log.record(f"Error saving Fixtures data: {e}")
            ok = False
        try:
            self.store.save_log(self.run_log.lines)
        except Exception as e:
            logger.exception(f"[orchestrator] log save failed: {e}")
            ok = False
        if ok:
            self.saves += 1
        return ok

    def finalize(self):
        if self.finalized:
            return
        self.finalized = True
        self.save()
        if self.state != RunState.NO_MATCHES:
            self.state = RunState.DONE
        if self._owns_client:
            self.client.close()
        logger.info(f"[orchestrator] done: links={len(self.links)} stored={len(self.report.matches)} "
                    f"stats={self.get_stats()}")

    def get_stats(self):
        return {
            "discovered": len(self.links),
            "stored": len(self.report.matches),
            **self.enricher.get_stats(),
            "requests": self.client.requests_made,
        }
