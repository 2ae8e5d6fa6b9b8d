# h2h_scraper/pipeline/store.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.config import Config, Destination
from ..core.exceptions import ConfigError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ReportStore:
    """Destination for the fixtures report and the run log.

    ``save_report`` overwrites the stored report with the full document.
    ``save_log`` receives every line recorded so far.
    """

    def save_report(self, report: Dict[str, Any]):
        raise NotImplementedError

    def save_log(self, lines: List[str]):
        raise NotImplementedError


class LocalFileStore(ReportStore):
    def __init__(self, output_dir, report_name: str = Config.REPORT_FILENAME,
                 log_name: str = Config.LOG_FILENAME):
        self.output_dir = Path(output_dir)
        self.report_path = self.output_dir / report_name
        self.log_path = self.output_dir / log_name

    def save_report(self, report: Dict[str, Any]):
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.report_path.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug(f"[store][local] report -> {self.report_path}")

    def save_log(self, lines: List[str]):
        self.output_dir.mkdir(parents=True, exist_ok=True)
        text = "\n".join(lines)
        self.log_path.write_text(text + "\n" if text else "", encoding="utf-8")
        logger.debug(f"[store][local] {len(lines)} log lines -> {self.log_path}")


class SupabaseStore(ReportStore):
    """Report in a key-value table, log lines appended to a log table."""

    def __init__(self, client, kv_table: str = Config.KV_TABLE, store_name: str = Config.KV_STORE_NAME,
                 key: str = Config.KV_KEY, log_table: str = Config.LOG_TABLE):
        self.client = client
        self.kv_table = kv_table
        self.store_name = store_name
        self.key = key
        self.log_table = log_table
        self._pushed_lines = 0

    @classmethod
    def from_config(cls) -> "SupabaseStore":
        if not (Config.SUPABASE_URL and Config.SUPABASE_SERVICE_KEY):
            raise ConfigError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set for the managed store")
        from supabase import create_client

        logger.info("[store] Initializing Supabase client…")
        client = create_client(Config.SUPABASE_URL, Config.SUPABASE_SERVICE_KEY)
        logger.info("[store] ✅ Supabase ready")
        return cls(client)

    def save_report(self, report: Dict[str, Any]):
        row = {"store": self.store_name, "key": self.key, "value": report}
        self.client.table(self.kv_table).upsert(row, on_conflict="store,key").execute()
        logger.debug(f"[store][supabase] {self.kv_table}/{self.store_name}/{self.key} updated")

    def save_log(self, lines: List[str]):
        pending = lines[self._pushed_lines:]
        if not pending:
            return
        self.client.table(self.log_table).insert([{"message": m} for m in pending]).execute()
        self._pushed_lines += len(pending)
        logger.debug(f"[store][supabase] {len(pending)} log lines -> {self.log_table}")


def build_store(destination: Destination, output_dir=None, client: Optional[Any] = None) -> ReportStore:
    destination = Destination(destination)
    if destination == Destination.MANAGED_STORE:
        return SupabaseStore(client) if client is not None else SupabaseStore.from_config()
    return LocalFileStore(output_dir or Config.OUTPUT_DIR)
