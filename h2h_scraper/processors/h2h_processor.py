# h2h_scraper/processors/h2h_processor.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..models import UNKNOWN, MatchRecord, ScoreEntry
from ..utils.dates import format_match_date
from ..utils.logger import RunLog, get_logger

logger = get_logger(__name__)

# (payload key, record attribute, counter label, header line, "missing" line)
SECTIONS: Tuple[Tuple[str, str, str, Optional[str], str], ...] = (
    ("h2h", "h2h", "H2H", None, "No H2H data found"),
    ("home", "home_last_matches", "HLM", "Home last matches:", "No Home last matches found"),
    ("away", "away_last_matches", "ALM", "Away last matches:", "No Away last matches found"),
)


def _dig(obj: Any, *keys: str) -> Any:
    for k in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(k)
    return obj


def build_score_entry(event: Dict[str, Any]) -> ScoreEntry:
    stage_name = (event.get("stage") or {}).get("stageName") or UNKNOWN
    home = event.get("homeName") or UNKNOWN
    away = event.get("awayName") or UNKNOWN
    home_score = event.get("homeScore") or "0"
    away_score = event.get("awayScore") or "0"
    return ScoreEntry(
        score=f"{home} {home_score} - {away_score} {away}",
        stage_name=str(stage_name),
        date=format_match_date(event.get("startDateTimeString")),
    )


class H2HProcessor:
    """Turns a LiveScore ``h2h.json`` payload into a MatchRecord.

    Missing fields get their defaults. A payload whose sections have the
    wrong shape (a group or event that is not an object) raises, and the
    caller drops the link.
    """

    def parse_teams(self, payload: Dict[str, Any], run_log: RunLog) -> str:
        meta = _dig(payload, "pageProps", "layoutContext", "metaParams")
        if not meta:
            run_log.record("metaParams not found")
            return f"{UNKNOWN} vs {UNKNOWN}"
        team1 = meta.get("team1") or UNKNOWN
        team2 = meta.get("team2") or UNKNOWN
        run_log.record(f'"{team1}" vs "{team2}"')
        return f"{team1} vs {team2}"

    def parse_section(self, groups: Any, label: str, run_log: RunLog) -> List[ScoreEntry]:
        entries: List[ScoreEntry] = []
        for group in groups:
            events = group.get("events")
            if not events:
                continue
            for event in events:
                entry = build_score_entry(event)
                entries.append(entry)
                run_log.record(f"{label} {len(entries)}:")
                run_log.record(f"Stage Name: {entry.stage_name}")
                run_log.record(f"Score: {entry.score}")
        return entries

    def process(self, payload: Dict[str, Any], run_log: RunLog) -> MatchRecord:
        record = MatchRecord(teams=self.parse_teams(payload, run_log))
        head_to_head = _dig(payload, "pageProps", "initialEventData", "event", "headToHead") or {}
        for key, attr, label, header, missing in SECTIONS:
            groups = head_to_head.get(key)
            if not groups:
                run_log.record(missing)
                continue
            if header:
                run_log.record(header)
            setattr(record, attr, self.parse_section(groups, label, run_log))
        logger.debug(
            f"[h2h_processor] {record.teams}: h2h={len(record.h2h)} "
            f"home={len(record.home_last_matches)} away={len(record.away_last_matches)}"
        )
        return record


h2h_processor = H2HProcessor()
