# h2h_scraper/processors/fixtures_processor.py
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from ..core.config import Config
from ..models import UNKNOWN, MatchLink

_WS_RE = re.compile(r"\s+")

H2H_URL_TEMPLATE = (
    "{host}/_next/data/{build_id}/en/football/"
    "{competition}/{stage}/{team1}-vs-{team2}/{provider_id}/h2h.json"
)


def slugify(name: str) -> str:
    """Whitespace runs become ``-``; reserved characters are percent-encoded. Case is kept."""
    return quote(_WS_RE.sub("-", str(name).strip()), safe="-")


def _first_name(participants: Any) -> str:
    if isinstance(participants, list) and participants and isinstance(participants[0], dict):
        return participants[0].get("Nm") or UNKNOWN
    return UNKNOWN


class FixturesProcessor:
    """Flattens the fixtures-by-date payload (stages -> events) into MatchLinks."""

    def __init__(self, host: Optional[str] = None, build_id: Optional[str] = None):
        self.host = (host or Config.LIVESCORE_HOST).rstrip("/")
        self.build_id = build_id or Config.LIVESCORE_BUILD_ID

    def build_url(self, competition: str, stage: str, team1: str, team2: str, provider_id: str) -> str:
        return H2H_URL_TEMPLATE.format(
            host=self.host,
            build_id=self.build_id,
            competition=competition,
            stage=stage,
            team1=slugify(team1),
            team2=slugify(team2),
            provider_id=quote(str(provider_id), safe=""),
        )

    def parse_event(self, stage: Dict[str, Any], event: Dict[str, Any]) -> Optional[MatchLink]:
        pids = event.get("Pids")
        if not isinstance(pids, dict) or Config.H2H_PROVIDER_KEY not in pids:
            return None
        team1 = _first_name(event.get("T1"))
        team2 = _first_name(event.get("T2"))
        url = self.build_url(
            stage.get("CnmT") or UNKNOWN,
            stage.get("Scd") or UNKNOWN,
            team1,
            team2,
            pids.get(Config.H2H_PROVIDER_KEY) or UNKNOWN,
        )
        return MatchLink(url=url, team1=team1, team2=team2)

    def process(self, payload: Any) -> List[MatchLink]:
        stages = payload.get("Stages") if isinstance(payload, dict) else None
        if not isinstance(stages, list):
            return []
        links: List[MatchLink] = []
        for stage in stages:
            if not isinstance(stage, dict):
                continue
            events = stage.get("Events")
            if not isinstance(events, list):
                continue
            for event in events:
                if not isinstance(event, dict):
                    continue
                link = self.parse_event(stage, event)
                if link:
                    links.append(link)
        return links


def has_stages(payload: Any) -> bool:
    return isinstance(payload, dict) and bool(payload.get("Stages"))
