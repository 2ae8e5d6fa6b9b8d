# h2h_scraper/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from .utils.dates import parse_short_date, today as _today

UNKNOWN = "unknown"

SECTION_H2H = "h2h"
SECTION_HOME = "Home last matches"
SECTION_AWAY = "Away last matches"


@dataclass(frozen=True)
class FixtureQuery:
    """Target date for discovery plus the date the run is stamped with."""

    target_date: date
    report_date: date

    @classmethod
    def for_tomorrow(cls, today: Optional[date] = None) -> "FixtureQuery":
        today = today or _today()
        return cls(target_date=today + timedelta(days=1), report_date=today)

    @classmethod
    def from_input(cls, text: str, today: Optional[date] = None) -> "FixtureQuery":
        return cls(target_date=parse_short_date(text), report_date=today or _today())

    @property
    def target_token(self) -> str:
        return self.target_date.strftime("%Y%m%d")

    @property
    def report_token(self) -> str:
        return self.report_date.isoformat()


@dataclass(frozen=True)
class MatchLink:
    url: str
    team1: str
    team2: str


@dataclass(frozen=True)
class ScoreEntry:
    score: str
    stage_name: str
    date: str

    def to_dict(self) -> Dict[str, str]:
        return {"Score": self.score, "Stage Name": self.stage_name, "date": self.date}


@dataclass
class MatchRecord:
    teams: str
    h2h: List[ScoreEntry] = field(default_factory=list)
    home_last_matches: List[ScoreEntry] = field(default_factory=list)
    away_last_matches: List[ScoreEntry] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return bool(self.h2h or self.home_last_matches or self.away_last_matches)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"teams": self.teams}
        for key, entries in (
            (SECTION_H2H, self.h2h),
            (SECTION_HOME, self.home_last_matches),
            (SECTION_AWAY, self.away_last_matches),
        ):
            if entries:
                out[key] = [e.to_dict() for e in entries]
        return out


@dataclass
class FixturesReport:
    """Accumulator for one run; always persisted whole."""

    date: str
    total_matches_tomorrow: int = 0
    matches: List[MatchRecord] = field(default_factory=list)

    @classmethod
    def for_query(cls, query: FixtureQuery) -> "FixturesReport":
        return cls(date=query.report_token)

    def add_match(self, record: MatchRecord):
        if not record.has_data:
            raise ValueError(f"refusing to add match without data: {record.teams}")
        self.matches.append(record)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "total_matches_tomorrow": self.total_matches_tomorrow,
            "matches": [m.to_dict() for m in self.matches],
        }
