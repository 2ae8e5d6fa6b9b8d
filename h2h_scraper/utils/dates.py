# h2h_scraper/utils/dates.py
from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..core.exceptions import InvalidDateError

UNKNOWN_DATE = "unknown"
SHORT_DATE_FORMAT = "%y-%m-%d"


def today() -> date:
    return date.today()


def format_match_date(value: Any) -> str:
    """``YYYYMMDD...`` -> ``DD.MM.YY``.

    Only the first 8 characters are read, so ``20241027T1200`` gives
    ``27.10.24``. Missing or too-short values give ``"unknown"``.
    """
    if not isinstance(value, str) or len(value) < 8:
        return UNKNOWN_DATE
    year = value[0:4][-2:]
    month = value[4:6]
    day = value[6:8]
    return f"{day}.{month}.{year}"


def parse_short_date(text: str) -> date:
    """Parse a ``YY-MM-DD`` date as typed at the prompt."""
    try:
        return datetime.strptime((text or "").strip(), SHORT_DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(f"invalid date {text!r}, expected YY-MM-DD") from e
