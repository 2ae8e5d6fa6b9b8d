# h2h_scraper/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

# Load environment variables
BASE_DIR = Path(__file__).resolve().parent.parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env.local")


class Destination(str, Enum):
    """Where the report and the run log are written."""

    LOCAL_FILE = "local_file"
    MANAGED_STORE = "managed_store"


class Config:
    """Centralized scraper settings, read once from the environment."""

    # 🔧 ENDPOINTS
    FIXTURES_HOST = os.getenv("FIXTURES_HOST", "https://prod-cdn-mev-api.livescore.com")
    LIVESCORE_HOST = os.getenv("LIVESCORE_HOST", "https://www.livescore.com")
    LIVESCORE_BUILD_ID = os.getenv("LIVESCORE_BUILD_ID", "rBZqXyzFUTFIHBhe08WFB")
    SPORT = "soccer"
    COUNTRY_CODE = os.getenv("COUNTRY_CODE", "NG")
    LOCALE = os.getenv("LOCALE", "en")
    H2H_PROVIDER_KEY = "8"

    # 🔧 HTTP
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT = os.getenv("USER_AGENT", "Mozilla/5.0 (compatible; H2H-Fixtures-Scraper/1.0)")

    # 🔧 LOCAL OUTPUT
    OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")
    REPORT_FILENAME = "fixtures.json"
    LOG_FILENAME = "fixture_logs.txt"

    # 🔧 MANAGED STORE (Supabase)
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
    KV_TABLE = os.getenv("KV_TABLE", "kv_store")
    KV_STORE_NAME = os.getenv("KV_STORE_NAME", "football-fixtures")
    KV_KEY = os.getenv("KV_KEY", "Fixtures")
    LOG_TABLE = os.getenv("LOG_TABLE", "fixture_logs")

    # 🔧 LOGGING CONFIGURATION
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
    LOG_DATE_FORMAT = "%H:%M:%S"

    @classmethod
    def validate_config(cls, destination: Destination = Destination.LOCAL_FILE):
        """Check the settings a run with this destination depends on."""
        errors = []

        if not cls.FIXTURES_HOST:
            errors.append("FIXTURES_HOST not set")

        if not cls.LIVESCORE_HOST:
            errors.append("LIVESCORE_HOST not set")

        if not cls.LIVESCORE_BUILD_ID:
            errors.append("LIVESCORE_BUILD_ID not set")

        if destination == Destination.MANAGED_STORE:
            if not cls.SUPABASE_URL:
                errors.append("SUPABASE_URL not set")
            if not cls.SUPABASE_SERVICE_KEY:
                errors.append("SUPABASE_SERVICE_KEY not set")

        if errors:
            raise ConfigError(f"Configuration errors: {', '.join(errors)}")

        return True


@dataclass
class RunConfig:
    """Everything that varies from one run to the next."""

    query: "FixtureQuery"
    destination: Destination = Destination.LOCAL_FILE
    output_dir: Path = field(default_factory=lambda: Path(Config.OUTPUT_DIR))
    timeout: float = Config.REQUEST_TIMEOUT
    build_id: str = Config.LIVESCORE_BUILD_ID
    show_progress: bool = False

    @classmethod
    def default(cls, today: Optional[date] = None, **overrides) -> "RunConfig":
        from ..models import FixtureQuery

        return cls(query=FixtureQuery.for_tomorrow(today), **overrides)


# Export main config instance
config = Config()
