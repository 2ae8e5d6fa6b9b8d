from datetime import date

import pytest

from h2h_scraper.core.config import RunConfig
from h2h_scraper.core.exceptions import NetworkError
from h2h_scraper.models import FixtureQuery
from h2h_scraper.utils.logger import RunLog


class FakeClient:
    """Serves canned payloads by URL prefix; an Exception value is raised as ``error_cls``."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False
        self.requests_made = 0

    def get_json(self, url, params=None, error_cls=NetworkError):
        self.calls.append((url, params))
        self.requests_made += 1
        for prefix, value in self.routes.items():
            if url.startswith(prefix):
                if isinstance(value, Exception):
                    raise error_cls(str(value), url=url)
                return value
        raise error_cls("404 not found", url=url, status_code=404)

    def close(self):
        self.closed = True


class MemoryStore:
    def __init__(self, fail=False):
        self.reports = []
        self.logs = []
        self.fail = fail

    def save_report(self, report):
        if self.fail:
            raise RuntimeError("store offline")
        self.reports.append(report)

    def save_log(self, lines):
        self.logs.append(list(lines))


class FakeQuery:
    def __init__(self, table, calls):
        self.table = table
        self.calls = calls

    def upsert(self, row, on_conflict=None):
        self.calls.append(("upsert", self.table, row, on_conflict))
        return self

    def insert(self, rows):
        self.calls.append(("insert", self.table, rows, None))
        return self

    def execute(self):
        return self


class FakeSupabase:
    def __init__(self):
        self.calls = []

    def table(self, name):
        return FakeQuery(name, self.calls)


@pytest.fixture
def query():
    return FixtureQuery.for_tomorrow(date(2024, 10, 26))


@pytest.fixture
def run_config(query, tmp_path):
    return RunConfig(query=query, output_dir=tmp_path, build_id="BUILD")


@pytest.fixture
def run_log():
    return RunLog()


@pytest.fixture
def memory_store():
    return MemoryStore()


def fixtures_payload(*stages):
    return {"Stages": list(stages)}


def stage(events, cnmt="england", scd="premier-league"):
    return {"CnmT": cnmt, "Scd": scd, "Events": events}


def event(t1="Lions", t2="Tigers", pids=None):
    return {"T1": [{"Nm": t1}], "T2": [{"Nm": t2}], "Pids": {"8": "abc"} if pids is None else pids}


def score_event(home="A", away="B", hs="2", as_="1", when="20241027T1200", stage_name="Final"):
    return {
        "homeName": home,
        "awayName": away,
        "homeScore": hs,
        "awayScore": as_,
        "startDateTimeString": when,
        "stage": {"stageName": stage_name},
    }


def h2h_payload(h2h=None, home=None, away=None, meta=None):
    head = {}
    if h2h is not None:
        head["h2h"] = h2h
    if home is not None:
        head["home"] = home
    if away is not None:
        head["away"] = away
    page = {"initialEventData": {"event": {"headToHead": head}}}
    if meta is not None:
        page["layoutContext"] = {"metaParams": meta}
    return {"pageProps": page}
