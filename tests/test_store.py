import json

import pytest

from h2h_scraper.core.config import Config, Destination
from h2h_scraper.core.exceptions import ConfigError
from h2h_scraper.pipeline.store import LocalFileStore, SupabaseStore, build_store
from tests.conftest import FakeSupabase

REPORT = {"date": "2024-10-26", "total_matches_tomorrow": 1, "matches": [{"teams": "Ä vs B"}]}


def test_local_store_overwrites_report(tmp_path):
    store = LocalFileStore(tmp_path / "out")
    store.save_report({"date": "x", "total_matches_tomorrow": 0, "matches": []})
    store.save_report(REPORT)
    data = json.loads(store.report_path.read_text(encoding="utf-8"))
    assert data == REPORT
    assert "Ä vs B" in store.report_path.read_text(encoding="utf-8")


def test_local_store_writes_log_lines(tmp_path):
    store = LocalFileStore(tmp_path)
    store.save_log(["one", "two"])
    assert store.log_path.read_text(encoding="utf-8") == "one\ntwo\n"
    store.save_log([])
    assert store.log_path.read_text(encoding="utf-8") == ""


def test_supabase_store_upserts_report():
    client = FakeSupabase()
    SupabaseStore(client).save_report(REPORT)
    op, table, row, conflict = client.calls[0]
    assert (op, table, conflict) == ("upsert", "kv_store", "store,key")
    assert row == {"store": "football-fixtures", "key": "Fixtures", "value": REPORT}


def test_supabase_store_pushes_only_new_log_lines():
    client = FakeSupabase()
    store = SupabaseStore(client, log_table="logs")
    store.save_log(["a", "b"])
    store.save_log(["a", "b"])
    store.save_log(["a", "b", "c"])
    inserts = [c for c in client.calls if c[0] == "insert"]
    assert [c[2] for c in inserts] == [[{"message": "a"}, {"message": "b"}], [{"message": "c"}]]
    assert all(c[1] == "logs" for c in inserts)


def test_build_store(tmp_path):
    assert isinstance(build_store(Destination.LOCAL_FILE, tmp_path), LocalFileStore)
    assert isinstance(build_store("managed_store", client=FakeSupabase()), SupabaseStore)


def test_managed_store_requires_credentials(monkeypatch):
    monkeypatch.setattr(Config, "SUPABASE_URL", None)
    with pytest.raises(ConfigError):
        build_store(Destination.MANAGED_STORE)
