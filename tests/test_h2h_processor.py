import pytest

from h2h_scraper.processors.h2h_processor import build_score_entry, h2h_processor
from tests.conftest import h2h_payload, score_event


def test_h2h_entry_from_event(run_log):
    payload = h2h_payload(h2h=[{"events": [score_event()]}], meta={"team1": "A", "team2": "B"})
    record = h2h_processor.process(payload, run_log)
    assert record.teams == "A vs B"
    assert [e.to_dict() for e in record.h2h] == [
        {"Score": "A 2 - 1 B", "Stage Name": "Final", "date": "27.10.24"}
    ]
    assert record.has_data


def test_entry_defaults():
    entry = build_score_entry({})
    assert entry.score == "unknown 0 - 0 unknown"
    assert entry.stage_name == "unknown"
    assert entry.date == "unknown"


def test_numeric_scores_are_rendered():
    entry = build_score_entry({"homeName": "X", "awayName": "Y", "homeScore": 3, "awayScore": 0})
    assert entry.score == "X 3 - 0 Y"


def test_missing_meta_params(run_log):
    record = h2h_processor.process(h2h_payload(h2h=[{"events": [score_event()]}]), run_log)
    assert record.teams == "unknown vs unknown"
    assert "metaParams not found" in run_log.lines


def test_groups_are_walked_in_order_and_empty_groups_skipped(run_log):
    payload = h2h_payload(h2h=[
        {"events": [score_event("A", "B"), score_event("C", "D")]},
        {"events": []},
        {},
        {"events": [score_event("E", "F")]},
    ])
    record = h2h_processor.process(payload, run_log)
    assert [e.score.split()[0] for e in record.h2h] == ["A", "C", "E"]
    assert "H2H 3:" in run_log.lines


def test_away_section_reads_away_groups(run_log):
    payload = h2h_payload(
        home=[{"events": [score_event("Home", "X")]}],
        away=[{"events": [score_event("Away1", "Y"), score_event("Away2", "Z")]}],
    )
    record = h2h_processor.process(payload, run_log)
    assert [e.score.split()[0] for e in record.home_last_matches] == ["Home"]
    assert [e.score.split()[0] for e in record.away_last_matches] == ["Away1", "Away2"]
    assert record.to_dict().keys() == {"teams", "Home last matches", "Away last matches"}


def test_sections_with_only_empty_groups_are_omitted(run_log):
    record = h2h_processor.process(h2h_payload(h2h=[{"events": []}], home=[], away=None), run_log)
    assert not record.has_data
    assert record.to_dict() == {"teams": "unknown vs unknown"}
    assert "No Home last matches found" in run_log.lines
    assert "No Away last matches found" in run_log.lines


def test_no_head_to_head_at_all(run_log):
    record = h2h_processor.process({"pageProps": {}}, run_log)
    assert not record.has_data
    assert "No H2H data found" in run_log.lines


def test_malformed_group_raises(run_log):
    with pytest.raises(AttributeError):
        h2h_processor.process(h2h_payload(h2h=["not-a-group"]), run_log)


def test_same_payload_same_record(run_log):
    payload = h2h_payload(h2h=[{"events": [score_event()]}], away=[{"events": [score_event("Q", "R")]}],
                          meta={"team1": "A", "team2": "B"})
    assert h2h_processor.process(payload, run_log) == h2h_processor.process(payload, run_log)
