from datetime import date

import pytest

from h2h_scraper.core.exceptions import InvalidDateError
from h2h_scraper.utils.dates import format_match_date, parse_short_date


def test_format_match_date_basic():
    assert format_match_date("20241027") == "27.10.24"


def test_format_match_date_ignores_time_suffix():
    assert format_match_date("20241027T1200") == "27.10.24"
    assert format_match_date("19991231235959") == "31.12.99"


@pytest.mark.parametrize("value", [None, "", "2024", "2024102", 20241027, {"d": 1}])
def test_format_match_date_unknown(value):
    assert format_match_date(value) == "unknown"


def test_parse_short_date():
    assert parse_short_date("24-10-27") == date(2024, 10, 27)
    assert parse_short_date(" 25-03-18 ") == date(2025, 3, 18)


@pytest.mark.parametrize("text", ["", "2024-10-27x", "24/10/27", "24-13-01", None])
def test_parse_short_date_rejects_bad_input(text):
    with pytest.raises(InvalidDateError):
        parse_short_date(text)


def test_invalid_date_error_is_value_error():
    with pytest.raises(ValueError):
        parse_short_date("nope")
