import pytest

from homeaccounts.dates import (
    format_date,
    format_time,
    jdn,
    jdn_split,
    parse_date,
    parse_time,
)
from homeaccounts.text import ParseError


def test_jdn():
    assert jdn(1900, 1, 1) == 2415021
    assert jdn(1970, 1, 1) == 2440588
    assert jdn(-4713, 11, 24) == 0
    assert jdn(2000, 1, 1) == 2451545


def test_jdn_split():
    assert jdn_split(2415021) == (1900, 1, 1)
    assert jdn_split(2440588) == (1970, 1, 1)
    assert jdn_split(0) == (-4713, 11, 24)
    assert jdn_split(2451545) == (2000, 1, 1)


@pytest.mark.parametrize(
    "date", [(1900, 1, 1), (1970, 1, 1), (2000, 2, 29), (2023, 12, 31), (1999, 3, 1)]
)
def test_jdn_round_trip(date):
    assert jdn_split(jdn(*date)) == date


def test_parse_date():
    value, _ = parse_date("1970-1-1", 0, "\0", "-")
    assert value == 2440588
    value, _ = parse_date("1900/2/1", 0, "\0", "/")
    assert value == 2415052


def test_parse_date_missing_parts():
    with pytest.raises(ParseError):
        parse_date("1970", 0, ",", "-")


def test_parse_time():
    value, _ = parse_time("00:10:05", 0, "\0")
    assert value == 605
    value, _ = parse_time("11:20:3", 0, "\0")
    assert value == 40803


def test_parse_time_missing_parts():
    with pytest.raises(ParseError):
        parse_time("11:20", 0, ",")


def test_format_date():
    assert format_date(2415021, "-") == "1900-01-01"
    assert format_date(2440588, "-") == "1970-01-01"


def test_format_time():
    assert format_time(605) == "00:10:05"
    assert format_time(40803) == "11:20:03"


def test_date_text_round_trip():
    text = format_date(2415052, "/")
    value, pos = parse_date(text, 0, ",", "/")
    assert value == 2415052
    assert pos == len(text)


def test_time_text_round_trip():
    text = format_time(40803)
    value, pos = parse_time(text, 0, ",")
    assert value == 40803
    assert pos == len(text)