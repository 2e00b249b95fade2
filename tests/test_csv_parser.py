import pytest

from homeaccounts.column_type import ColumnType
from homeaccounts.csv_parser import (
    Parser,
    ParserOptions,
    format_strings,
    format_types,
    parse_count,
    parse_strings,
    parse_types,
)
from homeaccounts.text import ParseError

RECORD_TYPES = [
    ColumnType.STR,
    ColumnType.STR,
    ColumnType.INT32,
    ColumnType.INT64,
    ColumnType.IGNORE,
    ColumnType.MONEY,
]


def test_parse_line_comma():
    parser = Parser(RECORD_TYPES)
    line = "   abc, def , 10, -100 ,, 123.45\n"
    record, pos = parser.parse_line(line)
    assert pos == len(line)
    assert record[0] == "abc"
    assert record[1] == "def"
    assert record[2] == 10
    assert record[3] == -100
    assert record[5] == 12345


def test_parse_line_bar():
    parser = Parser(RECORD_TYPES, ParserOptions(sep="|"))
    line = "   123| 4567 | -32768| 343 | sdafsfsd| 67 89.10\n"
    record, pos = parser.parse_line(line)
    assert pos == len(line)
    assert record[0] == "123"
    assert record[1] == "4567"
    assert record[2] == -32768
    assert record[3] == 343
    assert record[4] is None
    assert record[5] == 678910


def test_parse_strings():
    options = ParserOptions()
    line = "a, bc, def\n"
    count = parse_count(options, line)
    assert count == 3
    values, pos = parse_strings(options, line, count)
    assert pos == len(line)
    assert values == ["a", "bc", "def"]


def test_parse_strings_empty_field_is_none():
    values, _ = parse_strings(ParserOptions(), "a,,c\n", 3)
    assert values == ["a", None, "c"]


def test_parse_types():
    options = ParserOptions()
    line = "STR, CSTR,INT32,INT64,BOOL, MONEY, DATE ,TIME,IGN\n"
    count = parse_count(options, line)
    assert count == 9
    types, pos = parse_types(options, line, count)
    assert pos == len(line)
    assert types == [
        ColumnType.STR,
        ColumnType.CSTR,
        ColumnType.INT32,
        ColumnType.INT64,
        ColumnType.BOOL,
        ColumnType.MONEY,
        ColumnType.DATE,
        ColumnType.TIME,
        ColumnType.IGNORE,
    ]


@pytest.mark.parametrize("line", ["", "   ", "  \n", "\r\n"])
def test_parse_count_blank(line):
    assert parse_count(ParserOptions(), line) == 0


@pytest.mark.parametrize("sep, expected", [(",", "10,-100"), ("|", "10|-100")])
def test_format_line(sep, expected):
    parser = Parser([ColumnType.INT32, ColumnType.INT64], ParserOptions(sep=sep))
    assert parser.format_line([10, -100]) == expected


def test_common_record():
    parser = Parser(RECORD_TYPES)
    line = "   abc, def , 10, -100 ,, 123.45\n"
    record, pos = parser.parse_line(line)
    assert pos == len(line)
    assert record == ["abc", "def", 10, -100, None, 12345]


def test_round_trip_all_types():
    types = [
        ColumnType.DATE,
        ColumnType.TIME,
        ColumnType.BOOL,
        ColumnType.MONEY,
        ColumnType.CSTR,
        ColumnType.STR,
    ]
    parser = Parser(types)
    line = "1970-01-01,00:10:05,1,12.30,hello,"
    record, _ = parser.parse_line(line)
    assert record == [2440588, 605, True, 1230, "hello", ""]
    assert parser.format_line(record) == line


def test_new_record_initial_values():
    parser = Parser([ColumnType.STR, ColumnType.CSTR, ColumnType.INT32, ColumnType.BOOL])
    assert parser.new_record() == ["", None, 0, False]


def test_format_new_record():
    parser = Parser([ColumnType.INT32, ColumnType.CSTR, ColumnType.MONEY])
    record = parser.new_record()
    record[0] = 1
    record[2] = 10
    assert parser.format_line(record) == "1,,0.10"


def test_parse_field_returns_end():
    parser = Parser([ColumnType.INT32, ColumnType.CSTR])
    record = parser.new_record()
    end = parser.parse_field("12,abc", 3, record, 1)
    assert end == 6
    assert record[1] == "abc"


def test_get_text():
    parser = Parser([ColumnType.CSTR, ColumnType.CSTR])
    record = [None, "x"]
    assert parser.get_text(record, 0) == ""
    assert parser.get_text(record, 1) == "x"


def test_parse_line_bad_number():
    parser = Parser([ColumnType.INT32])
    with pytest.raises(ParseError):
        parser.parse_line("12a\n")


def test_money_precision():
    options = ParserOptions()
    assert options.money_scale == 100
    options.set_money_prec(4)
    assert options.money_prec == 4
    assert options.money_scale == 10000
    parser = Parser([ColumnType.MONEY], options)
    record, _ = parser.parse_line("1.2345\n")
    assert record == [12345]
    assert parser.format_line(record) == "1.2345"


def test_format_strings():
    assert format_strings(ParserOptions(sep="|"), ["a", None, "c"]) == "a||c"


def test_format_types():
    text = format_types(ParserOptions(), [ColumnType.STR, ColumnType.MONEY, ColumnType.IGNORE])
    assert text == "STR,MONEY,IGNORE"


def test_types_round_trip():
    options = ParserOptions()
    types = list(ColumnType)
    text = format_types(options, types)
    parsed, _ = parse_types(options, text, parse_count(options, text))
    assert parsed == types