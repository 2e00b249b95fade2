"""Parsing and formatting of delimited records with typed columns.

A record is a list holding one value per column.  Each parse function takes
the line and a start position and reports the position just past the
separator that ended the last field it read.
"""

from dataclasses import dataclass

from .column_type import ColumnType
from .dates import format_date, format_time, parse_date, parse_time
from .numbers import (
    format_bool,
    format_int,
    format_money,
    parse_bool,
    parse_int32,
    parse_int64,
    parse_money,
)
from .text import is_line_end, parse_string, parse_text, skip_space


def _char(buf, pos):
    return buf[pos] if pos < len(buf) else ""


@dataclass
class ParserOptions:
    """Separators and money precision used when reading and writing fields."""

    sep: str = ","
    num_sep: str = " "
    date_sep: str = "-"
    money_prec: int = 2

    @property
    def money_scale(self):
        """The factor between a money amount and its stored integer."""
        return 10**self.money_prec

    def set_money_prec(self, prec):
        """Set the number of fraction digits of money amounts."""
        self.money_prec = prec


_INITIAL = {
    ColumnType.STR: "",
    ColumnType.CSTR: None,
    ColumnType.INT32: 0,
    ColumnType.INT64: 0,
    ColumnType.BOOL: False,
    ColumnType.MONEY: 0,
    ColumnType.DATE: 0,
    ColumnType.TIME: 0,
    ColumnType.IGNORE: None,
}


def _skip_field(buf, pos, sep):
    while True:
        ch = _char(buf, pos)
        if ch == sep or is_line_end(ch):
            return None, pos
        pos += 1


def _parse_by_type(options, buf, pos, column_type):
    sep = options.sep
    if column_type is ColumnType.STR:
        return parse_string(buf, pos, sep)
    if column_type is ColumnType.CSTR:
        return parse_text(buf, pos, sep)
    if column_type is ColumnType.INT32:
        return parse_int32(buf, pos, sep)
    if column_type is ColumnType.INT64:
        return parse_int64(buf, pos, sep)
    if column_type is ColumnType.BOOL:
        return parse_bool(buf, pos, sep)
    if column_type is ColumnType.MONEY:
        return parse_money(buf, pos, sep, options.money_scale, options.num_sep)
    if column_type is ColumnType.DATE:
        return parse_date(buf, pos, sep, options.date_sep)
    if column_type is ColumnType.TIME:
        return parse_time(buf, pos, sep)
    return _skip_field(buf, pos, sep)


def _format_by_type(options, column_type, value):
    if column_type is ColumnType.STR:
        return value or ""
    if column_type is ColumnType.CSTR:
        return value if value is not None else ""
    if column_type in (ColumnType.INT32, ColumnType.INT64):
        return format_int(value)
    if column_type is ColumnType.BOOL:
        return format_bool(value)
    if column_type is ColumnType.MONEY:
        return format_money(value, options.money_prec, options.money_scale)
    if column_type is ColumnType.DATE:
        return format_date(value, options.date_sep)
    if column_type is ColumnType.TIME:
        return format_time(value)
    return ""


class Parser:
    """Reads and writes records whose columns have the given types."""

    def __init__(self, types, options=None):
        self.types = tuple(types)
        self.options = options if options is not None else ParserOptions()

    def new_record(self):
        """Return a record holding the initial value of every column."""
        return [_INITIAL[column_type] for column_type in self.types]

    def parse_field(self, line, pos, record, index):
        """Parse column ``index`` starting at ``pos`` into ``record``.

        Returns the position of the character that ended the field.
        """
        column_type = self.types[index]
        value, end = _parse_by_type(self.options, line, pos, column_type)
        if column_type is not ColumnType.IGNORE:
            record[index] = value
        return end

    def parse_line(self, line):
        """Parse a whole line; return ``(record, position_after_last_field)``."""
        record = self.new_record()
        pos = 0
        for index in range(len(self.types)):
            pos = self.parse_field(line, pos, record, index) + 1
        return record, pos

    def format_field(self, record, index):
        """Return the text of column ``index`` of ``record``."""
        return _format_by_type(self.options, self.types[index], record[index])

    def format_line(self, record):
        """Return the text of a whole record, without a line end."""
        return self.options.sep.join(
            self.format_field(record, index) for index in range(len(self.types))
        )

    def get_text(self, record, index):
        """Return a text column's value, or an empty string when it is unset."""
        value = record[index]
        return value if value is not None else ""


def parse_count(options, line):
    """Return the number of fields in ``line``; a blank line has none."""
    pos = skip_space(line, 0)
    if is_line_end(_char(line, pos)):
        return 0
    count = 1
    while not is_line_end(_char(line, pos)):
        if line[pos] == options.sep:
            count += 1
        pos += 1
    return count


def parse_strings(options, line, count):
    """Read ``count`` text fields; empty fields give ``None``.

    Returns ``(values, position_after_last_field)``.
    """
    values = []
    pos = 0
    for _ in range(count):
        value, pos = parse_text(line, pos, options.sep)
        values.append(value)
        pos += 1
    return values, pos


def parse_types(options, line, count):
    """Read ``count`` column type names.

    Returns ``(types, position_after_last_field)``.
    """
    types = []
    pos = 0
    for _ in range(count):
        name, pos = parse_string(line, pos, options.sep)
        types.append(ColumnType.from_name(name))
        pos += 1
    return types, pos


def format_strings(options, values):
    """Join text values with the separator; ``None`` gives an empty field."""
    return options.sep.join(value if value is not None else "" for value in values)


def format_types(options, types):
    """Join the names of column types with the separator."""
    return options.sep.join(str(column_type) for column_type in types)