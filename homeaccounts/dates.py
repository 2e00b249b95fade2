"""Dates as Julian day numbers and times of day as seconds."""

from .numbers import format_int_len, parse_int32
from .text import ParseError


def _tdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _tmod(a, b):
    return a - b * _tdiv(a, b)


def jdn(year, month, day):
    """Return the Julian day number of a Gregorian calendar date."""
    a = _tdiv(14 - month, 12)
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + 30 * m
        + _tdiv(3 * m + 2, 5)
        + 365 * y
        + _tdiv(y, 4)
        - _tdiv(y, 100)
        + _tdiv(y, 400)
        - 32045
    )


def jdn_split(day_number):
    """Return ``(year, month, day)`` for a Julian day number."""
    j = day_number + 32044
    g = _tdiv(j, 146097)
    dg = _tmod(j, 146097)
    c = _tdiv((_tdiv(dg, 36524) + 1) * 3, 4)
    dc = dg - c * 36524
    b = _tdiv(dc, 1461)
    db = _tmod(dc, 1461)
    a = _tdiv((_tdiv(db, 365) + 1) * 3, 4)
    da = db - a * 365
    y = g * 400 + c * 100 + b * 4 + a
    m = _tdiv(da * 5 + 308, 153) - 2
    d = da - _tdiv((m + 4) * 153, 5) + 122
    year = y - 4800 + _tdiv(m + 2, 12)
    month = _tmod(m + 2, 12) + 1
    return year, month, d + 1


def _expect(buf, pos, ch):
    if pos >= len(buf) or buf[pos] != ch:
        raise ParseError(f"expected {ch!r}", pos)
    return pos + 1


def parse_date(buf, pos=0, sep=",", date_sep="-"):
    """Parse ``year<date_sep>month<date_sep>day`` into a Julian day number."""
    year, pos = parse_int32(buf, pos, date_sep)
    pos = _expect(buf, pos, date_sep)
    month, pos = parse_int32(buf, pos, date_sep)
    pos = _expect(buf, pos, date_sep)
    day, pos = parse_int32(buf, pos, sep)
    return jdn(year, month, day), pos


def parse_time(buf, pos=0, sep=","):
    """Parse ``hh:mm:ss`` into seconds since midnight."""
    hour, pos = parse_int32(buf, pos, ":")
    pos = _expect(buf, pos, ":")
    minute, pos = parse_int32(buf, pos, ":")
    pos = _expect(buf, pos, ":")
    second, pos = parse_int32(buf, pos, sep)
    return (hour * 60 + minute) * 60 + second, pos


def format_date(value, date_sep="-"):
    """Format a Julian day number as ``YYYY-MM-DD`` with the given separator."""
    year, month, day = jdn_split(value)
    return date_sep.join(
        (format_int_len(year, 4), format_int_len(month, 2), format_int_len(day, 2))
    )


def format_time(value):
    """Format seconds since midnight as ``HH:MM:SS``."""
    hours = _tdiv(value, 3600)
    minutes = _tdiv(_tmod(value, 3600), 60)
    seconds = _tmod(value, 60)
    return ":".join(
        (format_int_len(hours, 2), format_int_len(minutes, 2), format_int_len(seconds, 2))
    )