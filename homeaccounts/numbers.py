"""Parsing and formatting of integers, flags and fixed-point money amounts."""

from .text import ParseError, digit_value, is_digit, is_line_end, is_space, skip_space


def _char(buf, pos):
    return buf[pos] if pos < len(buf) else ""


def _wrap(value, bits):
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def parse_sign(buf, pos=0):
    """Read an optional sign; return ``(positive, position_after_sign)``."""
    ch = _char(buf, pos)
    if ch == "-":
        return False, pos + 1
    if ch == "+":
        pos += 1
    return True, pos


def _parse_int(buf, pos, sep, bits):
    pos = skip_space(buf, pos)
    positive, pos = parse_sign(buf, pos)
    num = 0
    while True:
        ch = _char(buf, pos)
        if ch == sep or is_line_end(ch):
            break
        if not is_space(ch):
            if not is_digit(ch):
                raise ParseError(f"invalid digit {ch!r}", pos)
            num = _wrap(num * 10 + digit_value(ch), bits)
        pos += 1
    return _wrap(num if positive else -num, bits), pos


def parse_int32(buf, pos=0, sep=","):
    """Parse a 32-bit integer field; blanks between digits are ignored."""
    return _parse_int(buf, pos, sep, 32)


def parse_int64(buf, pos=0, sep=","):
    """Parse a 64-bit integer field; blanks between digits are ignored."""
    return _parse_int(buf, pos, sep, 64)


def parse_bool(buf, pos=0, sep=","):
    """Parse an integer field as a flag: non-zero is True."""
    num, pos = parse_int32(buf, pos, sep)
    return num != 0, pos


def format_int(value):
    """Format an integer in decimal."""
    return str(value)


def format_int_len(value, width):
    """Format the magnitude of ``value`` as exactly ``width`` digits, zero padded."""
    if width <= 0:
        return ""
    return str(abs(value) % 10**width).zfill(width)


def format_bool(value):
    """Format a flag as ``1`` or ``0``."""
    return format_int_len(int(bool(value)), 1)


def parse_money(buf, pos=0, sep=",", scale=100, num_sep=" "):
    """Parse a decimal amount into an integer scaled by ``scale`` (10, 100, ...).

    ``num_sep`` may appear between digits of the integer part.
    """
    pos = skip_space(buf, pos)
    positive, pos = parse_sign(buf, pos)
    num = 0
    decimal = False
    while True:
        ch = _char(buf, pos)
        if ch == sep or is_line_end(ch):
            break
        if not is_space(ch):
            if is_digit(ch):
                num = num * 10 + digit_value(ch)
            elif ch == ".":
                decimal = True
                pos += 1
                break
            elif ch != num_sep:
                raise ParseError(f"invalid character {ch!r} in amount", pos)
        pos += 1
    num *= scale
    if decimal:
        scale //= 10
        while True:
            ch = _char(buf, pos)
            if ch == sep or is_line_end(ch):
                break
            if not is_space(ch):
                if not is_digit(ch):
                    raise ParseError(f"invalid character {ch!r} in fraction", pos)
                if scale < 1:
                    raise ParseError("too many fraction digits", pos)
                num += digit_value(ch) * scale
                scale //= 10
            pos += 1
    return _wrap(num if positive else -num, 64), pos


def format_money(value, prec=2, scale=100):
    """Format a scaled amount with ``prec`` fraction digits."""
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole, fraction = divmod(value, scale)
    return f"{sign}{format_int(whole)}.{format_int_len(fraction, prec)}"