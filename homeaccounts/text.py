"""Character classes and field scanning for delimited text lines.

Scanning functions take a string and a start position and return the parsed
value together with the position of the character that ended the field
(the separator or the end of the line).
"""

_SPACES = (" ", "\t")
_LINE_ENDS = ("", "\0", "\r", "\n")


class ParseError(ValueError):
    """Raised when a field cannot be parsed."""

    def __init__(self, message, position=None):
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.position = position


def _char(buf, pos):
    return buf[pos] if pos < len(buf) else ""


def is_space(ch):
    """Return True for a blank or a tab."""
    return ch in _SPACES


def is_line_end(ch):
    """Return True for NUL, CR, LF, or the end of the text."""
    return ch in _LINE_ENDS


def is_digit(ch):
    """Return True for an ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_hex(ch):
    """Return True for an ASCII hexadecimal digit."""
    return is_digit(ch) or (len(ch) == 1 and ("A" <= ch <= "F" or "a" <= ch <= "f"))


def digit_value(ch):
    """Return the value of a decimal digit."""
    return ord(ch) & 0x0F


def hex_value(ch):
    """Return the value of a hexadecimal digit."""
    return digit_value(ch) if is_digit(ch) else (ord(ch) & 0x0F) + 9


def skip_space(buf, pos=0):
    """Return the position of the first non-blank character at or after ``pos``."""
    while is_space(_char(buf, pos)):
        pos += 1
    return pos


def parse_string(buf, pos=0, sep=","):
    """Read a field up to ``sep`` or the line end, trimming surrounding blanks.

    Returns ``(text, end_position)``.
    """
    start = skip_space(buf, pos)
    end = start
    while True:
        ch = _char(buf, end)
        if ch == sep or is_line_end(ch):
            break
        end += 1
    text = buf[start:end].rstrip("".join(_SPACES))
    return text, end


def parse_text(buf, pos=0, sep=","):
    """Like :func:`parse_string`, but an empty field yields ``None``."""
    text, end = parse_string(buf, pos, sep)
    return (text if text else None), end


def _sign(a, b):
    return (a > b) - (a < b)


def string_compare(a, b):
    """Compare two strings; return -1, 0 or 1."""
    return _sign(a, b)


def string_compare_nc(a, b):
    """Compare two strings ignoring case; return -1, 0 or 1."""
    return _sign(a.lower(), b.lower())


def is_blank(value):
    """Return True for ``None`` or an empty string."""
    return value is None or value == ""