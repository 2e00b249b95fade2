"""Catalog entries describing where a section lives in a store file."""

import struct
from dataclasses import dataclass, field

from .crypto import KEY_LEN

OFFSET_LEN = 8
SIZE_LEN = 8
NAME_LEN_LEN = 2

_HEADER = struct.Struct(f"<QQ{KEY_LEN}sH")


@dataclass
class SectionRecord:
    """Name, position, size and key of one stored section."""

    name: str = ""
    offset: int = 0
    size: int = 0
    key: bytes = field(default=bytes(KEY_LEN))

    def __post_init__(self):
        self.key = bytes(self.key)
        if len(self.key) != KEY_LEN:
            raise ValueError(f"key must be {KEY_LEN} bytes")

    def _name_bytes(self):
        return self.name.encode("utf-8")

    def write(self, stream):
        """Write the binary form of the record to ``stream``."""
        name = self._name_bytes()
        if len(name) >= 1 << (8 * NAME_LEN_LEN):
            raise ValueError("section name is too long")
        stream.write(_HEADER.pack(self.offset, self.size, self.key, len(name)))
        stream.write(name)

    @classmethod
    def read(cls, stream):
        """Read a record from ``stream``; return None if the data runs short."""
        header = stream.read(_HEADER.size)
        if len(header) < _HEADER.size:
            return None
        offset, size, key, name_len = _HEADER.unpack(header)
        name = stream.read(name_len)
        if len(name) < name_len:
            return None
        return cls(name.decode("utf-8"), offset, size, key)

    def byte_length(self):
        """Return the number of bytes :meth:`write` produces."""
        return OFFSET_LEN + SIZE_LEN + KEY_LEN + NAME_LEN_LEN + len(self._name_bytes())

    def __str__(self):
        return f"SectionRecord (OFF: {self.offset:>10}, LEN: {self.size:>10}, NAME: {self.name})"