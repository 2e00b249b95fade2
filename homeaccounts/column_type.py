"""Types of the columns of a delimited record."""

from enum import Enum


class ColumnType(Enum):
    """The type of a column; IGNORE marks a column that is skipped."""

    STR = "STR"
    CSTR = "CSTR"
    INT32 = "INT32"
    INT64 = "INT64"
    BOOL = "BOOL"
    MONEY = "MONEY"
    DATE = "DATE"
    TIME = "TIME"
    IGNORE = "IGNORE"

    @classmethod
    def from_name(cls, name):
        """Look up a type by name, ignoring case; unknown names give IGNORE."""
        return cls.__members__.get(name.upper(), cls.IGNORE)

    def __str__(self):
        return self.value