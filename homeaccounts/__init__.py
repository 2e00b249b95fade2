"""Household accounts: typed and segmental CSV records, section stores and a cache."""

__version__ = "0.1.0"

__all__ = [
    "cache",
    "column_type",
    "crypto",
    "csv_parser",
    "dates",
    "directory_store",
    "errors",
    "file_store",
    "numbers",
    "section_record",
    "segmental",
    "segments",
    "sqlite_store",
    "store",
    "text",
]