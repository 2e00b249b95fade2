# homeaccounts

A library of building blocks for keeping household accounts:

* a small CSV dialect for typed records. It handles strings, integers,
  flags, money with a fixed number of decimals, dates and times.
* a *segmental* form of that dialect. A line starting with `#` opens a
  new segment, and the lines below it are that segment's items.
* section stores, which hold named blobs of data:
  * in a directory;
  * in a single encrypted file;
  * in an encrypted SQLite database.
* a cache that sits in front of a store. It reads sections lazily and
  writes back only what changed.

The encrypted stores compress every section with zlib and seal it with
AES-GCM. Each section has its own random key. That key is in turn
protected by a key derived from the password.

## Installation

```
pip install homeaccounts
```

The only runtime dependency is `cryptography`. To run the tests:

```
pip install "homeaccounts[test]"
pytest
```

## What it does not do

This is a library only. It has no command-line program and no graphical
application. Nothing is provided for browsing, entering or reporting
accounts: reading and writing records and sections is left to the code
that uses it.

## Stores

All stores derive from `homeaccounts.store.Store` and offer the same
operations:

| Method | What it does |
| --- | --- |
| `create()` | creates a new, empty store |
| `open()` | opens an existing store |
| `clear()` | removes the sections |
| `flush()` | writes pending changes out |
| `close()` | releases the store |
| `read_section(name)` | returns the content as `bytes` |
| `write_section(name, content)` | stores `bytes` or `str` content |
| `delete_section(name)` | removes one section |
| `section_names()` | lists the section names |
| `contains(name)` | also available as `name in store` |

Stores are context managers, and leaving the `with` block calls
`close()`.

### `homeaccounts.directory_store.DirectoryStore`

* Keeps one plain file per section under a directory.
* A section name may contain `/`, which creates sub-directories.
* Deleting a section also removes the directories it leaves empty.
* `create()` raises `DirCreateError` if the directory already exists.

### `homeaccounts.file_store.FileStore`

* Keeps all sections in one file, behind an encrypted catalogue at the
  start of the file.
* The catalogue is written by `flush()` and `close()`.
* `change_pass()` takes effect the next time the catalogue is saved.

### `homeaccounts.sqlite_store.Sqlite3Store`

* Keeps all sections as rows of an SQLite database.
* `create()` replaces any existing file of the same name.
* `open()` checks the password against a stub row.
* `change_pass()` re-encrypts every section key at once.

### Passwords and errors

The encrypted stores take a file name, a password and an IV string. Both
provide `change_pass(password)`. Opening either one with the wrong
password raises `homeaccounts.errors.BadPasswordError`.

All store errors derive from `homeaccounts.errors.StoreError`:

* `DirCreateError`
* `FileOpenError`
* `FileCorruptError`
* `BadPasswordError`
* `SectionNotFoundError`
* `NoFileSpecifiedError`

### Example

```python
from homeaccounts.sqlite_store import Sqlite3Store

password = "password"

with Sqlite3Store("accounts.ha", password, "HomeAccounts") as store:
    store.create()
    store.write_section("2024/groceries", "1,bread,2.50\n2,milk,1.20\n")

with Sqlite3Store("accounts.ha", password, "HomeAccounts") as store:
    store.open()
    print(store.read_section("2024/groceries").decode("utf-8"))
```

## Cache

`homeaccounts.cache.Cache` keeps sections in memory in front of a store:

```python
from homeaccounts.cache import Cache
from homeaccounts.file_store import FileStore

password = "password"

with Cache() as cache:
    cache.put("a1", "This is a test.")
    cache.put("b2", "second")
    cache.save_as(FileStore("accounts.dat", password, "HomeAccounts"))

with Cache() as cache:
    cache.attach(FileStore("accounts.dat", password, "HomeAccounts"))
    print(cache.get("a1"))   # b'This is a test.'
    for name in cache:       # names in sorted order
        print(name)
```

How the cache behaves:

* `put()` stores content as bytes.
* `get()` returns bytes and raises `SectionNotFoundError` for an unknown
  name.
* `remove()` deletes the section from the store as well.
* `attach()` opens the store and lists its sections without reading them.
* `save()` writes only the sections that changed, then flushes the store.
  It raises `NoFileSpecifiedError` when no store is attached.
* `save_as()` creates the new store and writes every section to it,
  unless the new store equals the current one.
* `store` gives the current store.
* Leaving a `with` block closes the store.

## CSV records

### Column types

`homeaccounts.column_type.ColumnType` names the column kinds:

* `STR`
* `CSTR`: text where an empty field reads as `None`
* `INT32`
* `INT64`
* `BOOL`
* `MONEY`
* `DATE`
* `TIME`
* `IGNORE`: a column that is skipped

`ColumnType.from_name()` matches names without regard to case. Any
unknown name gives `IGNORE`.

### Options

`homeaccounts.csv_parser.ParserOptions` holds the separators and the
money precision:

| Option | Meaning | Default |
| --- | --- | --- |
| `sep` | field separator | `,` |
| `num_sep` | thousands separator | ` ` |
| `date_sep` | date separator | `-` |
| `money_prec` | decimals of money | `2` |

`money_scale` is derived from `money_prec`.

### Parsing and writing records

`homeaccounts.csv_parser.Parser(types, options)` handles records. A
record is a list with one value per column. Its methods are:

* `new_record()`
* `parse_line(line)`, which returns `(record, position)`
* `parse_field()`
* `format_line(record)`
* `format_field()`
* `get_text()`

How fields are read:

* Blanks around a field are ignored.
* Money such as `1 030.47` is read as an exact integer amount of cents.
* A malformed field raises `homeaccounts.text.ParseError`.

Module-level helpers handle header-like lines:

* `parse_count`
* `parse_strings`
* `parse_types`
* `format_strings`
* `format_types`

```python
from homeaccounts.column_type import ColumnType
from homeaccounts.csv_parser import Parser

parser = Parser([ColumnType.INT32, ColumnType.CSTR, ColumnType.MONEY])
record, _ = parser.parse_line("1, bread, 2.50")
print(record)                      # [1, 'bread', 250]
print(parser.format_line(record))  # 1,bread,2.50
```

### Segmental documents

`homeaccounts.segmental.SegmentalParser(item_parser, segment_parser)`
reads a document such as:

```
#Groceries
1,bread,2.50
2,milk,1.20
#Rent
3,flat,800.00
```

* `parse(lines, segments)` fills a `homeaccounts.segments.Segments` and
  returns the number of lines read.
  * Blank lines are skipped.
  * Items that come before any header go into a segment with an empty
    header.
  * A bad line raises `ParseError`, with the line number in its `line`
    attribute.
* `output(segments)` yields the lines back, without line ends.

`Segments` holds `Segment` objects and `Segment` holds `Item` objects.
Each of them keeps its record in `data`.

### Field helpers

Helpers for single fields live in three modules:

* `homeaccounts.text`: character classes and text fields.
* `homeaccounts.numbers`: integers, flags and money.
* `homeaccounts.dates`: dates and times.

Dates are stored as Julian day numbers, so `jdn(1970, 1, 1) == 2440588`.
Times are stored as seconds since midnight.