"""An encrypted store that keeps sections as rows of an SQLite database.

Every row holds the section's own random key, encrypted with the key derived
from the password, and the section's data, encrypted with its own key.  A
stub row lets :meth:`Sqlite3Store.open` check the password.
"""

import sqlite3
from pathlib import Path

from .crypto import KEY_LEN, DecryptionError, decrypt, encrypt, get_key, make_iv, new_key
from .errors import BadPasswordError, FileOpenError, SectionNotFoundError, StoreError
from .store import CryptoStore

_CREATE_SQL = """
CREATE TABLE files(
    name TEXT PRIMARY KEY,
    key BLOB,
    data BLOB
) WITHOUT ROWID
"""
_GET_SQL = "SELECT key, data FROM files WHERE name = ?"
_PUT_SQL = """
INSERT INTO files(name, key, data) VALUES(?, ?, ?)
ON CONFLICT(name) DO
UPDATE SET key = excluded.key, data = excluded.data
"""
_CHECK_TEXT = b"The journey of a thousand miles begins with one step."


class Sqlite3Store(CryptoStore):
    """Compressed, encrypted sections in an SQLite database file."""

    CHECK_STUB = "__check_stub__"

    def __init__(self, file_name, password, iv):
        self.file_name = str(file_name)
        self._iv = make_iv(iv)
        self._key = get_key(password)
        self._old_key = bytes(KEY_LEN)
        self._db = None

    def _connection(self):
        if self._db is None:
            raise StoreError(f'Store "{self.file_name}" is not open.')
        return self._db

    def create(self):
        """Create a new database, replacing any file of the same name."""
        self.close()
        path = Path(self.file_name)
        try:
            if path.exists():
                path.unlink()
            self._db = sqlite3.connect(self.file_name, isolation_level=None)
            self._db.execute(_CREATE_SQL)
        except (OSError, sqlite3.Error) as exc:
            self.close()
            raise FileOpenError(self.file_name) from exc
        self._register_function()
        self._encrypt_section(self.CHECK_STUB, _CHECK_TEXT)

    def open(self):
        """Open an existing database and check the password against it."""
        self.close()
        uri = Path(self.file_name).resolve().as_uri() + "?mode=rw"
        try:
            self._db = sqlite3.connect(uri, uri=True, isolation_level=None)
            self._register_function()
            self._decrypt_section(self.CHECK_STUB)
        except sqlite3.Error as exc:
            self.close()
            raise FileOpenError(self.file_name) from exc
        except (BadPasswordError, SectionNotFoundError):
            self.close()
            raise

    def clear(self):
        """Remove every section, keeping the password check."""
        self._connection().execute("DELETE FROM files WHERE name <> ?", (self.CHECK_STUB,))

    def close(self):
        """Close the database connection if it is open."""
        if self._db is not None:
            self._db.close()
            self._db = None

    def delete_section(self, name):
        self._connection().execute("DELETE FROM files WHERE name = ?", (name,))

    def section_names(self):
        rows = self._connection().execute(
            "SELECT name FROM files WHERE name <> ? ORDER BY name", (self.CHECK_STUB,)
        )
        return [name for (name,) in rows]

    def contains(self, name):
        row = self._connection().execute("SELECT 1 FROM files WHERE name = ?", (name,)).fetchone()
        return row is not None

    def __eq__(self, other):
        if not isinstance(other, Sqlite3Store):
            return False
        return self.file_name == other.file_name

    def __hash__(self):
        return hash(self.file_name)

    def change_pass(self, password):
        """Re-encrypt every section key with a key derived from ``password``."""
        db = self._connection()
        self._old_key = self._key
        self._key = get_key(password)
        try:
            db.execute("UPDATE files SET key = RECRYPT(key)")
        except sqlite3.Error as exc:
            self._key = self._old_key
            raise StoreError(f"Failed to change the password: {exc}") from exc

    def _recrypt(self, value):
        return encrypt(decrypt(value, self._old_key, self._iv), self._key, self._iv)

    def _register_function(self):
        self._connection().create_function("RECRYPT", 1, self._recrypt, deterministic=True)

    def _decrypt_section(self, name):
        row = self._connection().execute(_GET_SQL, (name,)).fetchone()
        if row is None:
            raise SectionNotFoundError(name)
        encrypted_key, data = row
        try:
            key = decrypt(encrypted_key, self._key, self._iv)
            return decrypt(data, key, self._iv)
        except DecryptionError as exc:
            raise BadPasswordError() from exc

    def _encrypt_section(self, name, content):
        key = new_key()
        encrypted_key = encrypt(key, self._key, self._iv)
        data = encrypt(content, key, self._iv)
        self._connection().execute(_PUT_SQL, (name, encrypted_key, data))