"""An encrypted store that keeps all sections in one file behind a catalog.

The file begins with the record of the catalog section.  The catalog holds
the record of every other section: where it lies in the file, how long it
is and the key it is encrypted with.  The catalog is encrypted with the key
derived from the password, which is never written to the file.
"""

import io
from dataclasses import replace

from .crypto import KEY_LEN, DecryptionError, decrypt, encrypt, get_key, make_iv, new_key
from .errors import BadPasswordError, FileCorruptError, FileOpenError, SectionNotFoundError
from .section_record import SectionRecord
from .store import CryptoStore


class FileStore(CryptoStore):
    """Compressed, encrypted sections in a single file."""

    CATALOG_NAME = "__catalog__"

    def __init__(self, file_name, password, iv):
        self.file_name = str(file_name)
        self._iv = make_iv(iv)
        self._key = get_key(password)
        self._file = None
        self._catalog = {}

    def create(self):
        """Create or truncate the file and start with an empty catalog."""
        try:
            self._file = open(self.file_name, "w+b")
        except OSError as exc:
            raise FileOpenError(self.file_name) from exc
        self.clear()

    def open(self):
        """Open an existing file and load its catalog."""
        try:
            self._file = open(self.file_name, "r+b")
        except OSError as exc:
            raise FileOpenError(self.file_name) from exc
        self._load_catalog()

    def clear(self):
        self._catalog = {
            self.CATALOG_NAME: SectionRecord(self.CATALOG_NAME, key=self._key),
        }

    def flush(self):
        """Write the catalog and flush the file."""
        self._save_catalog()
        self._file.flush()

    def close(self):
        """Flush and close the file if it is open."""
        if self._file is not None and not self._file.closed:
            try:
                self.flush()
            finally:
                self._file.close()
        self._file = None

    def delete_section(self, name):
        self._catalog.pop(name, None)

    def section_names(self):
        return [name for name in self._catalog if name != self.CATALOG_NAME]

    def contains(self, name):
        return name in self._catalog

    def __eq__(self, other):
        if not isinstance(other, FileStore):
            return False
        return self.file_name == other.file_name

    def __hash__(self):
        return hash(self.file_name)

    def change_pass(self, password):
        """Use a new password; it takes effect when the catalog is next saved."""
        self._key = get_key(password)

    def __str__(self):
        lines = [f'Catalog of file "{self.file_name}":']
        lines.extend(str(record) for record in self._catalog.values())
        return "\n".join(lines) + "\n"

    def _decrypt_section(self, name):
        try:
            record = self._catalog[name]
        except KeyError as exc:
            raise SectionNotFoundError(name) from exc
        self._file.seek(record.offset)
        data = self._file.read(record.size)
        if len(data) < record.size:
            raise FileCorruptError("Section is too short.")
        try:
            return decrypt(data, record.key, self._iv)
        except DecryptionError as exc:
            raise BadPasswordError() from exc

    def _encrypt_section(self, name, content):
        record = self._catalog.get(name)
        if record is None:
            record = SectionRecord(name, key=new_key())
            self._catalog[name] = record
        output = encrypt(content, record.key, self._iv)
        offset = self._find_slot(len(output))
        record.offset = offset
        record.size = len(output)
        self._file.seek(offset)
        self._file.write(output)

    def _load_catalog(self):
        self._catalog = {}
        self._file.seek(0)
        header = SectionRecord.read(self._file)
        if header is None:
            raise FileCorruptError("CATALOG is too short.")
        header.key = self._key
        self._catalog[self.CATALOG_NAME] = header
        content = io.BytesIO(self.read_section(self.CATALOG_NAME))
        while (record := SectionRecord.read(content)) is not None:
            self._catalog[record.name] = record

    def _save_catalog(self):
        content = io.BytesIO()
        for name, record in self._catalog.items():
            if name == self.CATALOG_NAME:
                record.key = self._key
                continue
            record.write(content)
        self.write_section(self.CATALOG_NAME, content.getvalue())
        # The key of the catalog is never written to the file.
        header = replace(self._catalog[self.CATALOG_NAME], key=bytes(KEY_LEN))
        self._file.seek(0)
        header.write(self._file)

    def _find_slot(self, size):
        records = sorted(
            (record for name, record in self._catalog.items() if name != self.CATALOG_NAME),
            key=lambda record: record.offset,
        )
        offset = self._catalog[self.CATALOG_NAME].byte_length()
        for record in records:
            if record.size == 0:
                continue
            if record.offset >= offset + size:
                break
            offset = record.offset + record.size
        return offset