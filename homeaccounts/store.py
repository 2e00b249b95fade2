"""Abstract stores of named sections of binary data."""

from abc import ABC, abstractmethod

from .crypto import compress, decompress


class Store(ABC):
    """A container of named sections."""

    @abstractmethod
    def create(self):
        """Create a new, empty store, replacing what is there."""

    @abstractmethod
    def open(self):
        """Open an existing store."""

    @abstractmethod
    def clear(self):
        """Remove all sections."""

    def flush(self):
        """Write pending changes out."""

    def close(self):
        """Release the resources held by the store."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @abstractmethod
    def read_section(self, name):
        """Return the contents of a section as bytes."""

    @abstractmethod
    def write_section(self, name, content):
        """Store ``content`` (bytes or text) under ``name``."""

    @abstractmethod
    def delete_section(self, name):
        """Remove a section."""

    @abstractmethod
    def section_names(self):
        """Return the names of all sections."""

    @abstractmethod
    def contains(self, name):
        """Return True if a section with ``name`` exists."""

    @abstractmethod
    def __eq__(self, other):
        """Return True if both stores refer to the same place."""

    def __contains__(self, name):
        return self.contains(name)


class CryptoStore(Store):
    """A store that keeps sections compressed and encrypted."""

    def read_section(self, name):
        return decompress(self._decrypt_section(name))

    def write_section(self, name, content):
        self._encrypt_section(name, compress(content))

    @abstractmethod
    def change_pass(self, password):
        """Change the password protecting the store."""

    @abstractmethod
    def _decrypt_section(self, name):
        """Return the decrypted, still compressed, bytes of a section."""

    @abstractmethod
    def _encrypt_section(self, name, content):
        """Encrypt and store compressed bytes under ``name``."""