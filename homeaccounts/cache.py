"""An in-memory cache of sections backed by a store, loaded lazily."""

from dataclasses import dataclass

from .errors import NoFileSpecifiedError, SectionNotFoundError


def _to_bytes(content):
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


@dataclass
class _Section:
    content: bytes = b""
    read_dirty: bool = True
    write_dirty: bool = False


class Cache:
    """Sections kept in memory, read from the store on first use."""

    def __init__(self, store=None):
        self._sections = {}
        self._store = store

    @property
    def store(self):
        """The store the cache reads from and saves to, or None."""
        return self._store

    def get(self, name):
        """Return the content of a section, reading it from the store if needed."""
        try:
            section = self._sections[name]
        except KeyError as exc:
            raise SectionNotFoundError(name) from exc
        if section.read_dirty and self._store is not None:
            section.content = self._store.read_section(name)
        section.read_dirty = False
        return section.content

    def put(self, name, content):
        """Set the content of a section; it is written on the next save."""
        section = self._sections.setdefault(name, _Section())
        section.content = _to_bytes(content)
        section.write_dirty = True
        section.read_dirty = False

    def remove(self, name):
        """Remove a section from the cache and from the store."""
        if self._store is not None:
            self._store.delete_section(name)
        self._sections.pop(name, None)

    def attach(self, store):
        """Open ``store`` and use it, listing its sections for lazy reading."""
        if self._store is not None:
            self._store.close()
            self._store = None
        store.open()
        self._store = store
        for name in store.section_names():
            self._sections[name] = _Section()

    def save(self):
        """Write every changed section to the store."""
        if self._store is None:
            raise NoFileSpecifiedError()
        for name, section in self._sections.items():
            if section.write_dirty:
                self._store.write_section(name, section.content)
                section.write_dirty = False
        self._store.flush()

    def save_as(self, store):
        """Save to ``store``, creating it, unless it is the current store."""
        if self._store is not None:
            if self._store != store:
                for name, section in self._sections.items():
                    if section.read_dirty:
                        section.content = self._store.read_section(name)
                        section.read_dirty = False
                    section.write_dirty = True
                self._store.close()
                store.create()
                self._store = store
        else:
            store.create()
            self._store = store
        self.save()

    def __iter__(self):
        return iter(sorted(self._sections))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._store is not None:
            self._store.close()
        return False