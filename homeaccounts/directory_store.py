"""A store that keeps each section as a plain file inside a directory."""

import shutil
from pathlib import Path

from .errors import DirCreateError, SectionNotFoundError
from .store import Store


def _to_bytes(content):
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def _is_empty_dir(path):
    return path.is_dir() and not any(path.iterdir())


class DirectoryStore(Store):
    """Sections are files below a root directory; names may contain ``/``."""

    def __init__(self, dir_name):
        self.dir_name = Path(dir_name)

    def _path(self, name):
        return self.dir_name / name

    def create(self):
        """Create the root directory; raise DirCreateError if it already exists."""
        if self.dir_name.is_dir():
            raise DirCreateError(str(self.dir_name))
        try:
            self.dir_name.mkdir(parents=True)
        except OSError as exc:
            raise DirCreateError(str(self.dir_name)) from exc

    def open(self):
        """Nothing needs to be done to open a directory store."""

    def clear(self):
        """Remove everything inside the root directory."""
        for entry in self.dir_name.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()

    def read_section(self, name):
        try:
            return self._path(name).read_bytes()
        except OSError as exc:
            raise SectionNotFoundError(name) from exc

    def write_section(self, name, content):
        path = self._path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(_to_bytes(content))

    def delete_section(self, name):
        """Remove a section and any directories it leaves empty."""
        path = self._path(name)
        while True:
            if path.is_dir() and not path.is_symlink():
                path.rmdir()
            else:
                path.unlink(missing_ok=True)
            path = path.parent
            if path == self.dir_name or not _is_empty_dir(path):
                break

    def section_names(self):
        return sorted(
            entry.relative_to(self.dir_name).as_posix()
            for entry in self.dir_name.rglob("*")
            if entry.is_file()
        )

    def contains(self, name):
        return self._path(name).is_file()

    def __eq__(self, other):
        if not isinstance(other, DirectoryStore):
            return False
        return self.dir_name == other.dir_name

    def __hash__(self):
        return hash(self.dir_name)