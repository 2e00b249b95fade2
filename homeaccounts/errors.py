"""Errors raised by section stores."""


class StoreError(RuntimeError):
    """Base class of store errors."""


class DirCreateError(StoreError):
    """A directory could not be created."""

    def __init__(self, dir_name):
        super().__init__(f'Cannot create dir "{dir_name}".')
        self.dir_name = dir_name


class FileOpenError(StoreError):
    """A file could not be opened or created."""

    def __init__(self, file_name):
        super().__init__(f'Cannot open/create file "{file_name}".')
        self.file_name = file_name


class FileCorruptError(StoreError):
    """A file's contents are damaged."""


class BadPasswordError(StoreError):
    """Data could not be decrypted with the given password."""

    def __init__(self):
        super().__init__("Bad password.")


class SectionNotFoundError(StoreError):
    """A named section does not exist."""

    def __init__(self, name):
        super().__init__(f'Section "{name}" is not found.')
        self.name = name


class NoFileSpecifiedError(StoreError):
    """There is no store to save to."""

    def __init__(self):
        super().__init__("File to save is not specified.")