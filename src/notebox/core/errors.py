"""Exceptions raised by the note store and its persistence layer."""

from pathlib import Path


class NoteStoreError(Exception):
    """Base class for all note store errors."""


class NotFound(NoteStoreError):
    """No note with the requested name exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Note not found: {name!r}")


class AlreadyExists(NoteStoreError):
    """A note with the requested name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Note already exists: {name!r}")


class InvalidNoteError(NoteStoreError, ValueError):
    """Note fields are not acceptable (e.g. empty name)."""


class CorruptStoreError(NoteStoreError):
    """The notes file exists but does not hold a valid note collection.

    Operators must repair or move the file; the store never falls back to an
    empty collection when this is raised.
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Corrupt notes file {self.path}: {reason}")


class StorageIOError(NoteStoreError):
    """Reading or writing the notes file failed at the filesystem level."""

    def __init__(self, path: Path | str, action: str):
        self.path = Path(path)
        self.action = action
        super().__init__(f"Failed to {action} notes file {self.path}")


__all__ = [
    "AlreadyExists",
    "CorruptStoreError",
    "InvalidNoteError",
    "NoteStoreError",
    "NotFound",
    "StorageIOError",
]
