"""Notebox core library - note store, types and errors."""

from notebox.core.errors import (
    AlreadyExists,
    CorruptStoreError,
    InvalidNoteError,
    NoteStoreError,
    NotFound,
    StorageIOError,
)
from notebox.core.types import Note

__all__ = [
    # Types
    "Note",
    # Errors
    "AlreadyExists",
    "CorruptStoreError",
    "InvalidNoteError",
    "NoteStoreError",
    "NotFound",
    "StorageIOError",
]
