"""Storage layer for Notebox - the JSON notes file."""

from notebox.storage.note_file import NoteFile

__all__ = ["NoteFile"]
