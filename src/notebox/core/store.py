"""Thread-safe note store backed by a JSON file."""

import logging
from pathlib import Path
from threading import Lock

from notebox.core.config import NOTES_CACHE_PATH
from notebox.core.errors import AlreadyExists, InvalidNoteError, NotFound
from notebox.core.types import Note
from notebox.storage.note_file import NoteFile

logger = logging.getLogger(__name__)


class NoteStore:
    """Owns the note collection and keeps it in step with the notes file.

    Every operation, reads included, runs under one lock that also covers the
    file write, so a check-then-act can never interleave with another
    request and memory never runs ahead of disk.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        note_file: NoteFile | None = None,
    ):
        """
        Initialize note store and load the collection.

        Args:
            path: Notes file path (defaults to NOTES_CACHE_PATH)
            note_file: Prebuilt NoteFile, takes precedence over path

        Raises:
            CorruptStoreError: If the existing file is not a note collection
            StorageIOError: If the file cannot be read or created
        """
        self.note_file = note_file or NoteFile(path or NOTES_CACHE_PATH)
        self._lock = Lock()
        # name -> text, insertion ordered
        self._notes: dict[str, str] = {
            note.name: note.text for note in self.note_file.load()
        }

    @property
    def path(self) -> Path:
        return self.note_file.path

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def get_all(self) -> list[Note]:
        """Return a snapshot of all notes in insertion order."""
        with self._lock:
            return [Note(name=name, text=text) for name, text in self._notes.items()]

    def get_by_name(self, name: str) -> Note:
        """
        Get a single note.

        Raises:
            NotFound: If no note has this exact name
        """
        with self._lock:
            if name not in self._notes:
                raise NotFound(name)
            return Note(name=name, text=self._notes[name])

    def create(self, name: str, text: str = "") -> Note:
        """
        Add a new note and persist it.

        Raises:
            InvalidNoteError: If name is empty
            AlreadyExists: If a note with this name exists
            StorageIOError: If the file write fails (nothing is added)
        """
        if not name:
            raise InvalidNoteError("Note name must not be empty")

        with self._lock:
            if name in self._notes:
                raise AlreadyExists(name)
            notes = dict(self._notes)
            notes[name] = text
            self._commit(notes)

        logger.info("Created note %r", name)
        return Note(name=name, text=text)

    def update(self, name: str, text: str) -> Note:
        """
        Replace the text of an existing note and persist it.

        Raises:
            NotFound: If no note has this name
            StorageIOError: If the file write fails (text is unchanged)
        """
        with self._lock:
            if name not in self._notes:
                raise NotFound(name)
            notes = dict(self._notes)
            notes[name] = text
            self._commit(notes)

        logger.info("Updated note %r", name)
        return Note(name=name, text=text)

    def delete(self, name: str) -> None:
        """
        Remove a note and persist the change.

        Raises:
            NotFound: If no note has this name
            StorageIOError: If the file write fails (note is kept)
        """
        with self._lock:
            if name not in self._notes:
                raise NotFound(name)
            notes = dict(self._notes)
            del notes[name]
            self._commit(notes)

        logger.info("Deleted note %r", name)

    def _commit(self, notes: dict[str, str]) -> None:
        """Write notes to disk, then make them live. Caller holds the lock."""
        self.note_file.save(
            Note(name=name, text=text) for name, text in notes.items()
        )
        self._notes = notes


# Default instance
_note_store: NoteStore | None = None
_note_store_lock = Lock()


def get_note_store() -> NoteStore:
    """Get or create the default note store instance."""
    global _note_store
    if _note_store is None:
        with _note_store_lock:
            if _note_store is None:
                _note_store = NoteStore()
    return _note_store


def set_note_store(store: NoteStore | None) -> None:
    """Set the default note store instance (for testing and the CLI)."""
    global _note_store
    _note_store = store
