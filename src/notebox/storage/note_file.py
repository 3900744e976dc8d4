"""JSON file persistence for the note collection."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable

from notebox.core.errors import CorruptStoreError, StorageIOError
from notebox.core.types import Note

logger = logging.getLogger(__name__)


class NoteFile:
    """Loads and atomically saves the whole note collection as one JSON array."""

    def __init__(self, path: Path | str):
        """
        Initialize note file.

        Args:
            path: Location of the JSON notes file. Its directory must exist.
        """
        self.path = Path(path)

    def load(self) -> list[Note]:
        """
        Read the note collection from disk.

        A missing file is created holding an empty collection.

        Returns:
            Notes in file order

        Raises:
            CorruptStoreError: If the file content is not a list of notes
            StorageIOError: If the file cannot be read or created
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            self.save([])
            logger.info("Cache file created at %s", self.path)
            return []
        except OSError as exc:
            logger.error("Failed to read %s", self.path, exc_info=True)
            raise StorageIOError(self.path, "read") from exc

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise CorruptStoreError(self.path, f"not valid JSON ({exc})") from exc

        notes = self._decode(data)
        logger.info("Cache file found at %s (%d notes)", self.path, len(notes))
        return notes

    def _decode(self, data: Any) -> list[Note]:
        if not isinstance(data, list):
            raise CorruptStoreError(
                self.path, f"expected a JSON array, got {type(data).__name__}"
            )

        notes: list[Note] = []
        seen: set[str] = set()
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise CorruptStoreError(self.path, f"entry {index} is not an object")
            name = record.get("name")
            text = record.get("text")
            if not isinstance(name, str) or not name:
                raise CorruptStoreError(
                    self.path, f"entry {index} has no valid 'name'"
                )
            if not isinstance(text, str):
                raise CorruptStoreError(
                    self.path, f"entry {index} has no valid 'text'"
                )
            if name in seen:
                raise CorruptStoreError(self.path, f"duplicate note name {name!r}")
            seen.add(name)
            notes.append(Note(name=name, text=text))
        return notes

    def save(self, notes: Iterable[Note]) -> None:
        """
        Replace the file contents with the given collection.

        Content goes to a temp file in the same directory, is fsynced, then
        renamed over the target, so readers and restarts only ever see the
        old or the new document.

        Raises:
            StorageIOError: If any step of the write fails
        """
        payload = json.dumps(
            [note.model_dump() for note in notes], ensure_ascii=False, indent=2
        )
        directory = self.path.parent

        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(payload)
                tmp.write("\n")
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as exc:
            logger.error("Failed to write %s", self.path, exc_info=True)
            raise StorageIOError(self.path, "write") from exc
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

        # Rename is done; a directory sync failure is not a write failure.
        try:
            self._sync_directory(directory)
        except OSError:
            logger.warning(
                "Could not fsync directory %s after writing %s",
                directory,
                self.path,
                exc_info=True,
            )

    @staticmethod
    def _sync_directory(directory: Path) -> None:
        """Flush the rename to disk (POSIX only)."""
        if os.name != "posix":
            return
        fd = os.open(directory, os.O_RDONLY)
        try:
            os.fsync(fd)
        finally:
            os.close(fd)
