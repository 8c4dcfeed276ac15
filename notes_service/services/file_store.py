"""
Notes Service — File-Backed Note Store
========================================

What:  Stores each note as a plain-text file `<name>.txt` in one directory.
Why:   The storage directory is the service's only persistent state.
How:   Async file I/O through aiofiles so disk access never blocks the event loop.
Who:   Created by the app factory; called by NoteService.

Directory Structure:
    cache/
    ├── alpha.txt
    ├── beta.txt
    └── shopping-list.txt

    Flat: no subdirectories, no metadata sidecar files. Anything in the
    directory that is not a regular `*.txt` file with a valid note name is
    ignored by list_notes().

Security Model:
    1. Names are allowlisted by NoteService before reaching this class
    2. _note_path() re-checks that the resolved path sits directly inside
       the storage root, so a bad name can never escape it

Consistency:
    None beyond the filesystem's. Writes truncate then write; a concurrent
    reader may observe a partially written file.
"""

import logging
import os
from pathlib import Path
from typing import List, Tuple, Union

import aiofiles
import aiofiles.os

from notes_service.exceptions import (
    InvalidNoteNameError,
    NoteNotFoundError,
    NoteStorageError,
)
from notes_service.services.naming import is_valid_note_name
from notes_service.services.storage_base import NoteStore

logger = logging.getLogger(__name__)

# What: Suffix appended to every note name to form its filename
NOTE_SUFFIX = ".txt"


class FileNoteStore(NoteStore):
    """
    NoteStore backed by a directory of UTF-8 text files.

    Files are opened with newline="" so content round-trips byte-for-byte
    (no \\r\\n translation on any platform).
    """

    def __init__(self, root: Union[str, Path]):
        """
        Initialize the store and create the storage directory.

        Args:
            root: Storage directory. Created with intermediate directories
                  if it does not exist.
        """
        self.root = Path(root).expanduser().resolve()
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info("FileNoteStore initialized with root=%s", self.root)

    def _note_path(self, name: str) -> Path:
        path = (self.root / f"{name}{NOTE_SUFFIX}").resolve()
        if path.parent != self.root:
            raise InvalidNoteNameError(name, reason="resolves outside the storage directory")
        return path

    async def exists(self, name: str) -> bool:
        return await aiofiles.os.path.isfile(self._note_path(name))

    async def read(self, name: str) -> str:
        path = self._note_path(name)
        try:
            async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
                return await f.read()
        except FileNotFoundError:
            raise NoteNotFoundError(name)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read note %s: %s", path, str(e))
            raise NoteStorageError(
                "read", name, context={"path": str(path), "error": str(e)}
            )

    async def write(self, name: str, text: str) -> None:
        path = self._note_path(name)
        try:
            # "w" truncates: the whole previous content is replaced
            async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
                await f.write(text)
        except OSError as e:
            logger.error("Failed to write note %s: %s", path, str(e))
            raise NoteStorageError(
                "write", name, context={"path": str(path), "os_error": str(e)}
            )
        logger.debug("Note written: %s (%d chars)", path.name, len(text))

    async def delete(self, name: str) -> None:
        path = self._note_path(name)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            raise NoteNotFoundError(name)
        except OSError as e:
            logger.error("Failed to delete note %s: %s", path, str(e))
            raise NoteStorageError(
                "delete", name, context={"path": str(path), "os_error": str(e)}
            )
        logger.debug("Note deleted: %s", path.name)

    async def list_notes(self) -> List[Tuple[str, str]]:
        """
        Read every note in the storage directory.

        Only regular `*.txt` files whose stem is a valid note name are listed,
        so every listed note can also be fetched by name. Files that cannot be
        read or decoded as UTF-8 are skipped with a warning; one bad file never
        fails the whole listing.

        Raises:
            NoteStorageError: The directory itself could not be listed
        """
        try:
            entries = await aiofiles.os.listdir(self.root)
        except OSError as e:
            logger.error("Failed to list storage directory %s: %s", self.root, str(e))
            raise NoteStorageError("list", context={"path": str(self.root), "os_error": str(e)})

        notes: List[Tuple[str, str]] = []
        for entry in entries:
            if not entry.endswith(NOTE_SUFFIX):
                continue
            name = entry[: -len(NOTE_SUFFIX)]
            if not is_valid_note_name(name):
                logger.warning("Skipping file with unusable note name: %r", entry)
                continue
            if not await aiofiles.os.path.isfile(self.root / entry):
                continue
            try:
                text = await self.read(name)
            except NoteNotFoundError:
                # Deleted between listdir() and read()
                logger.debug("Note vanished during listing: %s", entry)
                continue
            except NoteStorageError as e:
                logger.warning("Skipping unreadable note %s: %s", entry, e.context.get("error"))
                continue
            notes.append((name, text))
        return notes

    async def health_check(self) -> bool:
        return self.root.is_dir() and os.access(self.root, os.W_OK)
