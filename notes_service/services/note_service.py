"""
Notes Service — Note Service (Business Logic)
===============================================

What:  Existence-gated lifecycle for named plain-text notes.
Why:   Keeps the rules (who may create, update, delete what) independent of
       HTTP and of the storage backend.
How:   Validates the note name, checks existence through the NoteStore,
       then performs the storage operation.
Who:   Called by route handlers; calls a NoteStore.
When:  For every note request.

Request Flow:
    ┌──────────┐    ┌─────────────┐    ┌─────────────┐    ┌──────────────┐
    │  Route   │───▶│  Validate   │───▶│  Existence  │───▶│  Store op    │
    │          │    │  name       │    │  check      │    │  (read/write)│
    └──────────┘    └─────────────┘    └─────────────┘    └──────────────┘

Concurrency:
    There is no lock between the existence check and the storage operation.
    Two concurrent creates for the same name can both pass the check and both
    succeed (the later write wins). This is accepted behavior: each request
    is a single best-effort attempt and no operation is retried.
"""

import logging
from typing import List

from notes_service.exceptions import NoteAlreadyExistsError, NoteNotFoundError
from notes_service.schemas.note import NoteItem
from notes_service.services.naming import validate_note_name
from notes_service.services.storage_base import NoteStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - get_note():    text of an existing note
        - list_notes():  every stored note with its text
        - create_note(): persist a new note, refusing existing names
        - update_note(): replace the text of an existing note
        - delete_note(): remove an existing note

    Error Handling Strategy:
        Lifecycle violations raise NoteNotFoundError / NoteAlreadyExistsError.
        Storage failures propagate as NoteStorageError from the store.
        Nothing is retried.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    async def get_note(self, name: str) -> str:
        """
        Return the text of note `name`.

        Raises:
            InvalidNoteNameError: Unsafe name (→ 400)
            NoteNotFoundError: No such note (→ 404)
        """
        validate_note_name(name)
        if not await self.store.exists(name):
            raise NoteNotFoundError(name)
        return await self.store.read(name)

    async def list_notes(self) -> List[NoteItem]:
        """
        Return every stored note, fully read into memory.

        Order follows the backend's enumeration order and is unspecified.
        """
        notes = [NoteItem(name=name, text=text) for name, text in await self.store.list_notes()]
        logger.debug("Listed %d notes", len(notes))
        return notes

    async def create_note(self, name: str, text: str) -> None:
        """
        Persist a new note.

        Raises:
            InvalidNoteNameError: Unsafe name (→ 400)
            NoteAlreadyExistsError: Name already taken (→ 400); existing
                content is left unchanged
        """
        validate_note_name(name)
        if await self.store.exists(name):
            raise NoteAlreadyExistsError(name)
        await self.store.write(name, text)
        logger.info("Note created: %s (%d chars)", name, len(text))

    async def update_note(self, name: str, text: str) -> None:
        """
        Replace the full text of an existing note.

        Raises:
            InvalidNoteNameError: Unsafe name (→ 400)
            NoteNotFoundError: No such note (→ 404); no file is created
        """
        validate_note_name(name)
        if not await self.store.exists(name):
            raise NoteNotFoundError(name)
        await self.store.write(name, text)
        logger.info("Note updated: %s (%d chars)", name, len(text))

    async def delete_note(self, name: str) -> None:
        """
        Remove an existing note.

        Raises:
            InvalidNoteNameError: Unsafe name (→ 400)
            NoteNotFoundError: No such note (→ 404)
        """
        validate_note_name(name)
        if not await self.store.exists(name):
            raise NoteNotFoundError(name)
        await self.store.delete(name)
        logger.info("Note deleted: %s", name)
