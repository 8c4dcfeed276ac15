"""
Notes Service — Abstract Note Storage Interface
=================================================

What:  Abstract base class defining the contract for note storage backends.
Why:   NoteService depends on this interface instead of the filesystem, so the
       lifecycle rules can be tested against an in-memory fake without
       touching real disk.
How:   Concrete implementations inherit from NoteStore and implement the raw
       capabilities below. They do NOT enforce lifecycle rules (create-only-if-
       absent, update-only-if-present). That is NoteService's job.
Who:   Called by NoteService.

Implementations:
    - FileNoteStore: one <name>.txt file per note in a directory (production)
    - InMemoryNoteStore: dict-backed store (tests)
"""

from abc import ABC, abstractmethod
from typing import List, Tuple


class NoteStore(ABC):
    """
    Abstract interface for persisting named plain-text notes.

    Contract:
        - Names passed in have already been validated by NoteService
        - write() replaces the whole content (no partial updates)
        - read() and delete() raise NoteNotFoundError for an absent note
        - Backend-specific failures are wrapped in NoteStorageError
        - No method takes a lock; concurrent callers are not serialized
    """

    @abstractmethod
    async def exists(self, name: str) -> bool:
        """Return True if a note called `name` is stored."""
        ...

    @abstractmethod
    async def read(self, name: str) -> str:
        """
        Return the full text of the note.

        Raises:
            NoteNotFoundError: No such note.
            NoteStorageError: The backend failed to read it.
        """
        ...

    @abstractmethod
    async def write(self, name: str, text: str) -> None:
        """
        Store `text` under `name`, replacing any previous content.

        Raises:
            NoteStorageError: The backend failed to write it.
        """
        ...

    @abstractmethod
    async def delete(self, name: str) -> None:
        """
        Remove the note.

        Raises:
            NoteNotFoundError: No such note.
            NoteStorageError: The backend failed to remove it.
        """
        ...

    @abstractmethod
    async def list_notes(self) -> List[Tuple[str, str]]:
        """
        Return (name, text) for every stored note.

        Order is whatever the backend enumerates in; callers must not rely on it.
        """
        ...

    async def health_check(self) -> bool:
        """Return True if the backend can currently accept writes."""
        return True
