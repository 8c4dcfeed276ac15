"""
Notes Service — In-Memory Note Store
======================================

What:  A dict-backed NoteStore.
Why:   Lets NoteService and the HTTP surface be exercised without real disk.
Who:   Test fixtures; also usable for throwaway local runs.
"""

from typing import Dict, List, Tuple

from notes_service.exceptions import NoteNotFoundError
from notes_service.services.storage_base import NoteStore


class InMemoryNoteStore(NoteStore):
    """NoteStore keeping notes in a plain dict, insertion-ordered."""

    def __init__(self):
        self.notes: Dict[str, str] = {}

    async def exists(self, name: str) -> bool:
        return name in self.notes

    async def read(self, name: str) -> str:
        try:
            return self.notes[name]
        except KeyError:
            raise NoteNotFoundError(name)

    async def write(self, name: str, text: str) -> None:
        self.notes[name] = text

    async def delete(self, name: str) -> None:
        try:
            del self.notes[name]
        except KeyError:
            raise NoteNotFoundError(name)

    async def list_notes(self) -> List[Tuple[str, str]]:
        return list(self.notes.items())
