"""
Notes Service — Note Service Unit Tests
=========================================

What:  Tests for NoteService lifecycle rules and name validation.
How:   Runs against InMemoryNoteStore (no disk needed).

What we test:
    ✅ Create → get round-trip
    ✅ Duplicate create is rejected and leaves content unchanged
    ✅ Update / delete of a missing note raise NoteNotFoundError
    ✅ List returns every note
    ✅ Unsafe names are rejected before the store is touched
    ✅ Concurrent creates are NOT serialized
"""

import asyncio

import pytest

from notes_service.exceptions import (
    InvalidNoteNameError,
    NoteAlreadyExistsError,
    NoteNotFoundError,
)
from notes_service.services.memory_store import InMemoryNoteStore
from notes_service.services.naming import MAX_NOTE_NAME_LENGTH, validate_note_name
from notes_service.services.note_service import NoteService


class TestNoteLifecycle:
    """Create / get / update / delete rules."""

    @pytest.mark.asyncio
    async def test_create_then_get_returns_text(self, note_service):
        await note_service.create_note("alpha", "hello")
        assert await note_service.get_note("alpha") == "hello"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text",
        ["", "line one\nline two\r\n", "naïve café — 日本語 🎉", "x" * 100_000],
    )
    async def test_round_trip_preserves_text_exactly(self, note_service, text):
        await note_service.create_note("note", text)
        assert await note_service.get_note("note") == text

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, note_service):
        with pytest.raises(NoteNotFoundError):
            await note_service.get_note("ghost")

    @pytest.mark.asyncio
    async def test_duplicate_create_rejected_and_content_kept(self, note_service):
        await note_service.create_note("beta", "text1")

        with pytest.raises(NoteAlreadyExistsError):
            await note_service.create_note("beta", "text2")

        assert await note_service.get_note("beta") == "text1"

    @pytest.mark.asyncio
    async def test_update_replaces_text(self, note_service):
        await note_service.create_note("alpha", "hello")
        await note_service.update_note("alpha", "world")
        assert await note_service.get_note("alpha") == "world"

    @pytest.mark.asyncio
    async def test_update_missing_raises_and_creates_nothing(self, note_service, memory_store):
        with pytest.raises(NoteNotFoundError):
            await note_service.update_note("ghost", "boo")
        assert memory_store.notes == {}

    @pytest.mark.asyncio
    async def test_delete_then_get_raises_not_found(self, note_service):
        await note_service.create_note("alpha", "hello")
        await note_service.delete_note("alpha")
        with pytest.raises(NoteNotFoundError):
            await note_service.get_note("alpha")

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, note_service):
        with pytest.raises(NoteNotFoundError):
            await note_service.delete_note("ghost")


class TestNoteListing:
    """list_notes() returns every stored note."""

    @pytest.mark.asyncio
    async def test_list_empty(self, note_service):
        assert await note_service.list_notes() == []

    @pytest.mark.asyncio
    async def test_list_returns_all_created_notes(self, note_service):
        expected = {"c": "three", "a": "one", "b": "two", "d": ""}
        for name, text in expected.items():
            await note_service.create_note(name, text)

        notes = await note_service.list_notes()

        assert len(notes) == len(expected)
        assert {n.name: n.text for n in notes} == expected

    @pytest.mark.asyncio
    async def test_list_reflects_deletes(self, note_service):
        await note_service.create_note("a", "1")
        await note_service.create_note("b", "2")
        await note_service.delete_note("a")

        notes = await note_service.list_notes()
        assert [n.name for n in notes] == ["b"]


class TestNoteNameValidation:
    """Names must be a single safe filename component."""

    @pytest.mark.parametrize(
        "name",
        ["alpha", "Note_1", "shopping-list", "v1.2", "a..b", "_private", "x" * MAX_NOTE_NAME_LENGTH],
    )
    def test_valid_names_accepted(self, name):
        assert validate_note_name(name) == name

    @pytest.mark.parametrize(
        "name",
        [
            "",
            ".",
            "..",
            ".hidden",
            "../etc/passwd",
            "a/b",
            "a\\b",
            "with space",
            "tab\tname",
            "nul\x00byte",
            "trailing\n",
            "x" * (MAX_NOTE_NAME_LENGTH + 1),
        ],
    )
    def test_unsafe_names_rejected(self, name):
        with pytest.raises(InvalidNoteNameError):
            validate_note_name(name)

    @pytest.mark.asyncio
    async def test_every_operation_validates_name(self, note_service, memory_store):
        """No operation reaches the store with an unsafe name."""
        with pytest.raises(InvalidNoteNameError):
            await note_service.create_note("../x", "text")
        with pytest.raises(InvalidNoteNameError):
            await note_service.get_note("../x")
        with pytest.raises(InvalidNoteNameError):
            await note_service.update_note("../x", "text")
        with pytest.raises(InvalidNoteNameError):
            await note_service.delete_note("../x")
        assert memory_store.notes == {}


class _GatedStore(InMemoryNoteStore):
    """Holds every exists() call until `waiters` callers are inside it."""

    def __init__(self, waiters: int):
        super().__init__()
        self.waiters = waiters
        self.checks = 0
        self.gate = asyncio.Event()

    async def exists(self, name: str) -> bool:
        result = await super().exists(name)
        self.checks += 1
        if self.checks >= self.waiters:
            self.gate.set()
        await self.gate.wait()
        return result


class TestNoSerialization:
    """Concurrent requests for the same name are not coordinated."""

    @pytest.mark.asyncio
    async def test_concurrent_creates_both_pass_existence_check(self):
        """
        Both creates see "absent" and both succeed; the later write wins.

        If create_note held a per-name lock, the second caller could never
        reach exists() while the first waits at the gate, and wait_for
        would time out.
        """
        store = _GatedStore(waiters=2)
        service = NoteService(store)

        await asyncio.wait_for(
            asyncio.gather(
                service.create_note("race", "first"),
                service.create_note("race", "second"),
            ),
            timeout=2,
        )

        assert store.checks == 2
        assert store.notes["race"] in {"first", "second"}
