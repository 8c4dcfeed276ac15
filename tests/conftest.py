"""
Notes Service — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (stores, services, API clients).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── temp_storage: Temporary notes directory
    ├── test_settings: Settings pointing at temp_storage
    ├── memory_store: InMemoryNoteStore
    ├── note_service: NoteService over memory_store
    ├── test_client: HTTPX AsyncClient → app over a FileNoteStore in temp_storage
    └── memory_client: HTTPX AsyncClient → app over memory_store
"""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
# Why: The default Settings() singleton must not point at ./cache
os.environ["NOTES_CACHE_DIR"] = tempfile.mkdtemp(prefix="notes_service_test_")
os.environ["NOTES_LOG_LEVEL"] = "WARNING"

from notes_service.config import Settings  # noqa: E402
from notes_service.main import create_app  # noqa: E402
from notes_service.services.memory_store import InMemoryNoteStore  # noqa: E402
from notes_service.services.note_service import NoteService  # noqa: E402


@pytest.fixture
def temp_storage(tmp_path):
    """A fresh, not-yet-created storage directory path for each test."""
    return tmp_path / "cache"


@pytest.fixture
def test_settings(temp_storage):
    return Settings(cache_dir=str(temp_storage), log_level="WARNING")


@pytest.fixture
def memory_store():
    return InMemoryNoteStore()


@pytest.fixture
def note_service(memory_store):
    return NoteService(memory_store)


@pytest_asyncio.fixture
async def test_client(test_settings):
    """
    Provides an async HTTP test client backed by real files.

    What:    HTTPX AsyncClient configured to talk to a fresh app.
    How:     Uses ASGITransport to route requests directly to the app.
    """
    app = create_app(test_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def memory_client(test_settings, memory_store):
    """Same as test_client, but the app stores notes in memory_store."""
    app = create_app(test_settings, store=memory_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
