"""
Notes Service — FastAPI Dependencies
======================================

What:  Providers that hand per-app objects to route handlers.
Why:   The app factory builds one NoteService per app instance and keeps it on
       app.state; handlers receive it through Depends() instead of importing a
       module-level singleton, so tests can build apps over different stores.
"""

from fastapi import Request

from notes_service.config import Settings
from notes_service.services.note_service import NoteService
from notes_service.services.storage_base import NoteStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_service.store
