"""
Notes Service — Notes Route Handlers
======================================

What:  The note surface: get / update / delete by name, list, form create,
       and the static upload form.
Why:   Maps HTTP verbs and paths onto NoteService operations.
How:   Extracts the name, body or form fields, delegates to NoteService, and
       answers in plain text (JSON for the list).

Route Inventory:
    GET    /notes/{name}      → 200 note text            | 404
    PUT    /notes/{name}      → 200 "Note updated"       | 404
    DELETE /notes/{name}      → 200 "Note deleted"       | 404
    GET    /notes             → 200 [{name, text}, ...]
    POST   /write             → 201 "Note created"       | 400 if exists
    GET    /UploadForm.html   → 200 HTML form            | 500 if missing

Errors are raised, never caught here; the global handlers in main.py turn
them into responses.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import FileResponse, PlainTextResponse

from notes_service.config import Settings
from notes_service.dependencies import get_note_service, get_settings
from notes_service.exceptions import AssetMissingError, ValidationError
from notes_service.schemas.note import NoteItem
from notes_service.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

_TEXT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"text/plain": {"schema": {"type": "string"}}},
    }
}
_TEXT_RESPONSE = {"content": {"text/plain": {"schema": {"type": "string"}}}}


@router.get(
    "/notes/{name}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note content", **_TEXT_RESPONSE},
        400: {"description": "Invalid note name", **_TEXT_RESPONSE},
        404: {"description": "Note not found", **_TEXT_RESPONSE},
    },
    summary="Get a note's text",
)
async def get_note(
    name: str,
    service: NoteService = Depends(get_note_service),
) -> PlainTextResponse:
    return PlainTextResponse(await service.get_note(name))


@router.put(
    "/notes/{name}",
    response_class=PlainTextResponse,
    openapi_extra=_TEXT_BODY,
    responses={
        200: {"description": "Note replaced", **_TEXT_RESPONSE},
        400: {"description": "Invalid note name or body", **_TEXT_RESPONSE},
        404: {"description": "Note not found", **_TEXT_RESPONSE},
    },
    summary="Replace a note's text",
)
async def update_note(
    name: str,
    request: Request,
    service: NoteService = Depends(get_note_service),
) -> PlainTextResponse:
    """
    Replace the full text of an existing note with the raw request body.

    The body is read as-is whatever the Content-Type, and must be UTF-8.
    """
    raw = await request.body()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise ValidationError(message="Request body must be UTF-8 text", field="body")
    await service.update_note(name, text)
    return PlainTextResponse("Note updated")


@router.delete(
    "/notes/{name}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note removed", **_TEXT_RESPONSE},
        400: {"description": "Invalid note name", **_TEXT_RESPONSE},
        404: {"description": "Note not found", **_TEXT_RESPONSE},
    },
    summary="Delete a note",
)
async def delete_note(
    name: str,
    service: NoteService = Depends(get_note_service),
) -> PlainTextResponse:
    await service.delete_note(name)
    return PlainTextResponse("Note deleted")


@router.get(
    "/notes",
    response_model=List[NoteItem],
    summary="List all notes with their text",
    description=(
        "Returns every stored note. Each note is read in full; there is no "
        "pagination. Order is the storage directory's enumeration order."
    ),
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteItem]:
    return await service.list_notes()


@router.post(
    "/write",
    status_code=201,
    response_class=PlainTextResponse,
    responses={
        201: {"description": "Note created", **_TEXT_RESPONSE},
        400: {"description": "Note already exists or invalid name", **_TEXT_RESPONSE},
    },
    summary="Create a note from form fields",
    description="Accepts application/x-www-form-urlencoded or multipart/form-data.",
)
async def write_note(
    note_name: str = Form(..., description="Name of the new note"),
    note: str = Form("", description="Note text"),
    service: NoteService = Depends(get_note_service),
) -> PlainTextResponse:
    await service.create_note(note_name, note)
    return PlainTextResponse("Note created", status_code=201)


@router.get(
    "/UploadForm.html",
    response_class=FileResponse,
    responses={
        200: {"description": "HTML form for creating notes", "content": {"text/html": {}}},
        500: {"description": "Form asset missing", **_TEXT_RESPONSE},
    },
    summary="Serve the note upload form",
)
async def upload_form(settings: Settings = Depends(get_settings)) -> FileResponse:
    form_path = settings.upload_form
    if not form_path.is_file():
        raise AssetMissingError(asset="UploadForm.html", context={"path": str(form_path)})
    return FileResponse(path=str(form_path), media_type="text/html")
