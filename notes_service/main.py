"""
Notes Service — FastAPI Application Factory
=============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes storage wiring, middleware registration, route mounting,
       exception handling, and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by cli.main() (which hands the app to uvicorn) and by tests.
       `uvicorn --factory notes_service.main:create_app` also works and reads
       its configuration from NOTES_* environment variables.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │  Req ID  │→│  Access Logging │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /notes /write│ │ /health  │ │ /routes         │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Invalid/Exists→400 │ NotFound→404 │ else→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

No failure is fatal: every exception becomes a response and the server keeps
serving.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from notes_service import __version__
from notes_service.config import Settings, settings as default_settings
from notes_service.exceptions import (
    AssetMissingError,
    FileStorageError,
    NoteAlreadyExistsError,
    NotesServiceError,
    NotFoundError,
    ValidationError,
)
from notes_service.middleware.logging import RequestLoggingMiddleware
from notes_service.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    current_request_id,
)
from notes_service.routes import health, meta, notes
from notes_service.services.file_store import FileNoteStore
from notes_service.services.note_service import NoteService
from notes_service.services.storage_base import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown. There are no connections to open or close."""
    cfg: Settings = app.state.settings
    setup_logging(cfg.log_level)
    logger.info("=" * 60)
    logger.info("Notes Service %s starting up...", __version__)
    logger.info("Storage directory: %s", cfg.storage_path)
    logger.info("Server ready at http://%s:%d", cfg.host, cfg.port)
    logger.info("API docs: http://%s:%d/docs", cfg.host, cfg.port)
    logger.info("=" * 60)

    yield

    logger.info("Notes Service shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _text_error(request: Request, status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(
        message,
        status_code=status_code,
        headers={REQUEST_ID_HEADER: current_request_id(request)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        ValidationError         → 400 (includes InvalidNoteNameError)
        NoteAlreadyExistsError  → 400
        NotFoundError           → 404 (includes NoteNotFoundError)
        AssetMissingError       → 500
        FileStorageError        → 500 (includes NoteStorageError)
        NotesServiceError       → 500 (catch-all for custom)
        Exception               → 500 (unexpected; traceback logged)

    Bodies are plain text. Context dicts and OS error details go to the log
    only, never to the client.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning(
            "[%s] Validation error: %s | Context: %s",
            current_request_id(request), exc.message, exc.context,
        )
        return _text_error(request, 400, exc.message)

    @app.exception_handler(NoteAlreadyExistsError)
    async def handle_already_exists(request: Request, exc: NoteAlreadyExistsError):
        logger.info("[%s] Create rejected, note exists: %s", current_request_id(request), exc.name)
        return _text_error(request, 400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _text_error(request, 404, exc.message)

    @app.exception_handler(AssetMissingError)
    async def handle_asset_missing(request: Request, exc: AssetMissingError):
        logger.error(
            "[%s] Asset missing: %s | Context: %s",
            current_request_id(request), exc.asset, exc.context,
        )
        return _text_error(request, 500, exc.message)

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error(
            "[%s] File storage error: %s | Context: %s",
            current_request_id(request), exc.message, exc.context,
        )
        return _text_error(request, 500, exc.message)

    @app.exception_handler(NotesServiceError)
    async def handle_service_error(request: Request, exc: NotesServiceError):
        logger.error(
            "[%s] Service error: %s | Context: %s",
            current_request_id(request), exc.message, exc.context,
        )
        return _text_error(request, 500, "An internal error occurred. Please try again later.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            current_request_id(request),
            str(exc),
            exc_info=True,
        )
        return _text_error(request, 500, "An unexpected error occurred.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-driven singleton.
        store:    Note storage backend; defaults to a FileNoteStore over
                  settings.cache_dir (created if absent).

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    cfg = settings or default_settings
    note_store = store if store is not None else FileNoteStore(cfg.storage_path)

    app = FastAPI(
        title="Notes Service",
        description=(
            "Plain-text notes stored as one file per note. "
            "Create, read, update, delete, and list notes over HTTP."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.note_service = NoteService(note_store)

    # Middleware executes in REVERSE order of addition:
    # RequestID runs first, then Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)
    app.include_router(meta.router)

    return app
