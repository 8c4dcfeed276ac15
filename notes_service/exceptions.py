"""
Notes Service — Custom Exception Hierarchy
============================================

What:  Defines application-specific exceptions for the note lifecycle.
Why:   Custom exceptions let the service layer say *what* went wrong while
       the global handlers in main.py decide *how* it looks on the wire.
How:   Each exception carries a message and an optional context dict.
       The message is safe to return to the client; the context is logged only.
Who:   Raised by NoteService and the storage layer; caught by global handlers.
When:  During request processing when a note operation cannot proceed.

Exception Hierarchy:
    NotesServiceError (base)          → 500 Internal Server Error
    ├── ValidationError               → 400 Bad Request
    │   └── InvalidNoteNameError      → 400 Bad Request
    ├── NotFoundError                 → 404 Not Found
    │   └── NoteNotFoundError         → 404 Not Found
    ├── NoteAlreadyExistsError        → 400 Bad Request
    ├── AssetMissingError             → 500 Internal Server Error
    └── FileStorageError              → 500 Internal Server Error
        └── NoteStorageError          → 500 Internal Server Error

Why AlreadyExists is 400 (not 409):
    Form clients match on 400 for a duplicate name.
"""

from typing import Any, Dict, Optional


class NotesServiceError(Exception):
    """
    Base exception for all Notes Service errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesServiceError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request
    When:    Unusable note name, request body that is not valid UTF-8.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidNoteNameError(ValidationError):
    """
    Raised when a note name is not a safe filename component.

    What:    The name contains path separators, starts with a dot, is empty,
             too long, or uses characters outside the allowlist.
    Why:     Names become file paths; anything else could escape the storage root.
    """

    def __init__(self, name: str, reason: str = "invalid characters"):
        super().__init__(
            message=f"Invalid note name: {reason}",
            field="name",
            context={"name": name, "reason": reason},
        )
        self.name = name


class NotFoundError(NotesServiceError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class NoteNotFoundError(NotFoundError):
    """
    Raised when an operation references a note with no file behind it.

    Used by get, update and delete. The message stays the terse
    "Not found" that clients of the plain-text API already match on.
    """

    def __init__(self, name: str):
        super().__init__(resource="note", resource_id=name, message="Not found")
        self.name = name


class NoteAlreadyExistsError(NotesServiceError):
    """
    Raised when create targets a name that already has a file.

    HTTP:    400 Bad Request
    Note:    The existing note is left untouched.
    """

    def __init__(self, name: str):
        super().__init__(message="Note already exists", context={"name": name})
        self.name = name


class AssetMissingError(NotesServiceError):
    """
    Raised when a static asset shipped with the service cannot be located.

    What:    The upload form HTML file is missing from disk.
    HTTP:    500 Internal Server Error (deployment problem, not a client error)
    """

    def __init__(
        self,
        asset: str = "asset",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["asset"] = asset
        super().__init__(message=f"Static asset '{asset}' is not available", context=ctx)
        self.asset = asset


class FileStorageError(NotesServiceError):
    """
    Raised when file system operations fail.

    What:    Could not read, write, list, or delete a file in the storage directory.
    When:    Disk full, permission denied, I/O error, undecodable file content.
    HTTP:    500 Internal Server Error

    Recovery:
        None. The caller may retry; the service never does.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NoteStorageError(FileStorageError):
    """Storage failure while operating on a specific note."""

    def __init__(
        self,
        operation: str,
        name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["operation"] = operation
        if name is not None:
            ctx["name"] = name
        super().__init__(
            message=f"Could not {operation} note. Please try again.",
            context=ctx,
        )
        self.operation = operation
