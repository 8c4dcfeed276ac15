"""
Notes Service — Note Name Rules
=================================

What:  Allowlist for note names (they become <name>.txt on disk).
Who:   NoteService validates every incoming name; FileNoteStore uses the same
       rule to leave unreachable files out of listings.

The first character may not be "." so ".", ".." and hidden files are
impossible; "/" and "\\" are never allowed. The whole string must match
(fullmatch), so a trailing newline is rejected too.
"""

import re

from notes_service.exceptions import InvalidNoteNameError

NOTE_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9_.-]*")
MAX_NOTE_NAME_LENGTH = 128


def validate_note_name(name: str) -> str:
    """
    Check that `name` is a safe single filename component.

    Returns:
        The name, unchanged.

    Raises:
        InvalidNoteNameError: Empty, too long, or outside the allowlist.
    """
    if not name:
        raise InvalidNoteNameError(name, reason="name must not be empty")
    if len(name) > MAX_NOTE_NAME_LENGTH:
        raise InvalidNoteNameError(
            name, reason=f"name longer than {MAX_NOTE_NAME_LENGTH} characters"
        )
    if not NOTE_NAME_PATTERN.fullmatch(name):
        raise InvalidNoteNameError(
            name,
            reason=(
                "only letters, digits, '_', '-' and '.' are allowed, "
                "and the name may not start with '.'"
            ),
        )
    return name


def is_valid_note_name(name: str) -> bool:
    try:
        validate_note_name(name)
    except InvalidNoteNameError:
        return False
    return True
