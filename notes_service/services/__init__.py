# Services package init
"""
Notes Service — Services Layer
================================

What:  Business logic and storage, sitting below the HTTP routes.
Why:   Routes handle HTTP; services handle rules; stores handle persistence.

Service Inventory:
    - NoteStore (abstract): Interface for note storage backends
    - FileNoteStore: One <name>.txt file per note in a directory
    - InMemoryNoteStore: Dict-backed store for tests
    - NoteService: Name validation and existence-gated note lifecycle
"""
