"""
Notes Service — Package Initializer
=====================================

A small HTTP service keeping plain-text notes as one file per note.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      NoteService (Business Logic)   │  ← Name rules, existence checks
    ├─────────────────────────────────────┤
    │        NoteStore (Persistence)      │  ← Files on disk, or a dict in tests
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
