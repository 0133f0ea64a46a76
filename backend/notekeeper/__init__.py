"""
NoteKeeper Backend — Application Package Initializer
=====================================================

What: Marks the `notekeeper` directory as a Python package.
Who:  Imported by uvicorn (`notekeeper.main:app`), pytest, and the CLI entry point.

Architecture Note:
    The backend keeps the usual layered split:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, auth, CRUD rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclasses + Pydantic
    ├─────────────────────────────────────┤
    │        NoteStore (In-Memory)        │  ← Locked list + id counter
    └─────────────────────────────────────┘

    There is no database: the store lives for the lifetime of the process
    and is rebuilt every time the app factory runs.
"""

__version__ = "1.0.0"
