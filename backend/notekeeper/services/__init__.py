# Services package init
"""
NoteKeeper Backend — Services Layer
=====================================

Service Inventory:
    - AuthService: credential check, token issuance and verification
    - NoteService: in-memory notes CRUD on top of NoteStore

Both are built once per application by the app factory and stored on
`app.state`; routes reach them through the dependencies in
`notekeeper.dependencies`.
"""

from notekeeper.services.auth_service import AuthService
from notekeeper.services.note_service import NoteService

__all__ = ["AuthService", "NoteService"]
