"""
NoteKeeper Backend — User and Identity Models
===============================================

User:      A static demo account. The directory is built once at startup
           and never changes.
Identity:  What a verified bearer token tells us about the caller. Carries
           no password and is all a notes handler ever sees.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class User:
    id: int
    username: str
    # Plaintext: the demo directory compares passwords verbatim
    password: str

    def to_identity(self) -> "Identity":
        return Identity(id=self.id, username=self.username)


@dataclass(frozen=True)
class Identity:
    """Resolved caller attached to each authenticated request."""

    id: int
    username: str

    def as_claims(self) -> Dict[str, Any]:
        return {"id": self.id, "username": self.username}
