from notekeeper.models.note import Note
from notekeeper.models.user import Identity, User

__all__ = ["Identity", "Note", "User"]
