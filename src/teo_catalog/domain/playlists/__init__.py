"""Playlists domain - a user's own playlists.

This domain handles:
- Create, rename, add/remove tracks and delete with optimistic local state
- The asynchronous persistence collaborator interface
"""

from .editor import PendingWrite, UserPlaylistEditor
from .exceptions import (
    PersistenceFailure,
    PlaylistError,
    PlaylistNotFoundError,
    PlaylistValidationError,
    ValidationError,
)
from .persistence import InMemoryPlaylistStore, PlaylistPersistence

__all__ = [
    "PendingWrite",
    "UserPlaylistEditor",
    "PersistenceFailure",
    "PlaylistError",
    "PlaylistNotFoundError",
    "PlaylistValidationError",
    "ValidationError",
    "InMemoryPlaylistStore",
    "PlaylistPersistence",
]
