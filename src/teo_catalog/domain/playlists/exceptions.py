"""User playlist exceptions for error handling."""

from typing import Optional


class PlaylistError(Exception):
    """Base exception for user playlist operations."""

    pass


class PlaylistValidationError(PlaylistError):
    """Raised when user input is rejected before any persistence call."""

    pass


# Name used by the presentation layer
ValidationError = PlaylistValidationError


class PlaylistNotFoundError(PlaylistError):
    """Raised when a playlist id is not among the user's playlists."""

    def __init__(self, playlist_id: str):
        self.playlist_id = playlist_id
        super().__init__(f"Playlist not found: {playlist_id}")


class PersistenceFailure(PlaylistError):
    """Raised by the persistence collaborator when a write is rejected."""

    def __init__(self, operation: str, playlist_id: str, message: Optional[str] = None):
        self.operation = operation
        self.playlist_id = playlist_id
        super().__init__(message or f"Failed to {operation} playlist {playlist_id}")
