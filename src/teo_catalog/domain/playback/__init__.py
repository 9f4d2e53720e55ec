"""Playback domain - the session's single playback queue.

This domain handles:
- Loading, advancing and retreating through the queue
- Playing curated and user playlists into the queue
"""

from .queue import (
    LoadOutcome,
    PlaybackQueue,
    QueueManager,
    play_playlist,
    play_user_playlist,
)

__all__ = [
    "LoadOutcome",
    "PlaybackQueue",
    "QueueManager",
    "play_playlist",
    "play_user_playlist",
]
