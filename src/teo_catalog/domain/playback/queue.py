"""Session-scoped playback queue.

One QueueManager exists per session (owned by SessionContext). Loading a new
queue replaces the old one wholesale: last writer wins, no merge.

Invariant: cursor is None iff the queue is empty, otherwise
0 <= cursor < len(items).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional

from loguru import logger

from teo_catalog.core.config import MediaConfig
from teo_catalog.domain.catalog.models import Playlist, Track
from teo_catalog.domain.media.playability import playable_tracks, resolve_tracks
from teo_catalog.notifications import Notifier


class LoadOutcome(str, Enum):
    """Result of load_and_play."""

    LOADED = "loaded"
    EMPTY_QUEUE_REQUESTED = "empty_queue_requested"


@dataclass(frozen=True)
class PlaybackQueue:
    """Immutable view of the queue."""

    items: tuple[Track, ...] = ()
    cursor: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.items


class QueueManager:
    """Owns the ordered list of queued tracks and the cursor into it."""

    def __init__(self) -> None:
        self._items: list[Track] = []
        self._cursor: Optional[int] = None

    def load_and_play(self, tracks: Iterable[Track]) -> LoadOutcome:
        """Replace the queue and start at the first track.

        An empty input clears the queue and reports EMPTY_QUEUE_REQUESTED
        instead of raising.
        """
        items = list(tracks)
        previous = len(self._items)

        if not items:
            self._items = []
            self._cursor = None
            logger.info("Queue load requested with no tracks; queue is now empty")
            return LoadOutcome.EMPTY_QUEUE_REQUESTED

        self._items = items
        self._cursor = 0
        logger.info(
            f"Loaded queue: {len(items)} tracks (replaced {previous}), "
            f"playing '{items[0].title}'"
        )
        return LoadOutcome.LOADED

    def advance(self) -> Optional[Track]:
        """Move to the next track. Stops at the last track (no wraparound)."""
        if self._cursor is None:
            return None
        if self._cursor + 1 < len(self._items):
            self._cursor += 1
            logger.debug(f"Advanced to {self._cursor + 1}/{len(self._items)}")
        else:
            logger.debug("Already at last track; advance ignored")
        return self.current()

    def retreat(self) -> Optional[Track]:
        """Move to the previous track. Stops at the first track."""
        if self._cursor is None:
            return None
        if self._cursor > 0:
            self._cursor -= 1
            logger.debug(f"Retreated to {self._cursor + 1}/{len(self._items)}")
        return self.current()

    def current(self) -> Optional[Track]:
        """Track at the cursor, or None when the queue is empty."""
        if self._cursor is None:
            return None
        return self._items[self._cursor]

    def has_next(self) -> bool:
        return self._cursor is not None and self._cursor + 1 < len(self._items)

    def has_previous(self) -> bool:
        return self._cursor is not None and self._cursor > 0

    def clear(self) -> None:
        """Drop the queue and go back to the empty state."""
        self._items = []
        self._cursor = None
        logger.debug("Queue cleared")

    def snapshot(self) -> PlaybackQueue:
        return PlaybackQueue(items=tuple(self._items), cursor=self._cursor)

    def __len__(self) -> int:
        return len(self._items)


def play_playlist(
    manager: QueueManager,
    playlist: Playlist,
    tracks_by_id: Mapping[str, Track],
    notifier: Notifier,
    config: Optional[MediaConfig] = None,
) -> LoadOutcome:
    """Queue the in-app playable tracks of a curated playlist.

    Args:
        manager: The session's queue
        playlist: Curated playlist to play
        tracks_by_id: Current catalog tracks
        notifier: Notice channel
        config: Media settings

    Returns:
        LOADED, or EMPTY_QUEUE_REQUESTED when nothing was playable. In the
        empty case the current queue is left untouched.
    """
    tracks = playable_tracks(playlist, tracks_by_id, config)
    if not tracks:
        notifier.notify_error("Could not find playable tracks for this playlist.")
        return LoadOutcome.EMPTY_QUEUE_REQUESTED

    outcome = manager.load_and_play(tracks)
    notifier.notify_success(f"Playing playlist: {playlist.title}")
    return outcome


def play_user_playlist(
    manager: QueueManager,
    playlist: Playlist,
    tracks_by_id: Mapping[str, Track],
    notifier: Notifier,
) -> LoadOutcome:
    """Queue every resolvable track of a user's own playlist.

    Returns:
        LOADED, or EMPTY_QUEUE_REQUESTED (queue untouched) when no track id
        resolves.
    """
    tracks = resolve_tracks(playlist.track_ids, tracks_by_id)
    if not tracks:
        notifier.notify_error("This playlist is empty.")
        return LoadOutcome.EMPTY_QUEUE_REQUESTED

    outcome = manager.load_and_play(tracks)
    notifier.notify_success(f'Playing "{playlist.title}"')
    return outcome
