"""Tests for the session playback queue."""

from teo_catalog.domain.catalog.models import Playlist, Track, UserPlaylist
from teo_catalog.domain.playback.queue import (
    LoadOutcome,
    PlaybackQueue,
    QueueManager,
    play_playlist,
    play_user_playlist,
)
from teo_catalog.notifications import RecordingNotifier


def _track(track_id: str) -> Track:
    return Track(track_id, track_id.upper(), "TeO", f"https://cdn.example.com/{track_id}.mp3")


class TestQueueManager:
    """Tests for QueueManager state transitions."""

    def test_starts_empty(self) -> None:
        manager = QueueManager()
        assert manager.current() is None
        assert manager.snapshot() == PlaybackQueue()
        assert len(manager) == 0

    def test_load_starts_at_first_track(self) -> None:
        manager = QueueManager()
        x, y, z = _track("x"), _track("y"), _track("z")

        assert manager.load_and_play([x, y, z]) == LoadOutcome.LOADED
        assert manager.current() == x
        assert manager.snapshot().cursor == 0

    def test_advance_stops_at_end(self) -> None:
        manager = QueueManager()
        x, y, z = _track("x"), _track("y"), _track("z")
        manager.load_and_play([x, y, z])

        assert manager.advance() == y
        assert manager.advance() == z
        assert manager.advance() == z
        assert manager.snapshot().cursor == 2
        assert not manager.has_next()

    def test_retreat_stops_at_start(self) -> None:
        manager = QueueManager()
        x, y = _track("x"), _track("y")
        manager.load_and_play([x, y])

        assert manager.retreat() == x
        assert manager.snapshot().cursor == 0
        manager.advance()
        assert manager.has_previous()
        assert manager.retreat() == x

    def test_advance_and_retreat_on_empty_queue(self) -> None:
        manager = QueueManager()
        assert manager.advance() is None
        assert manager.retreat() is None
        assert not manager.has_next()
        assert not manager.has_previous()

    def test_empty_load_clears_queue(self) -> None:
        manager = QueueManager()
        manager.load_and_play([_track("x")])

        assert manager.load_and_play([]) == LoadOutcome.EMPTY_QUEUE_REQUESTED
        assert manager.current() is None
        assert manager.snapshot().is_empty

    def test_last_load_wins(self) -> None:
        manager = QueueManager()
        manager.load_and_play([_track("x"), _track("y")])
        manager.advance()
        manager.load_and_play([_track("z")])

        snapshot = manager.snapshot()
        assert snapshot.items == (_track("z"),)
        assert snapshot.cursor == 0

    def test_load_accepts_any_iterable(self) -> None:
        manager = QueueManager()
        manager.load_and_play(_track(t) for t in "ab")
        assert len(manager) == 2

    def test_clear(self) -> None:
        manager = QueueManager()
        manager.load_and_play([_track("x")])
        manager.clear()
        assert manager.snapshot() == PlaybackQueue()

    def test_snapshot_is_detached(self) -> None:
        manager = QueueManager()
        manager.load_and_play([_track("x"), _track("y")])
        snapshot = manager.snapshot()
        manager.advance()
        assert snapshot.cursor == 0


class TestPlayPlaylist:
    """Tests for queueing curated playlists."""

    def test_queues_only_playable_tracks(
        self, tracks: dict[str, Track], curated_playlist: Playlist, notifier: RecordingNotifier
    ) -> None:
        manager = QueueManager()

        outcome = play_playlist(manager, curated_playlist, tracks, notifier)

        assert outcome == LoadOutcome.LOADED
        assert manager.snapshot().items == (tracks["b"], tracks["d"])
        assert notifier.successes == ["Playing playlist: Night Drive"]

    def test_nothing_playable_keeps_current_queue(
        self, tracks: dict[str, Track], notifier: RecordingNotifier
    ) -> None:
        manager = QueueManager()
        manager.load_and_play([tracks["b"]])
        playlist = Playlist(id="p", title="Videos", track_ids=("a", "c"))

        outcome = play_playlist(manager, playlist, tracks, notifier)

        assert outcome == LoadOutcome.EMPTY_QUEUE_REQUESTED
        assert manager.current() == tracks["b"]
        assert notifier.errors == ["Could not find playable tracks for this playlist."]


class TestPlayUserPlaylist:
    """Tests for queueing a user's own playlist."""

    def test_queues_every_known_track(
        self, tracks: dict[str, Track], notifier: RecordingNotifier
    ) -> None:
        manager = QueueManager()
        playlist = UserPlaylist(id="up", title="Mine", track_ids=("a", "gone", "b"))

        outcome = play_user_playlist(manager, playlist, tracks, notifier)

        assert outcome == LoadOutcome.LOADED
        assert manager.snapshot().items == (tracks["a"], tracks["b"])
        assert notifier.successes == ['Playing "Mine"']

    def test_empty_playlist(self, tracks: dict[str, Track], notifier: RecordingNotifier) -> None:
        manager = QueueManager()
        playlist = UserPlaylist(id="up", title="Mine")

        assert play_user_playlist(manager, playlist, tracks, notifier) == (
            LoadOutcome.EMPTY_QUEUE_REQUESTED
        )
        assert notifier.errors == ["This playlist is empty."]
        assert manager.current() is None
