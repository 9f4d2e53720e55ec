"""Shared fixtures for the TeO catalog tests."""

import pytest
from loguru import logger

from teo_catalog.core.output import set_quiet_mode
from teo_catalog.domain.catalog.models import Playlist, Track, User, UserPlaylist
from teo_catalog.domain.playlists.persistence import InMemoryPlaylistStore
from teo_catalog.notifications import RecordingNotifier


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture(autouse=True)
def quiet_output():
    """Keep user-facing echo out of test output."""
    set_quiet_mode(True)
    yield
    set_quiet_mode(False)


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def tracks() -> dict[str, Track]:
    """Catalog tracks: one YouTube-hosted, two streamable, one page link."""
    return {
        "a": Track("a", "Alpha", "TeO", "https://youtu.be/dQw4w9WgXcQ"),
        "b": Track("b", "Bravo", "TeO", "https://cdn.example.com/bravo.mp3"),
        "c": Track("c", "Charlie", "S.M.T.", "https://example.com/page"),
        "d": Track("d", "Delta", "TeO", "https://storage.googleapis.com/teo/delta"),
    }


@pytest.fixture
def curated_playlist() -> Playlist:
    return Playlist(
        id="p1",
        title="Night Drive",
        category="TeO Official",
        track_ids=("a", "b", "c", "d"),
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def store() -> InMemoryPlaylistStore:
    return InMemoryPlaylistStore()


@pytest.fixture
def user() -> User:
    return User(id="u1", email="listener@example.com", name="Listener")


@pytest.fixture
def user_with_playlist(store: InMemoryPlaylistStore) -> User:
    """A user owning one playlist that also exists in the store."""
    playlist = UserPlaylist(
        id="up1",
        title="Favourites",
        description="Best of",
        track_ids=("b", "d"),
        owner_id="u1",
    )
    store.records[playlist.id] = playlist
    return User(id="u1", email="listener@example.com", playlists=(playlist,))
