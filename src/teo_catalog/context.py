"""Session context for explicit state passing.

This module provides the SessionContext dataclass that owns everything one
user session needs: configuration, the catalog, who is signed in, the notice
channel, the single playback queue, and the playlist persistence the editor
writes through. Nothing here is a module global.
"""

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from teo_catalog.core.config import Config, get_content_file, load_config
from teo_catalog.domain.catalog import (
    CatalogLoadError,
    ContentRepository,
    Playlist,
    PlaylistSection,
    StaticContentRepository,
    playlist_sections,
)
from teo_catalog.domain.identity import (
    IdentityProvider,
    SessionIdentity,
    SignInRequired,
    require_user,
)
from teo_catalog.domain.playback import LoadOutcome, QueueManager, play_playlist, play_user_playlist
from teo_catalog.domain.playlists import (
    InMemoryPlaylistStore,
    PlaylistPersistence,
    UserPlaylistEditor,
)
from teo_catalog.notifications import LogNotifier, Notifier


@dataclass
class SessionContext:
    """Application state for one user session.

    Attributes:
        config: Application configuration
        content: Read-only catalog
        identity: Who is signed in
        notifier: User-facing notice channel
        persistence: Where user playlist edits are saved
        queue: The session's one playback queue

    The playlist editor is owned by the session as well: editor() hands out
    the same instance while the same user stays signed in, so optimistic
    edits survive between calls.
    """

    config: Config
    content: ContentRepository
    identity: IdentityProvider
    notifier: Notifier
    persistence: PlaylistPersistence
    queue: QueueManager = field(default_factory=QueueManager)
    _editor: Optional[UserPlaylistEditor] = field(default=None, init=False, repr=False)

    @classmethod
    def create(
        cls,
        config: Optional[Config] = None,
        content: Optional[ContentRepository] = None,
        identity: Optional[IdentityProvider] = None,
        notifier: Optional[Notifier] = None,
        persistence: Optional[PlaylistPersistence] = None,
    ) -> "SessionContext":
        """Create a session, filling in defaults for anything not given.

        Without explicit content the configured catalog file is loaded; a
        missing or invalid file leaves the session with an empty catalog.

        Returns:
            New SessionContext with an empty queue and nobody signed in
            unless an identity was supplied
        """
        config = config or load_config()
        if content is None:
            content = _load_content(config)

        return cls(
            config=config,
            content=content,
            identity=identity or SessionIdentity(),
            notifier=notifier or LogNotifier(config.notifications),
            persistence=persistence or InMemoryPlaylistStore(),
        )

    def editor(self) -> UserPlaylistEditor:
        """Playlist editor bound to the signed-in user.

        The editor is rebuilt when a different user signs in and dropped
        once nobody is signed in.

        Raises:
            SignInRequired: If nobody is signed in
        """
        try:
            user = require_user(self.identity, "manage your playlists")
        except SignInRequired:
            self._editor = None
            raise

        if self._editor is None or self._editor.user.id != user.id:
            logger.debug(f"Starting playlist editor for user {user.id}")
            self._editor = UserPlaylistEditor(user, self.persistence, self.notifier)
        return self._editor

    def sections(self) -> list[PlaylistSection]:
        """Curated playlists grouped for the playlists page."""
        return playlist_sections(
            self.content.get_playlists(), self.config.catalog.category_order
        )

    def play(self, playlist: Playlist) -> LoadOutcome:
        """Queue a curated playlist's in-app playable tracks."""
        return play_playlist(
            self.queue, playlist, self.content.get_tracks(), self.notifier, self.config.media
        )

    def play_own(self, playlist: Playlist) -> LoadOutcome:
        """Queue every known track of one of the user's playlists."""
        return play_user_playlist(
            self.queue, playlist, self.content.get_tracks(), self.notifier
        )


def _load_content(config: Config) -> ContentRepository:
    path = get_content_file(config)
    if not path.exists():
        logger.info(f"No catalog file at {path}, starting with an empty catalog")
        return StaticContentRepository()

    try:
        return StaticContentRepository.from_file(path)
    except CatalogLoadError as e:
        logger.warning(f"{e}, starting with an empty catalog")
        return StaticContentRepository()
