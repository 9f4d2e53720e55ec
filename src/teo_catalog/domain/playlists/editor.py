"""
User playlist editing with optimistic local state.

Every edit is applied to the local cache first, recorded as a pending write,
then sent to the persistence collaborator. A rejected write keeps the local
state (no rollback, no retry) and surfaces an error notice. When a stored
record comes back, user-editable fields keep their local values: the last
local write wins.
"""

import uuid
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from loguru import logger

from teo_catalog.domain.catalog.models import User, UserPlaylist
from teo_catalog.notifications import Notifier

from .exceptions import PersistenceFailure, PlaylistNotFoundError, PlaylistValidationError
from .persistence import PlaylistPersistence

ConfirmCallback = Callable[[UserPlaylist], bool]


@dataclass(frozen=True)
class PendingWrite:
    """A local edit not yet acknowledged by persistence."""

    operation: str  # 'create' | 'update' | 'delete'
    playlist_id: str
    patch: Optional[dict[str, Any]] = None


class UserPlaylistEditor:
    """Edits the signed-in user's own playlists.

    Args:
        user: The authenticated user whose playlists seed the cache
        persistence: Persistence collaborator
        notifier: Notice channel
        id_factory: Produces ids for new playlists (default: uuid4 strings)
    """

    def __init__(
        self,
        user: User,
        persistence: PlaylistPersistence,
        notifier: Notifier,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self.user = user
        self.persistence = persistence
        self.notifier = notifier
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._cache: dict[str, UserPlaylist] = {p.id: p for p in user.playlists}
        self._pending: list[PendingWrite] = []

    @property
    def playlists(self) -> list[UserPlaylist]:
        """The user's playlists in creation order, as the UI should show them."""
        return list(self._cache.values())

    @property
    def pending_writes(self) -> tuple[PendingWrite, ...]:
        return tuple(self._pending)

    def get(self, playlist_id: str) -> UserPlaylist:
        """Get one of the user's playlists.

        Raises:
            PlaylistNotFoundError: If the id is not one of the user's playlists
        """
        playlist = self._cache.get(playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(playlist_id)
        return playlist

    def to_user(self) -> User:
        """The user record with the current local playlists."""
        return replace(self.user, playlists=tuple(self._cache.values()))

    async def create(self, title: str, description: str = "") -> UserPlaylist:
        """Create an empty playlist.

        Not idempotent: each call creates a playlist with a new id.

        Raises:
            PlaylistValidationError: If title is empty or whitespace only;
                nothing is created and persistence is not called
        """
        if not title or not title.strip():
            self.notifier.notify_error("Playlist title is required.")
            raise PlaylistValidationError("Playlist title is required.")

        playlist = UserPlaylist(
            id=self._id_factory(),
            title=title,
            description=description,
            owner_id=self.user.id,
        )
        self._cache[playlist.id] = playlist
        logger.info(f"Created playlist '{title}' ({playlist.id}) for user {self.user.id}")

        write = self._begin("create", playlist.id)
        try:
            stored = await self.persistence.create_user_playlist(
                title, description, playlist_id=playlist.id, owner_id=self.user.id
            )
        except Exception as e:
            self._fail(write, playlist.title, e)
        else:
            self._reconcile(stored)
            self.notifier.notify_success(f'Playlist "{title}" created.')
        finally:
            self._end(write)

        return self._cache.get(playlist.id, playlist)

    async def rename(
        self,
        playlist_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> UserPlaylist:
        """Update title and/or description in place.

        Fields left as None are unchanged. An empty title is accepted here,
        unlike create().
        """
        patch: dict[str, Any] = {}
        if title is not None:
            patch["title"] = title
        if description is not None:
            patch["description"] = description

        playlist, saved = await self._update(playlist_id, patch)
        if saved:
            self.notifier.notify_success("Playlist details updated!")
        return playlist

    async def add_track(self, playlist_id: str, track_id: str) -> UserPlaylist:
        """Append a track. Duplicates are allowed.

        Unlike the other edits this is not idempotent: retrying a call that
        already reached persistence appends the track a second time.
        """
        playlist = self.get(playlist_id)
        updated, _ = await self._update(
            playlist_id, {"track_ids": (*playlist.track_ids, track_id)}
        )
        return updated

    async def remove_track(self, playlist_id: str, track_id: str) -> UserPlaylist:
        """Remove every occurrence of a track.

        A playlist left empty is kept.
        """
        playlist = self.get(playlist_id)
        remaining = tuple(tid for tid in playlist.track_ids if tid != track_id)
        updated, saved = await self._update(playlist_id, {"track_ids": remaining})
        if saved:
            self.notifier.notify_success("Track removed from playlist.")
        return updated

    async def delete(self, playlist_id: str, confirm: ConfirmCallback) -> bool:
        """Delete a playlist after explicit confirmation. There is no undo.

        Args:
            playlist_id: Playlist to delete
            confirm: Asked with the playlist; must return True to proceed

        Returns:
            True if the playlist was deleted locally, False if declined or
            already gone
        """
        playlist = self._cache.get(playlist_id)
        if playlist is None:
            logger.debug(f"Delete of unknown playlist {playlist_id} ignored")
            return False

        if not confirm(playlist):
            logger.debug(f"Delete of '{playlist.title}' declined")
            return False

        del self._cache[playlist_id]
        logger.info(f"Deleted playlist '{playlist.title}' ({playlist_id})")

        write = self._begin("delete", playlist_id)
        try:
            await self.persistence.delete_user_playlist(playlist_id)
        except Exception as e:
            self._fail(write, playlist.title, e)
        else:
            self.notifier.notify_success(f'Playlist "{playlist.title}" deleted.')
        finally:
            self._end(write)
        return True

    async def _update(
        self, playlist_id: str, patch: dict[str, Any]
    ) -> tuple[UserPlaylist, bool]:
        """Apply a patch locally, then persist it.

        Returns:
            (updated playlist, whether persistence accepted the write)
        """
        playlist = self.get(playlist_id)
        updated = replace(playlist, **patch)
        self._cache[playlist_id] = updated
        logger.debug(f"Updated playlist {playlist_id}: {sorted(patch)}")

        write = self._begin("update", playlist_id, patch)
        persisted_patch = dict(patch)
        if "track_ids" in persisted_patch:
            persisted_patch["track_ids"] = list(persisted_patch["track_ids"])
        saved = False
        try:
            await self.persistence.update_user_playlist(playlist_id, persisted_patch)
            saved = True
        except Exception as e:
            self._fail(write, updated.title, e)
        finally:
            self._end(write)
        return updated, saved

    def _reconcile(self, stored: UserPlaylist) -> None:
        """Merge a stored record into the cache; local edits win."""
        local = self._cache.get(stored.id)
        if local is None:
            # Deleted locally while the create was in flight
            return
        self._cache[stored.id] = replace(
            stored,
            title=local.title,
            description=local.description,
            track_ids=local.track_ids,
        )

    def _begin(
        self, operation: str, playlist_id: str, patch: Optional[dict[str, Any]] = None
    ) -> PendingWrite:
        write = PendingWrite(operation=operation, playlist_id=playlist_id, patch=patch)
        self._pending.append(write)
        return write

    def _end(self, write: PendingWrite) -> None:
        if write in self._pending:
            self._pending.remove(write)

    def _fail(self, write: PendingWrite, title: str, error: Exception) -> None:
        if isinstance(error, PersistenceFailure):
            logger.warning(f"Persistence rejected {write.operation} of {write.playlist_id}: {error}")
        else:
            logger.exception(f"Unexpected error during {write.operation} of {write.playlist_id}")
        self.notifier.notify_error(
            f'Could not save changes to "{title}". Your changes are kept on this device.'
        )
