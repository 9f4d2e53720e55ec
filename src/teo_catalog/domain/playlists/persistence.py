"""
User playlist persistence interface and an in-memory store.

All calls are asynchronous and carry no retry policy; retrying is the
caller's business.
"""

import asyncio
from dataclasses import replace
from typing import Any, Optional, Protocol

from loguru import logger

from teo_catalog.domain.catalog.models import UserPlaylist

from .exceptions import PersistenceFailure

# Fields a patch may touch
PATCHABLE_FIELDS = ("title", "description", "track_ids")


class PlaylistPersistence(Protocol):
    """Persistence collaborator for user playlists."""

    async def create_user_playlist(
        self, title: str, description: str, *, playlist_id: str, owner_id: str
    ) -> UserPlaylist:
        """Store a new playlist and return the stored record."""
        ...

    async def update_user_playlist(self, playlist_id: str, patch: dict[str, Any]) -> None:
        """Apply a partial update."""
        ...

    async def delete_user_playlist(self, playlist_id: str) -> None:
        """Delete a playlist."""
        ...


class InMemoryPlaylistStore:
    """Dict-backed persistence with optional failure injection.

    Args:
        latency: Seconds to sleep per call, to exercise suspension points
    """

    def __init__(self, latency: float = 0.0) -> None:
        self.records: dict[str, UserPlaylist] = {}
        self.latency = latency
        self._fail_operations: set[str] = set()

    def fail_on(self, *operations: str) -> None:
        """Make the given operations ('create', 'update', 'delete') reject."""
        self._fail_operations.update(operations)

    def recover(self) -> None:
        """Stop injecting failures."""
        self._fail_operations.clear()

    async def create_user_playlist(
        self, title: str, description: str, *, playlist_id: str, owner_id: str
    ) -> UserPlaylist:
        await self._simulate("create", playlist_id)
        record = UserPlaylist(
            id=playlist_id,
            title=title,
            description=description,
            owner_id=owner_id,
        )
        self.records[playlist_id] = record
        logger.debug(f"Stored playlist {playlist_id}")
        return record

    async def update_user_playlist(self, playlist_id: str, patch: dict[str, Any]) -> None:
        await self._simulate("update", playlist_id)
        record = self.records.get(playlist_id)
        if record is None:
            raise PersistenceFailure("update", playlist_id, f"No stored playlist {playlist_id}")

        unknown = set(patch) - set(PATCHABLE_FIELDS)
        if unknown:
            raise PersistenceFailure(
                "update", playlist_id, f"Unknown playlist fields: {sorted(unknown)}"
            )

        changes = dict(patch)
        if "track_ids" in changes:
            changes["track_ids"] = tuple(changes["track_ids"])
        self.records[playlist_id] = replace(record, **changes)

    async def delete_user_playlist(self, playlist_id: str) -> None:
        await self._simulate("delete", playlist_id)
        # Deleting a missing record is a no-op so retries are safe
        self.records.pop(playlist_id, None)

    def get(self, playlist_id: str) -> Optional[UserPlaylist]:
        return self.records.get(playlist_id)

    async def _simulate(self, operation: str, playlist_id: str) -> None:
        if self.latency:
            await asyncio.sleep(self.latency)
        if operation in self._fail_operations:
            raise PersistenceFailure(operation, playlist_id)
