"""Tests for optimistic user playlist editing."""

import asyncio
from itertools import count
from unittest.mock import AsyncMock, MagicMock

import pytest

from teo_catalog.domain.catalog.models import User
from teo_catalog.domain.playlists.editor import UserPlaylistEditor
from teo_catalog.domain.playlists.exceptions import (
    PersistenceFailure,
    PlaylistNotFoundError,
    ValidationError,
)
from teo_catalog.domain.playlists.persistence import InMemoryPlaylistStore
from teo_catalog.notifications import RecordingNotifier

pytestmark = pytest.mark.anyio


def _sequential_ids():
    counter = count(1)
    return lambda: f"pl-{next(counter)}"


@pytest.fixture
def editor(
    user: User, store: InMemoryPlaylistStore, notifier: RecordingNotifier
) -> UserPlaylistEditor:
    return UserPlaylistEditor(user, store, notifier, id_factory=_sequential_ids())


@pytest.fixture
def seeded_editor(
    user_with_playlist: User, store: InMemoryPlaylistStore, notifier: RecordingNotifier
) -> UserPlaylistEditor:
    return UserPlaylistEditor(user_with_playlist, store, notifier)


class TestCreate:
    """Tests for create()."""

    async def test_creates_empty_playlist(
        self, editor: UserPlaylistEditor, store: InMemoryPlaylistStore, notifier: RecordingNotifier
    ) -> None:
        playlist = await editor.create("Road Trip", "Long drives")

        assert playlist.id == "pl-1"
        assert playlist.track_ids == ()
        assert playlist.owner_id == "u1"
        assert editor.playlists == [playlist]
        assert store.get("pl-1").title == "Road Trip"
        assert notifier.successes == ['Playlist "Road Trip" created.']
        assert editor.pending_writes == ()

    @pytest.mark.parametrize("title", ["", "   "])
    async def test_blank_title_is_rejected(
        self, user: User, notifier: RecordingNotifier, title: str
    ) -> None:
        persistence = MagicMock()
        persistence.create_user_playlist = AsyncMock()
        editor = UserPlaylistEditor(user, persistence, notifier)

        with pytest.raises(ValidationError):
            await editor.create(title)

        persistence.create_user_playlist.assert_not_called()
        assert editor.playlists == []
        assert notifier.errors == ["Playlist title is required."]

    async def test_not_idempotent(self, editor: UserPlaylistEditor) -> None:
        first = await editor.create("Same")
        second = await editor.create("Same")
        assert first.id != second.id
        assert len(editor.playlists) == 2

    async def test_failure_keeps_optimistic_playlist(
        self, editor: UserPlaylistEditor, store: InMemoryPlaylistStore, notifier: RecordingNotifier
    ) -> None:
        store.fail_on("create")

        playlist = await editor.create("Offline")

        assert editor.playlists == [playlist]
        assert store.get(playlist.id) is None
        assert notifier.successes == []
        assert notifier.errors == [
            'Could not save changes to "Offline". Your changes are kept on this device.'
        ]

    async def test_persistence_receives_client_id(
        self, user: User, notifier: RecordingNotifier
    ) -> None:
        persistence = InMemoryPlaylistStore()
        editor = UserPlaylistEditor(user, persistence, notifier, id_factory=lambda: "fixed")
        await editor.create("Mine")
        assert list(persistence.records) == ["fixed"]


class TestRename:
    """Tests for rename()."""

    async def test_updates_title_and_description(
        self,
        seeded_editor: UserPlaylistEditor,
        store: InMemoryPlaylistStore,
        notifier: RecordingNotifier,
    ) -> None:
        updated = await seeded_editor.rename("up1", title="Faves", description="Updated")

        assert updated.title == "Faves"
        assert updated.description == "Updated"
        assert store.get("up1").title == "Faves"
        assert notifier.successes == ["Playlist details updated!"]

    async def test_none_fields_unchanged(self, seeded_editor: UserPlaylistEditor) -> None:
        updated = await seeded_editor.rename("up1", description="Only this")
        assert updated.title == "Favourites"

    async def test_empty_title_is_accepted(self, seeded_editor: UserPlaylistEditor) -> None:
        updated = await seeded_editor.rename("up1", title="")
        assert updated.title == ""

    async def test_unknown_playlist(self, seeded_editor: UserPlaylistEditor) -> None:
        with pytest.raises(PlaylistNotFoundError):
            await seeded_editor.rename("nope", title="x")

    async def test_failure_keeps_local_rename(
        self,
        seeded_editor: UserPlaylistEditor,
        store: InMemoryPlaylistStore,
        notifier: RecordingNotifier,
    ) -> None:
        store.fail_on("update")

        updated = await seeded_editor.rename("up1", title="Faves")

        assert seeded_editor.get("up1") == updated
        assert store.get("up1").title == "Favourites"
        assert notifier.successes == []
        assert len(notifier.errors) == 1


class TestTracks:
    """Tests for add_track() and remove_track()."""

    async def test_add_allows_duplicates(
        self, seeded_editor: UserPlaylistEditor, store: InMemoryPlaylistStore
    ) -> None:
        await seeded_editor.add_track("up1", "b")
        assert seeded_editor.get("up1").track_ids == ("b", "d", "b")
        assert store.get("up1").track_ids == ("b", "d", "b")

    async def test_remove_drops_every_occurrence(
        self, seeded_editor: UserPlaylistEditor, notifier: RecordingNotifier
    ) -> None:
        await seeded_editor.add_track("up1", "b")

        updated = await seeded_editor.remove_track("up1", "b")

        assert updated.track_ids == ("d",)
        assert notifier.successes == ["Track removed from playlist."]

    async def test_playlist_left_empty_is_kept(self, seeded_editor: UserPlaylistEditor) -> None:
        await seeded_editor.remove_track("up1", "b")
        updated = await seeded_editor.remove_track("up1", "d")
        assert updated.track_ids == ()
        assert [p.id for p in seeded_editor.playlists] == ["up1"]

    async def test_patch_sent_as_list(
        self, user_with_playlist: User, notifier: RecordingNotifier
    ) -> None:
        persistence = MagicMock()
        persistence.update_user_playlist = AsyncMock()
        editor = UserPlaylistEditor(user_with_playlist, persistence, notifier)

        await editor.remove_track("up1", "b")

        persistence.update_user_playlist.assert_awaited_once_with("up1", {"track_ids": ["d"]})


class TestDelete:
    """Tests for delete()."""

    async def test_confirmed_delete(
        self,
        seeded_editor: UserPlaylistEditor,
        store: InMemoryPlaylistStore,
        notifier: RecordingNotifier,
    ) -> None:
        assert await seeded_editor.delete("up1", confirm=lambda playlist: True)
        assert seeded_editor.playlists == []
        assert store.get("up1") is None
        assert notifier.successes == ['Playlist "Favourites" deleted.']

    async def test_declined_delete_changes_nothing(
        self, seeded_editor: UserPlaylistEditor, store: InMemoryPlaylistStore
    ) -> None:
        asked = []

        def confirm(playlist) -> bool:
            asked.append(playlist.title)
            return False

        assert not await seeded_editor.delete("up1", confirm=confirm)
        assert asked == ["Favourites"]
        assert len(seeded_editor.playlists) == 1
        assert store.get("up1") is not None

    async def test_unknown_id_is_noop(self, seeded_editor: UserPlaylistEditor) -> None:
        confirm = MagicMock(return_value=True)
        assert not await seeded_editor.delete("nope", confirm=confirm)
        confirm.assert_not_called()

    async def test_failed_delete_stays_deleted_locally(
        self,
        seeded_editor: UserPlaylistEditor,
        store: InMemoryPlaylistStore,
        notifier: RecordingNotifier,
    ) -> None:
        store.fail_on("delete")
        assert await seeded_editor.delete("up1", confirm=lambda playlist: True)
        assert seeded_editor.playlists == []
        assert store.get("up1") is not None
        assert len(notifier.errors) == 1


class TestInFlightWrites:
    """Tests for pending writes while persistence is still working."""

    async def test_pending_writes_track_in_flight_calls(
        self, user: User, notifier: RecordingNotifier
    ) -> None:
        store = InMemoryPlaylistStore(latency=0.05)
        editor = UserPlaylistEditor(user, store, notifier, id_factory=lambda: "draft")

        create_task = asyncio.create_task(editor.create("Draft"))
        await asyncio.sleep(0)

        assert [w.operation for w in editor.pending_writes] == ["create"]
        assert editor.get("draft").title == "Draft"
        assert store.get("draft") is None

        rename_task = asyncio.create_task(editor.rename("draft", title="Final"))
        await asyncio.sleep(0)

        assert [w.operation for w in editor.pending_writes] == ["create", "update"]
        assert editor.pending_writes[1].patch == {"title": "Final"}

        await create_task
        await rename_task

        assert editor.pending_writes == ()
        assert editor.get("draft").title == "Final"
        assert store.get("draft").title == "Final"

    async def test_local_rename_wins_over_stored_create(
        self, user: User, notifier: RecordingNotifier
    ) -> None:
        store = InMemoryPlaylistStore(latency=0.05)
        store.fail_on("update")
        editor = UserPlaylistEditor(user, store, notifier, id_factory=lambda: "draft")

        create_task = asyncio.create_task(editor.create("Draft", "first"))
        await asyncio.sleep(0)
        await editor.rename("draft", description="second")
        await create_task

        # The stored record still has the old description; the cache keeps ours
        assert store.get("draft").description == "first"
        assert editor.get("draft").description == "second"
        assert editor.pending_writes == ()


class TestFailureReporting:
    """Tests for unexpected persistence errors."""

    async def test_unexpected_error_is_logged_and_notified(
        self, user_with_playlist: User, notifier: RecordingNotifier, log_messages: list[str]
    ) -> None:
        persistence = MagicMock()
        persistence.update_user_playlist = AsyncMock(side_effect=RuntimeError("boom"))
        editor = UserPlaylistEditor(user_with_playlist, persistence, notifier)

        await editor.rename("up1", title="New")

        assert any("Unexpected error during update of up1" in m for m in log_messages)
        assert len(notifier.errors) == 1

    async def test_rejected_write_logs_warning(
        self,
        seeded_editor: UserPlaylistEditor,
        store: InMemoryPlaylistStore,
        log_messages: list[str],
    ) -> None:
        store.fail_on("update")
        await seeded_editor.add_track("up1", "a")
        assert any("Persistence rejected update of up1" in m for m in log_messages)

    async def test_to_user_reflects_local_state(self, seeded_editor: UserPlaylistEditor) -> None:
        await seeded_editor.rename("up1", title="Faves")
        assert seeded_editor.to_user().playlists[0].title == "Faves"

    async def test_persistence_failure_default_message(self) -> None:
        error = PersistenceFailure("update", "up1")
        assert str(error) == "Failed to update playlist up1"
