"""
In-app playability of tracks and playlists.

Pure queries over catalog snapshots; evaluated fresh every time a card
renders its action.
"""

from typing import Iterable, Mapping, Optional

from teo_catalog.core.config import MediaConfig
from teo_catalog.domain.catalog.models import Playlist, Track

from .classifier import DirectAudio, classify


def is_playable_in_app(track: Track, config: Optional[MediaConfig] = None) -> bool:
    """True iff the track's source is directly streamable audio."""
    return isinstance(classify(track.source_url, config), DirectAudio)


def resolve_tracks(
    track_ids: Iterable[str], tracks_by_id: Mapping[str, Track]
) -> list[Track]:
    """Look up track ids in order, dropping ids missing from the catalog."""
    return [tracks_by_id[track_id] for track_id in track_ids if track_id in tracks_by_id]


def playable_track_ids(
    playlist: Playlist,
    tracks_by_id: Mapping[str, Track],
    config: Optional[MediaConfig] = None,
) -> list[str]:
    """Ordered subset of a playlist's track ids that can play in the app.

    Duplicates are kept in place; ids that do not resolve to a known track
    are dropped.
    """
    return [
        track_id
        for track_id in playlist.track_ids
        if track_id in tracks_by_id
        and is_playable_in_app(tracks_by_id[track_id], config)
    ]


def playable_tracks(
    playlist: Playlist,
    tracks_by_id: Mapping[str, Track],
    config: Optional[MediaConfig] = None,
) -> list[Track]:
    """Same as playable_track_ids, resolved to Track records."""
    return resolve_tracks(playable_track_ids(playlist, tracks_by_id, config), tracks_by_id)
