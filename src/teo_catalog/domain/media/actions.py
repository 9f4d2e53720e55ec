"""
Playback affordance selection for playlist cards.

A card offers exactly one primary action, picked in priority order:
embeddable playlist, YouTube video, in-app audio, external link, nothing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional
from urllib.parse import urlsplit

from teo_catalog.core.config import MediaConfig
from teo_catalog.domain.catalog.models import Playlist, Track

from .classifier import provider_of
from .playability import playable_track_ids


class CardActionKind(str, Enum):
    """Primary action a playlist card can offer."""

    PLAY_EMBED = "play_embed"
    WATCH_VIDEO = "watch_video"
    PLAY_IN_APP = "play_in_app"
    OPEN_EXTERNAL = "open_external"
    NONE = "none"


@dataclass(frozen=True)
class CardAction:
    """What a playlist card shows and where its buttons lead."""

    kind: CardActionKind
    label: Optional[str] = None
    url: Optional[str] = None  # external_url for embed/video/link actions
    secondary_label: Optional[str] = None  # "Open on <host>" next to embeds
    playable_track_ids: tuple[str, ...] = ()


def choose_playlist_action(
    playlist: Playlist,
    tracks_by_id: Mapping[str, Track],
    config: Optional[MediaConfig] = None,
) -> CardAction:
    """Pick the card action for a playlist.

    Args:
        playlist: The playlist being rendered
        tracks_by_id: Current catalog tracks
        config: Media settings

    Returns:
        The highest-priority action available
    """
    external_url = playlist.external_url
    provider = provider_of(external_url, config) if external_url else None

    if provider == "suno":
        return CardAction(
            kind=CardActionKind.PLAY_EMBED,
            label="Play on TeO",
            url=external_url,
            secondary_label=f"Open on {external_host_label(external_url)}",
        )

    if provider == "youtube":
        return CardAction(kind=CardActionKind.WATCH_VIDEO, label="Watch Video", url=external_url)

    playable = playable_track_ids(playlist, tracks_by_id, config)
    if playable:
        return CardAction(
            kind=CardActionKind.PLAY_IN_APP,
            label="Play in App",
            playable_track_ids=tuple(playable),
        )

    if external_url and external_url != "#":
        return CardAction(
            kind=CardActionKind.OPEN_EXTERNAL,
            label=f"Open on {external_host_label(external_url)}",
            url=external_url,
        )

    return CardAction(kind=CardActionKind.NONE)


def external_host_label(url: Optional[str]) -> str:
    """Host name for an "Open on ..." link, without a leading www."""
    if not url:
        return "Link"
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return "Link"
    if not host:
        return "Link"
    return host.removeprefix("www.")
