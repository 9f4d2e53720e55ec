"""Media domain - deciding how a catalog item can be played.

This domain handles:
- Classifying raw URLs into YouTube / Suno playlist / direct audio / unsupported
- Resolving classifications into iframe embed targets
- In-app playability of tracks and playlists
- Choosing the primary action of a playlist card
"""

from .actions import CardAction, CardActionKind, choose_playlist_action, external_host_label
from .classifier import (
    DirectAudio,
    MediaClassification,
    SunoPlaylist,
    Unsupported,
    YouTube,
    classify,
    is_provider_url,
    provider_of,
)
from .embed import (
    EmbedOptions,
    EmbedTarget,
    open_embed,
    require_embed,
    resolve,
    resolve_url,
)
from .exceptions import EmbedResolutionFailed, MediaError
from .playability import (
    is_playable_in_app,
    playable_track_ids,
    playable_tracks,
    resolve_tracks,
)

__all__ = [
    # Actions
    "CardAction",
    "CardActionKind",
    "choose_playlist_action",
    "external_host_label",
    # Classifier
    "DirectAudio",
    "MediaClassification",
    "SunoPlaylist",
    "Unsupported",
    "YouTube",
    "classify",
    "is_provider_url",
    "provider_of",
    # Embed
    "EmbedOptions",
    "EmbedTarget",
    "open_embed",
    "require_embed",
    "resolve",
    "resolve_url",
    # Exceptions
    "EmbedResolutionFailed",
    "MediaError",
    # Playability
    "is_playable_in_app",
    "playable_track_ids",
    "playable_tracks",
    "resolve_tracks",
]
