"""
Catalog domain models.

Contains data structures for tracks, playlists, videos, news and users as
delivered by the content repository. All records are immutable; edits
produce new instances via dataclasses.replace().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional


class Track(NamedTuple):
    """Represents a catalog track.

    source_url is the canonical audio location and never changes once the
    track has been ingested from the catalog.
    """

    id: str
    title: str
    artist_name: str
    source_url: str
    cover_image_url: str = ""


class PlaylistCategory(str, Enum):
    """Curated playlist categories, in default display order."""

    TEO_OFFICIAL = "TeO Official"
    SMT_SELECTS = "S.M.T. Selects"
    SHOWCASE = "Showcase"
    OCCASIONAL = "Occasional"
    USER_PLAYLISTS = "User Playlists"


OTHER_CATEGORY = "Other"


@dataclass(frozen=True)
class Playlist:
    """Represents a playlist.

    track_ids is ordered playback order and may contain duplicates or ids
    that no longer exist in the catalog.
    """

    id: str
    title: str
    description: str = ""
    cover_image_url: str = ""
    category: Optional[str] = None  # PlaylistCategory value, anything else is "Other"
    track_ids: tuple[str, ...] = ()
    external_url: Optional[str] = None


@dataclass(frozen=True)
class UserPlaylist(Playlist):
    """A playlist owned by exactly one user."""

    category: Optional[str] = PlaylistCategory.USER_PLAYLISTS.value
    owner_id: str = ""


@dataclass(frozen=True)
class Video:
    """Represents an official video production."""

    id: str
    title: str
    artist_name: str
    video_url: str
    description: str = ""
    thumbnail_url: str = ""
    release_date: str = ""


@dataclass(frozen=True)
class NewsArticle:
    """Represents a news post. Articles are addressed by their index."""

    title: str
    date: str
    summary: str = ""
    image_url: str = ""


class SubscriptionTier(str, Enum):
    """Account subscription tiers."""

    FREE = "Free"
    PRO = "Pro"
    VIP = "VIP"


@dataclass(frozen=True)
class User:
    """Represents a signed-in user."""

    id: str
    email: str
    name: str = ""
    tier: SubscriptionTier = SubscriptionTier.FREE
    playlists: tuple[UserPlaylist, ...] = field(default_factory=tuple)
