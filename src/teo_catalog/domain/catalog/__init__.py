"""Catalog domain - content records, repository and display grouping.

This domain handles:
- Immutable catalog records (tracks, playlists, videos, news, users)
- The read-only content repository and its JSON loader
- Grouping curated playlists into ordered display sections
"""

from .collections import (
    CATEGORY_ORDER,
    PlaylistSection,
    group_by_category,
    playlist_sections,
)
from .exceptions import CatalogError, CatalogLoadError
from .models import (
    OTHER_CATEGORY,
    NewsArticle,
    Playlist,
    PlaylistCategory,
    SubscriptionTier,
    Track,
    User,
    UserPlaylist,
    Video,
)
from .repository import ContentRepository, StaticContentRepository

__all__ = [
    # Collections
    "CATEGORY_ORDER",
    "PlaylistSection",
    "group_by_category",
    "playlist_sections",
    # Exceptions
    "CatalogError",
    "CatalogLoadError",
    # Models
    "OTHER_CATEGORY",
    "NewsArticle",
    "Playlist",
    "PlaylistCategory",
    "SubscriptionTier",
    "Track",
    "User",
    "UserPlaylist",
    "Video",
    # Repository
    "ContentRepository",
    "StaticContentRepository",
]
