"""
Playlist grouping for display.

Groups are recomputed from the source playlists on every call; empty
sections are hidden, nothing is discarded permanently.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from loguru import logger

from .models import OTHER_CATEGORY, Playlist, PlaylistCategory

CATEGORY_ORDER: tuple[str, ...] = tuple(category.value for category in PlaylistCategory)


@dataclass(frozen=True)
class PlaylistSection:
    """A titled, non-empty group of playlists."""

    title: str
    playlists: tuple[Playlist, ...]


def group_by_category(
    playlists: Iterable[Playlist],
    category_order: Optional[Sequence[str]] = None,
) -> dict[str, list[Playlist]]:
    """Group playlists into ordered category buckets.

    Buckets follow category_order regardless of input order. Playlists whose
    category is missing or not in category_order go to a trailing "Other"
    bucket. Empty buckets are left out of the result.

    Args:
        playlists: Playlists in catalog order
        category_order: Section order (default: CATEGORY_ORDER)

    Returns:
        Ordered mapping of category title to its playlists
    """
    order = category_order if category_order is not None else CATEGORY_ORDER

    # "Other" is always the terminal bucket, even if listed in category_order
    groups: dict[str, list[Playlist]] = {
        category: [] for category in order if category != OTHER_CATEGORY
    }
    other: list[Playlist] = []

    for playlist in playlists:
        category = _category_key(playlist.category)
        if category is not None and category in groups:
            groups[category].append(playlist)
        else:
            other.append(playlist)

    result = {category: items for category, items in groups.items() if items}
    if other:
        result[OTHER_CATEGORY] = other

    logger.debug(
        f"Grouped playlists into {len(result)} sections ({len(other)} uncategorized)"
    )
    return result


def playlist_sections(
    playlists: Iterable[Playlist],
    category_order: Optional[Sequence[str]] = None,
) -> list[PlaylistSection]:
    """Same grouping as group_by_category, as a list of display sections."""
    return [
        PlaylistSection(title=title, playlists=tuple(items))
        for title, items in group_by_category(playlists, category_order).items()
    ]


def _category_key(category) -> Optional[str]:
    """Normalize a category (enum member or raw string) to its display value."""
    if category is None:
        return None
    if isinstance(category, PlaylistCategory):
        return category.value
    return str(category)
