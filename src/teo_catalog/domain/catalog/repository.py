"""
Content repository interface and the static JSON implementation.

The repository is read-only from the core's point of view: it hands out
snapshots of the catalog, and every query returns fresh containers so
callers can never mutate the shared catalog.
"""

import json
from pathlib import Path
from typing import Iterable, Protocol

from loguru import logger
from pydantic import ValidationError as SchemaValidationError

from .exceptions import CatalogLoadError
from .models import NewsArticle, Playlist, Track, Video
from .schemas import CatalogDocument


class ContentRepository(Protocol):
    """Read-only catalog collaborator."""

    def get_tracks(self) -> dict[str, Track]:
        """Return all known tracks keyed by id."""
        ...

    def get_playlists(self) -> list[Playlist]:
        """Return curated playlists in catalog order."""
        ...

    def get_videos(self) -> list[Video]:
        """Return official videos in catalog order."""
        ...

    def get_news(self) -> list[NewsArticle]:
        """Return news articles in catalog order."""
        ...


class StaticContentRepository:
    """In-memory catalog snapshot, optionally loaded from a JSON file."""

    def __init__(
        self,
        tracks: Iterable[Track] = (),
        playlists: Iterable[Playlist] = (),
        videos: Iterable[Video] = (),
        news: Iterable[NewsArticle] = (),
    ) -> None:
        self._tracks = {track.id: track for track in tracks}
        self._playlists = list(playlists)
        self._videos = list(videos)
        self._news = list(news)

    @classmethod
    def from_document(cls, document: CatalogDocument) -> "StaticContentRepository":
        return cls(
            tracks=[entry.to_track() for entry in document.tracks],
            playlists=[entry.to_playlist() for entry in document.playlists],
            videos=[entry.to_video() for entry in document.videos],
            news=[entry.to_article() for entry in document.news],
        )

    @classmethod
    def from_file(cls, path: Path) -> "StaticContentRepository":
        """Load and validate a catalog JSON file.

        Args:
            path: Path to the catalog document

        Returns:
            Repository holding the file's content

        Raises:
            CatalogLoadError: If the file is missing or unreadable, is not UTF-8
                JSON, or fails validation
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise CatalogLoadError(str(path), "file not found") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(str(path), f"invalid JSON ({e})") from e
        except UnicodeDecodeError as e:
            raise CatalogLoadError(str(path), f"not UTF-8 ({e.reason})") from e
        except OSError as e:
            raise CatalogLoadError(str(path), f"unreadable ({e.strerror or e})") from e

        try:
            document = CatalogDocument.model_validate(raw)
        except SchemaValidationError as e:
            raise CatalogLoadError(str(path), f"{e.error_count()} validation error(s)") from e

        repository = cls.from_document(document)
        logger.info(
            f"Loaded catalog from {path}: {len(document.tracks)} tracks, "
            f"{len(document.playlists)} playlists, {len(document.videos)} videos, "
            f"{len(document.news)} news"
        )
        return repository

    def get_tracks(self) -> dict[str, Track]:
        return dict(self._tracks)

    def get_playlists(self) -> list[Playlist]:
        return list(self._playlists)

    def get_videos(self) -> list[Video]:
        return list(self._videos)

    def get_news(self) -> list[NewsArticle]:
        return list(self._news)

    def get_news_article(self, index: int) -> NewsArticle | None:
        """Get a news article by its position, or None if out of range."""
        if 0 <= index < len(self._news):
            return self._news[index]
        return None
