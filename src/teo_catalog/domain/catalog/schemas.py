"""Pydantic schemas for the static catalog document.

The catalog JSON uses the front end's camelCase keys; these models validate
it and convert each entry into the immutable domain records.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .models import NewsArticle, Playlist, Track, Video


class TrackEntry(BaseModel):
    id: str
    title: str
    artist_name: str = Field(alias="artistName")
    source_url: str = Field(default="", alias="sourceUrl")
    cover_image_url: str = Field(default="", alias="coverImageUrl")

    model_config = {"populate_by_name": True}

    def to_track(self) -> Track:
        return Track(
            id=self.id,
            title=self.title,
            artist_name=self.artist_name,
            source_url=self.source_url,
            cover_image_url=self.cover_image_url,
        )


class PlaylistEntry(BaseModel):
    id: str
    title: str
    description: str = ""
    cover_image_url: str = Field(default="", alias="coverImageUrl")
    category: Optional[str] = None
    track_ids: list[str] = Field(default_factory=list, alias="trackIds")
    external_url: Optional[str] = Field(default=None, alias="externalUrl")

    model_config = {"populate_by_name": True}

    def to_playlist(self) -> Playlist:
        return Playlist(
            id=self.id,
            title=self.title,
            description=self.description,
            cover_image_url=self.cover_image_url,
            category=self.category,
            track_ids=tuple(self.track_ids),
            external_url=self.external_url,
        )


class VideoEntry(BaseModel):
    id: str
    title: str
    artist_name: str = Field(default="", alias="artistName")
    video_url: str = Field(alias="videoUrl")
    description: str = ""
    thumbnail_url: str = Field(default="", alias="thumbnailUrl")
    release_date: str = Field(default="", alias="releaseDate")

    model_config = {"populate_by_name": True}

    def to_video(self) -> Video:
        return Video(
            id=self.id,
            title=self.title,
            artist_name=self.artist_name,
            video_url=self.video_url,
            description=self.description,
            thumbnail_url=self.thumbnail_url,
            release_date=self.release_date,
        )


class NewsEntry(BaseModel):
    title: str
    date: str
    summary: str = ""
    image_url: str = Field(default="", alias="imageUrl")

    model_config = {"populate_by_name": True}

    def to_article(self) -> NewsArticle:
        return NewsArticle(
            title=self.title,
            date=self.date,
            summary=self.summary,
            image_url=self.image_url,
        )


class CatalogDocument(BaseModel):
    """Top-level catalog file."""

    tracks: list[TrackEntry] = Field(default_factory=list)
    playlists: list[PlaylistEntry] = Field(default_factory=list)
    videos: list[VideoEntry] = Field(default_factory=list)
    news: list[NewsEntry] = Field(default_factory=list)
