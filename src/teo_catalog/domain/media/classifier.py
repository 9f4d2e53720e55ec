"""
Media source classification.

Every raw URL in the catalog is assigned exactly one MediaClassification.
Classification is derived, never stored: it is recomputed from the URL
whenever a caller needs it, and it never raises.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import SplitResult, parse_qs, urlsplit

from loguru import logger

from teo_catalog.core.config import MediaConfig


@dataclass(frozen=True)
class YouTube:
    """A YouTube video with a well-formed 11 character id."""

    video_id: str


@dataclass(frozen=True)
class SunoPlaylist:
    """A playlist on the embeddable playlist provider."""

    playlist_id: str


@dataclass(frozen=True)
class DirectAudio:
    """A directly streamable audio file."""

    url: str


@dataclass(frozen=True)
class Unsupported:
    """Anything else. Callers fall back to a plain external link."""


MediaClassification = Union[YouTube, SunoPlaylist, DirectAudio, Unsupported]

YOUTUBE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")
SHORT_YOUTUBE_HOST = "youtu.be"

# Path prefixes on the long YouTube domain that carry the id as next segment
_YOUTUBE_ID_PATHS = ("embed", "shorts", "live", "v")
_SUNO_PLAYLIST_PATH = re.compile(r"^/playlist/([^/]+)")

_DEFAULT_CONFIG = MediaConfig()


def classify(url: Optional[str], config: Optional[MediaConfig] = None) -> MediaClassification:
    """Classify a raw media URL.

    Checks run in order: YouTube, embeddable playlist provider, direct
    audio. A provider URL whose id cannot be extracted falls through to
    the later checks instead of failing.

    Args:
        url: Raw URL as found in the catalog (may be empty or None)
        config: Media settings (default: built-in MediaConfig)

    Returns:
        The URL's classification; Unsupported for empty or malformed input

    Examples:
        >>> classify("https://youtu.be/dQw4w9WgXcQ")
        YouTube(video_id='dQw4w9WgXcQ')
        >>> classify("https://example.com/page")
        Unsupported()
    """
    config = config or _DEFAULT_CONFIG
    normalized = _normalize(url, config)
    if not normalized:
        return Unsupported()

    parts = _split(normalized)
    if parts is None:
        logger.debug(f"Unparsable media URL: {url!r}")
        return Unsupported()

    host = (parts.hostname or "").lower()

    if is_youtube_host(host, config):
        video_id = extract_youtube_id(parts)
        if video_id:
            return YouTube(video_id)
        logger.debug(f"YouTube URL without a valid video id: {url!r}")

    if is_embed_provider_host(host, config):
        playlist_id = extract_suno_playlist_id(parts)
        if playlist_id:
            return SunoPlaylist(playlist_id)

    if _is_direct_audio(normalized, parts, config):
        return DirectAudio(normalized)

    return Unsupported()


def provider_of(url: Optional[str], config: Optional[MediaConfig] = None) -> Optional[str]:
    """Name the embed provider a URL points at, valid id or not.

    Returns:
        'youtube', 'suno', or None for any other (or unparsable) URL
    """
    config = config or _DEFAULT_CONFIG
    normalized = _normalize(url, config)
    if not normalized:
        return None
    parts = _split(normalized)
    if parts is None:
        return None
    host = (parts.hostname or "").lower()
    if is_youtube_host(host, config):
        return "youtube"
    if is_embed_provider_host(host, config):
        return "suno"
    return None


def is_provider_url(url: Optional[str], config: Optional[MediaConfig] = None) -> bool:
    """True when the URL points at an embed provider, valid id or not."""
    return provider_of(url, config) is not None


def is_youtube_host(host: str, config: Optional[MediaConfig] = None) -> bool:
    config = config or _DEFAULT_CONFIG
    return any(
        host == domain or host.endswith("." + domain) for domain in config.youtube_hosts
    )


def is_embed_provider_host(host: str, config: Optional[MediaConfig] = None) -> bool:
    config = config or _DEFAULT_CONFIG
    return bool(host) and config.embed_provider_domain in host


def extract_youtube_id(parts: SplitResult) -> Optional[str]:
    """Extract an 11 character video id from a YouTube URL.

    Short links carry the id as the first path segment; long links carry it
    in the "v" query parameter, or after /embed/, /shorts/, /live/ or /v/.

    Returns:
        The video id, or None if absent or not exactly 11 valid characters
    """
    host = (parts.hostname or "").lower()
    segments = [segment for segment in parts.path.split("/") if segment]

    if host == SHORT_YOUTUBE_HOST or host.endswith("." + SHORT_YOUTUBE_HOST):
        candidate = segments[0] if segments else None
    else:
        candidate = (parse_qs(parts.query).get("v") or [None])[0]
        if not candidate and len(segments) >= 2 and segments[0] in _YOUTUBE_ID_PATHS:
            candidate = segments[1]

    if candidate and YOUTUBE_ID_PATTERN.match(candidate):
        return candidate
    return None


def extract_suno_playlist_id(parts: SplitResult) -> Optional[str]:
    """Extract <id> from a /playlist/<id> path, or None."""
    match = _SUNO_PLAYLIST_PATH.match(parts.path)
    return match.group(1) if match else None


def _normalize(url: Optional[str], config: MediaConfig) -> str:
    """Strip whitespace and add https:// to scheme-less provider links."""
    url = (url or "").strip()
    if not url or "://" in url:
        return url

    known_hosts = [*config.youtube_hosts, config.embed_provider_domain]
    lowered = url.lower()
    for host in known_hosts:
        for prefix in (host, "www." + host, "m." + host, "music." + host):
            if lowered.startswith(prefix + "/"):
                return "https://" + url
    return url


def _split(url: str) -> Optional[SplitResult]:
    try:
        parts = urlsplit(url)
        # Accessing port validates the netloc (raises on garbage like "host:abc")
        parts.port
    except ValueError:
        return None
    return parts


def _is_direct_audio(url: str, parts: SplitResult, config: MediaConfig) -> bool:
    lowered = url.lower()
    if any(lowered.startswith(prefix.lower()) for prefix in config.trusted_storage_prefixes):
        return True
    path = parts.path.lower()
    return path.endswith(tuple(ext.lower() for ext in config.audio_extensions))
