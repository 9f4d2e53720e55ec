"""
Embed target resolution for classified media.

resolve() is pure: the same classification and options always produce the
same target. UI side effects (notices, closing a modal) belong to callers;
open_embed() is the helper modal code uses for that.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from teo_catalog.core.config import MediaConfig
from teo_catalog.notifications import Notifier

from .classifier import (
    DirectAudio,
    MediaClassification,
    SunoPlaylist,
    Unsupported,
    YouTube,
    classify,
    provider_of,
)
from .exceptions import EmbedResolutionFailed

_DEFAULT_CONFIG = MediaConfig()

# User-visible notices when a provider link is broken, keyed by provider
_FAILURE_MESSAGES = {
    "youtube": "Invalid video URL provided.",
    "suno": "Invalid Suno playlist URL.",
}
NOT_EMBEDDABLE_MESSAGE = "This link cannot be embedded."


@dataclass(frozen=True)
class EmbedOptions:
    """Options for building an embed URL."""

    autoplay: bool = False


@dataclass(frozen=True)
class EmbedTarget:
    """A provider URL suitable for an iframe."""

    url: str
    provider: str  # 'youtube' | 'suno'
    title: str  # iframe title


def resolve(
    classification: MediaClassification,
    options: Optional[EmbedOptions] = None,
    config: Optional[MediaConfig] = None,
) -> Optional[EmbedTarget]:
    """Build the embed target for a classification.

    Args:
        classification: Result of classify()
        options: Embed options (default: no autoplay)
        config: Media settings (default: built-in MediaConfig)

    Returns:
        EmbedTarget for YouTube and Suno playlists; None for direct audio and
        unsupported links, which are not embeddable

    Examples:
        >>> resolve(YouTube("dQw4w9WgXcQ"), EmbedOptions(autoplay=True)).url
        'https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0&autoplay=1'
    """
    options = options or EmbedOptions()
    config = config or _DEFAULT_CONFIG

    match classification:
        case YouTube(video_id=video_id):
            url = f"{config.youtube_embed_base}{video_id}?rel=0"
            if options.autoplay:
                url += "&autoplay=1"
            return EmbedTarget(url=url, provider="youtube", title="Video player")
        case SunoPlaylist(playlist_id=playlist_id):
            url = config.suno_embed_template.format(playlist_id=playlist_id)
            return EmbedTarget(url=url, provider="suno", title="Suno Playlist Player")
        case DirectAudio() | Unsupported():
            return None
        case _:
            raise TypeError(f"Unknown media classification: {classification!r}")


def resolve_url(
    url: Optional[str],
    options: Optional[EmbedOptions] = None,
    config: Optional[MediaConfig] = None,
) -> Optional[EmbedTarget]:
    """Classify a raw URL and resolve it in one step."""
    return resolve(classify(url, config), options, config)


def require_embed(
    url: Optional[str],
    options: Optional[EmbedOptions] = None,
    config: Optional[MediaConfig] = None,
) -> Optional[EmbedTarget]:
    """Resolve a URL, failing loudly for broken provider links.

    Returns:
        The embed target, or None if the URL is not a provider URL at all

    Raises:
        EmbedResolutionFailed: If the URL points at YouTube or the playlist
            provider but no valid id could be extracted
    """
    target = resolve_url(url, options, config)
    if target is None and provider_of(url, config) is not None:
        raise EmbedResolutionFailed(url or "")
    return target


def open_embed(
    url: Optional[str],
    notifier: Notifier,
    options: Optional[EmbedOptions] = None,
    config: Optional[MediaConfig] = None,
) -> Optional[EmbedTarget]:
    """Resolve the embed for a modal, notifying the user on failure.

    A None return tells the caller to close the modal that asked for it.
    """
    try:
        target = require_embed(url, options, config)
    except EmbedResolutionFailed as e:
        logger.warning(str(e))
        notifier.notify_error(_FAILURE_MESSAGES[provider_of(url, config)])
        return None

    if target is None:
        logger.info(f"Link is not embeddable: {url!r}")
        notifier.notify_error(NOT_EMBEDDABLE_MESSAGE)
    return target
