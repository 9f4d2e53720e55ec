"""Media-specific exceptions for error handling."""

from typing import Optional


class MediaError(Exception):
    """Base exception for media resolution."""

    pass


class EmbedResolutionFailed(MediaError):
    """Raised when a provider URL carries no usable id to embed."""

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        super().__init__(message or f"Could not extract an embeddable id from: {url}")
