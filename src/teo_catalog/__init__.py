"""TeO catalog core: media source resolution and playback queue engine."""

__version__ = "0.1.0"
