"""In-memory quiz duel server (zimble.server) and its data models (zimble.representations)."""

__version__ = "0.1.0"
__all__ = ["representations", "server"]