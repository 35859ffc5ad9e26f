"""Custom exception hierarchy for the thumbnail demo."""
from __future__ import annotations


class ThumbnailDemoError(Exception):
    """Base exception for all thumbnail demo errors."""


class ConfigurationError(ThumbnailDemoError):
    """Raised when startup settings are unusable (e.g. FFmpeg is missing)."""


class MediaNotFoundError(ThumbnailDemoError):
    """Raised when the media directory or a source file cannot be located."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Media not found: {path}")


class ThumbnailProviderError(ThumbnailDemoError):
    """Raised when the imaging provider cannot decode or encode a thumbnail."""


class FFmpegError(ThumbnailDemoError):
    """Raised when an FFmpeg invocation exits with a non-zero code."""

    def __init__(self, returncode: int, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"FFmpeg failed (rc={returncode}): {stderr[-500:]}")


class MediaReadError(ThumbnailDemoError):
    """Raised when a source file exists but its dimensions cannot be read."""
