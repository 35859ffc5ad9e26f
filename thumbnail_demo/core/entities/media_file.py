"""MediaFile entity representing a source file and the metadata we consume."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from thumbnail_demo.core.entities.media_type import MediaType


@dataclass
class MediaFile:
    """A source media file with its pixel dimensions."""

    path: str
    media_type: MediaType
    width: int = 0
    height: int = 0

    @property
    def filename(self) -> str:
        return Path(self.path).name

    @property
    def is_video(self) -> bool:
        return self.media_type is MediaType.VIDEO

    @property
    def resolution_str(self) -> str:
        return f"{self.width}x{self.height}"

    def sibling_path(self, suffix: str) -> str:
        """Return ``<original><suffix>`` in the same folder as the source."""
        return self.path + suffix
