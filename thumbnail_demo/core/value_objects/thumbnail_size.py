"""ThumbnailSize value object derived from original media dimensions."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE_DIVISOR = 3


@dataclass(frozen=True)
class ThumbnailSize:
    """Immutable target size for a thumbnail.

    ``max_dimension`` is the single scalar handed to imaging providers that
    fit a thumbnail into a square bounding box.
    """

    width: int
    height: int
    max_dimension: int

    @classmethod
    def from_dimensions(
        cls,
        original_width: int,
        original_height: int,
        divisor: int = DEFAULT_SIZE_DIVISOR,
    ) -> ThumbnailSize:
        """Scale *original_width* x *original_height* down by *divisor*.

        Integer truncation only. Zero-sized originals give zero-sized targets.
        """
        if divisor <= 0:
            raise ValueError(f"divisor must be positive, got {divisor}")
        return cls(
            width=original_width // divisor,
            height=original_height // divisor,
            max_dimension=max(original_width, original_height) // divisor,
        )

    @property
    def ffmpeg_size(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0
