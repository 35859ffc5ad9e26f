"""Port for thumbnail generation through an external executable."""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from thumbnail_demo.core.entities.media_type import MediaType
from thumbnail_demo.core.value_objects.thumbnail_size import ThumbnailSize

if TYPE_CHECKING:
    from thumbnail_demo.adapters.outbound.ffmpeg.ffmpeg_base import ProcessOutcome


@runtime_checkable
class ExternalThumbnailerPort(Protocol):
    def build_args(self, media_path: str, size: ThumbnailSize, media_type: MediaType) -> list[str]: ...
    async def create_thumbnail(self, media_path: str, size: ThumbnailSize, media_type: MediaType) -> ProcessOutcome: ...
