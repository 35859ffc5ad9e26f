"""Port for platform imaging thumbnail providers."""
from __future__ import annotations
from typing import Protocol, runtime_checkable

from thumbnail_demo.core.entities.media_file import MediaFile


@runtime_checkable
class ThumbnailProviderPort(Protocol):
    async def create_thumbnail(self, media: MediaFile, max_dimension: int) -> str: ...
