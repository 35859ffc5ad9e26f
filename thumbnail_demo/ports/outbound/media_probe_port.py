"""Port for reading source media metadata."""
from __future__ import annotations
from typing import Protocol, runtime_checkable

from thumbnail_demo.core.entities.media_file import MediaFile


@runtime_checkable
class MediaProbePort(Protocol):
    async def probe(self, path: str) -> MediaFile: ...
