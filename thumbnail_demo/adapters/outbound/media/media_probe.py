"""Media metadata probe using Pillow for images and OpenCV for video."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import cv2
from PIL import Image

from thumbnail_demo.core.entities.media_file import MediaFile
from thumbnail_demo.core.entities.media_type import MediaType
from thumbnail_demo.core.exceptions import MediaNotFoundError, MediaReadError

logger = logging.getLogger(__name__)

VIDEO_EXTS = {".wmv", ".mp4", ".webm", ".mkv", ".mov", ".avi", ".m4v"}


def classify(path: str) -> MediaType:
    """Classify by file extension."""
    return MediaType.VIDEO if Path(path).suffix.lower() in VIDEO_EXTS else MediaType.IMAGE


class MediaProbe:
    """Reads width/height of a source file.

    Satisfies :class:`~thumbnail_demo.ports.outbound.media_probe_port.MediaProbePort`.
    """

    async def probe(self, path: str) -> MediaFile:
        if not Path(path).is_file():
            raise MediaNotFoundError(path)

        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._probe_sync, path)

    def _probe_sync(self, path: str) -> MediaFile:
        media_type = classify(path)
        if media_type is MediaType.VIDEO:
            width, height = self._video_dimensions(path)
        else:
            try:
                with Image.open(path) as img:
                    width, height = img.size
            except OSError as exc:
                raise MediaReadError(f"Cannot read image file: {path}") from exc

        logger.debug("Probed %s: %s %dx%d", path, media_type.value, width, height)
        return MediaFile(path=path, media_type=media_type, width=width, height=height)

    @staticmethod
    def _video_dimensions(path: str) -> tuple[int, int]:
        cap = cv2.VideoCapture(path)
        if not cap.isOpened():
            raise MediaReadError(f"Cannot open video file: {path}")

        try:
            width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
            height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
            return width, height
        finally:
            cap.release()
