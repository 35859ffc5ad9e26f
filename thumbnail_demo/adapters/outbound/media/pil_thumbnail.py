"""PIL / OpenCV thumbnail provider adapter.

Stands in for the operating system's thumbnail service: asks the imaging
libraries for a bitmap resized to fit a square bounding box and re-encodes it
as PNG next to the source. Implements :class:`ThumbnailProviderPort`.
"""
from __future__ import annotations

import asyncio
import logging
import time

import cv2
from PIL import Image

from thumbnail_demo.core.entities.media_file import MediaFile
from thumbnail_demo.core.exceptions import ThumbnailProviderError

logger = logging.getLogger(__name__)

_DEFAULT_SUFFIX = ".thumb1.png"
_DEFAULT_FRAME_SECONDS = 5.0

# Modes Pillow can write to PNG without conversion.
_PNG_MODES = {"1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"}


class PILThumbnailProvider:
    """Thumbnail provider backed by Pillow (images) and OpenCV (video frames).

    Satisfies :class:`~thumbnail_demo.ports.outbound.thumbnail_provider_port.ThumbnailProviderPort`.
    """

    def __init__(
        self,
        output_suffix: str = _DEFAULT_SUFFIX,
        frame_seconds: float = _DEFAULT_FRAME_SECONDS,
    ) -> None:
        self._output_suffix = output_suffix
        self._frame_seconds = frame_seconds

    # -- Port interface --------------------------------------------------------

    def output_path_for(self, media: MediaFile) -> str:
        return media.sibling_path(self._output_suffix)

    async def create_thumbnail(self, media: MediaFile, max_dimension: int) -> str:
        """Write a PNG thumbnail whose longest side is at most *max_dimension*."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None, self._create_thumbnail_sync, media, max_dimension
        )

    # -- Private helpers -------------------------------------------------------

    def _create_thumbnail_sync(self, media: MediaFile, max_dimension: int) -> str:
        output_path = self.output_path_for(media)
        started = time.perf_counter()

        if max_dimension <= 0:
            raise ThumbnailProviderError(
                f"Cannot create thumbnail for {media.path}: "
                f"target size {max_dimension} is not positive"
            )

        try:
            bitmap = self._load_frame(media) if media.is_video else self._load_image(media)
            bitmap.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)
            if bitmap.mode not in _PNG_MODES:
                bitmap = bitmap.convert("RGBA" if "A" in bitmap.getbands() else "RGB")
            # Replaces any existing thumbnail of the same name.
            bitmap.save(output_path, format="PNG")
        except (OSError, ValueError, cv2.error) as exc:
            raise ThumbnailProviderError(
                f"Cannot create thumbnail for {media.path}: {exc}"
            ) from exc

        logger.info(
            "Platform thumbnail created: %s (%dx%d) in %.1f ms",
            output_path, bitmap.width, bitmap.height,
            (time.perf_counter() - started) * 1000,
        )
        return output_path

    @staticmethod
    def _load_image(media: MediaFile) -> Image.Image:
        with Image.open(media.path) as img:
            img.load()
            return img.copy()

    def _load_frame(self, media: MediaFile) -> Image.Image:
        """Decode a representative frame, falling back to the first one."""
        cap = cv2.VideoCapture(media.path)
        if not cap.isOpened():
            raise ThumbnailProviderError(f"Cannot open video file: {media.path}")

        try:
            cap.set(cv2.CAP_PROP_POS_MSEC, self._frame_seconds * 1000)
            ret, frame = cap.read()
            if not ret:
                logger.debug("No frame at %.2fs in %s, using first frame", self._frame_seconds, media.path)
                cap.set(cv2.CAP_PROP_POS_FRAMES, 0)
                ret, frame = cap.read()
            if not ret:
                raise ThumbnailProviderError(f"Failed to decode a frame from {media.path}")
        finally:
            cap.release()

        return Image.fromarray(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
