"""
Dependency injection container.
Wires together ports and adapters based on configuration.
"""
from __future__ import annotations

import logging
from typing import Optional

from thumbnail_demo.infrastructure.config import Settings

logger = logging.getLogger(__name__)


class ApplicationContainer:
    """Simplified container that builds concrete instances from settings.

    Usage::

        container = ApplicationContainer(settings)
        service = container.benchmark_service()
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._cache: dict[str, object] = {}

    def _get_or_create(self, key: str, factory):
        if key not in self._cache:
            self._cache[key] = factory(self.settings)
        return self._cache[key]

    # ── Lazy factory helpers ──────────────────────────────────────

    @staticmethod
    def _build_media_probe(settings: Settings):
        from thumbnail_demo.adapters.outbound.media.media_probe import MediaProbe
        return MediaProbe()

    @staticmethod
    def _build_platform_provider(settings: Settings):
        from thumbnail_demo.adapters.outbound.media.pil_thumbnail import PILThumbnailProvider
        return PILThumbnailProvider(
            output_suffix=settings.thumbnail.platform_suffix,
            frame_seconds=settings.ffmpeg.seek_seconds,
        )

    @staticmethod
    def _build_external_tool(settings: Settings):
        from thumbnail_demo.adapters.outbound.ffmpeg.ffmpeg_thumbnailer import FFmpegThumbnailer
        return FFmpegThumbnailer(
            ffmpeg_path=settings.ffmpeg.path,
            seek_seconds=settings.ffmpeg.seek_seconds,
            output_suffix=settings.thumbnail.ffmpeg_suffix,
            check_exit_code=settings.ffmpeg.check_exit_code,
        )

    # ── Port accessors ─────────────────────────────────────────────

    def media_probe(self):
        return self._get_or_create("media_probe", self._build_media_probe)

    def platform_provider(self):
        return self._get_or_create("platform_provider", self._build_platform_provider)

    def external_tool(self):
        return self._get_or_create("external_tool", self._build_external_tool)

    # ── Application services ───────────────────────────────────────

    def benchmark_service(self):
        from thumbnail_demo.application.thumbnail_benchmark_service import ThumbnailBenchmarkService
        storage = self.settings.storage
        return ThumbnailBenchmarkService(
            probe=self.media_probe(),
            platform_provider=self.platform_provider(),
            external_tool=self.external_tool(),
            media_dir=self.settings.media_dir,
            sources=[("Video", storage.video_name), ("Image", storage.image_name)],
            size_divisor=self.settings.thumbnail.size_divisor,
        )
