"""
Thumbnail benchmark use case.
Runs both thumbnail strategies over the fixed video and image sources and
collects elapsed times.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from thumbnail_demo.application.dto.benchmark_report import (
    FFMPEG_STRATEGY,
    PLATFORM_STRATEGY,
    BenchmarkReport,
    StrategyTiming,
)
from thumbnail_demo.core.entities.media_file import MediaFile
from thumbnail_demo.core.exceptions import MediaNotFoundError
from thumbnail_demo.core.value_objects.thumbnail_size import DEFAULT_SIZE_DIVISOR, ThumbnailSize

logger = logging.getLogger(__name__)


class ThumbnailBenchmarkService:
    """Orchestrates the platform vs. FFmpeg thumbnail comparison."""

    def __init__(
        self,
        probe,              # MediaProbePort
        platform_provider,  # ThumbnailProviderPort
        external_tool,      # ExternalThumbnailerPort
        media_dir: Path,
        sources: Optional[list[tuple[str, str]]] = None,
        size_divisor: int = DEFAULT_SIZE_DIVISOR,
    ):
        self._probe = probe
        self._platform = platform_provider
        self._external = external_tool
        self._media_dir = Path(media_dir)
        # (label, file name) pairs, processed in order
        self._sources = sources or [("Video", "Video.wmv"), ("Image", "Image.png")]
        self._size_divisor = size_divisor

    def get_media_directory_path(self) -> Path:
        if not self._media_dir.is_dir():
            raise MediaNotFoundError(str(self._media_dir))
        return self._media_dir

    async def execute(self) -> BenchmarkReport:
        """Run both strategies for every source, strictly in sequence."""
        media_dir = self.get_media_directory_path()
        report = BenchmarkReport(media_dir=str(media_dir))

        for label, filename in self._sources:
            media = await self._probe.probe(str(media_dir / filename))
            size = ThumbnailSize.from_dimensions(media.width, media.height, self._size_divisor)
            logger.info(
                "%s: %s %s -> %s (max %d)",
                label, media.filename, media.resolution_str, size.ffmpeg_size, size.max_dimension,
            )
            if size.is_empty:
                logger.warning("%s is smaller than 1/%d scale, thumbnail size is empty", media.filename, self._size_divisor)

            report.timings.append(await self._run_platform(label, media, size))
            report.timings.append(await self._run_external(label, media, size))

        return report

    async def _run_platform(self, label: str, media: MediaFile, size: ThumbnailSize) -> StrategyTiming:
        started = time.perf_counter()
        output_path = await self._platform.create_thumbnail(media, size.max_dimension)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        return StrategyTiming(
            label=label,
            strategy=PLATFORM_STRATEGY,
            media_type=media.media_type,
            elapsed_ms=elapsed_ms,
            output_path=output_path,
        )

    async def _run_external(self, label: str, media: MediaFile, size: ThumbnailSize) -> StrategyTiming:
        outcome = await self._external.create_thumbnail(media.path, size, media.media_type)
        return StrategyTiming(
            label=label,
            strategy=FFMPEG_STRATEGY,
            media_type=media.media_type,
            elapsed_ms=outcome.elapsed_ms,
            output_path=outcome.output_path,
            exit_code=outcome.returncode,
        )
