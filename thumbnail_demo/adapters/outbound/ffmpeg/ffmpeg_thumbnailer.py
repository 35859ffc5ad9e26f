"""FFmpeg subprocess thumbnail adapter.

Implements :class:`ExternalThumbnailerPort` by grabbing one frame with the
FFmpeg executable and scaling it to the requested size.
"""
from __future__ import annotations

import dataclasses
import logging

from thumbnail_demo.adapters.outbound.ffmpeg.ffmpeg_base import ProcessOutcome, run_process
from thumbnail_demo.core.entities.media_type import MediaType
from thumbnail_demo.core.value_objects.thumbnail_size import ThumbnailSize

logger = logging.getLogger(__name__)

_DEFAULT_SEEK_SECONDS = 5.0
_DEFAULT_SUFFIX = ".thumb2.png"


class FFmpegThumbnailer:
    """Creates ``<original>.thumb2.png`` through an FFmpeg child process.

    Satisfies :class:`~thumbnail_demo.ports.outbound.external_thumbnailer_port.ExternalThumbnailerPort`.
    """

    def __init__(
        self,
        ffmpeg_path: str,
        seek_seconds: float = _DEFAULT_SEEK_SECONDS,
        output_suffix: str = _DEFAULT_SUFFIX,
        check_exit_code: bool = True,
    ) -> None:
        self._ffmpeg_path = ffmpeg_path
        self._seek_seconds = seek_seconds
        self._output_suffix = output_suffix
        self._check_exit_code = check_exit_code

    # -- Port interface --------------------------------------------------------

    def output_path_for(self, media_path: str) -> str:
        return media_path + self._output_suffix

    def build_args(
        self,
        media_path: str,
        size: ThumbnailSize,
        media_type: MediaType,
    ) -> list[str]:
        """Build the FFmpeg arguments (without the binary itself)."""
        args: list[str] = []
        if media_type is MediaType.VIDEO:
            # Skip intros/black frames and ignore the audio track
            args.extend(["-ss", f"{self._seek_seconds:g}", "-an"])
        args.extend([
            "-i", media_path,
            "-vframes", "1",
            "-s", size.ffmpeg_size,
            "-y",
            self.output_path_for(media_path),
        ])
        return args

    async def create_thumbnail(
        self,
        media_path: str,
        size: ThumbnailSize,
        media_type: MediaType,
    ) -> ProcessOutcome:
        """Run FFmpeg for *media_path* and return once the process has exited."""
        output_path = self.output_path_for(media_path)
        logger.info("FFmpeg thumbnail %s -> %s (%s)", media_path, output_path, size.ffmpeg_size)

        outcome = await run_process(
            [self._ffmpeg_path, *self.build_args(media_path, size, media_type)],
            check=self._check_exit_code,
        )
        if outcome.succeeded:
            logger.info("FFmpeg thumbnail created in %d ms", outcome.elapsed_ms)
        else:
            logger.warning("FFmpeg exited with rc=%d after %d ms, %s may be missing", outcome.returncode, outcome.elapsed_ms, output_path)
        return dataclasses.replace(outcome, output_path=output_path)
