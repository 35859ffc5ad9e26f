"""
Thumbnail demo configuration using Pydantic Settings.
Replaces the hard-coded FFmpeg path and size divisor with validated settings
and environment variable overrides.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from thumbnail_demo.adapters.outbound.ffmpeg.ffmpeg_base import get_ffmpeg_path
from thumbnail_demo.core.exceptions import ConfigurationError, MediaNotFoundError
from thumbnail_demo.core.value_objects.thumbnail_size import DEFAULT_SIZE_DIVISOR

# Load .env before any BaseSettings subclass reads env vars
load_dotenv()


def get_media_directory_path() -> Path:
    """Return the ``media`` folder beside the executable that launched us."""
    entry_point = sys.argv[0] if sys.argv else ""
    exe_dir = os.path.dirname(os.path.abspath(entry_point)) if entry_point else ""
    if not exe_dir:
        raise MediaNotFoundError("<directory of the running executable>")
    return Path(exe_dir) / "media"


class FFmpegSettings(BaseSettings):
    path: str = Field(default_factory=get_ffmpeg_path)
    seek_seconds: float = 5.0
    check_exit_code: bool = True

    model_config = {"env_prefix": "FFMPEG_"}


class ThumbnailSettings(BaseSettings):
    size_divisor: int = Field(default=DEFAULT_SIZE_DIVISOR, gt=0)
    platform_suffix: str = ".thumb1.png"
    ffmpeg_suffix: str = ".thumb2.png"

    model_config = {"env_prefix": "THUMBNAIL_"}


class StorageSettings(BaseSettings):
    # Empty means "media" next to the running entry point
    media_dir: str = ""
    video_name: str = "Video.wmv"
    image_name: str = "Image.png"

    model_config = {"env_prefix": "STORAGE_"}


class LoggingSettings(BaseSettings):
    level: str = "INFO"

    model_config = {"env_prefix": "LOG_"}


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    ffmpeg: FFmpegSettings = Field(default_factory=FFmpegSettings)
    thumbnail: ThumbnailSettings = Field(default_factory=ThumbnailSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def media_dir(self) -> Path:
        if not self.storage.media_dir:
            return get_media_directory_path()
        return Path(self.storage.media_dir).expanduser().resolve()

    def validate_startup(self) -> None:
        """Fail fast when the FFmpeg executable does not exist on disk."""
        if not self.ffmpeg.path or not Path(self.ffmpeg.path).is_file():
            raise ConfigurationError(
                "Please make sure that the FFMPEG_PATH setting contains the "
                "location of the ffmpeg executable on your system! "
                f'Current value is "{self.ffmpeg.path}"'
            )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
