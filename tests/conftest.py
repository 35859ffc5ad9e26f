"""Shared test fixtures for all tests."""
from __future__ import annotations

import os
import stat
import sys
import textwrap
from pathlib import Path
from unittest.mock import AsyncMock

import cv2
import numpy as np
import pytest
from PIL import Image

from thumbnail_demo.adapters.outbound.ffmpeg.ffmpeg_base import ProcessOutcome
from thumbnail_demo.core.entities.media_file import MediaFile
from thumbnail_demo.core.entities.media_type import MediaType


# ── Media Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    path = tmp_path / "media"
    path.mkdir()
    return path


@pytest.fixture
def sample_image(media_dir: Path) -> Path:
    path = media_dir / "Image.png"
    Image.new("RGB", (300, 150), (200, 40, 40)).save(path, format="PNG")
    return path


@pytest.fixture
def sample_video(media_dir: Path) -> Path:
    """Six seconds of 96x72 MJPEG at 10 fps."""
    path = media_dir / "Video.avi"
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), 10.0, (96, 72))
    try:
        for i in range(60):
            frame = np.full((72, 96, 3), (i * 4) % 255, dtype=np.uint8)
            writer.write(frame)
    finally:
        writer.release()
    return path


@pytest.fixture
def image_media(sample_image: Path) -> MediaFile:
    return MediaFile(path=str(sample_image), media_type=MediaType.IMAGE, width=300, height=150)


@pytest.fixture
def video_media(sample_video: Path) -> MediaFile:
    return MediaFile(path=str(sample_video), media_type=MediaType.VIDEO, width=96, height=72)


# ── FFmpeg Fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def fake_ffmpeg(tmp_path: Path) -> Path:
    """Executable that mimics ffmpeg: writes a PNG of the ``-s`` size to the last argument."""
    if sys.platform == "win32":
        pytest.skip("shebang scripts are POSIX only")

    script = tmp_path / "bin" / "ffmpeg"
    script.parent.mkdir()
    script.write_text(textwrap.dedent(f"""\
        #!{sys.executable}
        import sys
        from PIL import Image

        args = sys.argv[1:]
        width, height = args[args.index("-s") + 1].split("x")
        Image.new("RGB", (int(width), int(height)), (10, 20, 30)).save(args[-1], format="PNG")
        with open(args[-1] + ".args", "w") as fh:
            fh.write(" ".join(args))
    """))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith(("FFMPEG_", "THUMBNAIL_", "STORAGE_", "LOG_")):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


# ── Mock Port Fixtures ─────────────────────────────────────────────────────

@pytest.fixture
def mock_probe():
    mock = AsyncMock()

    async def _probe(path: str) -> MediaFile:
        if path.endswith(".wmv"):
            return MediaFile(path=path, media_type=MediaType.VIDEO, width=1920, height=1080)
        return MediaFile(path=path, media_type=MediaType.IMAGE, width=800, height=1200)

    mock.probe.side_effect = _probe
    return mock


@pytest.fixture
def mock_platform_provider():
    mock = AsyncMock()

    async def _create(media: MediaFile, max_dimension: int) -> str:
        return media.path + ".thumb1.png"

    mock.create_thumbnail.side_effect = _create
    return mock


@pytest.fixture
def mock_external_tool():
    mock = AsyncMock()

    async def _create(media_path, size, media_type) -> ProcessOutcome:
        return ProcessOutcome(
            args=["ffmpeg"],
            returncode=0,
            elapsed_ms=42,
            output_path=media_path + ".thumb2.png",
        )

    mock.create_thumbnail.side_effect = _create
    return mock
