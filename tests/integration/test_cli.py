"""End-to-end tests for the thumbnail-demo console command."""
from __future__ import annotations

import logging
from unittest.mock import MagicMock

import click
import pytest
from click.testing import CliRunner
from PIL import Image

from thumbnail_demo.adapters.inbound.cli import EXIT_CONFIG_ERROR, main


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def launch(monkeypatch) -> MagicMock:
    mock = MagicMock(return_value=0)
    monkeypatch.setattr(click, "launch", mock)
    return mock


@pytest.fixture
def cli_env(clean_env):
    # cv2 writes AVI in tests; the real demo reads Video.wmv
    clean_env.setenv("STORAGE_VIDEO_NAME", "Video.avi")
    return clean_env


class TestMissingFFmpeg:
    def test_prints_instructions_and_writes_nothing(self, runner, cli_env, tmp_path, media_dir, sample_image, sample_video):
        missing = tmp_path / "no-ffmpeg"
        result = runner.invoke(main, ["--media-dir", str(media_dir), "--ffmpeg", str(missing), "--no-open"])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Please make sure" in result.output
        assert str(missing) in result.output
        assert not list(media_dir.glob("*.thumb*"))


class TestBenchmarkRun:
    def test_creates_all_thumbnails_and_reports(self, runner, cli_env, launch, media_dir, sample_image, sample_video, fake_ffmpeg):
        result = runner.invoke(main, ["--media-dir", str(media_dir), "--ffmpeg", str(fake_ffmpeg), "--no-open"])

        assert result.exit_code == 0, result.output
        for name in ("Video (Platform)", "Video (FFmpeg)", "Image (Platform)", "Image (FFmpeg)"):
            assert name in result.output
        assert "Thumbnails created in" in result.output

        for name in (
            "Video.avi.thumb1.png",
            "Video.avi.thumb2.png",
            "Image.png.thumb1.png",
            "Image.png.thumb2.png",
        ):
            assert (media_dir / name).exists(), name

        with Image.open(media_dir / "Image.png.thumb2.png") as img:
            assert img.size == (100, 50)
        video_args = (media_dir / "Video.avi.thumb2.png.args").read_text().split()
        assert video_args[:3] == ["-ss", "5", "-an"]
        assert video_args[video_args.index("-s") + 1] == "32x24"
        launch.assert_not_called()

    def test_debug_logs_report(self, runner, cli_env, launch, media_dir, sample_image, sample_video, fake_ffmpeg, caplog):
        result = runner.invoke(
            main,
            ["--media-dir", str(media_dir), "--ffmpeg", str(fake_ffmpeg), "--log-level", "DEBUG", "--no-open"],
        )

        assert result.exit_code == 0, result.output
        assert "Wrote 4 thumbnails" in caplog.text
        assert "Benchmark report" in caplog.text
        assert "'strategy': 'FFmpeg'" in caplog.text

    def test_divisor_option(self, runner, cli_env, launch, media_dir, sample_image, sample_video, fake_ffmpeg):
        result = runner.invoke(
            main,
            ["--media-dir", str(media_dir), "--ffmpeg", str(fake_ffmpeg), "--divisor", "2", "--no-open"],
        )

        assert result.exit_code == 0, result.output
        with Image.open(media_dir / "Image.png.thumb1.png") as img:
            assert img.size == (150, 75)

    def test_y_keypress_opens_folder(self, runner, cli_env, launch, media_dir, sample_image, sample_video, fake_ffmpeg):
        result = runner.invoke(main, ["--media-dir", str(media_dir), "--ffmpeg", str(fake_ffmpeg)], input="y")

        assert result.exit_code == 0, result.output
        assert "Open folder (Y/N)?" in result.output
        launch.assert_called_once_with(str(media_dir.resolve()))

    def test_other_keypress_skips_folder(self, runner, cli_env, launch, media_dir, sample_image, sample_video, fake_ffmpeg):
        result = runner.invoke(main, ["--media-dir", str(media_dir), "--ffmpeg", str(fake_ffmpeg)], input="n")

        assert result.exit_code == 0, result.output
        launch.assert_not_called()

    def test_missing_source_is_fatal(self, runner, cli_env, launch, media_dir, sample_image, fake_ffmpeg):
        result = runner.invoke(main, ["--media-dir", str(media_dir), "--ffmpeg", str(fake_ffmpeg), "--no-open"])

        assert result.exit_code != 0
        assert result.exception is not None
        assert not list(media_dir.glob("*.thumb*"))
