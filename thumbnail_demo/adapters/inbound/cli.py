"""Console entry point for the thumbnail benchmark."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from thumbnail_demo.application.dto.benchmark_report import BenchmarkReport
from thumbnail_demo.core.exceptions import ConfigurationError
from thumbnail_demo.infrastructure.config import Settings, get_settings
from thumbnail_demo.infrastructure.container import ApplicationContainer
from thumbnail_demo.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def apply_overrides(
    settings: Settings,
    media_dir: Optional[Path] = None,
    ffmpeg_path: Optional[str] = None,
    divisor: Optional[int] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Layer command-line options over env/.env settings."""
    if media_dir is not None:
        settings.storage.media_dir = str(media_dir)
    if ffmpeg_path is not None:
        settings.ffmpeg.path = ffmpeg_path
    if divisor is not None:
        settings.thumbnail.size_divisor = divisor
    if log_level is not None:
        settings.logging.level = log_level
    return settings


def print_report(console: Console, report: BenchmarkReport) -> None:
    console.print()
    console.print()
    for line in report.summary_lines():
        console.print(line, markup=False, highlight=False, soft_wrap=True)
    console.print()


def ask_open_folder() -> bool:
    """Single keypress Y/N prompt."""
    click.echo("Open folder (Y/N)? ", nl=False)
    key = click.getchar()
    click.echo()
    return key.lower() == "y"


@click.command()
@click.option("--media-dir", type=click.Path(file_okay=False, path_type=Path), help="Folder holding Video.wmv and Image.png (default: media/ next to this command).")
@click.option("--ffmpeg", "ffmpeg_path", help="Absolute path of the ffmpeg executable.")
@click.option("--divisor", type=click.IntRange(min=1), help="Thumbnails get 1/DIVISOR of the original size.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.option("--open/--no-open", "open_folder", default=None, help="Open the media folder without asking.")
def main(
    media_dir: Optional[Path],
    ffmpeg_path: Optional[str],
    divisor: Optional[int],
    log_level: Optional[str],
    open_folder: Optional[bool],
) -> None:
    """Create thumbnails with the imaging libraries and with FFmpeg, and time both."""
    console = Console()
    settings = apply_overrides(get_settings(), media_dir, ffmpeg_path, divisor, log_level)
    setup_logging(settings.logging.level)

    try:
        settings.validate_startup()
    except ConfigurationError as exc:
        console.print(str(exc), style="red", markup=False, highlight=False, soft_wrap=True)
        raise SystemExit(EXIT_CONFIG_ERROR)

    container = ApplicationContainer(settings)
    report = asyncio.run(container.benchmark_service().execute())
    print_report(console, report)
    logger.info("Wrote %d thumbnails to %s", len(report.output_paths), report.media_dir)
    logger.debug("Benchmark report: %s", report.to_dict())

    if open_folder is None:
        open_folder = ask_open_folder()
    if open_folder:
        logger.info("Opening %s", report.media_dir)
        click.launch(report.media_dir)


if __name__ == "__main__":
    main()
