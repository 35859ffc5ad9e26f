"""
Shared FFmpeg path resolution and asynchronous command execution.
"""
from __future__ import annotations

import asyncio
import logging
import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from typing import Optional

from thumbnail_demo.core.exceptions import FFmpegError

logger = logging.getLogger(__name__)

# Common Windows FFmpeg install locations
_WINDOWS_FFMPEG_PATHS = [
    r"C:\Program Files\FFmpeg\bin\ffmpeg.exe",
    r"C:\Program Files\ffmpeg\bin\ffmpeg.exe",
    r"C:\ffmpeg\bin\ffmpeg.exe",
]


def get_ffmpeg_path() -> str:
    """Resolve ffmpeg executable path. Checks PATH first, then known locations."""
    path = shutil.which("ffmpeg")
    if path:
        return path

    for candidate in _WINDOWS_FFMPEG_PATHS:
        if os.path.exists(candidate):
            logger.info("Found FFmpeg at: %s", candidate)
            return candidate

    return "ffmpeg"


@dataclass(frozen=True)
class ProcessOutcome:
    """Result of one child process run, captured when its exit is observed."""

    args: list[str]
    returncode: int
    elapsed_ms: int
    stderr: str = ""
    output_path: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


async def run_process(
    cmd: list[str],
    *,
    check: bool = True,
) -> ProcessOutcome:
    """Launch *cmd* and wait for its exit without blocking the event loop.

    A pending future is resolved exactly once from the completion callback
    of the process watcher; elapsed time runs from launch to that callback.

    Args:
        cmd: Full command line including the executable.
        check: Raise :class:`FFmpegError` on a non-zero return code.

    Returns:
        ProcessOutcome instance.
    """
    logger.debug("Running: %s", " ".join(cmd))
    loop = asyncio.get_running_loop()
    exited: asyncio.Future[ProcessOutcome] = loop.create_future()

    started = time.perf_counter()
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )

    def _on_exit(watcher: asyncio.Future[tuple[Optional[bytes], Optional[bytes]]]) -> None:
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        if exited.done():
            return
        if watcher.cancelled():
            exited.cancel()
            return
        exc = watcher.exception()
        if exc is not None:
            exited.set_exception(exc)
            return
        _, stderr = watcher.result()
        exited.set_result(ProcessOutcome(
            args=list(cmd),
            returncode=process.returncode if process.returncode is not None else -1,
            elapsed_ms=elapsed_ms,
            stderr=(stderr or b"").decode("utf-8", errors="replace"),
        ))

    watcher = asyncio.ensure_future(process.communicate())
    watcher.add_done_callback(_on_exit)
    outcome = await exited

    if outcome.returncode != 0:
        if check:
            logger.error("FFmpeg error: %s", outcome.stderr[-500:])
            raise FFmpegError(outcome.returncode, outcome.stderr)
        logger.warning("Process exited with rc=%d: %s", outcome.returncode, cmd[0])
    return outcome
