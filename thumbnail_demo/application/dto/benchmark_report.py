"""DTOs for thumbnail benchmark results."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from thumbnail_demo.core.entities.media_type import MediaType

PLATFORM_STRATEGY = "Platform"
FFMPEG_STRATEGY = "FFmpeg"


@dataclass
class StrategyTiming:
    label: str
    strategy: str
    media_type: MediaType
    elapsed_ms: int
    output_path: str = ""
    exit_code: Optional[int] = None

    @property
    def display_name(self) -> str:
        return f"{self.label} ({self.strategy})"

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "strategy": self.strategy,
            "media_type": self.media_type.value,
            "elapsed_ms": self.elapsed_ms,
            "output_path": self.output_path,
            "exit_code": self.exit_code,
        }


@dataclass
class BenchmarkReport:
    media_dir: str
    timings: list[StrategyTiming] = field(default_factory=list)

    @property
    def output_paths(self) -> list[str]:
        return [t.output_path for t in self.timings if t.output_path]

    def summary_lines(self) -> list[str]:
        """Fixed-format timing table, names padded to a common width."""
        width = max((len(t.display_name) for t in self.timings), default=0)
        lines = ["======================"]
        lines.extend(
            f"{t.display_name.ljust(width)}: {t.elapsed_ms} ms" for t in self.timings
        )
        lines.extend([
            "",
            "======================",
            f'Thumbnails created in "{self.media_dir}".',
        ])
        return lines

    def to_dict(self) -> dict:
        return {
            "media_dir": self.media_dir,
            "timings": [t.to_dict() for t in self.timings],
        }
