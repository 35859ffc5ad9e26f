"""Inbound port for the thumbnail benchmark run."""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable
if TYPE_CHECKING:
    from thumbnail_demo.application.dto.benchmark_report import BenchmarkReport


@runtime_checkable
class RunBenchmarkUseCase(Protocol):
    async def execute(self) -> BenchmarkReport: ...
