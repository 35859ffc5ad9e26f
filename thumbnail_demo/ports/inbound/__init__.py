from thumbnail_demo.ports.inbound.run_benchmark_use_case import RunBenchmarkUseCase

__all__ = ["RunBenchmarkUseCase"]
