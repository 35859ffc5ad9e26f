from thumbnail_demo.application.thumbnail_benchmark_service import ThumbnailBenchmarkService

__all__ = ["ThumbnailBenchmarkService"]
