from thumbnail_demo.core.value_objects.thumbnail_size import DEFAULT_SIZE_DIVISOR, ThumbnailSize

__all__ = ["ThumbnailSize", "DEFAULT_SIZE_DIVISOR"]
