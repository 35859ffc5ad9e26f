from thumbnail_demo.core.entities.media_file import MediaFile
from thumbnail_demo.core.entities.media_type import MediaType

__all__ = ["MediaFile", "MediaType"]
