"""Media type enum distinguishing video sources from still images."""

from enum import Enum


class MediaType(str, Enum):
    VIDEO = "video"
    IMAGE = "image"
