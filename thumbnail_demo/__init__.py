"""Thumbnail creation demo: platform imaging vs. FFmpeg subprocess."""

__version__ = "0.1.0"
