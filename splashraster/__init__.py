"""Raster graphics building blocks: paths, bitmaps, rectangular clipping, halftone screens, graphics state and font caching."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "mathutil",
    "path",
    "bitmap",
    "pattern",
    "screen",
    "clip",
    "state",
    "font",
    "fontengine",
]