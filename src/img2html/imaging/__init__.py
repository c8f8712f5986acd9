"""Image decoding, resizing and target-size resolution."""

from img2html.imaging.codec import SUPPORTED_FORMATS, ImageCodec, PillowCodec, PixelGrid
from img2html.imaging.dimensions import resolve_dimensions

__all__ = [
    "SUPPORTED_FORMATS",
    "ImageCodec",
    "PillowCodec",
    "PixelGrid",
    "resolve_dimensions",
]
