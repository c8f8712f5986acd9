"""img2html: render raster images as cached pixel-grid HTML."""

from img2html.core import ImageToHtml, clean_up_cache, convert_to_html
from img2html.types import ConversionResult, Dimensions

__all__ = [
    "ImageToHtml",
    "ConversionResult",
    "Dimensions",
    "clean_up_cache",
    "convert_to_html",
]
