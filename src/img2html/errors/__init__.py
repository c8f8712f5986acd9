"""Error handling: the exception taxonomy surfaced to callers."""

from img2html.errors.exceptions import (
    ConfigurationError,
    DecodeError,
    Img2HtmlError,
    NotFoundError,
    ResizeError,
    SanitizationError,
    StorageError,
    UnsupportedFormatError,
)

__all__ = [
    "Img2HtmlError",
    "ConfigurationError",
    "NotFoundError",
    "UnsupportedFormatError",
    "DecodeError",
    "ResizeError",
    "SanitizationError",
    "StorageError",
]
