"""Custom exception hierarchy for img2html."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class Img2HtmlError(Exception):
    """Base exception for all img2html errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(Img2HtmlError):
    """Invalid configuration or unusable cache directory. Fatal at construction."""

    def __init__(self, message: str = "", path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotFoundError(Img2HtmlError):
    """Source image does not exist."""

    def __init__(self, message: str = "", path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedFormatError(Img2HtmlError):
    """Image type is not JPEG, PNG or GIF."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        format: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.format = format


class DecodeError(Img2HtmlError):
    """The codec could not read the image's pixels."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original


class ResizeError(Img2HtmlError):
    """The codec could not resample the pixel grid."""

    def __init__(self, message: str = "", original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class SanitizationError(Img2HtmlError):
    """File name contains characters outside printable ASCII."""

    def __init__(self, message: str = "", file_name: str = "") -> None:
        super().__init__(message)
        self.file_name = file_name


class StorageError(Img2HtmlError):
    """Read, write or delete failure on the cache directory."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original
