"""Raster decode/resize boundary backed by Pillow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, UnidentifiedImageError

from img2html.errors.exceptions import DecodeError, ResizeError, UnsupportedFormatError
from img2html.types import Dimensions

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = frozenset({"JPEG", "PNG", "GIF"})


@dataclass
class PixelGrid:
    """RGB pixels as a ``(height, width, 3)`` uint8 array."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def from_image(cls, img: Image.Image) -> PixelGrid:
        return cls(pixels=np.asarray(img.convert("RGB"), dtype=np.uint8))

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)


class ImageCodec(Protocol):
    """What the converter needs from a raster library."""

    def measure(self, path: Path) -> tuple[int, int]:
        ...

    def decode(self, path: Path) -> PixelGrid:
        ...

    def resize(self, grid: PixelGrid, dimensions: Dimensions) -> PixelGrid:
        ...


class PillowCodec:
    """JPEG/PNG/GIF codec. Format is detected from file content, not extension."""

    def __init__(self, resample: Image.Resampling = Image.Resampling.BICUBIC) -> None:
        self._resample = resample

    def measure(self, path: Path) -> tuple[int, int]:
        """Return (width, height) reading only the image header."""
        with self._open(path) as img:
            return img.size

    def decode(self, path: Path) -> PixelGrid:
        with self._open(path) as img:
            try:
                if getattr(img, "is_animated", False):
                    img.seek(0)
                img.load()
                return PixelGrid.from_image(img)
            except (
                OSError, SyntaxError, ValueError, Image.DecompressionBombError
            ) as exc:
                raise DecodeError(
                    f"Failed to decode image {path}: {exc}", path=path, original=exc
                ) from exc

    def resize(self, grid: PixelGrid, dimensions: Dimensions) -> PixelGrid:
        if (grid.width, grid.height) == dimensions.as_tuple():
            return grid
        try:
            resized = grid.to_image().resize(dimensions.as_tuple(), resample=self._resample)
        except (OSError, ValueError) as exc:
            raise ResizeError(
                f"Failed to resize {grid.width}x{grid.height} to "
                f"{dimensions.width}x{dimensions.height}: {exc}",
                original=exc,
            ) from exc
        logger.debug(
            "Resized %dx%d -> %dx%d",
            grid.width, grid.height, dimensions.width, dimensions.height,
        )
        return PixelGrid.from_image(resized)

    @staticmethod
    def _open(path: Path) -> Image.Image:
        try:
            img = Image.open(path)
        except UnidentifiedImageError as exc:
            raise UnsupportedFormatError(
                f"Unsupported image type: {path}", path=path
            ) from exc
        except (OSError, Image.DecompressionBombError) as exc:
            raise DecodeError(
                f"Cannot read image {path}: {exc}", path=path, original=exc
            ) from exc

        if img.format not in SUPPORTED_FORMATS:
            fmt = img.format
            img.close()
            raise UnsupportedFormatError(
                f"Unsupported image type {fmt}: {path}", path=path, format=fmt
            )
        return img
