from pathlib import Path

import numpy as np
import pytest
from PIL import Image


class FakeClock:
    """Controllable time source for cache expiry."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_image(tmp_path):
    """Write an RGB image built from nested pixel rows and return its path."""

    def _make(
        rows: list[list[tuple[int, int, int]]],
        name: str = "image.png",
        format: str = "PNG",
    ) -> Path:
        arr = np.array(rows, dtype=np.uint8)
        path = tmp_path / name
        Image.fromarray(arr).save(path, format=format)
        return path

    return _make


@pytest.fixture
def two_pixel_png(make_image):
    """2x1 PNG: one red pixel, one green pixel."""
    return make_image([[(255, 0, 0), (0, 255, 0)]], name="pixels.png")
