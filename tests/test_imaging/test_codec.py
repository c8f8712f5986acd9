"""Tests for the Pillow codec boundary."""

import io

import numpy as np
import pytest
from PIL import Image

from img2html.errors.exceptions import DecodeError, UnsupportedFormatError
from img2html.imaging.codec import PillowCodec, PixelGrid
from img2html.types import Dimensions

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def codec():
    return PillowCodec()


class TestMeasure:
    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("a.png", "PNG"), ("a.jpg", "JPEG"), ("a.gif", "GIF")],
    )
    def test_supported_formats(self, codec, make_image, name, fmt):
        path = make_image([[RED, GREEN, BLUE]] * 2, name=name, format=fmt)
        assert codec.measure(path) == (3, 2)

    def test_format_detected_from_content(self, codec, make_image):
        # PNG bytes behind a misleading extension
        path = make_image([[RED]], name="actually_png.gif", format="PNG")
        assert codec.measure(path) == (1, 1)

    def test_unsupported_format(self, codec, make_image):
        path = make_image([[RED]], name="a.bmp", format="BMP")
        with pytest.raises(UnsupportedFormatError) as exc_info:
            codec.measure(path)
        assert exc_info.value.format == "BMP"

    def test_not_an_image(self, codec, tmp_path):
        path = tmp_path / "fake.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(UnsupportedFormatError):
            codec.measure(path)


class TestDecode:
    def test_png_pixels(self, codec, make_image):
        path = make_image([[RED, GREEN], [BLUE, (10, 20, 30)]])
        grid = codec.decode(path)
        assert (grid.width, grid.height) == (2, 2)
        assert grid.pixels.tolist() == [[[255, 0, 0], [0, 255, 0]], [[0, 0, 255], [10, 20, 30]]]

    def test_gif_palette_converted_to_rgb(self, codec, make_image):
        path = make_image([[RED, GREEN]], name="a.gif", format="GIF")
        grid = codec.decode(path)
        assert grid.pixels.shape == (1, 2, 3)
        assert grid.pixels.tolist() == [[[255, 0, 0], [0, 255, 0]]]

    def test_alpha_dropped(self, codec, tmp_path):
        path = tmp_path / "rgba.png"
        Image.new("RGBA", (2, 2), (1, 2, 3, 128)).save(path)
        grid = codec.decode(path)
        assert grid.pixels.shape == (2, 2, 3)
        assert grid.pixels[0, 0].tolist() == [1, 2, 3]

    def test_truncated_file(self, codec, tmp_path):
        rng = np.random.default_rng(0)
        arr = rng.integers(0, 255, (64, 64, 3), dtype=np.uint8)
        buf = io.BytesIO()
        Image.fromarray(arr).save(buf, format="PNG")
        path = tmp_path / "truncated.png"
        path.write_bytes(buf.getvalue()[: len(buf.getvalue()) // 2])
        with pytest.raises(DecodeError):
            codec.decode(path)


class TestPixelLimit:
    @pytest.fixture
    def oversized(self, make_image, monkeypatch):
        path = make_image([[RED] * 5], name="wide.png")
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 2)
        return path

    def test_measure_raises_decode_error(self, codec, oversized):
        with pytest.raises(DecodeError) as exc_info:
            codec.measure(oversized)
        assert isinstance(exc_info.value.original, Image.DecompressionBombError)
        assert exc_info.value.path == oversized

    def test_decode_raises_decode_error(self, codec, oversized):
        with pytest.raises(DecodeError):
            codec.decode(oversized)


class TestResize:
    def test_resizes_to_target(self, codec):
        grid = PixelGrid(pixels=np.zeros((10, 20, 3), dtype=np.uint8))
        resized = codec.resize(grid, Dimensions(width=5, height=3))
        assert (resized.width, resized.height) == (5, 3)
        assert resized.pixels.dtype == np.uint8

    def test_same_size_is_passthrough(self, codec):
        grid = PixelGrid(pixels=np.zeros((2, 2, 3), dtype=np.uint8))
        assert codec.resize(grid, Dimensions(width=2, height=2)) is grid

    def test_uniform_color_preserved(self, codec):
        pixels = np.full((8, 8, 3), (12, 34, 56), dtype=np.uint8)
        resized = codec.resize(PixelGrid(pixels=pixels), Dimensions(width=4, height=4))
        assert {tuple(p) for row in resized.pixels.tolist() for p in row} == {(12, 34, 56)}
