"""Tests for grayscale conversion."""

import numpy as np
import pytest
from PIL import Image

from bwdither.core.grayscale import to_grayscale


def _luma(r, g, b):
    return 0.299 * r + 0.587 * g + 0.114 * b


class TestPrimaries:
    @pytest.mark.parametrize(
        "color", [(255, 0, 0), (0, 255, 0), (0, 0, 255), (90, 160, 30)]
    )
    def test_weighted_sum(self, color):
        """Luminance follows 0.299 R + 0.587 G + 0.114 B within 1."""
        img = Image.new("RGB", (4, 3), color)
        gray = to_grayscale(img)
        assert gray.dtype == np.uint8
        assert np.all(np.abs(gray.astype(int) - round(_luma(*color))) <= 1)

    def test_array_input_matches_image_input(self):
        """RGB arrays and PIL images convert identically."""
        rgb = np.zeros((2, 3, 3), dtype=np.uint8)
        rgb[0, 0] = (255, 0, 0)
        rgb[0, 1] = (0, 255, 0)
        rgb[0, 2] = (0, 0, 255)
        from_array = to_grayscale(rgb)
        from_image = to_grayscale(Image.fromarray(rgb))
        assert np.array_equal(from_array, from_image)

    def test_float_array_rounds(self):
        """Float RGB arrays round to the nearest level."""
        rgb = np.full((1, 2, 3), 0.6)
        rgb[0, 1] = 254.5001
        assert to_grayscale(rgb).tolist() == [[1, 255]]


class TestShape:
    @pytest.mark.parametrize("size", [(1, 1), (5, 1), (1, 5), (13, 7)])
    def test_preserves_extent(self, size):
        """Output shape is (height, width) of the source."""
        img = Image.new("RGB", size, (10, 20, 30))
        gray = to_grayscale(img)
        w, h = size
        assert gray.shape == (h, w)

    @pytest.mark.parametrize("shape", [(0, 0), (0, 4), (4, 0)])
    def test_empty_array(self, shape):
        """Zero-width or zero-height arrays give empty buffers."""
        gray = to_grayscale(np.zeros(shape + (3,), dtype=np.uint8))
        assert gray.shape == shape

    def test_empty_image(self):
        gray = to_grayscale(Image.new("RGB", (0, 0)))
        assert gray.shape == (0, 0)


class TestModes:
    def test_single_channel_array_passes_through(self):
        """2D uint8 arrays are copied unchanged."""
        src = np.array([[0, 127], [128, 255]], dtype=np.uint8)
        gray = to_grayscale(src)
        assert np.array_equal(gray, src)
        assert gray is not src

    def test_does_not_mutate_source(self):
        src = np.full((3, 3, 3), 200, dtype=np.uint8)
        before = src.copy()
        to_grayscale(src)
        assert np.array_equal(src, before)

    def test_transparent_pixels_become_black(self):
        """Alpha is composited over black."""
        img = Image.new("RGBA", (2, 1), (255, 255, 255, 0))
        img.putpixel((1, 0), (255, 255, 255, 255))
        gray = to_grayscale(img)
        assert gray.tolist() == [[0, 255]]

    def test_palette_image(self):
        img = Image.new("RGB", (3, 3), (0, 255, 0)).convert("P")
        gray = to_grayscale(img)
        assert np.all(np.abs(gray.astype(int) - 150) <= 1)

    def test_sixteen_bit_keeps_high_byte(self):
        """16-bit grayscale keeps its most significant byte."""
        arr = np.array([[0x0000, 0x80FF], [0xFF00, 0xFFFF]], dtype=np.uint16)
        img = Image.fromarray(arr)
        assert img.mode.startswith("I;16")
        assert to_grayscale(img).tolist() == [[0x00, 0x80], [0xFF, 0xFF]]
