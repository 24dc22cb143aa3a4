import numpy as np
import pytest

from avatar.canvas import Canvas
from avatar.errors import UnsupportedSizeError
from avatar.palettes import RGBA, TRANSPARENT

RED = RGBA(255, 0, 0, 255)


@pytest.mark.parametrize("size", [64, 128])
def test_new_canvas_is_transparent(size):
    c = Canvas(size)
    assert c.pixels.shape == (size, size, 4)
    assert c.pixels.dtype == np.uint8
    assert c.get(0, 0) == TRANSPARENT
    assert not c.pixels.any()


@pytest.mark.parametrize("size", [0, 32, 100, 256])
def test_unsupported_size_rejected(size):
    with pytest.raises(UnsupportedSizeError):
        Canvas(size)


def test_set_replaces_pixel_without_compositing(canvas):
    canvas.set(3, 4, RED)
    canvas.set(3, 4, RGBA(0, 0, 255, 10))
    assert canvas.get(3, 4) == RGBA(0, 0, 255, 10)
    # rows are y, columns are x
    assert tuple(canvas.pixels[4, 3]) == (0, 0, 255, 10)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (64, 0), (0, 64), (1000, -1000)])
def test_out_of_bounds_is_ignored(canvas, x, y):
    canvas.set(x, y, RED)
    assert not canvas.pixels.any()
    assert canvas.get(x, y) == TRANSPARENT
    assert not canvas.in_bounds(x, y)


def test_fill(canvas):
    canvas.fill(RED)
    assert canvas.get(0, 0) == RED
    assert canvas.get(63, 63) == RED


def test_iter_pixels_row_major(canvas):
    canvas.set(1, 0, RED)
    pixels = list(canvas.iter_pixels())
    assert len(pixels) == 64 * 64
    assert pixels[0] == (0, 0, TRANSPARENT)
    assert pixels[1] == (1, 0, RED)
    assert pixels[64][:2] == (0, 1)


def test_equality_compares_pixels(canvas):
    other = Canvas(64)
    assert other == canvas
    other.set(6, 6, RED)
    assert other != canvas
    assert Canvas(128) != Canvas(64)


def test_to_image_is_rgba(canvas):
    canvas.set(7, 2, RGBA(1, 2, 3, 4))
    img = canvas.to_image()
    assert img.mode == "RGBA"
    assert img.size == (64, 64)
    assert img.getpixel((7, 2)) == (1, 2, 3, 4)


def test_tobytes_length(canvas):
    assert len(canvas.tobytes()) == 64 * 64 * 4
