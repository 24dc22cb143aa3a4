"""
Pixel canvas for avatar rendering.

A square RGBA buffer backed by a numpy uint8 array of shape (size, size, 4).
Writes replace the stored pixel as-is (no alpha compositing) and coordinates
outside [0, size) are ignored, so drawing code may compute off-canvas
geometry freely.
"""

from typing import Iterator, NamedTuple, Tuple

import numpy as np
from PIL import Image

from .core import SUPPORTED_SIZES
from .errors import UnsupportedSizeError
from .palettes import RGBA, TRANSPARENT


class Point(NamedTuple):
    x: int
    y: int


class Canvas:
    def __init__(self, size: int):
        if size not in SUPPORTED_SIZES:
            raise UnsupportedSizeError(f"size must be one of {SUPPORTED_SIZES}, got {size}")
        self.size = size
        self.pixels = np.zeros((size, size, 4), dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def set(self, x: int, y: int, color: RGBA) -> None:
        if 0 <= x < self.size and 0 <= y < self.size:
            self.pixels[y, x] = color

    def get(self, x: int, y: int) -> RGBA:
        if not (0 <= x < self.size and 0 <= y < self.size):
            return TRANSPARENT
        r, g, b, a = self.pixels[y, x]
        return RGBA(int(r), int(g), int(b), int(a))

    def fill(self, color: RGBA) -> None:
        self.pixels[:, :] = color

    def iter_pixels(self) -> Iterator[Tuple[int, int, RGBA]]:
        """Yield (x, y, color) in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield x, y, self.get(x, y)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.pixels, other.pixels)

    def __repr__(self) -> str:
        return f"Canvas(size={self.size})"
