"""
Whole-canvas post-processing applied after every feature layer.

- Vignette: radial darkening outside a radius, vectorised with numpy.
- Noise: single-pixel brightness jitter driven by the render's ByteStream.
"""

import numpy as np

from ..canvas import Canvas, Point
from ..stream import ByteStream

MAX_VIGNETTE = 0.6


def apply_vignette(canvas: Canvas, center: Point, radius: int) -> None:
    """
    Darken pixels farther than radius from center.

    Each RGB channel is scaled by 1 - min((d - radius) / radius, 0.6) and
    truncated; alpha is left untouched.
    """
    size = canvas.size
    ys, xs = np.mgrid[0:size, 0:size]
    dx = (xs - center.x).astype(np.float64)
    dy = (ys - center.y).astype(np.float64)
    dist = np.sqrt(dx * dx + dy * dy)
    outside = dist > float(radius)
    if not outside.any():
        return

    factor = np.minimum((dist[outside] - radius) / float(radius), MAX_VIGNETTE)
    rgb = canvas.pixels[outside, :3].astype(np.float64)
    canvas.pixels[outside, :3] = (rgb * (1 - factor)[:, None]).astype(np.uint8)


def apply_noise(canvas: Canvas, stream: ByteStream, intensity: int) -> None:
    """Perturb intensity**2 random pixels by a shared RGB delta in [-2, 2]."""
    if intensity <= 0:
        return
    size = canvas.size
    pixels = canvas.pixels
    for _ in range(intensity * intensity):
        x = stream.next_bounded(size)
        y = stream.next_bounded(size)
        shift = stream.next_bounded(5) - 2
        for ch in range(3):
            pixels[y, x, ch] = min(255, max(0, int(pixels[y, x, ch]) + shift))
