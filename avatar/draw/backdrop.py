"""
Background layers: vertical gradient, accent patterns and the frame border.

draw_backdrop_accent picks one row of BACKDROP_ACCENTS with a single bounded
draw. The gradient and frame border are fixed and consume no bytes.
"""

import math

import numpy as np

from ..canvas import Point
from ..palettes import RGBA, blend_color
from ..scene import Scene
from .primitives import draw_filled_circle, draw_hexagon_outline, draw_line, trunc_div

FRAME_TICK_LENGTH = 6


def draw_background_gradient(scene: Scene) -> None:
    """Top-to-bottom blend from the background color to the accent color."""
    size = scene.size
    base = np.array(scene.color("background")[:3], dtype=np.float64)
    accent = np.array(scene.color("accent")[:3], dtype=np.float64)
    t = (np.arange(size, dtype=np.float64) / float(size))[:, None]
    rgb = (base * (1 - t) + accent * t).astype(np.uint8)
    rows = np.concatenate([rgb, np.full((size, 1), 255, dtype=np.uint8)], axis=1)
    scene.canvas.pixels[:, :] = rows[:, None, :]


def draw_orbit_rings(scene: Scene) -> None:
    """Flattened ellipse of dots, 128 samples around the head."""
    c, r = scene.center, scene.radius
    ring = r + r // 2
    step = math.pi / 64
    angle = 0.0
    while angle < 2 * math.pi:
        x = c.x + int(ring * math.cos(angle))
        y = c.y + int(ring * math.sin(angle) * 0.5)
        scene.canvas.set(x, y, scene.color("accent"))
        angle += step


def draw_stars(scene: Scene) -> None:
    r, stream = scene.radius, scene.stream
    count = 12 + stream.next_bounded(10)
    for _ in range(count):
        x = stream.next_bounded(r * 2) + r // 2
        y = stream.next_bounded(r * 2) + r // 2
        scene.canvas.set(x, y, scene.color("accent"))


def draw_hex_grid(scene: Scene) -> None:
    """Offset grid of hexagon outlines; each cell is kept with probability 1/4."""
    c, r = scene.center, scene.radius
    step = r // 3
    for y in range(c.y - r, c.y + r + 1, step):
        row_shift = step // 2 if trunc_div(y - c.y, step) % 2 != 0 else 0
        for x in range(c.x - r, c.x + r + 1, step):
            if scene.stream.next_bounded(4) != 0:
                continue
            draw_hexagon_outline(scene.canvas, Point(x + row_shift, y), step // 3, scene.color("accent"))


_CIRCUIT_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def draw_circuit_trace(scene: Scene) -> None:
    """Random walks that stop at the canvas edge."""
    c, r, stream, canvas = scene.center, scene.radius, scene.stream, scene.canvas
    accent = scene.color("accent")
    count = 4 + stream.next_bounded(4)
    for _ in range(count):
        x = c.x - r + stream.next_bounded(r * 2)
        y = c.y - r + stream.next_bounded(r * 2)
        length = r // 2 + stream.next_bounded(r // 2)
        for _ in range(length):
            canvas.set(x, y, accent)
            dx, dy = _CIRCUIT_MOVES[stream.next_bounded(len(_CIRCUIT_MOVES))]
            x += dx
            y += dy
            if not canvas.in_bounds(x, y):
                break


def draw_constellation(scene: Scene) -> None:
    """Closed loop of 6-9 nodes joined by lines, each node a small dot."""
    c, r, stream = scene.center, scene.radius, scene.stream
    accent = scene.color("accent")
    nodes = 6 + stream.next_bounded(4)
    points = []
    for _ in range(nodes):
        x = c.x - r + stream.next_bounded(r * 2)
        y = c.y - r + stream.next_bounded(r * 2)
        points.append(Point(x, y))
    for i, point in enumerate(points):
        draw_line(scene.canvas, point, points[(i + 1) % len(points)], accent)
        draw_filled_circle(scene.canvas, point, 1 + stream.next_bounded(2), accent)


def draw_aurora(scene: Scene) -> None:
    """Sine bands across the head followed by a horizontal grid overlay."""
    c, r, stream, canvas = scene.center, scene.radius, scene.stream, scene.canvas
    accent = scene.color("accent")
    glow = blend_color(accent, 0.3)
    bands = 3 + stream.next_bounded(3)
    for _ in range(bands):
        offset = stream.next_bounded(r) - r // 2
        for x in range(c.x - r, c.x + r + 1):
            y = c.y - r // 2 + int(math.sin((x + offset) / r) * r / 4)
            if 0 <= y < canvas.size:
                canvas.set(x, y, glow)
                canvas.set(x, y + 1, accent)
    draw_grid_overlay(scene, blend_color(accent, 0.4))


def draw_grid_overlay(scene: Scene, color: RGBA) -> None:
    c, r = scene.center, scene.radius
    step = 4 + scene.stream.next_bounded(4)
    for y in range(c.y - r, c.y + r + 1, step):
        for x in range(c.x - r, c.x + r + 1):
            scene.canvas.set(x, y, color)


BACKDROP_ACCENTS = (
    ("orbit_rings", draw_orbit_rings),
    ("stars", draw_stars),
    ("hex_grid", draw_hex_grid),
    ("circuit_trace", draw_circuit_trace),
    ("constellation", draw_constellation),
    ("aurora", draw_aurora),
)


def draw_backdrop_accent(scene: Scene) -> str:
    """Draw one background accent variant and return its name."""
    name, handler = BACKDROP_ACCENTS[scene.stream.next_bounded(len(BACKDROP_ACCENTS))]
    handler(scene)
    return name


def draw_corner_ticks(scene: Scene, length: int = FRAME_TICK_LENGTH) -> None:
    canvas, stroke = scene.canvas, scene.color("frame")
    last = canvas.size - 1
    for i in range(length):
        for x, y in (
            (i, 0), (0, i),
            (last - i, 0), (last, i),
            (i, last), (0, last - i),
            (last - i, last), (last, last - i),
        ):
            canvas.set(x, y, stroke)


def draw_frame_border(scene: Scene) -> None:
    canvas, stroke = scene.canvas, scene.color("frame")
    last = canvas.size - 1
    for i in range(canvas.size):
        canvas.set(i, 0, stroke)
        canvas.set(i, last, stroke)
        canvas.set(0, i, stroke)
        canvas.set(last, i, stroke)
    draw_corner_ticks(scene)
