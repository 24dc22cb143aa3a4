"""
Shape rasterizers shared by the feature layers.

Primitives only write to the canvas; none of them read the ByteStream.
Integer division that can see negative operands goes through trunc_div,
which rounds toward zero like the rest of the grammar expects.
"""

import math
from typing import List

from ..canvas import Canvas, Point
from ..palettes import RGBA


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def fill_rect(canvas: Canvas, left: int, top: int, width: int, height: int, color: RGBA) -> None:
    """Fill the half-open box [left, left+width) x [top, top+height)."""
    for y in range(top, top + height):
        for x in range(left, left + width):
            canvas.set(x, y, color)


def draw_filled_circle(canvas: Canvas, center: Point, radius: int, color: RGBA) -> None:
    r2 = radius * radius
    for y in range(center.y - radius, center.y + radius + 1):
        dy = y - center.y
        for x in range(center.x - radius, center.x + radius + 1):
            dx = x - center.x
            if dx * dx + dy * dy <= r2:
                canvas.set(x, y, color)


def draw_line(canvas: Canvas, a: Point, b: Point, color: RGBA) -> None:
    """Bresenham line, both endpoints included."""
    dx = abs(b.x - a.x)
    dy = -abs(b.y - a.y)
    sx = 1 if a.x < b.x else -1
    sy = 1 if a.y < b.y else -1
    err = dx + dy
    x, y = a.x, a.y
    while True:
        canvas.set(x, y, color)
        if x == b.x and y == b.y:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def draw_rect_outline(
    canvas: Canvas, center: Point, width: int, height: int, thickness: int, color: RGBA
) -> None:
    left = center.x - width // 2
    right = center.x + width // 2
    top = center.y - height // 2
    bottom = center.y + height // 2
    for t in range(thickness):
        for x in range(left, right + 1):
            canvas.set(x, top + t, color)
            canvas.set(x, bottom - t, color)
        for y in range(top, bottom + 1):
            canvas.set(left + t, y, color)
            canvas.set(right - t, y, color)


def draw_slanted_rect(
    canvas: Canvas, center: Point, width: int, height: int, slope: int, color: RGBA
) -> None:
    """Parallelogram: row y is shifted right by trunc(y * slope / height)."""
    left = center.x - width // 2
    top = center.y - height // 2
    for y in range(height):
        shift = trunc_div(y * slope, height)
        for x in range(width):
            canvas.set(left + x + shift, top + y, color)


def draw_diamond(canvas: Canvas, center: Point, radius: int, color: RGBA) -> None:
    for y in range(-radius, radius + 1):
        for x in range(-radius, radius + 1):
            if abs(x) + abs(y) <= radius:
                canvas.set(center.x + x, center.y + y, color)


def draw_chevron(canvas: Canvas, center: Point, width: int, height: int, color: RGBA) -> None:
    half = width // 2
    for y in range(height):
        offset = int(y * 0.8)
        for x in range(-half + offset, half - offset + 1):
            canvas.set(center.x + x, center.y + y, color)


def draw_stripe(canvas: Canvas, center: Point, width: int, height: int, color: RGBA) -> None:
    half = width // 2
    for y in range(0, height, 2):
        for x in range(-half, half + 1):
            canvas.set(center.x + x, center.y + y, color)


def hexagon_points(center: Point, radius: int) -> List[Point]:
    """Six vertices at 60 degree steps, starting at angle 0."""
    points = []
    for i in range(6):
        angle = i * math.pi / 3
        points.append(
            Point(
                center.x + int(radius * math.cos(angle)),
                center.y + int(radius * math.sin(angle)),
            )
        )
    return points


def draw_polyline_closed(canvas: Canvas, points: List[Point], color: RGBA) -> None:
    for i, point in enumerate(points):
        draw_line(canvas, point, points[(i + 1) % len(points)], color)


def draw_hexagon_outline(canvas: Canvas, center: Point, radius: int, color: RGBA) -> None:
    draw_polyline_closed(canvas, hexagon_points(center, radius), color)
