"""
Facial feature layers: eyes, brows, nose, mouth and the optional marks.

Optional layers spend exactly one bounded draw on their gate before any
other draw, whether or not they end up painting.
"""

from ..canvas import Point
from ..palettes import EYE_WHITE, NOSE, blend_color
from ..scene import Scene
from .primitives import draw_diamond, draw_filled_circle, draw_slanted_rect


def _eye_centers(scene: Scene, shift_x: int = 0, shift_y: int = 0):
    c, r = scene.center, scene.radius
    offset_x = r // 2
    offset_y = r // 5
    left = Point(c.x - offset_x + shift_x, c.y - offset_y + shift_y)
    right = Point(c.x + offset_x + shift_x, c.y - offset_y + shift_y)
    return left, right


def draw_mask(scene: Scene) -> None:
    if scene.stream.next_bounded(4) != 0:
        return
    c, r = scene.center, scene.radius
    mask = scene.color("mask")
    half = int(r * 1.4) // 2
    height = r // 2
    start_y = c.y + r // 4
    for y in range(start_y, start_y + height):
        for x in range(c.x - half, c.x + half + 1):
            scene.canvas.set(x, y, mask)
    stripe = blend_color(mask, 0.15)
    for x in range(c.x - half, c.x + half + 1):
        scene.canvas.set(x, start_y + height // 2, stripe)


def draw_eyes(scene: Scene) -> None:
    """White eyes with pupils; both eyes share a -1..+1 pixel horizontal jitter."""
    r = scene.radius
    eye_radius = int(r * 0.12)
    pupil_radius = int(eye_radius * 0.6)
    shift = scene.stream.next_bounded(3) - 1
    left, right = _eye_centers(scene, shift_x=shift)
    draw_filled_circle(scene.canvas, left, eye_radius, EYE_WHITE)
    draw_filled_circle(scene.canvas, right, eye_radius, EYE_WHITE)
    draw_filled_circle(scene.canvas, left, pupil_radius, scene.color("eye"))
    draw_filled_circle(scene.canvas, right, pupil_radius, scene.color("eye"))


def draw_iris_highlights(scene: Scene) -> None:
    shift = scene.stream.next_bounded(2)
    left, right = _eye_centers(scene, shift_x=shift, shift_y=-shift)
    size = scene.radius // 12
    draw_filled_circle(scene.canvas, left, size, scene.color("iris_highlight"))
    draw_filled_circle(scene.canvas, right, size, scene.color("iris_highlight"))


def draw_eyebrows(scene: Scene) -> None:
    """Mirrored brows; the tilt is drawn once and negated for the right brow."""
    c, r = scene.center, scene.radius
    width = r // 2
    height = r // 10
    offset_x = r // 2
    offset_y = r // 3
    tilt = scene.stream.next_bounded(5) - 2
    brow = scene.color("eyebrow")
    draw_slanted_rect(scene.canvas, Point(c.x - offset_x, c.y - offset_y), width, height, tilt, brow)
    draw_slanted_rect(scene.canvas, Point(c.x + offset_x, c.y - offset_y), width, height, -tilt, brow)


def draw_nose(scene: Scene) -> None:
    c = scene.center
    height = int(scene.radius * 0.25)
    for y in range(height):
        width = int((height - y) * 0.3)
        for x in range(-width, width + 1):
            scene.canvas.set(c.x + x, c.y + y // 2, NOSE)


def draw_blush(scene: Scene) -> None:
    if scene.stream.next_bounded(3) == 0:
        return
    c, r = scene.center, scene.radius
    offset_x = r // 2
    offset_y = r // 6
    size = r // 6
    draw_filled_circle(scene.canvas, Point(c.x - offset_x, c.y + offset_y), size, scene.color("blush"))
    draw_filled_circle(scene.canvas, Point(c.x + offset_x, c.y + offset_y), size, scene.color("blush"))


def draw_scar(scene: Scene) -> None:
    if scene.stream.next_bounded(4) != 0:
        return
    c, r = scene.center, scene.radius
    length = r // 2
    start_x = c.x - length // 2
    start_y = c.y - r // 6
    angle = (scene.stream.next_bounded(5) - 2) * 0.2
    scar = scene.color("scar")
    for i in range(length):
        scene.canvas.set(start_x + i, start_y + int(i * angle), scar)


def draw_mouth(scene: Scene) -> None:
    """Parabolic band; curvature (k - 2) / 10 for k in 0..5 bends up or down."""
    c, r = scene.center, scene.radius
    mouth = scene.color("mouth")
    half = int(r * 0.7) // 2
    curve = (scene.stream.next_bounded(6) - 2) / 10.0
    base_y = float(c.y) + float(r) / 3.0
    thickness = int(r * 0.08)
    for x in range(-half, half + 1):
        xf = float(x) / float(half)
        y = int(base_y + curve * xf ** 2 * r * 1.2)
        for t in range(-thickness, thickness + 1):
            scene.canvas.set(c.x + x, y + t, mouth)


def draw_lip_shine(scene: Scene) -> None:
    if scene.stream.next_bounded(2) == 0:
        return
    c, r = scene.center, scene.radius
    half = (r // 3) // 2
    height = r // 20
    start_y = c.y + r // 3
    lip = scene.color("lip")
    for y in range(height):
        for x in range(-half, half + 1):
            scene.canvas.set(c.x + x, start_y + y, lip)


def draw_mustache(scene: Scene) -> None:
    """Two wings either side of the philtrum; the center column stays clear."""
    if scene.stream.next_bounded(3) != 0:
        return
    c, r = scene.center, scene.radius
    width = r // 2
    height = r // 8
    start_y = c.y + r // 6
    hair = scene.color("hair")
    for y in range(height):
        for x in range(-width, width + 1):
            if x != 0:
                scene.canvas.set(c.x + x, start_y + y, hair)


def draw_chin_shadow(scene: Scene) -> None:
    if scene.stream.next_bounded(2) != 0:
        return
    c, r = scene.center, scene.radius
    width = r // 2
    height = r // 4
    start_y = c.y + r // 2
    shadow = scene.color("shadow")
    for y in range(height):
        for x in range(-width, width + 1):
            if x * x + y * y <= width * width:
                scene.canvas.set(c.x + x, start_y + y, shadow)


def draw_forehead_mark(scene: Scene) -> None:
    if scene.stream.next_bounded(4) != 0:
        return
    c, r = scene.center, scene.radius
    draw_diamond(scene.canvas, Point(c.x, c.y - r // 2), r // 6, scene.color("mark"))
