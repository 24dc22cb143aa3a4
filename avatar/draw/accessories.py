"""
Accessory variants.

Exactly one accessory is drawn per avatar. draw_accessory spends one
bounded draw to pick a row of ACCESSORY_VARIANTS; the chosen handler may
draw further values of its own.
"""

from ..canvas import Point
from ..palettes import blend_color
from ..scene import Scene
from .primitives import draw_filled_circle, draw_rect_outline


def draw_glasses(scene: Scene) -> None:
    c, r = scene.center, scene.radius
    frame = scene.color("accessory")
    lens_width = r // 2
    lens_height = r // 3
    bridge = r // 8
    thickness = 2 + scene.stream.next_bounded(2)

    left = Point(c.x - r // 2, c.y - r // 5)
    right = Point(c.x + r // 2, c.y - r // 5)
    draw_rect_outline(scene.canvas, left, lens_width, lens_height, thickness, frame)
    draw_rect_outline(scene.canvas, right, lens_width, lens_height, thickness, frame)

    bridge_x = left.x + lens_width // 2
    for x in range(bridge_x, bridge_x + bridge):
        for t in range(-thickness, thickness + 1):
            scene.canvas.set(x, left.y + t, frame)


def draw_hat(scene: Scene) -> None:
    """Crown clipped from a circle on the top of the head, plus a flat brim."""
    c, r = scene.center, scene.radius
    hat = scene.color("accessory")
    height = r // 2 + scene.stream.next_bounded(r // 4)
    top = c.y - r - height // 3
    brim_height = r // 10
    brim_half = (r + r // 2) // 2
    crown_y = c.y - r
    for y in range(top, top + height):
        dy = y - crown_y
        for x in range(c.x - r, c.x + r + 1):
            dx = x - c.x
            if dx * dx + dy * dy <= r * r:
                scene.canvas.set(x, y, hat)
    for y in range(crown_y, crown_y + brim_height):
        for x in range(c.x - brim_half, c.x + brim_half + 1):
            scene.canvas.set(x, y, hat)


def draw_earrings(scene: Scene) -> None:
    c, r = scene.center, scene.radius
    offset_x = r * 5 // 6
    offset_y = r // 10
    size = r // 8
    jewel = scene.color("accessory")
    draw_filled_circle(scene.canvas, Point(c.x - offset_x, c.y + offset_y), size, jewel)
    draw_filled_circle(scene.canvas, Point(c.x + offset_x, c.y + offset_y), size, jewel)


def draw_freckles(scene: Scene) -> None:
    c, r, stream = scene.center, scene.radius, scene.stream
    freckle = blend_color(scene.color("skin"), 0.4)
    count = 6 + stream.next_bounded(8)
    for _ in range(count):
        x = c.x - r // 2 + stream.next_bounded(r)
        y = c.y + stream.next_bounded(r // 3)
        scene.canvas.set(x, y, freckle)


def draw_beard(scene: Scene) -> None:
    c, r = scene.center, scene.radius
    beard = scene.color("accessory")
    height = r // 2 + scene.stream.next_bounded(r // 4)
    start_y = c.y + r // 4
    chin_y = c.y + r // 3
    limit = r * r // 2
    for y in range(start_y, start_y + height):
        dy = y - chin_y
        for x in range(c.x - r // 2, c.x + r // 2 + 1):
            dx = x - c.x
            if dx * dx + dy * dy <= limit:
                scene.canvas.set(x, y, beard)


ACCESSORY_VARIANTS = (
    ("glasses", draw_glasses),
    ("hat", draw_hat),
    ("earrings", draw_earrings),
    ("freckles", draw_freckles),
    ("beard", draw_beard),
)


def draw_accessory(scene: Scene) -> str:
    """Draw one accessory variant and return its name."""
    name, handler = ACCESSORY_VARIANTS[scene.stream.next_bounded(len(ACCESSORY_VARIANTS))]
    handler(scene)
    return name
