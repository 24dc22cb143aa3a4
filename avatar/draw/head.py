"""
Head, hair and body layers.

Every layer takes the render's Scene. Geometry scales with the head radius
(scene.radius) and center (scene.center); random choices are drawn from
scene.stream in a fixed order.
"""

from ..canvas import Point
from ..palettes import blend_color
from ..scene import Scene
from .primitives import draw_chevron, draw_filled_circle, draw_stripe, fill_rect


def draw_head(scene: Scene) -> None:
    draw_filled_circle(scene.canvas, scene.center, scene.radius, scene.color("skin"))


def draw_head_highlight(scene: Scene) -> None:
    c, r = scene.center, scene.radius
    spot = Point(c.x - r // 3, c.y + r // 5)
    draw_filled_circle(scene.canvas, spot, r // 6, scene.color("highlight"))


def draw_hair(scene: Scene) -> None:
    """Hair cap: a circle centered r/2 above the head, clipped to the top band."""
    c, r = scene.center, scene.radius
    hair = scene.color("hair")
    height = int(r * (0.55 + 0.1 * scene.stream.next_bounded(3)))
    top = c.y - r
    cap_y = c.y - r // 2
    for y in range(top, top + height):
        dy = y - cap_y
        for x in range(c.x - r, c.x + r + 1):
            dx = x - c.x
            if dx * dx + dy * dy <= r * r:
                scene.canvas.set(x, y, hair)


def draw_hair_strands(scene: Scene) -> None:
    c, r, stream = scene.center, scene.radius, scene.stream
    strand = blend_color(scene.color("hair"), 0.2)
    count = 8 + stream.next_bounded(6)
    for _ in range(count):
        start_x = c.x - r + stream.next_bounded(r * 2)
        start_y = c.y - r + stream.next_bounded(r // 2)
        length = r // 2 + stream.next_bounded(r // 2)
        for y in range(length):
            scene.canvas.set(start_x, start_y + y, strand)


def draw_sideburns(scene: Scene) -> None:
    if scene.stream.next_bounded(2) == 0:
        return
    c, r = scene.center, scene.radius
    width = r // 6
    height = r // 2
    left_x = c.x - r + width
    right_x = c.x + r - width
    top_y = c.y - r // 4
    fill_rect(scene.canvas, left_x, top_y, width, height, scene.color("hair"))
    fill_rect(scene.canvas, right_x - width, top_y, width, height, scene.color("hair"))


def draw_neck(scene: Scene) -> None:
    c, r = scene.center, scene.radius
    width = r // 2
    height = r // 2
    fill_rect(scene.canvas, c.x - width // 2, c.y + r // 2, width, height, scene.color("neck"))


def draw_cape(scene: Scene) -> None:
    """Trapezoid below the shoulders, widening by one pixel every two rows."""
    if scene.stream.next_bounded(3) != 0:
        return
    c, r = scene.center, scene.radius
    cape = scene.color("cape")
    half = r
    start_y = c.y + r + r // 4
    for y in range(start_y, start_y + r):
        offset = (y - start_y) // 2
        for x in range(c.x - half - offset, c.x + half + offset + 1):
            scene.canvas.set(x, y, cape)


def draw_shoulder_chevron(scene: Scene, center: Point, width: int, height: int) -> None:
    draw_chevron(scene.canvas, center, width, height, scene.color("accent"))


def draw_shoulder_stripe(scene: Scene, center: Point, width: int, height: int) -> None:
    draw_stripe(scene.canvas, center, width, height, scene.color("accent"))


SHOULDER_TRIMS = (
    ("chevron", draw_shoulder_chevron),
    ("stripe", draw_shoulder_stripe),
)


def draw_shoulders(scene: Scene) -> None:
    c, r = scene.center, scene.radius
    width = r * 2
    height = r // 2
    start_y = c.y + r
    fill_rect(scene.canvas, c.x - width // 2, start_y, width + 1, height, scene.color("clothing"))

    _, trim = SHOULDER_TRIMS[scene.stream.next_bounded(len(SHOULDER_TRIMS))]
    trim(scene, Point(c.x, start_y + height // 3), width // 2, height // 3)


def draw_hood(scene: Scene) -> None:
    """Translucent elliptical hood, painted only over pixels already drawn."""
    if scene.stream.next_bounded(3) != 0:
        return
    c, r = scene.center, scene.radius
    hood = blend_color(scene.color("hood"), 0.05)
    width = r * 2
    height = r + r // 2
    start_y = c.y - r
    ellipse_y = c.y - r // 3
    rx2 = float(width * width) / 4
    ry2 = float(height * height) / 4
    for y in range(start_y, start_y + height):
        dy = float(y - ellipse_y)
        for x in range(c.x - width // 2, c.x + width // 2 + 1):
            dx = float(x - c.x)
            if (dx * dx) / rx2 + (dy * dy) / ry2 <= 1:
                if scene.canvas.get(x, y).a != 0:
                    scene.canvas.set(x, y, hood)
