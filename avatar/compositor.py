"""
Compositor: the fixed order in which an avatar is drawn.

All layers share one ByteStream, so this order is part of the output
contract. Moving, adding or removing a layer (or a palette pick) shifts
every later draw and changes every avatar rendered afterwards.
"""

from typing import Callable, Tuple

from .canvas import Canvas, Point
from .draw import face, head
from .draw.accessories import draw_accessory
from .draw.backdrop import draw_backdrop_accent, draw_background_gradient, draw_frame_border
from .draw.post import apply_noise, apply_vignette
from .palettes import BACKGROUND, PALETTES, blend_color, pick_color
from .scene import Scene
from .stream import ByteStream

Layer = Callable[[Scene], object]

BACKGROUND_LIGHTEN = 0.08
HIGHLIGHT_LIGHTEN = 0.2
VIGNETTE_RATIO = 0.48

# Palette roles picked after the head radius, in draw order
PICK_ORDER: Tuple[str, ...] = (
    "skin",
    "hair",
    "eye",
    "mouth",
    "accessory",
    "eyebrow",
    "blush",
    "neck",
    "clothing",
    "accent",
    "scar",
    "mask",
    "lip",
    "shadow",
    "frame",
    "mark",
    "hood",
    "iris_highlight",
    "cape",
)


def _vignette(scene: Scene) -> None:
    apply_vignette(scene.canvas, scene.center, int(scene.size * VIGNETTE_RATIO))


def _noise(scene: Scene) -> None:
    apply_noise(scene.canvas, scene.stream, scene.size // 2)


LAYERS: Tuple[Tuple[str, Layer], ...] = (
    ("head", head.draw_head),
    ("head_highlight", head.draw_head_highlight),
    ("background_gradient", draw_background_gradient),
    ("hair", head.draw_hair),
    ("hair_strands", head.draw_hair_strands),
    ("sideburns", head.draw_sideburns),
    ("neck", head.draw_neck),
    ("cape", head.draw_cape),
    ("shoulders", head.draw_shoulders),
    ("backdrop_accent", draw_backdrop_accent),
    ("frame_border", draw_frame_border),
    ("accessory", draw_accessory),
    ("mask", face.draw_mask),
    ("eyes", face.draw_eyes),
    ("iris_highlights", face.draw_iris_highlights),
    ("eyebrows", face.draw_eyebrows),
    ("nose", face.draw_nose),
    ("blush", face.draw_blush),
    ("scar", face.draw_scar),
    ("mouth", face.draw_mouth),
    ("lip_shine", face.draw_lip_shine),
    ("mustache", face.draw_mustache),
    ("chin_shadow", face.draw_chin_shadow),
    ("forehead_mark", face.draw_forehead_mark),
    ("hood", head.draw_hood),
    ("vignette", _vignette),
    ("noise", _noise),
)


def layer_names() -> Tuple[str, ...]:
    return tuple(name for name, _ in LAYERS)


def build_scene(stream: ByteStream, size: int) -> Scene:
    """
    Allocate the canvas and make the setup draws.

    Order: background pick, head radius, then PICK_ORDER. The canvas is
    filled with the lightened background before any layer runs.
    """
    canvas = Canvas(size)
    background = blend_color(pick_color(stream, BACKGROUND), BACKGROUND_LIGHTEN)
    canvas.fill(background)

    radius = int(size * (0.32 + 0.06 * stream.next_bounded(4)))
    center = Point(size // 2, size // 2)

    colors = {"background": background}
    for role in PICK_ORDER:
        colors[role] = pick_color(stream, PALETTES[role])
    colors["highlight"] = blend_color(colors["skin"], HIGHLIGHT_LIGHTEN)

    return Scene(canvas=canvas, stream=stream, center=center, radius=radius, colors=colors)


def compose(scene: Scene) -> Canvas:
    """Run every layer in LAYERS order over the scene."""
    for _, layer in LAYERS:
        layer(scene)
    return scene.canvas


def generate_avatar(digest: bytes, size: int) -> Canvas:
    """Render the avatar for a digest. Pure: the digest is the only input entropy."""
    return compose(build_scene(ByteStream(digest), size))
