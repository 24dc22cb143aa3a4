"""
Palette registry for avatar rendering.

Each palette is a fixed, ordered list of RGBA colors for one semantic role.
Index order matters: a palette entry is chosen by a bounded draw from the
render's ByteStream, so reordering a palette changes existing avatars.
"""

from dataclasses import dataclass
from typing import Dict, NamedTuple, Tuple

from .stream import ByteStream


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True)
class Palette:
    name: str
    colors: Tuple[RGBA, ...]

    def __len__(self) -> int:
        return len(self.colors)


def _palette(name: str, *colors: Tuple[int, int, int, int]) -> Palette:
    return Palette(name=name, colors=tuple(RGBA(*c) for c in colors))


SKIN = _palette(
    "skin",
    (241, 194, 125, 255),
    (224, 172, 105, 255),
    (198, 134, 66, 255),
    (141, 85, 36, 255),
    (255, 220, 180, 255),
    (205, 133, 63, 255),
)
HAIR = _palette(
    "hair",
    (45, 34, 30, 255),
    (71, 52, 39, 255),
    (120, 90, 60, 255),
    (200, 160, 120, 255),
    (35, 30, 50, 255),
)
EYE = _palette(
    "eye",
    (36, 70, 142, 255),
    (84, 52, 32, 255),
    (32, 102, 66, 255),
    (70, 70, 70, 255),
)
MOUTH = _palette(
    "mouth",
    (141, 62, 62, 255),
    (128, 50, 80, 255),
    (160, 72, 92, 255),
)
ACCESSORY = _palette(
    "accessory",
    (60, 60, 60, 255),
    (220, 180, 90, 255),
    (180, 200, 220, 255),
    (120, 160, 200, 255),
    (200, 120, 140, 255),
)
EYEBROW = _palette(
    "eyebrow",
    (40, 32, 28, 255),
    (70, 52, 38, 255),
    (110, 80, 50, 255),
    (160, 120, 90, 255),
    (25, 25, 35, 255),
)
BLUSH = _palette(
    "blush",
    (238, 168, 168, 220),
    (230, 150, 140, 220),
    (210, 120, 130, 220),
    (240, 180, 190, 220),
)
NECK = _palette(
    "neck",
    (236, 190, 126, 255),
    (217, 168, 104, 255),
    (190, 132, 70, 255),
    (135, 84, 45, 255),
)
CLOTHING = _palette(
    "clothing",
    (52, 86, 136, 255),
    (88, 120, 76, 255),
    (170, 92, 92, 255),
    (60, 60, 70, 255),
    (120, 68, 144, 255),
    (180, 132, 60, 255),
)
ACCENT = _palette(
    "accent",
    (255, 210, 90, 255),
    (210, 90, 120, 255),
    (90, 170, 200, 255),
    (90, 200, 140, 255),
    (200, 200, 200, 255),
)
SCAR = _palette(
    "scar",
    (160, 90, 90, 255),
    (140, 70, 70, 255),
    (120, 60, 60, 255),
)
MASK = _palette(
    "mask",
    (235, 235, 235, 230),
    (210, 220, 230, 230),
    (190, 210, 220, 230),
    (220, 200, 210, 230),
)
LIP = _palette(
    "lip",
    (166, 72, 98, 255),
    (190, 90, 110, 255),
    (140, 60, 82, 255),
    (120, 45, 70, 255),
    (200, 120, 140, 255),
)
SHADOW = _palette(
    "shadow",
    (90, 72, 62, 120),
    (110, 92, 82, 120),
    (70, 58, 50, 120),
)
FRAME = _palette(
    "frame",
    (30, 30, 30, 255),
    (220, 210, 190, 255),
    (80, 90, 120, 255),
    (180, 140, 80, 255),
    (90, 120, 90, 255),
)
MARK = _palette(
    "mark",
    (220, 90, 90, 200),
    (90, 160, 220, 200),
    (120, 200, 140, 200),
    (200, 180, 100, 200),
)
HOOD = _palette(
    "hood",
    (55, 65, 90, 220),
    (90, 80, 70, 220),
    (70, 90, 80, 220),
    (100, 60, 80, 220),
)
IRIS_HIGHLIGHT = _palette(
    "iris_highlight",
    (255, 255, 255, 200),
    (230, 240, 255, 200),
    (255, 240, 230, 200),
)
CAPE = _palette(
    "cape",
    (40, 60, 120, 200),
    (120, 60, 40, 200),
    (50, 90, 70, 200),
    (100, 40, 80, 200),
)
BACKGROUND = _palette(
    "background",
    (232, 244, 255, 255),
    (255, 240, 234, 255),
    (240, 255, 244, 255),
    (244, 240, 255, 255),
)

PALETTES: Dict[str, Palette] = {
    p.name: p
    for p in (
        SKIN, HAIR, EYE, MOUTH, ACCESSORY, EYEBROW, BLUSH, NECK, CLOTHING,
        ACCENT, SCAR, MASK, LIP, SHADOW, FRAME, MARK, HOOD, IRIS_HIGHLIGHT,
        CAPE, BACKGROUND,
    )
}

# Fixed colors that do not come from a palette
EYE_WHITE = RGBA(248, 248, 248, 255)
NOSE = RGBA(180, 120, 90, 255)
TRANSPARENT = RGBA(0, 0, 0, 0)


def pick_color(stream: ByteStream, palette: Palette) -> RGBA:
    """Choose a palette entry with one bounded draw."""
    return palette.colors[stream.next_bounded(len(palette))]


def blend_color(color: RGBA, factor: float) -> RGBA:
    """Lighten color toward white by factor (0..1); alpha is kept."""

    def apply(v: int) -> int:
        return max(0, min(255, int(v + (255.0 - v) * factor)))

    return RGBA(apply(color.r), apply(color.g), apply(color.b), color.a)
