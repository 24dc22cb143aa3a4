"""
Drawing package for avatar rendering.

Primitives rasterize shapes onto a Canvas; the layer modules turn a Scene
into head, face, accessory and background features; post holds the final
whole-canvas passes.
"""

from .accessories import ACCESSORY_VARIANTS, draw_accessory
from .backdrop import BACKDROP_ACCENTS, draw_backdrop_accent, draw_background_gradient
from .post import apply_noise, apply_vignette
from .primitives import (
    draw_chevron,
    draw_diamond,
    draw_filled_circle,
    draw_hexagon_outline,
    draw_line,
    draw_rect_outline,
    draw_slanted_rect,
    draw_stripe,
    fill_rect,
    hexagon_points,
)

__all__ = [
    "ACCESSORY_VARIANTS",
    "BACKDROP_ACCENTS",
    "draw_accessory",
    "draw_backdrop_accent",
    "draw_background_gradient",
    "apply_noise",
    "apply_vignette",
    "draw_chevron",
    "draw_diamond",
    "draw_filled_circle",
    "draw_hexagon_outline",
    "draw_line",
    "draw_rect_outline",
    "draw_slanted_rect",
    "draw_stripe",
    "fill_rect",
    "hexagon_points",
]
