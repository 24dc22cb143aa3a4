"""
Daily Pixel Avatar

Deterministic pixel-art portraits from an input string and a UTC day.
The same (input, day, size) always renders the same image.
"""

from .canvas import Canvas, Point
from .compositor import LAYERS, PICK_ORDER, generate_avatar, layer_names
from .core import DEFAULT_SIZE, SUPPORTED_SIZES
from .encode import encode_png, save_png
from .errors import (
    AvatarError,
    EncodingError,
    InvalidInputError,
    InvalidTimestampError,
    UnsupportedSizeError,
)
from .palettes import PALETTES, RGBA, Palette, blend_color, pick_color
from .render import RenderResult, render
from .seed import hash_input, resolve_time_key, time_key_for
from .stream import ByteStream

__version__ = "0.1.0"
__all__ = [
    "Canvas",
    "Point",
    "LAYERS",
    "PICK_ORDER",
    "generate_avatar",
    "layer_names",
    "DEFAULT_SIZE",
    "SUPPORTED_SIZES",
    "encode_png",
    "save_png",
    "AvatarError",
    "EncodingError",
    "InvalidInputError",
    "InvalidTimestampError",
    "UnsupportedSizeError",
    "PALETTES",
    "RGBA",
    "Palette",
    "blend_color",
    "pick_color",
    "RenderResult",
    "render",
    "hash_input",
    "resolve_time_key",
    "time_key_for",
    "ByteStream",
]
