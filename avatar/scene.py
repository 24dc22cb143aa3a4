"""Per-render drawing state handed to every feature layer."""

from dataclasses import dataclass, field
from typing import Dict

from .canvas import Canvas, Point
from .palettes import RGBA
from .stream import ByteStream


@dataclass
class Scene:
    canvas: Canvas
    stream: ByteStream
    center: Point
    radius: int
    colors: Dict[str, RGBA] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return self.canvas.size

    def color(self, role: str) -> RGBA:
        return self.colors[role]
