"""
Test configuration and fixtures for the avatar renderer.

Provides a known digest, blank canvases and a Scene factory with one
distinct, opaque color per palette role so layer tests can tell which
role painted a pixel.
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from avatar.canvas import Canvas, Point
from avatar.compositor import PICK_ORDER
from avatar.palettes import RGBA
from avatar.scene import Scene
from avatar.seed import hash_input
from avatar.stream import ByteStream

ROLES = ("background", "highlight") + PICK_ORDER


def role_colors():
    """One opaque, distinct color per role."""
    return {role: RGBA(10 + i * 7, 20 + i * 5, 30 + i * 3, 255) for i, role in enumerate(ROLES)}


@pytest.fixture
def digest():
    return hash_input("alice@example.com", "2024-01-01")


@pytest.fixture
def canvas():
    return Canvas(64)


@pytest.fixture
def make_scene():
    """Build a Scene over a blank canvas; radius defaults to the smallest head."""

    def _make(data=b"\x00", size=64, radius=None, colors=None):
        palette = role_colors()
        if colors:
            palette.update(colors)
        return Scene(
            canvas=Canvas(size),
            stream=ByteStream(data),
            center=Point(size // 2, size // 2),
            radius=radius if radius is not None else int(size * 0.32),
            colors=palette,
        )

    return _make
