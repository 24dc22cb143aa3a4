import hashlib

import pytest

from avatar import render
from avatar.errors import InvalidInputError, UnsupportedSizeError
from avatar.render import RenderResult, validate_input, validate_size


def test_same_inputs_same_avatar():
    a = render("alice@example.com", "2024-01-01", 64)
    b = render("alice@example.com", "2024-01-01", 64)
    assert isinstance(a, RenderResult)
    assert a.digest == b.digest
    assert a.canvas == b.canvas


def test_avatar_changes_with_day():
    a = render("alice@example.com", "2024-01-01", 64)
    b = render("alice@example.com", "2024-01-02", 64)
    assert a.digest != b.digest
    assert a.canvas != b.canvas


def test_avatar_changes_with_input():
    a = render("alice@example.com", "2024-01-01", 64)
    b = render("alice@example.con", "2024-01-01", 64)
    assert a.canvas != b.canvas


def test_result_fields():
    result = render("alice@example.com", "2024-01-01", 128)
    assert result.size == 128
    assert result.time_key == "2024-01-01"
    assert result.hex_digest == hashlib.sha256(b"alice@example.com:2024-01-01").hexdigest()
    img = result.to_image()
    assert img.size == (128, 128)
    assert img.mode == "RGBA"


def test_input_whitespace_is_trimmed():
    assert render("  alice  ", "2024-01-01").digest == render("alice", "2024-01-01").digest


def test_default_size_is_64():
    assert render("alice", "2024-01-01").size == 64


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_blank_input_rejected(value):
    with pytest.raises(InvalidInputError):
        render(value, "2024-01-01", 64)


@pytest.mark.parametrize("size", [0, 32, 100, 256, -64, True, "64", 64.0])
def test_unsupported_size_rejected(size):
    with pytest.raises(UnsupportedSizeError):
        validate_size(size)


def test_validate_input_returns_stripped():
    assert validate_input(" bob ") == "bob"


def test_unsupported_size_in_render():
    with pytest.raises(ValueError):
        render("alice", "2024-01-01", 100)


@pytest.mark.parametrize(
    "input,day,size,expected",
    [
        ("alice@example.com", "2024-01-01", 64, "910d9f2554394d137e437e25ce3929997ed5458dd888e02367adde0aa64dc983"),
        ("alice@example.com", "2024-01-01", 128, "98204beb903166f4bd7946f8d0aaa6eb1de17dc20910978ed5f50eee6a5a82b2"),
        ("bob@example.com", "2024-06-15", 128, "67b78daf8414dbdce25556ac87869e56f18e4d1161b37febf926488f66a20d1a"),
    ],
)
def test_known_avatars_are_stable(input, day, size, expected):
    """Pixel hashes of published avatars; any change to the drawing grammar breaks these."""
    canvas = render(input, day, size).canvas
    assert hashlib.sha256(canvas.tobytes()).hexdigest() == expected
