import math

from avatar.canvas import Canvas, Point
from avatar.draw.post import MAX_VIGNETTE, apply_noise, apply_vignette
from avatar.palettes import RGBA
from avatar.stream import ByteStream

GREY = RGBA(200, 100, 50, 255)


def expected_channel(value, dist, radius):
    factor = min((dist - radius) / float(radius), MAX_VIGNETTE)
    return int(value * (1 - factor))


def test_vignette_leaves_inner_disc():
    c = Canvas(64)
    c.fill(GREY)
    apply_vignette(c, Point(32, 32), 30)
    assert c.get(32, 32) == GREY
    # exactly on the radius is not darkened
    assert c.get(32, 2) == GREY


def test_vignette_darkens_corners():
    c = Canvas(64)
    c.fill(GREY)
    apply_vignette(c, Point(32, 32), 30)
    dist = math.sqrt(32 * 32 + 32 * 32)
    assert c.get(0, 0) == RGBA(
        expected_channel(200, dist, 30),
        expected_channel(100, dist, 30),
        expected_channel(50, dist, 30),
        255,
    )


def test_vignette_is_capped():
    c = Canvas(64)
    c.fill(GREY)
    apply_vignette(c, Point(0, 0), 10)
    far = c.get(63, 63)
    assert far == RGBA(int(200 * (1 - MAX_VIGNETTE)), int(100 * (1 - MAX_VIGNETTE)), int(50 * (1 - MAX_VIGNETTE)), 255)


def test_vignette_keeps_alpha():
    c = Canvas(64)
    c.fill(RGBA(200, 200, 200, 77))
    apply_vignette(c, Point(32, 32), 5)
    assert (c.pixels[:, :, 3] == 77).all()


def test_noise_zero_intensity_is_noop():
    c = Canvas(64)
    c.fill(GREY)
    s = ByteStream(b"\x01\x02\x03")
    apply_noise(c, s, 0)
    apply_noise(c, s, -4)
    assert s.cursor == 0
    assert c.get(10, 10) == GREY


def test_noise_clamps_low():
    c = Canvas(64)
    c.fill(RGBA(3, 3, 3, 255))
    s = ByteStream(bytes(3))
    # x=0, y=0, shift=-2, four times
    apply_noise(c, s, 2)
    assert s.cursor == 4 * 3
    assert c.get(0, 0) == RGBA(0, 0, 0, 255)
    assert c.get(1, 0) == RGBA(3, 3, 3, 255)


def test_noise_clamps_high():
    c = Canvas(64)
    c.fill(RGBA(254, 254, 254, 9))
    s = ByteStream(bytes([5, 6, 4]))
    apply_noise(c, s, 1)
    assert c.get(5, 6) == RGBA(255, 255, 255, 9)
