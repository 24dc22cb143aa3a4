import pytest

from avatar.canvas import Canvas, Point
from avatar.draw.primitives import (
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
    trunc_div,
)
from avatar.palettes import RGBA

INK = RGBA(10, 20, 30, 255)


def painted(canvas):
    return {(x, y) for x, y, color in canvas.iter_pixels() if color == INK}


@pytest.mark.parametrize("a,b,expected", [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-3, 4, 0), (-8, 4, -2)])
def test_trunc_div_rounds_toward_zero(a, b, expected):
    assert trunc_div(a, b) == expected


def test_fill_rect_is_half_open(canvas):
    fill_rect(canvas, 2, 3, 4, 2, INK)
    assert painted(canvas) == {(x, y) for x in range(2, 6) for y in range(3, 5)}


def test_filled_circle_pixel_count(canvas):
    draw_filled_circle(canvas, Point(10, 10), 2, INK)
    assert len(painted(canvas)) == 13
    assert (12, 10) in painted(canvas)
    assert (12, 11) not in painted(canvas)


def test_filled_circle_radius_zero_is_one_pixel(canvas):
    draw_filled_circle(canvas, Point(5, 5), 0, INK)
    assert painted(canvas) == {(5, 5)}


def test_filled_circle_clips_at_edges(canvas):
    draw_filled_circle(canvas, Point(-5, -5), 20, INK)
    px = painted(canvas)
    assert (0, 0) in px
    assert (40, 40) not in px


def test_line_includes_endpoints_one_pixel_per_column(canvas):
    draw_line(canvas, Point(0, 0), Point(5, 3), INK)
    px = painted(canvas)
    assert (0, 0) in px and (5, 3) in px
    assert len(px) == 6
    assert sorted(x for x, _ in px) == list(range(6))


def test_line_steep_and_reversed(canvas):
    draw_line(canvas, Point(4, 10), Point(2, 2), INK)
    px = painted(canvas)
    assert (4, 10) in px and (2, 2) in px
    assert sorted(y for _, y in px) == list(range(2, 11))


def test_line_single_point(canvas):
    draw_line(canvas, Point(9, 9), Point(9, 9), INK)
    assert painted(canvas) == {(9, 9)}


def test_rect_outline_thickness(canvas):
    draw_rect_outline(canvas, Point(20, 20), 10, 6, 1, INK)
    px = painted(canvas)
    assert {(15, 17), (20, 17), (25, 23), (15, 20)} <= px
    assert (20, 20) not in px
    assert (16, 20) not in px

    thick = Canvas(64)
    draw_rect_outline(thick, Point(20, 20), 10, 6, 2, INK)
    assert (16, 20) in painted(thick)
    assert (17, 20) not in painted(thick)


def test_slanted_rect_shifts_rows(canvas):
    draw_slanted_rect(canvas, Point(20, 20), 4, 4, 4, INK)
    px = painted(canvas)
    # row 0 starts at the left edge, row 3 is shifted by 3
    assert {(18, 18), (21, 18)} <= px
    assert {(21, 21), (24, 21)} <= px
    assert (20, 21) not in px


def test_slanted_rect_negative_slope_truncates(canvas):
    draw_slanted_rect(canvas, Point(20, 20), 4, 4, -3, INK)
    px = painted(canvas)
    # row 1: -3 / 4 truncates to 0, not -1
    assert (18, 19) in px
    assert (17, 19) not in px
    # row 3: -9 / 4 truncates to -2
    assert (16, 21) in px
    assert (15, 21) not in px


def test_diamond_pixel_count(canvas):
    draw_diamond(canvas, Point(30, 30), 2, INK)
    px = painted(canvas)
    assert len(px) == 13
    assert (32, 30) in px
    assert (31, 31) in px
    assert (32, 31) not in px


def test_chevron_narrows_downward(canvas):
    draw_chevron(canvas, Point(30, 30), 10, 3, INK)
    px = painted(canvas)
    assert len(px) == 11 + 11 + 9
    assert (25, 31) in px
    assert (25, 32) not in px
    assert (26, 32) in px


def test_stripe_paints_every_other_row(canvas):
    draw_stripe(canvas, Point(30, 30), 10, 4, INK)
    px = painted(canvas)
    assert (30, 30) in px
    assert (30, 31) not in px
    assert (30, 32) in px
    assert (30, 33) not in px


def test_hexagon_points():
    pts = hexagon_points(Point(10, 10), 4)
    assert len(pts) == 6
    assert pts[0] == Point(14, 10)
    assert pts[3] == Point(6, 10)
    assert all(abs(p.x - 10) <= 4 and abs(p.y - 10) <= 4 for p in pts)


def test_hexagon_outline_hits_every_vertex(canvas):
    draw_hexagon_outline(canvas, Point(20, 20), 6, INK)
    px = painted(canvas)
    assert set(hexagon_points(Point(20, 20), 6)) <= px
    assert (20, 20) not in px


@pytest.mark.parametrize(
    "draw",
    [
        lambda c: fill_rect(c, 200, 200, 5, 5, INK),
        lambda c: draw_filled_circle(c, Point(-100, 300), 10, INK),
        lambda c: draw_line(c, Point(-50, -50), Point(-10, -90), INK),
        lambda c: draw_rect_outline(c, Point(500, 500), 10, 10, 2, INK),
        lambda c: draw_slanted_rect(c, Point(-40, 10), 6, 6, 3, INK),
        lambda c: draw_diamond(c, Point(90, 90), 5, INK),
        lambda c: draw_chevron(c, Point(30, -50), 10, 4, INK),
        lambda c: draw_stripe(c, Point(30, 120), 10, 4, INK),
        lambda c: draw_hexagon_outline(c, Point(-200, -200), 8, INK),
    ],
)
def test_off_canvas_geometry_is_harmless(canvas, draw):
    draw(canvas)
    assert not canvas.pixels.any()
