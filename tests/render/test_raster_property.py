from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from turtlebmp.render.raster import (
    circle_fill_points,
    circle_outline_points,
    line_points,
)

coord = st.integers(min_value=-300, max_value=300)
radius = st.integers(min_value=0, max_value=120)


@settings(deadline=None, max_examples=200)
@given(x0=coord, y0=coord, x1=coord, y1=coord)
def test_line_is_connected_and_inclusive(x0: int, y0: int, x1: int, y1: int) -> None:
    pts = list(line_points(x0, y0, x1, y1))
    assert pts[0] == (x0, y0)
    assert pts[-1] == (x1, y1)
    assert len(pts) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        # 8-connected, one major step each time
        assert max(abs(bx - ax), abs(by - ay)) == 1


@settings(deadline=None, max_examples=200)
@given(x0=coord, y0=coord, x1=coord, y1=coord)
def test_line_pixels_symmetric_under_endpoint_swap(
    x0: int, y0: int, x1: int, y1: int
) -> None:
    fwd = set(line_points(x0, y0, x1, y1))
    rev = set(line_points(x1, y1, x0, y0))
    assert fwd == rev


@settings(deadline=None, max_examples=100)
@given(r=radius)
def test_circle_outline_eight_way_symmetry(r: int) -> None:
    pts = set(circle_outline_points(0, 0, r))
    for x, y in pts:
        for rx, ry in (
            (y, x),
            (-x, y),
            (x, -y),
            (-x, -y),
            (-y, x),
            (y, -x),
            (-y, -x),
        ):
            assert (rx, ry) in pts


@settings(deadline=None, max_examples=100)
@given(r=radius)
def test_circle_outline_stays_near_radius(r: int) -> None:
    for x, y in circle_outline_points(0, 0, r):
        d2 = x * x + y * y
        assert max(0, r - 1) ** 2 <= d2 <= (r + 1) ** 2


@settings(deadline=None, max_examples=60)
@given(cx=coord, cy=coord, r=st.integers(min_value=0, max_value=40))
def test_circle_fill_matches_distance_test(cx: int, cy: int, r: int) -> None:
    pts = list(circle_fill_points(cx, cy, r))
    assert len(pts) == len(set(pts))
    expected = {
        (x, y)
        for x in range(cx - r, cx + r)
        for y in range(cy - r, cy + r)
        if (x - cx) ** 2 + (y - cy) ** 2 < r * r
    }
    assert set(pts) == expected
