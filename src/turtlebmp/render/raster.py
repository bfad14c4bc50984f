"""Integer rasterization of lines and circles.

Each routine is a generator of integer (x, y) pixel coordinates in the
order they are plotted. The engine decides which color each point gets and
whether it counts toward frame emission; nothing here touches a buffer.
"""

from __future__ import annotations

from typing import Iterator, Tuple

Point = Tuple[int, int]

__all__ = ["Point", "line_points", "circle_outline_points", "circle_fill_points"]


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
    """Yield the pixels of the segment (x0, y0)-(x1, y1), both ends included.

    The start pixel always comes first and the last one is exactly
    (x1, y1). A segment covers the same pixels whichever end it is drawn
    from: the walk always runs from the lexicographically smaller endpoint
    and is replayed backwards when the caller asked for the other direction.
    """
    if (x0, y0) <= (x1, y1):
        yield from _bresenham(x0, y0, x1, y1)
        return
    yield from reversed(list(_bresenham(x1, y1, x0, y0)))


def _bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
    # Error term seeded at half the major-axis delta; |dx| == |dy| steps
    # along y.
    abs_x = abs(x1 - x0)
    abs_y = abs(y1 - y0)
    off_x = 1 if x0 < x1 else -1
    off_y = 1 if y0 < y1 else -1
    x, y = x0, y0

    yield (x, y)
    if abs_x > abs_y:
        # more horizontal: step along x
        err = abs_x // 2
        while x != x1:
            err -= abs_y
            if err < 0:
                y += off_y
                err += abs_x
            x += off_x
            yield (x, y)
    else:
        # more vertical: step along y
        err = abs_y // 2
        while y != y1:
            err -= abs_x
            if err < 0:
                x += off_x
                err += abs_y
            y += off_y
            yield (x, y)


def circle_outline_points(x0: int, y0: int, radius: int) -> Iterator[Point]:
    """Yield the outline of a circle using the midpoint algorithm.

    Every step emits the eight octant reflections, so points on the axes and
    diagonals repeat. Radius 0 yields the center eight times.
    """
    x = radius
    y = 0
    decision = 1 - x
    while x >= y:
        yield (x + x0, y + y0)
        yield (y + x0, x + y0)
        yield (-x + x0, y + y0)
        yield (-y + x0, x + y0)
        yield (-x + x0, -y + y0)
        yield (-y + x0, -x + y0)
        yield (x + x0, -y + y0)
        yield (y + x0, -x + y0)
        y += 1
        if decision <= 0:
            decision += 2 * y + 1
        else:
            x -= 1
            decision += 2 * (y - x) + 1


def circle_fill_points(x0: int, y0: int, radius: int) -> Iterator[Point]:
    """Yield every point of the ``2r x 2r`` box strictly inside the circle.

    The box spans ``[x0 - r, x0 + r)`` by ``[y0 - r, y0 + r)``; a point is
    inside when ``dx**2 + dy**2 < r**2``. Dense O(r**2) scan, no
    anti-aliasing.
    """
    rad_sq = radius * radius
    for x in range(x0 - radius, x0 + radius):
        dx = x - x0
        for y in range(y0 - radius, y0 + radius):
            dy = y - y0
            if dx * dx + dy * dy < rad_sq:
                yield (x, y)
