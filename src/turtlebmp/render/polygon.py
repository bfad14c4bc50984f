"""Polygon path accumulation and even-odd scan-line filling.

The fill follows Darel Rex Finley's public-domain polygon fill: for every
pixel row, collect where the polygon edges cross the row, sort the
crossings and fill strictly between each pair. Filling is imperfect on very
acute corners, so callers re-stroke the outline afterwards with
:func:`outline_segments`.
"""

from __future__ import annotations

from math import ceil, floor
from typing import Iterator, List, Sequence, Tuple

from turtlebmp.core.errors import TooManyVerticesError
from turtlebmp.core.geometry import round_half_away
from turtlebmp.settings.values import MAX_POLYGON_VERTICES

Vertex = Tuple[float, float]
Span = Tuple[int, int, int]

__all__ = [
    "Vertex",
    "Span",
    "PolygonPath",
    "row_intercepts",
    "scanline_spans",
    "outline_segments",
]


class PolygonPath:
    """Ordered vertex list with a fixed capacity."""

    def __init__(self, limit: int = MAX_POLYGON_VERTICES) -> None:
        self.limit = int(limit)
        self._vertices: List[Vertex] = []

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    def append(self, x: float, y: float) -> None:
        if len(self._vertices) >= self.limit:
            raise TooManyVerticesError(self.limit)
        self._vertices.append((float(x), float(y)))

    def clear(self) -> None:
        self._vertices.clear()


def row_intercepts(vertices: Sequence[Vertex], y: int) -> List[float]:
    """Return the sorted x-coordinates where the polygon edges cross row *y*.

    An edge counts when exactly one endpoint lies strictly below the row and
    the other on or above it: a vertex sitting exactly on the row is counted
    only for the edge that continues below it. Horizontal edges never count.
    """
    nodes: List[float] = []
    n = len(vertices)
    if n == 0:
        return nodes
    fy = float(y)
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if (yi < fy <= yj) or (yj < fy <= yi):
            nodes.append(xi + (fy - yi) / (yj - yi) * (xj - xi))
        j = i
    nodes.sort()
    return nodes


def scanline_spans(
    vertices: Sequence[Vertex], y_start: int, y_stop: int
) -> Iterator[Span]:
    """Yield ``(y, x_first, x_last)`` fill spans for rows ``y_start <= y < y_stop``.

    Spans run from ``floor(a) + 1`` to ``ceil(b) - 1`` inclusive for each
    consecutive intercept pair ``(a, b)``, so pixels under the outline itself
    are left for the edge stroke. An unpaired trailing intercept (degenerate
    or self-intersecting paths) is ignored. Empty spans are skipped.
    """
    if len(vertices) < 2:
        return
    for y in range(y_start, y_stop):
        nodes = row_intercepts(vertices, y)
        for k in range(0, len(nodes) - 1, 2):
            first = int(floor(nodes[k])) + 1
            last = int(ceil(nodes[k + 1])) - 1
            if first <= last:
                yield (y, first, last)


def outline_segments(
    vertices: Sequence[Vertex],
) -> Iterator[Tuple[int, int, int, int]]:
    """Yield each closed-polygon edge as rounded ``(x0, y0, x1, y1)``."""
    n = len(vertices)
    for i in range(n):
        x0, y0 = vertices[i]
        x1, y1 = vertices[(i + 1) % n]
        yield (
            round_half_away(x0),
            round_half_away(y0),
            round_half_away(x1),
            round_half_away(y1),
        )
