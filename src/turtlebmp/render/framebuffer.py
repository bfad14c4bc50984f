"""Fixed-size RGB framebuffer with centered coordinates.

(0, 0) is the center of the grid. Storage is row-major, row 0 holding the
lowest y (``-height // 2``), which is also the first row a bottom-up bitmap
expects.

The valid range is ``[-width // 2, width // 2] x [-height // 2, height // 2]``
inclusive. For even sizes this is one pixel wider than the grid: the extra
column at ``x == width // 2`` lands on the first pixel of the next storage row,
and the extra row at ``y == height // 2`` is rejected by the linear index
check. Drawings that touch the right edge of an even-width canvas rely on
that wrap.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from turtlebmp.core.errors import CanvasAllocationError
from turtlebmp.render.canvas import WHITE, Color
from turtlebmp.settings.values import LIMITS

logger = logging.getLogger(__name__)


class Framebuffer:
    """Owned ``bytearray`` of R,G,B triplets.

    Parameters
    ----------
    width, height: Grid size in pixels; fixed for the lifetime of the buffer.
    background: Initial color of every pixel.
    max_oob_reports: How many out-of-bounds writes are logged before further
        ones are dropped silently. All of them are still counted.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: Color = WHITE,
        max_oob_reports: int = int(LIMITS["max_oob_reports"]),
    ) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._half_w = self._width // 2
        self._half_h = self._height // 2
        self._pixels = self._width * self._height
        try:
            self._buf = bytearray(self._pixels * 3)
        except MemoryError as e:
            raise CanvasAllocationError(
                f"Can't allocate memory for {self._width}x{self._height} image"
            ) from e
        self.max_oob_reports = int(max_oob_reports)
        self.out_of_bounds_count = 0
        self.clear(background)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def index(self, x: int, y: int) -> int:
        """Linear pixel index of the centered coordinate (x, y)."""
        return self._width * (y + self._half_h) + (x + self._half_w)

    def in_bounds(self, x: int, y: int) -> bool:
        return (
            -self._half_w <= x <= self._half_w and -self._half_h <= y <= self._half_h
        )

    def set(self, x: int, y: int, color: Color) -> bool:
        """Write *color* at (x, y); return False when the pixel was rejected."""
        if not self.in_bounds(x, y):
            self._report_oob(x, y)
            return False
        idx = self.index(x, y)
        if idx < 0 or idx >= self._pixels:
            return False
        off = idx * 3
        buf = self._buf
        r, g, b = color
        buf[off] = r & 0xFF
        buf[off + 1] = g & 0xFF
        buf[off + 2] = b & 0xFF
        return True

    def get(self, x: int, y: int) -> Optional[Color]:
        """Return the color at (x, y), or None outside the addressable range."""
        if not self.in_bounds(x, y):
            return None
        idx = self.index(x, y)
        if idx < 0 or idx >= self._pixels:
            return None
        off = idx * 3
        buf = self._buf
        return (buf[off], buf[off + 1], buf[off + 2])

    def clear(self, color: Color = WHITE) -> None:
        r, g, b = color
        self._buf[:] = bytes((r & 0xFF, g & 0xFF, b & 0xFF)) * self._pixels

    def row_bytes(self, row: int) -> bytes:
        if row < 0 or row >= self._height:
            raise IndexError(f"row {row} outside 0..{self._height - 1}")
        start = row * self._width * 3
        return bytes(self._buf[start : start + self._width * 3])

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def _report_oob(self, x: int, y: int) -> None:
        self.out_of_bounds_count += 1
        if self.out_of_bounds_count <= self.max_oob_reports:
            logger.warning("Pixel out of bounds: (%d,%d)", x, y)
