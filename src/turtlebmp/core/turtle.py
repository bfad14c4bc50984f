"""Turtle state machine driving the rasterizer and polygon filler.

A :class:`Turtle` owns one framebuffer, one current :class:`TurtleState`
and one backup slot. All motion funnels through :meth:`Turtle.go_to`, which
strokes the segment when the pen is down and records fill vertices while a
fill is open.

Example::

    t = Turtle(100, 100)
    t.set_fill_color(255, 0, 0)
    t.begin_fill()
    for _ in range(4):
        t.forward(20)
        t.turn_left(90)
    t.end_fill()
    t.save_bmp("square.bmp")

One instance is meant to be driven from a single thread; there is no
locking. Fatal conditions surface as :class:`~turtlebmp.core.errors.TurtleFatalError`
subclasses and are never caught here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple, Union

from turtlebmp.codec.bmp import write_bmp
from turtlebmp.core.geometry import (
    heading_displacement,
    normalize_heading,
    round_half_away,
    trunc_int,
)
from turtlebmp.render.canvas import WHITE, Color
from turtlebmp.render.framebuffer import Framebuffer
from turtlebmp.render.glyphs import int_offsets
from turtlebmp.render.polygon import PolygonPath, outline_segments, scanline_spans
from turtlebmp.render.raster import (
    circle_fill_points,
    circle_outline_points,
    line_points,
)
from turtlebmp.settings.values import (
    DEFAULT_COLORS,
    LIMITS,
    MAX_POLYGON_VERTICES,
    VIDEO_DEFAULTS,
)
from turtlebmp.tools.frames import FrameEmitter

logger = logging.getLogger(__name__)

__all__ = ["TurtleState", "Turtle"]


@dataclass(slots=True)
class TurtleState:
    """Cursor state. Heading is in degrees, 0 = +x, 90 = +y."""

    xpos: float = 0.0
    ypos: float = 0.0
    heading: float = 0.0
    pen_color: Color = field(default_factory=lambda: DEFAULT_COLORS["pen"])
    fill_color: Color = field(default_factory=lambda: DEFAULT_COLORS["fill"])
    pendown: bool = True
    filled: bool = False

    def copy(self) -> "TurtleState":
        return replace(self)


class Turtle:
    """Turtle graphics engine over a fixed-size framebuffer.

    Parameters
    ----------
    width, height: Canvas size in pixels; fixed for the engine's lifetime.
    background: Initial canvas color (white unless configured otherwise).
    max_oob_reports: Cap on logged out-of-bounds pixel warnings.
    polygon_limit: Maximum number of vertices in a fill path.
    frames_dir: Directory that video frames are written to.
    frame_pattern: ``str.format`` pattern for frame file names.
    frame_interval: Pen pixels per frame when video starts without one.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: Color = WHITE,
        max_oob_reports: int = int(LIMITS["max_oob_reports"]),
        polygon_limit: int = MAX_POLYGON_VERTICES,
        frames_dir: Union[str, Path] = ".",
        frame_pattern: str = str(VIDEO_DEFAULTS["frame_pattern"]),
        frame_interval: int = int(VIDEO_DEFAULTS["frame_interval"]),
    ) -> None:
        self.canvas = Framebuffer(
            width, height, background=background, max_oob_reports=max_oob_reports
        )
        self.frames = FrameEmitter(
            self.canvas,
            directory=frames_dir,
            pattern=frame_pattern,
            interval=frame_interval,
        )
        self._path = PolygonPath(polygon_limit)
        self.state = TurtleState()
        self.backup_state = TurtleState()
        self.reset()

    # --- State -----------------------------------------------------------
    def reset(self) -> None:
        """Center the turtle facing right with default colors, pen down, no fill.

        The canvas is left untouched.
        """
        self.state = TurtleState()
        self._path.clear()

    def backup(self) -> None:
        """Copy the current state into the single backup slot."""
        self.backup_state = self.state.copy()

    def restore(self) -> None:
        """Replace the current state with the backup slot."""
        self.state = self.backup_state.copy()

    def get_x(self) -> float:
        return self.state.xpos

    def get_y(self) -> float:
        return self.state.ypos

    @property
    def heading(self) -> float:
        return self.state.heading

    @property
    def position(self) -> Tuple[float, float]:
        return (self.state.xpos, self.state.ypos)

    @property
    def fill_vertex_count(self) -> int:
        return len(self._path)

    # --- Motion ----------------------------------------------------------
    def forward(self, pixels: float) -> None:
        dx, dy = heading_displacement(self.state.heading, pixels)
        self.go_to(self.state.xpos + dx, self.state.ypos + dy)

    def backward(self, pixels: float) -> None:
        self.forward(-pixels)

    def strafe_left(self, pixels: float) -> None:
        self.turn_left(90)
        self.forward(pixels)
        self.turn_right(90)

    def strafe_right(self, pixels: float) -> None:
        self.turn_right(90)
        self.forward(pixels)
        self.turn_left(90)

    def turn_left(self, angle: float) -> None:
        self.state.heading = normalize_heading(self.state.heading + angle)

    def turn_right(self, angle: float) -> None:
        self.turn_left(-angle)

    def set_heading(self, angle: float) -> None:
        """Point the turtle at *angle* degrees (0 = right, 90 = up)."""
        self.state.heading = normalize_heading(angle)

    def go_to(self, x: float, y: float) -> None:
        """Move to (x, y), stroking the path if the pen is down.

        While a fill is open and the pen is down the destination is appended
        to the fill path.
        """
        st = self.state
        if st.pendown:
            self.draw_line(
                round_half_away(st.xpos),
                round_half_away(st.ypos),
                round_half_away(x),
                round_half_away(y),
            )
        st.xpos = float(x)
        st.ypos = float(y)
        if st.filled and st.pendown:
            self._path.append(x, y)

    # --- Pen and fill ----------------------------------------------------
    def pen_up(self) -> None:
        self.state.pendown = False

    def pen_down(self) -> None:
        self.state.pendown = True

    def set_pen_color(self, red: int, green: int, blue: int) -> None:
        self.state.pen_color = (red, green, blue)

    def set_fill_color(self, red: int, green: int, blue: int) -> None:
        self.state.fill_color = (red, green, blue)

    def begin_fill(self) -> None:
        """Start recording a polygon to fill; clears any previous path."""
        self.state.filled = True
        self._path.clear()

    def end_fill(self) -> None:
        """Fill the recorded polygon (even-odd rule) and re-stroke its edges."""
        vertices = self._path.vertices
        logger.debug("filling polygon with %d vertices", len(vertices))
        half_h = self.canvas.height // 2
        for y, first, last in scanline_spans(vertices, -half_h, half_h):
            for x in range(first, last + 1):
                self.fill_pixel(x, y)
        self.state.filled = False
        # the scan fill can leave gaps along sharp edges
        for x0, y0, x1, y1 in outline_segments(vertices):
            self.draw_line(x0, y0, x1, y1)
        self._path.clear()

    # --- Primitives ------------------------------------------------------
    def dot(self) -> None:
        """Plot one pen pixel at the current position, whatever the pen state."""
        st = self.state
        self.draw_pixel(round_half_away(st.xpos), round_half_away(st.ypos))

    def draw_pixel(self, x: int, y: int) -> None:
        """Plot (x, y) in the pen color; counts toward video frames."""
        if self.canvas.set(x, y, self.state.pen_color):
            self.frames.on_pen_pixel()

    def fill_pixel(self, x: int, y: int) -> None:
        """Plot (x, y) in the fill color; never counts toward video frames."""
        self.canvas.set(x, y, self.state.fill_color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        for x, y in line_points(x0, y0, x1, y1):
            self.draw_pixel(x, y)

    def draw_circle(self, x0: int, y0: int, radius: int) -> None:
        """Stroke a circle outline; with a fill open the interior is filled first."""
        if self.state.filled:
            self.fill_circle(radius, x0, y0)
        for x, y in circle_outline_points(x0, y0, radius):
            self.draw_pixel(x, y)

    def fill_circle(
        self, radius: int, x0: Optional[int] = None, y0: Optional[int] = None
    ) -> None:
        """Fill a disc at (x0, y0), or at the current position when omitted."""
        if x0 is None:
            x0 = trunc_int(self.state.xpos)
        if y0 is None:
            y0 = trunc_int(self.state.ypos)
        for x, y in circle_fill_points(x0, y0, radius):
            self.fill_pixel(x, y)

    def draw_int(self, value: int) -> None:
        """Stamp *value* in 4x5 digits with the top-left at the current position."""
        base_x = self.state.xpos
        base_y = self.state.ypos
        for dx, dy in int_offsets(value):
            self.draw_pixel(trunc_int(base_x + dx), trunc_int(base_y + dy))

    def draw_turtle(self) -> None:
        """Stamp a small turtle icon at the current position.

        Legs, head and a ringed body are filled discs in the pen color with
        fill-color centers. Both the current state and the backup slot are
        the same after the call as before it.
        """
        original = self.state.copy()
        saved_backup = self.backup_state.copy()
        pen = original.pen_color
        fill = original.fill_color

        self.pen_up()
        # legs
        for i in (-1, 1):
            for j in (-1, 1):
                self.backup()
                self.forward(i * 7)
                self.strafe_left(j * 7)
                self._ringed_disc(5, 3, pen, fill)
                self.restore()
        # head
        self.backup()
        self.forward(10)
        self._ringed_disc(5, 3, pen, fill)
        self.restore()
        # body
        for r in (9, 5, 1):
            self._ringed_disc(r + 2, r, pen, fill)

        self.state = original
        self.backup_state = saved_backup

    def _ringed_disc(self, outer: int, inner: int, ring: Color, center: Color) -> None:
        self.set_fill_color(*ring)
        self.fill_circle(outer)
        self.set_fill_color(*center)
        self.fill_circle(inner)

    # --- Output ----------------------------------------------------------
    def save_bmp(self, path: Union[str, Path]) -> Path:
        """Write the canvas to *path* as a 24-bit BMP."""
        return write_bmp(self.canvas, path)

    def begin_video(self, pixels_per_frame: Optional[int] = None) -> None:
        """Write a numbered frame every *pixels_per_frame* pen pixels.

        Without an argument the interval given at construction is used.
        """
        self.frames.begin(pixels_per_frame)

    def save_frame(self) -> Path:
        return self.frames.save_frame()

    def end_video(self) -> None:
        self.frames.end()
