"""Heading and coordinate helpers for the turtle.

Headings are in degrees, 0 pointing right (+x) and 90 pointing up (+y).
Implementations use only the Python standard library (math).
"""

from __future__ import annotations

from math import cos, floor, pi, sin
from typing import Tuple

__all__ = [
    "normalize_heading",
    "round_half_away",
    "trunc_int",
    "heading_displacement",
]


def normalize_heading(heading_deg: float) -> float:
    """Normalize a heading to [0, 360).

    Python's modulo keeps the sign of the divisor, so negative inputs wrap up
    and inputs past a full turn wrap down, however many turns they span.
    """
    h = heading_deg % 360.0
    # -1e-17 % 360.0 evaluates to 360.0 in floating point
    if h >= 360.0:
        h -= 360.0
    return h


def round_half_away(value: float) -> int:
    """Round to the nearest integer with halves going away from zero.

    This is the rounding the pixel grid uses for real-valued turtle
    positions; Python's built-in ``round`` rounds halves to even instead.
    """
    if value >= 0.0:
        return int(floor(value + 0.5))
    return -int(floor(-value + 0.5))


def trunc_int(value: float) -> int:
    """Convert to int truncating toward zero."""
    return int(value)


def heading_displacement(heading_deg: float, distance: float) -> Tuple[float, float]:
    """Return the (dx, dy) vector for moving *distance* along *heading_deg*.

    Args:
        heading_deg: Heading in degrees.
        distance: Signed travel distance in pixels.
    Returns:
        Displacement along x and y in pixels.
    """
    radians = heading_deg * pi / 180.0
    return cos(radians) * distance, sin(radians) * distance
