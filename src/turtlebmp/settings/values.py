"""Centralized value sets loaded from YAML.

This module provides a single place to access defaults and fixed tables
(canvas size, default colors, engine limits, frame naming and the digit
glyphs). The master source is ``values.yml`` in this package.

On import we load and parse the YAML. A missing or corrupt file falls back
to the hard-coded literals below so the engine still runs with the classic
defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_CANVAS: Dict[str, Any] = {
    "width": 640,
    "height": 480,
    "background": (255, 255, 255),
}
_FALLBACK_COLORS: Dict[str, Tuple[int, int, int]] = {
    "pen": (0, 0, 0),
    "fill": (0, 255, 0),
}
_FALLBACK_LIMITS: Dict[str, int] = {
    "max_polygon_vertices": 128,
    "max_oob_reports": 100,
}
_FALLBACK_VIDEO: Dict[str, Any] = {
    "frame_pattern": "frame{:05d}.bmp",
    "frame_interval": 10,
}
_FALLBACK_DIGITS: Dict[int, Tuple[str, ...]] = {
    0: ("0110", "1001", "1001", "1001", "0110"),
    1: ("0110", "0010", "0010", "0010", "0111"),
    2: ("1110", "0001", "0110", "1000", "1111"),
    3: ("1110", "0001", "0110", "0001", "1110"),
    4: ("0101", "0101", "0111", "0001", "0001"),
    5: ("1111", "1000", "1110", "0001", "1110"),
    6: ("0110", "1000", "1110", "1001", "0110"),
    7: ("1111", "0001", "0010", "0100", "0100"),
    8: ("0110", "1001", "0110", "1001", "0110"),
    9: ("0110", "1001", "0111", "0001", "0110"),
}


def _as_color(v: Any) -> Tuple[int, int, int] | None:
    if isinstance(v, (list, tuple)) and len(v) == 3:
        try:
            r, g, b = (int(c) for c in v)
        except (TypeError, ValueError):
            return None
        return (r, g, b)
    return None


def _as_glyph(v: Any) -> Tuple[str, ...] | None:
    if not isinstance(v, list) or len(v) != 5:
        return None
    rows: List[str] = []
    for row in v:
        if not isinstance(row, str) or len(row) != 4 or set(row) - {"0", "1"}:
            return None
        rows.append(row)
    return tuple(rows)


# --- Load YAML -----------------------------------------------------------
_canvas: Dict[str, Any] = dict(_FALLBACK_CANVAS)
_colors: Dict[str, Tuple[int, int, int]] = dict(_FALLBACK_COLORS)
_limits: Dict[str, int] = dict(_FALLBACK_LIMITS)
_video: Dict[str, Any] = dict(_FALLBACK_VIDEO)
_digits: Dict[int, Tuple[str, ...]] = dict(_FALLBACK_DIGITS)

if _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        with _YAML_PATH.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raw = {}
        # Canvas
        canvas = raw.get("canvas", {})
        if isinstance(canvas, dict):
            for k in ("width", "height"):
                v = canvas.get(k)
                if isinstance(v, int) and v > 0:
                    _canvas[k] = v
            bg = _as_color(canvas.get("background"))
            if bg is not None:
                _canvas["background"] = bg
        # Colors
        colors = raw.get("colors", {})
        if isinstance(colors, dict):
            for k in ("pen", "fill"):
                c = _as_color(colors.get(k))
                if c is not None:
                    _colors[k] = c
        # Limits
        limits = raw.get("limits", {})
        if isinstance(limits, dict):
            for k in ("max_polygon_vertices", "max_oob_reports"):
                v = limits.get(k)
                if isinstance(v, int) and v >= 0:
                    _limits[k] = v
        # Video
        video = raw.get("video", {})
        if isinstance(video, dict):
            pat = video.get("frame_pattern")
            if isinstance(pat, str) and "{" in pat:
                _video["frame_pattern"] = pat
            iv = video.get("frame_interval")
            if isinstance(iv, int) and iv > 0:
                _video["frame_interval"] = iv
        # Digit glyphs
        digits = raw.get("digits", {})
        if isinstance(digits, dict):
            for k, v in digits.items():
                try:
                    d = int(k)
                except (TypeError, ValueError):
                    continue
                g = _as_glyph(v)
                if 0 <= d <= 9 and g is not None:
                    _digits[d] = g
    except (OSError, yaml.YAMLError):  # pragma: no cover - corrupt file
        pass

# --- Public accessors ----------------------------------------------------
CANVAS_DEFAULTS: Dict[str, Any] = dict(_canvas)
DEFAULT_COLORS: Dict[str, Tuple[int, int, int]] = dict(_colors)
LIMITS: Dict[str, int] = dict(_limits)
VIDEO_DEFAULTS: Dict[str, Any] = dict(_video)
DIGIT_GLYPHS: Dict[int, Tuple[str, ...]] = dict(_digits)
MAX_POLYGON_VERTICES: int = int(_limits["max_polygon_vertices"])

__all__ = [
    "CANVAS_DEFAULTS",
    "DEFAULT_COLORS",
    "LIMITS",
    "VIDEO_DEFAULTS",
    "DIGIT_GLYPHS",
    "MAX_POLYGON_VERTICES",
]
