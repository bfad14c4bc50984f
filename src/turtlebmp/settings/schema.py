"""Pydantic model for user settings."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from .values import CANVAS_DEFAULTS, DEFAULT_COLORS, LIMITS, VIDEO_DEFAULTS

ColorTriple = Tuple[int, int, int]


class Settings(BaseModel):
    """Engine settings persisted to disk.

    Parameters
    ----------
    width, height: Canvas size in pixels.
    background: Initial canvas color.
    pen_color, fill_color: Colors the turtle starts a scene with.
    frame_interval: Pen pixels per video frame when video is enabled.
    frame_pattern: ``str.format`` pattern for frame file names; must take
        exactly one integer (the frame number).
    output_dir: Directory for frame sequences.
    max_oob_reports: Out-of-bounds pixel warnings logged per canvas.
    """

    width: int = Field(default=int(CANVAS_DEFAULTS["width"]))
    height: int = Field(default=int(CANVAS_DEFAULTS["height"]))
    background: ColorTriple = Field(default=tuple(CANVAS_DEFAULTS["background"]))
    pen_color: ColorTriple = Field(default=DEFAULT_COLORS["pen"])
    fill_color: ColorTriple = Field(default=DEFAULT_COLORS["fill"])
    frame_interval: int = Field(default=int(VIDEO_DEFAULTS["frame_interval"]))
    frame_pattern: str = Field(default=str(VIDEO_DEFAULTS["frame_pattern"]))
    output_dir: str = Field(default=".")
    max_oob_reports: int = Field(default=int(LIMITS["max_oob_reports"]))

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas dimensions must be > 0")
        return v

    @field_validator("background", "pen_color", "fill_color")
    @classmethod
    def _chk_color(cls, v: ColorTriple) -> ColorTriple:
        if any(c < 0 or c > 255 for c in v):
            raise ValueError("color channels must be within 0..255")
        return v

    @field_validator("frame_interval")
    @classmethod
    def _chk_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("frame_interval must be > 0 pixels")
        return v

    @field_validator("frame_pattern")
    @classmethod
    def _chk_pattern(cls, v: str) -> str:
        try:
            name = v.format(1)
        except (IndexError, KeyError, ValueError):
            raise ValueError("frame_pattern must format one integer") from None
        if name == v:
            raise ValueError("frame_pattern must contain a {} placeholder")
        return v

    @field_validator("max_oob_reports")
    @classmethod
    def _chk_reports(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_oob_reports must be >= 0")
        return v
