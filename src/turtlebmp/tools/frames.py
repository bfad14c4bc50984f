"""Numbered bitmap frame sequences driven by pen pixel counts.

While enabled, every pen pixel written to the canvas is counted and a
snapshot is written whenever the running count (taken before it is
incremented) is a multiple of the interval, so the very first pixel already
produces a frame. Fill pixels are never counted.

Usage::

    frames = FrameEmitter(canvas, directory="out")
    frames.begin(pixels_per_frame=50)
    ...  # each pen plot calls frames.on_pen_pixel()
    frames.end()

Writes are synchronous and block the drawing call that triggered them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from turtlebmp.codec.bmp import write_bmp
from turtlebmp.core.errors import BitmapWriteError
from turtlebmp.render.canvas import Canvas
from turtlebmp.settings.values import VIDEO_DEFAULTS

logger = logging.getLogger(__name__)


class FrameEmitter:
    def __init__(
        self,
        canvas: Canvas,
        *,
        directory: Union[str, Path] = ".",
        pattern: str = str(VIDEO_DEFAULTS["frame_pattern"]),
        interval: int = int(VIDEO_DEFAULTS["frame_interval"]),
    ) -> None:
        self._canvas = canvas
        self.directory = Path(directory)
        self.pattern = pattern
        self.enabled = False
        self.interval = int(interval)
        self.frame_count = 0
        self.pixel_count = 0

    def begin(self, pixels_per_frame: Optional[int] = None) -> None:
        """Enable emission and restart both the frame and pixel counters.

        Without *pixels_per_frame* the configured interval is kept.
        """
        if pixels_per_frame is None:
            pixels_per_frame = self.interval
        if int(pixels_per_frame) <= 0:
            raise ValueError("pixels_per_frame must be > 0")
        self.enabled = True
        self.frame_count = 0
        self.interval = int(pixels_per_frame)
        self.pixel_count = 0
        logger.debug("frame emission enabled every %d pixels", self.interval)

    def end(self) -> None:
        self.enabled = False
        logger.debug("frame emission disabled after %d frames", self.frame_count)

    def frame_path(self, number: int) -> Path:
        return self.directory / self.pattern.format(number)

    def on_pen_pixel(self) -> Optional[Path]:
        """Count one pen pixel; return the frame path when one was written."""
        if not self.enabled:
            return None
        count = self.pixel_count
        self.pixel_count += 1
        if count % self.interval == 0:
            return self.save_frame()
        return None

    def save_frame(self) -> Path:
        """Write the next numbered frame regardless of the pixel count."""
        self.frame_count += 1
        path = self.frame_path(self.frame_count)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BitmapWriteError(str(path), e.strerror or str(e)) from e
        write_bmp(self._canvas, path)
        logger.debug("frame %d -> %s", self.frame_count, path)
        return path
