"""Fatal error types raised by the drawing engine.

Out-of-bounds pixels are not errors: the framebuffer reports and drops them.
Everything here means the current operation cannot be continued; the engine
never catches these and the CLI turns them into a non-zero exit status.
"""

from __future__ import annotations

__all__ = [
    "TurtleFatalError",
    "CanvasAllocationError",
    "TooManyVerticesError",
    "BitmapWriteError",
]


class TurtleFatalError(RuntimeError):
    """Base class for unrecoverable engine failures."""


class CanvasAllocationError(TurtleFatalError):
    """The framebuffer (or a bitmap row buffer) could not be allocated."""


class TooManyVerticesError(TurtleFatalError):
    """A fill path grew past the fixed polygon vertex limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Too many polygon vertices (limit {limit})")
        self.limit = limit


class BitmapWriteError(TurtleFatalError):
    """The destination bitmap file could not be opened for writing."""

    def __init__(self, path: str, reason: str = "") -> None:
        msg = f"Could not write to file: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path
