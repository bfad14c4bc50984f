"""Color type and the Canvas protocol.

Defines the minimal pixel surface contract shared by the framebuffer and the
bitmap encoder, so the encoder can serialize any surface that exposes its
storage rows.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


class Canvas(Protocol):
    """Fixed-size RGB surface addressed by centered integer coordinates."""

    def size(self) -> Tuple[int, int]:
        ...

    def set(self, x: int, y: int, color: Color) -> bool:
        ...

    def get(self, x: int, y: int) -> Optional[Color]:
        ...

    def clear(self, color: Color) -> None:
        ...

    def row_bytes(self, row: int) -> bytes:
        """Return storage row *row* (0 is the bottom) as packed R,G,B bytes."""
        ...
