"""4x5 digit glyphs for stamping integers onto the canvas."""

from __future__ import annotations

from typing import Iterator, Tuple

from turtlebmp.settings.values import DIGIT_GLYPHS

GLYPH_WIDTH = 4
GLYPH_HEIGHT = 5
# glyph width plus one blank column
DIGIT_ADVANCE = 5


def digit_offsets(digit: int) -> Iterator[Tuple[int, int]]:
    """Yield (column, row) of every set pixel of *digit*; row 0 is the top."""
    rows = DIGIT_GLYPHS[digit]
    for row, bits in enumerate(rows):
        for col, bit in enumerate(bits):
            if bit == "1":
                yield (col, row)


def int_offsets(value: int) -> Iterator[Tuple[int, int]]:
    """Yield (dx, dy) offsets of the pixels spelling *value* in decimal.

    Digits run left to right, each ``DIGIT_ADVANCE`` pixels apart; glyph
    rows go downward, so ``dy`` is zero or negative.
    """
    if value < 0:
        raise ValueError(f"cannot draw negative integer {value}")
    digits = str(int(value))
    for i, ch in enumerate(digits):
        for col, row in digit_offsets(int(ch)):
            yield (i * DIGIT_ADVANCE + col, -row)
