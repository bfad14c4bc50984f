"""24-bit uncompressed BMP encoding.

Layout (all integers little-endian)::

    offset  size  field
    0       2     "BM"
    2       4     file size (54 + stride * height)
    6       4     reserved (0)
    10      4     pixel data offset (54)
    14      4     info header size (40)
    18      4     width
    22      4     height (positive: rows stored bottom-up)
    26      2     planes (1)
    28      2     bits per pixel (24)
    30      4     compression (0)
    34      4     image size (stride * height)
    38      16    resolution and palette fields (0)

Each row holds B,G,R triplets left to right, zero padded to
``stride = ((3 * (width + 1)) // 4) * 4`` bytes. Rows are written in the
canvas storage order, bottom row first.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from turtlebmp.core.errors import BitmapWriteError, CanvasAllocationError
from turtlebmp.render.canvas import Canvas, Color

logger = logging.getLogger(__name__)

__all__ = [
    "FILE_HEADER_SIZE",
    "INFO_HEADER_SIZE",
    "PIXEL_OFFSET",
    "row_stride",
    "encode_bmp",
    "write_bmp",
    "decode_bmp",
    "DecodedBitmap",
]

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE

_FILE_HEADER = struct.Struct("<2sIII")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")


def row_stride(width: int) -> int:
    """Bytes per stored row, a multiple of 4."""
    return ((3 * (width + 1)) // 4) * 4


def _headers(width: int, height: int) -> bytes:
    stride = row_stride(width)
    image_size = stride * height
    file_header = _FILE_HEADER.pack(b"BM", PIXEL_OFFSET + image_size, 0, PIXEL_OFFSET)
    info_header = _INFO_HEADER.pack(
        INFO_HEADER_SIZE, width, height, 1, 24, 0, image_size, 0, 0, 0, 0
    )
    return file_header + info_header


def encode_bmp(canvas: Canvas) -> bytes:
    """Serialize *canvas* to the BMP layout above."""
    width, height = canvas.size()
    stride = row_stride(width)
    try:
        line = bytearray(stride)
    except MemoryError as e:
        raise CanvasAllocationError("Can't allocate memory for BMP file") from e
    out = bytearray(_headers(width, height))
    for row in range(height):
        rgb = canvas.row_bytes(row)
        # swap R and B by slicing the interleaved channels
        line[0 : 3 * width : 3] = rgb[2::3]
        line[1 : 3 * width : 3] = rgb[1::3]
        line[2 : 3 * width : 3] = rgb[0::3]
        out += line
    return bytes(out)


def write_bmp(canvas: Canvas, path: Union[str, Path]) -> Path:
    """Encode *canvas* and write it to *path*.

    Raises:
        BitmapWriteError: when the destination cannot be opened or written.
    """
    p = Path(path)
    data = encode_bmp(canvas)
    try:
        with p.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise BitmapWriteError(str(p), e.strerror or str(e)) from e
    logger.info("wrote %dx%d bitmap to %s", *canvas.size(), p)
    return p


@dataclass(slots=True)
class DecodedBitmap:
    """Pixels of a decoded bitmap; ``rows[0]`` is the first stored (bottom) row."""

    width: int
    height: int
    rows: List[List[Color]]

    def pixel(self, col: int, row: int) -> Color:
        return self.rows[row][col]


def decode_bmp(data: bytes) -> DecodedBitmap:
    """Parse a bitmap produced by :func:`encode_bmp`.

    Only the fixed layout written here is accepted (24 bpp, uncompressed,
    positive height); anything else raises ``ValueError``.
    """
    if len(data) < PIXEL_OFFSET:
        raise ValueError("truncated bitmap header")
    magic, file_size, _reserved, offset = _FILE_HEADER.unpack_from(data, 0)
    if magic != b"BM":
        raise ValueError("not a BMP file")
    fields: Tuple[int, ...] = _INFO_HEADER.unpack_from(data, FILE_HEADER_SIZE)
    hdr_size, width, height, planes, bpp, compression = fields[:6]
    if hdr_size != INFO_HEADER_SIZE or planes != 1 or bpp != 24 or compression != 0:
        raise ValueError("unsupported BMP variant")
    if width <= 0 or height <= 0:
        raise ValueError("unsupported BMP dimensions")
    stride = row_stride(width)
    if len(data) < offset + stride * height or file_size != len(data):
        raise ValueError("truncated bitmap pixel data")
    rows: List[List[Color]] = []
    for r in range(height):
        base = offset + r * stride
        row: List[Color] = []
        for c in range(width):
            b, g, red = data[base + 3 * c : base + 3 * c + 3]
            row.append((red, g, b))
        rows.append(row)
    return DecodedBitmap(width=width, height=height, rows=rows)
