"""Reading 24-bit BMP files into sprites."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .sprite import TRANSPARENT, Sprite, rgb565

BMP_SIGNATURE = 0x4D42
MASK_BASE_COLOR = 0x2106

_HEADER = struct.Struct("<HIIIIIIHHI")


class BitmapError(Exception):
    """A file is not a BMP this loader can read."""


@dataclass(frozen=True)
class BmpHeader:
    """The fields of a BMP header that the loader uses."""

    data_offset: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int

    @property
    def is_supported(self) -> bool:
        """True for single-plane, uncompressed 24-bit images."""
        return self.planes == 1 and self.bits_per_pixel == 24 and self.compression == 0

    @property
    def row_stride(self) -> int:
        """Bytes per stored row, including padding to a multiple of four."""
        padding = (4 - ((self.width * 3) & 3)) & 3
        return self.width * 3 + padding


def read_header(stream: BinaryIO) -> BmpHeader:
    """Read and check a BMP header from the start of ``stream``."""
    raw = stream.read(_HEADER.size)
    if len(raw) < 2 or int.from_bytes(raw[:2], "little") != BMP_SIGNATURE:
        raise BitmapError("not a BMP file")
    if len(raw) < _HEADER.size:
        raise BitmapError("truncated BMP header")
    _, _, _, offset, _, width, height, planes, bits, compression = _HEADER.unpack(raw)
    return BmpHeader(
        data_offset=offset,
        width=width & 0xFFFF,
        height=height & 0xFFFF,
        planes=planes,
        bits_per_pixel=bits,
        compression=compression,
    )


def _draw(sprite: Sprite, col: int, y: int, color: int, scale: int) -> None:
    if scale == 2:
        for dx in (0, 1):
            for dy in (0, 1):
                sprite.draw_pixel(col * 2 + dx, y * 2 + dy, color)
    else:
        sprite.draw_pixel(col, y, color)


def _outline(sprite: Sprite, width: int, height: int, fill: int) -> None:
    for y in range(height * 2):
        for x in range(width * 2):
            if sprite.read_pixel(x, y) == TRANSPARENT:
                continue
            left = TRANSPARENT if x == 0 else sprite.read_pixel(x - 1, y)
            right = sprite.read_pixel(x + 1, y)
            top = TRANSPARENT if y == 0 else sprite.read_pixel(x, y - 1)
            bottom = sprite.read_pixel(x, y + 1)
            if left == TRANSPARENT:
                sprite.draw_pixel(x, y, fill)
                sprite.draw_pixel(x + 1, y, fill)
            if right == TRANSPARENT:
                sprite.draw_pixel(x, y, fill)
                sprite.draw_pixel(x - 1, y, fill)
            if top == TRANSPARENT:
                sprite.draw_pixel(x, y, fill)
                sprite.draw_pixel(x, y + 1, fill)
            if bottom == TRANSPARENT:
                sprite.draw_pixel(x, y, fill)
                sprite.draw_pixel(x, y - 1, fill)


class BitmapLoader:
    """Loads BMP images from a directory of game assets."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def resolve(self, filename: str) -> Path:
        """Return the path of an asset given relative to the asset root."""
        return self.root / filename.lstrip("/")

    def size(self, filename: str) -> tuple[int, int]:
        """Return ``(width, height)`` of a BMP file in pixels."""
        with self.resolve(filename).open("rb") as stream:
            header = read_header(stream)
        return header.width, header.height

    def load(
        self,
        filename: str,
        sprite: Sprite,
        scale: int = 1,
        fill: int | None = None,
    ) -> None:
        """Draw a 24-bit BMP into ``sprite``, doubled in size when ``scale`` is 2.

        With ``fill`` given, the image is drawn as a grid mask: every third
        row and column in ``fill``, the rest in a dark base colour, magenta
        kept transparent, and edges next to transparency outlined in ``fill``.
        """
        with self.resolve(filename).open("rb") as stream:
            header = read_header(stream)
            if not header.is_supported:
                raise BitmapError(f"BMP format not recognized: {filename}")
            stream.seek(header.data_offset)
            width, height = header.width, header.height
            for row in range(height):
                line = stream.read(header.row_stride)
                if len(line) < header.row_stride:
                    raise BitmapError(f"truncated pixel data in {filename}")
                y = height - row - 1
                for col in range(width):
                    b, g, r = line[col * 3:col * 3 + 3]
                    if fill is None:
                        color = rgb565(r, g, b)
                    elif (r, g, b) == (0xFF, 0x00, 0xFF):
                        color = rgb565(r, g, b)
                    elif row % 3 == 0 or col % 3 == 0:
                        color = fill
                    else:
                        color = MASK_BASE_COLOR
                    _draw(sprite, col, y, color, scale)
                if fill is not None:
                    _outline(sprite, width, height, fill)