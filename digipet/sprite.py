"""Off-screen RGB565 pixel buffers and sprite-sheet blitting."""

from __future__ import annotations

from collections.abc import Iterable

TRANSPARENT = 0xF81F
"""Magenta in RGB565; pixels of this colour are never drawn when blitting."""

OUT_OF_BOUNDS = 0xFFFF
"""Value read back from a coordinate that lies outside the sprite."""


def rgb565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue channels into a 16-bit RGB565 colour."""
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | ((b & 0xFF) >> 3)


class Sprite:
    """A rectangular buffer of 16-bit colours."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = 0
        self.height = 0
        self._pixels: list[int] = []
        if width > 0 and height > 0:
            self.create(width, height)

    @property
    def created(self) -> bool:
        """True once the sprite has a buffer to draw into."""
        return self.width > 0 and self.height > 0

    def create(self, width: int, height: int) -> None:
        """Allocate a fresh black buffer of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid sprite size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def delete(self) -> None:
        """Release the buffer; the sprite can no longer be drawn."""
        self.width = 0
        self.height = 0
        self._pixels = []

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the sprite are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFF

    def read_pixel(self, x: int, y: int) -> int:
        """Return one pixel, or ``OUT_OF_BOUNDS`` outside the sprite."""
        if not self._inside(x, y):
            return OUT_OF_BOUNDS
        return self._pixels[y * self.width + x]

    def fill(self, color: int) -> None:
        """Paint the whole sprite in one colour."""
        self._pixels = [color & 0xFFFF] * (self.width * self.height)

    def push_image(self, x: int, y: int, w: int, h: int, pixels: Iterable[int]) -> None:
        """Copy a ``w`` by ``h`` block of row-major pixels to ``(x, y)``, clipped."""
        values = list(pixels)
        if len(values) < w * h:
            raise ValueError(f"expected {w * h} pixels, got {len(values)}")
        for row in range(h):
            for col, color in enumerate(values[row * w:(row + 1) * w]):
                self.draw_pixel(x + col, y + row, color)

    def push_cropped(
        self,
        dest: Sprite,
        x: int,
        y: int,
        direction: int,
        sx: int,
        sy: int,
        sw: int,
        sh: int,
        transparent: int = TRANSPARENT,
    ) -> bool:
        """Blit the ``sw`` by ``sh`` region at ``(sx, sy)`` onto ``dest`` at ``(x, y)``.

        With ``direction == -1`` the region is copied as it is; any other
        direction mirrors it horizontally. Pixels equal to ``transparent``
        leave the destination untouched. Returns False when either sprite
        has no buffer.
        """
        if not self.created or not dest.created:
            return False
        for offset_y, ys in enumerate(range(sy, sy + sh)):
            columns = range(sx, sx + sw) if direction == -1 else range(sx + sw - 1, sx - 1, -1)
            for offset_x, xs in enumerate(columns):
                color = self.read_pixel(xs, ys)
                if color != transparent:
                    dest.draw_pixel(x + offset_x, y + offset_y, color)
        return True

    def __repr__(self) -> str:
        return f"Sprite({self.width}x{self.height})"