"""Things drawn on the scene: the base entity and the floating bubbles."""

from __future__ import annotations

import random

from .bitmap import BitmapLoader
from .sprite import TRANSPARENT, Sprite

BUBBLE_SPRITE = "sprites/fx/bubble.bmp"


class Entity:
    """A sprite with a position, a facing and a crop rectangle on its sheet."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.x = 0
        self.y = 0
        self.xdir = -1
        self.ydir = 0
        self.w = 16
        self.h = 16
        self.sx = 0
        self.sy = 0
        self.sprite = Sprite()

    def update(self) -> None:
        """Advance one frame; a plain entity stays still."""

    def push_sprite(self, background: Sprite) -> bool:
        """Draw the current crop of the sprite onto ``background``."""
        return self.sprite.push_cropped(
            background,
            self.x,
            self.y,
            self.xdir,
            self.sx,
            self.sy,
            self.w,
            self.h,
            TRANSPARENT,
        )

    def set_sprite(self, loader: BitmapLoader, filename: str) -> None:
        """Load a BMP at double size and use all of it as the crop."""
        width, height = loader.size(filename)
        self.w = width * 2
        self.h = height * 2
        self.sprite.create(self.w, self.h)
        loader.load(filename, self.sprite, 2)


class Bubble(Entity):
    """A bubble that drifts upwards and respawns below the screen."""

    def __init__(self, loader: BitmapLoader, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.x = self.rng.randrange(0, 128)
        self.y = -16
        self.set_sprite(loader, BUBBLE_SPRITE)

    def update(self) -> None:
        """Wobble sideways and rise; once off the top, sometimes respawn at the bottom."""
        if self.y < 0 and not self.rng.randrange(30):
            self.y = 132
            self.x = self.rng.randrange(0, 128)
        self.x += self.rng.randrange(-4, 4)
        self.y -= 4