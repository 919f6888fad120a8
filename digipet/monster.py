"""The pet itself: growth, evolution, wandering and animation."""

from __future__ import annotations

import random

from .bitmap import BitmapLoader
from .entity import Entity
from .events import Event, EventQueue
from .monsterdefs import MonsterName, MonsterRef, MonsterStage, monster_ref

# Sprite-sheet cells, in doubled pixels, as (x, y).
SPR_HATCH = (32 * 2, 0 * 2)
SPR_STAND1 = (0 * 2, 0 * 2)
SPR_STAND2 = (16 * 2, 0 * 2)
SPR_SHOUT = (32 * 2, 0 * 2)
SPR_HAPPY = (16 * 2, 32 * 2)
SPR_ANGRY = (32 * 2, 48 * 2)
SPR_ATTACK = (32 * 2, 32 * 2)

HOME_X = 64 - 16
HOME_Y = 128 - 32 - 12

EVO_MASK_COLOR = 0x5E06
EVO_MASK_WINDOW = 600
TICKS_PER_LIFESPAN_UNIT = 120


class Monster(Entity):
    """A monster that ages every other frame, wanders and evolves when its time is up."""

    def __init__(
        self,
        loader: BitmapLoader,
        name: MonsterName | int | str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.loader = loader
        self.x = HOME_X
        self.y = HOME_Y
        self.xdir = 1
        self.ydir = 0
        self.w = 32
        self.h = 32
        self.sx, self.sy = SPR_STAND1
        self.data: MonsterRef = monster_ref(MonsterName.Empty)
        self.age = 0
        self.lifespan = 10
        self.evo_mask = False
        self.bound_l = -16
        self.bound_r = 112
        self.lag_frame = False
        if name is not None:
            self.set_character(name)

    @property
    def name(self) -> MonsterName:
        """The monster currently shown."""
        return self.data.name

    def set_character(self, name: MonsterName | int | str) -> None:
        """Become the given monster: load its sprite sheet and take on its lifespan."""
        ref = monster_ref(name)
        width, height = self.loader.size(ref.filepath)
        self.sprite.delete()
        self.sprite.create(width * 2, height * 2)
        self.loader.load(ref.filepath, self.sprite, 2)
        self.data = ref
        self.lifespan = ref.lifespan * TICKS_PER_LIFESPAN_UNIT

    def evo_ready(self) -> bool:
        """True once the monster has lived out its lifespan."""
        return self.age >= self.lifespan

    def evolve(self) -> None:
        """Turn into one of the possible evolutions, picked at random."""
        evos = self.data.evos
        next_mon = evos[self.rng.randrange(len(evos))] if evos else MonsterName.Empty
        self.set_character(next_mon)
        self.age = 0
        self.evo_mask = False
        if self.data.stage is MonsterStage.digitama:
            self.x = HOME_X
            self.y = HOME_Y

    def _update_mask(self) -> None:
        if self.data.stage in (MonsterStage.digitama, MonsterStage.baby):
            return
        time_left = self.lifespan - self.age
        need_mask = time_left < EVO_MASK_WINDOW or self.lifespan - time_left < EVO_MASK_WINDOW
        if self.evo_mask == need_mask:
            return
        self.evo_mask = need_mask
        fill = EVO_MASK_COLOR if need_mask else None
        self.loader.load(self.data.filepath, self.sprite, 2, fill)

    def _move(self) -> None:
        if self.x <= self.bound_l:
            self.xdir = 1
        elif self.x >= self.bound_r:
            self.xdir = -1
        elif not self.rng.randrange(4) and self.data.stage is not MonsterStage.digitama:
            if self.xdir != 0:
                self.xdir = 0
            elif self.rng.randrange(2):
                self.xdir = 1
            else:
                self.xdir = -1
        self.x += self.xdir * self.data.speed

    def _animate(self) -> None:
        is_egg = self.data.stage is MonsterStage.digitama
        if is_egg and self.age >= self.lifespan - 8:
            self.sx, self.sy = SPR_STAND2
            if self.age >= self.lifespan - 4:
                self.sx, self.sy = SPR_HATCH
            elif self.age == self.lifespan - 8:
                self.x -= 2
            elif self.age == self.lifespan - 6:
                self.x -= 4
            elif self.age in (self.lifespan - 5, self.lifespan - 7):
                self.x += 4
        elif (self.sx, self.sy) == SPR_STAND2:
            dice = 1 if is_egg else self.rng.randrange(6)
            if dice == 5:
                self.sx, self.sy = SPR_HAPPY
            elif dice == 4:
                self.sx, self.sy = SPR_ANGRY
            else:
                self.sx, self.sy = SPR_STAND1
        else:
            self.sx, self.sy = SPR_STAND2

    def update(self, queue: EventQueue) -> None:
        """Advance one frame; the monster only acts on every other call."""
        if not self.lag_frame:
            self.age += 1
            if self.age >= self.lifespan:
                self.evolve()
                queue.push(Event.REFRESH_BG)
            self._update_mask()
            self._move()
            self._animate()
        self.lag_frame = not self.lag_frame

    def __repr__(self) -> str:
        return f"Monster({self.name.name}, age={self.age}/{self.lifespan})"