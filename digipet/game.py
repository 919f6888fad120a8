"""The game loop: scene composition, saving progress and the command line."""

from __future__ import annotations

import argparse
import itertools
import json
import random
import time
from dataclasses import dataclass
from pathlib import Path

from .bitmap import BitmapLoader
from .entity import Bubble, Entity
from .events import Event, EventQueue
from .monster import Monster
from .monsterdefs import MonsterName
from .sprite import Sprite

UNDERWATER_BG = "bg/bg_underwater.bmp"
BUBBLE_COUNT = 3
FRAME_DELAY = 0.25


@dataclass
class SaveState:
    """The persisted progress: which monster and how old it is."""

    monster: MonsterName = MonsterName.Empty
    age: int = 0

    @classmethod
    def load(cls, path: str | Path) -> SaveState:
        """Read a save file; a missing file gives an empty save."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        try:
            data = json.loads(text)
            return cls(MonsterName[data["monster"]], int(data["age"]))
        except (ValueError, KeyError, TypeError) as exc:
            raise ValueError(f"corrupt save file {path}: {exc}") from exc

    def save(self, path: str | Path) -> None:
        """Write this state to ``path``."""
        payload = {"monster": self.monster.name, "age": self.age}
        Path(path).write_text(json.dumps(payload), encoding="utf-8")


class Game:
    """One pet on one background, with bubbles when the scene is underwater."""

    def __init__(
        self,
        assets: str | Path,
        save_path: str | Path,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.loader = BitmapLoader(assets)
        self.save_path = Path(save_path)
        self.queue = EventQueue()
        self.bubbles = [Bubble(self.loader, self.rng) for _ in range(BUBBLE_COUNT)]
        self.background = Entity(self.rng)
        self.entities: list[Entity] = [self.background]

        state = SaveState.load(self.save_path)
        stored = state.monster
        if stored is MonsterName.Empty:
            stored = MonsterName.RandomEgg
        self.monster = Monster(self.loader, None, self.rng)
        self.monster.set_character(stored)
        self.monster.age = state.age

        self.current_bg = self.monster.data.bg
        self.background.set_sprite(self.loader, self.current_bg)
        self.scene = Sprite(self.background.w, self.background.h)

    def tick(self) -> Sprite:
        """Save progress, advance every entity by one frame and return the composed scene."""
        SaveState(self.monster.name, self.monster.age).save(self.save_path)

        if Event.REFRESH_BG in self.queue:
            self.background.set_sprite(self.loader, self.monster.data.bg)
        self.queue.clear()

        for entity in self.entities:
            entity.update()
            entity.push_sprite(self.scene)

        self.monster.update(self.queue)
        self.monster.push_sprite(self.scene)

        if self.current_bg == UNDERWATER_BG:
            for bubble in self.bubbles:
                bubble.update()
                bubble.push_sprite(self.scene)

        return self.scene

    def run(self, frames: int | None = None, delay: float = FRAME_DELAY) -> None:
        """Tick ``frames`` times, or forever when ``frames`` is None, pausing between frames."""
        counter = itertools.count() if frames is None else range(frames)
        for _ in counter:
            self.tick()
            if delay > 0:
                time.sleep(delay)


def main(argv: list[str] | None = None) -> int:
    """Run the pet from the command line."""
    parser = argparse.ArgumentParser(prog="digipet", description="Raise a virtual monster.")
    parser.add_argument("assets", nargs="?", default=".", help="directory holding sprites/ and bg/")
    parser.add_argument("--save", default="digipet.json", help="save file path")
    parser.add_argument("--frames", type=int, default=None, help="number of frames to run")
    parser.add_argument("--delay", type=float, default=FRAME_DELAY, help="seconds between frames")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    game = Game(args.assets, args.save, random.Random(args.seed))
    try:
        game.run(args.frames, args.delay)
    except KeyboardInterrupt:
        pass
    return 0