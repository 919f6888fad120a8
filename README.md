# digipet

A small virtual pet simulation. Your monster starts as an egg, hatches and
walks back and forth in its habitat. As it ages it evolves along a branching
evolution tree. When it reaches the end of its line it turns into a random
egg, and the cycle starts again. The monster's name and age are saved after
every frame, so the pet keeps growing where it left off.

Graphics come from 24-bit uncompressed BMP sprite sheets. They are drawn at
double scale onto a scene held in memory. When the game starts in the
underwater habitat (`bg/bg_underwater.bmp`), three bubbles float up through
the scene.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
digipet [ASSETS] [--save PATH] [--frames N] [--delay SECONDS] [--seed N]
```

- `ASSETS` is the directory that holds the BMP files. It defaults to the
  current directory.
- `--save` is the state file. It defaults to `digipet.json`.
- `--frames` is the number of frames to run. Without it the game runs until
  it is interrupted.
- `--delay` is the number of seconds between frames. It defaults to `0.25`.
- `--seed` seeds the random number generator.

The asset directory must contain every file the monster table names, for
example `sprites/baby/Botamon.bmp` and `bg/bg_lakeside.bmp`. It must also
contain `sprites/fx/bubble.bmp`, because the bubbles are always created. A
missing file raises `FileNotFoundError`. A file that is not a single-plane,
uncompressed 24-bit BMP raises `digipet.bitmap.BitmapError`.

The save file is JSON, for example `{"monster": "Koromon", "age": 42}`. If
the file is missing, or it names `Empty`, the game starts from `RandomEgg`.
A save file that cannot be read raises `ValueError`.

## What it does not do

The game never shows the scene on screen. `Game.tick()` composes each frame
into a `Sprite` and returns it, and displaying that buffer is up to the
caller. There is also no user input, so the pet cannot be fed or played
with. It only ages, wanders and evolves.

## Using it as a library

- `digipet.monsterdefs`: the monster table.
  - `MonsterName` and `MonsterStage` are enums.
  - `MonsterRef` is a frozen dataclass with `filepath`, `name`, `stage`,
    `lifespan`, `move_style`, `speed`, `bg` and `evos`.
  - `MONSTER_DB` maps each name to its entry.
  - `monster_ref(name)` and `evolutions(name)` accept an enum member, a
    number or a name string.
- `digipet.events`: `Event` and `EventQueue`, a ring of ten slots.
  - `push(event)` overwrites the oldest slot once the ring is full.
  - `clear()` resets every slot to `Event.NONE`.
  - The queue supports iteration and the `in` operator.
- `digipet.sprite`: `Sprite`, an RGB565 pixel buffer, and
  `rgb565(r, g, b)`.
  - The buffer has `create`, `delete`, `draw_pixel`, `read_pixel`, `fill`
    and `push_image`.
  - `push_cropped` draws one cell of a sprite sheet onto another sprite. It
    skips transparent magenta (`0xF81F`) and mirrors the cell unless
    `direction` is `-1`.
- `digipet.bitmap`: `BitmapLoader(root)` reads BMP files under an asset
  root.
  - `size(filename)` returns `(width, height)`.
  - `load(filename, sprite, scale, fill)` draws the image into a sprite.
    Passing a `fill` colour draws the evolution grid mask instead of the
    image.
  - `read_header(stream)` parses a header into a `BmpHeader`.
- `digipet.entity`: `Entity`, the base drawable object, and `Bubble`.
- `digipet.monster`: `Monster`, which ages on every second call to
  `update(queue)`. It wanders between its bounds, hatches and evolves. On
  evolving it pushes `Event.REFRESH_BG`.
- `digipet.game`: `Game(assets, save_path, rng)` ties everything together.
  - `tick()` saves, advances one frame and returns the scene.
  - `run(frames, delay)` calls `tick()` repeatedly.
  - `SaveState` loads and saves the state file.
  - `main(argv)` is the command line.

```python
import random
from digipet.game import Game

game = Game("assets", "pet.json", random.Random(1))
game.run(frames=40, delay=0)
scene = game.tick()
print(scene.width, scene.height, game.monster)
```

The monster acts on every second frame, so with the default quarter-second
delay its age is counted in half-second steps. A lifespan value `n` in the
table means `n * 120` such steps.