import random
import struct

import pytest

from digipet.bitmap import BitmapLoader
from digipet.events import Event, EventQueue
from digipet.monster import (
    EVO_MASK_COLOR,
    HOME_X,
    HOME_Y,
    SPR_ANGRY,
    SPR_HAPPY,
    SPR_HATCH,
    SPR_STAND1,
    SPR_STAND2,
    Monster,
)
from digipet.monsterdefs import MONSTER_DB, MonsterName, MonsterStage, evolutions, monster_ref
from digipet.sprite import rgb565

RED = (0, 0, 255)  # stored as b, g, r


def write_bmp(path, width, height, bgr=RED):
    stride = (width * 3 + 3) & ~3
    row = bytes(bgr) * width + b"\x00" * (stride - width * 3)
    data = row * height
    header = struct.pack(
        "<HIIIIIIHHIIIIII",
        0x4D42, 54 + len(data), 0, 54, 40, width, height, 1, 24, 0,
        len(data), 2835, 2835, 0, 0,
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(header + data)


def write_assets(root):
    for ref in MONSTER_DB.values():
        write_bmp(root / ref.filepath, 4, 4)
        if ref.bg != "None":
            write_bmp(root / ref.bg, 8, 8)
    write_bmp(root / "sprites/fx/bubble.bmp", 2, 2)


@pytest.fixture
def loader(tmp_path):
    write_assets(tmp_path)
    return BitmapLoader(tmp_path)


def all_pixels(sprite):
    return [sprite.read_pixel(x, y) for y in range(sprite.height) for x in range(sprite.width)]


def step(monster, queue):
    monster.update(queue)
    monster.update(queue)


def test_default_monster(loader):
    m = Monster(loader)
    assert m.name is MonsterName.Empty
    assert m.lifespan == 10
    assert (m.x, m.y) == (HOME_X, HOME_Y)
    assert m.xdir == 1


def test_set_character(loader):
    m = Monster(loader, MonsterName.Botamon, random.Random(1))
    ref = monster_ref(MonsterName.Botamon)
    width, height = loader.size(ref.filepath)
    assert m.name is MonsterName.Botamon
    assert m.data == ref
    assert m.lifespan == ref.lifespan * 120
    assert (m.sprite.width, m.sprite.height) == (width * 2, height * 2)
    assert (m.w, m.h) == (32, 32)


def test_evo_ready(loader):
    m = Monster(loader, MonsterName.Botamon, random.Random(1))
    assert not m.evo_ready()
    m.age = m.lifespan
    assert m.evo_ready()


def test_lag_frame_skips_every_other_update(loader):
    m = Monster(loader, MonsterName.Botamon, random.Random(1))
    q = EventQueue()
    m.update(q)
    assert m.age == 1
    assert m.lag_frame
    m.update(q)
    assert m.age == 1
    assert not m.lag_frame


def test_random_egg_evolves_into_digitama(loader):
    m = Monster(loader, MonsterName.RandomEgg, random.Random(3))
    m.x = 0
    q = EventQueue()
    m.update(q)
    assert m.name in evolutions(MonsterName.RandomEgg)
    assert m.data.stage is MonsterStage.digitama
    assert m.age == 0
    assert (m.x, m.y) == (HOME_X, HOME_Y)
    assert Event.REFRESH_BG in q


def test_empty_evolves_into_empty(loader):
    m = Monster(loader, MonsterName.Empty, random.Random(3))
    q = EventQueue()
    m.update(q)
    assert m.name is MonsterName.Empty
    assert Event.REFRESH_BG in q


def test_evolve_picks_from_evolutions(loader):
    m = Monster(loader, MonsterName.Agumon, random.Random(5))
    m.age = 99
    m.evo_mask = True
    m.evolve()
    assert m.name in evolutions(MonsterName.Agumon)
    assert m.age == 0
    assert not m.evo_mask


def test_left_bound_turns_right(loader):
    m = Monster(loader, MonsterName.Botamon, random.Random(2))
    m.x = m.bound_l
    m.xdir = -1
    m.update(EventQueue())
    assert m.xdir == 1
    assert m.x == m.bound_l + m.data.speed


def test_right_bound_turns_left(loader):
    m = Monster(loader, MonsterName.Botamon, random.Random(2))
    m.x = m.bound_r
    m.update(EventQueue())
    assert m.xdir == -1
    assert m.x == m.bound_r - m.data.speed


def test_digitama_does_not_wander(loader):
    m = Monster(loader, MonsterName.Agu2006_Digitama, random.Random(7))
    q = EventQueue()
    for _ in range(20):
        step(m, q)
    assert m.x == HOME_X
    assert m.xdir == 1


def test_hatch_sequence(loader):
    m = Monster(loader, MonsterName.Agu2006_Digitama, random.Random(7))
    q = EventQueue()
    x0 = m.x
    m.age = m.lifespan - 9
    m.update(q)
    assert m.age == m.lifespan - 8
    assert (m.sx, m.sy) == SPR_STAND2
    assert m.x == x0 - 2
    m.update(q)
    m.update(q)
    assert m.x == x0 + 2
    while m.age < m.lifespan - 4:
        step(m, q)
    assert (m.sx, m.sy) == SPR_HATCH


def test_digitama_pose_alternates(loader):
    m = Monster(loader, MonsterName.Agu2006_Digitama, random.Random(7))
    q = EventQueue()
    step(m, q)
    assert (m.sx, m.sy) == SPR_STAND2
    step(m, q)
    assert (m.sx, m.sy) == SPR_STAND1


def test_pose_after_stand2(loader):
    m = Monster(loader, MonsterName.Botamon, random.Random(11))
    q = EventQueue()
    step(m, q)
    assert (m.sx, m.sy) == SPR_STAND2
    step(m, q)
    assert (m.sx, m.sy) in {SPR_STAND1, SPR_HAPPY, SPR_ANGRY}


def test_evo_mask_near_start_and_cleared_later(loader):
    m = Monster(loader, MonsterName.Agumon, random.Random(4))
    q = EventQueue()
    m.update(q)
    assert m.evo_mask
    assert EVO_MASK_COLOR in all_pixels(m.sprite)
    m.update(q)
    m.age = 700
    m.update(q)
    assert not m.evo_mask
    assert set(all_pixels(m.sprite)) == {rgb565(255, 0, 0)}


def test_evo_mask_near_end(loader):
    m = Monster(loader, MonsterName.Agumon, random.Random(4))
    m.evo_mask = False
    m.age = m.lifespan - 100
    m.update(EventQueue())
    assert m.evo_mask


def test_baby_is_never_masked(loader):
    m = Monster(loader, MonsterName.Botamon, random.Random(4))
    m.update(EventQueue())
    assert not m.evo_mask
    assert EVO_MASK_COLOR not in all_pixels(m.sprite)