"""The monster catalogue: names, growth stages and evolution lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MonsterName(IntEnum):
    """Every monster the pet can become, in catalogue order."""

    Empty = 0
    Agu2006_Digitama = 1
    Botamon = 2
    Agumon = 3
    Greymon = 4
    Tyrannomon = 5
    Devimon = 6
    Meramon = 7
    MetalGreymon = 8
    Mamemon = 9
    Monzaemon = 10
    Betamon = 11
    Seadramon = 12
    Airdramon = 13
    Numemon = 14
    Koromon = 15
    Worm_Digitama = 16
    Leafmon = 17
    Budmon = 18
    Pyocomon = 19
    Lalamon = 20
    Piyomon = 21
    Koemon = 22
    Kiwimon = 23
    Birdramon = 24
    KaratsukiNumemon = 25
    Ogremon = 26
    Sunflowmon = 27
    Palmon = 28
    RedVegimon = 29
    Lilamon = 30
    Piccolomon = 31
    Garudamon = 32
    Gerbemon = 33
    Togemon = 34
    Lilimon = 35
    Jyureimon = 36
    Woodmon = 37
    Delumon = 38
    Pinochimon = 39
    Rosemon = 40
    BanchoLilimon = 41
    Lotusmon = 42
    Minervamon_X = 43
    Andiramon_Data = 44
    Astamon = 45
    Mephismon_X = 46
    Monzaemon_X = 47
    Kuda_Digitama = 48
    Cupimon = 49
    Gazimon = 50
    Lopmon = 51
    Terriermon = 52
    Morphomon = 53
    Drimogemon = 54
    Lekismon = 55
    Dogmon = 56
    Galgomon = 57
    Leomon_X = 58
    Burgermon_Mama = 59
    Kyubimon_Silver = 60
    Andromon = 61
    Giromon = 62
    GreatKingScumon = 63
    Etemon = 64
    Gerbemon_1 = 65
    Rapidmon = 66
    Panjyamon_X = 67
    ChoHakkaimon = 68
    LadyDevimon = 69
    Meicrackmon_Vicious = 70
    WaruMonzaemon = 71
    Turuiemon = 72
    Pafumon = 73
    Pagumon = 74
    Guilmon = 75
    Dracomon_X = 76
    Ryudamon = 77
    Gigimon = 78
    Koromon_1 = 79
    Otamamon = 80
    Shellmon = 81
    Raptordramon = 82
    Lavorvomon = 83
    Agumon_X = 84
    ClearAgumon = 85
    Guardromon = 86
    Kyokyomon = 87
    Guil_Digitama = 88
    Jyarimon = 89
    Clockmon = 90
    Seadramon_X = 91
    Greymon_X = 92
    Greymon_2010 = 93
    Growmon = 94
    Tyrannomon_1 = 95
    Allomon_X = 96
    Tyrannomon_X = 97
    Geremon = 98
    Gokimon = 99
    Mikemon = 100
    Dogmon_1 = 101
    Gazi_Digitama = 102
    Funbeemon = 103
    Kunemon = 104
    Scumon = 105
    Kuwagamon = 106
    Blossomon = 107
    AtlurKabuterimon_Red = 108
    Gerbemon_1_1 = 109
    GreatKingScumon_1 = 110
    Etemon_1 = 111
    Yanmamon = 112
    Duramon = 113
    Pandamon = 114
    WaruMonzaemon_1 = 115
    Gazimon_X = 116
    ToyAgumon_Black = 117
    Guardromon_Gold = 118
    Omekamon = 119
    DeathMeramon = 120
    BigMamemon = 121
    CatchMamemon = 122
    Giromon_1 = 123
    Zurumon = 124
    Puroromon = 125
    Arkadimon_Baby = 126
    RandomEgg = 127


class MonsterStage(IntEnum):
    """Growth stages, from egg upwards."""

    digitama = 0
    baby = 1
    baby_ii = 2
    child = 3
    adult = 4
    perfect = 5
    ultimate = 6
    armor = 7


@dataclass(frozen=True)
class MonsterRef:
    """Catalogue entry for one monster."""

    filepath: str
    name: MonsterName
    stage: MonsterStage
    lifespan: int
    move_style: str
    speed: int
    bg: str
    evos: tuple[MonsterName, ...]


_STAGE_LIFESPAN = {
    MonsterStage.digitama: 60,
    MonsterStage.baby: 120,
    MonsterStage.baby_ii: 180,
    MonsterStage.child: 240,
    MonsterStage.adult: 300,
    MonsterStage.perfect: 300,
    MonsterStage.ultimate: 300,
}


def _entry(
    name: MonsterName,
    stage: MonsterStage,
    bg: str,
    evos: tuple[MonsterName, ...],
    *,
    sprite: str | None = None,
    lifespan: int | None = None,
    speed: int | None = None,
) -> MonsterRef:
    if sprite is None:
        sprite = name.name
    if lifespan is None:
        lifespan = _STAGE_LIFESPAN[stage]
    if speed is None:
        speed = 0 if stage is MonsterStage.digitama else 4
    return MonsterRef(
        filepath=f"sprites/{stage.name}/{sprite}.bmp",
        name=name,
        stage=stage,
        lifespan=lifespan,
        move_style="walk",
        speed=speed,
        bg=bg,
        evos=tuple(evos),
    )


_N = MonsterName
_S = MonsterStage

_ENTRIES = (
    _entry(_N.Empty, _S.digitama, "None", (), sprite="Agu2006_Digitama", lifespan=0, speed=2),
    _entry(_N.Agu2006_Digitama, _S.digitama, "bg/bg_lakeside.bmp", (_N.Botamon,)),
    _entry(_N.Botamon, _S.baby, "bg/bg_lakeside.bmp", (_N.Koromon,)),
    _entry(_N.Agumon, _S.child, "bg/bg_crag.bmp",
           (_N.Greymon, _N.Meramon, _N.Numemon, _N.Tyrannomon, _N.Devimon)),
    _entry(_N.Greymon, _S.adult, "bg/bg_crag_sunset.bmp", (_N.MetalGreymon,)),
    _entry(_N.Tyrannomon, _S.adult, "bg/bg_crag_sunset.bmp", (_N.Mamemon,)),
    _entry(_N.Devimon, _S.adult, "bg/bg_spooky.bmp", (_N.MetalGreymon,)),
    _entry(_N.Meramon, _S.adult, "bg/bg_digiwasteland.bmp", (_N.Mamemon,)),
    _entry(_N.MetalGreymon, _S.perfect, "bg/bg_crag.bmp", (_N.RandomEgg,)),
    _entry(_N.Mamemon, _S.perfect, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.Monzaemon, _S.perfect, "bg/bg_spooky.bmp", (_N.RandomEgg,)),
    _entry(_N.Betamon, _S.child, "bg/bg_underwater.bmp",
           (_N.Meramon, _N.Numemon, _N.Seadramon, _N.Airdramon, _N.Devimon)),
    _entry(_N.Seadramon, _S.adult, "bg/bg_underwater.bmp", (_N.Mamemon,)),
    _entry(_N.Airdramon, _S.adult, "bg/bg_ellinia.bmp", (_N.MetalGreymon,)),
    _entry(_N.Numemon, _S.adult, "bg/bg_bus_stop.bmp", (_N.Monzaemon,)),
    _entry(_N.Koromon, _S.baby_ii, "bg/bg_lakeside.bmp", (_N.Agumon, _N.Betamon)),
    _entry(_N.Worm_Digitama, _S.digitama, "bg/bg_forest.bmp", (_N.Leafmon,)),
    _entry(_N.Leafmon, _S.baby, "bg/bg_forest.bmp", (_N.Budmon, _N.Pyocomon)),
    _entry(_N.Budmon, _S.baby_ii, "bg/bg_forest.bmp", (_N.Koemon, _N.Lalamon)),
    _entry(_N.Pyocomon, _S.baby_ii, "bg/bg_forest.bmp", (_N.Palmon, _N.Piyomon)),
    _entry(_N.Lalamon, _S.child, "bg/bg_forest.bmp", (_N.KaratsukiNumemon, _N.Sunflowmon)),
    _entry(_N.Piyomon, _S.child, "bg/bg_forest.bmp", (_N.Birdramon, _N.Kiwimon)),
    _entry(_N.Koemon, _S.child, "bg/bg_forest.bmp",
           (_N.Kiwimon, _N.KaratsukiNumemon, _N.Ogremon)),
    _entry(_N.Kiwimon, _S.adult, "bg/bg_forest.bmp", (_N.Delumon,)),
    _entry(_N.Birdramon, _S.adult, "bg/bg_crag_sunset.bmp", (_N.Garudamon,)),
    _entry(_N.KaratsukiNumemon, _S.adult, "bg/bg_forest.bmp", (_N.Piccolomon,)),
    _entry(_N.Ogremon, _S.adult, "bg/bg_forest.bmp", (_N.Piccolomon,)),
    _entry(_N.Sunflowmon, _S.adult, "bg/bg_forest.bmp", (_N.Lilamon, _N.Piccolomon)),
    _entry(_N.Palmon, _S.child, "bg/bg_forest.bmp",
           (_N.RedVegimon, _N.Togemon, _N.Woodmon)),
    _entry(_N.RedVegimon, _S.adult, "bg/bg_forest.bmp", (_N.Gerbemon, _N.Delumon)),
    _entry(_N.Lilamon, _S.perfect, "bg/bg_forest.bmp", (_N.Lotusmon, _N.Minervamon_X)),
    _entry(_N.Piccolomon, _S.perfect, "bg/bg_forest.bmp", (_N.Minervamon_X,)),
    _entry(_N.Garudamon, _S.perfect, "bg/bg_forest.bmp", (_N.RandomEgg,)),
    _entry(_N.Gerbemon, _S.perfect, "bg/bg_bus_stop.bmp", (_N.Pinochimon,)),
    _entry(_N.Togemon, _S.adult, "bg/bg_forest.bmp", (_N.Lilimon,)),
    _entry(_N.Lilimon, _S.perfect, "bg/bg_forest.bmp", (_N.Rosemon, _N.BanchoLilimon)),
    _entry(_N.Jyureimon, _S.perfect, "bg/bg_forest.bmp", (_N.Pinochimon,)),
    _entry(_N.Woodmon, _S.adult, "bg/bg_forest.bmp", (_N.Jyureimon,)),
    _entry(_N.Delumon, _S.perfect, "bg/bg_forest.bmp", (_N.RandomEgg,)),
    _entry(_N.Pinochimon, _S.ultimate, "bg/bg_forest.bmp", (_N.RandomEgg,)),
    _entry(_N.Rosemon, _S.ultimate, "bg/bg_forest.bmp", (_N.RandomEgg,)),
    _entry(_N.BanchoLilimon, _S.ultimate, "bg/bg_forest.bmp", (_N.RandomEgg,)),
    _entry(_N.Lotusmon, _S.ultimate, "bg/bg_forest.bmp", (_N.RandomEgg,)),
    _entry(_N.Minervamon_X, _S.ultimate, "bg/bg_forest.bmp", (_N.RandomEgg,)),
    _entry(_N.Andiramon_Data, _S.perfect, "bg/bg_0.bmp", (_N.RandomEgg,)),
    _entry(_N.Astamon, _S.perfect, "bg/bg_0.bmp", (_N.RandomEgg,)),
    _entry(_N.Mephismon_X, _S.perfect, "bg/bg_0.bmp", (_N.RandomEgg,)),
    _entry(_N.Monzaemon_X, _S.perfect, "bg/bg_0.bmp", (_N.RandomEgg,)),
    _entry(_N.Kuda_Digitama, _S.digitama, "bg/bg_cave.bmp", (_N.Pafumon,)),
    _entry(_N.Cupimon, _S.baby_ii, "bg/bg_snowypeak.bmp", (_N.Morphomon, _N.Terriermon)),
    _entry(_N.Gazimon, _S.child, "bg/bg_digiwasteland.bmp", (_N.Drimogemon, _N.Lekismon)),
    _entry(_N.Lopmon, _S.child, "bg/bg_wasteland2.bmp", (_N.Dogmon, _N.Turuiemon)),
    _entry(_N.Terriermon, _S.child, "bg/bg_forest.bmp", (_N.Galgomon, _N.Leomon_X)),
    _entry(_N.Morphomon, _S.child, "bg/bg_ellinia.bmp",
           (_N.Burgermon_Mama, _N.Kyubimon_Silver)),
    _entry(_N.Drimogemon, _S.adult, "bg/bg_crag.bmp", (_N.Giromon, _N.GreatKingScumon)),
    _entry(_N.Lekismon, _S.adult, "bg/bg_cave.bmp", (_N.Andromon, _N.Astamon)),
    _entry(_N.Dogmon, _S.adult, "bg/bg_bus_stop.bmp", (_N.Etemon, _N.Gerbemon_1)),
    _entry(_N.Galgomon, _S.adult, "bg/bg_wasteland2.bmp", (_N.Rapidmon,)),
    _entry(_N.Leomon_X, _S.adult, "bg/bg_snowypeak.bmp", (_N.Monzaemon_X, _N.Panjyamon_X)),
    _entry(_N.Burgermon_Mama, _S.adult, "bg/bg_beach.bmp",
           (_N.ChoHakkaimon, _N.LadyDevimon)),
    _entry(_N.Kyubimon_Silver, _S.adult, "bg/bg_snowypeak.bmp",
           (_N.Meicrackmon_Vicious, _N.WaruMonzaemon)),
    _entry(_N.Andromon, _S.perfect, "bg/bg_0.bmp", (_N.RandomEgg,)),
    _entry(_N.Giromon, _S.perfect, "bg/bg_wasteland2.bmp", (_N.RandomEgg,)),
    _entry(_N.GreatKingScumon, _S.perfect, "bg/bg_bus_stop.bmp", (_N.RandomEgg,)),
    _entry(_N.Etemon, _S.perfect, "bg/bg_crag_sunset.bmp", (_N.RandomEgg,)),
    _entry(_N.Gerbemon_1, _S.perfect, "bg/bg_bus_stop.bmp", (_N.RandomEgg,),
           sprite="Gerbemon"),
    _entry(_N.Rapidmon, _S.perfect, "bg/bg_wasteland2.bmp", (_N.RandomEgg,)),
    _entry(_N.Panjyamon_X, _S.perfect, "bg/bg_snowypeak_sunset.bmp", (_N.RandomEgg,)),
    _entry(_N.ChoHakkaimon, _S.perfect, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.LadyDevimon, _S.perfect, "bg/bg_spooky.bmp", (_N.RandomEgg,)),
    _entry(_N.Meicrackmon_Vicious, _S.perfect, "bg/bg_ellinia.bmp", (_N.RandomEgg,)),
    _entry(_N.WaruMonzaemon, _S.perfect, "bg/bg_cave.bmp", (_N.RandomEgg,)),
    _entry(_N.Turuiemon, _S.adult, "bg/bg_bus_stop.bmp",
           (_N.Andiramon_Data, _N.Mephismon_X)),
    _entry(_N.Pafumon, _S.baby, "bg/bg_cave.bmp", (_N.Cupimon, _N.Pagumon)),
    _entry(_N.Pagumon, _S.baby_ii, "bg/bg_wasteland2.bmp", (_N.Gazimon, _N.Lopmon)),
    _entry(_N.Guilmon, _S.child, "bg/bg_0.bmp", (_N.Growmon, _N.Tyrannomon_1)),
    _entry(_N.Dracomon_X, _S.child, "bg/bg_0.bmp", (_N.Allomon_X, _N.Tyrannomon_X)),
    _entry(_N.Ryudamon, _S.child, "bg/bg_0.bmp", (_N.Raptordramon, _N.Lavorvomon)),
    _entry(_N.Gigimon, _S.baby_ii, "bg/bg_crag.bmp", (_N.Guilmon, _N.Dracomon_X)),
    _entry(_N.Koromon_1, _S.baby_ii, "bg/bg_crag_sunset.bmp",
           (_N.Agumon_X, _N.ClearAgumon), sprite="Koromon"),
    _entry(_N.Otamamon, _S.child, "bg/bg_underwater.bmp", (_N.Seadramon_X, _N.Shellmon)),
    _entry(_N.Shellmon, _S.adult, "bg/bg_underwater.bmp", (_N.RandomEgg,)),
    _entry(_N.Raptordramon, _S.adult, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.Lavorvomon, _S.adult, "bg/bg_wasteland2.bmp", (_N.RandomEgg,)),
    _entry(_N.Agumon_X, _S.child, "bg/bg_crag_sunset.bmp", (_N.Greymon_X, _N.Greymon_2010)),
    _entry(_N.ClearAgumon, _S.child, "bg/bg_bus_stop.bmp", (_N.Guardromon, _N.Clockmon)),
    _entry(_N.Guardromon, _S.adult, "bg/bg_wasteland2.bmp", (_N.RandomEgg,)),
    _entry(_N.Kyokyomon, _S.baby_ii, "bg/bg_wasteland2.bmp", (_N.Otamamon, _N.Ryudamon)),
    _entry(_N.Guil_Digitama, _S.digitama, "bg/bg_crag.bmp", (_N.Jyarimon,)),
    _entry(_N.Jyarimon, _S.baby, "bg/bg_crag.bmp",
           (_N.Gigimon, _N.Kyokyomon, _N.Koromon_1)),
    _entry(_N.Clockmon, _S.adult, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.Seadramon_X, _S.adult, "bg/bg_underwater.bmp", (_N.RandomEgg,)),
    _entry(_N.Greymon_X, _S.adult, "bg/bg_crag_sunset.bmp", (_N.RandomEgg,)),
    _entry(_N.Greymon_2010, _S.adult, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.Growmon, _S.adult, "bg/bg_0.bmp", (_N.RandomEgg,)),
    _entry(_N.Tyrannomon_1, _S.adult, "bg/bg_0.bmp", (_N.RandomEgg,), sprite="Tyrannomon"),
    _entry(_N.Allomon_X, _S.adult, "bg/bg_crag.bmp", (_N.RandomEgg,)),
    _entry(_N.Tyrannomon_X, _S.adult, "bg/bg_wasteland2.bmp", (_N.RandomEgg,)),
    _entry(_N.Geremon, _S.adult, "bg/bg_cave.bmp", (_N.Etemon_1,)),
    _entry(_N.Gokimon, _S.adult, "bg/bg_bus_stop.bmp", (_N.RandomEgg,)),
    _entry(_N.Mikemon, _S.adult, "bg/bg_spooky.bmp", (_N.RandomEgg,)),
    _entry(_N.Dogmon_1, _S.adult, "bg/bg_bus_stop.bmp",
           (_N.Pandamon, _N.WaruMonzaemon_1), sprite="Dogmon"),
    _entry(_N.Gazi_Digitama, _S.digitama, "bg/bg_digiwasteland.bmp", (_N.Zurumon,)),
    _entry(_N.Funbeemon, _S.child, "bg/bg_wasteland2.bmp",
           (_N.Geremon, _N.Gokimon, _N.Yanmamon)),
    _entry(_N.Kunemon, _S.child, "bg/bg_digiwasteland.bmp", (_N.Kuwagamon, _N.Scumon)),
    _entry(_N.Scumon, _S.adult, "bg/bg_bus_stop.bmp", (_N.Gerbemon_1, _N.GreatKingScumon_1)),
    _entry(_N.Kuwagamon, _S.adult, "bg/bg_ellinia.bmp",
           (_N.Blossomon, _N.AtlurKabuterimon_Red)),
    _entry(_N.Blossomon, _S.perfect, "bg/bg_ellinia.bmp", (_N.RandomEgg,)),
    _entry(_N.AtlurKabuterimon_Red, _S.perfect, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.Gerbemon_1_1, _S.perfect, "bg/bg_bus_stop.bmp", (_N.RandomEgg,),
           sprite="Gerbemon"),
    _entry(_N.GreatKingScumon_1, _S.perfect, "bg/bg_wasteland2.bmp", (_N.RandomEgg,),
           sprite="GreatKingScumon"),
    _entry(_N.Etemon_1, _S.perfect, "bg/bg_snowypeak.bmp", (_N.RandomEgg,), sprite="Etemon"),
    _entry(_N.Yanmamon, _S.adult, "bg/bg_crag.bmp", (_N.Duramon,)),
    _entry(_N.Duramon, _S.perfect, "bg/bg_wasteland2.bmp", (_N.RandomEgg,)),
    _entry(_N.Pandamon, _S.perfect, "bg/bg_snowypeak_sunset.bmp", (_N.RandomEgg,)),
    _entry(_N.WaruMonzaemon_1, _S.perfect, "bg/bg_snowypeak_sunset.bmp", (_N.RandomEgg,),
           sprite="WaruMonzaemon"),
    _entry(_N.Gazimon_X, _S.child, "bg/bg_cave.bmp", (_N.Dogmon_1, _N.Mikemon)),
    _entry(_N.ToyAgumon_Black, _S.child, "bg/bg_snowypeak.bmp",
           (_N.Guardromon_Gold, _N.Omekamon)),
    _entry(_N.Guardromon_Gold, _S.adult, "bg/bg_digiwasteland.bmp",
           (_N.Giromon_1, _N.CatchMamemon)),
    _entry(_N.Omekamon, _S.adult, "bg/bg_wasteland2.bmp", (_N.DeathMeramon, _N.BigMamemon)),
    _entry(_N.DeathMeramon, _S.perfect, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.BigMamemon, _S.perfect, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.CatchMamemon, _S.perfect, "bg/bg_digiwasteland.bmp", (_N.RandomEgg,)),
    _entry(_N.Giromon_1, _S.perfect, "bg/bg_wasteland2.bmp", (_N.RandomEgg,),
           sprite="Giromon"),
    _entry(_N.Zurumon, _S.baby, "bg/bg_wasteland2.bmp", (_N.Arkadimon_Baby, _N.Puroromon)),
    _entry(_N.Puroromon, _S.baby_ii, "bg/bg_crag.bmp", (_N.Kunemon, _N.Funbeemon)),
    _entry(_N.Arkadimon_Baby, _S.baby_ii, "bg/bg_spooky.bmp",
           (_N.Gazimon_X, _N.ToyAgumon_Black)),
    _entry(_N.RandomEgg, _S.adult, "bg/bg_spooky.bmp",
           (_N.Agu2006_Digitama, _N.Worm_Digitama, _N.Kuda_Digitama,
            _N.Guil_Digitama, _N.Gazi_Digitama),
           sprite="Tyrannomon", lifespan=0),
)

MONSTER_DB: dict[MonsterName, MonsterRef] = {ref.name: ref for ref in _ENTRIES}

del _N, _S


def _coerce(name: MonsterName | int | str) -> MonsterName:
    if isinstance(name, MonsterName):
        return name
    if isinstance(name, str):
        try:
            return MonsterName[name]
        except KeyError:
            raise ValueError(f"unknown monster: {name!r}") from None
    return MonsterName(name)


def monster_ref(name: MonsterName | int | str) -> MonsterRef:
    """Return the catalogue entry for a monster given by enum, number or name."""
    return MONSTER_DB[_coerce(name)]


def evolutions(name: MonsterName | int | str) -> tuple[MonsterName, ...]:
    """Return the monsters the given one can evolve into, in catalogue order."""
    return monster_ref(name).evos