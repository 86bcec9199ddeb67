from __future__ import annotations

from riichi_hand.schemas import Suite, Tile

# Manzu
AKADORA_MAN = Tile(suite=Suite.manzu, value=0)
II_MAN = Tile(suite=Suite.manzu, value=1)
RYAN_MAN = Tile(suite=Suite.manzu, value=2)
SAN_MAN = Tile(suite=Suite.manzu, value=3)
SUU_MAN = Tile(suite=Suite.manzu, value=4)
UU_MAN = Tile(suite=Suite.manzu, value=5)
ROU_MAN = Tile(suite=Suite.manzu, value=6)
CHII_MAN = Tile(suite=Suite.manzu, value=7)
PAA_MAN = Tile(suite=Suite.manzu, value=8)
KYUU_MAN = Tile(suite=Suite.manzu, value=9)

# Pinzu
AKADORA_PIN = Tile(suite=Suite.pinzu, value=0)
II_PIN = Tile(suite=Suite.pinzu, value=1)
RYAN_PIN = Tile(suite=Suite.pinzu, value=2)
SAN_PIN = Tile(suite=Suite.pinzu, value=3)
SUU_PIN = Tile(suite=Suite.pinzu, value=4)
UU_PIN = Tile(suite=Suite.pinzu, value=5)
ROU_PIN = Tile(suite=Suite.pinzu, value=6)
CHII_PIN = Tile(suite=Suite.pinzu, value=7)
PAA_PIN = Tile(suite=Suite.pinzu, value=8)
KYUU_PIN = Tile(suite=Suite.pinzu, value=9)

# Souzu
AKADORA_SOU = Tile(suite=Suite.souzu, value=0)
II_SOU = Tile(suite=Suite.souzu, value=1)
RYAN_SOU = Tile(suite=Suite.souzu, value=2)
SAN_SOU = Tile(suite=Suite.souzu, value=3)
SUU_SOU = Tile(suite=Suite.souzu, value=4)
UU_SOU = Tile(suite=Suite.souzu, value=5)
ROU_SOU = Tile(suite=Suite.souzu, value=6)
CHII_SOU = Tile(suite=Suite.souzu, value=7)
PAA_SOU = Tile(suite=Suite.souzu, value=8)
KYUU_SOU = Tile(suite=Suite.souzu, value=9)

# Honors
TON = Tile(suite=Suite.honor, value=1)
NAN = Tile(suite=Suite.honor, value=2)
SHAA = Tile(suite=Suite.honor, value=3)
PEI = Tile(suite=Suite.honor, value=4)
HAKU = Tile(suite=Suite.honor, value=5)
HATSU = Tile(suite=Suite.honor, value=6)
CHUN = Tile(suite=Suite.honor, value=7)

ANY = Tile(suite=Suite.any, value=0)

ALL_TILES: tuple[Tile, ...] = (
    AKADORA_MAN,
    II_MAN,
    RYAN_MAN,
    SAN_MAN,
    SUU_MAN,
    UU_MAN,
    ROU_MAN,
    CHII_MAN,
    PAA_MAN,
    KYUU_MAN,
    AKADORA_PIN,
    II_PIN,
    RYAN_PIN,
    SAN_PIN,
    SUU_PIN,
    UU_PIN,
    ROU_PIN,
    CHII_PIN,
    PAA_PIN,
    KYUU_PIN,
    AKADORA_SOU,
    II_SOU,
    RYAN_SOU,
    SAN_SOU,
    SUU_SOU,
    UU_SOU,
    ROU_SOU,
    CHII_SOU,
    PAA_SOU,
    KYUU_SOU,
    TON,
    NAN,
    SHAA,
    PEI,
    HAKU,
    HATSU,
    CHUN,
    ANY,
)
