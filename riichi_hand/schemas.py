from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from functools import total_ordering
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from riichi_hand.config import settings

Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


@total_ordering
class _Count:
    unit: ClassVar[str]

    def get(self) -> int:
        return self.root

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root < other.root

    def __int__(self) -> int:
        return self.root

    def __str__(self) -> str:
        return f"{self.root} {self.unit}"


class Han(_Count, RootModel[Int32]):
    """Number of han (big) points."""

    model_config = ConfigDict(frozen=True)
    unit: ClassVar[str] = "han"


class Fu(_Count, RootModel[Int32]):
    """Number of fu (small) points."""

    model_config = ConfigDict(frozen=True)
    unit: ClassVar[str] = "fu"


class Honbas(_Count, RootModel[Int32]):
    """Number of honbas (counter sticks)."""

    model_config = ConfigDict(frozen=True)
    unit: ClassVar[str] = "honbas"
    ZERO: ClassVar[Honbas]

    root: Int32 = 0


Honbas.ZERO = Honbas(0)


class PointsCalculationMode(str, Enum):
    default = "default"
    loose = "loose"
    unlimited = "unlimited"


class CalculatedMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["calculated"] = "calculated"
    has_tsumo: bool
    has_ron: bool


class LimitedMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["limited"] = "limited"

    @property
    def has_tsumo(self) -> bool:
        return True

    @property
    def has_ron(self) -> bool:
        return True


PointsMode = Annotated[Union[CalculatedMode, LimitedMode], Field(discriminator="kind")]


class Suite(str, Enum):
    manzu = "Manzu"
    pinzu = "Pinzu"
    souzu = "Souzu"
    honor = "Honor"
    any = "Any"


TILE_NUMERALS = ("Akadora", "Ii", "Ryan", "San", "Suu", "Uu", "Rou", "Chii", "Paa", "Kyuu")
HONOR_NAMES = ("Ton", "Nan", "Shaa", "Pei", "Haku", "Hatsu", "Chun")
HONOR_SYMBOLS = "ESWNwgr"
SUITE_LETTERS = {Suite.manzu: "m", Suite.pinzu: "p", Suite.souzu: "s"}
SUITE_NAME_SUFFIXES = {Suite.manzu: "man", Suite.pinzu: "pin", Suite.souzu: "sou"}
VALID_TILE_VALUES = {
    Suite.manzu: range(0, 10),
    Suite.pinzu: range(0, 10),
    Suite.souzu: range(0, 10),
    Suite.honor: range(1, 8),
    Suite.any: range(0, 1),
}


class Tile(BaseModel):
    model_config = ConfigDict(frozen=True)

    suite: Suite
    value: int

    @model_validator(mode="after")
    def _check_value(self) -> Tile:
        if self.value not in VALID_TILE_VALUES[self.suite]:
            raise ValueError(f"invalid value: {self.value} for suite: {self.suite.value}")
        return self

    @property
    def name(self) -> str:
        if self.suite in SUITE_NAME_SUFFIXES:
            return f"{TILE_NUMERALS[self.value]} {SUITE_NAME_SUFFIXES[self.suite]}"
        if self.suite is Suite.honor:
            return HONOR_NAMES[self.value - 1]
        return "Any"

    @property
    def notation(self) -> str:
        if self.suite in SUITE_LETTERS:
            return f"{self.value}{SUITE_LETTERS[self.suite]}"
        if self.suite is Suite.honor:
            return HONOR_SYMBOLS[self.value - 1]
        return "?"

    def __str__(self) -> str:
        return self.name


class TilePlacement(str, Enum):
    normal = "normal"
    rotated = "rotated"
    rotated_and_shifted = "rotated_and_shifted"

    def next(self) -> TilePlacement:
        order = list(TilePlacement)
        return order[(order.index(self) + 1) % len(order)]


class HandTile(BaseModel):
    model_config = ConfigDict(frozen=True)

    tile: Tile
    placement: TilePlacement = TilePlacement.normal


class Hand(BaseModel):
    groups: list[list[HandTile]] = Field(default_factory=list)

    def hand_tiles(self) -> Iterator[HandTile]:
        for group in self.groups:
            yield from group

    def tiles(self) -> Iterator[Tile]:
        for hand_tile in self.hand_tiles():
            yield hand_tile.tile


class RenderOptions(BaseModel):
    """Gaps are expressed as ratios of the tile width."""

    tile_gap: float = Field(default_factory=lambda: settings.tile_gap, ge=0.0)
    group_gap: float = Field(default_factory=lambda: settings.group_gap, ge=0.0)
