from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from riichi_hand.schemas import Fu, Han, HandTile, Honbas, Tile


class PointCalculationError(ValueError):
    """Raised by strict point calculation when han, fu or honbas are out of range."""


class InvalidHanError(PointCalculationError):
    def __init__(self, han: Han) -> None:
        self.han = han
        super().__init__(f"Han cannot be less than 1: {han}")


class InvalidFuError(PointCalculationError):
    def __init__(self, fu: Fu) -> None:
        self.fu = fu
        super().__init__(f"Invalid fu value: {fu}")


class InvalidHonbasError(PointCalculationError):
    def __init__(self, honbas: Honbas) -> None:
        self.honbas = honbas
        super().__init__(f"Invalid honba count: {honbas}")


class NumericOverflowError(OverflowError):
    def __init__(self, value: int | str, numeric_base: str) -> None:
        self.value = value
        self.numeric_base = numeric_base
        super().__init__(f"Value {value} does not fit in {numeric_base} points")


class HandParseErrorType(str, Enum):
    invalid_character = "invalid character"
    invalid_value = "invalid tile value"
    unfinished_suite = "tile suite not finished"
    position_modifier_with_no_tile = "position modifier does not have any tile to modify"


class HandParseError(ValueError):
    def __init__(self, position: int, error_type: HandParseErrorType) -> None:
        self.position = position
        self.error_type = error_type
        super().__init__(f"error when parsing hand at position {position}: {error_type.value}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandParseError):
            return NotImplemented
        return (self.position, self.error_type) == (other.position, other.error_type)

    def __hash__(self) -> int:
        return hash((self.position, self.error_type))


class TileSetCreationError(ValueError):
    pass


class TileMissingError(TileSetCreationError):
    def __init__(self, tile: Tile) -> None:
        self.tile = tile
        super().__init__(f"tile foreground missing: {tile}")


class ImageDimensionsError(TileSetCreationError):
    def __init__(self) -> None:
        super().__init__("images (backgrounds and foregrounds) do not have equal dimensions")


class TileImageRetrieveError(ValueError):
    def __init__(self, hand_tile: HandTile, message: str) -> None:
        self.hand_tile = hand_tile
        super().__init__(f"tile {hand_tile.tile} not supported: {message}")
