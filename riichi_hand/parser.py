from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from riichi_hand.errors import HandParseError, HandParseErrorType
from riichi_hand.logging import get_logger
from riichi_hand.schemas import Hand, HandTile, Suite, Tile, TilePlacement
from riichi_hand.tiles import ANY, CHUN, HAKU, HATSU, NAN, PEI, SHAA, TON

logger = get_logger(__name__)

DIGITS = "0123456789"
SUITE_CHARS = {"m": Suite.manzu, "p": Suite.pinzu, "s": Suite.souzu, "z": Suite.honor}
SPECIAL_TILES = {"E": TON, "S": NAN, "W": SHAA, "N": PEI, "w": HAKU, "g": HATSU, "r": CHUN, "?": ANY}
POSITION_MODIFIERS = {"*", "'"}
GROUP_SEPARATOR = "_"


@dataclass
class _PendingTile:
    suite: Suite | None
    value: int
    placement: TilePlacement = TilePlacement.normal


class HandParser:
    """Builds a Hand from its string notation, e.g. ``123m456p_7*77z``.

    Digits take the suite of the next ``m``/``p``/``s``/``z``, honors can also be
    written as ``ESWN`` (winds), ``wgr`` (dragons) and ``?`` marks a face-down
    tile. ``*`` or ``'`` after a tile rotates it, a second one stacks it on the
    previous rotated tile. ``_`` starts a new group.
    """

    def __init__(self) -> None:
        self._groups: list[list[HandTile]] = [[]]
        self._pending: list[_PendingTile] = []

    @classmethod
    def parse(cls, hand: str) -> Hand:
        try:
            return cls()._parse(hand)
        except HandParseError as exc:
            logger.debug("hand parse failed", hand=hand, position=exc.position, error_type=exc.error_type)
            raise

    def _parse(self, hand: str) -> Hand:
        for position, char in enumerate(hand):
            if char in DIGITS:
                self._pending.append(_PendingTile(None, int(char)))
            elif char in SUITE_CHARS:
                self._assign_suite(SUITE_CHARS[char])
                self._flush(position)
            elif char in SPECIAL_TILES:
                tile = SPECIAL_TILES[char]
                self._pending.append(_PendingTile(tile.suite, tile.value))
            elif char in POSITION_MODIFIERS:
                if not self._pending:
                    raise HandParseError(position, HandParseErrorType.position_modifier_with_no_tile)
                last = self._pending[-1]
                last.placement = last.placement.next()
            elif char == GROUP_SEPARATOR:
                self._flush(position)
                self._groups.append([])
            else:
                raise HandParseError(position, HandParseErrorType.invalid_character)

        self._flush(len(hand))
        return Hand(groups=self._groups)

    def _assign_suite(self, suite: Suite) -> None:
        for pending in self._pending:
            if pending.suite is None:
                pending.suite = suite

    def _flush(self, position: int) -> None:
        pending_tiles, self._pending = self._pending, []
        for pending in pending_tiles:
            if pending.suite is None:
                raise HandParseError(position, HandParseErrorType.unfinished_suite)
            try:
                tile = Tile(suite=pending.suite, value=pending.value)
            except ValidationError as exc:
                raise HandParseError(position, HandParseErrorType.invalid_value) from exc
            self._groups[-1].append(HandTile(tile=tile, placement=pending.placement))
