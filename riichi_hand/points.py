from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from riichi_hand.config import settings
from riichi_hand.errors import InvalidFuError, InvalidHanError, InvalidHonbasError
from riichi_hand.logging import get_logger
from riichi_hand.numeric import NumericBase, round_up_points
from riichi_hand.schemas import (
    CalculatedMode,
    Fu,
    Han,
    Honbas,
    LimitedMode,
    PointsCalculationMode,
    PointsMode,
)

logger = get_logger(__name__)

MANGAN_BASE_POINTS = 2000
HANEMAN_BASE_POINTS = 3000
BAIMAN_BASE_POINTS = 4000
SANBAIMAN_BASE_POINTS = 6000
YAKUMAN_BASE_POINTS = 8000

# (lowest han, highest han or None when open-ended, base points)
TIER_TABLE: tuple[tuple[int, int | None, int], ...] = (
    (5, 5, MANGAN_BASE_POINTS),
    (6, 7, HANEMAN_BASE_POINTS),
    (8, 10, BAIMAN_BASE_POINTS),
    (11, 12, SANBAIMAN_BASE_POINTS),
    (13, None, YAKUMAN_BASE_POINTS),
)

# 4 han 30 fu (1920) stays below; a ko ron of 7900 or more counts as mangan
MANGAN_THRESHOLD = 7900 // 4

# base points are below 1 for any fu that fits in 32 bits past this shift
MIN_USABLE_POWER = -32

VALID_FU = frozenset({20, 25, 30, 40, 50, 60, 70, 80, 90, 100, 110})
NO_TSUMO = frozenset({(1, 20), (1, 25), (2, 25)})
NO_RON = frozenset({(1, 20), (1, 25), (2, 20), (3, 20), (4, 20)})

TSUMO_HONBA_POINTS = 100
RON_HONBA_POINTS = 300

HanLike = Han | int
FuLike = Fu | int
HonbasLike = Honbas | int


def tier_base_points(han: int) -> int | None:
    for lowest, highest, base_points in TIER_TABLE:
        if han >= lowest and (highest is None or han <= highest):
            return base_points
    return None


def formula_base_points(han: int, fu: int, numeric: NumericBase) -> int:
    power = han + 2
    if power > 0:
        return numeric.mul(numeric.pow(numeric.from_int(2), power), fu)

    divisor = 2 ** -max(power, MIN_USABLE_POWER)
    if numeric.sign(fu) > 0:
        value = (fu + divisor - 1) // divisor
    else:
        value = -(-fu // divisor)
    return numeric.from_int(value)


def _numeric_or_default(numeric: NumericBase | None) -> NumericBase:
    return settings.numeric_base if numeric is None else NumericBase(numeric)


class Points(BaseModel):
    """Scoring points derived from base points.

    Base points are fu × 2^(2 + han), replaced by a fixed value from mangan
    upwards. Payments multiply them by 1, 2, 4 or 6 and round up to the next
    100:

    * non-dealer tsumo: base × 1 from each non-dealer, base × 2 from the dealer
    * non-dealer ron: base × 4 from the discarding player
    * dealer tsumo: base × 2 from everyone
    * dealer ron: base × 6 from the discarding player

    Honbas add 100 per stick to each tsumo payment and 300 to a ron payment.
    """

    model_config = ConfigDict(frozen=True)

    base_points: int
    honba_count: Honbas = Field(default_factory=Honbas)
    mode: PointsMode
    numeric: NumericBase = Field(default_factory=lambda: settings.numeric_base)

    @classmethod
    def from_calculated(
        cls,
        calculation_mode: PointsCalculationMode | str,
        han: HanLike,
        fu: FuLike,
        honbas: HonbasLike = Honbas.ZERO,
        numeric: NumericBase | None = None,
    ) -> Points:
        calculation_mode = PointsCalculationMode(calculation_mode)
        han = Han.model_validate(han)
        fu = Fu.model_validate(fu)
        honbas = Honbas.model_validate(honbas)
        numeric = _numeric_or_default(numeric)

        if calculation_mode is PointsCalculationMode.default:
            if han.get() < 1:
                raise InvalidHanError(han)
            if fu.get() not in VALID_FU:
                raise InvalidFuError(fu)
            if honbas.get() < 0:
                raise InvalidHonbasError(honbas)

        limited = calculation_mode is not PointsCalculationMode.unlimited
        if limited:
            base_points = tier_base_points(han.get())
            if base_points is not None:
                logger.debug("points limited by han", han=han.get(), base_points=base_points)
                return cls.new_limited(base_points, honbas, numeric)

        base_points = formula_base_points(han.get(), fu.get(), numeric)
        if limited and base_points >= MANGAN_THRESHOLD:
            logger.debug("points rounded up to mangan", han=han.get(), fu=fu.get(), base_points=base_points)
            return cls.mangan(honbas, numeric)

        strict = calculation_mode is PointsCalculationMode.default
        has_tsumo = not strict or (han.get(), fu.get()) not in NO_TSUMO
        has_ron = not strict or (han.get(), fu.get()) not in NO_RON
        logger.debug(
            "points calculated",
            mode=calculation_mode,
            han=han.get(),
            fu=fu.get(),
            base_points=base_points,
            has_tsumo=has_tsumo,
            has_ron=has_ron,
        )
        return cls.new_calculated(base_points, has_tsumo, has_ron, honbas, numeric)

    @classmethod
    def new_limited(
        cls,
        base_points: int,
        honbas: HonbasLike = Honbas.ZERO,
        numeric: NumericBase | None = None,
    ) -> Points:
        numeric = _numeric_or_default(numeric)
        return cls(
            base_points=numeric.from_int(base_points),
            honba_count=honbas,
            mode=LimitedMode(),
            numeric=numeric,
        )

    @classmethod
    def new_calculated(
        cls,
        base_points: int,
        has_tsumo: bool,
        has_ron: bool,
        honbas: HonbasLike = Honbas.ZERO,
        numeric: NumericBase | None = None,
    ) -> Points:
        numeric = _numeric_or_default(numeric)
        return cls(
            base_points=numeric.from_int(base_points),
            honba_count=honbas,
            mode=CalculatedMode(has_tsumo=has_tsumo, has_ron=has_ron),
            numeric=numeric,
        )

    @classmethod
    def mangan(cls, honbas: HonbasLike = Honbas.ZERO, numeric: NumericBase | None = None) -> Points:
        return cls.new_limited(MANGAN_BASE_POINTS, honbas, numeric)

    @classmethod
    def haneman(cls, honbas: HonbasLike = Honbas.ZERO, numeric: NumericBase | None = None) -> Points:
        return cls.new_limited(HANEMAN_BASE_POINTS, honbas, numeric)

    @classmethod
    def baiman(cls, honbas: HonbasLike = Honbas.ZERO, numeric: NumericBase | None = None) -> Points:
        return cls.new_limited(BAIMAN_BASE_POINTS, honbas, numeric)

    @classmethod
    def sanbaiman(cls, honbas: HonbasLike = Honbas.ZERO, numeric: NumericBase | None = None) -> Points:
        return cls.new_limited(SANBAIMAN_BASE_POINTS, honbas, numeric)

    @classmethod
    def yakuman(cls, honbas: HonbasLike = Honbas.ZERO, numeric: NumericBase | None = None) -> Points:
        return cls.new_limited(YAKUMAN_BASE_POINTS, honbas, numeric)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Points):
            return NotImplemented
        return self._value_key() == other._value_key()

    def __hash__(self) -> int:
        return hash(self._value_key())

    def _value_key(self) -> tuple:
        # the numeric base only decides how arithmetic is checked
        return self.base_points, self.honba_count, self.mode

    def honbas(self) -> Honbas:
        return self.honba_count

    def is_limited(self) -> bool:
        return isinstance(self.mode, LimitedMode)

    def is_calculated(self) -> bool:
        return isinstance(self.mode, CalculatedMode)

    def oya_tsumo(self) -> int | None:
        if not self.mode.has_tsumo:
            return None
        return self._payment(2, self._tsumo_honba_points())

    def oya_ron(self) -> int | None:
        if not self.mode.has_ron:
            return None
        return self._payment(6, self._ron_honba_points())

    def ko_tsumo(self) -> tuple[int, int] | None:
        """Returns (paid by each non-dealer, paid by the dealer)."""
        if not self.mode.has_tsumo:
            return None
        honba_points = self._tsumo_honba_points()
        return self._payment(1, honba_points), self._payment(2, honba_points)

    def ko_ron(self) -> int | None:
        if not self.mode.has_ron:
            return None
        return self._payment(4, self._ron_honba_points())

    def _payment(self, multiplier: int, honba_points: int) -> int:
        rounded = round_up_points(self.numeric.mul(self.base_points, multiplier), self.numeric)
        return self.numeric.add(rounded, honba_points)

    def _tsumo_honba_points(self) -> int:
        return self.numeric.mul(self.honba_count.get(), TSUMO_HONBA_POINTS)

    def _ron_honba_points(self) -> int:
        return self.numeric.mul(self.honba_count.get(), RON_HONBA_POINTS)
