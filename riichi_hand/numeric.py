from __future__ import annotations

from enum import Enum

from riichi_hand.errors import NumericOverflowError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class NumericBase(str, Enum):
    """Arithmetic used to hold point values.

    ``int32`` behaves like a fixed-width signed 32-bit integer and raises
    ``NumericOverflowError`` instead of wrapping. ``bigint`` is unbounded and is
    needed for unlimited scoring with large han counts.
    """

    int32 = "int32"
    bigint = "bigint"

    def _checked(self, value: int) -> int:
        if self is NumericBase.int32 and not INT32_MIN <= value <= INT32_MAX:
            raise NumericOverflowError(value, self.value)
        return value

    def from_int(self, value: int) -> int:
        return self._checked(int(value))

    def add(self, value: int, other: int) -> int:
        return self._checked(value + other)

    def mul(self, value: int, other: int) -> int:
        return self._checked(value * other)

    def div(self, value: int, divisor: int) -> int:
        # truncates toward zero, unlike floor division
        quotient = abs(value) // abs(divisor)
        if (value < 0) != (divisor < 0):
            quotient = -quotient
        return self._checked(quotient)

    def pow(self, value: int, exponent: int) -> int:
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative: {exponent}")
        if self is NumericBase.int32 and abs(value) > 1 and exponent >= 32:
            raise NumericOverflowError(f"{value}**{exponent}", self.value)
        return self._checked(value**exponent)

    def sign(self, value: int) -> int:
        return (value > 0) - (value < 0)


def round_up_to(value: int, divisor: int, numeric: NumericBase = NumericBase.bigint) -> int:
    if numeric.sign(value) > 0:
        return numeric.mul(numeric.div(numeric.add(value, divisor - 1), divisor), divisor)
    return numeric.mul(numeric.div(value, divisor), divisor)


def round_up_points(value: int, numeric: NumericBase = NumericBase.bigint) -> int:
    return round_up_to(value, 100, numeric)
