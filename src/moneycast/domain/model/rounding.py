"""Rounding policies for collapsing fractional amounts.

Every policy rounds to the nearest neighbour; they only differ in how an
exact tie (``x.5``) is broken.
"""

from __future__ import annotations

import math
from decimal import (
    ROUND_DOWN,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Decimal,
    localcontext,
)
from enum import Enum

from moneycast.domain.exceptions import InvalidArgumentError


class RoundingMode(Enum):
    HALF_UP = "half_up"  # ties away from zero
    HALF_DOWN = "half_down"  # ties toward zero
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"

    @classmethod
    def parse(cls, raw: str | RoundingMode) -> RoundingMode:
        """Accept an enum member, its value or its name (any case)."""
        if isinstance(raw, RoundingMode):
            return raw
        key = str(raw).strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown rounding mode {raw!r}; expected one of "
                f"{', '.join(m.value for m in cls)}"
            ) from None


_DECIMAL_ROUNDING = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


def round_decimal(value: Decimal, mode: RoundingMode, places: int = 0) -> Decimal:
    """Round *value* to *places* decimal places using *mode*."""
    exponent = Decimal(1).scaleb(-places)

    with localcontext() as ctx:
        # quantize fails once the result has more digits than the context
        ctx.prec = max(ctx.prec, value.adjusted() + places + 3)

        if mode is not RoundingMode.HALF_ODD:
            return value.quantize(exponent, rounding=_DECIMAL_ROUNDING[mode])

        # decimal has no half-odd rounding; only exact ties need special handling
        truncated = value.quantize(exponent, rounding=ROUND_DOWN)
        if abs(value - truncated) != exponent / 2:
            return value.quantize(exponent, rounding=ROUND_HALF_UP)
        if truncated.scaleb(places) % 2 != 0:
            return truncated
        return truncated + exponent.copy_sign(value)


def round_ratio(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """Round ``numerator / denominator`` to an integer without leaving integers."""
    if denominator <= 0:
        raise InvalidArgumentError("Denominator must be greater than zero.")

    quotient, remainder = divmod(abs(numerator), denominator)
    twice = 2 * remainder
    if twice > denominator or (twice == denominator and _tie_rounds_away(quotient, mode)):
        quotient += 1
    return quotient if numerator >= 0 else -quotient


def _tie_rounds_away(truncated: int, mode: RoundingMode) -> bool:
    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return False
    if mode is RoundingMode.HALF_EVEN:
        return truncated % 2 == 1
    return truncated % 2 == 0


def round_float(value: float, mode: RoundingMode) -> int:
    """Round a floating-point intermediate result to an integer.

    The float is read through its shortest repr so that ``94.5`` produced
    by float arithmetic is treated as a tie rather than as the nearest
    binary fraction.
    """
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Cannot round non-finite value {value!r}")
    return int(round_decimal(Decimal(repr(value)), mode))
