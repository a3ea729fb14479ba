"""The Money value object.

Money is immutable and compared by value, not identity. The amount is held
as an integer number of minor units (pence, cents) so that no floating-point
drift can ever be stored; fractions only exist transiently inside
multiply/divide and are collapsed with the instance's rounding mode.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from decimal import Decimal
from numbers import Real

from moneycast.domain.exceptions import (
    CurrencyMismatchError,
    InvalidArgumentError,
    InvalidElementTypeError,
)
from moneycast.domain.model.rounding import (
    RoundingMode,
    round_decimal,
    round_float,
    round_ratio,
)
from moneycast.domain.service.currency_formatter import (
    DEFAULT_LOCALE,
    CurrencyFormatter,
    default_formatter,
)

DEFAULT_CURRENCY = "GBP"

# value() assumes two-decimal currencies
MINOR_UNITS_PER_MAJOR = 100
DISPLAY_PLACES = 2

# signed 64-bit, the range of a BIGINT column
MIN_AMOUNT = -(2**63)
MAX_AMOUNT = 2**63 - 1


@dataclass(frozen=True)
class Money:
    """Monetary amount in minor units, tagged with currency and rounding mode."""

    amount: int
    currency: str = DEFAULT_CURRENCY
    rounding_mode: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidArgumentError(
                f"Money amount must be an integer number of minor units, "
                f"got {type(self.amount).__name__}"
            )
        if not MIN_AMOUNT <= self.amount <= MAX_AMOUNT:
            raise InvalidArgumentError(
                f"Money amount {self.amount} is outside the signed 64-bit range"
            )
        if not isinstance(self.currency, str):
            raise InvalidArgumentError(
                f"Currency must be a string code, got {type(self.currency).__name__}"
            )
        if not isinstance(self.rounding_mode, RoundingMode):
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(
                self, "rounding_mode", RoundingMode.parse(self.rounding_mode)
            )

    # --- Accessors ------------------------------------------------------------

    def raw(self) -> int:
        """The stored minor-unit amount, for persistence."""
        return self.amount

    def value(self) -> Decimal:
        """The amount in major units, rounded to two places."""
        major = Decimal(self.amount).scaleb(-DISPLAY_PLACES)
        return round_decimal(major, self.rounding_mode, DISPLAY_PLACES)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_negative(self) -> bool:
        return self.amount < 0

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return self._with_amount(self.amount + other.amount)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return self._with_amount(self.amount - other.amount)

    def multiply(self, multiplier: float | int) -> Money:
        """Scale the amount, rounding the product with this value's mode.

        Integer multipliers are exact. Other multipliers go through float
        arithmetic, which cannot represent every amount above 2**53 exactly.
        """
        _require_finite_real(multiplier, "Multiplier")
        if multiplier < 0:
            raise InvalidArgumentError("Multiplier must be non-negative.")

        if isinstance(multiplier, int):
            return self._with_amount(self.amount * multiplier)

        try:
            result = float(self.amount) * _as_float(multiplier, "Multiplier")
        except OverflowError:
            raise InvalidArgumentError("Multiplied amount is too large.") from None
        return self._with_amount(round_float(result, self.rounding_mode))

    def divide(self, divisor: float | int) -> Money:
        """Split the amount, rounding the quotient with this value's mode.

        Integer divisors are exact; others go through float arithmetic.
        """
        _require_finite_real(divisor, "Divisor")
        if divisor <= 0:
            raise InvalidArgumentError("Divisor must be greater than zero.")

        if isinstance(divisor, int):
            return self._with_amount(round_ratio(self.amount, divisor, self.rounding_mode))

        try:
            result = float(self.amount) / _as_float(divisor, "Divisor")
        except (OverflowError, ZeroDivisionError):
            raise InvalidArgumentError(f"Cannot divide by {divisor!r}.") from None
        return self._with_amount(round_float(result, self.rounding_mode))

    def discount(self, percent: int) -> Money:
        """Take *percent* off the amount.

        Percentages above 100 give a negative multiplier, which multiply()
        rejects.
        """
        if isinstance(percent, bool) or not isinstance(percent, int):
            raise InvalidArgumentError(
                f"Discount percent must be an integer, got {type(percent).__name__}"
            )
        if percent < 0:
            raise InvalidArgumentError("Cannot discount by a negative value.")
        if percent == 0:
            return replace(self)

        try:
            multiplier = 1 - percent / 100
        except OverflowError:
            raise InvalidArgumentError("Multiplier must be non-negative.") from None
        return self.multiply(multiplier)

    # --- Aggregation ----------------------------------------------------------

    @classmethod
    def sum(
        cls,
        values: Iterable[Money],
        currency: str = DEFAULT_CURRENCY,
        rounding_mode: RoundingMode = RoundingMode.HALF_UP,
    ) -> Money:
        """Total a collection of Money values that are all in *currency*.

        The expected currency is given up front rather than taken from the
        first element, so an empty collection sums to zero in *currency*.
        """
        total = 0
        for money in values:
            if not isinstance(money, cls):
                raise InvalidElementTypeError(money)
            if money.currency != currency:
                raise CurrencyMismatchError(currency, money.currency)
            total += money.amount

        return cls(total, currency, rounding_mode)

    # --- Factory --------------------------------------------------------------

    @classmethod
    def from_major(
        cls,
        value: str | float | int | Decimal,
        currency: str = DEFAULT_CURRENCY,
        rounding_mode: RoundingMode = RoundingMode.HALF_UP,
    ) -> Money:
        """Build Money from a major-unit amount such as ``12.99``.

        This is the canonical major-to-minor mapping: the value times 100,
        rounded half away from zero, whatever *rounding_mode* is attached.
        """
        if isinstance(value, bool) or not isinstance(value, (str, Real, Decimal)):
            raise InvalidArgumentError(f"Invalid money amount: {value!r}")
        try:
            number = float(value)
        except (ValueError, OverflowError) as exc:
            raise InvalidArgumentError(f"Invalid money amount: {value!r}") from exc

        minor = round_float(number * MINOR_UNITS_PER_MAJOR, RoundingMode.HALF_UP)
        return cls(minor, currency, rounding_mode)

    # --- Operators ------------------------------------------------------------

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, multiplier: float | int) -> Money:
        if isinstance(multiplier, Money):
            return NotImplemented
        return self.multiply(multiplier)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float | int) -> Money:
        if isinstance(divisor, Money):
            return NotImplemented
        return self.divide(divisor)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def formatted(
        self,
        locale: str = DEFAULT_LOCALE,
        formatter: CurrencyFormatter | None = None,
    ) -> str:
        """Render value() as a currency string for *locale*."""
        formatter = formatter or default_formatter()
        return formatter.format(self.value(), self.currency, locale)

    def __str__(self) -> str:
        return self.formatted()

    # --- Internal helpers -----------------------------------------------------

    def _with_amount(self, amount: int) -> Money:
        return Money(amount, self.currency, self.rounding_mode)

    def _assert_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise InvalidElementTypeError(other)
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)


def _require_finite_real(number: object, label: str) -> None:
    if isinstance(number, bool) or not isinstance(number, (Real, Decimal)):
        raise InvalidArgumentError(
            f"{label} must be a number, got {type(number).__name__}"
        )
    if isinstance(number, int):
        return
    if isinstance(number, Decimal):
        finite = number.is_finite()
    else:
        try:
            finite = math.isfinite(number)
        except OverflowError:
            finite = False
    if not finite:
        raise InvalidArgumentError(f"{label} must be finite, got {number!r}")


def _as_float(number: float | Decimal, label: str) -> float:
    try:
        return float(number)
    except OverflowError:
        raise InvalidArgumentError(f"{label} {number!r} is too large") from None
