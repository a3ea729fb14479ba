"""Attribute cast between a stored integer column and Money.

A persistence layer hands the cast the record being read or written, the
attribute key and the raw value. Reading wraps the stored minor-unit integer
in a Money; writing unwraps it back to an integer.
"""

from __future__ import annotations

from decimal import Decimal

from moneycast.domain.exceptions import InvalidArgumentError
from moneycast.domain.model.money import DEFAULT_CURRENCY, Money
from moneycast.domain.model.rounding import RoundingMode
from moneycast.infrastructure.config import Settings

CURRENCY_HOOK = "money_currency"


class CurrencyCast:
    """Cast a minor-unit integer attribute to and from Money.

    The currency of a value read from storage is resolved in order:

      1. a non-empty string attribute on the record named ``currency_attribute``
      2. a ``money_currency()`` method defined on the record's type
      3. the configured default currency
    """

    def __init__(
        self,
        default_currency: str = DEFAULT_CURRENCY,
        rounding_mode: RoundingMode = RoundingMode.HALF_UP,
        currency_attribute: str = "currency",
    ) -> None:
        self._default_currency = default_currency
        self._rounding_mode = rounding_mode
        self._currency_attribute = currency_attribute

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> CurrencyCast:
        return cls(settings.default_currency, settings.rounding_mode, **kwargs)

    # --- Cast interface -------------------------------------------------------

    def get(self, record: object, key: str, value: object) -> Money | None:
        """Materialise a stored value as Money."""
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise InvalidArgumentError(
                f"Stored amount for {key!r} must be an integer, "
                f"got {type(value).__name__}"
            )
        try:
            amount = int(value)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Stored amount for {key!r} is not an integer: {value!r}"
            ) from exc

        return Money(amount, self.resolve_currency(record), self._rounding_mode)

    def set(
        self, record: object, key: str, value: Money | str | float | int | Decimal | None
    ) -> dict[str, int | None]:
        """Return the attribute mapping to persist for *value*."""
        if value is None:
            return {key: None}
        if isinstance(value, Money):
            return {key: value.raw()}

        # Plain numbers and numeric strings are major units
        return {key: Money.from_major(value).raw()}

    # --- Currency resolution --------------------------------------------------

    def resolve_currency(self, record: object) -> str:
        per_record = getattr(record, self._currency_attribute, None)
        if isinstance(per_record, str) and per_record:
            return per_record

        if callable(getattr(type(record), CURRENCY_HOOK, None)):
            return getattr(record, CURRENCY_HOOK)()

        return self._default_currency
