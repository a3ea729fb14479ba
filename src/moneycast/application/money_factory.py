"""Application service: build Money values with configured defaults.

This is the ``money()`` helper: callers that only know an amount get a
Money in the application's default currency and rounding mode.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

from moneycast.domain.model.money import DEFAULT_CURRENCY, Money
from moneycast.domain.model.rounding import RoundingMode

if TYPE_CHECKING:
    from moneycast.infrastructure.config import Settings


class MoneyFactory:

    def __init__(
        self,
        default_currency: str = DEFAULT_CURRENCY,
        rounding_mode: RoundingMode = RoundingMode.HALF_UP,
    ) -> None:
        self._default_currency = default_currency
        self._rounding_mode = rounding_mode

    @classmethod
    def from_settings(cls, settings: Settings) -> MoneyFactory:
        return cls(settings.default_currency, settings.rounding_mode)

    @property
    def default_currency(self) -> str:
        return self._default_currency

    @property
    def rounding_mode(self) -> RoundingMode:
        return self._rounding_mode

    def money(self, amount: int, currency: str | None = None) -> Money:
        """Wrap a minor-unit amount."""
        return Money(amount, currency or self._default_currency, self._rounding_mode)

    def from_major(
        self, value: str | float | int | Decimal, currency: str | None = None
    ) -> Money:
        """Wrap a major-unit amount such as ``"12.99"``."""
        return Money.from_major(
            value, currency or self._default_currency, self._rounding_mode
        )

    def total(self, values: Iterable[Money], currency: str | None = None) -> Money:
        return Money.sum(values, currency or self._default_currency, self._rounding_mode)
