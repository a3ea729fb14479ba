"""Tests for the MoneyFactory (money() helper)."""

import pytest

from moneycast.application.money_factory import MoneyFactory
from moneycast.domain.exceptions import CurrencyMismatchError
from moneycast.domain.model.money import Money
from moneycast.domain.model.rounding import RoundingMode
from moneycast.infrastructure.config import Settings


class TestMoneyFactory:

    def test_defaults_to_pounds_half_up(self):
        m = MoneyFactory().money(500)
        assert m == Money(500, "GBP", RoundingMode.HALF_UP)

    def test_uses_configured_defaults(self):
        factory = MoneyFactory("USD", RoundingMode.HALF_EVEN)
        assert factory.money(500) == Money(500, "USD", RoundingMode.HALF_EVEN)

    def test_explicit_currency_wins(self):
        assert MoneyFactory("USD").money(500, "EUR").currency == "EUR"

    def test_from_settings(self):
        settings = Settings(default_currency="EUR", rounding_mode=RoundingMode.HALF_ODD)
        factory = MoneyFactory.from_settings(settings)
        assert factory.default_currency == "EUR"
        assert factory.rounding_mode is RoundingMode.HALF_ODD

    def test_from_major(self):
        m = MoneyFactory("USD").from_major("12.99")
        assert m == Money(1299, "USD")

    def test_total(self):
        factory = MoneyFactory("EUR")
        total = factory.total([factory.money(100), factory.money(150)])
        assert total == Money(250, "EUR")

    def test_total_of_nothing(self):
        assert MoneyFactory("JPY").total([]) == Money(0, "JPY")

    def test_total_rejects_foreign_currency(self):
        factory = MoneyFactory("EUR")
        with pytest.raises(CurrencyMismatchError):
            factory.total([factory.money(100), Money(100, "GBP")])
