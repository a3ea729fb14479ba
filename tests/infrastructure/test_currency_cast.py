"""Tests for the integer-column ⇄ Money cast.

Uses plain in-memory record objects, no database.
"""

import pytest

from moneycast.domain.exceptions import InvalidArgumentError
from moneycast.domain.model.money import Money
from moneycast.domain.model.rounding import RoundingMode
from moneycast.infrastructure.config import Settings
from moneycast.infrastructure.persistence.currency_cast import CurrencyCast
from tests.fakes import BareRecord, EuroRecord, EuroRecordWithColumn, PricedRecord


class TestCurrencyCastGet:

    def test_none_stays_none(self):
        assert CurrencyCast().get(BareRecord(), "price", None) is None

    def test_wraps_stored_integer(self):
        cast = CurrencyCast(rounding_mode=RoundingMode.HALF_EVEN)
        m = cast.get(BareRecord(), "price", 1250)
        assert m == Money(1250, "GBP", RoundingMode.HALF_EVEN)

    def test_accepts_integer_string(self):
        assert CurrencyCast().get(BareRecord(), "price", "1250").raw() == 1250

    @pytest.mark.parametrize("stored", ["12.50", 12.5, True])
    def test_non_integer_stored_value_rejected(self, stored):
        with pytest.raises(InvalidArgumentError):
            CurrencyCast().get(BareRecord(), "price", stored)


class TestCurrencyResolution:

    def test_record_column_wins(self):
        m = CurrencyCast().get(PricedRecord(currency="USD"), "price", 100)
        assert m.currency == "USD"

    def test_record_column_wins_over_type_hook(self):
        record = EuroRecordWithColumn(currency="USD")
        assert CurrencyCast().resolve_currency(record) == "USD"

    def test_type_hook_used_when_column_empty(self):
        assert CurrencyCast().resolve_currency(EuroRecordWithColumn(currency="")) == "EUR"
        assert CurrencyCast().resolve_currency(EuroRecord()) == "EUR"

    def test_falls_back_to_configured_default(self):
        cast = CurrencyCast(default_currency="JPY")
        assert cast.resolve_currency(BareRecord()) == "JPY"
        assert cast.resolve_currency(PricedRecord(currency=None)) == "JPY"

    def test_custom_column_name(self):
        class Invoice:
            billing_currency = "CHF"

        cast = CurrencyCast(currency_attribute="billing_currency")
        assert cast.resolve_currency(Invoice()) == "CHF"

    def test_from_settings(self):
        cast = CurrencyCast.from_settings(
            Settings(default_currency="USD", rounding_mode=RoundingMode.HALF_DOWN)
        )
        m = cast.get(BareRecord(), "price", 5)
        assert m == Money(5, "USD", RoundingMode.HALF_DOWN)


class TestCurrencyCastSet:

    def test_none(self):
        assert CurrencyCast().set(BareRecord(), "price", None) == {"price": None}

    def test_money_persists_raw(self):
        assert CurrencyCast().set(BareRecord(), "price", Money(-450)) == {"price": -450}

    @pytest.mark.parametrize(
        "value, expected",
        [(12.5, 1250), ("19.99", 1999), (3, 300), (0.125, 13)],
    )
    def test_plain_numbers_are_major_units(self, value, expected):
        assert CurrencyCast().set(BareRecord(), "price", value) == {"price": expected}

    def test_garbage_rejected(self):
        with pytest.raises(InvalidArgumentError):
            CurrencyCast().set(BareRecord(), "price", "twelve")

    def test_round_trip(self):
        cast = CurrencyCast()
        record = PricedRecord(currency="USD")
        original = Money(9999, "USD")
        stored = cast.set(record, "price", original)["price"]
        assert cast.get(record, "price", stored) == original
