"""Currency formatting capability.

Money delegates display to a CurrencyFormatter so that the value type does
not care which locale tables are in use. The default implementation is
backed by Babel's CLDR data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from babel.numbers import format_currency

DEFAULT_LOCALE = "en_GB"


class CurrencyFormatter(ABC):

    @abstractmethod
    def format(self, amount: Decimal, currency: str, locale: str) -> str:
        """Render a major-unit *amount* in *currency* for *locale*."""


class BabelCurrencyFormatter(CurrencyFormatter):
    """Locale-aware formatting via ``babel.numbers.format_currency``.

    Symbol placement, grouping and the decimal separator all come from the
    locale. Babel applies the currency's own fraction digits, so a
    zero-decimal currency such as JPY renders without decimals.
    """

    def format(self, amount: Decimal, currency: str, locale: str) -> str:
        return format_currency(amount, currency, locale=locale)


_default_formatter: CurrencyFormatter = BabelCurrencyFormatter()


def default_formatter() -> CurrencyFormatter:
    return _default_formatter
