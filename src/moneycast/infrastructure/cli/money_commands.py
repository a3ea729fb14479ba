"""CLI commands for Money arithmetic, aggregation and formatting.

Amount arguments are major units ("15.00"); ``format --minor`` takes a raw
minor-unit integer instead.
"""

from __future__ import annotations

import functools
from collections.abc import Callable

import click
from babel.core import UnknownLocaleError

from moneycast.application.money_factory import MoneyFactory
from moneycast.domain.exceptions import InvalidArgumentError, MoneyException
from moneycast.domain.model.money import Money
from moneycast.domain.model.rounding import RoundingMode
from moneycast.infrastructure.config import Settings

_ROUNDING_CHOICES = [mode.value for mode in RoundingMode]


def money_options(command: Callable) -> Callable:
    """Options shared by every money command."""

    @click.option("--currency", default=None, help="Currency code (default from config).")
    @click.option(
        "--rounding",
        type=click.Choice(_ROUNDING_CHOICES, case_sensitive=False),
        default=None,
        help="Rounding mode (default from config).",
    )
    @click.option("--locale", default=None, help="Display locale (default from config).")
    @click.pass_obj
    @functools.wraps(command)
    def wrapper(settings: Settings, currency, rounding, locale, **kwargs):
        factory = MoneyFactory(
            (currency or settings.default_currency).upper(),
            RoundingMode.parse(rounding) if rounding else settings.rounding_mode,
        )
        return command(factory, locale or settings.locale, **kwargs)

    return wrapper


def _parse_amount(factory: MoneyFactory, raw: str, name: str) -> Money:
    try:
        return factory.from_major(raw)
    except InvalidArgumentError:
        raise click.BadParameter(f"'{raw}' is not a valid amount.", param_hint=name)


def _echo(money: Money, locale: str) -> None:
    try:
        text = money.formatted(locale)
    except (UnknownLocaleError, ValueError) as exc:
        raise click.ClickException(f"Cannot format for locale '{locale}': {exc}")
    click.echo(text)


@click.command("format")
@click.argument("amount")
@click.option("--minor", is_flag=True, help="Treat AMOUNT as minor units (pence/cents).")
@money_options
def money_format(factory: MoneyFactory, locale: str, amount: str, minor: bool) -> None:
    """Format an amount for display."""
    if minor:
        try:
            money = factory.money(int(amount))
        except ValueError:
            raise click.BadParameter(
                f"'{amount}' is not a whole number of minor units.", param_hint="AMOUNT"
            )
    else:
        money = _parse_amount(factory, amount, "AMOUNT")

    _echo(money, locale)


@click.command("add")
@click.argument("left")
@click.argument("right")
@money_options
def money_add(factory: MoneyFactory, locale: str, left: str, right: str) -> None:
    """Add two amounts."""
    result = _parse_amount(factory, left, "LEFT").add(_parse_amount(factory, right, "RIGHT"))
    _echo(result, locale)


@click.command("subtract")
@click.argument("left")
@click.argument("right")
@money_options
def money_subtract(factory: MoneyFactory, locale: str, left: str, right: str) -> None:
    """Subtract RIGHT from LEFT."""
    result = _parse_amount(factory, left, "LEFT").subtract(
        _parse_amount(factory, right, "RIGHT")
    )
    _echo(result, locale)


@click.command("multiply")
@click.argument("amount")
@click.argument("factor", type=float)
@money_options
def money_multiply(factory: MoneyFactory, locale: str, amount: str, factor: float) -> None:
    """Multiply an amount by FACTOR."""
    money = _parse_amount(factory, amount, "AMOUNT")
    try:
        result = money.multiply(factor)
    except MoneyException as exc:
        raise click.ClickException(str(exc))
    _echo(result, locale)


@click.command("divide")
@click.argument("amount")
@click.argument("divisor", type=float)
@money_options
def money_divide(factory: MoneyFactory, locale: str, amount: str, divisor: float) -> None:
    """Divide an amount by DIVISOR."""
    money = _parse_amount(factory, amount, "AMOUNT")
    try:
        result = money.divide(divisor)
    except MoneyException as exc:
        raise click.ClickException(str(exc))
    _echo(result, locale)


@click.command("discount")
@click.argument("amount")
@click.argument("percent", type=int)
@money_options
def money_discount(factory: MoneyFactory, locale: str, amount: str, percent: int) -> None:
    """Take PERCENT off an amount."""
    money = _parse_amount(factory, amount, "AMOUNT")
    try:
        result = money.discount(percent)
    except MoneyException as exc:
        raise click.ClickException(str(exc))
    _echo(result, locale)


@click.command("sum")
@click.argument("amounts", nargs=-1)
@money_options
def money_sum(factory: MoneyFactory, locale: str, amounts: tuple[str, ...]) -> None:
    """Total any number of amounts."""
    values = [_parse_amount(factory, raw, "AMOUNTS") for raw in amounts]
    _echo(factory.total(values), locale)
