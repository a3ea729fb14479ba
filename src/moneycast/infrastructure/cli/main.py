from __future__ import annotations

import logging
from pathlib import Path

import click

from moneycast.domain.exceptions import MoneyException
from moneycast.infrastructure.bootstrap import settings as load_settings
from moneycast.infrastructure.cli.config_commands import (
    CONFIG_PATH_META,
    config_publish,
    config_show,
)
from moneycast.infrastructure.cli.money_commands import (
    money_add,
    money_discount,
    money_divide,
    money_format,
    money_multiply,
    money_subtract,
    money_sum,
)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="MONEYCAST_CONFIG",
    help="Path to a JSON config file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log configuration loading.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """moneycast: currency-safe money arithmetic"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.meta[CONFIG_PATH_META] = config_path
    try:
        ctx.obj = load_settings(config_path)
    except MoneyException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def config() -> None:
    """Manage the config file."""


# Register subcommands
cli.add_command(money_add)
cli.add_command(money_discount)
cli.add_command(money_divide)
cli.add_command(money_format)
cli.add_command(money_multiply)
cli.add_command(money_subtract)
cli.add_command(money_sum)
config.add_command(config_publish)
config.add_command(config_show)
