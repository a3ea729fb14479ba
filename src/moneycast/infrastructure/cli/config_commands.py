"""CLI commands for the money configuration file."""

from __future__ import annotations

from pathlib import Path

import click

from moneycast.domain.exceptions import MoneyException
from moneycast.infrastructure.config import Settings, publish_config, resolve_config_path

CONFIG_PATH_META = "moneycast.config_path"


@click.command("show")
@click.pass_obj
def config_show(settings: Settings) -> None:
    """Show the effective settings."""
    for key, value in settings.to_dict().items():
        click.echo(f"{key:<18} {value}")


@click.command("publish")
@click.option(
    "--path",
    "destination",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the config file (default: config/currency.json).",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@click.pass_context
def config_publish(ctx: click.Context, destination: Path | None, force: bool) -> None:
    """Write a config file holding the default settings."""
    destination = destination or resolve_config_path(ctx.meta.get(CONFIG_PATH_META))
    try:
        written = publish_config(destination, force=force)
    except MoneyException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Published config to {written}")
