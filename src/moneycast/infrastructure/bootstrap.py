"""Composition root: wires settings into the services that need them.

This is the only place in the codebase that knows about *all* layers.
Every other module receives its configuration explicitly.
"""

from __future__ import annotations

from pathlib import Path

from moneycast.application.money_factory import MoneyFactory
from moneycast.infrastructure.config import Settings, load_settings
from moneycast.infrastructure.persistence.currency_cast import CurrencyCast


def settings(config_path: Path | None = None) -> Settings:
    return load_settings(config_path)


def money_factory(config_path: Path | None = None) -> MoneyFactory:
    return MoneyFactory.from_settings(settings(config_path))


def currency_cast(config_path: Path | None = None) -> CurrencyCast:
    return CurrencyCast.from_settings(settings(config_path))
