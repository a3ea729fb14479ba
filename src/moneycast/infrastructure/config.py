"""Configuration: default currency, rounding mode and display locale.

Settings are merged from three layers, later layers winning:

  1. built-in defaults (GBP, half-up, en_GB)
  2. a JSON config file, if one exists
  3. ``MONEYCAST_*`` environment variables
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from moneycast.domain.exceptions import MoneyException
from moneycast.domain.model.money import DEFAULT_CURRENCY
from moneycast.domain.model.rounding import RoundingMode
from moneycast.domain.service.currency_formatter import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "MONEYCAST_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "currency.json"


class ConfigurationError(MoneyException):
    """The config file or environment holds an unusable value."""


class Settings(BaseSettings):
    """Money settings.

    Keyword arguments form the config-file layer: a matching
    ``MONEYCAST_*`` environment variable still takes precedence over them.
    """

    model_config = SettingsConfigDict(
        env_prefix="MONEYCAST_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    default_currency: str = Field(DEFAULT_CURRENCY)
    rounding_mode: RoundingMode = Field(RoundingMode.HALF_UP)
    locale: str = Field(DEFAULT_LOCALE)

    @field_validator("default_currency", "locale", mode="before")
    @classmethod
    def _non_empty_string(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("must be a non-empty string")
        return value.strip()

    @field_validator("default_currency")
    @classmethod
    def _upper_case_currency(cls, value: str) -> str:
        return value.upper()

    @field_validator("rounding_mode", mode="before")
    @classmethod
    def _parse_rounding_mode(cls, value: object) -> RoundingMode:
        if not isinstance(value, (str, RoundingMode)):
            raise ValueError("must be a rounding mode name")
        return RoundingMode.parse(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win
        return env_settings, init_settings

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(mode="json")


def resolve_config_path(config_path: Path | None = None) -> Path:
    if config_path is not None:
        return Path(config_path)
    override = os.environ.get(CONFIG_PATH_ENV)
    return Path(override) if override else Path.cwd() / DEFAULT_CONFIG_PATH


def load_settings(config_path: Path | None = None) -> Settings:
    """Build Settings from defaults, the config file and the environment."""
    path = resolve_config_path(config_path)

    file_values: dict[str, object] = {}
    if path.exists():
        logger.debug("Loading money config from %s", path)
        file_values = _read_config_file(path)
    else:
        logger.debug("No money config at %s; using defaults", path)

    for key in sorted(set(file_values) - set(Settings.model_fields)):
        logger.warning("Ignoring unknown money setting %r from %s", key, path)
        del file_values[key]

    try:
        return Settings(**file_values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid money settings: {problems}") from exc


def publish_config(destination: Path, force: bool = False) -> Path:
    """Write the default settings as a JSON config file.

    An existing file is left alone unless *force* is set.
    """
    destination = Path(destination)
    if destination.exists() and not force:
        raise ConfigurationError(
            f"Config file {destination} already exists (use force to overwrite)"
        )

    destination.parent.mkdir(parents=True, exist_ok=True)
    defaults = {name: field.default for name, field in Settings.model_fields.items()}
    defaults["rounding_mode"] = defaults["rounding_mode"].value
    destination.write_text(json.dumps(defaults, indent=2) + "\n", encoding="utf-8")
    logger.info("Published money config to %s", destination)
    return destination


# --- Internal helpers ---------------------------------------------------------


def _read_config_file(path: Path) -> dict:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return raw
