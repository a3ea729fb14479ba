import pytest

_MONEYCAST_ENV = (
    "MONEYCAST_CONFIG",
    "MONEYCAST_DEFAULT_CURRENCY",
    "MONEYCAST_ROUNDING_MODE",
    "MONEYCAST_LOCALE",
)


@pytest.fixture(autouse=True)
def clean_moneycast_env(monkeypatch):
    """Keep the developer's MONEYCAST_* variables out of every test."""
    for key in _MONEYCAST_ENV:
        monkeypatch.delenv(key, raising=False)
