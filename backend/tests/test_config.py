"""Settings — tests for environment-driven configuration.

Tests cover:
    - Defaults reproduce the shop's prices and discount tiers
    - Environment variables override defaults
    - Out-of-range values rejected by pydantic
    - pricing_config() hands plain values to the core
"""

import pytest
from pydantic import ValidationError

from dvdshop.config import Settings


def test_defaults(monkeypatch):
    for name in ("STANDARD_PRICE", "SPECIAL_PRICE", "CURRENCY"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.standard_price == 20
    assert settings.special_price == 15
    assert settings.currency == "EUR"
    assert settings.two_episodes_discount == 10
    assert settings.three_episodes_discount == 20


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SPECIAL_PRICE", "12.5")
    monkeypatch.setenv("CURRENCY", "CHF")
    settings = Settings(_env_file=None)
    assert settings.special_price == 12.5
    assert settings.currency == "CHF"


def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, standard_price=-1)


def test_discount_tier_above_hundred_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, three_episodes_discount=120)


def test_pricing_config():
    config = Settings(_env_file=None, standard_price=30, special_price=10, currency="USD").pricing_config()
    assert (config.standard_price, config.special_price, config.currency) == (30, 10, "USD")
