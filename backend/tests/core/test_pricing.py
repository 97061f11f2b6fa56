"""Pricing Configuration — tests for PricingConfig defaults and validation.

Tests cover:
    - Defaults match the shop's published prices
    - Negative prices and empty currency rejected
    - Two configurations coexist independently
"""

import pytest

from dvdshop.core.errors import InvalidConfigurationError
from dvdshop.core.pricing import PricingConfig


def test_defaults():
    config = PricingConfig()
    assert config.standard_price == 20
    assert config.special_price == 15
    assert config.currency == "EUR"


@pytest.mark.parametrize("field_name", ["standard_price", "special_price"])
def test_negative_prices_rejected(field_name):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        PricingConfig(**{field_name: -1})
    assert exc_info.value.setting == field_name


def test_empty_currency_rejected():
    with pytest.raises(InvalidConfigurationError):
        PricingConfig(currency="  ")


def test_zero_prices_allowed():
    assert PricingConfig(standard_price=0, special_price=0).special_price == 0


def test_configurations_are_independent():
    euro = PricingConfig()
    dollar = PricingConfig(standard_price=25, currency="USD")
    assert euro.currency == "EUR"
    assert dollar.standard_price == 25
    assert euro.standard_price == 20
