"""Pricing Configuration — immutable price and currency settings for the core.

Invariants:
    - PricingConfig is frozen: several configurations can coexist in one process
    - Prices are non-negative; currency is a non-empty code
    - Core components receive a PricingConfig (or its fields) at construction,
      never read it from module state

Design Decisions:
    - Module constants are defaults only; the shell builds PricingConfig from Settings
"""

from dataclasses import dataclass

from dvdshop.core.errors import InvalidConfigurationError


STANDARD_DVD_PRICE = 20.0
BTTF_DVD_PRICE = 15.0
DEFAULT_CURRENCY = "EUR"

TWO_EPISODES_DISCOUNT = 10
THREE_EPISODES_DISCOUNT = 20


@dataclass(frozen=True)
class PricingConfig:
    """Unit prices and currency handed to CartParser and Calculator."""

    standard_price: float = STANDARD_DVD_PRICE
    special_price: float = BTTF_DVD_PRICE
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        if self.standard_price < 0:
            raise InvalidConfigurationError(
                f"Standard price must be non-negative, got {self.standard_price}",
                "standard_price",
            )
        if self.special_price < 0:
            raise InvalidConfigurationError(
                f"Special price must be non-negative, got {self.special_price}",
                "special_price",
            )
        if not self.currency.strip():
            raise InvalidConfigurationError(
                "Currency code cannot be empty", "currency",
            )
