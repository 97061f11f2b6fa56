"""Route Dependencies — per-process core services built from Settings.

Invariants:
    - CartParser, Calculator and PriceFormatter are built once per process
    - Core objects receive plain values; they never see Settings

Design Decisions:
    - FastAPI Depends over module globals: tests swap them via dependency_overrides
"""

from functools import lru_cache

from dvdshop.config import get_settings
from dvdshop.core.calculator import Calculator
from dvdshop.core.cart_parser import CartParser
from dvdshop.core.discount_rules import CollectionCompletionDiscountRule
from dvdshop.infrastructure.price_formatter import PriceFormatter


@lru_cache
def get_parser() -> CartParser:
    return CartParser.from_config(get_settings().pricing_config())


@lru_cache
def get_calculator() -> Calculator:
    settings = get_settings()
    rule = CollectionCompletionDiscountRule(
        two_episodes_percentage=settings.two_episodes_discount,
        three_episodes_percentage=settings.three_episodes_discount,
    )
    return Calculator.from_config(settings.pricing_config(), discount_rules=[rule])


@lru_cache
def get_formatter() -> PriceFormatter:
    return PriceFormatter(currency_symbol=get_settings().currency_symbol)
