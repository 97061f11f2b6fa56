"""Calculator — cart total with at most one discount rule applied.

Invariants:
    - Rules are evaluated in configured order; the FIRST rule whose applies()
      is True takes effect and evaluation stops
    - Standard items are never discounted
    - No rounding: fractional totals are returned as-is (presentation rounds)
    - Never raises for a valid Cart

Design Decisions:
    - Rules do not stack. Single-rule-wins is kept deliberately even when a
      later rule would also apply; stacking would need its own combination policy
    - Currency is carried through untouched: no conversion happens in core
"""

from collections.abc import Iterable
from dataclasses import dataclass

from dvdshop.core.cart import Cart
from dvdshop.core.discount_rules import DiscountRule, default_discount_rules
from dvdshop.core.pricing import DEFAULT_CURRENCY, PricingConfig


@dataclass(frozen=True)
class PriceBreakdown:
    """Special vs other category contributions to the total."""
    special_count: int
    special_base_price: float
    special_discounted_price: float
    other_count: int
    other_price: float


@dataclass(frozen=True)
class CalculationResult:
    """The only artifact exposed across the core boundary."""
    total_price: float
    currency: str
    items_count: int
    discount_applied: str | None
    breakdown: PriceBreakdown


class Calculator:
    """Computes cart totals from an ordered list of discount rules."""

    def __init__(
        self,
        currency: str = DEFAULT_CURRENCY,
        discount_rules: Iterable[DiscountRule] | None = None,
    ):
        self.currency = currency
        self.discount_rules: tuple[DiscountRule, ...] = (
            tuple(discount_rules) if discount_rules is not None
            else default_discount_rules()
        )

    @classmethod
    def from_config(
        cls,
        config: PricingConfig,
        discount_rules: Iterable[DiscountRule] | None = None,
    ) -> "Calculator":
        return cls(currency=config.currency, discount_rules=discount_rules)

    def calculate_total(self, cart: Cart) -> float:
        return self.calculate(cart).total_price

    def calculate(self, cart: Cart) -> CalculationResult:
        """Price the cart and report the breakdown. Pure, no IO."""
        special_items = cart.special_items()
        other_items = cart.other_items()

        other_price = sum(item.price for item in other_items)
        special_base_price = sum(item.price for item in special_items)
        special_discounted_price = special_base_price
        discount_applied: str | None = None

        for rule in self.discount_rules:
            if rule.applies(cart):
                special_discounted_price = rule.discounted_price(cart)
                discount_applied = rule.discount_for(cart).label
                break

        return CalculationResult(
            total_price=special_discounted_price + other_price,
            currency=self.currency,
            items_count=cart.item_count(),
            discount_applied=discount_applied,
            breakdown=PriceBreakdown(
                special_count=len(special_items),
                special_base_price=special_base_price,
                special_discounted_price=special_discounted_price,
                other_count=len(other_items),
                other_price=other_price,
            ),
        )
