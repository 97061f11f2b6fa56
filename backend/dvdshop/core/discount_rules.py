"""Discount Rules — pluggable eligibility + pricing strategies for a cart.

Invariants:
    - A rule targets one category of items and prices all of them, duplicates included
    - discount_for() returns NO_DISCOUNT when applies() is False
    - discounted_price() == applicable_base_price() * (100 - percentage) / 100
    - Rules are stateless after construction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Collection-completion tier picked by DISTINCT index count, applied to
      every special item in the cart ({1, 1, 2} -> 10% on three units)
"""

from dataclasses import dataclass
from typing import Protocol

from dvdshop.core.cart import Cart
from dvdshop.core.discount import Discount, NO_DISCOUNT, apply_discount
from dvdshop.core.pricing import TWO_EPISODES_DISCOUNT, THREE_EPISODES_DISCOUNT


@dataclass(frozen=True)
class DiscountResult:
    """Outcome of one rule on one cart. Transient, never persisted."""
    rule_name: str
    discount: Discount
    original_price: float
    discounted_price: float
    savings: float


class DiscountRule(Protocol):
    """Contract every discount rule satisfies; consumed by Calculator."""
    name: str

    def applies(self, cart: Cart) -> bool: ...
    def discount_for(self, cart: Cart) -> Discount: ...
    def applicable_base_price(self, cart: Cart) -> float: ...
    def discounted_price(self, cart: Cart) -> float: ...
    def result(self, cart: Cart) -> DiscountResult: ...


class CollectionCompletionDiscountRule:
    """Back to the Future trilogy discount.

    - 2 different episodes: 10% on all BTTF items
    - 3 different episodes: 20% on all BTTF items
    """

    name = "Back to the Future Discount"

    def __init__(
        self,
        two_episodes_percentage: float = TWO_EPISODES_DISCOUNT,
        three_episodes_percentage: float = THREE_EPISODES_DISCOUNT,
    ):
        self._discount_for_two = Discount(
            "BTTF 2 Episodes",
            two_episodes_percentage,
            f"{two_episodes_percentage}% discount for having 2 different "
            f"Back to the Future episodes",
        )
        self._discount_for_three = Discount(
            "BTTF Complete Trilogy",
            three_episodes_percentage,
            f"{three_episodes_percentage}% discount for having all 3 "
            f"Back to the Future episodes",
        )

    def applies(self, cart: Cart) -> bool:
        return len(cart.unique_special_indices()) >= 2

    def discount_for(self, cart: Cart) -> Discount:
        distinct = len(cart.unique_special_indices())
        if distinct >= 3:
            return self._discount_for_three
        if distinct == 2:
            return self._discount_for_two
        return NO_DISCOUNT

    def applicable_base_price(self, cart: Cart) -> float:
        return sum(item.price for item in cart.special_items())

    def discounted_price(self, cart: Cart) -> float:
        return apply_discount(
            self.applicable_base_price(cart), self.discount_for(cart),
        )

    def result(self, cart: Cart) -> DiscountResult:
        original = self.applicable_base_price(cart)
        discount = self.discount_for(cart)
        discounted = apply_discount(original, discount)
        return DiscountResult(
            rule_name=self.name,
            discount=discount,
            original_price=original,
            discounted_price=discounted,
            savings=original - discounted,
        )


def default_discount_rules() -> tuple[DiscountRule, ...]:
    """Rule list used when a Calculator is built without one."""
    return (CollectionCompletionDiscountRule(),)
