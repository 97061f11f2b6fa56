"""Cart — immutable ordered collection of classified items.

Invariants:
    - items is a tuple: never mutated after creation
    - Derived views (special/other items, distinct indices) are computed on
      every call, never cached
    - Insertion order is preserved but has no effect on pricing
"""

from collections.abc import Iterable
from dataclasses import dataclass

from dvdshop.core.priced_item import PricedItem


@dataclass(frozen=True)
class Cart:
    """Read-only cart. Pure dataclass, no IO."""

    items: tuple[PricedItem, ...] = ()

    def item_count(self) -> int:
        return len(self.items)

    def special_items(self) -> list[PricedItem]:
        """Special-collection items, duplicates retained."""
        return [item for item in self.items if item.is_special]

    def other_items(self) -> list[PricedItem]:
        return [item for item in self.items if not item.is_special]

    def unique_special_indices(self) -> frozenset[int]:
        """Distinct collection indices present in the cart."""
        return frozenset(
            item.special_index
            for item in self.items
            if item.is_special and item.special_index is not None
        )

    def titles(self) -> list[str]:
        return [item.title for item in self.items]


def create_cart(items: Iterable[PricedItem]) -> Cart:
    """Build a Cart from any iterable, copying it into a tuple."""
    return Cart(items=tuple(items))
