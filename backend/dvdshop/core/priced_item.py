"""Priced Item — a classified title with its unit price.

Invariants:
    - special_index is set iff is_special is True
    - special_index, when set, is in VALID_SPECIAL_INDICES
    - Title is stored trimmed; item is immutable after construction
"""

from dataclasses import dataclass

from dvdshop.core.domain_types import ItemCategory, SpecialIndex, VALID_SPECIAL_INDICES
from dvdshop.core.errors import InvalidItemError


@dataclass(frozen=True)
class PricedItem:
    """One cart line."""

    title: str
    price: float
    is_special: bool = False
    special_index: SpecialIndex | None = None

    def __post_init__(self):
        if self.is_special and self.special_index is None:
            raise InvalidItemError(
                f"Special item '{self.title}' is missing its collection index",
            )
        if not self.is_special and self.special_index is not None:
            raise InvalidItemError(
                f"Standard item '{self.title}' cannot carry a collection index",
            )
        if self.special_index is not None and self.special_index not in VALID_SPECIAL_INDICES:
            raise InvalidItemError(
                f"Collection index {self.special_index} for '{self.title}' "
                f"is not one of {sorted(VALID_SPECIAL_INDICES)}",
            )

    @property
    def category(self) -> ItemCategory:
        return ItemCategory.SPECIAL if self.is_special else ItemCategory.STANDARD
