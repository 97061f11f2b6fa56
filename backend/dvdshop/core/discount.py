"""Discount — validated percentage discount value.

Invariants:
    - percentage is within [0, 100]; construction fails otherwise
    - Discount is immutable
    - apply_discount never rounds
"""

from dataclasses import dataclass

from dvdshop.core.errors import InvalidDiscountError


@dataclass(frozen=True)
class Discount:
    """Named percentage discount (10 means 10%)."""

    name: str
    percentage: float
    description: str

    def __post_init__(self):
        if not 0 <= self.percentage <= 100:
            raise InvalidDiscountError(self.percentage)

    @property
    def label(self) -> str:
        """Percentage string such as "10%" or "12.5%"."""
        value = self.percentage
        if float(value).is_integer():
            value = int(value)
        return f"{value}%"


NO_DISCOUNT = Discount(
    name="No Discount",
    percentage=0,
    description="No discount applied",
)


def apply_discount(price: float, discount: Discount) -> float:
    """Price after removing the discount percentage."""
    return price * (100 - discount.percentage) / 100
