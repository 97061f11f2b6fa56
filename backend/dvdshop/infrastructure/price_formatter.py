"""Price Formatter — human and JSON views of a CalculationResult.

Invariants:
    - Rounding happens here only: 0–2 fraction digits, half away from zero,
      trailing zeros trimmed
    - Receipt omits the special section when no special items were bought,
      the discount lines when no discount applied, and the other section when empty
    - format_json() exposes plain numbers; formatting lives in formattedPrice only

Design Decisions:
    - fr-FR defaults (decimal comma, U+202F narrow no-break space grouping,
      trailing symbol), configurable per instance rather than via locale module state
"""

from decimal import Decimal, ROUND_HALF_UP

from dvdshop.core.calculator import CalculationResult

DEFAULT_CURRENCY_SYMBOL = "€"

_RULE = "═" * 39
_THIN_RULE = "─" * 39


class PriceFormatter:
    """Formats prices and calculation results for display."""

    def __init__(
        self,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        decimal_separator: str = ",",
        thousands_separator: str = "\u202f",
    ):
        self.currency_symbol = currency_symbol
        self.decimal_separator = decimal_separator
        self.thousands_separator = thousands_separator

    def format_price(self, price: float) -> str:
        """Format a price with at most two decimals and the currency symbol."""
        quantized = Decimal(str(price)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        sign = "-" if quantized < 0 else ""
        whole, _, fraction = f"{abs(quantized):.2f}".partition(".")
        fraction = fraction.rstrip("0")

        groups = []
        while len(whole) > 3:
            groups.insert(0, whole[-3:])
            whole = whole[:-3]
        groups.insert(0, whole)
        formatted = self.thousands_separator.join(groups)
        if fraction:
            formatted = f"{formatted}{self.decimal_separator}{fraction}"
        return f"{sign}{formatted} {self.currency_symbol}"

    def format_result(self, result: CalculationResult) -> str:
        """Boxed receipt text."""
        breakdown = result.breakdown
        lines = [_RULE, "         DVD SHOP - RECEIPT", _RULE, ""]

        if breakdown.special_count > 0:
            lines.append(f"Back to the Future DVDs: {breakdown.special_count}")
            lines.append(f"  Base price: {self.format_price(breakdown.special_base_price)}")
            if result.discount_applied:
                lines.append(f"  Discount: -{result.discount_applied}")
                lines.append(
                    f"  After discount: "
                    f"{self.format_price(breakdown.special_discounted_price)}",
                )
            lines.append("")

        if breakdown.other_count > 0:
            lines.append(f"Other DVDs: {breakdown.other_count}")
            lines.append(f"  Price: {self.format_price(breakdown.other_price)}")
            lines.append("")

        lines.append(_THIN_RULE)
        lines.append(f"TOTAL: {self.format_price(result.total_price)}")
        lines.append(_RULE)
        return "\n".join(lines)

    def format_simple(self, result: CalculationResult) -> str:
        return f"Prix total: {self.format_price(result.total_price)}"

    def format_json(self, result: CalculationResult) -> dict:
        """JSON-friendly view with explicit category sub-objects."""
        breakdown = result.breakdown
        return {
            "totalPrice": result.total_price,
            "currency": result.currency,
            "formattedPrice": self.format_price(result.total_price),
            "itemsCount": result.items_count,
            "discountApplied": result.discount_applied,
            "breakdown": {
                "specialItems": {
                    "count": breakdown.special_count,
                    "basePrice": breakdown.special_base_price,
                    "discountedPrice": breakdown.special_discounted_price,
                },
                "otherItems": {
                    "count": breakdown.other_count,
                    "price": breakdown.other_price,
                },
            },
        }
