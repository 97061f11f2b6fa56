"""Price Formatter — tests for price strings, receipts and JSON views.

Tests cover:
    - format_price decimals, grouping and symbol
    - Receipt sections appear only when relevant
    - format_simple and format_json shapes
"""

import pytest

from dvdshop.core.calculator import Calculator
from dvdshop.core.cart_parser import CartParser
from dvdshop.infrastructure.price_formatter import PriceFormatter

FORMATTER = PriceFormatter()


def _result(*titles: str):
    return Calculator().calculate(CartParser().parse_titles(list(titles)))


# ─── format_price ────────────────────────────────────────────────

@pytest.mark.parametrize("price, expected", [
    (0, "0 €"),
    (20, "20 €"),
    (40.5, "40,5 €"),
    (27.25, "27,25 €"),
    (1234.56, "1\u202f234,56 €"),
    (1000000, "1\u202f000\u202f000 €"),
    (8.991, "8,99 €"),
    (40.125, "40,13 €"),
    (0.005, "0,01 €"),
])
def test_format_price(price, expected):
    assert FORMATTER.format_price(price) == expected


def test_format_price_custom_separators():
    formatter = PriceFormatter(currency_symbol="$", decimal_separator=".", thousands_separator=",")
    assert formatter.format_price(1234.5) == "1,234.5 $"


# ─── format_result ───────────────────────────────────────────────

def test_receipt_with_discount_and_other_items():
    receipt = FORMATTER.format_result(_result("BTTF 1", "BTTF 2", "BTTF 3", "La chèvre"))
    assert "DVD SHOP - RECEIPT" in receipt
    assert "Back to the Future DVDs: 3" in receipt
    assert "  Base price: 45 €" in receipt
    assert "  Discount: -20%" in receipt
    assert "  After discount: 36 €" in receipt
    assert "Other DVDs: 1" in receipt
    assert "  Price: 20 €" in receipt
    assert "TOTAL: 56 €" in receipt


def test_receipt_without_discount_omits_discount_lines():
    receipt = FORMATTER.format_result(_result("BTTF 1"))
    assert "Back to the Future DVDs: 1" in receipt
    assert "Discount" not in receipt
    assert "Other DVDs" not in receipt


def test_receipt_without_special_items():
    receipt = FORMATTER.format_result(_result("Alien"))
    assert "Back to the Future" not in receipt
    assert "TOTAL: 20 €" in receipt


def test_format_simple():
    assert FORMATTER.format_simple(_result("BTTF 1", "BTTF 2", "BTTF 1")) == "Prix total: 40,5 €"


# ─── format_json ─────────────────────────────────────────────────

def test_format_json():
    view = FORMATTER.format_json(_result("BTTF 1", "BTTF 2", "Star Wars"))
    assert view == {
        "totalPrice": 47,
        "currency": "EUR",
        "formattedPrice": "47 €",
        "itemsCount": 3,
        "discountApplied": "10%",
        "breakdown": {
            "specialItems": {"count": 2, "basePrice": 30, "discountedPrice": 27},
            "otherItems": {"count": 1, "price": 20},
        },
    }


def test_format_json_without_discount():
    view = FORMATTER.format_json(_result())
    assert view["discountApplied"] is None
    assert view["totalPrice"] == 0


def test_halves_round_away_from_zero():
    assert FORMATTER.format_price(2.675) == "2,68 €"
    assert FORMATTER.format_price(-40.125) == "-40,13 €"
